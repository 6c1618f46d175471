"""
Key strategies transform or validate each key exactly once,
at the serialization boundary, and never during in-memory
map operations.

A strategy is borrowed by the adapter for the length of a
single serialize or deserialize call. encode_key is applied
to every key in stored order when writing and decode_key to
every key token in wire order when reading.

A strategy is well behaved when decode_key(encode_key(k)) == k
for every key it accepts. Round trips are only guaranteed for
well behaved strategies.

Strategies should be pure functions of the key. If one needs
state across keys (e.g. assigning sequential ids), document it
and clear that state in reset(), which the adapter calls at the
start of every serialize and deserialize call.
"""
from typing import Generic, TypeVar

import numpy as np

from .exceptions import EncodeKeyError, DecodeKeyError
from .lib import nvl

K = TypeVar("K")

class KeyStrategy(Generic[K]):
  """Base class. Subclasses override encode_key and decode_key."""
  __slots__ = ()

  def reset(self):
    pass

  def encode_key(self, key):
    raise NotImplementedError()

  def decode_key(self, wire_key):
    raise NotImplementedError()

class IdentityStrategy(KeyStrategy):
  """Keys are written and read without transformation."""
  __slots__ = ()

  def encode_key(self, key):
    return key

  def decode_key(self, wire_key):
    return wire_key

  def __repr__(self):
    return "IdentityStrategy()"

Linear = IdentityStrategy
IDENTITY = IdentityStrategy()

class FunctionStrategy(KeyStrategy):
  """
  Adapts a pair of plain functions into a strategy.

  encodefn: key -> wire key, e.g. lambda key: key.lower()
  decodefn: wire key -> key, e.g. lambda key: key.casefold()

  Either may be omitted, in which case that direction is
  the identity.
  """
  __slots__ = ("encodefn", "decodefn")
  def __init__(self, encodefn=None, decodefn=None):
    noop = lambda x: x
    self.encodefn = nvl(encodefn, noop)
    self.decodefn = nvl(decodefn, noop)

  def encode_key(self, key):
    return self.encodefn(key)

  def decode_key(self, wire_key):
    return self.decodefn(wire_key)

class IntegerKeyStrategy(KeyStrategy):
  """
  Integer keys in memory, decimal strings on the wire.

  Text formats like JSON only permit string keys in objects,
  so this strategy is the usual way to carry integer labels
  through them.

  dtype: numpy integer dtype of the decoded keys. Keys outside
    its range are rejected in both directions. If None, keys
    decode to python ints of unbounded size.

  Decoded numpy scalars are not accepted by msgpack. Use
  dtype=None for maps that will be written as msgpack again
  without this strategy.
  """
  __slots__ = ("dtype", "_info")
  def __init__(self, dtype=np.int64):
    if dtype is None:
      self.dtype = None
      self._info = None
      return

    self.dtype = np.dtype(dtype)
    if self.dtype.kind not in ("i", "u"):
      raise TypeError(f"dtype must be an integer type. Got: {self.dtype}")
    self._info = np.iinfo(self.dtype)

  def in_range(self, value):
    if self._info is None:
      return True
    return int(self._info.min) <= value <= int(self._info.max)

  def encode_key(self, key):
    if isinstance(key, (bool, np.bool_)) or not isinstance(key, (int, np.integer)):
      raise EncodeKeyError(f"Key must be an integer. Got: {key!r} ({type(key)})")

    key = int(key)
    if not self.in_range(key):
      raise EncodeKeyError(f"Key {key} is out of range for {self.dtype}.")
    return str(key)

  def decode_key(self, wire_key):
    if not isinstance(wire_key, str):
      raise DecodeKeyError(f"Wire key must be a string. Got: {wire_key!r}")

    try:
      key = int(wire_key, 10)
    except ValueError as err:
      raise DecodeKeyError(f"Wire key {wire_key!r} is not a decimal integer.") from err

    # rejects " 7", "+7", "007", "1_000" so decode/encode is an identity
    if str(key) != wire_key:
      raise DecodeKeyError(f"Wire key {wire_key!r} is not a canonical decimal integer.")

    if not self.in_range(key):
      raise DecodeKeyError(f"Wire key {wire_key!r} is out of range for {self.dtype}.")

    if self.dtype is None:
      return key
    return self.dtype.type(key)
