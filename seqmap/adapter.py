"""
Glue between OrderedMap and a map shaped wire protocol.

serialize_entries walks a map in stored order and applies
KeyStrategy.encode_key to each key. MapVisitor is fed the
(key, value) tokens of a wire map in arrival order, applies
KeyStrategy.decode_key to each key and accumulates the
entries. Either direction is a single synchronous pass that
aborts on the first error. A failed deserialization never
hands out the partially built map.
"""
import enum

from .exceptions import EncodeKeyError, DecodeKeyError, VisitorError
from .lib import nvl
from .orderedmap import OrderedMap
from .strategy import IDENTITY

class VisitorState(enum.Enum):
  IDLE = "idle"
  READING = "reading"
  DONE = "done"
  FAILED = "failed"

def encode_key(strategy, key):
  try:
    return strategy.encode_key(key)
  except EncodeKeyError:
    raise
  except Exception as err:
    raise EncodeKeyError(f"Unable to encode key {key!r}: {err}") from err

def decode_key(strategy, wire_key):
  try:
    return strategy.decode_key(wire_key)
  except DecodeKeyError:
    raise
  except Exception as err:
    raise DecodeKeyError(f"Unable to decode key {wire_key!r}: {err}") from err

def serialize_entries(omap, strategy=None):
  """
  Yields (wire_key, value) for each entry of omap in stored order.

  Nothing is guaranteed about output already consumed by a writer
  when an EncodeKeyError interrupts the walk.
  """
  strategy = nvl(strategy, IDENTITY)
  strategy.reset()
  for key, value in omap.items():
    yield (encode_key(strategy, key), value)

class MapVisitor:
  """
  Builds an OrderedMap from (wire_key, value) tokens.

  IDLE -> READING -> DONE | FAILED

  A visitor is good for exactly one map. Once it is DONE or
  FAILED any further call raises VisitorError.
  """
  __slots__ = ("strategy", "state", "_map")
  def __init__(self, strategy=None):
    self.strategy = nvl(strategy, IDENTITY)
    self.state = VisitorState.IDLE
    self._map = None

  def _begin(self):
    if self.state == VisitorState.READING:
      return
    elif self.state != VisitorState.IDLE:
      raise VisitorError(f"MapVisitor cannot be reused. State: {self.state.value}")

    self.strategy.reset()
    self._map = OrderedMap()
    self.state = VisitorState.READING

  def fail(self):
    self._map = None
    self.state = VisitorState.FAILED

  def visit_entry(self, wire_key, value):
    self._begin()
    try:
      key = decode_key(self.strategy, wire_key)
    except Exception:
      self.fail()
      raise
    self._map.insert(key, value)

  def visit_map(self, entries):
    """
    Consumes an iterable of (wire_key, value) tokens and returns
    the finished map. Errors from iterating entries (i.e. from the
    wire reader) propagate unchanged.
    """
    self._begin()
    try:
      for wire_key, value in entries:
        self.visit_entry(wire_key, value)
    except Exception:
      self.fail()
      raise
    return self.finish()

  def finish(self):
    self._begin()
    omap = self._map
    self._map = None
    self.state = VisitorState.DONE
    return omap

def deserialize_entries(entries, strategy=None):
  return MapVisitor(strategy).visit_map(entries)
