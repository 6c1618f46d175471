"""
Order preserving map backed by a list, for fast and controllable
(de)serialization of key-value data.

Deserializing into a dict pays for hashing every key and throws
away the order and any repeated keys found on the wire. OrderedMap
instead appends entries in arrival order. Keys can be transformed
or validated exactly once, as they cross the wire, by a
KeyStrategy.

Simple Example:

  from seqmap import OrderedMap, IntegerKeyStrategy, dumps, loads

  omap = OrderedMap([ (2848, 'abc'), (12939, '123') ])
  binary = dumps(omap, format="msgpack", compress="zstd")

  omap = loads(binary, format="msgpack", compress="zstd")
  print(omap.get(2848))

  >>> 'abc'

  # JSON object keys are strings, so carry ints via a strategy
  text = dumps(omap, strategy=IntegerKeyStrategy())
  >>> b'{"2848":"abc","12939":"123"}'
"""

from .orderedmap import OrderedMap
from .strategy import (
  KeyStrategy, IdentityStrategy, Linear, IDENTITY,
  FunctionStrategy, IntegerKeyStrategy
)
from .adapter import (
  MapVisitor, VisitorState, serialize_entries, deserialize_entries
)
from .codecs import (
  FORMATS, dumps, loads,
  encode_json, decode_json, encode_msgpack, decode_msgpack
)
from .exceptions import *
