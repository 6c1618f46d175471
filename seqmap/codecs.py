"""
Wire bindings for OrderedMap.

JSON objects and MessagePack maps both permit repeated keys and
have a well defined entry order, but the stock readers collapse
them into a dict. Here the readers are run with an
object_pairs_hook that keeps every object as its raw list of
pairs, so the top-level map reaches the MapVisitor exactly as it
appeared on the wire. Nested maps are handed to a caller supplied
object_pairs_hook (dict by default).

The writers emit the map header followed by each (key, value)
in stored order. Nested OrderedMap, dict, list and tuple values
are written recursively in their own order.

Parser and writer errors (json.JSONDecodeError, msgpack's
exceptions, TypeError for unserializable values) propagate
unchanged.
"""
import json

import msgpack

from . import compression
from .adapter import serialize_entries, deserialize_entries
from .exceptions import WireFormatError
from .lib import nvl
from .orderedmap import OrderedMap

FORMATS = ("json", "msgpack")

class _Pairs(list):
  """A map token as read off the wire: a list of (key, value)."""
  pass

def normalize_format(fmt):
  fmt = str(fmt).lower()
  if fmt == "mpk":
    fmt = "msgpack"
  if fmt not in FORMATS:
    raise ValueError(f"{fmt} is not a supported format. Valid: {FORMATS}")
  return fmt

def _restore(obj, object_pairs_hook):
  if isinstance(obj, _Pairs):
    return object_pairs_hook([
      (_restore(key, object_pairs_hook), _restore(value, object_pairs_hook))
      for key, value in obj
    ])
  elif isinstance(obj, list):
    return [ _restore(item, object_pairs_hook) for item in obj ]
  return obj

def _read_map(obj, strategy, object_pairs_hook):
  if not isinstance(obj, _Pairs):
    raise WireFormatError(f"Expected a map. Got: {type(obj).__name__}")

  hook = nvl(object_pairs_hook, dict)
  entries = (
    (_restore(key, hook), _restore(value, hook))
    for key, value in obj
  )
  return deserialize_entries(entries, strategy)

# json

_json_encoder = json.JSONEncoder(
  ensure_ascii=False, allow_nan=False, separators=(",", ":")
)

def _iterencode_json(obj):
  if isinstance(obj, (OrderedMap, dict)):
    yield from _iterencode_json_pairs(obj.items())
  elif isinstance(obj, (list, tuple)):
    yield "["
    for i, item in enumerate(obj):
      if i > 0:
        yield ","
      yield from _iterencode_json(item)
    yield "]"
  else:
    yield _json_encoder.encode(obj)

def _iterencode_json_pairs(pairs):
  yield "{"
  first = True
  for key, value in pairs:
    if not isinstance(key, str):
      raise WireFormatError(
        f"JSON object keys must be strings. Got: {key!r} ({type(key)}). "
        f"Use a KeyStrategy such as IntegerKeyStrategy to convert them."
      )
    if not first:
      yield ","
    first = False
    yield _json_encoder.encode(key)
    yield ":"
    yield from _iterencode_json(value)
  yield "}"

def encode_json(omap, strategy=None):
  """Returns omap as compact JSON text in stored order."""
  return "".join(_iterencode_json_pairs(serialize_entries(omap, strategy)))

def decode_json(text, strategy=None, object_pairs_hook=None):
  """
  text: str or bytes containing a JSON object
  object_pairs_hook: builds nested objects, default dict
  """
  obj = json.loads(text, object_pairs_hook=_Pairs)
  return _read_map(obj, strategy, object_pairs_hook)

# msgpack

def _pack(packer, obj, chunks):
  if isinstance(obj, (OrderedMap, dict)):
    _pack_pairs(packer, len(obj), obj.items(), chunks)
  elif isinstance(obj, (list, tuple)):
    chunks.append(packer.pack_array_header(len(obj)))
    for item in obj:
      _pack(packer, item, chunks)
  else:
    chunks.append(packer.pack(obj))

def _pack_pairs(packer, N, pairs, chunks):
  chunks.append(packer.pack_map_header(N))
  for key, value in pairs:
    _pack(packer, key, chunks)
    _pack(packer, value, chunks)

def encode_msgpack(omap, strategy=None):
  """Returns omap as a MessagePack map in stored order."""
  packer = msgpack.Packer(use_bin_type=True)
  chunks = []
  _pack_pairs(packer, len(omap), serialize_entries(omap, strategy), chunks)
  return b"".join(chunks)

def decode_msgpack(data, strategy=None, object_pairs_hook=None):
  """
  data: bytes containing a MessagePack map
  object_pairs_hook: builds nested maps, default dict
  """
  obj = msgpack.unpackb(
    data, raw=False, strict_map_key=False,
    object_pairs_hook=_Pairs,
  )
  return _read_map(obj, strategy, object_pairs_hook)

def dumps(omap, format="json", strategy=None, compress=None):
  """
  Serializes omap to bytes.

  format: "json" or "msgpack"
  strategy: KeyStrategy applied to each key, default identity
  compress: None, "gzip", "br", "zstd" or "lzma"
  """
  format = normalize_format(format)
  if format == "json":
    data = encode_json(omap, strategy).encode("utf8")
  else:
    data = encode_msgpack(omap, strategy)

  return compression.compress(data, method=compress)

def loads(
  data, format="json", strategy=None,
  compress=None, object_pairs_hook=None
):
  """
  Deserializes bytes produced by dumps (or any conforming
  JSON object / MessagePack map) into an OrderedMap.

  format: "json" or "msgpack"
  strategy: KeyStrategy applied to each key, default identity
  compress: the content encoding data was written with
  object_pairs_hook: builds nested maps, default dict
  """
  format = normalize_format(format)
  data = compression.decompress(data, compress)

  if format == "json":
    return decode_json(data, strategy, object_pairs_hook)
  return decode_msgpack(data, strategy, object_pairs_hook)
