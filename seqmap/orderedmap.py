from typing import Generic, TypeVar

from .lib import duplicates

K = TypeVar("K")
V = TypeVar("V")

class OrderedMap(Generic[K, V]):
  """
  Represents a key-value mapping as a flat list of (key, value)
  tuples in insertion (or wire) order.

  There is no hash index. Keys only need to support ==,
  lookups are a linear scan from the front, and duplicate
  keys may coexist. When keys repeat, the first matching
  entry wins for every key based operation.
  """
  __slots__ = ("entries",)
  def __init__(self, pairs=None):
    """
    pairs: an iterable of (key, value) tuples or another
      OrderedMap. The entries are copied in order without
      sorting or deduplicating.
    """
    if pairs is None:
      self.entries = []
    elif isinstance(pairs, OrderedMap):
      self.entries = list(pairs.entries)
    elif isinstance(pairs, dict):
      raise TypeError(
        "Use OrderedMap.from_dict to convert a dict. "
        "Iterating a dict yields only its keys."
      )
    else:
      self.entries = [ (key, value) for key, value in pairs ]

  @classmethod
  def new(cls):
    return cls()

  @classmethod
  def from_pairs(cls, pairs):
    """
    Wraps an ordered sequence of pairs. A list is adopted
    as-is (the map takes ownership of it), any other
    iterable is copied.
    """
    if isinstance(pairs, list):
      omap = cls()
      omap.entries = pairs
      return omap
    return cls(pairs)

  @classmethod
  def from_dict(cls, mapping):
    """Converts any mapping in one pass over its items()."""
    return cls.from_pairs(list(mapping.items()))

  def __len__(self):
    """Returns number of entries, duplicates included."""
    return len(self.entries)

  def is_empty(self):
    return len(self.entries) == 0

  def __iter__(self):
    yield from self.keys()

  def keys(self):
    for key, value in self.entries:
      yield key

  def values(self):
    for key, value in self.entries:
      yield value

  def items(self):
    """Yields (key, value) tuples in stored order."""
    yield from self.entries

  def find_index_position(self, key):
    for i, (label, value) in enumerate(self.entries):
      if label == key:
        return i
    return None

  def insert(self, key, value):
    """Appends an entry without checking for an existing key."""
    self.entries.append((key, value))

  def insert_or_replace(self, key, value):
    """
    Replaces the value of the first entry matching key in place,
    otherwise appends. Returns the replaced value or None.
    """
    pos = self.find_index_position(key)
    if pos is None:
      self.entries.append((key, value))
      return None

    old_value = self.entries[pos][1]
    self.entries[pos] = (self.entries[pos][0], value)
    return old_value

  def append_to_last(self, key, value):
    """
    For maps whose values are lists. If the last entry has
    the same key, value is appended to its list, otherwise
    a new entry (key, [ value ]) is pushed.

    Useful for collapsing consecutive runs of a repeated key.
    """
    if len(self.entries) and self.entries[-1][0] == key:
      self.entries[-1][1].append(value)
      return
    self.entries.append((key, [ value ]))

  def get(self, key, default=None):
    pos = self.find_index_position(key)
    if pos is None:
      return default
    return self.entries[pos][1]

  def remove(self, key):
    """
    Removes the first entry matching key, keeping the order
    of the remainder. Returns its value or None.
    """
    pos = self.find_index_position(key)
    if pos is None:
      return None
    return self.entries.pop(pos)[1]

  def getindex(self, i):
    return self.entries[i][1]

  def setindex(self, i, value):
    self.entries[i] = (self.entries[i][0], value)

  def __contains__(self, key):
    return self.find_index_position(key) is not None

  def __getitem__(self, key):
    pos = self.find_index_position(key)
    if pos is not None:
      return self.entries[pos][1]
    else:
      raise KeyError("{} was not found.".format(key))

  def __setitem__(self, key, value):
    self.insert_or_replace(key, value)

  def __delitem__(self, key):
    pos = self.find_index_position(key)
    if pos is None:
      raise KeyError("{} was not found.".format(key))
    del self.entries[pos]

  def duplicate_keys(self):
    return duplicates(self.keys())

  def into_pairs(self):
    """
    Hands the ordered list of pairs to the caller and leaves
    this map empty. No reordering takes place, so converting
    to any other map type is a single pass over the result.
    """
    entries = self.entries
    self.entries = []
    return entries

  def todict(self):
    return { key: value for key, value in self.entries }

  def copy(self):
    return type(self)(self)

  def __eq__(self, other):
    if not isinstance(other, OrderedMap):
      return NotImplemented
    return self.entries == other.entries

  __hash__ = None

  def __repr__(self):
    return f"{type(self).__name__}({self.entries!r})"
