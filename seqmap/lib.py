def nvl(*args):
  """Return the leftmost argument that is not None."""
  if len(args) < 2:
    raise IndexError("nvl takes at least two arguments.")
  for arg in args:
    if arg is not None:
      return arg
  return args[-1]

def duplicates(lst):
  """
  Returns the elements of lst that occur more than once,
  each reported once in order of first repetition.

  Only equality is required of the elements, so unhashable
  keys are supported at O(n^2) cost.
  """
  dupes = []
  seen = []
  for elem in lst:
    if elem in seen:
      if elem not in dupes:
        dupes.append(elem)
    else:
      seen.append(elem)
  return dupes
