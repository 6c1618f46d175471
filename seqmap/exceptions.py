class SeqMapError(Exception):
  """
  Base class for errors raised by seqmap.
  """
  pass

class EncodeKeyError(SeqMapError, ValueError):
  """
  A key could not be represented on the wire by
  the KeyStrategy in use.
  """
  pass

class DecodeKeyError(SeqMapError, ValueError):
  """
  A wire key token could not be converted back into
  a key by the KeyStrategy in use.
  """
  pass

class WireFormatError(SeqMapError, ValueError):
  """
  The token stream is not map shaped, or it carries
  a key type the wire format cannot represent.
  """
  pass

class VisitorError(SeqMapError, RuntimeError):
  """
  A MapVisitor was fed after it finished or failed.
  """
  pass

class DecompressionError(SeqMapError):
  """
  Decompression failed.
  """
  pass

class CompressionError(SeqMapError):
  """
  Compression failed.
  """
  pass

class UnsupportedCompressionType(ValueError):
  """
  Raised when attempting to use a compression type which is unsupported
  by seqmap.
  """
  pass
