import gzip
import io
import lzma
import zlib

import brotli
import zstandard as zstd

from .exceptions import (
  DecompressionError, CompressionError, UnsupportedCompressionType
)

COMPRESSION_TYPES = [
  None, False, True,
  '', 'none', 'gzip', 'br', 'zstd', 'lzma'
]

def normalize_encoding(encoding):
  """
  Maps the accepted spellings of a content encoding onto one
  of None, "gzip", "br", "zstd" or "lzma".

  Accepts bytes as well as strings, zero padding included
  (e.g. b"00br").
  """
  if isinstance(encoding, bytes):
    encoding = encoding.decode("ascii")

  if isinstance(encoding, str):
    encoding = encoding.lower().lstrip("0")

  if encoding in (None, False, '', 'none'):
    return None
  elif encoding is True:
    return 'gzip'
  elif encoding not in COMPRESSION_TYPES:
    raise UnsupportedCompressionType(
      f"{encoding} is not a supported compression type. "
      f"Valid: {COMPRESSION_TYPES}"
    )

  return encoding

def decompress(content, encoding, filename='N/A'):
  """
  Decompress content using the specified encoding.

  content: bytes to decompress
  encoding: None (no compression), 'gzip', 'br', 'zstd' or 'lzma'
  filename: optional name of the content, used in error messages

  Returns: decompressed content
  """
  try:
    encoding = normalize_encoding(encoding)
    if encoding is None:
      return content
    elif len(content) == 0:
      raise DecompressionError(
        f'File contains zero bytes: {filename}'
      )
    elif encoding == 'gzip':
      return gunzip(content)
    elif encoding == 'br':
      return brotli.decompress(content)
    elif encoding == 'zstd':
      dobj = zstd.ZstdDecompressor().decompressobj()
      content = dobj.decompress(content)
      if not dobj.eof:
        raise DecompressionError(
          f"zstd stream is truncated: {filename}"
        )
      return content
    elif encoding == 'lzma':
      return lzma.decompress(content)
  except DecompressionError:
    raise
  except (
    OSError, EOFError, zlib.error,
    lzma.LZMAError, brotli.error, zstd.ZstdError
  ) as err:
    raise DecompressionError(
      f"Unable to decompress {filename} with {encoding}: {err}"
    ) from err

def compress(content, method='gzip', compress_level=None):
  """
  Compresses file content.

  Required:
    content (bytes): The information to be compressed
    method (str, default: 'gzip'): None or gzip, br, zstd, lzma
  Optional:
    compress_level (int): Higher values are slower but smaller.

  Return:
    compressed content
  """
  method = normalize_encoding(method)

  try:
    if method is None:
      return content
    elif method == 'gzip':
      return gzip_compress(content, compresslevel=compress_level)
    elif method == 'br':
      if compress_level is None:
        compress_level = 11
      return brotli.compress(content, quality=compress_level)
    elif method == 'zstd':
      if compress_level is None:
        compress_level = 3
      return zstd.ZstdCompressor(level=compress_level).compress(content)
    elif method == 'lzma':
      return lzma.compress(content)
  except (lzma.LZMAError, brotli.error, zstd.ZstdError) as err:
    raise CompressionError(f"Unable to compress with {method}: {err}") from err

def gzip_compress(content, compresslevel=None):
  if compresslevel is None:
    compresslevel = 9

  stringio = io.BytesIO()
  gzip_obj = gzip.GzipFile(mode='wb', fileobj=stringio, compresslevel=compresslevel)
  gzip_obj.write(content)
  gzip_obj.close()
  return stringio.getvalue()

def gunzip(content):
  """
  Uncompress gzip content.

  Returns: bytes
  """
  if len(content) == 0:
    raise DecompressionError('File contains zero bytes.')

  gzip_magic_numbers = [ 0x1f, 0x8b ]
  first_two_bytes = [ byte for byte in bytearray(content)[:2] ]
  if first_two_bytes != gzip_magic_numbers:
    raise DecompressionError(
      'File is not in gzip format. First two bytes: {} Expected: {}'.format(
        first_two_bytes, gzip_magic_numbers
      )
    )

  stringio = io.BytesIO(content)
  with gzip.GzipFile(mode='rb', fileobj=stringio) as gfile:
    return gfile.read()
