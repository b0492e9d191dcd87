import re
import unicodedata
from typing import Union

TTY_MAX_SIZE = 100 << 10  # If output is a tty (limit too lengthy spam)
TEXT_MAX_SIZE = 32 << 20  # Largest text file accepted as a key, cryptogram or signature

HEX = re.compile("^[0-9A-Fa-f]*$")


def encode(s: Union[str, bytes]) -> bytes:
  """Unicode-normalizing UTF-8 encode (bytes are passed through)."""
  if isinstance(s, (bytes, bytearray, memoryview)): return bytes(s)
  return unicodedata.normalize("NFKC", s.lstrip("\uFEFF")).encode()


def xor(a, b) -> bytes:
  assert len(a) == len(b)
  l = len(a)
  a = int.from_bytes(a, "big")
  b = int.from_bytes(b, "big")
  return (a ^ b).to_bytes(l, "big")


def hexencode(data: bytes) -> str:
  """Uppercase hex, two digits per byte."""
  return bytes(data).hex().upper()


def hexdecode(text: str) -> bytes:
  """Strict hex decode: digits only, an even count of them."""
  text = text.strip()
  if not HEX.match(text):
    raise ValueError("Invalid hex encoding: unrecognized characters")
  if len(text) % 2:
    raise ValueError("Invalid hex encoding: odd number of digits")
  return bytes.fromhex(text)
