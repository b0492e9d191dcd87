import re
from typing import List

from goldilocks import util
from goldilocks.dhies import TAGBYTES, Cryptogram
from goldilocks.elliptic import EdPoint, p, r
from goldilocks.exceptions import MalformedKeyError, TamperedInputError
from goldilocks.sign import Signature
from goldilocks.symmetric import SymmetricCryptogram

# Plain text formats for keys, cryptograms and signatures: one value per line,
# integers in decimal and byte strings in uppercase hex. Readers also accept a
# leading label line such as "Public Key (point):".

DECIMAL = re.compile(r"^[0-9]+$")
MAX_DIGITS = len(str(p))  # No valid value is longer than the field prime


def encode_pk(V: EdPoint) -> str:
  return f"{V.x.val}\n{V.y.val}\n"


def encode_sk(s: int) -> str:
  return f"{s}\n"


def encode_cryptogram(cg: Cryptogram) -> str:
  Z, c, t = cg
  return f"{Z.x.val}\n{Z.y.val}\n{util.hexencode(c)}\n{util.hexencode(t)}\n"


def encode_signature(sig: Signature) -> str:
  return f"{sig.h}\n{sig.z}\n"


def encode_symmetric(cg: SymmetricCryptogram) -> str:
  """Salt, ciphertext and tag as one hex line"""
  return f"{util.hexencode(bytes(cg))}\n"


def decode_pk(text: str) -> EdPoint:
  try:
    x, y = lines(text, 2, "public key")
    return point(x, y)
  except TamperedInputError as e:
    raise MalformedKeyError(f"Public key has been tampered: {e}")


def decode_cryptogram(text: str) -> Cryptogram:
  try:
    x, y, c, t = lines(text, 4, "cryptogram")
    Z = point(x, y)
    try:
      c, t = util.hexdecode(c), util.hexdecode(t)
    except ValueError as e:
      raise TamperedInputError(e)
    if len(t) != TAGBYTES:
      raise TamperedInputError(f"tag should be {TAGBYTES} bytes, got {len(t)}")
  except TamperedInputError as e:
    raise TamperedInputError(f"Cryptogram has been tampered: {e}")
  return Cryptogram(Z, c, t)


def decode_signature(text: str) -> Signature:
  try:
    h, z = lines(text, 2, "signature")
    h, z = number(h), number(z)
  except TamperedInputError as e:
    raise TamperedInputError(f"Signature has been tampered: {e}")
  if h >> 448 or z >= r:
    raise TamperedInputError("Signature has been tampered: value out of range")
  return Signature(h, z)


def decode_symmetric(text: str) -> SymmetricCryptogram:
  try:
    data, = lines(text, 1, "cryptogram")
    try:
      return SymmetricCryptogram.from_bytes(util.hexdecode(data))
    except ValueError as e:
      raise TamperedInputError(e)
  except TamperedInputError as e:
    raise TamperedInputError(f"Cryptogram has been tampered: {e}")


def lines(text: str, count: int, what: str) -> List[str]:
  """Split text into exactly count lines, skipping a label line if there is one."""
  if isinstance(text, (bytes, bytearray)):
    try:
      text = bytes(text).decode()
    except UnicodeDecodeError:
      raise TamperedInputError(f"Invalid {what}: not UTF-8 text")
  if len(text) > util.TEXT_MAX_SIZE:
    raise TamperedInputError(f"Invalid {what}: too large")
  text = text.replace("\r\n", "\n").lstrip("\uFEFF").rstrip("\n")
  ls = [l.rstrip() for l in text.split("\n")] if text else []
  if ls and ls[0].endswith(":"):
    del ls[0]
  if len(ls) != count:
    raise TamperedInputError(f"Invalid {what}: expected {count} lines, found {len(ls)}")
  return ls


def number(line: str) -> int:
  if not DECIMAL.match(line):
    raise TamperedInputError(f"Not a decimal number: {line[:20]!r}")
  if len(line) > MAX_DIGITS:
    raise TamperedInputError(f"Number too long: {len(line)} digits")
  return int(line)


def point(x: str, y: str) -> EdPoint:
  x, y = number(x), number(y)
  if x >= p or y >= p:
    raise TamperedInputError("Point coordinate out of range")
  try:
    return EdPoint(x, y)
  except ValueError:
    raise TamperedInputError("Not a curve point")
