from Crypto.Hash import cSHAKE256
from Crypto.Hash.cSHAKE128 import _bytepad, _encode_str, _right_encode

# KMACXOF256 from NIST SP 800-185, built on pycryptodome's cSHAKE256 the same
# way pycryptodome builds its fixed-length KMAC256, except that the output
# length is encoded as zero (arbitrary-length output).

RATE = 136  # Keccak[512] rate in bytes

# Domain separation strings. Changing any of these breaks compatibility.
SECRET_KEY = "SK"
SHARED_KEY = "PK"
KEYSTREAM = "PKE"
AUTH_TAG = "PKA"
NONCE = "N"
CHALLENGE = "T"
DIGEST = "D"
SYMMETRIC_KEY = "S"
SYMMETRIC_KEYSTREAM = "SKE"
SYMMETRIC_TAG = "SKA"


def kmacxof256(key: bytes, data: bytes, bits: int, domain: str) -> bytes:
  """Keyed extendable output of bits // 8 bytes."""
  if bits < 0 or bits % 8:
    raise ValueError(f"Output length must be a whole number of bytes, got {bits=}")
  if not bits: return b""
  h = cSHAKE256._new(b"", domain.encode(), b"KMAC")
  h.update(_bytepad(_encode_str(bytes(key)), RATE))
  h.update(bytes(data))
  h.update(_right_encode(0))
  return h.read(bits // 8)


def encode_str(s: bytes) -> bytes:
  """SP 800-185 encode_string: the bit length, left encoded, followed by s."""
  return _encode_str(bytes(s))

