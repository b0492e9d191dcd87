import pytest

from goldilocks import xof
from goldilocks.xof import kmacxof256


def test_nist_sample():
  # NIST SP 800-185 KMACXOF256 sample #4
  key = bytes(range(0x40, 0x60))
  out = kmacxof256(key, bytes([0, 1, 2, 3]), 512, "My Tagged Application")
  assert out.hex().upper() == (
    "1755133F1534752AAD0748F2C706FB5C784512CAB835CD15676B16C0C6647FA9"
    "6FAA7AF634A0BF8FF6DF39374FA00FAD9A39E322A7C92065A64EB1FB0801EB2B"
  )


def test_lengths():
  assert kmacxof256(b"key", b"data", 0, xof.KEYSTREAM) == b""
  assert len(kmacxof256(b"key", b"data", 448, xof.SECRET_KEY)) == 56
  assert len(kmacxof256(b"key", b"data", 896, xof.SHARED_KEY)) == 112
  # Extendable output: a longer read starts with the shorter one
  long = kmacxof256(b"key", b"", 8000, xof.KEYSTREAM)
  assert long.startswith(kmacxof256(b"key", b"", 800, xof.KEYSTREAM))

  with pytest.raises(ValueError):
    kmacxof256(b"key", b"data", 447, xof.SECRET_KEY)


def test_separation():
  base = kmacxof256(b"key", b"data", 448, xof.CHALLENGE)
  assert base == kmacxof256(b"key", b"data", 448, xof.CHALLENGE)
  assert base != kmacxof256(b"key", b"data", 448, xof.NONCE)
  assert base != kmacxof256(b"kez", b"data", 448, xof.CHALLENGE)
  assert base != kmacxof256(b"key", b"datb", 448, xof.CHALLENGE)
  # Key and data are not simply concatenated
  assert kmacxof256(b"ab", b"", 448, "T") != kmacxof256(b"a", b"b", 448, "T")

  domains = [xof.SECRET_KEY, xof.SHARED_KEY, xof.KEYSTREAM, xof.AUTH_TAG, xof.NONCE, xof.CHALLENGE, xof.DIGEST]
  assert domains == ["SK", "PK", "PKE", "PKA", "N", "T", "D"]


def test_encode_str():
  # left_encode of the bit length, then the string itself
  assert xof.encode_str(b"") == b"\x01\x00"
  assert xof.encode_str(b"test") == b"\x01\x20test"
  assert xof.encode_str(bytes(32)) == b"\x02\x01\x00" + bytes(32)
