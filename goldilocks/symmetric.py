from secrets import token_bytes
from typing import NamedTuple, Tuple

import nacl.bindings as sodium

from goldilocks import util, xof
from goldilocks.exceptions import AuthenticationError
from goldilocks.keypair import Passphrase

# Passphrase encryption with KMACXOF256 alone: a random 512-bit salt z and the
# passphrase key the keystream and a 512-bit authentication tag.

SALTBYTES = 64
TAGBYTES = 64


class SymmetricCryptogram(NamedTuple):
  z: bytes  # Random salt
  c: bytes  # Ciphertext, same length as the message
  t: bytes  # Authentication tag over the plaintext

  def __bytes__(self): return self.z + self.c + self.t

  @staticmethod
  def from_bytes(data: bytes) -> "SymmetricCryptogram":
    data = bytes(data)
    if len(data) < SALTBYTES + TAGBYTES:
      raise ValueError(f"Should be at least {SALTBYTES + TAGBYTES} bytes, got {len(data)}")
    return SymmetricCryptogram(data[:SALTBYTES], data[SALTBYTES:-TAGBYTES], data[-TAGBYTES:])


def derive_keys(z: bytes, passphrase: Passphrase) -> Tuple[bytes, bytes]:
  """Split KMACXOF256(z || pw) into the encryption key ke and authentication key ka."""
  keka = xof.kmacxof256(z + util.encode(passphrase), b"", 1024, xof.SYMMETRIC_KEY)
  return keka[:64], keka[64:]


def keystream_xor(ke: bytes, data: bytes) -> bytes:
  return util.xor(data, xof.kmacxof256(ke, b"", 8 * len(data), xof.SYMMETRIC_KEYSTREAM))


def auth_tag(ka: bytes, message: bytes) -> bytes:
  return xof.kmacxof256(ka, message, 512, xof.SYMMETRIC_TAG)


def encrypt(message: bytes, passphrase: Passphrase) -> SymmetricCryptogram:
  message = bytes(message)
  z = token_bytes(SALTBYTES)
  ke, ka = derive_keys(z, passphrase)
  return SymmetricCryptogram(z, keystream_xor(ke, message), auth_tag(ka, message))


def decrypt(cryptogram: SymmetricCryptogram, passphrase: Passphrase) -> Tuple[bytes, bool]:
  """Return the message and whether the tag matched. Discard the message on False."""
  z, c, t = cryptogram
  ke, ka = derive_keys(bytes(z), passphrase)
  m = keystream_xor(ke, bytes(c))
  return m, sodium.sodium_memcmp(bytes(t), auth_tag(ka, m))


def decrypt_authenticated(cryptogram: SymmetricCryptogram, passphrase: Passphrase) -> bytes:
  m, valid = decrypt(cryptogram, passphrase)
  if not valid:
    raise AuthenticationError("Authentication mismatch: wrong passphrase or tampered cryptogram")
  return m
