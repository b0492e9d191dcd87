from secrets import token_bytes
from typing import NamedTuple, Tuple

import nacl.bindings as sodium

from goldilocks import util, xof
from goldilocks.elliptic import EdPoint, G, r, tobytes, toint
from goldilocks.exceptions import AuthenticationError
from goldilocks.keypair import Passphrase, check_public, secret_scalar

# Elliptic curve integrated encryption (DHIES): an ephemeral Diffie-Hellman
# exchange with the recipient's public key V, whose shared x coordinate keys
# both a KMACXOF256 keystream and a KMACXOF256 authentication tag.

TAGBYTES = 56  # 448-bit authentication tag


class Cryptogram(NamedTuple):
  Z: EdPoint  # Ephemeral public point k * G
  c: bytes    # Ciphertext, same length as the message
  t: bytes    # Authentication tag over the plaintext


def shared_keys(W: EdPoint) -> Tuple[bytes, bytes]:
  """Split KMACXOF256(W.x) into the authentication key ka and encryption key ke."""
  kake = xof.kmacxof256(tobytes(W.x.val), b"", 2 * 448, xof.SHARED_KEY)
  return kake[:56], kake[56:]


def keystream_xor(ke: bytes, data: bytes) -> bytes:
  return util.xor(data, xof.kmacxof256(ke, b"", 8 * len(data), xof.KEYSTREAM))


def auth_tag(ka: bytes, message: bytes) -> bytes:
  return xof.kmacxof256(ka, message, 448, xof.AUTH_TAG)


def encrypt(message: bytes, V: EdPoint) -> Cryptogram:
  """Encrypt a message for the public key V. Every call uses a fresh random ephemeral key."""
  message = bytes(message)
  check_public(V)
  k = 4 * toint(token_bytes(56)) % r
  W = k * V
  Z = k * G
  ka, ke = shared_keys(W)
  c = keystream_xor(ke, message)
  t = auth_tag(ka, message)
  return Cryptogram(Z, c, t)


def decrypt(cryptogram: Cryptogram, passphrase: Passphrase) -> Tuple[bytes, bool]:
  """
  Decrypt with the passphrase of the recipient's key pair.

  Returns the message and whether the authentication tag matched. A message
  returned with False must be discarded by the caller; consider using
  decrypt_authenticated instead, which never returns it.
  """
  Z, c, t = cryptogram
  s = secret_scalar(passphrase)
  W = s * Z
  ka, ke = shared_keys(W)
  m = keystream_xor(ke, bytes(c))
  t2 = auth_tag(ka, m)
  return m, sodium.sodium_memcmp(bytes(t), t2)


def decrypt_authenticated(cryptogram: Cryptogram, passphrase: Passphrase) -> bytes:
  """Decrypt and return the message, raising AuthenticationError unless the tag matches."""
  m, valid = decrypt(cryptogram, passphrase)
  if not valid:
    raise AuthenticationError("Authentication mismatch: wrong passphrase or tampered cryptogram")
  return m
