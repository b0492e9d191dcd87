from typing import NamedTuple

from goldilocks import xof
from goldilocks.elliptic import EdPoint, G, r, tobytes, toint
from goldilocks.exceptions import SignatureMismatch
from goldilocks.keypair import Passphrase, check_public, secret_scalar

# Schnorr signatures with a deterministic nonce derived from the secret
# scalar and the message. The challenge h is a full 448-bit value and only z
# is reduced mod r, so h must be kept as is when serializing.


class Signature(NamedTuple):
  h: int  # Challenge, 448 bits, not reduced
  z: int  # Response mod r


def challenge(U: EdPoint, message: bytes) -> int:
  return toint(xof.kmacxof256(tobytes(U.x.val), message, 448, xof.CHALLENGE))


def sign(message: bytes, passphrase: Passphrase) -> Signature:
  message = bytes(message)
  s = secret_scalar(passphrase)
  k = 4 * toint(xof.kmacxof256(tobytes(s), message, 448, xof.NONCE)) % r
  U = k * G
  h = challenge(U, message)
  z = (k - h * s) % r
  return Signature(h, z)


def verify(message: bytes, signature: Signature, V: EdPoint) -> bool:
  """Check the signature against the message and public key V"""
  check_public(V)
  h, z = signature
  if h < 0 or z < 0:
    return False
  # z * G + h * V = (k - h s) G + h s G = k G = U
  U = z * G + h * V
  return challenge(U, bytes(message)) == h


def require_valid(message: bytes, signature: Signature, V: EdPoint) -> None:
  """Like verify but raises SignatureMismatch on an invalid signature"""
  if not verify(message, signature, V):
    raise SignatureMismatch("Signature mismatch")
