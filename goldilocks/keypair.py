from typing import Tuple, Union

from goldilocks import util, xof
from goldilocks.elliptic import EdPoint, G, r, toint
from goldilocks.exceptions import MalformedKeyError

Passphrase = Union[str, bytes]


def secret_scalar(passphrase: Passphrase) -> int:
  """
  Derive the private scalar from a passphrase.

  The scalar is cofactor-cleared (multiplied by 4) and reduced mod r. The same
  passphrase always gives the same scalar; nothing else is mixed in.
  """
  s = toint(xof.kmacxof256(util.encode(passphrase), b"", 448, xof.SECRET_KEY))
  return 4 * s % r


def derive_keypair(passphrase: Passphrase) -> Tuple[int, EdPoint]:
  """Return the private scalar s and the public point V = s * G"""
  s = secret_scalar(passphrase)
  return s, s * G


def public_key(passphrase: Passphrase) -> EdPoint:
  return derive_keypair(passphrase)[1]


def check_public(V: EdPoint) -> EdPoint:
  """Reject public keys that would reveal every shared secret (low order points)"""
  if not isinstance(V, EdPoint):
    raise TypeError(f"Public key must be an EdPoint, not {type(V)}")
  if V.is_low_order:
    raise MalformedKeyError("Invalid public key provided")
  return V
