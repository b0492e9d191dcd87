import hashlib
from secrets import randbelow

import pytest
from cryptography.hazmat.primitives.asymmetric.ed448 import Ed448PrivateKey
from cryptography.hazmat.primitives.serialization import Encoding, NoEncryption, PrivateFormat, PublicFormat

from goldilocks.elliptic import *
from goldilocks.elliptic.util import tobytes_le
from goldilocks.exceptions import NoSquareRoot


def test_fe():
  assert one + zero == one
  assert zero - one == minus1
  assert fe(1234) / fe(324123) == (fe(324123) / fe(1234)).inv
  assert repr(fe(1234)) == "fe(1234)"
  assert repr(fe(-1)) == "minus1"
  assert str(fe(-1)) == str(p - 1)
  assert fe(p + 5) == 5

  x = fe(randbelow(p - 1) + 1)
  assert x.inv.inv == x
  assert x * x.inv == one
  assert x**3 == x * x * x
  assert x * fe(2) == x + x
  assert x * fe(2) != x

  with pytest.raises(ZeroDivisionError):
    zero.inv


def test_sqrt():
  x = fe(randbelow(p - 1) + 1)
  # The two roots differ in parity because p is odd
  assert x.sq.sqrt(x.bit(0)) == x
  assert x.sq.sqrt(not x.bit(0)) == -x
  assert zero.sqrt(False) == zero
  assert zero.sqrt(True) == zero

  # -1 and d have no square roots (p = 3 mod 4, and the curve is complete)
  with pytest.raises(NoSquareRoot):
    minus1.sqrt(False)
  with pytest.raises(NoSquareRoot):
    d.sqrt(True)


def test_generator():
  assert G.y == fe(-3)
  assert not G.lsb
  assert repr(G) == "G"
  assert repr(ZERO) == "ZERO"
  assert repr(2 * G).startswith("EdPoint(")

  assert 0 * G == ZERO
  assert 1 * G == G
  assert 2 * G == G + G
  assert 4 * G == 2 * (2 * G)
  assert 4 * G != ZERO
  assert r * G == ZERO
  assert (r + 1) * G == G
  assert n * G == ZERO
  assert is_prime_group(G)


def test_negation():
  assert -G == EdPoint(p - G.x.val, G.y)
  assert G + -G == ZERO
  assert G - G == ZERO
  assert -3 * G == -(3 * G)
  P = randbelow(r) * G
  assert P + -P == ZERO
  assert -ZERO == ZERO


def test_group_laws():
  k, l, m = (randbelow(r) for i in range(3))
  assert (k + l) * G == k * G + l * G
  assert (k + 1) * G == k * G + G
  assert k * (l * G) == l * (k * G) == (k * l % r) * G
  assert k * G + (l * G + m * G) == (k * G + l * G) + m * G
  assert k * G + l * G == l * G + k * G
  # Scalars are periodic in r for the prime group
  assert (k + r) * G == k * G
  assert (r - k) * G == -(k * G)


def test_curve_equation():
  with pytest.raises(ValueError) as exc:
    EdPoint(1, 1)
  assert "Not a curve point" in str(exc.value)
  P = randbelow(r) * G
  assert EdPoint(P.x, P.y) == P
  assert EdPoint(P.x.val, P.y.val) == P
  with pytest.raises(ValueError):
    EdPoint(P.x + one, P.y)


def test_immutable():
  with pytest.raises(AttributeError):
    G.x = one
  P = G
  P += G
  assert P == 2 * G
  assert G.y == fe(-3)


def test_low_order():
  assert LO[0] == ZERO
  assert LO[1] == L
  assert repr(LO[1]) == "L"
  assert repr(LO[2]) == "LO[2]"
  for i, P in enumerate(LO):
    assert 4 * P == ZERO
    assert i * L == P
    assert P.is_low_order
    assert not is_prime_group(P)
  assert not G.is_low_order

  # A point outside of the prime group, cleared by the cofactor
  Q = G + L
  assert not Q.is_low_order
  assert not is_prime_group(Q)
  assert 4 * Q == 4 * G


def test_from_y():
  for i in range(5):
    P = randbelow(r) * G
    assert EdPoint.from_y(P.y, P.lsb) == P
    assert EdPoint.from_y(P.y, not P.lsb) == -P
    assert EdPoint.from_y(P.y.val, P.lsb) == P
  assert EdPoint.from_y(one) == ZERO
  assert EdPoint.from_y(-3) == G
  assert EdPoint.from_y(-1) == LO[2]
  # x = 0 has no odd root
  for y in (1, -1):
    with pytest.raises(NoSquareRoot):
      EdPoint.from_y(y, True)

  # About half of all y values have no point on the curve
  points, failures = 0, 0
  for y in range(2, 30):
    try:
      P = EdPoint.from_y(y, True)
    except NoSquareRoot:
      failures += 1
      continue
    assert P.lsb
    assert P.y == fe(y)
    assert P.x.sq + P.y.sq == one + d * P.x.sq * P.y.sq
    points += 1
  assert points and failures


def test_bytes():
  P = randbelow(r) * G
  b = bytes(P)
  assert len(b) == 57
  assert EdPoint.from_bytes(b) == P
  assert EdPoint.from_bytes(bytes(-P)) == -P
  assert str(ZERO) == "01" + 56 * "00"
  assert hash(EdPoint.from_bytes(b)) == hash(P)

  with pytest.raises(ValueError):
    EdPoint.from_bytes(b[:56])
  with pytest.raises(ValueError):
    EdPoint.from_bytes(57 * b"\xFF")
  # x = 0 cannot be odd
  with pytest.raises(NoSquareRoot):
    EdPoint.from_bytes(tobytes_le(1 | 1 << 455))


def rfc8032_scalar(sk: bytes) -> int:
  """Ed448 private key to secret scalar as per RFC 8032"""
  h = bytearray(hashlib.shake_256(sk).digest(114)[:57])
  h[0] &= 0xFC
  h[55] |= 0x80
  h[56] = 0
  return int.from_bytes(h, "little")


def test_ed448_vs_cryptography():
  """Ed448 of RFC 8032 uses the same curve, only with a different base point"""
  keys = []
  for i in range(2):
    priv = Ed448PrivateKey.generate()
    sk = priv.private_bytes(Encoding.Raw, PrivateFormat.Raw, NoEncryption())
    pk = priv.public_key().public_bytes(Encoding.Raw, PublicFormat.Raw)
    A = EdPoint.from_bytes(pk)
    assert bytes(A).hex() == pk.hex()
    assert is_prime_group(A)
    keys.append((rfc8032_scalar(sk), A))
  (a1, A1), (a2, A2) = keys
  # Recover the RFC 8032 base point from one key and derive the other public key with it
  B = pow(a1, -1, r) * A1
  assert is_prime_group(B)
  assert a2 * B == A2


def test_hashmap():
  assert len({fe(i * p) for i in range(2)}) == 1
  assert len({i * L for i in range(10)}) == 4


def test_tobytes():
  assert tobytes(0) == b"\x00"
  assert tobytes(127) == b"\x7F"
  assert tobytes(128) == b"\x00\x80"
  assert tobytes(0x1234) == b"\x12\x34"
  assert toint(b"\x00\x80") == 128
  with pytest.raises(ValueError):
    tobytes(-1)
