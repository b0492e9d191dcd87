from __future__ import annotations

from functools import reduce
from typing import Union

from ..exceptions import NoSquareRoot
from .scalar import fe, minus1, one, p, r, zero
from .util import tobytes_le, toint_le

# Edwards curve: x2 + y2 = 1 + d x2 y2
# Ed448-Goldilocks constant:
d = fe(-39081)

# Points are stored in affine coordinates, always reduced mod p, so that
# equality is a plain comparison of both coordinates.

Coordinate = Union[fe, int]


class EdPoint:
  """An immutable point (x, y) on the Ed448-Goldilocks curve"""
  __slots__ = ("x", "y")

  def __init__(self, x: Coordinate, y: Coordinate):
    x, y = _fe(x), _fe(y)
    if x.sq + y.sq != one + d * x.sq * y.sq:
      raise ValueError("Not a curve point on Ed448")
    object.__setattr__(self, "x", x)
    object.__setattr__(self, "y", y)

  @classmethod
  def _new(cls, x: fe, y: fe) -> EdPoint:
    """Construct from coordinates already known to be on the curve"""
    P = object.__new__(cls)
    object.__setattr__(P, "x", x)
    object.__setattr__(P, "y", y)
    return P

  @staticmethod
  def from_y(y: Coordinate, lsb: bool = False) -> EdPoint:
    """Restore from a y coordinate and the least significant bit of x"""
    y = _fe(y)
    # x2 = (1 - y2) / (1 + 39081 y2), the divisor never vanishes because d is not a square
    x2 = (one - y.sq) / (one - d * y.sq)
    x = x2.sqrt(lsb)
    if x.bit(0) != bool(lsb): raise NoSquareRoot("No point with x = 0 has odd parity")
    return EdPoint._new(x, y)

  @staticmethod
  def from_bytes(b) -> EdPoint:
    """Read a 57-byte compressed point (little endian y, x parity in the highest bit)"""
    val = toint_le(bytes(b))
    lsb = bool(val >> 455)
    y = val & (1 << 455) - 1
    if y >= p: raise ValueError("Invalid y coordinate on Ed448")
    return EdPoint.from_y(fe(y), lsb)

  def __setattr__(self, name, value):
    raise AttributeError("EdPoint is immutable")

  def __repr__(self): return point_name(self)
  def __str__(self): return bytes(self).hex()
  def __bytes__(self): return tobytes_le(self.y.val | self.lsb << 455)
  def __hash__(self): return hash((self.x.val, self.y.val))

  @property
  def lsb(self) -> bool:
    """The least significant bit (parity) of x, which compression keeps."""
    return self.x.bit(0)

  @property
  def is_low_order(self) -> bool: return self in LO

  def __add__(self, othr: EdPoint) -> EdPoint:
    if not isinstance(othr, EdPoint): return NotImplemented
    x1, y1, x2, y2 = self.x, self.y, othr.x, othr.y
    dxy = d * x1 * x2 * y1 * y2
    # Complete addition law: both divisors are non-zero for any curve points
    return EdPoint._new(
      (x1 * y2 + y1 * x2) / (one + dxy),
      (y1 * y2 - x1 * x2) / (one - dxy),
    )

  def __sub__(self, othr: EdPoint) -> EdPoint:
    return self + -othr

  def __neg__(self) -> EdPoint:
    return EdPoint._new(-self.x, self.y)

  def __mul__(self, s: int) -> EdPoint:
    """Multiply the point by a scalar, double-and-add from the most significant bit."""
    if not isinstance(s, int): return NotImplemented
    if s < 0: return -self * -s
    if s == 0: return ZERO
    P = self

    def step(V: EdPoint, bit: str) -> EdPoint:
      V += V
      return V + P if bit == "1" else V

    # The leading 1 bit is consumed by starting from P itself
    return reduce(step, bin(s)[3:], P)

  def __rmul__(self, s: int) -> EdPoint:
    return self * s

  def __eq__(self, othr):
    if not isinstance(othr, EdPoint): raise TypeError(f"EdPoints cannot be compared with {type(othr)}")
    return self.x == othr.x and self.y == othr.y


def _fe(v: Coordinate) -> fe:
  return v if isinstance(v, fe) else fe(v)


# Neutral element
ZERO = EdPoint(zero, one)

# Base point (prime group generator), y = -3 and x even
G = EdPoint.from_y(fe(-3), False)

# Low order generator (order 4) and all the low order points
L = EdPoint(one, zero)
LO = [ZERO, L, EdPoint(zero, minus1), EdPoint(minus1, zero)]


def point_name(P: EdPoint) -> str:
  """Return variable names rather than xy coordinates for any constants defined here"""
  for name, val in (("ZERO", ZERO), ("G", G), ("L", L)):
    if P == val:
      return name
  for i, val in enumerate(LO):
    if P == val:
      return f"LO[{i}]"
  return f"EdPoint({P.x.val}, {P.y.val})"


def is_prime_group(P: EdPoint) -> bool:
  """Test whether P lies in the subgroup of order r (costs a scalar multiplication)"""
  return not P.is_low_order and r * P == ZERO
