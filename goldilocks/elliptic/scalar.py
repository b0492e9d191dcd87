from __future__ import annotations

from functools import cached_property

from ..exceptions import NoSquareRoot

# Field prime (Goldilocks)
p = 2**448 - 2**224 - 1

# p is congruent to 3 modulo 4, so square roots are a single exponentiation
p14 = (p + 1) // 4

# Order of the prime subgroup, and of the whole curve (cofactor 4)
r = 2**446 - 13818066809895115352007386748515426880336692474882178609894547503885
n = 4 * r


class fe:
  """A prime field element modulo p = 2^448 - 2^224 - 1"""

  def __init__(self, x: int): self.val = x % p
  def __hash__(self): return self.val
  def __repr__(self): return value_name(self)
  def __str__(self): return str(self.val)
  def __int__(self): return self.val
  def bit(self, n: int): return bool(self.val & 1 << n)

  def __eq__(self, other):
    if isinstance(other, int): return self.val == other % p
    if not isinstance(other, fe): raise TypeError(f"Cannot compare fe with {other!r}")
    return self.val == other.val

  def __neg__(self): return fe(-self.val)
  def __add__(self, o: fe): return fe(self.val + o.val)
  def __sub__(self, o: fe): return fe(self.val - o.val)
  def __mul__(self, o: fe): return fe(self.val * o.val)

  def __truediv__(self, o: fe) -> fe:
    """Division mod p"""
    return self if o == one else fe(self.val * o.inv.val)

  def __pow__(self, s: int) -> fe:
    return self.sq if s == 2 else fe(pow(self.val, s, p))

  @cached_property
  def inv(self) -> fe:
    """Multiplicative inverse (extended Euclid). Zero has none."""
    if not self.val: raise ZeroDivisionError("Zero has no inverse mod p")
    return fe(pow(self.val, -1, p))

  @cached_property
  def sq(self) -> fe:
    """Squared"""
    return self * self

  def sqrt(self, lsb: bool) -> fe:
    """The square root whose lowest bit equals lsb. Raises NoSquareRoot if none exists."""
    # Zero is its own square root, and the only one, whatever the bit
    if not self.val: return zero
    root = pow(self.val, p14, p)
    if bool(root & 1) != lsb: root = p - root
    root = fe(root)
    # Non-squares still produce a "root" above, so it must be checked
    if root.sq != self:
      raise NoSquareRoot(f"{self.val} is not a square mod p")
    return root


zero, one, minus1 = fe(0), fe(1), fe(-1)


def value_name(s: fe) -> str:
  """Return variable names rather than fe(...) for the constants defined here"""
  for name, val in (("zero", zero), ("one", one), ("minus1", minus1)):
    if s == val:
      return name
  return f"fe({s.val})"
