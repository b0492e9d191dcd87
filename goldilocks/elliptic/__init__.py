# A plain Python submodule for Ed448-Goldilocks curve math

# Affine Edwards arithmetic with the complete addition law and a simple
# double-and-add scalar multiplication. Not constant time and not zeroing
# anything after use: secret scalars leak through timing, which is accepted
# for this implementation.

# Public symbols are imported here. These are very low level primitives.
# Lower case constants are scalars (int or fe), upper case are EdPoints.

from .ed import LO, ZERO, EdPoint, G, L, d, is_prime_group
from .scalar import fe, minus1, n, one, p, r, zero
from .util import tobytes, toint
