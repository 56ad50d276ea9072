"""This module implements additive finite groups for elliptic curves.

Group elements are written additively: +, - and * (by an integer)
are overloaded on top of the abstract operation, inverse, equality
and repeat methods that each curve arithmetic supplies.
"""

import functools
from typing import NamedTuple

from mpyc.finfields import PrimeFieldElement


class FiniteGroupElement:
    """Abstract base class for additive finite groups.

    Default: @, ~, ^
    Additive: +, -, *
    """

    order = None
    identity = None
    generator = None

    def __matmul__(self, other):  # overload @
        group = type(self)
        return group.operation(self, other)

    def __invert__(self):  # overload ~
        group = type(self)
        return group.inverse(self)

    def __xor__(self, other):  # overload ^
        group = type(self)
        return group.repeat(self, other)

    def __add__(self, other):
        group = type(self)
        if type(other) is not group:
            raise TypeError("points on different curves or coordinate systems")

        return group.__matmul__(self, other)

    def __neg__(self):
        group = type(self)
        return group.__invert__(self)

    def __sub__(self, other):
        group = type(self)
        return group.__matmul__(self, group.__invert__(other))

    def __mul__(self, other):
        group = type(self)
        if isinstance(other, FiniteGroupElement):
            raise TypeError("* only defined for integer scalars")

        return group.__xor__(self, other)

    __rmul__ = __mul__

    def __eq__(self, other):
        group = type(self)
        if not isinstance(other, FiniteGroupElement):
            return NotImplemented

        return group.equality(self, other)

    def operation(a, b):
        """Return a @ b."""
        raise NotImplementedError

    def operation2(a):
        """Return a @ a."""
        group = type(a)
        return group.operation(a, a)

    def inverse(a):
        """Return @-inverse of a (written ~a)."""
        raise NotImplementedError

    def equality(a, b):
        """Return a == b."""
        raise NotImplementedError

    def repeat(a, n):
        """Return nth @-power of a (written a^n), for any integer n.

        Plain left-to-right double-and-add, not constant time.
        """
        if isinstance(n, PrimeFieldElement):
            n = int(n)

        group = type(a)
        if n == 0:
            return group.identity

        if n < 0:
            a = group.inverse(a)
            n = -n
        b = a
        for i in range(n.bit_length() - 2, -1, -1):
            b = group.operation2(b)
            if (n >> i) & 1:
                b = group.operation(b, a)
        return b


class EllCoordSys(NamedTuple):
    """Define coordinate system by identity and inverse/negative. """

    identity: tuple
    negative: tuple
    name: str


WEI_AFF = EllCoordSys((), (1, -1), "Weierstrass Affine")
WEI_HOM_PROJ = EllCoordSys((0, 1, 0), (1, -1, 1), "Weierstrass Homogeneous Projective")


def affine_tuple_to_coord(CurveElt_subtype, pt_tuple):
    """Convert tuple in affine notation to curve element.

    Invariant: pt_tuple is () for the point at infinity, or an (x, y)
    tuple of field elements in affine notation.
    """
    target_coord = CurveElt_subtype.coord
    if len(pt_tuple) == 0:
        return CurveElt_subtype.identity

    assert len(pt_tuple) == 2
    gf = CurveElt_subtype.field
    x, y = pt_tuple

    if target_coord == WEI_AFF:
        return CurveElt_subtype((x, y))

    if target_coord == WEI_HOM_PROJ:
        return CurveElt_subtype((x, y, gf(1)))

    raise NotImplementedError


class EllipticCurveElement(FiniteGroupElement):
    """Common base class for elliptic curve group elements.

    Note: Attribute access of x, y, z coordinates is defined in
    ellcurves.CurveArithmetic class.
    """

    def __init__(self, value):
        if isinstance(value, list):
            value = tuple(value)
        self.value = value

    def __repr__(self):
        return f"{self.value}"


@functools.lru_cache(maxsize=None)
def EllipticCurve(params, coord, arithm):
    """Create elliptic curve type for given curve parameters."""

    name = f'Curve({params.name})_{arithm.__name__}'
    EC = type(name, (arithm, EllipticCurveElement), {})
    EC.curve = params
    EC.order = params.order
    EC.field = params.field
    EC.coord = coord

    # Add identity and generator to class. Ensure rest of type gets defined above this line.
    EC.identity = EC(coord.identity)
    EC.base_pt = affine_tuple_to_coord(EC, params.base_pt_tuple)
    EC.generator = EC.base_pt  # alias
    return EC
