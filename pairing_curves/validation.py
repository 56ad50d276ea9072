"""Checked construction of curve points.

Entry points for deserialization and hash-to-curve pipelines: every
failure is reported as a single InvalidPointError, never as a silently
wrong point.
"""

import logging

from mpyc.finfields import FiniteFieldElement
from pairing_curves.fingroups import affine_tuple_to_coord
from pairing_curves.isogeny import MapSingularity, map_via_isogeny
from pairing_curves.subgroup import clear_cofactor, is_in_correct_subgroup


logger_val = logging.getLogger("Validation")
logger_val.setLevel(logging.INFO)


class InvalidPointError(ValueError):
    """Input does not describe a point of the prime-order subgroup."""


def _to_field(gf, c):
    """Convert coordinate c to an element of gf, accepting canonical encodings only.

    An int must lie in [0, p). For extension fields, a list holds at most
    ext_deg such ints, one per coefficient.
    """
    if isinstance(c, gf):
        return c

    if isinstance(c, FiniteFieldElement):
        raise InvalidPointError(f"coordinate {c} not in field of order {gf.order}")

    if isinstance(c, (list, tuple)):
        if len(c) > gf.ext_deg:
            raise InvalidPointError(f"coordinate has more than {gf.ext_deg} components")

        components = c
    else:
        components = [c]
    p = gf.characteristic
    for a in components:
        if not isinstance(a, int):
            raise InvalidPointError(f"coordinate component {a!r} is not an integer")

        if not 0 <= a < p:
            raise InvalidPointError(f"coordinate component {a} not in range [0, {p})")

    try:
        return gf(c)
    except (TypeError, ValueError) as exc:
        raise InvalidPointError(f"cannot convert coordinate {c!r}") from exc


def new_checked(group, value):
    """Create point of given curve group from affine (x, y) tuple.

    Coordinates may be ints or field elements; () gives the point at infinity.
    Raises InvalidPointError if the point is not on the curve or not in
    the prime-order subgroup.
    """
    if len(value) == 0:
        return group.identity

    if len(value) != 2:
        raise InvalidPointError(f"expected affine (x, y) tuple, got {len(value)} coordinates")

    x, y = (_to_field(group.field, c) for c in value)
    if not group.curve.equation(x, y):
        logger_val.debug(f"Point ({x}, {y}) not on curve {group.curve.name}.")
        raise InvalidPointError(f"point not on curve {group.curve.name}")

    pt = affine_tuple_to_coord(group, (x, y))
    if not is_in_correct_subgroup(pt):
        logger_val.debug(f"Point {pt} not in prime-order subgroup of {group.curve.name}.")
        raise InvalidPointError(f"point not in prime-order subgroup of {group.curve.name}")

    return pt


def map_to_subgroup(pt, isogeny):
    """Map pt on isogenous curve into prime-order subgroup of target curve.

    Applies the isogeny, clears the cofactor and checks the result.
    """
    try:
        image = map_via_isogeny(pt, isogeny)
    except MapSingularity as exc:
        raise InvalidPointError(str(exc)) from exc

    image = clear_cofactor(image)
    if not is_in_correct_subgroup(image):
        logger_val.debug(f"Image {image} not in prime-order subgroup of {isogeny.codomain.name}.")
        raise InvalidPointError(f"image not in prime-order subgroup of {isogeny.codomain.name}")

    return image
