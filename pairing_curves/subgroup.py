"""Prime-order subgroup membership for curves with an efficient endomorphism.

For BLS12 curves, the endomorphism phi(x, y) = (beta * x, y), with beta
a suitable cube root of unity, acts as -[u^2] on the prime-order subgroup,
where u is the curve seed. Checking phi(P) == -[u^2]P costs two scalar
multiplications by u instead of one by the (much larger) group order.
See [Sco21], Section 6. For [Sco21], see: https://eprint.iacr.org/2021/1130
"""

import logging


logger_sub = logging.getLogger("Subgroup")
logger_sub.setLevel(logging.INFO)


def endomorphism(pt):
    """Return (beta * x, y), with beta taken from the curve of pt.

    Works for affine and projective coordinates, fixes the point at infinity.
    """
    if pt.is_infinity:
        return pt

    beta = pt.curve.beta
    return type(pt)((beta * pt.x,) + tuple(pt.value[1:]))


def is_in_prime_order_subgroup(pt, endomorphism, seed):
    """Return True iff pt is in the prime-order subgroup.

    Requires pt to be on the curve; for other points the outcome is meaningless.
    """
    x_times_pt = pt * seed
    # Early-out from [Sco21], Section 6: if [u]P == P but P is not the
    # point at infinity, then P is not in the prime-order subgroup.
    if x_times_pt == pt and not pt.is_infinity:
        logger_sub.debug(f"Early-out: [{seed}]P == P for P={pt}.")
        return False

    minus_x_squared_times_pt = -(x_times_pt * seed)
    return minus_x_squared_times_pt == endomorphism(pt)


def is_in_correct_subgroup(pt):
    """Check subgroup membership of pt, assuming pt is on the curve.

    Uses the endomorphism test if the curve defines one, and otherwise
    multiplication by the group order.
    """
    curve = pt.curve
    if curve.beta is not None and curve.seed is not None:
        return is_in_prime_order_subgroup(pt, endomorphism, curve.seed)

    return (pt * curve.order).is_infinity


def clear_cofactor(pt):
    """Map pt into the prime-order subgroup by multiplication with the cofactor."""
    return pt * pt.curve.cofactor


def mul_by_cofactor_inv(pt):
    """Return [h^-1 mod order]pt, undoing clear_cofactor() on the prime-order subgroup."""
    return pt * (int(pt.curve.cofactor_inv) % pt.curve.order)
