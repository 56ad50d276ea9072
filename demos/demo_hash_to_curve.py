"""Demo: from the 11-isogenous curve into the BLS12-381 G1 subgroup.

A point on BLS12_381_ISO stands in for the output of the simplified SWU
map; it is carried to BLS12-381 G1 by the 11-isogeny, the cofactor is
cleared, and subgroup membership is checked with the endomorphism test.
"""

import os
import sys

project_root = os.path.abspath(os.path.join(os.path.dirname(__file__), ".."))
if project_root not in sys.path:
    sys.path.insert(0, project_root)

from pairing_curves.fingroups import EllipticCurve, WEI_AFF, WEI_HOM_PROJ
import pairing_curves.ellcurves as ell
from pairing_curves.isogeny import BLS12_381_G1_ISOGENY, map_via_isogeny
from pairing_curves.subgroup import clear_cofactor, endomorphism, is_in_prime_order_subgroup
from pairing_curves.validation import InvalidPointError, map_to_subgroup, new_checked


def points_on_iso_curve(count):
    """Yield first count points on BLS12_381_ISO with small x-coordinate."""
    group = EllipticCurve(ell.BLS12_381_ISO, WEI_AFF, ell.Weierstr_Affine_Arithm)
    gf = group.field
    x = gf(1)
    while count:
        rhs = x ** 3 + group.curve.a * x + group.curve.b
        if rhs ** ((gf.order - 1) // 2) == gf(1):
            yield group((x, rhs ** ((gf.order + 1) // 4)))
            count -= 1
        x = x + 1


def suite1():
    g1 = EllipticCurve(ell.BLS12_381, WEI_AFF, ell.Weierstr_Affine_Arithm)
    g1_proj = EllipticCurve(ell.BLS12_381, WEI_HOM_PROJ, ell.Weierstr_HomProj_Arithm)
    seed = ell.BLS12_381.seed

    print("Check BLS12-381 G1 generator with endomorphism test")
    assert is_in_prime_order_subgroup(g1.generator, endomorphism, seed)
    assert is_in_prime_order_subgroup(g1_proj.generator * 42, endomorphism, seed)

    print("Map points from isogenous curve to G1")
    for pt in points_on_iso_curve(3):
        image = map_via_isogeny(pt, BLS12_381_G1_ISOGENY)
        assert image.on_curve()
        in_subgroup = is_in_prime_order_subgroup(image, endomorphism, seed)
        print(f"x = {pt.x}: image in subgroup before clearing cofactor: {in_subgroup}")
        image = clear_cofactor(image)
        assert is_in_prime_order_subgroup(image, endomorphism, seed)
        assert map_to_subgroup(pt, BLS12_381_G1_ISOGENY) == image

    print("Reject invalid encodings")
    try:
        new_checked(g1, (1, 2))
    except InvalidPointError as exc:
        print(f"Rejected: {exc}")
    else:
        raise AssertionError("off-curve point accepted")

    return True


if __name__ == "__main__":
    suite1()
