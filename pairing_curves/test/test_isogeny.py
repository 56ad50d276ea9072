import unittest

from mpyc.finfields import GF

import pairing_curves.fingroups as fg
import pairing_curves.ellcurves as ell
from pairing_curves.isogeny import (
    BLS12_381_G1_ISOGENY,
    MapSingularity,
    horner,
    isogeny_map,
    map_via_isogeny,
)
from pairing_curves.subgroup import clear_cofactor


def points_with_small_x(group, count):
    """Return first count points with x = 1, 2, ..., assumes field order 3 mod 4."""
    gf = group.field
    a, b = group.curve.a, group.curve.b
    pts = []
    x = gf(1)
    while len(pts) < count:
        rhs = x ** 3 + a * x + b
        if rhs ** ((gf.order - 1) // 2) == gf(1):
            pts.append(group((x, rhs ** ((gf.order + 1) // 4))))
        x = x + 1
    return pts


class Isogeny(unittest.TestCase):
    @classmethod
    def setUpClass(cls):
        cls.iso_group = fg.EllipticCurve(ell.BLS12_381_ISO, fg.WEI_AFF, ell.Weierstr_Affine_Arithm)
        cls.group = fg.EllipticCurve(ell.BLS12_381, fg.WEI_AFF, ell.Weierstr_Affine_Arithm)
        cls.pts = points_with_small_x(cls.iso_group, 4)

    def test_horner(self):
        gf = GF(101)
        self.assertEqual(horner((gf(3), gf(0), gf(2)), gf(5)), gf(53))
        self.assertEqual(horner((gf(7),), gf(5)), gf(7))
        self.assertEqual(horner((gf(1), gf(1), gf(1), gf(1)), gf(-1)), gf(0))

    def test_descriptor(self):
        gf = ell.BLS12_381.field
        iso = BLS12_381_G1_ISOGENY
        self.assertEqual(iso.degree, 11)
        self.assertEqual((len(iso.x_num), len(iso.x_den)), (12, 11))
        self.assertEqual((len(iso.y_num), len(iso.y_den)), (16, 16))
        self.assertEqual(iso.x_den[-1], gf(1))
        self.assertEqual(iso.y_den[-1], gf(1))

    def test_infinity(self):
        image = map_via_isogeny(self.iso_group.identity, BLS12_381_G1_ISOGENY)
        self.assertTrue(image.is_infinity)
        self.assertEqual(image, self.group.identity)

    def test_on_target_curve(self):
        for pt in self.pts:
            self.assertTrue(pt.on_curve())
            image = map_via_isogeny(pt, BLS12_381_G1_ISOGENY)
            self.assertIs(image.curve, ell.BLS12_381)
            self.assertTrue(image.on_curve())
        image = map_via_isogeny(self.iso_group.generator * 7, BLS12_381_G1_ISOGENY)
        self.assertTrue(image.on_curve())

    def test_known_answer(self):
        gf = ell.BLS12_381.field
        pt = self.pts[0]
        self.assertEqual(pt.x, gf(2))
        image = map_via_isogeny(pt, BLS12_381_G1_ISOGENY)
        self.assertEqual(
            image.x,
            gf(1903388102405267050534117231550408521115453990273492308685387015707362115494541109545175611389606308563495673601275),
        )
        self.assertEqual(
            image.y,
            gf(2285007543892488992219929633445317357049526944290784831766836961453809259335004404569005051549766195974520405972652),
        )

    def test_homomorphism(self):
        pt = self.pts[0]
        iso = BLS12_381_G1_ISOGENY
        self.assertEqual(clear_cofactor(pt), self.iso_group.generator)
        self.assertEqual(clear_cofactor(map_via_isogeny(pt, iso)), map_via_isogeny(clear_cofactor(pt), iso))
        p1, p2 = self.pts[1], self.pts[2]
        self.assertEqual(map_via_isogeny(p1 + p2, iso), map_via_isogeny(p1, iso) + map_via_isogeny(p2, iso))
        self.assertEqual(map_via_isogeny(-p1, iso), -map_via_isogeny(p1, iso))

    def test_deterministic(self):
        pt = self.pts[3]
        image1 = map_via_isogeny(pt, BLS12_381_G1_ISOGENY)
        image2 = map_via_isogeny(pt, BLS12_381_G1_ISOGENY)
        self.assertEqual(image1.value, image2.value)

    def test_singularity(self):
        pt = self.pts[0]  # x == 2
        params = ell.BLS12_381_ISO
        bad_x = isogeny_map(params, params, x_num=[0, 1], x_den=[-2, 1], y_num=[1], y_den=[1])
        bad_y = isogeny_map(params, params, x_num=[0, 1], x_den=[1], y_num=[1], y_den=[4, -2])
        for iso in (bad_x, bad_y):
            with self.assertRaises(MapSingularity):
                map_via_isogeny(pt, iso)
        # Same descriptors are fine elsewhere.
        self.assertEqual(map_via_isogeny(self.pts[1], bad_x).x, self.pts[1].x / (self.pts[1].x - 2))

    def test_identity_map(self):
        params = ell.BLS12_381_ISO
        identity_map = isogeny_map(params, params, x_num=[0, 1], x_den=[1], y_num=[1], y_den=[1])
        for pt in self.pts:
            self.assertEqual(map_via_isogeny(pt, identity_map), pt)

    def test_extension_field(self):
        """Map (x, y) -> (c^2 x, c^3 y) onto scaled curve over F_q^2."""
        domain = ell.BLS12_377_G2_ISO
        gf = domain.field
        c = gf([1, 1])
        g = fg.EllipticCurve(domain, fg.WEI_AFF, ell.Weierstr_Affine_Arithm).generator

        codomain = ell.CurveParams(name="BLS12_377_G2_ISO_scaled", order=domain.order, gf=gf)
        codomain.set_constants(a=domain.a * c ** 4, b=domain.b * c ** 6)
        codomain.set_equation(ell.set_weierstrass_eq(a=codomain.a, b=codomain.b))
        codomain.set_base_pt((c ** 2 * g.x, c ** 3 * g.y))
        codomain.set_cofactor(domain.cofactor, int(domain.cofactor_inv))
        target = fg.EllipticCurve(codomain, fg.WEI_AFF, ell.Weierstr_Affine_Arithm)

        iso = isogeny_map(domain, codomain, x_num=[gf(0), c ** 2], x_den=[1], y_num=[c ** 3], y_den=[1])
        self.assertEqual(iso.degree, 1)
        image = map_via_isogeny(g, iso)
        self.assertTrue(image.on_curve())
        self.assertEqual(image, target.generator)
        self.assertEqual(map_via_isogeny(g * 3, iso), image * 3)
        self.assertTrue(map_via_isogeny(g - g, iso).is_infinity)


if __name__ == "__main__":
    unittest.main()
