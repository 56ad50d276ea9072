import unittest

import pairing_curves.fingroups as fg
import pairing_curves.ellcurves as ell


class FiniteGrps(unittest.TestCase):
    @classmethod
    def setUpClass(cls):
        cls.curves = [
            fg.EllipticCurve(ell.BLS12_381, fg.WEI_AFF, ell.Weierstr_Affine_Arithm),
            fg.EllipticCurve(ell.BLS12_381, fg.WEI_HOM_PROJ, ell.Weierstr_HomProj_Arithm),
            fg.EllipticCurve(ell.BLS12_381_ISO, fg.WEI_AFF, ell.Weierstr_Affine_Arithm),
            fg.EllipticCurve(ell.BLS12_377_G2_ISO, fg.WEI_AFF, ell.Weierstr_Affine_Arithm),
        ]

    def test_curves(self):
        for group in self.curves:
            generator = group.generator
            self.assertTrue(generator.on_curve())
            self.assertEqual(generator * -1, -generator)
            g4 = generator + generator + generator + generator
            self.assertEqual(g4, (generator * 4))
            self.assertEqual(4 * generator, g4)
            self.assertEqual(generator * 0, group.identity)
            self.assertTrue(g4.on_curve())
            g2 = group.generator + group.generator
            g2 = g2 + group.identity
            g3 = g2 + group.generator
            self.assertEqual(g4, g3 + group.generator)
            self.assertEqual(g4 - generator, g3)
            self.assertTrue((generator - generator).is_infinity)
            self.assertFalse(generator.is_infinity)
            self.assertTrue(group.identity.on_curve())

    def test_generator_order(self):
        for group in self.curves:
            self.assertTrue((group.generator * group.order).is_infinity)
            self.assertEqual(group.generator * (group.order + 1), group.generator)

    def test_coordinate_conversion(self):
        aff, proj = self.curves[:2]
        g = aff.generator
        self.assertEqual(g.to_homproj(), proj.generator)
        self.assertEqual((proj.generator * 5).to_affine(), g * 5)
        self.assertEqual((proj.generator * 5).to_affine().value, (g * 5).value)
        self.assertTrue(proj.identity.to_affine().is_infinity)
        self.assertTrue(aff.identity.to_homproj().is_infinity)

    def test_points_on_different_curves(self):
        g381 = self.curves[0].generator
        g_iso = self.curves[2].generator
        self.assertNotEqual(g381, g_iso)
        with self.assertRaises(TypeError):
            g381 + g_iso
        with self.assertRaises(TypeError):
            g381 * g381

    def test_off_curve(self):
        group = self.curves[0]
        gf = group.field
        self.assertFalse(group((gf(1), gf(1))).on_curve())

    def test_curve_params(self):
        for params in ell.CURVES.values():
            h = params.scalar_field(params.cofactor)
            self.assertEqual(h * params.cofactor_inv, params.scalar_field(1))
        self.assertIs(ell.CURVES["BLS12_381"], ell.BLS12_381)

        params = ell.CurveParams(name="BLS12_381_copy", order=ell.BLS12_381.order, gf=ell.BLS12_381.field)
        params.set_cofactor(ell.BLS12_381.cofactor)
        self.assertEqual(params.cofactor_inv, ell.BLS12_381.cofactor_inv)

    def test_non_residues(self):
        for params in (ell.BLS12_381_ISO, ell.BLS12_377_G2_ISO):
            gf = params.field
            z = params.non_residue
            # Euler's criterion, also over F_q^2.
            self.assertEqual(z ** ((gf.order - 1) // 2), -gf(1))

    def test_endomorphism_constant(self):
        gf = ell.BLS12_381.field
        beta = ell.BLS12_381.beta
        self.assertNotEqual(beta, gf(1))
        self.assertEqual(beta ** 2 + beta + 1, gf(0))


if __name__ == "__main__":
    unittest.main()
