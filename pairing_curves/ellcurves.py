from mpyc import gmpy as gmpy2
from mpyc.finfields import GF
from mpyc.gfpx import GFpX
from pairing_curves.fingroups import (
    EllipticCurve,
    WEI_AFF,
    WEI_HOM_PROJ,
)


class CurveParams:
    """Contains curve parameters.

    Invariants:
        self.equation assumes affine coordinates
        self.base_pt_tuple assumes affine coordinates
        self.cofactor * self.cofactor_inv == 1 modulo self.order
    """

    beta = None
    seed = None
    non_residue = None

    def __init__(self, *, name, order, gf):
        self.name = name
        self.order = order
        self.field = gf
        self.scalar_field = GF(order)

    def set_constants(self, *, a=0, b=1):
        self.a = a
        self.b = b

    def set_equation(self, eq):
        self.equation = eq

    def set_base_pt(self, value):
        assert isinstance(value, tuple)
        assert len(value) == 2, "Base point should be (x, y) tuple, in affine notation."
        if isinstance(value[0], int):
            value = tuple(map(self.field, value))
        self.base_pt_tuple = value

    def set_cofactor(self, cofactor, cofactor_inv=None):
        """Set cofactor h = #E / order and h^-1 modulo order."""
        if cofactor_inv is None:
            cofactor_inv = int(gmpy2.invert(cofactor, self.order))
        self.cofactor = cofactor
        self.cofactor_inv = self.scalar_field(cofactor_inv)

    def set_endomorphism(self, *, beta, seed):
        """Set endomorphism (x, y) -> (beta * x, y) and curve seed.

        Requires beta to be the cube root of unity for which the
        endomorphism acts as -[seed^2] on the prime-order subgroup.
        """
        if isinstance(beta, int):
            beta = self.field(beta)
        assert beta ** 3 == self.field(1)
        self.beta = beta
        self.seed = seed

    def set_non_residue(self, value):
        """Set non-square constant used by hash to field (Z or zeta)."""
        self.non_residue = value

    def __repr__(self):
        return f"CurveParams({self.name})"


def set_weierstrass_eq(*, a=0, b=1):
    """Return equation that defines Weierstrass curve. """

    def wei_eq(x, y):
        return y ** 2 == x ** 3 + a * x + b

    return wei_eq


def _bls12_381():
    """Define BLS12-381 G1.

    Curve equation: y^2 = x^3 + 4 over F_p, with seed u = -0xd201000000010000.
    Link: https://electriccoin.co/blog/new-snark-curve/
    """
    p = 0x1A0111EA397FE69A4B1BA7B6434BACD764774B84F38512BF6730D2A0F6B0F6241EABFFFEB153FFFFB9FEFFFFFFFFAAAB
    order = 0x73EDA753299D7D483339D80809A1D80553BDA402FFFE5BFEFFFFFFFF00000001
    gf = GF(p)
    bls = CurveParams(name="BLS12_381", order=order, gf=gf)
    bls.set_constants(a=gf(0), b=gf(4))
    bls.set_equation(set_weierstrass_eq(a=bls.a, b=bls.b))
    bls.set_base_pt(
        (
            gf(
                3685416753713387016781088315183077757961620795782546409894578378688607592378376318836054947676345821548104185464507
            ),
            gf(
                1339506544944476473020471379941921221584933875938349620426543736416511423956333506472724655353366534992391756441569
            ),
        )
    )
    # h = (u - 1)^2 / 3
    bls.set_cofactor(
        0x396C8C005555E1568C00AAAB0000AAAB,
        52435875175126190458656871551744051925719901746859129887267498875565241663483,
    )
    # The test only involves u^2, so the absolute value of u is used as seed.
    bls.set_endomorphism(
        beta=793479390729215512621379701633421447060886740281060493010456487427281649075476305620758731620350,
        seed=0xD201000000010000,
    )
    return bls


def _bls12_381_iso():
    """Define curve 11-isogenous to BLS12-381 G1, used by simplified SWU.

    Curve equation: y^2 = x^3 + a'x + b' over F_p. Same order as BLS12-381 G1;
    the base point is [h] of the point with x = 2.
    Link: https://eprint.iacr.org/2019/403
    """
    p = 0x1A0111EA397FE69A4B1BA7B6434BACD764774B84F38512BF6730D2A0F6B0F6241EABFFFEB153FFFFB9FEFFFFFFFFAAAB
    order = 0x73EDA753299D7D483339D80809A1D80553BDA402FFFE5BFEFFFFFFFF00000001
    gf = GF(p)
    iso = CurveParams(name="BLS12_381_ISO", order=order, gf=gf)
    iso.set_constants(
        a=gf(
            2858613208430792460670318198342879349494999260436483523154854961351063857243634726019465176474256126859776719994977
        ),
        b=gf(
            2906670324641927570491258158026293881577086121416628140204402091718288198173574630967936031029026176254968826637280
        ),
    )
    iso.set_equation(set_weierstrass_eq(a=iso.a, b=iso.b))
    iso.set_base_pt(
        (
            gf(
                2471208995611046820393650553614971577278088882250136210103334205811236785487176412087603853287226544334572146919922
            ),
            gf(
                1624429226742214948457124848101211178290326220121019153451145945680915353388535210257173743556222740551857549228560
            ),
        )
    )
    iso.set_cofactor(
        0x396C8C005555E1568C00AAAB0000AAAB,
        52435875175126190458656871551744051925719901746859129887267498875565241663483,
    )
    iso.set_non_residue(gf(11))
    return iso


def _bls12_377_g2_iso():
    """Define curve isogenous to BLS12-377 G2, used by simplified SWU.

    Curve equation: y^2 = x^3 + a'x + b' over F_q^2 = F_q[u]/(u^2 + 5).
    Same order as BLS12-377 G2.
    """
    q = 258664426012969094010652733694893533536393512754914660539884262666720468348340822774968888139573360124440321458177
    order = 8444461749428370424248824938781546531375899335154063827935233455917409239041
    irred_poly = GFpX(q)([5, 0, 1])  # u^2 == -5
    gf = GF(irred_poly)

    iso = CurveParams(name="BLS12_377_G2_ISO", order=order, gf=gf)
    iso.set_constants(
        a=gf(
            [
                203567575243095400658685394654545117908398249146024925306257919445062693445414588103741379252427065422417496933054,
                69357795553467368835766998649443114298653120475771922004522583893765862042427351483161253261358624703462995261783,
            ]
        ),
        b=gf(
            [
                249039961697346248294162904170316935273494032138504221215795383014884687447192317932476994472315647695087734549420,
                806998283981877041862626354975415285020485827233942100233224759047656510577433749137260740227904569833498998565,
            ]
        ),
    )
    iso.set_equation(set_weierstrass_eq(a=iso.a, b=iso.b))
    base_x = gf(
        [
            44471777796618567688228760095584248343372454885978087674329841655595593880133139294404651664057692271364857231527,
            152209914092745808277594956866181055187624831129109767937025242463317365117655129123148193049673425418513926319001,
        ]
    )
    base_y = gf(
        [
            115206687171448860889110309021279060303629519187879257051215751573842462972180856243991157572371972099444077110343,
            191377956145194479040228903677940355038998863371661730030204479850936075480341608934735952709786495341106477933498,
        ]
    )
    iso.set_base_pt((base_x, base_y))
    iso.set_cofactor(
        7923214915284317143930293550643874566881017850177945424769256759165301436616933228209277966774092486467289478618404761412630691835764674559376407658497,
        6764900296503390671038341982857278410319949526107311149686707033187604810669,
    )
    iso.set_non_residue(gf([12, 1]))  # zeta = u + 12, primitive element
    return iso


# BW6-767 is omitted: only its moduli and curve constants are at hand, no generator.
BLS12_381 = _bls12_381()
BLS12_381_ISO = _bls12_381_iso()
BLS12_377_G2_ISO = _bls12_377_g2_iso()

CURVES = {params.name: params for params in (BLS12_381, BLS12_381_ISO, BLS12_377_G2_ISO)}


def negative(pt):
    neg = tuple(-c if s == -1 else c for s, c in zip(pt.coord.negative, pt.value))
    return type(pt)(neg)


def add_rcb16_hom_proj(pt1, pt2):
    """Implementation of complete addition formula from [RCB16].

    Formula is complete on every short Weierstrass curve without
    points of order 2, defined over a field k with char(k) != 2, 3.
    Algorithm 7, requires a = 0.
    Link: https://eprint.iacr.org/2015/1060
    """
    assert pt1.coord == WEI_HOM_PROJ
    assert pt2.coord == WEI_HOM_PROJ
    assert pt1.curve.a == pt1.field(0)
    b3 = pt1.curve.b * 3

    x1, y1, z1 = pt1.x, pt1.y, pt1.z
    x2, y2, z2 = pt2.x, pt2.y, pt2.z

    t0 = x1 * x2
    t1 = y1 * y2
    t2 = z1 * z2

    t3 = x1 + y1
    t4 = x2 + y2
    t3 = t3 * t4

    t4 = t0 + t1
    t3 = t3 - t4
    t4 = y1 + z1

    x3 = y2 + z2
    t4 = t4 * x3
    x3 = t1 + t2

    t4 = t4 - x3
    x3 = x1 + z1
    y3 = x2 + z2

    x3 = x3 * y3
    y3 = t0 + t2
    y3 = x3 - y3

    x3 = t0 + t0
    t0 = x3 + t0
    t2 = b3 * t2

    z3 = t1 + t2
    t1 = t1 - t2
    y3 = b3 * y3

    x3 = t4 * y3
    t2 = t3 * t1
    x3 = t2 - x3

    y3 = y3 * t0
    t1 = t1 * z3
    y3 = t1 + y3

    t0 = t0 * t3
    z3 = z3 * t4
    z3 = z3 + t0

    return type(pt1)((x3, y3, z3))


def add_weierstrass_affine(pt1, pt2):
    """Add Weierstrass points with affine coordinates.

    Requires short Weierstrass form and affine coordinates, any curve constant a.

    Args:
        pt1, pt2 (CurveElement): Points to apply group law to.

    Returns:
        type(pt1)

    Algorithm documented in Silverman, The arithmetic of elliptic curves(1994)
    and thesis Hisil (2010), for example.
    Link: https://core.ac.uk/download/pdf/10898289.pdf (Algorithm 4.1.1)
    """
    assert pt1.coord == WEI_AFF
    assert pt2.coord == WEI_AFF

    if pt1.is_infinity:
        return pt2
    elif pt2.is_infinity:
        return pt1
    elif pt1.x == pt2.x:
        if pt1.y != pt2.y or pt1.y == pt1.field(0):
            return type(pt1).identity
        else:
            a = pt1.curve.a
            slope = (3 * pt1.x ** 2 + a) / (2 * pt1.y)
            x3 = slope ** 2 - 2 * pt1.x
            y3 = slope * (pt1.x - x3) - pt1.y
            return type(pt1)((x3, y3))
    else:
        slope = (pt1.y - pt2.y) / (pt1.x - pt2.x)
        x3 = slope ** 2 - pt1.x - pt2.x
        y3 = slope * (pt1.x - x3) - pt1.y
        return type(pt1)((x3, y3))


def wei_hom_proj_to_affine(pt):
    """Map (X:Y:Z) to (X/Z, Y/Z), assumes hom. projective coordinates."""
    new_curve = EllipticCurve(pt.curve, WEI_AFF, Weierstr_Affine_Arithm)
    if pt.z == pt.field(0):
        return new_curve.identity

    if pt.z == pt.field(1):
        return new_curve((pt.x, pt.y))

    z_inv = pt.z.reciprocal()
    return new_curve((pt.x * z_inv, pt.y * z_inv))


def wei_affine_to_hom_proj(pt):
    """Map (x, y) to (x : y : 1), and the point at infinity to (0 : 1 : 0)."""
    new_curve = EllipticCurve(pt.curve, WEI_HOM_PROJ, Weierstr_HomProj_Arithm)
    if pt.is_infinity:
        return new_curve.identity

    return new_curve((pt.x, pt.y, new_curve.field(1)))


def check_equal_in_affine(pt1, pt2):
    pt1_aff = pt1.to_affine()
    pt2_aff = pt2.to_affine()
    return pt1_aff.curve is pt2_aff.curve and pt1_aff.value == pt2_aff.value


def on_affine_curve(pt):
    affine_pt = pt.to_affine()
    if affine_pt.is_infinity:
        return True

    return pt.curve.equation(affine_pt.x, affine_pt.y)


class CurveArithmetic:
    """Abstract base class for curve arithmetic.

    Defaults are defined via mixins. Subtype factory EllipticCurve()
    consumes mixin to add default operators to curve() instance.
    """

    __slots__ = ()

    @property
    def x(self):
        return self.value[0]

    @property
    def y(self):
        return self.value[1]

    @property
    def z(self):
        return self.value[2]

    inverse = negative


class Weierstr_Affine_Arithm(CurveArithmetic):
    """Implement Weierstrass curve arithmetic for affine coordinates."""

    operation = add_weierstrass_affine
    to_affine = _ = lambda x: x  # identity function
    to_homproj = wei_affine_to_hom_proj
    equality = check_equal_in_affine
    on_curve = on_affine_curve

    @property
    def is_infinity(self):
        return self.value == ()


class Weierstr_HomProj_Arithm(CurveArithmetic):
    """Implement Weierstrass curve arithmetic for hom. proj. coordinates.

    Requires curve constant a = 0.
    """

    operation = add_rcb16_hom_proj
    to_affine = wei_hom_proj_to_affine
    to_homproj = _ = lambda x: x  # identity function
    equality = check_equal_in_affine
    on_curve = on_affine_curve

    @property
    def is_infinity(self):
        return self.z == self.field(0)
