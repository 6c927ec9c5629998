from dataclasses import dataclass

import pytest

from zkpairing.elliptic_curves.ec_operations import EllipticCurve, EllipticCurvePoint
from zkpairing.fields.prime_field import PrimeField
from zkpairing.fields.prime_field_extension import ExtensionField


@dataclass
class CurveOverFq:
    # Define the curve y^2 = x^3 + 21x + 15 over F_47
    Fq = PrimeField(47)
    curve = EllipticCurve(Fq, 21, 15)
    generator = curve.point(45, 23)
    order = 17


@dataclass
class CurveOverFq4:
    # Define the same curve over F_47^4 = F_47[x] / (x^4 - 4x^2 + 5)
    Fq = PrimeField(47)
    Fq4 = ExtensionField(Fq, [5, 0, -4, 0, 1])
    curve = EllipticCurve(Fq4, Fq4.from_int(21), Fq4.from_int(15))
    generator = curve.point([29, 0, 31], [0, 11, 0, 35])
    order = 17


configurations = [CurveOverFq, CurveOverFq4]


@pytest.mark.parametrize("config", configurations)
def test_generator_has_expected_order(config):
    curve, P = config.curve, config.generator
    assert curve.is_zero(curve.scalar_mul(P, config.order))
    for n in range(1, config.order):
        assert not curve.is_zero(curve.scalar_mul(P, n))


@pytest.mark.parametrize("config", configurations)
def test_group_laws(config):
    curve, P = config.curve, config.generator
    multiples = [curve.scalar_mul(P, n) for n in range(config.order)]

    for n, nP in enumerate(multiples):
        assert curve.is_on_curve(nP)
        assert curve.eq(curve.add(nP, curve.zero), nP)
        assert curve.eq(curve.add(curve.zero, nP), nP)
        assert curve.is_zero(curve.add(nP, curve.negate(nP)))
        for m in (1, 5, 16):
            mP = multiples[m]
            expected = multiples[(n + m) % config.order]
            assert curve.eq(curve.add(nP, mP), expected)
            assert curve.eq(curve.add(mP, nP), expected)

    a, b, c = multiples[3], multiples[7], multiples[11]
    assert curve.eq(curve.add(curve.add(a, b), c), curve.add(a, curve.add(b, c)))


@pytest.mark.parametrize("config", configurations)
def test_double(config):
    curve, P = config.curve, config.generator
    assert curve.eq(curve.double(P), curve.add(P, P))
    assert curve.eq(curve.double(P), curve.scalar_mul(P, 2))
    assert curve.is_zero(curve.double(curve.zero))


@pytest.mark.parametrize("config", configurations)
def test_scalar_mul(config):
    curve, P = config.curve, config.generator
    assert curve.is_zero(curve.scalar_mul(P, 0))
    assert curve.eq(curve.scalar_mul(P, 1), P)
    assert curve.eq(curve.scalar_mul(P, config.order + 1), P)
    assert curve.eq(curve.scalar_mul(P, -1), curve.negate(P))
    assert curve.eq(curve.scalar_mul(P, -5), curve.scalar_mul(P, config.order - 5))
    assert curve.is_zero(curve.scalar_mul(curve.zero, 7))


def test_double_over_fq():
    curve = CurveOverFq.curve
    assert curve.double(CurveOverFq.generator) == EllipticCurvePoint(12, 16)


def test_point_of_order_two_doubles_to_zero():
    # y^2 = x^3 - x over F_19 has the point (1, 0) of order 2
    curve = EllipticCurve(PrimeField(19), -1, 0)
    T = curve.point(1, 0)  # noqa: N806
    assert curve.is_zero(curve.double(T))
    assert curve.is_zero(curve.add(T, T))


def test_point_is_reduced():
    curve = CurveOverFq.curve
    assert curve.point(45 + 47, 23 - 47) == EllipticCurvePoint(45, 23)


def test_negation():
    curve = CurveOverFq.curve
    assert curve.negate(CurveOverFq.generator) == EllipticCurvePoint(45, 24)
    assert curve.is_zero(curve.negate(curve.zero))


def test_infinity():
    curve = CurveOverFq.curve
    assert curve.zero == EllipticCurvePoint(None, None)
    assert curve.zero.is_infinity()
    assert curve.is_on_curve(curve.zero)
    assert curve.eq(curve.zero, curve.zero)
    assert not curve.eq(curve.zero, CurveOverFq.generator)
    assert not curve.eq(CurveOverFq.generator, curve.zero)


def test_coefficients():
    curve = CurveOverFq4.curve
    assert curve.a == [21]
    assert curve.b == [15]


def test_point_not_on_curve_fails():
    with pytest.raises(ValueError, match="The point is not on the curve"):
        CurveOverFq.curve.point(45, 22)


@pytest.mark.parametrize(("curve_a", "curve_b"), [(0, 0), (-3, 2)])
def test_singular_curve_fails(curve_a, curve_b):
    with pytest.raises(ValueError, match="The curve is singular"):
        EllipticCurve(PrimeField(47), curve_a, curve_b)
