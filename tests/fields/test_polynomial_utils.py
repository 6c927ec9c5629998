import pytest

from zkpairing.fields.polynomial_utils import degree, egcd, euclidean_division, square_and_multiply
from zkpairing.fields.prime_field import PrimeField
from zkpairing.fields.prime_field_extension import ExtensionField

Fq = PrimeField(19)
Fq2 = ExtensionField(Fq, [1, 0, 1])
Fq4 = ExtensionField(Fq2, [[18, 18], [0], [1]])


def poly_mul(a, b, base_field):
    product = [base_field.zero] * (len(a) + len(b) - 1)
    for i, a_i in enumerate(a):
        for j, b_j in enumerate(b):
            product[i + j] = base_field.add(product[i + j], base_field.mul(a_i, b_j))
    return product


def poly_add(a, b, base_field):
    length = max(len(a), len(b))
    a = a + [base_field.zero] * (length - len(a))
    b = b + [base_field.zero] * (length - len(b))
    return [base_field.add(a_i, b_i) for a_i, b_i in zip(a, b, strict=True)]


def poly_eq(a, b, base_field):
    return ExtensionField(base_field, [base_field.zero, base_field.one]).eq(a, b)


@pytest.mark.parametrize(
    ("a", "base_field", "expected"),
    [
        ([1, 2, 0, 0], Fq, 1),
        ([3, 0, 19], Fq, 0),
        ([0], Fq, 0),
        ([0, 0, 0], Fq, 0),
        ([1, 0, 5], Fq, 2),
        ([[1], [0, 19], [0]], Fq2, 0),
        ([[1], [0, 1], [0]], Fq2, 1),
        ([[[0]], [[0], [0, 1]]], Fq4, 1),
        ([[[0]], [[0], [19, 38]]], Fq4, 0),
    ],
)
def test_degree(a, base_field, expected):
    assert degree(a, base_field) == expected


@pytest.mark.parametrize(
    ("a", "b", "base_field", "expected_quotient", "expected_remainder"),
    [
        # x^2 + 3x + 2 = (x + 1)(x + 2)
        ([2, 3, 1], [1, 1], Fq, [2, 1], [0]),
        # x^3 = x (x^2 + 1) - x
        ([0, 0, 0, 1], [1, 0, 1], Fq, [0, 1], [0, 18]),
        ([5, 1], [1, 0, 1], Fq, [0], [5, 1]),
        ([4, 6], [2], Fq, [2, 3], [0]),
        ([[0], [0], [1]], [[18, 18], [0], [1]], Fq2, [[1]], [[1, 1]]),
    ],
)
def test_euclidean_division(a, b, base_field, expected_quotient, expected_remainder):
    quotient, remainder = euclidean_division(a, b, base_field)
    assert quotient == expected_quotient
    assert remainder == expected_remainder


@pytest.mark.parametrize(
    ("a", "b", "base_field"),
    [
        ([3, 1, 4, 1, 5, 9, 2, 6], [5, 3, 5], Fq),
        ([7, 0, 0, 0, 1], [2, 11, 1], Fq),
        ([[3, 4], [5], [0, 6], [7, 8]], [[1, 2], [3, 4]], Fq2),
        ([[[1]], [[2], [3]], [[4, 5], [6]]], [[[0], [1]], [[1, 1]]], Fq4),
    ],
)
def test_division_law(a, b, base_field):
    quotient, remainder = euclidean_division(a, b, base_field)
    assert degree(remainder, base_field) < degree(b, base_field) or (
        degree(remainder, base_field) == 0 and base_field.is_zero(remainder[0])
    )
    assert poly_eq(poly_add(poly_mul(quotient, b, base_field), remainder, base_field), a, base_field)


def test_euclidean_division_does_not_mutate_inputs():
    a = [3, 1, 4, 1, 5]
    b = [1, 0, 1]
    euclidean_division(a, b, Fq)
    assert a == [3, 1, 4, 1, 5]
    assert b == [1, 0, 1]


def test_division_by_zero_polynomial_fails():
    with pytest.raises(ZeroDivisionError, match="Division by the zero polynomial"):
        euclidean_division([1, 2, 3], [0, 0], Fq)
    with pytest.raises(ZeroDivisionError, match="Division by the zero polynomial"):
        euclidean_division([[1], [2]], [[0, 19]], Fq2)


@pytest.mark.parametrize(
    ("field", "a"),
    [
        (Fq2, [3, 2]),
        (Fq2, [0, 1]),
        (Fq2, [7]),
        (Fq4, [[1, 2], [3, 4]]),
        (Fq4, [[0], [1]]),
        (Fq4, [[5, 6]]),
    ],
)
def test_egcd(field, a):
    base_field = field.base_field
    s, t, g = egcd(field.modulus_coeffs, a, field)
    assert g == [base_field.one]
    bezout = poly_add(poly_mul(s, field.modulus_coeffs, base_field), poly_mul(t, a, base_field), base_field)
    assert poly_eq(bezout, [base_field.one], base_field)
    assert field.mul(t, a) == field.one


@pytest.mark.parametrize(
    ("field", "base", "exponent", "expected"),
    [
        (Fq, 3, 1, 3),
        (Fq, 3, 5, 15),
        (Fq, 2, 18, 1),
        (Fq2, [0, 1], 2, [18]),
        (Fq2, [0, 1], 4, [1]),
        (Fq2, [1, 1], 2, [0, 2]),
        (Fq4, [[0], [1]], 2, [[1, 1]]),
    ],
)
def test_square_and_multiply(field, base, exponent, expected):
    assert square_and_multiply(base, exponent, field) == expected
