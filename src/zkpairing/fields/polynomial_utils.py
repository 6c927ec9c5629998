"""Polynomial algorithms shared by every level of a field tower.

A polynomial `a0 + a1·x + ... + an·x^n` with coefficients in a field `F` is the list `[a0, a1, ..., an]` of
elements of `F`. The functions below only use the operations exposed by `F` (see `FiniteField`), so they work at any
depth of the tower.
"""

from typing import TYPE_CHECKING

from zkpairing.fields.finite_field import FieldElement, FiniteField
from zkpairing.util.utility_functions import bit_expansion

if TYPE_CHECKING:
    from zkpairing.fields.prime_field_extension import ExtensionField


def degree(a: list[FieldElement], base_field: FiniteField) -> int:
    """Degree of the polynomial `a`, ignoring trailing zero coefficients.

    The zero test is delegated to `base_field`, so a coefficient which is itself a polynomial counts as zero only if
    it is zero at every level below. The degree of a constant polynomial (zero included) is `0`.

    Args:
        a (list[FieldElement]): The coefficients of the polynomial, lowest degree first. Must not be empty.
        base_field (FiniteField): The field the coefficients belong to.

    Returns:
        The largest index `d` such that `a[i]` is zero for every `i > d`.

    Example:
        >>> from zkpairing.fields.prime_field import PrimeField
        >>> degree([1, 2, 0, 0], PrimeField(7))
        1
        >>> degree([3, 0, 7], PrimeField(7))
        0
    """
    d = len(a) - 1
    while d > 0 and base_field.is_zero(a[d]):
        d -= 1
    return d


def euclidean_division(
    a: list[FieldElement], b: list[FieldElement], base_field: FiniteField
) -> tuple[list[FieldElement], list[FieldElement]]:
    """Divide the polynomial `a` by the polynomial `b`.

    Schoolbook long division: from the highest degree down, each step computes one coefficient of the quotient with a
    division in `base_field` and subtracts `quotient_coefficient * b` from the running remainder.

    Args:
        a (list[FieldElement]): The dividend.
        b (list[FieldElement]): The divisor. Must be non-zero.
        base_field (FiniteField): The field the coefficients of `a` and `b` belong to.

    Returns:
        The pair `(quotient, remainder)` such that `a = quotient * b + remainder`, where the remainder is zero or has
        degree strictly smaller than the degree of `b`. Both are trimmed of trailing zeros.

    Raises:
        ZeroDivisionError: If `b` is the zero polynomial.
    """
    deg_a = degree(a, base_field)
    deg_b = degree(b, base_field)
    if deg_b == 0 and base_field.is_zero(b[0]):
        msg = "Division by the zero polynomial"
        raise ZeroDivisionError(msg)

    if deg_a < deg_b:
        remainder = [base_field.mod(coefficient) for coefficient in a[: deg_a + 1]]
        return [base_field.zero], remainder[: degree(remainder, base_field) + 1]

    quotient = [base_field.zero] * (deg_a - deg_b + 1)
    remainder = list(a[: deg_a + 1])
    for i in range(deg_a - deg_b, -1, -1):
        quotient[i] = base_field.div(remainder[i + deg_b], b[deg_b])
        for j in range(deg_b + 1):
            remainder[i + j] = base_field.sub(remainder[i + j], base_field.mul(quotient[i], b[j]))

    return quotient, remainder[: degree(remainder, base_field) + 1]


def egcd(
    m: list[FieldElement], a: list[FieldElement], field: "ExtensionField"
) -> tuple[list[FieldElement], list[FieldElement], list[FieldElement]]:
    """Extended Euclidean algorithm for the modulus of `field` and an element of `field`.

    The running triples `(old_r, r)`, `(old_s, s)`, `(old_t, t)` start at `(m, a)`, `(1, 0)`, `(0, 1)`. At every
    iteration the quotient of `old_r` by `r` is computed over `field.base_field`, and each pair is updated to
    `(current, old - quotient * current)` using the arithmetic of `field`. The loop stops when `r` is zero. The
    resulting gcd is a constant, and every coefficient of the output is divided by it.

    Args:
        m (list[FieldElement]): The modulus polynomial of `field`.
        a (list[FieldElement]): A non-zero element of `field`.
        field (ExtensionField): The field `base_field[x] / (m)`.

    Returns:
        The triple `(s, t, g)` such that `s * m + t * a = g`, with `g` normalised to one. In particular `t` is the
        inverse of `a` in `field`.

    Notes:
        The modulus is assumed irreducible over `field.base_field`; this is not checked.
    """
    base_field = field.base_field
    old_r, r = m, a
    old_s, s = field.one, field.zero
    old_t, t = field.zero, field.one

    while not field.is_zero(r):
        quotient, _ = euclidean_division(old_r, r, base_field)
        old_r, r = r, field.sub(old_r, field.mul(quotient, r))
        old_s, s = s, field.sub(old_s, field.mul(quotient, s))
        old_t, t = t, field.sub(old_t, field.mul(quotient, t))

    gcd = old_r[0]
    return (
        [base_field.div(coefficient, gcd) for coefficient in old_s[: degree(old_s, base_field) + 1]],
        [base_field.div(coefficient, gcd) for coefficient in old_t[: degree(old_t, base_field) + 1]],
        [base_field.div(coefficient, gcd) for coefficient in old_r[: degree(old_r, base_field) + 1]],
    )


def square_and_multiply(base: FieldElement, exponent: int, field: FiniteField) -> FieldElement:
    """Left-to-right binary exponentiation.

    Args:
        base (FieldElement): The element to exponentiate, already reduced in `field`.
        exponent (int): A positive exponent.
        field (FiniteField): The field `base` belongs to.

    Returns:
        `base^exponent` computed with `field.mul`.
    """
    result = base
    for bit in bit_expansion(exponent)[1:]:
        result = field.mul(result, result)
        if bit == 1:
            result = field.mul(result, base)
    return result
