"""Arithmetic in extension fields F[x] / (m(x)), for any base field F.

Extensions nest: the base field of an `ExtensionField` can itself be an `ExtensionField`, which gives towers such as
F_p -> F_p[u] / (u^2 + 1) -> F_p[u][v] / (v^2 - 1 - u) of arbitrary depth.
"""

from random import Random

from zkpairing.fields.finite_field import FieldElement, FiniteField
from zkpairing.fields.polynomial_utils import degree, egcd, euclidean_division, square_and_multiply


class ExtensionField:
    """Arithmetic in the field `base_field[x] / (m(x))`.

    An element `a0 + a1·x + ... + an·x^n` is the list `[a0, a1, ..., an]` of elements of `base_field`. Elements
    returned by the public methods are canonical: reduced modulo `m(x)`, with no trailing zeros, and with zero
    represented as `[base_field.zero]`.

    Attributes:
        base_field: The field one level down in the tower.
        modulus_coeffs: The coefficients of `m(x)`, lowest degree first, reduced in `base_field`.
        degree: The degree of `m(x)`, i.e., the degree of the extension over `base_field`.
    """

    def __init__(self, base_field: FiniteField, modulus_coeffs: list[FieldElement]):
        """Initialise the extension.

        Args:
            base_field (FiniteField): The field over which the extension is built.
            modulus_coeffs (list[FieldElement]): The coefficients of the modulus `m(x)`, lowest degree first. The
                modulus must be irreducible over `base_field`; this is not checked.

        Raises:
            ValueError: If the modulus has degree smaller than 1 or its leading coefficient is zero.
        """
        if len(modulus_coeffs) < 2:
            msg = f"The modulus must have degree at least one: modulus_coeffs: {modulus_coeffs}"
            raise ValueError(msg)
        if base_field.is_zero(modulus_coeffs[-1]):
            msg = f"The leading coefficient of the modulus must be non-zero: modulus_coeffs: {modulus_coeffs}"
            raise ValueError(msg)

        self.base_field = base_field
        self.modulus_coeffs = [base_field.mod(coefficient) for coefficient in modulus_coeffs]
        self.degree = len(modulus_coeffs) - 1

    def __repr__(self) -> str:
        return f"ExtensionField(base_field={self.base_field!r}, modulus_coeffs={self.modulus_coeffs})"

    @property
    def zero(self) -> list[FieldElement]:
        return [self.base_field.zero]

    @property
    def one(self) -> list[FieldElement]:
        return [self.base_field.one]

    @property
    def prime_field(self) -> FiniteField:
        """The prime field at the bottom of the tower."""
        return self.base_field.prime_field

    @property
    def depth(self) -> int:
        """Number of extensions between this field and its prime field."""
        return self.base_field.depth + 1

    @property
    def extension_degree(self) -> int:
        """Degree of this field over its prime field."""
        return self.base_field.extension_degree * self.degree

    @property
    def order(self) -> int:
        return self.base_field.order**self.degree

    # Comparators

    def is_zero(self, a: list[FieldElement]) -> bool:
        return degree(a, self.base_field) == 0 and self.base_field.is_zero(a[0])

    def eq(self, a: list[FieldElement], b: list[FieldElement]) -> bool:
        """Check whether `a` and `b` represent the same polynomial, ignoring trailing zeros."""
        deg_a = degree(a, self.base_field)
        if deg_a != degree(b, self.base_field):
            return False
        return all(self.base_field.eq(a[i], b[i]) for i in range(deg_a + 1))

    def neq(self, a: list[FieldElement], b: list[FieldElement]) -> bool:
        return not self.eq(a, b)

    # Reduction

    def mod(self, a: list[FieldElement]) -> list[FieldElement]:
        """Reduce the polynomial `a` to its canonical representative.

        If the degree of `a` is smaller than the degree of the modulus, only the coefficients are reduced in the base
        field. Otherwise, `a` is replaced by the remainder of its division by the modulus.

        Args:
            a (list[FieldElement]): Any polynomial with coefficients in the base field.

        Returns:
            The canonical element of the field congruent to `a`.
        """
        deg_a = degree(a, self.base_field)
        if deg_a < self.degree:
            reduced = [self.base_field.mod(a[i]) for i in range(deg_a + 1)]
            return reduced[: degree(reduced, self.base_field) + 1]

        _, remainder = euclidean_division(a, self.modulus_coeffs, self.base_field)
        return remainder

    # Arithmetic

    def add(self, a: list[FieldElement], b: list[FieldElement]) -> list[FieldElement]:
        return self.mod(self.__coefficient_wise(a, b, self.base_field.add))

    def sub(self, a: list[FieldElement], b: list[FieldElement]) -> list[FieldElement]:
        return self.mod(self.__coefficient_wise(a, b, self.base_field.sub))

    def neg(self, a: list[FieldElement]) -> list[FieldElement]:
        return self.mod([self.base_field.neg(a[i]) for i in range(degree(a, self.base_field) + 1)])

    def mul(self, a: list[FieldElement], b: list[FieldElement]) -> list[FieldElement]:
        """Multiply `a` and `b` modulo the modulus.

        Constant operands are handled with a single base field multiplication or with a scalar sweep. Otherwise, the
        full product is accumulated coefficient by coefficient and then reduced.
        """
        base_field = self.base_field
        deg_a = degree(a, base_field)
        deg_b = degree(b, base_field)

        if deg_a == 0 and deg_b == 0:
            return [base_field.mul(a[0], b[0])]
        if deg_a == 0:
            return self.mod([base_field.mul(a[0], b[i]) for i in range(deg_b + 1)])
        if deg_b == 0:
            return self.mod([base_field.mul(a[i], b[0]) for i in range(deg_a + 1)])

        product = [base_field.zero] * (deg_a + deg_b + 1)
        for i in range(deg_a + 1):
            for j in range(deg_b + 1):
                product[i + j] = base_field.add(product[i + j], base_field.mul(a[i], b[j]))
        return self.mod(product)

    def square(self, a: list[FieldElement]) -> list[FieldElement]:
        return self.mul(a, a)

    def inv(self, a: list[FieldElement]) -> list[FieldElement]:
        """Multiplicative inverse of `a`, computed with the extended Euclidean algorithm.

        Raises:
            ZeroDivisionError: If `a` is zero.
        """
        a = self.mod(a)
        if self.is_zero(a):
            msg = "Zero has no multiplicative inverse"
            raise ZeroDivisionError(msg)
        _, inverse, _ = egcd(self.modulus_coeffs, a, self)
        return self.mod(inverse)

    def div(self, a: list[FieldElement], b: list[FieldElement]) -> list[FieldElement]:
        """Compute `a / b`.

        Raises:
            ZeroDivisionError: If `b` is zero.
        """
        base_field = self.base_field
        deg_a = degree(a, base_field)
        deg_b = degree(b, base_field)

        if deg_a == 0 and deg_b == 0:
            return [base_field.div(a[0], b[0])]
        if deg_b == 0:
            if base_field.is_zero(b[0]):
                msg = "Division by zero"
                raise ZeroDivisionError(msg)
            return self.mod([base_field.div(a[i], b[0]) for i in range(deg_a + 1)])
        return self.mul(a, self.inv(b))

    def exp(self, base: list[FieldElement], exponent: int) -> list[FieldElement]:
        """Compute `base^exponent` with square-and-multiply.

        Args:
            base (list[FieldElement]): The element to exponentiate. It is reduced before use.
            exponent (int): The exponent, possibly negative.

        Returns:
            The canonical element `base^exponent`.

        Raises:
            ValueError: If `base` is zero and `exponent` is zero.
        """
        base = self.mod(base)

        if self.is_zero(base):
            if exponent == 0:
                msg = "0^0 is undefined"
                raise ValueError(msg)
            return self.zero

        if exponent < 0:
            base = self.inv(base)
            exponent = -exponent

        if exponent == 0:
            return self.one

        return square_and_multiply(base, exponent, self)

    # Construction of elements

    def from_int(self, n: int) -> list[FieldElement]:
        """Image of the integer `n` in the field."""
        return self.mod([self.base_field.from_int(n)])

    def embed(self, a: FieldElement) -> list[FieldElement]:
        """Image of the base field element `a` in the field."""
        return self.mod([a])

    def random_element(self, rng: Random | None = None) -> list[FieldElement]:
        """Return a uniformly random element of the field, drawn from `rng` if supplied."""
        rng = rng if rng is not None else Random()
        return self.mod([self.base_field.random_element(rng) for _ in range(self.degree)])

    def __coefficient_wise(self, a: list[FieldElement], b: list[FieldElement], operation) -> list[FieldElement]:
        """Apply `operation` to the coefficients of `a` and `b`, padding the shorter one with zeros."""
        zero = self.base_field.zero
        deg_a = degree(a, self.base_field)
        deg_b = degree(b, self.base_field)
        return [
            operation(a[i] if i <= deg_a else zero, b[i] if i <= deg_b else zero)
            for i in range(max(deg_a, deg_b) + 1)
        ]
