"""Arithmetic over elliptic curves in short Weierstrass form y^2 = x^3 + a·x + b."""

from dataclasses import dataclass

from zkpairing.fields.finite_field import FieldElement, FiniteField


@dataclass(frozen=True)
class EllipticCurvePoint:
    """Point of an elliptic curve in affine coordinates.

    The point at infinity is encoded as `EllipticCurvePoint(None, None)`.

    Attributes:
        x (FieldElement | None): The x-coordinate of the point.
        y (FieldElement | None): The y-coordinate of the point.
    """

    x: FieldElement | None
    y: FieldElement | None

    def is_infinity(self) -> bool:
        return self.x is None and self.y is None


class EllipticCurve:
    """Arithmetic over the elliptic curve E(F) defined by y^2 = x^3 + a·x + b.

    The field `F` can be any level of a field tower: coordinates are elements of `field` and all the arithmetic is
    delegated to it. Arithmetic is performed in affine coordinates.

    Attributes:
        field: The field over which the curve is defined.
        curve_a: The `a` coefficient in the Short-Weierstrass equation of the curve (an element of `field`).
        curve_b: The `b` coefficient in the Short-Weierstrass equation of the curve (an element of `field`).
    """

    def __init__(self, field: FiniteField, curve_a: FieldElement, curve_b: FieldElement):
        """Initialise the elliptic curve group E(F).

        Args:
            field (FiniteField): The field over which the curve is defined.
            curve_a (FieldElement): The `a` coefficient in the Short-Weierstrass equation of the curve.
            curve_b (FieldElement): The `b` coefficient in the Short-Weierstrass equation of the curve.

        Raises:
            ValueError: If the curve is singular, i.e., 4·a^3 + 27·b^2 = 0.
        """
        self.field = field
        self.curve_a = field.mod(curve_a)
        self.curve_b = field.mod(curve_b)

        discriminant = field.add(
            field.mul(field.from_int(4), field.mul(self.curve_a, field.square(self.curve_a))),
            field.mul(field.from_int(27), field.square(self.curve_b)),
        )
        if field.is_zero(discriminant):
            msg = f"The curve is singular: curve_a: {curve_a}, curve_b: {curve_b}"
            raise ValueError(msg)

    def __repr__(self) -> str:
        return f"EllipticCurve(field={self.field!r}, curve_a={self.curve_a}, curve_b={self.curve_b})"

    @property
    def a(self) -> FieldElement:
        return self.curve_a

    @property
    def b(self) -> FieldElement:
        return self.curve_b

    @property
    def zero(self) -> EllipticCurvePoint:
        """The point at infinity, identity element of the group law."""
        return EllipticCurvePoint(None, None)

    def point(self, x: FieldElement, y: FieldElement) -> EllipticCurvePoint:
        """Build the point `(x, y)` with reduced coordinates.

        Raises:
            ValueError: If `(x, y)` does not satisfy the curve equation.
        """
        P = EllipticCurvePoint(self.field.mod(x), self.field.mod(y))  # noqa: N806
        if not self.is_on_curve(P):
            msg = f"The point is not on the curve: x: {x}, y: {y}"
            raise ValueError(msg)
        return P

    def is_zero(self, P: EllipticCurvePoint) -> bool:  # noqa: N803
        return P.is_infinity()

    def is_on_curve(self, P: EllipticCurvePoint) -> bool:  # noqa: N803
        """Check whether `P` satisfies the curve equation. The point at infinity is on the curve."""
        if self.is_zero(P):
            return True
        field = self.field
        lhs = field.square(P.y)
        rhs = field.add(field.mul(field.add(field.square(P.x), self.curve_a), P.x), self.curve_b)
        return field.eq(lhs, rhs)

    def eq(self, P: EllipticCurvePoint, Q: EllipticCurvePoint) -> bool:  # noqa: N803
        if self.is_zero(P) or self.is_zero(Q):
            return self.is_zero(P) and self.is_zero(Q)
        return self.field.eq(P.x, Q.x) and self.field.eq(P.y, Q.y)

    def negate(self, P: EllipticCurvePoint) -> EllipticCurvePoint:  # noqa: N803
        if self.is_zero(P):
            return P
        return EllipticCurvePoint(P.x, self.field.neg(P.y))

    def double(self, P: EllipticCurvePoint) -> EllipticCurvePoint:  # noqa: N803
        """Compute `2P` using the tangent line at `P`."""
        field = self.field
        if self.is_zero(P) or field.is_zero(P.y):
            return self.zero

        gradient = field.div(
            field.add(field.mul(field.from_int(3), field.square(P.x)), self.curve_a),
            field.mul(field.from_int(2), P.y),
        )
        x = field.sub(field.square(gradient), field.mul(field.from_int(2), P.x))
        y = field.sub(field.mul(gradient, field.sub(P.x, x)), P.y)
        return EllipticCurvePoint(x, y)

    def add(self, P: EllipticCurvePoint, Q: EllipticCurvePoint) -> EllipticCurvePoint:  # noqa: N803
        """Compute `P + Q`.

        The identity, doubling and `Q = -P` cases are handled here, so the method accepts any pair of points.
        """
        if self.is_zero(P):
            return Q
        if self.is_zero(Q):
            return P

        field = self.field
        if field.eq(P.x, Q.x):
            if field.eq(P.y, Q.y):
                return self.double(P)
            return self.zero

        gradient = field.div(field.sub(Q.y, P.y), field.sub(Q.x, P.x))
        x = field.sub(field.sub(field.square(gradient), P.x), Q.x)
        y = field.sub(field.mul(gradient, field.sub(P.x, x)), P.y)
        return EllipticCurvePoint(x, y)

    def scalar_mul(self, P: EllipticCurvePoint, n: int) -> EllipticCurvePoint:  # noqa: N803
        """Compute `n * P` with double-and-add. Negative scalars multiply `-P`."""
        if n < 0:
            return self.scalar_mul(self.negate(P), -n)

        result, addend = self.zero, P
        while n:
            if n & 1:
                result = self.add(result, addend)
            addend = self.double(addend)
            n >>= 1
        return result
