"""Evaluation of the lines used in the Miller loop."""

from zkpairing.elliptic_curves.ec_operations import EllipticCurvePoint
from zkpairing.fields.finite_field import FieldElement


class LineFunctions:
    """Line evaluation.

    The class inheriting from this class is assumed to have the following attributes:
        field: The field F_q^k over which the pairing is computed.
        curve: The elliptic curve E(F_q^k).
    """

    def line_evaluation(
        self,
        P: EllipticCurvePoint,  # noqa: N803
        Q: EllipticCurvePoint,  # noqa: N803
        T: EllipticCurvePoint,  # noqa: N803
    ) -> FieldElement:
        """Evaluate at `T` the line through `P` and `Q`.

        The line is:
            - the chord y = m·x + c through `P` and `Q` if `P.x != Q.x`,
            - the tangent y = m·x + c at `P` if `P = Q`,
            - the vertical line through `P` otherwise.
        For the first two, the function returns `T.y - (m·T.x + c)`. For the vertical line it returns `T.y - P.x`.

        Args:
            P (EllipticCurvePoint): First point on `self.curve`.
            Q (EllipticCurvePoint): Second point on `self.curve`.
            T (EllipticCurvePoint): The point at which the line is evaluated.

        Returns:
            The evaluation of the line at `T`, an element of `self.field`.

        Raises:
            ValueError: If one of `P`, `Q`, `T` is the point at infinity.
        """
        field = self.field
        curve = self.curve

        if curve.is_zero(P) or curve.is_zero(Q) or curve.is_zero(T):
            msg = "Cannot evaluate line at zero"
            raise ValueError(msg)

        if field.neq(P.x, Q.x):
            gradient = field.div(field.sub(Q.y, P.y), field.sub(Q.x, P.x))
        elif field.eq(P.y, Q.y):
            gradient = field.div(
                field.add(field.mul(field.from_int(3), field.square(P.x)), curve.curve_a),
                field.mul(field.from_int(2), P.y),
            )
        else:
            return field.sub(T.y, P.x)

        intercept = field.sub(P.y, field.mul(gradient, P.x))
        return field.sub(T.y, field.add(field.mul(gradient, T.x), intercept))
