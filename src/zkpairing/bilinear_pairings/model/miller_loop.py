"""Computation of the Miller loop."""

import logging

from zkpairing.elliptic_curves.ec_operations import EllipticCurvePoint
from zkpairing.fields.finite_field import FieldElement
from zkpairing.util.utility_functions import bit_expansion

logger = logging.getLogger(__name__)


class MillerLoop:
    """Miller loop operation.

    The class inheriting from this class is assumed to have the following attributes and methods:
        field: The field F_q^k over which the pairing is computed.
        curve: The elliptic curve E(F_q^k).
        r: The order of the subgroup over which the pairing is computed.
        line_evaluation: The evaluation of the line through two points at a third one.
    """

    def miller_loop(
        self,
        P: EllipticCurvePoint,  # noqa: N803
        Q: EllipticCurvePoint,  # noqa: N803
    ) -> FieldElement:
        """Compute the Miller function f_{r,P} evaluated at `Q`.

        This is the BKLS-GHS version of Miller's algorithm: vertical lines are omitted, which is correct when the
        embedding degree is even and the output is raised to the final exponent.

        Starting from `R = P` and `f = 1`, for every bit of `r` from the second most significant one down to the
        second least significant one:
            - doubling step: `f = f^2 * l_{R,R}(Q)`, `R = 2R`,
            - if the bit is 1, addition step: `f = f * l_{R,P}(Q)`, `R = R + P`.
        The last bit only contributes a final doubling step `f = f^2 * l_{R,R}(Q)`, without updating `R`.

        Args:
            P (EllipticCurvePoint): A point of order `r` defined over the prime field, embedded in `self.field`.
            Q (EllipticCurvePoint): A point of order `r` defined over `self.field`.

        Returns:
            The value of the Miller function, an element of `self.field`. If `P` or `Q` is the point at infinity,
            the output is `one`.
        """
        field = self.field
        curve = self.curve

        if curve.is_zero(P) or curve.is_zero(Q):
            return field.one

        bits = bit_expansion(self.r)
        logger.debug("miller_loop: %d doubling steps, %d addition steps", len(bits) - 1, sum(bits[1:-1]))

        R, f = P, field.one  # noqa: N806
        for bit in bits[1:-1]:
            f = field.mul(field.square(f), self.line_evaluation(R, R, Q))
            R = curve.add(R, R)  # noqa: N806
            if bit == 1:
                f = field.mul(f, self.line_evaluation(R, P, Q))
                R = curve.add(R, P)  # noqa: N806

        return field.mul(field.square(f), self.line_evaluation(R, R, Q))
