"""Computation of the Tate pairing."""

import logging

from zkpairing.elliptic_curves.ec_operations import EllipticCurvePoint
from zkpairing.elliptic_curves.util import embedding_degree
from zkpairing.fields.finite_field import FieldElement

logger = logging.getLogger(__name__)


class Pairing:
    """Pairing class.

    The class inheriting from this class is assumed to have the following attributes and methods:
        field: The field F_q^k over which the pairing is computed.
        r: The order of the subgroup over which the pairing is computed.
        miller_loop: The computation of the Miller function.
    """

    @property
    def embedding_degree(self) -> int:
        """Embedding degree of the subgroup of order `r` with respect to the prime field of `self.field`."""
        return embedding_degree(self.field.prime_field, self.r)

    @property
    def final_exponent(self) -> int:
        """The exponent `(p^k - 1) / r` of the final exponentiation.

        The division is exact when the embedding degree is computed for a prime `r`, as `r` divides `p^k - 1` by
        definition of `k`.
        """
        p = self.field.prime_field.MODULUS
        return (p**self.embedding_degree - 1) // self.r

    def tate_pairing(
        self,
        P: EllipticCurvePoint,  # noqa: N803
        Q: EllipticCurvePoint,  # noqa: N803
    ) -> FieldElement:
        """Reduced Tate pairing e(P,Q).

        Args:
            P (EllipticCurvePoint): A point of order `r` defined over the prime field, embedded in `self.field`.
            Q (EllipticCurvePoint): A point of order `r` defined over `self.field`.

        Returns:
            The Miller function f_{r,P}(Q) raised to the power `(p^k - 1) / r`. If `P` or `Q` is the point at infinity,
            the output is `one`.

        Notes:
            Bilinearity, e(aP,bQ) = e(P,Q)^(ab), and non-degeneracy follow from the algebra and are not checked here.
        """
        exponent = self.final_exponent
        logger.debug("tate_pairing: final exponent has %d bits", exponent.bit_length())
        return self.field.exp(self.miller_loop(P, Q), exponent)
