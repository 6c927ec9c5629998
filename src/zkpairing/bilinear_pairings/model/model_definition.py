"""Pairing Model."""

from zkpairing.bilinear_pairings.model.line_functions import LineFunctions
from zkpairing.bilinear_pairings.model.miller_loop import MillerLoop
from zkpairing.bilinear_pairings.model.pairing import Pairing
from zkpairing.elliptic_curves.ec_operations import EllipticCurve
from zkpairing.fields.finite_field import FiniteField


class PairingModel(LineFunctions, MillerLoop, Pairing):
    """Pairing Model."""

    def __init__(self, field: FiniteField, curve: EllipticCurve, r: int):
        """Initialise the pairing model.

        Args:
            field (FiniteField): The field F_q^k over which the pairing is computed. Usually an extension field whose
                degree over the prime field is the embedding degree.
            curve (EllipticCurve): The elliptic curve defined over `field`.
            r (int): The order of the subgroup over which the pairing is computed.

        Raises:
            ValueError: If `curve` is not defined over `field`, or if `r < 2`.
        """
        if curve.field is not field:
            msg = f"The curve must be defined over the pairing field: curve.field: {curve.field}, field: {field}"
            raise ValueError(msg)
        if r < 2:
            msg = f"The subgroup order must be at least 2: r: {r}"
            raise ValueError(msg)

        self.field = field
        self.curve = curve
        self.r = r
