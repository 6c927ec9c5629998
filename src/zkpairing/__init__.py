"""zkpairing: A Python package for finite field towers and bilinear pairings.

The `zkpairing` package provides arithmetic over towers of finite field extensions of arbitrary depth, elliptic curve
arithmetic over any level of such a tower, and the computation of the reduced Tate pairing (line evaluations,
Miller loop and final exponentiation). These are the primitives on which pairing-based cryptography, such as BLS
signatures or zk-SNARK verification, is built.

Usage example:
    Compute the Tate pairing on a toy curve over F_47 with embedding degree 4:

    >>> from zkpairing.bilinear_pairings.model.model_definition import PairingModel
    >>> from zkpairing.elliptic_curves.ec_operations import EllipticCurve
    >>> from zkpairing.fields.prime_field import PrimeField
    >>> from zkpairing.fields.prime_field_extension import ExtensionField
    >>>
    >>> Fq = PrimeField(47)
    >>> Fq4 = ExtensionField(Fq, [5, 0, -4, 0, 1])  # x^4 - 4x^2 + 5
    >>> curve = EllipticCurve(Fq4, Fq4.from_int(21), Fq4.from_int(15))
    >>> P = curve.point([45], [23])
    >>> Q = curve.point([29, 0, 31], [0, 11, 0, 35])
    >>>
    >>> pairing_model = PairingModel(field=Fq4, curve=curve, r=17)
    >>> pairing_model.tate_pairing(P, Q)
    [39, 45, 43, 33]
"""
