"""elliptic_curves package.

This package provides modules for elliptic curve arithmetic over any level of a field tower.

Modules:
    - ec_operations: Contains the EllipticCurvePoint dataclass and the EllipticCurve class for arithmetic over
    E(F): y^2 = x^3 + a·x + b.
    - util: Contains the computation of the embedding degree of a subgroup.

Usage example:
    >>> from zkpairing.elliptic_curves.ec_operations import EllipticCurve
    >>> from zkpairing.fields.prime_field import PrimeField
    >>>
    >>> curve = EllipticCurve(PrimeField(47), curve_a=21, curve_b=15)
    >>> P = curve.point(45, 23)
    >>> curve.is_zero(curve.scalar_mul(P, 17))
    True
"""
