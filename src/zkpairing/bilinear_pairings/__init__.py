"""bilinear_pairings package.

This package provides subpackages for computing bilinear pairings.

Subpackages:
    - model: Contains modules for computing line evaluations, the Miller loop and the reduced Tate pairing.
    - toy_47: Contains the instantiation of the pairing over a toy curve defined over F_47.

Usage example:
    >>> from zkpairing.bilinear_pairings.toy_47.toy_47 import g1_fq4, g2, toy_47
    >>>
    >>> e = toy_47.tate_pairing(g1_fq4, g2)
    >>> toy_47.field.eq(toy_47.tate_pairing(g1_fq4, toy_47.curve.scalar_mul(g2, 2)), toy_47.field.square(e))
    True
"""
