"""toy_47 package.

This package provides the toy pairing over the curve y^2 = x^3 + 21x + 15 defined over F_47.

Modules:
    - parameters: Contains the parameters of the curve, the subgroup and the field F_47^4.
    - toy_47: Contains the fields, the curves, the generators and the PairingModel instance `toy_47`.

Usage example:
    >>> from zkpairing.bilinear_pairings.toy_47.toy_47 import g1_fq4, g2, toy_47
    >>> toy_47.tate_pairing(g1_fq4, g2)
    [39, 45, 43, 33]
"""
