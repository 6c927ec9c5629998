"""fields package.

This package provides modules for arithmetic in prime fields and in towers of extension fields.

Modules:
    - finite_field: Contains the FiniteField protocol implemented by every level of a tower.
    - prime_field: Contains the PrimeField class for arithmetic over F_p.
    - prime_field_extension: Contains the ExtensionField class for arithmetic over F[x] / (m(x)), where F is any
    field implementing FiniteField, including another ExtensionField.
    - polynomial_utils: Contains the algorithms shared by all levels: degree, Euclidean division, extended Euclidean
    algorithm and square-and-multiply.

Usage example:
    >>> from zkpairing.fields.prime_field import PrimeField
    >>> from zkpairing.fields.prime_field_extension import ExtensionField
    >>> Fq = PrimeField(19)
    >>> Fq2 = ExtensionField(Fq, [1, 0, 1])  # u^2 + 1
    >>> Fq4 = ExtensionField(Fq2, [[18, 18], [0], [1]])  # v^2 - (1 + u)
    >>> Fq2.mul([3, 2], [-6, 7])
    [6, 9]
    >>> Fq4.mul(Fq4.inv([[3, 2], [1]]), [[3, 2], [1]])
    [[1]]
"""
