"""Utility functions for curves used in pairings."""

import logging

from zkpairing.fields.prime_field import PrimeField

logger = logging.getLogger(__name__)


def embedding_degree(prime_field: PrimeField, r: int) -> int:
    """Embedding degree of the subgroup of order `r` of a curve defined over `prime_field`.

    The embedding degree is the smallest integer `k >= 1` such that `r` divides `p^k - 1`, i.e., the multiplicative
    order of `p` modulo `r`. It is the degree of the smallest extension of F_p containing the `r`-th roots of unity.

    Args:
        prime_field (PrimeField): The field F_p over which the curve is defined.
        r (int): The order of the subgroup.

    Returns:
        The embedding degree `k`.

    Raises:
        ValueError: If `r < 2` or `gcd(r, p) != 1`, in which case no such `k` exists.

    Example:
        >>> embedding_degree(PrimeField(47), 17)
        4
    """
    p = prime_field.MODULUS
    if r < 2:
        msg = f"The subgroup order must be at least 2: r: {r}"
        raise ValueError(msg)
    if p % r == 0:
        msg = f"The subgroup order must be coprime to the characteristic: p: {p}, r: {r}"
        raise ValueError(msg)

    k, power = 1, p % r
    while power != 1:
        if k >= r:
            msg = f"p has no finite multiplicative order modulo r: p: {p}, r: {r}"
            raise ValueError(msg)
        power = (power * p) % r
        k += 1

    logger.debug("embedding_degree: p=%d r=%d k=%d", p, r, k)
    return k
