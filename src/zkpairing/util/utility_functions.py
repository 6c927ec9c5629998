"""Utility functions."""


def bit_expansion(n: int) -> list[int]:
    """Binary expansion of a non-negative integer, most significant bit first.

    Example:
        >>> bit_expansion(1)
        [1]
        >>> bit_expansion(6)
        [1, 1, 0]
        >>> bit_expansion(17)
        [1, 0, 0, 0, 1]
    """
    if n < 0:
        msg = f"The integer must be non-negative: n: {n}"
        raise ValueError(msg)
    return [int(bit) for bit in bin(n)[2:]]
