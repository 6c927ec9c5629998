"""Arithmetic in the prime field F_p."""

from random import Random


class PrimeField:
    """Arithmetic on residues modulo a prime `p`.

    Elements are Python integers. Inputs may be any integer, outputs are always reduced to `[0, p)`.

    Attributes:
        MODULUS: The characteristic `p` of the field.
    """

    def __init__(self, p: int):
        """Initialise F_p.

        Args:
            p: The characteristic of the field. Primality is not checked.
        """
        if p < 2:
            msg = f"The characteristic must be at least 2: p: {p}"
            raise ValueError(msg)
        self.MODULUS = p

    def __repr__(self) -> str:
        return f"PrimeField(p={self.MODULUS})"

    @property
    def p(self) -> int:
        return self.MODULUS

    @property
    def zero(self) -> int:
        return 0

    @property
    def one(self) -> int:
        return 1

    @property
    def prime_field(self) -> "PrimeField":
        return self

    @property
    def depth(self) -> int:
        return 0

    @property
    def extension_degree(self) -> int:
        return 1

    @property
    def order(self) -> int:
        return self.MODULUS

    def is_zero(self, a: int) -> bool:
        return a % self.MODULUS == 0

    def eq(self, a: int, b: int) -> bool:
        return (a - b) % self.MODULUS == 0

    def neq(self, a: int, b: int) -> bool:
        return not self.eq(a, b)

    def mod(self, a: int) -> int:
        return a % self.MODULUS

    def add(self, a: int, b: int) -> int:
        return (a + b) % self.MODULUS

    def sub(self, a: int, b: int) -> int:
        return (a - b) % self.MODULUS

    def neg(self, a: int) -> int:
        return -a % self.MODULUS

    def mul(self, a: int, b: int) -> int:
        return (a * b) % self.MODULUS

    def square(self, a: int) -> int:
        return (a * a) % self.MODULUS

    def inv(self, a: int) -> int:
        """Multiplicative inverse of `a`.

        Raises:
            ZeroDivisionError: If `a` is zero modulo `p`.
        """
        if self.is_zero(a):
            msg = "Zero has no multiplicative inverse"
            raise ZeroDivisionError(msg)
        return pow(a, -1, self.MODULUS)

    def div(self, a: int, b: int) -> int:
        """Compute `a / b` in F_p.

        Raises:
            ZeroDivisionError: If `b` is zero modulo `p`.
        """
        if self.is_zero(b):
            msg = "Division by zero"
            raise ZeroDivisionError(msg)
        return (a * pow(b, -1, self.MODULUS)) % self.MODULUS

    def exp(self, base: int, exponent: int) -> int:
        """Compute `base^exponent` in F_p.

        Args:
            base (int): The element to exponentiate.
            exponent (int): The exponent, possibly negative.

        Returns:
            The reduced value of `base^exponent`.

        Raises:
            ValueError: If both `base` and `exponent` are zero.

        Notes:
            A zero `base` with a non-zero `exponent` (negative included) returns zero.
        """
        base = self.mod(base)
        if base == 0:
            if exponent == 0:
                msg = "0^0 is undefined"
                raise ValueError(msg)
            return 0
        if exponent < 0:
            base, exponent = self.inv(base), -exponent
        return pow(base, exponent, self.MODULUS)

    def from_int(self, n: int) -> int:
        return n % self.MODULUS

    def random_element(self, rng: Random | None = None) -> int:
        """Return a uniformly random element of F_p, drawn from `rng` if supplied."""
        rng = rng if rng is not None else Random()
        return rng.randrange(self.MODULUS)
