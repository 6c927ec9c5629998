"""Interface shared by every level of a finite field tower."""

from random import Random
from typing import Protocol, Self, TypeAlias

FieldElement: TypeAlias = int | list["FieldElement"]


class FiniteField(Protocol):
    """Operations a field must expose to be used as the base of an extension, or by a curve.

    Elements are plain values: integers for a prime field, lists of base field elements for an extension.
    Every operation returns a new canonical element and never mutates its arguments.
    """

    @property
    def zero(self) -> FieldElement: ...

    @property
    def one(self) -> FieldElement: ...

    @property
    def prime_field(self) -> Self: ...

    @property
    def depth(self) -> int: ...

    @property
    def extension_degree(self) -> int: ...

    @property
    def order(self) -> int: ...

    def is_zero(self, a: FieldElement) -> bool: ...

    def eq(self, a: FieldElement, b: FieldElement) -> bool: ...

    def neq(self, a: FieldElement, b: FieldElement) -> bool: ...

    def mod(self, a: FieldElement) -> FieldElement: ...

    def add(self, a: FieldElement, b: FieldElement) -> FieldElement: ...

    def sub(self, a: FieldElement, b: FieldElement) -> FieldElement: ...

    def neg(self, a: FieldElement) -> FieldElement: ...

    def mul(self, a: FieldElement, b: FieldElement) -> FieldElement: ...

    def square(self, a: FieldElement) -> FieldElement: ...

    def div(self, a: FieldElement, b: FieldElement) -> FieldElement: ...

    def inv(self, a: FieldElement) -> FieldElement: ...

    def exp(self, base: FieldElement, exponent: int) -> FieldElement: ...

    def from_int(self, n: int) -> FieldElement: ...

    def random_element(self, rng: Random | None = None) -> FieldElement: ...
