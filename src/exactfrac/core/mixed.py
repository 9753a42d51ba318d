from __future__ import annotations
import math
from dataclasses import dataclass
from typing import Any, Union

from exactfrac.core.constants import DEFAULT_PRECISION
from exactfrac.core.errors import DivisionByZero, IndexOutOfRange
from exactfrac.core.fraction import Fraction
from exactfrac.core.parsing import ParseResult, attempt, split_mixed_fraction
from exactfrac.core.typing import FloatLike, IntegerLike
from exactfrac.core.utils import as_integer, checked, rational_hash, sign


@dataclass(frozen=True, eq=False, slots=True)
class MixedFraction:
    """
    A whole part plus a proper fraction, e.g. ``3 1/3``.

    The sign lives in the whole part and the fractional part is non-negative. The only exception is a
    value whose magnitude is below one: the whole part is zero and cannot carry a sign, so the numerator
    does (``-1/3`` is ``MixedFraction(0, -1, 3)``).

    Invariant: ``denominator > 0``. If ``whole != 0`` then ``0 <= numerator <= denominator`` and the sign is the
    sign of ``whole``. If ``whole == 0`` then ``-denominator <= numerator <= denominator`` and the sign is the
    sign of ``numerator``.

    Improper input is normalized on construction, ``MixedFraction(1, 7, 3)`` becomes ``3 1/3``. The sign of
    the fractional part is folded into the overall sign, so ``MixedFraction(3, -4, 5)`` is ``-3 4/5``.
    """

    whole: int
    numerator: int
    denominator: int

    def __post_init__(self):
        whole = as_integer(self.whole, "whole")
        numerator = as_integer(self.numerator, "numerator")
        denominator = as_integer(self.denominator, "denominator")
        if denominator == 0:
            raise DivisionByZero("The denominator cannot be zero")

        fraction_sign = sign(numerator) * sign(denominator) if numerator != 0 else 1
        value_sign = sign(whole) * fraction_sign
        whole, numerator, denominator = abs(whole), abs(numerator), abs(denominator)

        # make the fraction proper
        if numerator > denominator:
            whole += numerator // denominator
            numerator %= denominator

        if whole != 0:
            whole *= value_sign
        else:
            numerator *= value_sign
        object.__setattr__(self, "whole", checked(whole, "whole"))
        object.__setattr__(self, "numerator", checked(numerator, "numerator"))
        object.__setattr__(self, "denominator", checked(denominator, "denominator"))

    @classmethod
    def from_string(cls, text: str) -> MixedFraction:
        """
        Parses "a b/c" with exactly one space between the whole part and the fraction. A minus sign may
        precede either "a" or "b", glyphs are accepted ("3 ¾" or "3¾").

        Raises:
            MalformedMixedFraction: if the text does not follow the grammar
            DivisionByZero: if the denominator is zero
        """
        return parse_mixed_fraction(text).unwrap()

    @classmethod
    def from_fraction(cls, fraction: Fraction) -> MixedFraction:
        quotient, remainder = divmod(abs(fraction.numerator), fraction.denominator)
        if fraction.is_negative:
            if quotient != 0:
                return cls(-quotient, remainder, fraction.denominator)
            return cls(0, -remainder, fraction.denominator)
        return cls(quotient, remainder, fraction.denominator)

    @classmethod
    def from_double(
        cls,
        value: FloatLike | IntegerLike,
        precision: float = DEFAULT_PRECISION,
    ) -> MixedFraction:
        return cls.from_fraction(Fraction.from_double(value, precision))

    def __str__(self) -> str:
        if self.whole == 0:
            return f"{self.numerator}/{self.denominator}"
        return f"{self.whole} {self.numerator}/{self.denominator}"

    def __repr__(self) -> str:
        return f"MixedFraction({self.whole}, {self.numerator}, {self.denominator})"

    def __hash__(self) -> int:
        # same hash as the equal Fraction, int or float
        return rational_hash(*self._improper_parts())

    def __getitem__(self, index: int) -> int:
        """Index 0 is the whole part, 1 the numerator and 2 the denominator."""
        if index == 0:
            return self.whole
        if index == 1:
            return self.numerator
        if index == 2:
            return self.denominator
        raise IndexOutOfRange(f"The index {index} is not valid: it must be either 0, 1 or 2")

    def __float__(self) -> float:
        return self.to_double()

    def to_double(self) -> float:
        if self.whole < 0:
            return self.whole - self.numerator / self.denominator
        return self.whole + self.numerator / self.denominator

    def to_fraction(self) -> Fraction:
        numerator, denominator = self._improper_parts()
        return Fraction(checked(numerator, "numerator"), denominator)

    def _improper_parts(self) -> tuple[int, int]:
        # not range checked, equality and hashing must not overflow
        if self.whole < 0:
            return self.whole * self.denominator - self.numerator, self.denominator
        return self.whole * self.denominator + self.numerator, self.denominator

    @property
    def fractional_part(self) -> Fraction:
        return Fraction(self.numerator, self.denominator)

    @property
    def is_negative(self) -> bool:
        return self.whole < 0 or self.numerator < 0

    def reduce(self) -> MixedFraction:
        """Reduces the fractional part to lowest terms, the whole part stays untouched."""
        fractional_part = self.fractional_part.reduce()
        return MixedFraction(self.whole, fractional_part.numerator, fractional_part.denominator)

    def negate(self) -> MixedFraction:
        if self.whole == 0:
            return MixedFraction(0, -self.numerator, self.denominator)
        return MixedFraction(-self.whole, self.numerator, self.denominator)

    def __neg__(self) -> MixedFraction:
        return self.negate()

    def __add__(self, other: Any) -> Union[MixedFraction, float]:
        if isinstance(other, FloatLike):
            return self.to_double() + float(other)
        other = _as_fraction(other)
        if other is None:
            return NotImplemented
        # the sum is the only operation returning lowest terms
        return MixedFraction.from_fraction(self.to_fraction() + other).reduce()

    def __radd__(self, other: Any) -> Union[MixedFraction, float]:
        return self.__add__(other)

    def __sub__(self, other: Any) -> Union[MixedFraction, float]:
        if isinstance(other, FloatLike):
            return self.to_double() - float(other)
        other = _as_fraction(other)
        if other is None:
            return NotImplemented
        return MixedFraction.from_fraction(self.to_fraction() - other)

    def __rsub__(self, other: Any) -> Union[MixedFraction, float]:
        if isinstance(other, FloatLike):
            return float(other) - self.to_double()
        other = _as_fraction(other)
        if other is None:
            return NotImplemented
        return MixedFraction.from_fraction(other - self.to_fraction())

    def __mul__(self, other: Any) -> Union[MixedFraction, float]:
        if isinstance(other, FloatLike):
            return self.to_double() * float(other)
        other = _as_fraction(other)
        if other is None:
            return NotImplemented
        return MixedFraction.from_fraction(self.to_fraction() * other)

    def __rmul__(self, other: Any) -> Union[MixedFraction, float]:
        return self.__mul__(other)

    def __truediv__(self, other: Any) -> Union[MixedFraction, float]:
        if isinstance(other, FloatLike):
            if other == 0.0:
                raise DivisionByZero("Cannot divide by zero")
            return self.to_double() / float(other)
        other = _as_fraction(other)
        if other is None:
            return NotImplemented
        return MixedFraction.from_fraction(self.to_fraction() / other)

    def __rtruediv__(self, other: Any) -> Union[MixedFraction, float]:
        if isinstance(other, FloatLike):
            if self.to_double() == 0.0:
                raise DivisionByZero("Cannot divide by zero")
            return float(other) / self.to_double()
        other = _as_fraction(other)
        if other is None:
            return NotImplemented
        return MixedFraction.from_fraction(other / self.to_fraction())

    # Equality is exact, ordering goes through floats
    def __eq__(self, other: Any) -> bool:
        if isinstance(other, FloatLike):
            if not math.isfinite(other):
                return False
            other_numerator, other_denominator = float(other).as_integer_ratio()
        elif isinstance(other, MixedFraction):
            other_numerator, other_denominator = other._improper_parts()
        else:
            other = _as_fraction(other)
            if other is None:
                return NotImplemented
            other_numerator, other_denominator = other.numerator, other.denominator
        numerator, denominator = self._improper_parts()
        return numerator * other_denominator == other_numerator * denominator

    def __ne__(self, other: Any) -> bool:
        result = self.__eq__(other)
        if result is NotImplemented:
            return result
        return not result

    def __lt__(self, other: Any) -> bool:
        other_value = _as_double(other)
        if other_value is None:
            return NotImplemented
        return self.to_double() < other_value

    def __le__(self, other: Any) -> bool:
        other_value = _as_double(other)
        if other_value is None:
            return NotImplemented
        return self.to_double() <= other_value

    def __gt__(self, other: Any) -> bool:
        other_value = _as_double(other)
        if other_value is None:
            return NotImplemented
        return self.to_double() > other_value

    def __ge__(self, other: Any) -> bool:
        other_value = _as_double(other)
        if other_value is None:
            return NotImplemented
        return self.to_double() >= other_value


def _as_fraction(value: Any) -> Fraction | None:
    if isinstance(value, MixedFraction):
        return value.to_fraction()
    if isinstance(value, Fraction):
        return value
    if isinstance(value, IntegerLike):
        return Fraction(int(value))
    return None


def _as_double(value: Any) -> float | None:
    if isinstance(value, FloatLike):
        return float(value)
    if isinstance(value, MixedFraction):
        return value.to_double()
    fraction = _as_fraction(value)
    if fraction is None:
        return None
    return fraction.to_double()


def parse_mixed_fraction(text: str) -> ParseResult[MixedFraction]:
    """
    Parses the text form of a mixed fraction without raising.

    Args:
        text (str): Text in the form "a b/c"

    Returns:
        ParseResult[MixedFraction]: The parsed mixed fraction, or the error describing why the text is not one
    """
    return attempt(lambda t: MixedFraction(*split_mixed_fraction(t)), text)
