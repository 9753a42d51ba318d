from __future__ import annotations
import math
import operator
from dataclasses import dataclass
from typing import TYPE_CHECKING, Any, Callable, Union, overload

from exactfrac.core.constants import DEFAULT_PRECISION
from exactfrac.core.errors import DivisionByZero, IndexOutOfRange, IntegerOverflow, MalformedInput
from exactfrac.core.glyphs import encode_glyph, is_glyph
from exactfrac.core.parsing import ParseResult, attempt, split_fraction
from exactfrac.core.typing import FloatLike, IntegerLike
from exactfrac.core.utils import as_integer, checked, continued_fraction, rational_hash

if TYPE_CHECKING:
    from exactfrac.core.mixed import MixedFraction


@dataclass(frozen=True, eq=False, slots=True)
class Fraction:
    """
    Exact rational number made of an integer numerator and a non-zero integer denominator.

    The sign is always carried by the numerator, the denominator is positive. Fractions are not reduced
    automatically: arithmetic returns the plain cross multiplication result and ``reduce`` has to be
    called explicitly. Equality does not depend on the reduced form, ``Fraction(1, 2) == Fraction(-2, -4)``.

    Numerator and denominator have to fit into a signed 64 bit integer, otherwise ``IntegerOverflow`` is
    raised.
    """

    numerator: int
    denominator: int = 1

    def __post_init__(self):
        numerator = as_integer(self.numerator, "numerator")
        denominator = as_integer(self.denominator, "denominator")
        if denominator == 0:
            raise DivisionByZero("The denominator cannot be zero")
        if denominator < 0:
            numerator, denominator = -numerator, -denominator
        object.__setattr__(self, "numerator", checked(numerator, "numerator"))
        object.__setattr__(self, "denominator", checked(denominator, "denominator"))

    @classmethod
    def from_string(cls, text: str) -> Fraction:
        """
        Parses "n" or "n/d". Only the numerator may be signed and unicode glyphs like "¾" are accepted.

        Raises:
            MalformedInput: if the text does not follow the grammar
            DivisionByZero: if the denominator is zero
        """
        return parse_fraction(text).unwrap()

    @classmethod
    def from_double(
        cls,
        value: FloatLike | IntegerLike,
        precision: float = DEFAULT_PRECISION,
    ) -> Fraction:
        """
        Converts a float into the first convergent of its continued fraction expansion that lies closer
        than ``precision`` to the value.

        Args:
            value (float): Finite value to convert
            precision (float, optional): Absolute error bound. Defaults to DEFAULT_PRECISION.

        Returns:
            Fraction: The approximation, in lowest terms
        """
        if isinstance(value, IntegerLike):
            return cls(value)
        if not isinstance(value, FloatLike):
            raise TypeError(f"Expected a float, got {type(value).__name__}")
        numerator, denominator = continued_fraction(float(value), precision)
        return cls(numerator, denominator)

    @classmethod
    def from_mixed_fraction(cls, mixed: MixedFraction) -> Fraction:
        return mixed.to_fraction()

    @classmethod
    def from_glyph(cls, glyph: str) -> Fraction:
        if not is_glyph(glyph):
            raise MalformedInput(f"'{glyph}' is not a vulgar fraction glyph")
        return cls.from_string(glyph)

    def __str__(self) -> str:
        if self.denominator == 1:
            return str(self.numerator)
        return f"{self.numerator}/{self.denominator}"

    def __repr__(self) -> str:
        return f"Fraction({self.numerator}, {self.denominator})"

    def __hash__(self) -> int:
        return rational_hash(self.numerator, self.denominator)

    def __getitem__(self, index: int) -> int:
        if index == 0:
            return self.numerator
        if index == 1:
            return self.denominator
        raise IndexOutOfRange(f"The index {index} is not valid: it must be either 0 or 1")

    def __float__(self) -> float:
        return self.to_double()

    def __int__(self) -> int:
        quotient = abs(self.numerator) // self.denominator
        return -quotient if self.numerator < 0 else quotient

    def __bool__(self) -> bool:
        return self.numerator != 0

    def to_double(self) -> float:
        return self.numerator / self.denominator

    def to_mixed_fraction(self) -> MixedFraction:
        from exactfrac.core.mixed import MixedFraction

        return MixedFraction.from_fraction(self)

    def to_glyph(self) -> str:
        glyph = encode_glyph(self.numerator, self.denominator)
        if glyph is None:
            reduced = self.reduce()
            glyph = encode_glyph(reduced.numerator, reduced.denominator)
        if glyph is None:
            raise MalformedInput(f"There is no glyph for {self}")
        return glyph

    @property
    def is_whole(self) -> bool:
        return self.numerator % self.denominator == 0

    @property
    def is_negative(self) -> bool:
        return self.numerator < 0

    @property
    def is_positive(self) -> bool:
        return self.numerator > 0

    @property
    def is_proper(self) -> bool:
        return abs(self.numerator) <= self.denominator

    @property
    def is_improper(self) -> bool:
        return not self.is_proper

    def reduce(self) -> Fraction:
        common_divisor = math.gcd(self.numerator, self.denominator)
        return Fraction(self.numerator // common_divisor, self.denominator // common_divisor)

    def inverse(self) -> Fraction:
        if self.numerator == 0:
            raise DivisionByZero(f"{self} has no inverse")
        return Fraction(self.denominator, self.numerator)

    def negate(self) -> Fraction:
        return Fraction(-self.numerator, self.denominator)

    # Addition
    @overload
    def __add__(self, other: Fraction | int) -> Fraction: ...

    @overload
    def __add__(self, other: float) -> float: ...

    def __add__(self, other: Any) -> Union[Fraction, float]:
        if isinstance(other, FloatLike):
            return self.to_double() + float(other)
        other = _as_fraction(other)
        if other is None:
            return NotImplemented
        return Fraction(
            checked(self.numerator * other.denominator + other.numerator * self.denominator),
            checked(self.denominator * other.denominator),
        )

    def __radd__(self, other: Any) -> Union[Fraction, float]:
        return self.__add__(other)

    # Subtraction
    @overload
    def __sub__(self, other: Fraction | int) -> Fraction: ...

    @overload
    def __sub__(self, other: float) -> float: ...

    def __sub__(self, other: Any) -> Union[Fraction, float]:
        if isinstance(other, FloatLike):
            return self.to_double() - float(other)
        other = _as_fraction(other)
        if other is None:
            return NotImplemented
        return Fraction(
            checked(self.numerator * other.denominator - other.numerator * self.denominator),
            checked(self.denominator * other.denominator),
        )

    def __rsub__(self, other: Any) -> Union[Fraction, float]:
        if isinstance(other, FloatLike):
            return float(other) - self.to_double()
        other = _as_fraction(other)
        if other is None:
            return NotImplemented
        return other - self

    # Multiplication
    @overload
    def __mul__(self, other: Fraction | int) -> Fraction: ...

    @overload
    def __mul__(self, other: float) -> float: ...

    def __mul__(self, other: Any) -> Union[Fraction, float]:
        if isinstance(other, FloatLike):
            return self.to_double() * float(other)
        other = _as_fraction(other)
        if other is None:
            return NotImplemented
        return Fraction(
            checked(self.numerator * other.numerator),
            checked(self.denominator * other.denominator),
        )

    def __rmul__(self, other: Any) -> Union[Fraction, float]:
        return self.__mul__(other)

    # Division
    @overload
    def __truediv__(self, other: Fraction | int) -> Fraction: ...

    @overload
    def __truediv__(self, other: float) -> float: ...

    def __truediv__(self, other: Any) -> Union[Fraction, float]:
        if isinstance(other, FloatLike):
            if other == 0.0:
                raise DivisionByZero("Cannot divide by zero")
            return self.to_double() / float(other)
        other = _as_fraction(other)
        if other is None:
            return NotImplemented
        if other.numerator == 0:
            raise DivisionByZero(f"Cannot divide {self} by {other}")
        return Fraction(
            checked(self.numerator * other.denominator),
            checked(self.denominator * other.numerator),
        )

    def __rtruediv__(self, other: Any) -> Union[Fraction, float]:
        if isinstance(other, FloatLike):
            if self.numerator == 0:
                raise DivisionByZero("Cannot divide by zero")
            return float(other) / self.to_double()
        other = _as_fraction(other)
        if other is None:
            return NotImplemented
        return other / self

    # Comparison operators. Denominators are positive, so cross multiplication keeps the order. Finite floats
    # take part through their exact integer ratio.
    def _compare(self, other: Any, relation: Callable[[Any, Any], bool]) -> bool:
        if isinstance(other, FloatLike) and not math.isfinite(other):
            return relation(self.to_double(), float(other))
        ratio = _as_ratio(other)
        if ratio is None:
            return NotImplemented
        numerator, denominator = ratio
        return relation(self.numerator * denominator, numerator * self.denominator)

    def __eq__(self, other: Any) -> bool:
        return self._compare(other, operator.eq)

    def __ne__(self, other: Any) -> bool:
        return self._compare(other, operator.ne)

    def __lt__(self, other: Any) -> bool:
        return self._compare(other, operator.lt)

    def __le__(self, other: Any) -> bool:
        return self._compare(other, operator.le)

    def __gt__(self, other: Any) -> bool:
        return self._compare(other, operator.gt)

    def __ge__(self, other: Any) -> bool:
        return self._compare(other, operator.ge)

    def __pow__(self, exponent: int) -> Fraction:
        """
        Raises the fraction to an integer power. Negative exponents raise the inverse, the result is not reduced.

        Raises:
            DivisionByZero: if a zero fraction is raised to a power that is not positive
            IntegerOverflow: if the result does not fit into 64 bits
        """
        if not isinstance(exponent, IntegerLike):
            return NotImplemented
        exponent = int(exponent)
        if self.numerator == 0 and exponent <= 0:
            raise DivisionByZero(f"A zero fraction has no power with exponent {exponent}")

        base = self if exponent > 0 else self.inverse()
        return Fraction(_power(base.numerator, abs(exponent)), _power(base.denominator, abs(exponent)))

    def __neg__(self) -> Fraction:
        return self.negate()

    def __pos__(self) -> Fraction:
        return self

    def __abs__(self) -> Fraction:
        return Fraction(abs(self.numerator), self.denominator)


def _as_fraction(value: Any) -> Fraction | None:
    if isinstance(value, Fraction):
        return value
    if isinstance(value, IntegerLike):
        return Fraction(int(value))
    return None


def _as_ratio(value: Any) -> tuple[int, int] | None:
    if isinstance(value, Fraction):
        return value.numerator, value.denominator
    if isinstance(value, IntegerLike):
        return int(value), 1
    if isinstance(value, FloatLike):
        return float(value).as_integer_ratio()
    return None


def _power(base: int, exponent: int) -> int:
    # |base| >= 2^(bit_length - 1), so larger products cannot fit into 64 bits
    if abs(base) > 1 and (abs(base).bit_length() - 1) * exponent > 63:
        raise IntegerOverflow(f"{base}^{exponent} does not fit into a signed 64 bit integer")
    return checked(base**exponent)


def parse_fraction(text: str) -> ParseResult[Fraction]:
    """
    Parses the text form of a fraction without raising.

    Args:
        text (str): Text in the form "n" or "n/d"

    Returns:
        ParseResult[Fraction]: The parsed fraction, or the error describing why the text is not one
    """
    return attempt(lambda t: Fraction(*split_fraction(t)), text)
