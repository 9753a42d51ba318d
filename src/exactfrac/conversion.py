# ruff: noqa: F811
from plum import dispatch, overload

from exactfrac.core.constants import DEFAULT_PRECISION
from exactfrac.core.fraction import Fraction, parse_fraction
from exactfrac.core.mixed import MixedFraction, parse_mixed_fraction
from exactfrac.core.typing import FloatLike, IntegerLike


## to_fraction #####################################
@overload
def to_fraction(value: str) -> Fraction:
    return Fraction.from_string(value)


@overload
def to_fraction(value: IntegerLike) -> Fraction:
    return Fraction(int(value))


@overload
def to_fraction(value: FloatLike, precision: float = DEFAULT_PRECISION) -> Fraction:
    return Fraction.from_double(float(value), precision)


@overload
def to_fraction(value: Fraction) -> Fraction:
    return value


@overload
def to_fraction(value: MixedFraction) -> Fraction:
    return value.to_fraction()


@dispatch
def to_fraction(value, *args):
    del value, args
    raise NotImplementedError()


## to_mixed_fraction #####################################
@overload
def to_mixed_fraction(value: str) -> MixedFraction:
    return MixedFraction.from_string(value)


@overload
def to_mixed_fraction(value: IntegerLike) -> MixedFraction:
    return MixedFraction(int(value), 0, 1)


@overload
def to_mixed_fraction(value: FloatLike, precision: float = DEFAULT_PRECISION) -> MixedFraction:
    return MixedFraction.from_double(float(value), precision)


@overload
def to_mixed_fraction(value: Fraction) -> MixedFraction:
    return MixedFraction.from_fraction(value)


@overload
def to_mixed_fraction(value: MixedFraction) -> MixedFraction:
    return value


@dispatch
def to_mixed_fraction(value, *args):
    del value, args
    raise NotImplementedError()


## predicates #####################################
def is_fraction(text: str) -> bool:
    """Whether ``to_fraction(text)`` would succeed."""
    return parse_fraction(text).ok


def is_mixed_fraction(text: str) -> bool:
    """Whether ``to_mixed_fraction(text)`` would succeed."""
    return parse_mixed_fraction(text).ok
