from __future__ import annotations
import re
from typing import Callable, Generic, NamedTuple, TypeVar

from exactfrac.core.constants import INT_MAX
from exactfrac.core.errors import (
    DivisionByZero,
    FractionError,
    IntegerOverflow,
    MalformedInput,
    MalformedMixedFraction,
)
from exactfrac.core.glyphs import decode_glyphs

T = TypeVar("T")

SIGNED_INTEGER = re.compile(r"-?[0-9]+")
UNSIGNED_INTEGER = re.compile(r"[0-9]+")
# longest digit string that may still fit into 64 bits, the exact bound is checked later
MAX_DIGITS = len(str(INT_MAX))


class ParseResult(NamedTuple, Generic[T]):
    """Outcome of a parse: either a value or the error that prevented it, never both."""

    value: T | None
    error: FractionError | None

    @property
    def ok(self) -> bool:
        return self.error is None

    def unwrap(self) -> T:
        if self.error is not None:
            raise self.error
        return self.value  # type: ignore[return-value]


def attempt(
    parser: Callable[[str], T],
    text: str,
) -> ParseResult[T]:
    try:
        return ParseResult(parser(text), None)
    except FractionError as e:
        return ParseResult(None, e)


def to_integer(token: str) -> int:
    """Converts a token already matched by SIGNED_INTEGER, refusing digit strings too long for 64 bits."""
    digits = token.lstrip("-").lstrip("0")
    if len(digits) > MAX_DIGITS:
        raise IntegerOverflow(f"An integer with {len(digits)} digits does not fit into a signed 64 bit integer")
    return int(token)


def split_fraction(text: str) -> tuple[int, int]:
    """
    Splits the text form of a fraction ("n" or "n/d") into numerator and denominator.

    Only the numerator may carry a sign. Glyphs are decoded before parsing.

    Args:
        text (str): Text to parse

    Returns:
        tuple[int, int]: Numerator and denominator, not range checked
    """
    decoded = decode_glyphs(text)
    if not decoded:
        raise MalformedInput("Cannot parse a fraction from an empty string")

    parts = decoded.split("/")
    if len(parts) > 2:
        raise MalformedInput(f"'{text}' contains more than one '/'")
    if SIGNED_INTEGER.fullmatch(parts[0]) is None:
        raise MalformedInput(f"Numerator of '{text}' is not an integer")
    numerator = to_integer(parts[0])
    if len(parts) == 1:
        return numerator, 1

    if UNSIGNED_INTEGER.fullmatch(parts[1]) is None:
        if parts[1][:1] in ("-", "+"):
            raise MalformedInput(f"Denominator of '{text}' must not carry a sign")
        raise MalformedInput(f"Denominator of '{text}' is not an integer")
    denominator = to_integer(parts[1])
    if denominator == 0:
        raise DivisionByZero(f"Denominator of '{text}' is zero")
    return numerator, denominator


def split_mixed_fraction(text: str) -> tuple[int, int, int]:
    """
    Splits the text form of a mixed fraction ("w n/d") into whole part, numerator and denominator.

    Exactly one space has to separate the whole part from the fraction. A minus sign may precede either
    the whole part or the numerator.

    Args:
        text (str): Text to parse

    Returns:
        tuple[int, int, int]: Whole part, numerator and denominator, not normalized
    """
    decoded = decode_glyphs(text)
    if " " not in decoded:
        raise MalformedMixedFraction(
            f"'{text}' must be in the form 'a b/c' with exactly one space between the whole part and the fraction"
        )
    parts = decoded.split(" ")
    if len(parts) != 2:
        raise MalformedMixedFraction(f"'{text}' must consist of exactly two parts separated by a single space")

    whole_token, fraction_token = parts
    if SIGNED_INTEGER.fullmatch(whole_token) is None:
        raise MalformedMixedFraction(f"Whole part of '{text}' is not an integer")
    try:
        numerator, denominator = split_fraction(fraction_token)
    except MalformedInput as e:
        raise MalformedMixedFraction(f"Fractional part of '{text}' is malformed: {e}") from e

    whole = to_integer(whole_token)
    # "-0 1/2" keeps its sign
    if whole == 0 and whole_token.startswith("-"):
        numerator = -numerator
    return whole, numerator, denominator
