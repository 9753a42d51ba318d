from exactfrac.conversion import is_fraction, is_mixed_fraction, to_fraction, to_mixed_fraction
from exactfrac.core.errors import (
    DivisionByZero,
    FractionError,
    IndexOutOfRange,
    IntegerOverflow,
    MalformedInput,
    MalformedMixedFraction,
    MixedFractionError,
    NonFiniteValue,
)
from exactfrac.core.fraction import Fraction, parse_fraction
from exactfrac.core.glyphs import decode_glyphs
from exactfrac.core.mixed import MixedFraction, parse_mixed_fraction
from exactfrac.core.parsing import ParseResult

__all__ = [
    "Fraction",
    "MixedFraction",
    "ParseResult",
    "parse_fraction",
    "parse_mixed_fraction",
    "decode_glyphs",
    "to_fraction",
    "to_mixed_fraction",
    "is_fraction",
    "is_mixed_fraction",
    "FractionError",
    "MixedFractionError",
    "DivisionByZero",
    "MalformedInput",
    "MalformedMixedFraction",
    "NonFiniteValue",
    "IndexOutOfRange",
    "IntegerOverflow",
]
