from __future__ import annotations


class FractionError(Exception):
    """Base class of every error raised by exactfrac."""


class MixedFractionError(FractionError):
    """Marker for failures that originate in mixed fraction handling."""


class DivisionByZero(FractionError, ZeroDivisionError):
    pass


class MalformedInput(FractionError, ValueError):
    pass


class MalformedMixedFraction(MalformedInput, MixedFractionError):
    pass


class NonFiniteValue(FractionError, ValueError):
    pass


class IndexOutOfRange(FractionError, IndexError):
    pass


class IntegerOverflow(FractionError, OverflowError):
    pass
