from __future__ import annotations
import logging
import math
import operator
import sys
from typing import Any

from exactfrac.core.constants import INT_MAX, INT_MIN, MAX_CONTINUED_FRACTION_ITERATIONS
from exactfrac.core.errors import IntegerOverflow, NonFiniteValue

logger = logging.getLogger(__name__)

HASH_MODULUS = sys.hash_info.modulus
HASH_INF = sys.hash_info.inf


def as_integer(value: Any, name: str) -> int:
    """Coerces an integer-like value (python or numpy) into a python int.

    Args:
        value (Any): Value to convert. Floats are rejected even if they are integral.
        name (str): Name of the field, used in error messages.

    Returns:
        int: The value as python int.
    """
    if isinstance(value, float):
        raise TypeError(f"{name} must be an integer, got float {value}")
    try:
        return operator.index(value)
    except TypeError:
        raise TypeError(f"{name} must be an integer, got {type(value).__name__}") from None


def checked(value: int, name: str = "value") -> int:
    if value < INT_MIN or value > INT_MAX:
        raise IntegerOverflow(f"{name} {value} does not fit into a signed 64 bit integer")
    return value


def sign(value: int) -> int:
    return -1 if value < 0 else 1


def rational_hash(numerator: int, denominator: int) -> int:
    """
    Hash of the rational numerator/denominator that agrees with ``hash`` of an equal int or float.

    Follows the numeric hash rules of python (reduction modulo ``sys.hash_info.modulus``). The arguments do
    not have to be range checked or reduced.

    Args:
        numerator (int): Signed numerator
        denominator (int): Positive denominator

    Returns:
        int: The hash value
    """
    common_divisor = math.gcd(numerator, denominator)
    numerator, denominator = numerator // common_divisor, denominator // common_divisor
    try:
        denominator_inverse = pow(denominator, -1, HASH_MODULUS)
    except ValueError:
        # the denominator is a multiple of the modulus
        result = HASH_INF
    else:
        result = hash(hash(abs(numerator)) * denominator_inverse)
    if numerator < 0:
        result = -result
    return -2 if result == -1 else result


def continued_fraction(
    value: float,
    precision: float,
) -> tuple[int, int]:
    """
    Approximates a finite float by the convergents of its continued fraction expansion.

    The expansion stops at the first convergent h/k with |value - h/k| <= precision, when the expansion is
    exact, when the next convergent would not fit into 64 bits or after MAX_CONTINUED_FRACTION_ITERATIONS
    terms, whichever comes first.

    Args:
        value (float): Finite value to approximate
        precision (float): Absolute error bound of the approximation

    Returns:
        tuple[int, int]: Numerator and (positive) denominator of the approximation
    """
    if not math.isfinite(value):
        raise NonFiniteValue(f"Cannot convert {value} to a fraction")
    if math.isnan(precision) or precision < 0:
        raise ValueError(f"Precision must be a non-negative number, got {precision}")

    if value.is_integer():
        return checked(int(value)), 1

    x = abs(value)
    # convergents h_{n-1}/k_{n-1} and h_{n-2}/k_{n-2}
    h, h_prev = 1, 0
    k, k_prev = 0, 1
    y = x
    for _ in range(MAX_CONTINUED_FRACTION_ITERATIONS):
        a = math.floor(y)
        h_next = a * h + h_prev
        k_next = a * k + k_prev
        if h_next > INT_MAX or k_next > INT_MAX:
            logger.debug("Continued fraction of %s stopped at %s/%s: next convergent exceeds 64 bits", value, h, k)
            break
        h, h_prev = h_next, h
        k, k_prev = k_next, k

        if abs(x - h / k) <= precision:
            break
        remainder = y - a
        # 1 / remainder would yield a term that cannot be represented
        if remainder == 0 or remainder * INT_MAX < 1:
            break
        y = 1 / remainder
    else:
        logger.debug(
            "Continued fraction of %s stopped at %s/%s after %d terms",
            value,
            h,
            k,
            MAX_CONTINUED_FRACTION_ITERATIONS,
        )

    if value < 0:
        h = -h
    return h, k
