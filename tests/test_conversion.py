import math

import numpy as np
import plum
import pytest

from exactfrac import (
    DivisionByZero,
    Fraction,
    IntegerOverflow,
    MalformedInput,
    MixedFraction,
    is_fraction,
    is_mixed_fraction,
    to_fraction,
    to_mixed_fraction,
)

from tests.utils import assert_fields


def test_to_fraction_from_string():
    assert to_fraction("1/3") == Fraction(1, 3)
    assert to_fraction("-4/5") == Fraction(-4, 5)
    assert to_fraction("5") == Fraction(5)
    assert to_fraction("-5") == Fraction(-5)
    assert to_fraction("⅔") == Fraction(2, 3)


def test_to_fraction_from_string_errors():
    with pytest.raises(MalformedInput):
        to_fraction("1/")
    with pytest.raises(DivisionByZero):
        to_fraction("1/0")
    with pytest.raises(MalformedInput):
        to_fraction("3/-6")
    with pytest.raises(MalformedInput):
        to_fraction("")


def test_to_fraction_from_numbers():
    assert_fields(to_fraction(3), 3, 1)
    assert_fields(to_fraction(np.int64(3)), 3, 1)
    assert_fields(to_fraction(1.5), 3, 2)
    assert_fields(to_fraction(np.float64(-8.5)), -17, 2)
    assert_fields(to_fraction(np.float32(0.5)), 1, 2)
    assert_fields(to_fraction(math.pi, 1e-4), 333, 106)


def test_to_fraction_from_value_types():
    f = Fraction(2, 4)
    assert to_fraction(f) is f
    assert_fields(to_fraction(MixedFraction(1, 1, 2)), 3, 2)


def test_to_fraction_not_implemented():
    with pytest.raises(plum.NotFoundLookupError):
        to_fraction([1, 2])


def test_to_mixed_fraction():
    assert_fields(to_mixed_fraction("1 2/3"), 1, 2, 3)
    assert_fields(to_mixed_fraction("3 ¾"), 3, 3, 4)
    assert_fields(to_mixed_fraction(4), 4, 0, 1)
    assert_fields(to_mixed_fraction(np.int16(-4)), -4, 0, 1)
    assert_fields(to_mixed_fraction(1.5), 1, 1, 2)
    assert_fields(to_mixed_fraction(np.float64(-0.25)), 0, -1, 4)
    assert_fields(to_mixed_fraction(math.pi, 1e-2), 3, 1, 7)
    assert_fields(to_mixed_fraction(Fraction(7, 3)), 2, 1, 3)
    m = MixedFraction(1, 1, 2)
    assert to_mixed_fraction(m) is m


def test_to_mixed_fraction_not_implemented():
    with pytest.raises(plum.NotFoundLookupError):
        to_mixed_fraction(None)


def test_is_fraction():
    assert is_fraction("3/5")
    assert is_fraction("-3")
    assert is_fraction("¼")
    assert not is_fraction("")
    assert not is_fraction("1/0")
    assert not is_fraction("3/-6")
    assert not is_fraction("1 2/3")


def test_is_mixed_fraction():
    assert is_mixed_fraction("1 3/5")
    assert is_mixed_fraction("3 ¾")
    assert is_mixed_fraction("0 -3/5")
    assert not is_mixed_fraction("")
    assert not is_mixed_fraction("7/4")
    assert not is_mixed_fraction("1 1/0")


def test_predicates_agree_with_parsers():
    """The predicates never disagree with the constructors"""
    for text in ["1/2", "1 1/2", "", "x", "2/-3", "1/0", "½", "1½", "-0 1/2", "1  1/2"]:
        try:
            Fraction.from_string(text)
            parsed = True
        except (MalformedInput, DivisionByZero):
            parsed = False
        assert is_fraction(text) == parsed

        try:
            MixedFraction.from_string(text)
            parsed = True
        except (MalformedInput, DivisionByZero):
            parsed = False
        assert is_mixed_fraction(text) == parsed


def test_predicates_reject_huge_integers():
    huge = "1" * 5000
    assert not is_fraction(huge)
    assert not is_fraction("-" + huge)
    assert not is_fraction("1/" + huge)
    assert not is_mixed_fraction("1 " + huge + "/2")
    assert not is_mixed_fraction(huge + " 1/2")
    assert not is_mixed_fraction("1 1/" + huge)
    assert is_fraction("0" * 5000 + "1")
    with pytest.raises(IntegerOverflow):
        to_fraction(huge)
    with pytest.raises(IntegerOverflow):
        to_mixed_fraction(huge + " 1/2")


def test_converted_values_equal_floats():
    assert to_fraction(0.75) == 0.75
    assert to_mixed_fraction(np.float64(2.5)) == 2.5
    assert hash(to_fraction("3/4")) == hash(0.75)
