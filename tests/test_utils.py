import logging
import math

import numpy as np
import pytest

from exactfrac import IntegerOverflow, NonFiniteValue
from exactfrac.core import utils
from exactfrac.core.constants import INT_MAX, INT_MIN
from exactfrac.core.utils import as_integer, checked, continued_fraction, rational_hash, sign


def test_as_integer():
    assert as_integer(3, "x") == 3
    assert as_integer(True, "x") == 1
    result = as_integer(np.uint8(7), "x")
    assert result == 7
    assert type(result) is int


def test_as_integer_rejects_non_integers():
    for value in [1.0, np.float64(2.0), "3", None]:
        with pytest.raises(TypeError):
            as_integer(value, "x")


def test_checked():
    assert checked(INT_MAX) == INT_MAX
    assert checked(INT_MIN) == INT_MIN
    with pytest.raises(IntegerOverflow):
        checked(INT_MAX + 1)
    with pytest.raises(IntegerOverflow):
        checked(INT_MIN - 1)


def test_sign():
    assert sign(-5) == -1
    assert sign(0) == 1
    assert sign(5) == 1


def test_continued_fraction_convergents():
    assert continued_fraction(1.5, 1e-12) == (3, 2)
    assert continued_fraction(-8.5, 1e-12) == (-17, 2)
    assert continued_fraction(math.pi, 1e-4) == (333, 106)
    assert continued_fraction(math.pi, 1e-6) == (355, 113)
    assert continued_fraction(0.75, 0.0) == (3, 4)


def test_continued_fraction_non_finite():
    with pytest.raises(NonFiniteValue):
        continued_fraction(math.inf, 1e-12)
    with pytest.raises(ValueError):
        continued_fraction(1.5, math.nan)


def test_continued_fraction_iteration_cap(monkeypatch, caplog):
    """The expansion stops after the maximum number of terms regardless of the precision"""
    monkeypatch.setattr(utils, "MAX_CONTINUED_FRACTION_ITERATIONS", 2)
    with caplog.at_level(logging.DEBUG, logger="exactfrac.core.utils"):
        assert continued_fraction(math.pi, 1e-12) == (22, 7)
    assert "after 2 terms" in caplog.text


def test_continued_fraction_tiny_value_terminates():
    numerator, denominator = continued_fraction(5e-324, 0.0)
    assert numerator == 0
    assert denominator == 1


def test_continued_fraction_log_arguments(monkeypatch, caplog):
    """Log messages are formatted by the logging framework, not eagerly"""
    monkeypatch.setattr(utils, "MAX_CONTINUED_FRACTION_ITERATIONS", 2)
    with caplog.at_level(logging.DEBUG, logger="exactfrac.core.utils"):
        continued_fraction(math.pi, 1e-12)
    (record,) = caplog.records
    assert record.args == (math.pi, 22, 7, 2)
    assert record.getMessage() == f"Continued fraction of {math.pi} stopped at 22/7 after 2 terms"


def test_rational_hash():
    assert rational_hash(1, 2) == hash(0.5)
    assert rational_hash(2, 4) == hash(0.5)
    assert rational_hash(-3, 4) == hash(-0.75)
    assert rational_hash(-1, 1) == hash(-1) == -2
    assert rational_hash(0, 9) == hash(0)
    assert rational_hash(10**40, 1) == hash(10**40)
