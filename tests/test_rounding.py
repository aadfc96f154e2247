import math

import numpy as np
import pytest

from synthseries.core.rounding import round_half_away


@pytest.mark.parametrize(
    "value, digits, expected",
    [
        (1.005, 2, 1.01),
        (2.675, 2, 2.68),
        (0.5, 0, 1.0),
        (1.5, 0, 2.0),
        (2.5, 0, 3.0),
        (-2.5, 0, -3.0),
        (-1.005, 2, -1.01),
        (3.14159, 4, 3.1416),
        (123456.789, 0, 123457.0),
        (1e-12, 10, 0.0),
        (1e30, 10, 1e30),
    ],
)
def test_round_half_away_from_zero(value, digits, expected):
    """@brief Ties round away from zero on the decimal representation."""
    assert round_half_away(value, digits) == expected


@pytest.mark.parametrize("value", [-0.0, -0.001, -1e-17])
def test_round_never_returns_negative_zero(value):
    """@brief Values rounding to zero must come back as positive zero."""
    result = round_half_away(value, 2)

    assert result == 0.0
    assert math.copysign(1.0, result) == 1.0


def test_round_accepts_numpy_floats():
    assert round_half_away(np.float64(1.23456), 3) == 1.235
