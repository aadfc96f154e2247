from collections import Counter

import pytest

from synthseries.core.random_source import RandomSource
from synthseries.core.ratio import Ratio
from synthseries.schemas import RatioOptions
from synthseries.utils.error import ShapeOptionsError


def test_ratio_samples_follow_relative_weights(random_source):
    """@brief Validate sampled frequencies track the configured ratios.

    @details With ratios 9:1 roughly ninety percent of draws are the first value.
    """
    ratio = Ratio({"values": [0, 1], "ratios": [9, 1]}, random_source)

    counts = Counter(ratio.sample() for _ in range(4000))

    assert set(counts) == {0.0, 1.0}
    assert counts[0.0] / 4000 == pytest.approx(0.9, abs=0.03)


def test_ratio_accepts_validated_options(random_source):
    options = RatioOptions(values=[2.5], ratios=[0.1])

    ratio = Ratio(options, random_source)

    assert ratio.options is options
    assert ratio.sample() == 2.5


def test_ratio_creates_its_own_source_when_omitted():
    ratio = Ratio({"values": [4], "ratios": [1]})

    assert ratio.sample() == 4.0


def test_ratio_probabilities_are_normalized():
    options = RatioOptions(values=[1, 2, 3], ratios=[1, 1, 2])

    assert options.probabilities() == [0.25, 0.25, 0.5]


@pytest.mark.parametrize(
    "params, field",
    [
        ({"values": [0, 1], "ratios": [1]}, None),
        ({"values": [], "ratios": []}, "values"),
        ({"values": [0], "ratios": [0]}, "ratios"),
        ({"values": [0], "ratios": [-1]}, "ratios"),
        ({"values": ["a"], "ratios": [1]}, "values.0"),
        ({"values": [0], "ratios": [1], "weights": [1]}, "weights"),
        ({"ratios": [1]}, "values"),
    ],
)
def test_ratio_rejects_invalid_params(params, field):
    """@brief Malformed ratio parameters raise ShapeOptionsError naming the field."""
    with pytest.raises(ShapeOptionsError) as exc_info:
        Ratio(params, RandomSource(seed=1))

    assert exc_info.value.field == field
