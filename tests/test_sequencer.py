from unittest.mock import MagicMock

import pytest

from synthseries.core.random_source import RandomSource
from synthseries.core.sequencer import TimestampSequencer
from synthseries.schemas import SeriesConfig
from synthseries.utils.error import ConfigurationError, UnsupportedModeError


def _sequencer(random_source: RandomSource, **options) -> TimestampSequencer:
    return TimestampSequencer(SeriesConfig.model_validate(options), random_source)


@pytest.mark.parametrize("steps, interval", [(0, 60), (1, 60), (12, 300), (24, 3600)])
def test_evenly_spaced_has_one_point_per_step(random_source, steps, interval):
    """@brief Validate the arithmetic progression of evenly spaced timestamps.

    @details A window of `steps * interval` seconds yields `steps + 1`
    strictly increasing points, `interval` seconds apart.
    """
    start = 1_700_000_000
    timestamps = _sequencer(
        random_source, **{"from": start, "until": start + steps * interval, "interval": interval}
    ).timestamps()

    assert len(timestamps) == steps + 1
    assert timestamps[0] == start
    assert all(curr - prev == interval for prev, curr in zip(timestamps, timestamps[1:]))


def test_evenly_spaced_excludes_until_off_the_grid(random_source):
    """@brief `until` is included only when it lands exactly on a step."""
    timestamps = _sequencer(random_source, **{"from": 0, "until": 250, "interval": 100}).timestamps()

    assert timestamps == [0, 100, 200]


def test_evenly_spaced_zero_length_window_yields_one_point(random_source):
    """@brief A window with `from == until` contains only its start."""
    timestamps = _sequencer(random_source, **{"from": 500, "until": 500, "interval": 60}).timestamps()

    assert timestamps == [500]


def test_random_mode_draws_sorted_points_within_bounds(random_source):
    """@brief Validate random sampling size, ordering and inclusive bounds."""
    timestamps = _sequencer(
        random_source, samplingMode="random", **{"from": 1000, "until": 2000}, numOfData=50
    ).timestamps()

    assert len(timestamps) == 50
    assert timestamps == sorted(timestamps)
    assert all(1000 <= unix <= 2000 for unix in timestamps)


def test_random_mode_keeps_duplicates(random_source):
    """@brief Independent draws over a two-second window must repeat."""
    timestamps = _sequencer(
        random_source, samplingMode="random", **{"from": 0, "until": 1}, numOfData=20
    ).timestamps()

    assert len(timestamps) == 20
    assert set(timestamps) <= {0, 1}
    assert len(set(timestamps)) < len(timestamps)


def test_random_mode_with_zero_points_is_empty(random_source):
    """@brief `numOfData = 0` yields an empty sequence."""
    timestamps = _sequencer(
        random_source, samplingMode="random", **{"from": 0, "until": 100}, numOfData=0
    ).timestamps()

    assert timestamps == []


def test_random_mode_draws_fresh_sequences_per_call():
    """@brief Sequences are not cached between calls.

    @details The sequencer must ask its random source again on every call.
    """
    source = MagicMock(spec=RandomSource)
    source.draw_many.side_effect = [[3, 1, 2], [9, 7, 8]]
    sequencer = TimestampSequencer(
        SeriesConfig.model_validate(
            {"samplingMode": "random", "from": 0, "until": 10, "numOfData": 3}
        ),
        source,
    )

    assert sequencer.timestamps() == [1, 2, 3]
    assert sequencer.timestamps() == [7, 8, 9]
    assert source.draw_many.call_count == 2
    source.draw_many.assert_called_with(0, 10, 3)


def test_unknown_mode_fails_fast(random_source):
    """@brief An unrecognized mode tag must raise instead of returning nothing."""
    config = SeriesConfig.model_construct(
        sampling_mode="bogus",
        from_=0,
        until=10,
        interval=1,
        num_of_data=1,
        value_key_name="value",
    )

    with pytest.raises(UnsupportedModeError) as exc_info:
        TimestampSequencer(config, random_source).timestamps()

    assert isinstance(exc_info.value, ConfigurationError)
    assert exc_info.value.field == "samplingMode"
