import logging

from synthseries.core.random_source import RandomSource
from synthseries.schemas.sampling_mode import SamplingMode
from synthseries.schemas.series_config import SeriesConfig
from synthseries.utils.error import UnsupportedModeError

_LOGGER = logging.getLogger(__name__)


class TimestampSequencer:

    def __init__(self, config: SeriesConfig, random_source: RandomSource) -> None:
        """@brief Bind a validated series configuration and a random source.

        @param config Window and sampling configuration.
        @param random_source Source used by the random sampling mode.
        """
        self.config = config
        self.random_source = random_source

    def timestamps(self) -> list[int]:
        """@brief Produce the ascending Unix timestamps of the window.

        @details Each call builds a new sequence, so the random mode draws
        fresh timestamps every time.

        @return List of integer Unix seconds in ascending order.
        @throws UnsupportedModeError If the sampling mode is not recognized.
        """
        mode = self.config.sampling_mode

        if mode is SamplingMode.EVENLY_SPACED:
            timestamps = self._evenly_spaced()
        elif mode is SamplingMode.RANDOM:
            timestamps = self._random()
        else:
            raise UnsupportedModeError(mode)

        _LOGGER.debug("Generated %d timestamps in %s mode", len(timestamps), mode.value)
        return timestamps

    def _evenly_spaced(self) -> list[int]:
        """@brief Every `interval` seconds from `from`, inclusive of `until`."""
        return list(range(self.config.from_, self.config.until + 1, self.config.interval))

    def _random(self) -> list[int]:
        """@brief `numOfData` inclusive uniform draws, sorted, duplicates kept."""
        drawn = self.random_source.draw_many(
            self.config.from_, self.config.until, self.config.num_of_data
        )
        return sorted(drawn)
