from synthseries.core.generator import SeriesGenerator
from synthseries.core.random_source import RandomSource
from synthseries.core.ratio import Ratio
from synthseries.core.sequencer import TimestampSequencer
from synthseries.schemas import (
    GaussianOptions,
    PeriodicOptions,
    RatioOptions,
    SamplingMode,
    SeriesConfig,
)
from synthseries.utils.error import (
    ConfigurationError,
    OptionsValidationError,
    ShapeOptionsError,
    UnsupportedModeError,
)

__all__ = [
    "ConfigurationError",
    "GaussianOptions",
    "OptionsValidationError",
    "PeriodicOptions",
    "RandomSource",
    "Ratio",
    "RatioOptions",
    "SamplingMode",
    "SeriesConfig",
    "SeriesGenerator",
    "ShapeOptionsError",
    "TimestampSequencer",
    "UnsupportedModeError",
]
