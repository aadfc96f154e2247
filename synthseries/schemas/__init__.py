from synthseries.schemas.gaussian_options import GaussianOptions
from synthseries.schemas.periodic_options import PeriodicOptions
from synthseries.schemas.ratio_options import RatioOptions
from synthseries.schemas.sampling_mode import SamplingMode
from synthseries.schemas.series_config import SeriesConfig

__all__ = [
    "GaussianOptions",
    "PeriodicOptions",
    "RatioOptions",
    "SamplingMode",
    "SeriesConfig",
]
