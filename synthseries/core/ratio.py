from collections.abc import Mapping
from typing import Any

from pydantic import ValidationError

from synthseries.core.random_source import RandomSource
from synthseries.schemas.ratio_options import RatioOptions
from synthseries.utils.error import ShapeOptionsError, translate_validation_error


class Ratio:
    """@brief Draws values from a fixed set according to relative ratios.

    Example: `Ratio({"values": [0, 1], "ratios": [9, 1]})` yields `0` about
    nine times out of ten.
    """

    def __init__(
        self,
        params: Mapping[str, Any] | RatioOptions,
        random_source: RandomSource | None = None,
    ) -> None:
        """@brief Validate ratio parameters and bind a random source.

        @param params Mapping with `values` and `ratios`, or a RatioOptions.
        @param random_source Source of randomness; a fresh unseeded one if omitted.
        @throws ShapeOptionsError If parameters are malformed.
        """
        if isinstance(params, RatioOptions):
            self.options = params
        else:
            try:
                self.options = RatioOptions.model_validate(params)
            except ValidationError as exc:
                raise translate_validation_error(exc, ShapeOptionsError) from exc

        self._values = list(self.options.values)
        self._probabilities = self.options.probabilities()
        self._random = random_source or RandomSource()

    def sample(self) -> float:
        """@brief Draw one value.

        @return One of the configured values.
        """
        return self._values[self._random.choice(self._probabilities)]
