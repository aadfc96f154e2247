import logging
import math
from collections.abc import Mapping
from typing import Any, Callable, Type, TypeVar

from pydantic import BaseModel, ValidationError

from synthseries.core.random_source import RandomSource
from synthseries.core.ratio import Ratio
from synthseries.core.rounding import round_half_away
from synthseries.core.sequencer import TimestampSequencer
from synthseries.schemas import GaussianOptions, PeriodicOptions, SeriesConfig
from synthseries.utils.error import (
    ConfigurationError,
    OptionsValidationError,
    ShapeOptionsError,
    translate_validation_error,
)
from synthseries.utils.timestamp import to_iso

_LOGGER = logging.getLogger(__name__)

Options = Mapping[str, Any] | BaseModel | None
Record = dict[str, Any]
ValueFunction = Callable[[int], float]

_OptionsT = TypeVar("_OptionsT", bound=BaseModel)

_WAVES: dict[str, Callable[[float], float]] = {
    "sin": math.sin,
    "cos": math.cos,
}


def _validate(
    model: Type[_OptionsT], options: Options, error_cls: Type[OptionsValidationError]
) -> _OptionsT:
    """@brief Validate an options object against a schema, applying defaults.

    @param model Pydantic model describing the accepted options.
    @param options Mapping, model instance or None for all defaults.
    @param error_cls Domain error raised when validation fails.
    @return Fully defaulted options model.
    @throws OptionsValidationError Naming the first offending field.
    """
    if isinstance(options, model):
        return options
    if options is None:
        options = {}
    if not isinstance(options, Mapping):
        raise error_cls(None, f"must be a mapping, got {type(options).__name__}")

    try:
        return model.model_validate(dict(options))
    except ValidationError as exc:
        raise translate_validation_error(exc, error_cls) from exc


class SeriesGenerator:
    """@brief Builds labeled synthetic time series over a fixed window.

    @details The window and sampling policy are validated once at
    construction. Each generator method validates its own shape options,
    derives a value function and maps it over a fresh timestamp sequence:

        generator = SeriesGenerator({"from": "2024-01-01T00:00:00Z",
                                     "until": "2024-01-01T01:00:00Z",
                                     "interval": 1800, "valueKeyName": "v"})
        generator.sin({"period": 3600})
    """

    def __init__(
        self,
        options: Options = None,
        *,
        random_source: RandomSource | None = None,
        ratio_factory: Callable[..., Any] = Ratio,
    ) -> None:
        """@brief Validate the base configuration.

        @param options Base configuration mapping or SeriesConfig; defaults
        apply to every omitted field.
        @param random_source Shared randomness for random timestamps, Gaussian
        noise and ratio sampling. An unseeded source is created if omitted.
        @param ratio_factory Callable building a ratio sampler from
        `(params, random_source)`; it must expose `sample()`.
        @throws ConfigurationError If the configuration is rejected.
        """
        self.config: SeriesConfig = _validate(SeriesConfig, options, ConfigurationError)
        self.random_source = random_source or RandomSource()
        self.ratio_factory = ratio_factory
        self._sequencer = TimestampSequencer(self.config, self.random_source)

    def generate(self, func: ValueFunction) -> list[Record]:
        """@brief Map a value function over a fresh timestamp sequence.

        @param func Callable receiving a Unix timestamp and returning a number.
        @return Records `{"timestamp": <ISO-8601>, <valueKeyName>: <value>}`
        in timestamp order.
        """
        key = self.config.value_key_name
        records = [
            {"timestamp": to_iso(unix), key: func(unix)}
            for unix in self._sequencer.timestamps()
        ]
        _LOGGER.debug("Generated %d records for key '%s'", len(records), key)
        return records

    def periodic(self, options: Options = None, *, wave: str = "sin") -> list[Record]:
        """@brief Generate a rounded sine or cosine wave.

        @param options PeriodicOptions mapping (`coefficient`, `constant`,
        `decimalDigits`, `period`).
        @param wave Either `sin` or `cos`.
        @return Generated records.
        @throws ShapeOptionsError If options or wave are rejected.
        """
        trig = _WAVES.get(wave)
        if trig is None:
            raise ShapeOptionsError("wave", f"must be one of {sorted(_WAVES)}, got {wave!r}")

        shape = _validate(PeriodicOptions, options, ShapeOptionsError)
        scale = 2 * math.pi / shape.period

        def value(unix: int) -> float:
            raw = shape.coefficient * trig(unix * scale) + shape.constant
            return round_half_away(raw, shape.decimal_digits)

        return self.generate(value)

    def sin(self, options: Options = None) -> list[Record]:
        return self.periodic(options, wave="sin")

    def cos(self, options: Options = None) -> list[Record]:
        return self.periodic(options, wave="cos")

    def gaussian(self, options: Options = None) -> list[Record]:
        """@brief Generate independent normally distributed values.

        @param options GaussianOptions mapping (`mean`, `variance`,
        `decimalDigits`).
        @return Generated records, one independent draw per timestamp.
        @throws ShapeOptionsError If options are rejected.
        """
        shape = _validate(GaussianOptions, options, ShapeOptionsError)

        def value(_unix: int) -> float:
            sample = self.random_source.normal(shape.mean, shape.variance)
            return round_half_away(sample, shape.decimal_digits)

        return self.generate(value)

    def ratio_series(self, params: Any) -> list[Record]:
        """@brief Generate values drawn from a ratio sampler.

        @details One sampler is built per call; the timestamp is ignored and
        `sample()` is called once per record.

        @param params Parameters forwarded as-is to the ratio sampler.
        @return Generated records.
        """
        sampler = self.ratio_factory(params, self.random_source)
        return self.generate(lambda _unix: sampler.sample())
