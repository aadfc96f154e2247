import time

from pydantic import BaseModel, ConfigDict, Field, field_validator, model_validator

from synthseries.schemas.instant import Instant, parse_instant
from synthseries.schemas.sampling_mode import SamplingMode
from synthseries.utils.params import get_series_defaults


def _default_until() -> int:
    return int(time.time())


def _default_from() -> int:
    return _default_until() - int(get_series_defaults()["window_seconds"])


class SeriesConfig(BaseModel):
    """@brief Window and sampling configuration owned by a `SeriesGenerator`.

    @details Accepts the camelCase option names (`samplingMode`, `from`,
    `until`, `interval`, `numOfData`, `valueKeyName`) as well as the
    snake_case field names. Instants are stored as integer Unix seconds.

    @note Validation rules:
    unknown keys are rejected, `from` must not be later than `until`,
    `interval` must be a positive integer and `numOfData` a non-negative one.
    """

    model_config = ConfigDict(extra="forbid", frozen=True, populate_by_name=True)

    sampling_mode: SamplingMode = Field(
        default_factory=lambda: SamplingMode(get_series_defaults()["sampling_mode"]),
        alias="samplingMode",
        description="Timestamp placement policy.",
    )
    from_: Instant = Field(
        default_factory=_default_from,
        alias="from",
        description="Start of the window, inclusive.",
    )
    until: Instant = Field(
        default_factory=_default_until,
        description="End of the window, inclusive.",
    )
    interval: int = Field(
        default_factory=lambda: int(get_series_defaults()["interval"]),
        gt=0,
        strict=True,
        description="Step in seconds, used by the evenly spaced mode.",
    )
    num_of_data: int = Field(
        default_factory=lambda: int(get_series_defaults()["num_of_data"]),
        ge=0,
        strict=True,
        alias="numOfData",
        description="Number of random draws, used by the random mode.",
    )
    value_key_name: str = Field(
        default_factory=lambda: str(get_series_defaults()["value_key_name"]),
        min_length=1,
        strict=True,
        alias="valueKeyName",
        description="Record key holding the generated value.",
    )

    @model_validator(mode="before")
    @classmethod
    def apply_window_defaults(cls, data: object) -> object:
        """@brief Derive both window bounds from a single clock reading.

        @details When `from` is omitted it defaults to one window before
        `until`, so a caller giving only `until` still gets a valid window.
        """
        if not isinstance(data, dict):
            return data

        data = dict(data)
        if "until" not in data:
            data["until"] = _default_until()

        if "from" not in data and "from_" not in data:
            try:
                until = parse_instant(data["until"])
            except ValueError:
                # Reported by field validation against `until`.
                return data
            data["from"] = until - int(get_series_defaults()["window_seconds"])

        return data

    @field_validator("sampling_mode", mode="before")
    @classmethod
    def validate_sampling_mode(cls, mode: object) -> SamplingMode:
        """@brief Resolve mode names case-insensitively, including `monospaced`."""
        if isinstance(mode, SamplingMode):
            return mode
        try:
            return SamplingMode(mode)
        except ValueError as exc:
            accepted = ", ".join(repr(member.value) for member in SamplingMode)
            raise ValueError(f"must be one of {accepted}, got {mode!r}") from exc

    @field_validator("value_key_name")
    @classmethod
    def validate_value_key_name(cls, key: str) -> str:
        """@brief Keep the value key from overwriting the record timestamp."""
        if key == "timestamp":
            raise ValueError("must not be 'timestamp', which holds the record time")
        return key

    @model_validator(mode="after")
    def validate_window(self) -> "SeriesConfig":
        """@brief Validate the window is not inverted."""
        if self.from_ > self.until:
            raise ValueError("`from` must not be later than `until`")
        return self
