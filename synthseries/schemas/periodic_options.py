from pydantic import BaseModel, ConfigDict, Field, field_validator

from synthseries.schemas.numbers import FiniteNumber, Integer
from synthseries.utils.params import get_max_decimal_digits, get_periodic_defaults


class PeriodicOptions(BaseModel):
    """@brief Shape options for sine and cosine series.

    @var coefficient Amplitude multiplier applied to the wave.
    @var constant Offset added after scaling.
    @var decimal_digits Digits kept when rounding, within `[0, 10]`.
    @var period Wave period in seconds, strictly positive.
    """

    model_config = ConfigDict(extra="forbid", frozen=True, populate_by_name=True)

    coefficient: FiniteNumber = Field(
        default_factory=lambda: float(get_periodic_defaults()["coefficient"])
    )
    constant: FiniteNumber = Field(
        default_factory=lambda: float(get_periodic_defaults()["constant"])
    )
    decimal_digits: Integer = Field(
        default_factory=lambda: int(get_periodic_defaults()["decimal_digits"]),
        alias="decimalDigits",
    )
    period: Integer = Field(
        default_factory=lambda: int(get_periodic_defaults()["period"]), gt=0
    )

    @field_validator("decimal_digits")
    @classmethod
    def validate_decimal_digits(cls, digits: int) -> int:
        limit = get_max_decimal_digits()
        if not 0 <= digits <= limit:
            raise ValueError(f"must be between 0 and {limit}")
        return digits
