from pydantic import BaseModel, ConfigDict, Field, field_validator

from synthseries.schemas.numbers import FiniteNumber, Integer
from synthseries.utils.params import get_gaussian_defaults, get_max_decimal_digits


class GaussianOptions(BaseModel):
    """@brief Shape options for Gaussian noise series.

    @note `variance` must be non-negative; a zero variance yields `mean`
    for every timestamp.
    """

    model_config = ConfigDict(extra="forbid", frozen=True, populate_by_name=True)

    mean: FiniteNumber = Field(
        default_factory=lambda: float(get_gaussian_defaults()["mean"])
    )
    variance: FiniteNumber = Field(
        default_factory=lambda: float(get_gaussian_defaults()["variance"]), ge=0
    )
    decimal_digits: Integer = Field(
        default_factory=lambda: int(get_gaussian_defaults()["decimal_digits"]),
        alias="decimalDigits",
    )

    @field_validator("decimal_digits")
    @classmethod
    def validate_decimal_digits(cls, digits: int) -> int:
        limit = get_max_decimal_digits()
        if not 0 <= digits <= limit:
            raise ValueError(f"must be between 0 and {limit}")
        return digits
