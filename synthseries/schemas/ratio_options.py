from pydantic import BaseModel, ConfigDict, Field, field_validator, model_validator

from synthseries.schemas.numbers import FiniteNumber


class RatioOptions(BaseModel):
    """@brief Parameters of a ratio sampler.

    @details `values[i]` is drawn with probability
    `ratios[i] / sum(ratios)`. Ratios need not sum to one.
    """

    model_config = ConfigDict(extra="forbid", frozen=True)

    values: list[FiniteNumber] = Field(..., min_length=1)
    ratios: list[FiniteNumber] = Field(..., min_length=1)

    @field_validator("ratios")
    @classmethod
    def validate_ratios(cls, ratios: list[float]) -> list[float]:
        """@brief Validate ratios as non-negative weights with a positive sum."""
        if any(ratio < 0 for ratio in ratios):
            raise ValueError("must contain only non-negative numbers")
        if sum(ratios) <= 0:
            raise ValueError("must contain at least one positive number")
        return ratios

    @model_validator(mode="after")
    def validate_lengths(self) -> "RatioOptions":
        """@brief Ensure every value has exactly one ratio."""
        if len(self.values) != len(self.ratios):
            raise ValueError("values and ratios must have the same length")
        return self

    def probabilities(self) -> list[float]:
        """@brief Return ratios normalized to sum to one."""
        total = sum(self.ratios)
        return [ratio / total for ratio in self.ratios]
