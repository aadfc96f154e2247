from math import isfinite
from typing import Annotated

from pydantic import BeforeValidator


def _validate_finite_number(value: object) -> float:
    """@brief Validate value as a finite int or float, rejecting booleans."""
    if isinstance(value, bool) or not isinstance(value, (float, int)):
        raise ValueError("must be a number")
    if not isfinite(value):
        raise ValueError("cannot be NaN or infinite")
    return float(value)


def _validate_integer(value: object) -> int:
    """@brief Validate value as an int, rejecting booleans and floats."""
    if isinstance(value, bool) or not isinstance(value, int):
        raise ValueError("must be an integer")
    return value


FiniteNumber = Annotated[float, BeforeValidator(_validate_finite_number)]
Integer = Annotated[int, BeforeValidator(_validate_integer)]
