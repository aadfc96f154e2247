from datetime import datetime
from typing import Annotated

from pydantic import BeforeValidator

from synthseries.utils.timestamp import MAX_EPOCH, MIN_EPOCH, to_epoch_seconds


def _check_range(unix: int) -> int:
    if not MIN_EPOCH <= unix <= MAX_EPOCH:
        raise ValueError(
            f"must be between {MIN_EPOCH} and {MAX_EPOCH} (years 1 through 9999 UTC), got {unix}"
        )
    return unix


def parse_instant(instant: object) -> int:
    """@brief Normalize an ISO-8601 string or integer epoch into epoch seconds."""
    if isinstance(instant, bool):
        raise ValueError("must be an ISO-8601 string or integer Unix timestamp")

    if isinstance(instant, int):
        return _check_range(instant)

    if isinstance(instant, datetime):
        return _check_range(to_epoch_seconds(instant))

    if isinstance(instant, str):
        value = instant.strip()
        try:
            parsed = datetime.fromisoformat(value)
        except ValueError as exc:
            raise ValueError(f"must be an ISO-8601 date-time, got {instant!r}") from exc
        return _check_range(to_epoch_seconds(parsed))

    raise ValueError("must be an ISO-8601 string or integer Unix timestamp")


Instant = Annotated[int, BeforeValidator(parse_instant)]
