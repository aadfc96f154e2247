from datetime import datetime, timedelta, timezone

_EPOCH = datetime(1970, 1, 1, tzinfo=timezone.utc)


def to_epoch_seconds(instant: datetime) -> int:
    """@brief Convert a datetime into whole Unix epoch seconds.

    @param instant Datetime to convert. Naive values are read as UTC.
    @return Integer Unix timestamp, truncated toward the earlier second.
    """
    if instant.tzinfo is None:
        instant = instant.replace(tzinfo=timezone.utc)
    return int(instant.replace(microsecond=0).timestamp())


# Range of seconds representable as a UTC datetime (years 1 through 9999).
MIN_EPOCH = to_epoch_seconds(datetime.min)
MAX_EPOCH = to_epoch_seconds(datetime.max)


def to_iso(unix: int) -> str:
    """@brief Format Unix epoch seconds as an ISO-8601 UTC string.

    @param unix Integer Unix timestamp within `[MIN_EPOCH, MAX_EPOCH]`.
    @return String such as `2024-01-01T00:00:00.000Z`.
    """
    instant = _EPOCH + timedelta(seconds=unix)
    return instant.isoformat(timespec="milliseconds").replace("+00:00", "Z")
