from enum import Enum


class SamplingMode(str, Enum):
    """@brief Policy used to place timestamps inside the series window.

    @var EVENLY_SPACED Fixed step of `interval` seconds from `from` to `until`.
    @var RANDOM `numOfData` independent uniform draws, sorted ascending.
    """

    EVENLY_SPACED = "evenly_spaced"
    RANDOM = "random"

    @classmethod
    def _missing_(cls, value: object) -> "SamplingMode | None":
        if not isinstance(value, str):
            return None
        normalized = value.strip().lower()
        if normalized == "monospaced":
            return cls.EVENLY_SPACED
        for member in cls:
            if member.value == normalized:
                return member
        return None
