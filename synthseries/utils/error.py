from typing import Type

from pydantic import ValidationError


class OptionsValidationError(ValueError):
    """@brief Base error for rejected option objects.

    @var field Dotted path of the offending option, or None for cross-field rules.
    @var constraint Human readable description of the violated constraint.
    """

    def __init__(self, field: str | None, constraint: str) -> None:
        self.field = field
        self.constraint = constraint
        location = f"options.{field}" if field else "options"
        super().__init__(f"{location} {constraint}")


class ConfigurationError(OptionsValidationError):
    """@brief Malformed or out-of-domain base series configuration."""


class ShapeOptionsError(OptionsValidationError):
    """@brief Malformed options passed to a single generator method call."""


class UnsupportedModeError(ConfigurationError):
    """@brief Sampling mode tag that the sequencer does not know how to handle."""

    def __init__(self, mode: object) -> None:
        super().__init__("samplingMode", f"has unsupported value {mode!r}")


def _first_error_field(exc: ValidationError) -> str | None:
    errors = exc.errors()
    if not errors:
        return None
    loc = [str(part) for part in errors[0].get("loc", ())]
    return ".".join(loc) or None


def _first_error_message(exc: ValidationError) -> str:
    errors = exc.errors()
    if not errors:
        return str(exc)
    message = str(errors[0].get("msg", ""))
    # Messages raised from validators are prefixed by pydantic.
    return message.removeprefix("Value error, ")


def translate_validation_error(
    exc: ValidationError, error_cls: Type[OptionsValidationError]
) -> OptionsValidationError:
    """@brief Convert a pydantic ValidationError into a domain options error.

    @param exc Pydantic error raised while validating an options object.
    @param error_cls Domain error class to instantiate.
    @return Domain error describing the first offending field.
    """
    return error_cls(_first_error_field(exc), _first_error_message(exc))

