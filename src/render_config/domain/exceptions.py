"""Custom exceptions for render_config."""

from pathlib import Path


class RenderConfigError(Exception):
    """Base exception for render_config errors."""

    pass


class InvalidAddressError(RenderConfigError, ValueError):
    """Raised when a socket address cannot be parsed or validated.

    Subclasses ValueError so pydantic validators report it as a
    ValidationError when raised during model construction.
    """

    def __init__(self, value: object, reason: str | None = None) -> None:
        self.value = value
        self.reason = reason
        message = f"Invalid socket address {value!r}"
        if reason:
            message = f"{message}: {reason}"
        super().__init__(message)


class MissingFieldError(RenderConfigError):
    """Raised when a builder is finished without a required field."""

    def __init__(self, field_name: str) -> None:
        self.field_name = field_name
        super().__init__(f"Required field '{field_name}' was not set")


class InvalidOptionsError(RenderConfigError, ValueError):
    """Raised when a builder's fields fail RenderOptions validation.

    `errors` holds pydantic's error details.
    """

    def __init__(self, errors: list[dict]) -> None:
        self.errors = errors
        details = "; ".join(
            f"{'.'.join(str(loc) for loc in error['loc'])}: {error['msg']}"
            for error in errors
        )
        super().__init__(f"Invalid render options: {details}")


class SnapshotWriteError(RenderConfigError):
    """Raised when the render options snapshot file cannot be written."""

    def __init__(self, *, path: Path, cause: OSError) -> None:
        self.path = path
        self.cause = cause
        super().__init__(f"Unable to write snapshot file {path}: {cause}")
