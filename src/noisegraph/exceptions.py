"""Custom exceptions for the noise module graph."""

from enum import IntEnum


class ErrorKind(IntEnum):
    """Error codes carried by every noise exception."""

    UNKNOWN = 0
    INVALID_PARAMETER = 1
    MISSING_SOURCE_MODULE = 2
    OUT_OF_MEMORY = 3


class NoiseError(Exception):
    """Base exception for noise errors."""

    kind: ErrorKind = ErrorKind.UNKNOWN


class InvalidParameterError(NoiseError):
    """Raised when a parameter or source index is out of range."""

    kind = ErrorKind.INVALID_PARAMETER


class MissingSourceModuleError(NoiseError):
    """Raised when a source slot that was never wired is queried."""

    kind = ErrorKind.MISSING_SOURCE_MODULE


class GraphValidationError(NoiseError):
    """Raised when a module graph fails validation before evaluation."""

    kind = ErrorKind.INVALID_PARAMETER

    def __init__(self, errors: list[str]):
        self.errors = list(errors)
        super().__init__(
            f"Module graph failed validation with {len(self.errors)} errors: "
            + "; ".join(self.errors)
        )
