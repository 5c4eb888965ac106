"""Engine status codes and the exceptions they translate to.

The native engine reports failures as a numeric status plus a message.
``check_status`` turns that pair into one exception from a small closed
hierarchy rooted at ``VectorEngineError`` so callers can catch broadly or
per condition.
"""

from enum import IntEnum
from typing import Dict, Optional, Type


class StatusCode(IntEnum):
    """Status codes reported by the engine."""
    OK = 0
    NOT_FOUND = 1
    ALREADY_EXISTS = 2
    INVALID_ARGUMENT = 3
    NOT_SUPPORTED = 4
    INTERNAL_ERROR = 5
    PERMISSION_DENIED = 6
    FAILED_PRECONDITION = 7
    UNKNOWN = 8

    @classmethod
    def from_code(cls, code: int) -> "StatusCode":
        """Map a raw integer to a status; unrecognized values become ``UNKNOWN``."""
        try:
            return cls(code)
        except ValueError:
            return cls.UNKNOWN


class VectorEngineError(Exception):
    """Base exception for engine operations."""

    code = StatusCode.UNKNOWN
    label = "Unknown error"

    def __init__(self, message: str = ""):
        super().__init__(message)
        self.message = message

    def __str__(self) -> str:
        return f"{self.label}: {self.message}"


class NotFoundError(VectorEngineError):
    """Requested collection, document, or index does not exist."""
    code = StatusCode.NOT_FOUND
    label = "Not found"


class AlreadyExistsError(VectorEngineError):
    """Entity being created already exists."""
    code = StatusCode.ALREADY_EXISTS
    label = "Already exists"


class InvalidArgumentError(VectorEngineError):
    """Malformed request."""
    code = StatusCode.INVALID_ARGUMENT
    label = "Invalid argument"


class NotSupportedError(VectorEngineError):
    """Operation not supported by the engine or index type."""
    code = StatusCode.NOT_SUPPORTED
    label = "Not supported"


class InternalError(VectorEngineError):
    """Engine-side failure."""
    code = StatusCode.INTERNAL_ERROR
    label = "Internal error"


class PermissionDeniedError(VectorEngineError):
    """Caller lacks access to the resource."""
    code = StatusCode.PERMISSION_DENIED
    label = "Permission denied"


class FailedPreconditionError(VectorEngineError):
    """System is not in a state that allows the operation."""
    code = StatusCode.FAILED_PRECONDITION
    label = "Failed precondition"


class UnknownError(VectorEngineError):
    """Status the client does not recognize."""
    code = StatusCode.UNKNOWN
    label = "Unknown error"


class FieldNotFoundError(NotFoundError):
    """Vector or scalar field is not part of the collection schema."""
    label = "Field not found"


class DimensionMismatchError(InvalidArgumentError):
    """Vector length differs from the field's declared dimension."""

    def __init__(self, expected: int, actual: int):
        super().__init__(f"expected {expected}, got {actual}")
        self.expected = expected
        self.actual = actual

    def __str__(self) -> str:
        return f"Vector dimension mismatch: {self.message}"


_ERRORS_BY_CODE: Dict[StatusCode, Type[VectorEngineError]] = {
    StatusCode.NOT_FOUND: NotFoundError,
    StatusCode.ALREADY_EXISTS: AlreadyExistsError,
    StatusCode.INVALID_ARGUMENT: InvalidArgumentError,
    StatusCode.NOT_SUPPORTED: NotSupportedError,
    StatusCode.INTERNAL_ERROR: InternalError,
    StatusCode.PERMISSION_DENIED: PermissionDeniedError,
    StatusCode.FAILED_PRECONDITION: FailedPreconditionError,
    StatusCode.UNKNOWN: UnknownError,
}


def check_status(code: int, message: Optional[str] = None) -> None:
    """Raise the exception matching ``code``; return quietly on ``OK``."""
    status = StatusCode.from_code(code)
    if status is StatusCode.OK:
        return
    raise _ERRORS_BY_CODE[status](message or "")
