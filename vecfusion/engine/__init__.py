"""Engine-facing types.

Primary components:
- ``base``: abstract ``VectorEngine`` interface plus ``Doc`` and ``VectorQuery``.
- ``types``: ``MetricType`` and other shared enumerations.
- ``errors``: ``StatusCode``, the exception hierarchy, and ``check_status``.

Guidance:
- The engine itself is external; code here only describes how to talk to it.
"""

from .base import Doc, VectorEngine, VectorQuery
from .errors import (
    AlreadyExistsError,
    DimensionMismatchError,
    FailedPreconditionError,
    FieldNotFoundError,
    InternalError,
    InvalidArgumentError,
    NotFoundError,
    NotSupportedError,
    PermissionDeniedError,
    StatusCode,
    UnknownError,
    VectorEngineError,
    check_status,
)
from .types import MetricType

__all__ = [
    "Doc",
    "VectorEngine",
    "VectorQuery",
    "MetricType",
    "StatusCode",
    "VectorEngineError",
    "NotFoundError",
    "AlreadyExistsError",
    "InvalidArgumentError",
    "NotSupportedError",
    "InternalError",
    "PermissionDeniedError",
    "FailedPreconditionError",
    "UnknownError",
    "FieldNotFoundError",
    "DimensionMismatchError",
    "check_status",
]
