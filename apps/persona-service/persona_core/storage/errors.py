"""
Error kinds and result type for training content storage.

Manager operations hand back a `StorageResult` instead of raising; the error
side always carries one of the four `ErrorKind` values plus structured
details so callers can branch on `kind` without parsing messages.
"""
from __future__ import annotations

import enum
from dataclasses import dataclass, field
from typing import Any, Dict, Generic, Optional, TypeVar

T = TypeVar("T")


class ErrorKind(str, enum.Enum):
    CONTENT_TOO_LARGE = "content_too_large"
    INVALID_LOCATION_FORMAT = "invalid_location_format"
    UNSUPPORTED_SCHEME = "unsupported_scheme"
    STORAGE_IO_FAILURE = "storage_io_failure"

    @property
    def is_validation(self) -> bool:
        """Caller-correctable kinds; everything else is technical."""
        return self in (ErrorKind.CONTENT_TOO_LARGE, ErrorKind.INVALID_LOCATION_FORMAT)


class TrainingStorageError(Exception):
    """Base class for every storage failure surfaced to callers."""

    kind: ErrorKind

    def __init__(self, message: str, **details: Any) -> None:
        super().__init__(message)
        self.message = message
        self.details: Dict[str, Any] = details

    def to_dict(self) -> Dict[str, Any]:
        return {"kind": self.kind.value, "message": self.message, "details": dict(self.details)}


class ContentTooLarge(TrainingStorageError):
    kind = ErrorKind.CONTENT_TOO_LARGE

    def __init__(self, category: str, limit: int, actual: int) -> None:
        super().__init__(
            f"{category.capitalize()} training content exceeds maximum size of "
            f"{limit} characters (current: {actual})",
            category=category,
            limit=limit,
            actual=actual,
        )
        self.limit = limit
        self.actual = actual


class InvalidLocationFormat(TrainingStorageError):
    kind = ErrorKind.INVALID_LOCATION_FORMAT

    def __init__(self, descriptor: str) -> None:
        super().__init__(f"Invalid location format: {descriptor!r}", descriptor=descriptor)
        self.descriptor = descriptor


class UnsupportedScheme(TrainingStorageError):
    kind = ErrorKind.UNSUPPORTED_SCHEME

    def __init__(self, scheme: str, supported: Optional[list] = None) -> None:
        supported = sorted(supported or [])
        super().__init__(
            f"Unsupported location scheme '{scheme}'. Currently supported: "
            + (", ".join(f"{s}://" for s in supported) or "none"),
            scheme=scheme,
            supported=supported,
        )
        self.scheme = scheme


class StorageIOFailure(TrainingStorageError):
    kind = ErrorKind.STORAGE_IO_FAILURE

    def __init__(self, operation: str, path: str, cause: BaseException) -> None:
        super().__init__(
            f"Training storage {operation} failed for {path}: {cause}",
            operation=operation,
            path=path,
            cause=type(cause).__name__,
        )
        self.operation = operation
        self.path = path
        self.cause = cause


@dataclass(frozen=True)
class StorageResult(Generic[T]):
    """Either a value or a `TrainingStorageError`, never both."""

    value: Optional[T] = None
    error: Optional[TrainingStorageError] = field(default=None)

    @classmethod
    def success(cls, value: T) -> "StorageResult[T]":
        return cls(value=value)

    @classmethod
    def failure(cls, error: TrainingStorageError) -> "StorageResult[T]":
        return cls(error=error)

    @property
    def ok(self) -> bool:
        return self.error is None

    def unwrap(self) -> T:
        """Return the value, raising the carried error on failure."""
        if self.error is not None:
            raise self.error
        return self.value  # type: ignore[return-value]
