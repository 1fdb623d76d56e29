"""
Error handling for extent.

The checked API of Extent is total over valid integers of its kind, so
these errors only surface at the edges: values that are not integers of
the right kind, combining extents of different kinds, converting to a
representation that cannot hold the range, and decoding raw payloads.
"""

from dataclasses import dataclass, field
from enum import IntEnum
from typing import Any


class ErrorCode(IntEnum):
    """Internal error codes for categorization."""

    # Input errors (1000-1999)
    INVALID_VALUE = 1001
    VALUE_OUT_OF_RANGE = 1002
    UNKNOWN_KIND = 1003

    # Combination errors (2000-2999)
    KIND_MISMATCH = 2001

    # Conversion errors (3000-3999)
    UNREPRESENTABLE = 3001

    # Serialization errors (4000-4999)
    INVALID_PAYLOAD = 4001


@dataclass
class ErrorContext:
    """Context information for an error."""

    operation: str | None = None
    kind: str | None = None
    value: Any = None
    additional_info: dict[str, Any] = field(default_factory=dict)


class ExtentError(Exception):
    """Base error class for extent."""

    def __init__(
        self,
        code: ErrorCode,
        message: str,
        context: ErrorContext | None = None,
        original_error: Exception | None = None,
    ) -> None:
        super().__init__(message)
        self.code = code
        self.context = context or ErrorContext()
        self.original_error = original_error

    def get_formatted_message(self) -> str:
        """Get a formatted error message for display."""
        parts = [
            f"[Error] {self}",
            f"   Code: {self.code.value}",
        ]

        if self.context.operation:
            parts.append(f"   Operation: {self.context.operation}")
        if self.context.kind:
            parts.append(f"   Kind: {self.context.kind}")
        if self.context.value is not None:
            parts.append(f"   Value: {self.context.value!r}")

        return "\n".join(parts)

    def to_dict(self) -> dict[str, Any]:
        """Convert to a JSON-serializable dictionary."""
        return {
            "name": self.__class__.__name__,
            "code": self.code.value,
            "message": str(self),
            "context": {
                "operation": self.context.operation,
                "kind": self.context.kind,
                "value": repr(self.context.value) if self.context.value is not None else None,
                "additional_info": self.context.additional_info,
            },
            "original_error": str(self.original_error) if self.original_error else None,
        }


class ValidationError(ExtentError):
    """A bound is not an integer, or not representable in the extent's kind."""

    def __init__(
        self,
        message: str,
        code: ErrorCode = ErrorCode.INVALID_VALUE,
        context: ErrorContext | None = None,
        original_error: Exception | None = None,
    ) -> None:
        super().__init__(
            code=code,
            message=message,
            context=context,
            original_error=original_error,
        )


class KindMismatchError(ExtentError):
    """Two extents of different integer kinds were combined."""

    def __init__(
        self,
        message: str,
        context: ErrorContext | None = None,
    ) -> None:
        super().__init__(
            code=ErrorCode.KIND_MISMATCH,
            message=message,
            context=context,
        )


class ConversionError(ExtentError):
    """An extent cannot be expressed in the requested representation."""

    def __init__(
        self,
        message: str,
        context: ErrorContext | None = None,
        original_error: Exception | None = None,
    ) -> None:
        super().__init__(
            code=ErrorCode.UNREPRESENTABLE,
            message=message,
            context=context,
            original_error=original_error,
        )


class SerializationError(ExtentError):
    """A raw payload could not be encoded or decoded."""

    def __init__(
        self,
        message: str,
        context: ErrorContext | None = None,
        original_error: Exception | None = None,
    ) -> None:
        super().__init__(
            code=ErrorCode.INVALID_PAYLOAD,
            message=message,
            context=context,
            original_error=original_error,
        )
