"""
Extent type definitions.

This module exports the inclusive range type, its iterators, the integer
kinds it can range over, and its error types.
"""

# Core types
from .core import (
    Extent,
    ExtentI8,
    ExtentI16,
    ExtentI32,
    ExtentI64,
    ExtentI128,
    ExtentU8,
    ExtentU16,
    ExtentU32,
    ExtentU64,
    ExtentU128,
)
from .iterators import ExtentIter, ExtentRevIter
from .kinds import IntKind, parse_kind

# Error types
from .errors import (
    ConversionError,
    ErrorCode,
    ErrorContext,
    ExtentError,
    KindMismatchError,
    SerializationError,
    ValidationError,
)

__all__ = [
    # Core types
    "Extent",
    "ExtentI8",
    "ExtentI16",
    "ExtentI32",
    "ExtentI64",
    "ExtentI128",
    "ExtentU8",
    "ExtentU16",
    "ExtentU32",
    "ExtentU64",
    "ExtentU128",
    "ExtentIter",
    "ExtentRevIter",
    "IntKind",
    "parse_kind",
    # Error types
    "ErrorCode",
    "ErrorContext",
    "ExtentError",
    "ValidationError",
    "KindMismatchError",
    "ConversionError",
    "SerializationError",
]
