"""
extent - inclusive integer ranges.

Provides:
- Extent: an inclusive range [lo, hi] that can also be empty, stored as
  exactly two integers
- Fixed-width flavours (ExtentU8 ... ExtentI128) that keep bounds
  representable and iterate safely up to a kind's maximum
- Forward and reverse iterators, covering union, intersection, containment
- Raw round-tripping for IO
"""

from loguru import logger as _logger

from extent.types import (
    ConversionError,
    Extent,
    ExtentError,
    ExtentI8,
    ExtentI16,
    ExtentI32,
    ExtentI64,
    ExtentI128,
    ExtentIter,
    ExtentRevIter,
    ExtentU8,
    ExtentU16,
    ExtentU32,
    ExtentU64,
    ExtentU128,
    IntKind,
    KindMismatchError,
    SerializationError,
    ValidationError,
)

__version__ = "0.1.0"

# Library logging stays quiet until the application calls configure_logging()
_logger.disable("extent")

__all__ = [
    "ConversionError",
    "Extent",
    "ExtentError",
    "ExtentI8",
    "ExtentI16",
    "ExtentI32",
    "ExtentI64",
    "ExtentI128",
    "ExtentIter",
    "ExtentRevIter",
    "ExtentU8",
    "ExtentU16",
    "ExtentU32",
    "ExtentU64",
    "ExtentU128",
    "IntKind",
    "KindMismatchError",
    "SerializationError",
    "ValidationError",
    "__version__",
]
