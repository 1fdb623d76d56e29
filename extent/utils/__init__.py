"""
extent utility modules.

- Logging (loguru, disabled until configure_logging() is called)
- Raw serialization of extents
"""

# Logger
from .logger import (
    configure_logging,
    disable_logging,
    get_log_level,
    is_debug_enabled,
    logger,
)

# Serialization
from .serialization import (
    extent_from_dict,
    extent_to_dict,
    from_raw,
    get_default_kind,
    pack_extent,
    serialize_to_primitives,
    to_raw,
    unpack_extent,
)

__all__ = [
    # Logger
    "configure_logging",
    "disable_logging",
    "get_log_level",
    "is_debug_enabled",
    "logger",
    # Serialization
    "extent_from_dict",
    "extent_to_dict",
    "from_raw",
    "get_default_kind",
    "pack_extent",
    "serialize_to_primitives",
    "to_raw",
    "unpack_extent",
]
