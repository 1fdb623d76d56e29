"""Shared constants for extent.

Centralizes the canonical empty representation and the environment
variables read by the logging and serialization layers.
"""

# Canonical empty extent: the only stored pair with lo > hi.
# Both values are representable in every integer kind.
EMPTY_LO: int = 1
EMPTY_HI: int = 0

# Environment switches (read at call time, never cached)
ENV_DEBUG: str = "EXTENT_DEBUG"
ENV_LOG_LEVEL: str = "EXTENT_LOG_LEVEL"
ENV_DEFAULT_KIND: str = "EXTENT_DEFAULT_KIND"

DEFAULT_LOG_LEVEL: str = "INFO"

# Byte order used by pack_extent / unpack_extent
BYTE_ORDER = "little"
