"""
Logging utility for extent.

extent is a library, so its loguru records are disabled on import and
only show up once an application opts in with configure_logging().

Environment switches:
- EXTENT_LOG_LEVEL: explicit level name (DEBUG, INFO, ...)
- EXTENT_DEBUG: "true" selects DEBUG when no explicit level is set
"""

import os
import sys

from loguru import logger as loguru_logger

from extent.constants import DEFAULT_LOG_LEVEL, ENV_DEBUG, ENV_LOG_LEVEL

# Sink installed by configure_logging(), so repeated calls replace it
_sink_id: int | None = None


def is_debug_enabled() -> bool:
    """Check if debug mode is enabled."""
    return os.environ.get(ENV_DEBUG, "").lower() == "true"


def get_log_level() -> str:
    """Resolve the log level from the environment."""
    level = os.environ.get(ENV_LOG_LEVEL, "").strip().upper()
    if level:
        return level
    return "DEBUG" if is_debug_enabled() else DEFAULT_LOG_LEVEL


def configure_logging(level: str | None = None, sink=None) -> int:
    """
    Enable extent's log records and route them to a sink.

    Args:
        level: Minimum level; defaults to get_log_level()
        sink: Any loguru sink; defaults to stderr

    Returns:
        The loguru handler id of the installed sink
    """
    global _sink_id

    if _sink_id is not None:
        try:
            loguru_logger.remove(_sink_id)
        except ValueError:
            # Already removed by the application
            pass

    resolved = level or get_log_level()
    _sink_id = loguru_logger.add(
        sink if sink is not None else sys.stderr,
        level=resolved,
        filter="extent",
    )
    loguru_logger.enable("extent")
    return _sink_id


def disable_logging() -> None:
    """Silence extent's records and drop the sink installed by configure_logging()."""
    global _sink_id

    loguru_logger.disable("extent")
    if _sink_id is not None:
        try:
            loguru_logger.remove(_sink_id)
        except ValueError:
            pass
        _sink_id = None


# Export loguru logger for direct use
logger = loguru_logger
