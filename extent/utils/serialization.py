"""Raw round-tripping of extents.

Everything here goes through the raw path (lo_unchecked / hi_unchecked on
the way out, new_unchecked on the way back), so the empty sentinel is
written as its stored pair (1, 0) and read back as Extent.empty(), and
ordered pairs are not re-sorted on load.

Formats:
- raw pair: (lo, hi)
- dict: {"kind": "u8" | None, "lo": int, "hi": int}
- packed bytes: two little-endian fields of the kind's width
"""

import os
from enum import Enum
from typing import Any

from loguru import logger

from extent.constants import BYTE_ORDER, ENV_DEFAULT_KIND
from extent.types.core import Extent
from extent.types.errors import ErrorContext, ExtentError, SerializationError
from extent.types.kinds import IntKind, parse_kind


def to_raw(extent: Extent) -> tuple[int, int]:
    """Stored (lo, hi) pair of an extent, including the empty sentinel."""
    return (extent.lo_unchecked(), extent.hi_unchecked())


def from_raw(kind: IntKind | str | None, pair: tuple[int, int]) -> Extent:
    """Rebuild an extent from a pair produced by to_raw()."""
    lo, hi = pair
    return Extent.of(kind).new_unchecked(lo, hi)


def extent_to_dict(extent: Extent) -> dict[str, Any]:
    """Convert an extent to a JSON-serializable dictionary.

    Examples:
        >>> extent_to_dict(Extent.of("u8")(3, 1))
        {'kind': 'u8', 'lo': 1, 'hi': 3}
    """
    lo, hi = to_raw(extent)
    return {
        "kind": extent.kind.value if extent.kind is not None else None,
        "lo": lo,
        "hi": hi,
    }


def get_default_kind() -> IntKind | None:
    """Kind assumed for payloads without a "kind" key (EXTENT_DEFAULT_KIND)."""
    return parse_kind(os.environ.get(ENV_DEFAULT_KIND))


def extent_from_dict(data: dict[str, Any]) -> Extent:
    """
    Rebuild an extent from the output of extent_to_dict().

    A missing "kind" falls back to get_default_kind().

    Raises:
        SerializationError: If the payload is malformed
    """
    if not isinstance(data, dict):
        raise SerializationError(
            f"Expected a dict, got {type(data).__name__}",
            context=ErrorContext(operation="extent_from_dict", value=data),
        )

    missing = [key for key in ("lo", "hi") if key not in data]
    if missing:
        raise SerializationError(
            f"Extent payload is missing {', '.join(missing)}",
            context=ErrorContext(operation="extent_from_dict", value=data),
        )

    try:
        kind = parse_kind(data["kind"]) if "kind" in data else get_default_kind()
        return Extent.of(kind).new_unchecked(data["lo"], data["hi"])
    except ExtentError as e:
        logger.debug(f"Rejected extent payload {data!r}: {e}")
        raise SerializationError(
            f"Invalid extent payload: {e}",
            context=ErrorContext(operation="extent_from_dict", value=data),
            original_error=e,
        ) from e


def pack_extent(extent: Extent) -> bytes:
    """
    Encode an extent as its two stored fields at the kind's width.

    Raises:
        SerializationError: If the extent is unbounded (no fixed width)
    """
    kind = extent.kind
    if kind is None:
        raise SerializationError(
            "Unbounded extents have no fixed-width encoding",
            context=ErrorContext(operation="pack_extent", value=extent),
        )
    lo, hi = to_raw(extent)
    return lo.to_bytes(kind.byte_size, BYTE_ORDER, signed=kind.signed) + hi.to_bytes(
        kind.byte_size, BYTE_ORDER, signed=kind.signed
    )


def unpack_extent(kind: IntKind | str, data: bytes) -> Extent:
    """
    Decode the output of pack_extent().

    Raises:
        SerializationError: If the kind is missing or the payload has the wrong length
    """
    try:
        resolved = parse_kind(kind)
    except ExtentError as e:
        raise SerializationError(
            f"Invalid extent kind: {e}",
            context=ErrorContext(operation="unpack_extent", value=kind),
            original_error=e,
        ) from e
    if resolved is None:
        raise SerializationError(
            "unpack_extent needs a fixed-width kind",
            context=ErrorContext(operation="unpack_extent"),
        )

    size = resolved.byte_size
    if len(data) != 2 * size:
        logger.debug(f"Packed {resolved.value} extent has {len(data)} bytes, expected {2 * size}")
        raise SerializationError(
            f"Packed {resolved.value} extent must be {2 * size} bytes, got {len(data)}",
            context=ErrorContext(operation="unpack_extent", kind=resolved.value, value=bytes(data)),
        )

    lo = int.from_bytes(data[:size], BYTE_ORDER, signed=resolved.signed)
    hi = int.from_bytes(data[size:], BYTE_ORDER, signed=resolved.signed)
    return Extent.of(resolved).new_unchecked(lo, hi)


def serialize_to_primitives(data: Any) -> Any:
    """Convert extents, and containers of them, to JSON-serializable primitives.

    Handles:
    - Enum (including IntKind): converted to value
    - Primitives (str, int, float, bool, None): returned as-is
    - Extent: converted via extent_to_dict()
    - dict: recursively serialize keys and values
    - list/tuple: recursively serialize items
    - range: converted to {"start", "stop", "step"}

    Examples:
        >>> serialize_to_primitives({"span": Extent(0, 2)})
        {'span': {'kind': None, 'lo': 0, 'hi': 2}}
    """
    # Before primitives: IntKind is also a str
    if isinstance(data, Enum):
        return data.value

    if data is None or isinstance(data, (str, int, float, bool)):
        return data

    if isinstance(data, Extent):
        return extent_to_dict(data)

    if isinstance(data, dict):
        return {
            serialize_to_primitives(k): serialize_to_primitives(v)
            for k, v in data.items()
        }

    if isinstance(data, (list, tuple)):
        return [serialize_to_primitives(item) for item in data]

    if isinstance(data, range):
        return {"start": data.start, "stop": data.stop, "step": data.step}

    raise TypeError(f"Cannot serialize {type(data).__name__}")
