"""Custom ID Generation.

ULID-based identifiers for interactive elements. Discord echoes an element's
custom id back on every interaction, so ids double as registry keys.

Design:
- Prefixed: "counter:01J9..." keeps logs readable
- K-sortable: newer elements sort after older ones
- Bounded: never longer than the platform's custom id limit
"""

from typing import NewType
from ulid import ULID

CustomID = NewType("CustomID", str)
"""Registry key echoed back by the platform"""

MAX_CUSTOM_ID_LENGTH = 100
SEPARATOR = ":"


def new_custom_id(prefix: str = "rc") -> CustomID:
    """
    Generate a unique custom id.

    Args:
        prefix: Human-readable prefix (truncated to fit the length limit)

    Returns:
        "{prefix}:{ULID}"
    """
    suffix = str(ULID())
    room = MAX_CUSTOM_ID_LENGTH - len(suffix) - len(SEPARATOR)
    return CustomID(f"{prefix[:room]}{SEPARATOR}{suffix}")


def split_custom_id(custom_id: str) -> tuple[str, str]:
    """Split a generated id back into (prefix, ulid)."""
    prefix, _, suffix = custom_id.rpartition(SEPARATOR)
    return prefix, suffix
