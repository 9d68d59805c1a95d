"""
Interaction Type Definitions
Listener entries and the once-semantics rule
"""

from collections.abc import Awaitable, Callable, Collection
from enum import Enum
from typing import Any

from pydantic import BaseModel, ConfigDict, Field


class InteractionKind(str, Enum):
    """Interactive element kinds that can own a handler"""
    BUTTON = "button"
    SELECT_MENU = "select_menu"
    MODAL = "modal"


DEFAULT_ONCE: frozenset[InteractionKind] = frozenset({InteractionKind.MODAL})
"""Kinds that expire after one dispatch unless told otherwise"""


Off = Callable[[], bool]
"""Unregisters the handler that received it; returns whether anything was removed"""

Handler = Callable[[Any, Off], Awaitable[Any] | Any]
"""Interaction handler: (interaction, off) -> anything, possibly awaitable"""


class ListenerEntry(BaseModel):
    """Pending handler for one custom id"""

    model_config = ConfigDict(frozen=True)

    handler: Callable[..., Any]
    kind: InteractionKind
    once: bool | None = Field(default=None, description="None = use the kind's default")


def is_once(entry: ListenerEntry, default_once: Collection[InteractionKind] = DEFAULT_ONCE) -> bool:
    """
    Effective once-ness of an entry.

    An explicit ``once=True`` always expires; kinds in ``default_once``
    expire unless the entry says ``once=False``.
    """
    if entry.once is True:
        return True
    return entry.kind in default_once and entry.once is not False
