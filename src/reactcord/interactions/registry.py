"""
Interaction Registry
Keyed table of pending handlers, looked up by custom id
"""

from collections.abc import Iterator
from contextlib import contextmanager
from contextvars import ContextVar
from typing import Any

from ..core.logging_config import get_logger
from .types import Handler, InteractionKind, ListenerEntry

logger = get_logger(__name__)


class InteractionRegistry:
    """
    Table of pending interaction handlers.

    At most one entry exists per custom id; registering an id again
    replaces the previous handler. Not thread-safe: all access is expected
    to happen on the bot's event loop.
    """

    def __init__(self) -> None:
        self._entries: dict[str, ListenerEntry] = {}

    def register(
        self,
        custom_id: str,
        handler: Handler,
        kind: InteractionKind,
        once: bool | None = None,
    ) -> ListenerEntry:
        """
        Register a handler for a custom id.

        Args:
            custom_id: Identifier the platform echoes back on interaction
            handler: Called as handler(interaction, off)
            kind: Element kind that owns the handler
            once: Expire after first dispatch (None = kind default)

        Returns:
            The stored entry
        """
        entry = ListenerEntry(handler=handler, kind=kind, once=once)
        replaced = custom_id in self._entries
        self._entries[custom_id] = entry
        logger.debug(
            "listener_registered",
            custom_id=custom_id,
            kind=kind.value,
            once=once,
            replaced=replaced,
        )
        return entry

    def unregister(self, custom_id: str) -> bool:
        """Remove the handler for a custom id. Returns False if none was registered."""
        if self._entries.pop(custom_id, None) is None:
            return False
        logger.debug("listener_unregistered", custom_id=custom_id)
        return True

    def get(self, custom_id: str) -> ListenerEntry | None:
        """Get the entry registered for a custom id"""
        return self._entries.get(custom_id)

    def clear(self) -> None:
        """Drop every pending handler"""
        self._entries.clear()

    def __contains__(self, custom_id: object) -> bool:
        return custom_id in self._entries

    def __len__(self) -> int:
        return len(self._entries)

    def get_stats(self) -> dict[str, Any]:
        """Get registry statistics"""
        kinds: dict[str, int] = {}
        for entry in self._entries.values():
            kinds[entry.kind.value] = kinds.get(entry.kind.value, 0) + 1

        return {
            "total_listeners": len(self._entries),
            "kinds": kinds,
            "custom_ids": list(self._entries.keys()),
        }


default_registry = InteractionRegistry()
"""Registry used when no other registry is in scope"""

_current_registry: ContextVar[InteractionRegistry | None] = ContextVar(
    "reactcord_registry", default=None
)


def current_registry() -> InteractionRegistry:
    """Registry that elements resolved right now register their handlers in."""
    registry = _current_registry.get()
    return default_registry if registry is None else registry


@contextmanager
def use_registry(registry: InteractionRegistry) -> Iterator[InteractionRegistry]:
    """Resolve elements against ``registry`` for the duration of the block."""
    token = _current_registry.set(registry)
    try:
        yield registry
    finally:
        _current_registry.reset(token)


def delete_handler(custom_id: str) -> bool:
    """Unregister a custom id from the registry currently in scope."""
    return current_registry().unregister(custom_id)
