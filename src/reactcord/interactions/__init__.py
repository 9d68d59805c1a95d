"""
Interaction Routing
Registry of pending handlers and the inbound dispatcher
"""

from .types import DEFAULT_ONCE, Handler, InteractionKind, ListenerEntry, Off, is_once
from .registry import (
    InteractionRegistry,
    current_registry,
    default_registry,
    delete_handler,
    use_registry,
)
from .dispatcher import InteractionDispatcher, custom_id_of

__all__ = [
    "DEFAULT_ONCE",
    "Handler",
    "InteractionKind",
    "ListenerEntry",
    "Off",
    "is_once",
    "InteractionRegistry",
    "current_registry",
    "default_registry",
    "delete_handler",
    "use_registry",
    "InteractionDispatcher",
    "custom_id_of",
]
