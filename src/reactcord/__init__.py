"""
reactcord
Declarative, stateful discord messages
"""

__version__ = "0.3.0"

from .core import (
    Settings,
    get_settings,
    configure_logging,
    get_logger,
    ReactcordError,
    ElementConfigurationError,
    InvalidTargetError,
    new_custom_id,
)
from .interactions import (
    InteractionKind,
    InteractionRegistry,
    InteractionDispatcher,
    current_registry,
    default_registry,
    delete_handler,
    use_registry,
)
from .elements import (
    ActionRow,
    EmbedField,
    EmbedFooter,
    MessagePayload,
    ModalPayload,
    Tag,
    ElementResolver,
    Fragment,
    create_element,
)
from .components import Component, LiveMessage
from .delivery import deliver, use_state, resolve_target, TargetKind
from .client import Client

__all__ = [
    "__version__",
    # Core
    "Settings",
    "get_settings",
    "configure_logging",
    "get_logger",
    "ReactcordError",
    "ElementConfigurationError",
    "InvalidTargetError",
    "new_custom_id",
    # Interactions
    "InteractionKind",
    "InteractionRegistry",
    "InteractionDispatcher",
    "current_registry",
    "default_registry",
    "delete_handler",
    "use_registry",
    # Elements
    "ActionRow",
    "EmbedField",
    "EmbedFooter",
    "MessagePayload",
    "ModalPayload",
    "Tag",
    "ElementResolver",
    "Fragment",
    "create_element",
    # Components
    "Component",
    "LiveMessage",
    # Delivery
    "deliver",
    "use_state",
    "resolve_target",
    "TargetKind",
    # Client
    "Client",
]
