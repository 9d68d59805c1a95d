"""
Delivery
Sending, replying and editing on behalf of components
"""

from .transport import (
    TargetKind,
    resolve_target,
    send_payload,
    update_interaction,
    edit_message,
    to_kwargs,
    to_view,
    to_modal,
)
from .adapter import deliver, use_state

__all__ = [
    "TargetKind",
    "resolve_target",
    "send_payload",
    "update_interaction",
    "edit_message",
    "to_kwargs",
    "to_view",
    "to_modal",
    "deliver",
    "use_state",
]
