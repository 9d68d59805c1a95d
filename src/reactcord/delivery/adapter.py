"""Delivery Adapter - sends payloads or whole components to a target."""

from collections.abc import Callable, Mapping
from typing import TYPE_CHECKING, Any

from ..core.logging_config import get_logger
from .transport import send_payload

if TYPE_CHECKING:
    from ..components.base import Component, LiveMessage

logger = get_logger(__name__)


async def deliver(target: Any, content: Any) -> Any:
    """
    Deliver a payload or mount a component.

    A component is rendered, sent, and the resulting message is stored on
    it so later set_state() calls edit that message. Anything else is sent
    as a payload.

    Args:
        target: Channel, interaction or message
        content: Component, message payload, embed, modal or text

    Returns:
        The live message (wrapped for components), or None if nothing was
        sent (a modal, or a render handled by component_did_catch)
    """
    # Lazy import to avoid a components <-> delivery cycle
    from ..components.base import Component

    if not isinstance(content, Component):
        return await send_payload(target, content)

    payload = content.render_payload()
    if payload is None:
        logger.debug("mount_skipped", component=content.name)
        return None

    message = await send_payload(target, payload)
    if message is not None:
        content.message = message
        logger.info("mounted", component=content.name)
    return content.message


async def use_state(
    target: Any,
    component: "Component",
    state: Mapping[str, Any] | None = None,
) -> tuple["LiveMessage | None", Callable[..., Any]]:
    """
    Mount a component and hand back its state setter.

    Args:
        target: Channel or interaction to send to
        component: Component to mount
        state: Initial state replacing the component's current state

    Returns:
        (live message, component.set_state)
    """
    if state:
        component.state = dict(state)
    message = await deliver(target, component)
    return message, component.set_state
