"""
Payload Transport
Converts resolved payloads into discord.py calls on a target
"""

from enum import Enum
from typing import Any

import discord

from ..core.config import get_settings
from ..core.errors import InvalidTargetError
from ..core.logging_config import get_logger
from ..elements.models import ActionRow, MessagePayload, ModalPayload
from ..monitoring import metrics_collector

logger = get_logger(__name__)


class TargetKind(str, Enum):
    """How a payload reaches a target"""
    CHANNEL = "channel"          # send a new message
    INTERACTION = "interaction"  # reply to the interaction
    MESSAGE = "message"          # edit the message in place


def resolve_target(target: Any) -> TargetKind:
    """
    Classify a delivery target by what it can do.

    Raises:
        InvalidTargetError: If the target can't receive a payload
    """
    response = getattr(target, "response", None)
    if response is not None and callable(getattr(response, "send_message", None)):
        return TargetKind.INTERACTION
    if callable(getattr(target, "send", None)):
        return TargetKind.CHANNEL
    if callable(getattr(target, "edit", None)):
        return TargetKind.MESSAGE
    raise InvalidTargetError(
        f"Can't deliver to {type(target).__name__}: expected a channel, an interaction or a message"
    )


def _place(container: discord.ui.View, components: list[Any]) -> None:
    """Add rows of items to a view or modal, one row index per ActionRow."""
    for index, component in enumerate(components):
        if isinstance(component, ActionRow):
            for item in component.components:
                item.row = index
                container.add_item(item)
        else:
            container.add_item(component)


def to_view(components: list[Any]) -> discord.ui.View:
    """Build the view carrying a message's rows. Needs a running event loop."""
    view = discord.ui.View(timeout=get_settings().view_timeout)
    _place(view, components)
    return view


def to_modal(payload: ModalPayload) -> discord.ui.Modal:
    """Build a modal form. Needs a running event loop."""
    options: dict[str, Any] = {"title": payload.title, "timeout": get_settings().view_timeout}
    if payload.custom_id:
        options["custom_id"] = payload.custom_id
    modal = discord.ui.Modal(**options)
    _place(modal, payload.components)
    return modal


def to_kwargs(payload: Any, allow_ephemeral: bool = False) -> dict[str, Any]:
    """
    Keyword arguments for send/reply/edit.

    Args:
        payload: MessagePayload, embed, row or plain text
        allow_ephemeral: Keep the ephemeral flag (interaction replies only)
    """
    if isinstance(payload, MessagePayload):
        kwargs = payload.extras()
        if payload.content is not None:
            kwargs["content"] = payload.content
        if payload.embeds is not None:
            kwargs["embeds"] = list(payload.embeds)
        if payload.components is not None:
            # An empty list clears the components of an edited message
            kwargs["view"] = to_view(payload.components) if payload.components else None
    elif isinstance(payload, discord.Embed):
        kwargs = {"embeds": [payload]}
    elif isinstance(payload, ActionRow):
        kwargs = {"view": to_view([payload])}
    elif isinstance(payload, (str, int, float)):
        kwargs = {"content": str(payload)}
    else:
        raise TypeError(f"Can't deliver a {type(payload).__name__}")

    if not allow_ephemeral:
        kwargs.pop("ephemeral", None)
    return kwargs


async def send_payload(target: Any, payload: Any) -> Any:
    """
    Deliver a payload to a target.

    Channels get a new message, interactions a reply (or a followup if they
    were already answered), messages are edited in place.

    Returns:
        The platform message now showing the payload, or None for modals
    """
    kind = resolve_target(target)

    if isinstance(payload, ModalPayload):
        if kind is not TargetKind.INTERACTION:
            raise InvalidTargetError("A modal can only be sent in response to an interaction")
        await target.response.send_modal(to_modal(payload))
        metrics_collector.record_delivery(kind.value, "modal")
        logger.debug("modal_sent", custom_id=payload.custom_id)
        return None

    match kind:
        case TargetKind.CHANNEL:
            message = await target.send(**to_kwargs(payload))
            action = "send"
        case TargetKind.INTERACTION:
            kwargs = to_kwargs(payload, allow_ephemeral=True)
            if target.response.is_done():
                message = await target.followup.send(wait=True, **kwargs)
                action = "followup"
            else:
                await target.response.send_message(**kwargs)
                message = await target.original_response()
                action = "reply"
        case TargetKind.MESSAGE:
            edited = await target.edit(**to_kwargs(payload))
            message = target if edited is None else edited
            action = "edit"

    metrics_collector.record_delivery(kind.value, action)
    logger.debug("delivered", target=kind.value, action=action)
    return message


async def update_interaction(interaction: Any, payload: Any) -> None:
    """Update the message an interaction came from."""
    if isinstance(payload, ModalPayload):
        await interaction.response.send_modal(to_modal(payload))
        metrics_collector.record_delivery(TargetKind.INTERACTION.value, "modal")
        return

    kwargs = to_kwargs(payload)
    if interaction.response.is_done():
        await interaction.edit_original_response(**kwargs)
    else:
        await interaction.response.edit_message(**kwargs)

    metrics_collector.record_delivery(TargetKind.INTERACTION.value, "update")
    logger.debug("interaction_updated")


async def edit_message(message: Any, payload: Any) -> Any:
    """Edit a live message to show a new payload."""
    edited = await message.edit(**to_kwargs(payload))
    metrics_collector.record_delivery(TargetKind.MESSAGE.value, "edit")
    logger.debug("message_edited")
    return edited
