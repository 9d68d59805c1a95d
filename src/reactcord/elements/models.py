"""Payload Models."""

from typing import Any
from pydantic import BaseModel, ConfigDict, Field


class EmbedField(BaseModel):
    """Embed field record."""

    name: str | None = None
    value: str
    inline: bool | None = None


class EmbedFooter(BaseModel):
    """Embed footer record."""

    model_config = ConfigDict(extra="allow")

    text: str
    icon_url: str | None = None


class ActionRow(BaseModel):
    """Row of interactive items; becomes one row of a view on delivery."""

    model_config = ConfigDict(arbitrary_types_allowed=True, extra="allow")

    components: list[Any] = Field(default_factory=list)


class ModalPayload(BaseModel):
    """Modal form; becomes a discord.ui.Modal on delivery."""

    model_config = ConfigDict(arbitrary_types_allowed=True)

    custom_id: str | None = None
    title: str | None = None
    components: list[Any] = Field(default_factory=list)


class MessagePayload(BaseModel):
    """
    Complete sendable message.

    Unknown keys (tts, allowed_mentions, files, ephemeral, ...) are kept and
    passed to the platform's send/edit call as-is.
    """

    model_config = ConfigDict(arbitrary_types_allowed=True, extra="allow")

    content: str | None = None
    embeds: list[Any] | None = None
    components: list[Any] | None = None

    def extras(self) -> dict[str, Any]:
        """Props other than content, embeds and components."""
        return dict(self.model_extra or {})
