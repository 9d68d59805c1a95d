"""Element Resolver - intrinsic tag + props + children to platform payloads."""

from collections.abc import Iterable, Mapping
from types import GeneratorType
from typing import Any

import discord

from ..core.errors import ElementConfigurationError
from ..core.logging_config import get_logger
from ..interactions.registry import InteractionRegistry
from ..interactions.types import InteractionKind
from .models import ActionRow, EmbedField, EmbedFooter, MessagePayload, ModalPayload
from .tags import Tag

logger = get_logger(__name__)

# Props consumed by the resolver itself, never forwarded to discord.py
HANDLER_PROPS = frozenset({"children", "on_click", "on_change", "on_submit", "once"})

_NESTED = (list, tuple, GeneratorType, map, filter)

# ComponentType value -> select "type" prop
_SELECT_TYPES = {3: "string", 5: "user", 6: "role", 7: "mentionable", 8: "channel"}

_AUTO_POPULATED_SELECTS: dict[str, type[discord.ui.Item[Any]]] = {
    "user": discord.ui.UserSelect,
    "role": discord.ui.RoleSelect,
    "mentionable": discord.ui.MentionableSelect,
}


def flatten_children(children: Any) -> list[Any]:
    """
    Flatten arbitrarily nested children into one ordered list.

    None and booleans are dropped so ``flag and element`` can be used inline.
    """
    if children is None:
        return []
    if not isinstance(children, _NESTED):
        children = [children]

    result: list[Any] = []
    for child in children:
        if child is None or isinstance(child, bool):
            continue
        if isinstance(child, _NESTED):
            result.extend(flatten_children(child))
        else:
            result.append(child)
    return result


def join_children(children: Iterable[Any]) -> str:
    """Concatenate stringified children."""
    return "".join(str(child) for child in flatten_children(list(children)))


def _component_kwargs(props: Mapping[str, Any], exclude: Iterable[str] = ()) -> dict[str, Any]:
    """Props forwarded to a discord.py component constructor."""
    skip = HANDLER_PROPS.union(exclude)
    return {k: v for k, v in props.items() if k not in skip and v is not None}


def _colour(value: Any) -> discord.Colour | int | None:
    if value is None:
        return None
    if isinstance(value, str):
        return discord.Colour.from_str(value)
    return value


def _enum_member(tag: str, enum: Any, value: Any, prop: str) -> Any:
    if isinstance(value, enum):
        return value
    try:
        return enum[str(value)]
    except KeyError:
        raise ElementConfigurationError(tag, f"unknown {prop} {value!r}") from None


class ElementResolver:
    """
    Resolves intrinsic elements into payload objects.

    Resolution has no side effects other than registering handlers of
    interactive elements (button, select, modal) in ``registry``.
    """

    def __init__(self, registry: InteractionRegistry) -> None:
        self.registry = registry

    def resolve(self, tag: "str | Tag", props: Any = None, children: Any = ()) -> Any:
        """
        Resolve one intrinsic element.

        Args:
            tag: Intrinsic tag name
            props: Element props (a bare string for ``footer``)
            children: Already-resolved children, nested or flat

        Returns:
            Resolved element, or None if the tag is not intrinsic
        """
        props = {} if props is None else props
        children = flatten_children(children)

        match Tag.lookup(tag):
            case Tag.MESSAGE:
                return self._message(props)
            case Tag.BR:
                return "\n"
            case Tag.EMBED:
                return self._embed(props, children)
            case Tag.FOOTER:
                return self._footer(props, children)
            case Tag.FIELD:
                return self._field(props, children)
            case Tag.EMOJI:
                return props.get("emoji")
            case Tag.ROW:
                return self._row(props, children)
            case Tag.BUTTON:
                return self._button(props, children)
            case Tag.SELECT:
                return self._select(props, children)
            case Tag.OPTION:
                return self._option(props)
            case Tag.MODAL:
                return self._modal(props, children)
            case Tag.INPUT:
                return self._input(props)
            case None:
                logger.warning("unknown_tag", tag=str(tag))
                return None

    def _message(self, props: Mapping[str, Any]) -> MessagePayload:
        return MessagePayload(**{k: v for k, v in props.items() if k != "children"})

    def _embed(self, props: Mapping[str, Any], children: list[Any]) -> discord.Embed:
        """
        Build an embed.

        Without an explicit description, children are folded: field records
        (or mappings with a "name") become fields, everything else is
        concatenated into the description. With a description, children are
        ignored and the embed has no fields.
        """
        options = {k: v for k, v in props.items() if k not in ("children", "fields")}
        description = options.pop("description", None)
        footer = options.pop("footer", None)
        image = options.pop("image", None)
        thumbnail = options.pop("thumbnail", None)
        author = options.pop("author", None)
        color = options.pop("color", None)
        alias = options.pop("colour", None)
        colour = _colour(alias if color is None else color)

        fields: list[EmbedField] = []
        if not description:
            parts = []
            for child in children:
                if isinstance(child, EmbedField):
                    fields.append(child)
                elif isinstance(child, Mapping) and "name" in child:
                    fields.append(self._field(child, []))
                else:
                    parts.append(str(child))
            description = "".join(parts)

        embed = discord.Embed(colour=colour, description=description or None, **options)

        for field in fields:
            embed.add_field(name=field.name, value=field.value, inline=bool(field.inline))

        if footer:
            resolved = footer if isinstance(footer, EmbedFooter) else self._footer(footer, [])
            embed.set_footer(text=resolved.text, icon_url=resolved.icon_url)
        if image:
            embed.set_image(url=image["url"] if isinstance(image, Mapping) else image)
        if thumbnail:
            embed.set_thumbnail(url=thumbnail["url"] if isinstance(thumbnail, Mapping) else thumbnail)
        if author:
            if isinstance(author, Mapping):
                embed.set_author(**author)
            else:
                embed.set_author(name=str(author))

        return embed

    def _footer(self, props: "str | Mapping[str, Any]", children: list[Any]) -> EmbedFooter:
        if isinstance(props, str):
            return EmbedFooter(text=props)
        options = {k: v for k, v in props.items() if k != "children"}
        options["text"] = options.get("text") or join_children(children)
        return EmbedFooter(**options)

    def _field(self, props: Mapping[str, Any], children: list[Any]) -> EmbedField:
        # A missing name is left for the platform to reject
        name = props.get("name")
        value = props.get("value")
        return EmbedField(
            name=None if name is None else str(name),
            value=str(value) if value else join_children(children),
            inline=props.get("inline"),
        )

    def _row(self, props: Mapping[str, Any], children: list[Any]) -> ActionRow:
        options = {k: v for k, v in props.items() if k not in ("children", "components")}
        return ActionRow(components=children, **options)

    def _button(self, props: Mapping[str, Any], children: list[Any]) -> discord.ui.Button[Any]:
        custom_id = props.get("custom_id")
        on_click = props.get("on_click")
        url = props.get("url")

        listens = bool(on_click and custom_id)
        if listens and url:
            logger.error("invalid_button", custom_id=custom_id, url=url)
            raise ElementConfigurationError("button", "can't use both custom_id/on_click and url")

        style = props.get("style") or (discord.ButtonStyle.link if url else discord.ButtonStyle.primary)
        button = discord.ui.Button(
            style=_enum_member("button", discord.ButtonStyle, style, "style"),
            label=props.get("label") or join_children(children) or None,
            **_component_kwargs(props, exclude=("style", "label")),
        )

        if listens:
            self.registry.register(custom_id, on_click, InteractionKind.BUTTON, props.get("once"))
        return button

    def _select(self, props: Mapping[str, Any], children: list[Any]) -> discord.ui.Item[Any]:
        custom_id = props.get("custom_id")
        on_change = props.get("on_change")

        select_type = props.get("type") or "string"
        if isinstance(select_type, discord.ComponentType):
            select_type = _SELECT_TYPES.get(select_type.value, select_type.name)

        options = _component_kwargs(props, exclude=("type", "channel_types", "options"))

        if select_type == "string":
            select: discord.ui.Item[Any] = discord.ui.Select(
                options=[
                    discord.SelectOption(**option) if isinstance(option, Mapping) else option
                    for option in [*(props.get("options") or []), *children]
                ],
                **options,
            )
        elif select_type == "channel":
            select = discord.ui.ChannelSelect(
                channel_types=[
                    _enum_member("select", discord.ChannelType, channel_type, "channel type")
                    for channel_type in props.get("channel_types") or []
                ],
                **options,
            )
        elif select_type in _AUTO_POPULATED_SELECTS:
            select = _AUTO_POPULATED_SELECTS[select_type](**options)
        else:
            # Generic select: options are only populated for string selects
            logger.debug("generic_select", select_type=str(select_type), custom_id=custom_id)
            select = discord.ui.Select(**options)

        if on_change and custom_id:
            self.registry.register(custom_id, on_change, InteractionKind.SELECT_MENU, props.get("once"))
        return select

    def _option(self, props: Mapping[str, Any]) -> discord.SelectOption:
        return discord.SelectOption(**{k: v for k, v in props.items() if k != "children"})

    def _modal(self, props: Mapping[str, Any], children: list[Any]) -> ModalPayload:
        # Registered even without a custom id; the platform rejects the modal later
        if props.get("on_submit"):
            self.registry.register(
                props.get("custom_id"), props["on_submit"], InteractionKind.MODAL, props.get("once")
            )
        return ModalPayload(custom_id=props.get("custom_id"), title=props.get("title"), components=children)

    def _input(self, props: Mapping[str, Any]) -> discord.ui.TextInput[Any]:
        # The component type is always text input; a "type" prop is ignored
        options = _component_kwargs(props, exclude=("type", "value"))
        if "style" in options:
            options["style"] = _enum_member("input", discord.TextStyle, options["style"], "style")
        if props.get("value") is not None:
            options.setdefault("default", props["value"])
        return discord.ui.TextInput(**options)
