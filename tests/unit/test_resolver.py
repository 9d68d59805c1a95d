"""Tests for intrinsic element resolution."""

import discord
import pytest
from hypothesis import given, strategies as st

from reactcord.core import ElementConfigurationError
from reactcord.elements import (
    ActionRow,
    EmbedField,
    EmbedFooter,
    ElementResolver,
    MessagePayload,
    ModalPayload,
    flatten_children,
    join_children,
)
from reactcord.interactions import InteractionKind, InteractionRegistry


def noop(interaction, off):
    pass


@pytest.fixture
def resolver(registry):
    return ElementResolver(registry)


# ============================================================================
# Children
# ============================================================================

@pytest.mark.unit
def test_flatten_nested_children():
    """Nested lists, tuples and generators flatten in order."""
    children = ["a", ["b", ("c", [d for d in "de"])], (x for x in ["f"])]
    assert flatten_children(children) == ["a", "b", "c", "d", "e", "f"]


@pytest.mark.unit
def test_flatten_drops_none_and_booleans():
    """Conditional children (None / False / True) disappear."""
    assert flatten_children(["a", None, False, True, 0, ["b", None]]) == ["a", 0, "b"]


@pytest.mark.unit
def test_join_children_stringifies():
    assert join_children(["Count: ", 3, ["!"]]) == "Count: 3!"


# ============================================================================
# Text Elements
# ============================================================================

@pytest.mark.unit
def test_br_is_newline(resolver):
    assert resolver.resolve("br") == "\n"


@pytest.mark.unit
def test_emoji_returns_prop(resolver):
    assert resolver.resolve("emoji", {"emoji": "🔥"}) == "🔥"
    assert resolver.resolve("emoji", {}) is None


@pytest.mark.unit
def test_unknown_tag_resolves_to_none(resolver, registry):
    """Unknown intrinsic tags produce nothing and register nothing."""
    assert resolver.resolve("marquee", {"on_click": noop, "custom_id": "x"}) is None
    assert len(registry) == 0


@pytest.mark.unit
def test_message_payload(resolver):
    """Message keeps known and extra props, drops children."""
    payload = resolver.resolve("message", {"content": "hi", "tts": True}, ["ignored"])

    assert isinstance(payload, MessagePayload)
    assert payload.content == "hi"
    assert payload.embeds is None
    assert payload.components is None
    assert payload.extras() == {"tts": True}


# ============================================================================
# Field / Footer
# ============================================================================

@pytest.mark.unit
def test_field_value_from_children(resolver):
    """Field without value concatenates its children."""
    field = resolver.resolve("field", {"name": "A"}, ["x", "y"])
    assert field == EmbedField(name="A", value="xy", inline=None)


@pytest.mark.unit
def test_field_value_prop_wins(resolver):
    field = resolver.resolve("field", {"name": "A", "value": 7, "inline": True}, ["ignored"])
    assert field == EmbedField(name="A", value="7", inline=True)


@pytest.mark.unit
def test_field_without_name(resolver):
    """A nameless field is still built; the platform rejects it on send."""
    field = resolver.resolve("field", {"value": "x"})
    assert field == EmbedField(name=None, value="x")


@pytest.mark.unit
def test_footer_from_string(resolver):
    assert resolver.resolve("footer", "hi") == EmbedFooter(text="hi")


@pytest.mark.unit
def test_footer_text_from_children(resolver):
    assert resolver.resolve("footer", {}, ["a", "b"]) == EmbedFooter(text="ab")


@pytest.mark.unit
def test_footer_text_prop_wins(resolver):
    footer = resolver.resolve("footer", {"text": "t", "icon_url": "https://x/i.png"}, ["ignored"])
    assert footer.text == "t"
    assert footer.icon_url == "https://x/i.png"


# ============================================================================
# Embed
# ============================================================================

@pytest.mark.unit
def test_embed_folds_children(resolver):
    """Fields are collected, everything else becomes the description."""
    children = [
        "Hello ",
        EmbedField(name="A", value="1"),
        42,
        {"name": "B", "value": "2", "inline": True},
    ]
    embed = resolver.resolve("embed", {"title": "T"}, children)

    assert isinstance(embed, discord.Embed)
    assert embed.title == "T"
    assert embed.description == "Hello 42"
    assert [(f.name, f.value, f.inline) for f in embed.fields] == [
        ("A", "1", False),
        ("B", "2", True),
    ]


@pytest.mark.unit
def test_embed_description_ignores_children(resolver):
    """An explicit description suppresses children and fields."""
    embed = resolver.resolve(
        "embed", {"description": "fixed"}, ["text", EmbedField(name="A", value="1")]
    )
    assert embed.description == "fixed"
    assert embed.fields == []


@pytest.mark.unit
def test_embed_empty_description_is_none(resolver):
    embed = resolver.resolve("embed", {}, [EmbedField(name="A", value="1")])
    assert embed.description is None
    assert len(embed.fields) == 1


@pytest.mark.unit
def test_embed_fields_prop_ignored(resolver):
    embed = resolver.resolve("embed", {"fields": [{"name": "A", "value": "1"}]}, [])
    assert embed.fields == []


@pytest.mark.unit
def test_embed_color_string(resolver):
    embed = resolver.resolve("embed", {"color": "#ff0000"})
    assert embed.colour.value == 0xFF0000


@pytest.mark.unit
def test_embed_colour_alias(resolver):
    embed = resolver.resolve("embed", {"colour": 0x00FF00})
    assert embed.colour.value == 0x00FF00


@pytest.mark.unit
def test_embed_decorations(resolver):
    """Footer, image, thumbnail and author props are applied."""
    embed = resolver.resolve(
        "embed",
        {
            "footer": "foot",
            "image": {"url": "https://x/img.png"},
            "thumbnail": "https://x/thumb.png",
            "author": {"name": "Ann", "url": "https://x"},
        },
    )
    assert embed.footer.text == "foot"
    assert embed.image.url == "https://x/img.png"
    assert embed.thumbnail.url == "https://x/thumb.png"
    assert embed.author.name == "Ann"


@pytest.mark.unit
def test_embed_footer_mapping(resolver):
    embed = resolver.resolve("embed", {"footer": {"text": "f", "icon_url": "https://x/i.png"}})
    assert embed.footer.text == "f"
    assert embed.footer.icon_url == "https://x/i.png"


@pytest.mark.unit
def test_embed_footer_element(resolver):
    """A resolved footer element can be passed as the footer prop."""
    footer = resolver.resolve("footer", {}, ["by ", "bot"])
    embed = resolver.resolve("embed", {"footer": footer})
    assert embed.footer.text == "by bot"


@given(
    st.lists(
        st.one_of(
            st.text(max_size=20),
            st.integers(),
            st.builds(
                EmbedField,
                name=st.text(min_size=1, max_size=20),
                value=st.text(min_size=1, max_size=20),
                inline=st.one_of(st.none(), st.booleans()),
            ),
        ),
        max_size=10,
    )
)
def test_embed_derivation_property(children):
    """Description is the non-field children joined; fields keep their order."""
    embed = ElementResolver(InteractionRegistry()).resolve("embed", {}, children)

    expected_description = "".join(str(c) for c in children if not isinstance(c, EmbedField))
    expected_fields = [(c.name, c.value, bool(c.inline)) for c in children if isinstance(c, EmbedField)]

    assert embed.description == (expected_description or None)
    assert [(f.name, f.value, f.inline) for f in embed.fields] == expected_fields


# ============================================================================
# Row / Button
# ============================================================================

@pytest.mark.unit
def test_row_keeps_order(resolver):
    """A row of two buttons keeps them in order."""
    first = resolver.resolve("button", {"custom_id": "a"}, ["A"])
    second = resolver.resolve("button", {"custom_id": "b"}, ["B"])

    row = resolver.resolve("row", {}, [first, [second]])

    assert isinstance(row, ActionRow)
    assert [b.label for b in row.components] == ["A", "B"]


@pytest.mark.unit
def test_button_defaults(resolver, registry):
    """Label from children, primary style, no listener without on_click."""
    button = resolver.resolve("button", {"custom_id": "b"}, ["Click ", "me"])

    assert isinstance(button, discord.ui.Button)
    assert button.label == "Click me"
    assert button.style is discord.ButtonStyle.primary
    assert button.custom_id == "b"
    assert "b" not in registry


@pytest.mark.unit
def test_button_registers_click_handler(resolver, registry):
    resolver.resolve("button", {"custom_id": "b", "on_click": noop, "once": True}, ["Go"])

    entry = registry.get("b")
    assert entry is not None
    assert entry.kind is InteractionKind.BUTTON
    assert entry.handler is noop
    assert entry.once is True


@pytest.mark.unit
def test_link_button(resolver, registry):
    """A url without a handler makes a link button."""
    button = resolver.resolve("button", {"url": "https://example.com"}, ["Docs"])

    assert button.style is discord.ButtonStyle.link
    assert button.url == "https://example.com"
    assert len(registry) == 0


@pytest.mark.unit
def test_button_url_with_handler_rejected(resolver, registry):
    """A listening button can't also be a link."""
    with pytest.raises(ElementConfigurationError) as exc_info:
        resolver.resolve(
            "button",
            {"custom_id": "b", "on_click": noop, "url": "https://example.com"},
            ["Bad"],
        )

    assert exc_info.value.tag == "button"
    assert len(registry) == 0


@pytest.mark.unit
def test_button_style_by_name(resolver):
    button = resolver.resolve("button", {"custom_id": "b", "style": "danger", "label": "Delete"})
    assert button.style is discord.ButtonStyle.danger
    assert button.label == "Delete"


@pytest.mark.unit
def test_button_unknown_style(resolver):
    with pytest.raises(ElementConfigurationError):
        resolver.resolve("button", {"custom_id": "b", "style": "sparkly"}, ["x"])


# ============================================================================
# Select / Option
# ============================================================================

@pytest.mark.unit
def test_string_select(resolver, registry):
    """Options come from the prop and from children, in that order."""
    child = resolver.resolve("option", {"label": "Two", "value": "2"})
    select = resolver.resolve(
        "select",
        {
            "custom_id": "s",
            "placeholder": "Pick",
            "options": [{"label": "One", "value": "1"}],
            "on_change": noop,
        },
        [child],
    )

    assert isinstance(select, discord.ui.Select)
    assert select.custom_id == "s"
    assert select.placeholder == "Pick"
    assert [o.value for o in select.options] == ["1", "2"]
    assert registry.get("s").kind is InteractionKind.SELECT_MENU


@pytest.mark.unit
def test_select_without_custom_id_not_registered(resolver, registry):
    resolver.resolve("select", {"on_change": noop}, [discord.SelectOption(label="A")])
    assert len(registry) == 0


@pytest.mark.unit
def test_channel_select(resolver):
    select = resolver.resolve(
        "select", {"type": "channel", "custom_id": "c", "channel_types": ["text", discord.ChannelType.voice]}
    )
    assert isinstance(select, discord.ui.ChannelSelect)
    assert select.channel_types == [discord.ChannelType.text, discord.ChannelType.voice]


@pytest.mark.unit
@pytest.mark.parametrize(
    "select_type,expected",
    [
        ("user", discord.ui.UserSelect),
        ("role", discord.ui.RoleSelect),
        ("mentionable", discord.ui.MentionableSelect),
        (discord.ComponentType.user_select, discord.ui.UserSelect),
    ],
)
def test_auto_populated_selects(resolver, select_type, expected):
    select = resolver.resolve("select", {"type": select_type, "custom_id": "x"})
    assert isinstance(select, expected)


@pytest.mark.unit
def test_other_select_type_is_generic(resolver, registry):
    """Undeclared select types fall back to a plain select without options."""
    option = discord.SelectOption(label="ignored")
    select = resolver.resolve(
        "select",
        {"type": "other", "custom_id": "x", "on_change": noop, "options": [{"label": "ignored"}]},
        [option],
    )

    assert type(select) is discord.ui.Select
    assert select.custom_id == "x"
    assert select.options == []
    assert registry.get("x").kind is InteractionKind.SELECT_MENU


@pytest.mark.unit
def test_option(resolver):
    option = resolver.resolve("option", {"label": "Red", "value": "r", "default": True})
    assert isinstance(option, discord.SelectOption)
    assert option.label == "Red"
    assert option.value == "r"
    assert option.default is True


# ============================================================================
# Modal / Input
# ============================================================================

@pytest.mark.unit
def test_modal_registers_submit(resolver, registry):
    field = resolver.resolve("input", {"label": "Name", "custom_id": "name"})
    modal = resolver.resolve(
        "modal", {"custom_id": "m", "title": "Form", "on_submit": noop}, [[field]]
    )

    assert isinstance(modal, ModalPayload)
    assert modal.title == "Form"
    assert modal.components == [field]
    assert registry.get("m").kind is InteractionKind.MODAL


@pytest.mark.unit
def test_modal_without_handler(resolver, registry):
    resolver.resolve("modal", {"custom_id": "m", "title": "Form"}, [])
    assert len(registry) == 0


@pytest.mark.unit
def test_modal_without_custom_id_or_title(resolver, registry):
    """Nothing is checked here; the submit handler is registered under None."""
    modal = resolver.resolve("modal", {"on_submit": noop}, [])

    assert modal == ModalPayload()
    assert registry.get(None).kind is InteractionKind.MODAL


@pytest.mark.unit
def test_input(resolver):
    """Style by name, value becomes the default, type is ignored."""
    text_input = resolver.resolve(
        "input",
        {"label": "Bio", "custom_id": "bio", "style": "paragraph", "value": "hi", "type": 99},
    )

    assert isinstance(text_input, discord.ui.TextInput)
    assert text_input.label == "Bio"
    assert text_input.style is discord.TextStyle.paragraph
    assert text_input.default == "hi"
    assert text_input.type is discord.ComponentType.text_input
