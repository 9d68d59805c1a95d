"""
Elements
Declarative element trees resolved into discord payloads
"""

from .models import ActionRow, EmbedField, EmbedFooter, MessagePayload, ModalPayload
from .tags import Tag
from .resolver import ElementResolver, flatten_children, join_children
from .builder import FactoryKind, Fragment, classify, create_element

__all__ = [
    "ActionRow",
    "EmbedField",
    "EmbedFooter",
    "MessagePayload",
    "ModalPayload",
    "Tag",
    "ElementResolver",
    "flatten_children",
    "join_children",
    "FactoryKind",
    "Fragment",
    "classify",
    "create_element",
]
