"""Intrinsic element tags."""

from enum import Enum


class Tag(str, Enum):
    """Built-in element kinds with resolver-defined semantics"""
    MESSAGE = "message"
    BR = "br"
    EMBED = "embed"
    FOOTER = "footer"
    FIELD = "field"
    EMOJI = "emoji"
    ROW = "row"
    BUTTON = "button"
    SELECT = "select"
    OPTION = "option"
    MODAL = "modal"
    INPUT = "input"

    @classmethod
    def lookup(cls, tag: "str | Tag") -> "Tag | None":
        """Tag for a name, or None if it isn't intrinsic."""
        try:
            return cls(tag)
        except ValueError:
            return None
