"""Components with state and a live message."""

from .base import Component, LiveMessage

__all__ = ["Component", "LiveMessage"]
