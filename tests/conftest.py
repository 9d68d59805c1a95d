"""Pytest configuration and fixtures."""

import os
from typing import Any
from unittest.mock import AsyncMock, MagicMock

import pytest

from reactcord import Component, create_element
from reactcord.interactions import InteractionRegistry, default_registry


# ============================================================================
# Pytest Hooks
# ============================================================================

def pytest_configure(config):
    """Configure pytest with environment variables."""
    os.environ['REACTCORD_LOG_LEVEL'] = 'DEBUG'
    os.environ['REACTCORD_METRICS_ENABLED'] = 'true'


# ============================================================================
# Platform Fakes
# ============================================================================

class FakeMessage:
    """Message-like target: can be edited and deleted."""

    def __init__(self, message_id: int = 1):
        self.id = message_id
        self.edit = AsyncMock(return_value=None)
        self.delete = AsyncMock(return_value=None)


class FakeChannel:
    """Channel-like target: can receive new messages."""

    def __init__(self):
        self.sent = FakeMessage(message_id=100)
        self.send = AsyncMock(return_value=self.sent)


class FakeResponse:
    """InteractionResponse stand-in."""

    def __init__(self, done: bool = False):
        self.send_message = AsyncMock(return_value=None)
        self.edit_message = AsyncMock(return_value=None)
        self.send_modal = AsyncMock(return_value=None)
        self.is_done = MagicMock(return_value=done)


class FakeInteraction:
    """Interaction-like target carrying a custom id."""

    def __init__(self, custom_id: str | None = None, done: bool = False, component_type: int = 2):
        self.data: dict[str, Any] = {}
        if custom_id is not None:
            self.data = {"custom_id": custom_id, "component_type": component_type}
        self.response = FakeResponse(done=done)
        self.original = FakeMessage(message_id=200)
        self.original_response = AsyncMock(return_value=self.original)
        self.edit_original_response = AsyncMock(return_value=None)
        self.followup = MagicMock()
        self.followup_message = FakeMessage(message_id=300)
        self.followup.send = AsyncMock(return_value=self.followup_message)


# ============================================================================
# Sample Components
# ============================================================================

class Counter(Component):
    """Message with a count and an increment button."""

    def __init__(self, props=None):
        super().__init__(props)
        self.state = {"count": 0}

    async def increment(self, interaction, off):
        task = self.set_state({"count": self.state["count"] + 1}, interaction)
        if task is not None:
            await task

    def render(self):
        content = f"Count: {self.state['count']}"
        if self.props.get("plain"):
            return create_element("message", {"content": content})

        button = create_element(
            "button",
            {"custom_id": self.props.get("custom_id", "counter:inc"), "on_click": self.increment},
            "+1",
        )
        return create_element(
            "message",
            {"content": content, "components": [create_element("row", None, button)]},
        )


# ============================================================================
# Fixtures
# ============================================================================

@pytest.fixture
def registry():
    """Fresh interaction registry."""
    return InteractionRegistry()


@pytest.fixture
def channel():
    """Channel target."""
    return FakeChannel()


@pytest.fixture
def message():
    """Message target."""
    return FakeMessage()


@pytest.fixture
def interaction():
    """Unanswered button interaction."""
    return FakeInteraction(custom_id="counter:inc")


@pytest.fixture(autouse=True)
def reset_default_registry():
    """Keep the process-wide registry empty between tests."""
    yield
    default_registry.clear()
