"""Discord client that routes component interactions to their handlers."""

import asyncio
from collections.abc import Iterable
from typing import Any

import discord

from .core.config import Settings, get_settings
from .core.logging_config import get_logger
from .interactions.dispatcher import InteractionDispatcher
from .interactions.registry import InteractionRegistry, default_registry
from .interactions.types import DEFAULT_ONCE, InteractionKind
from .monitoring import metrics_collector

logger = get_logger(__name__)


class Client(discord.Client):
    """
    discord.Client with an interaction dispatcher attached.

    Every "interaction" event is also handed to the dispatcher, which runs
    the handler registered for the interaction's custom id.
    """

    def __init__(
        self,
        *,
        intents: discord.Intents,
        once: Iterable[InteractionKind | str] | None = None,
        registry: InteractionRegistry | None = None,
        settings: Settings | None = None,
        **options: Any,
    ) -> None:
        """
        Args:
            intents: Gateway intents
            once: Extra interaction kinds that expire after one dispatch
            registry: Handler registry (default: the process-wide registry)
            settings: Runtime settings (default: from environment)
            **options: Passed to discord.Client
        """
        super().__init__(intents=intents, **options)

        self.settings = settings or get_settings()
        metrics_collector.enabled = self.settings.metrics_enabled

        default_once = set(DEFAULT_ONCE)
        default_once.update(InteractionKind(kind) for kind in self.settings.default_once)
        default_once.update(InteractionKind(kind) for kind in once or ())

        self.registry = default_registry if registry is None else registry
        self.dispatcher = InteractionDispatcher(self.registry, default_once)
        self._dispatches: set[asyncio.Task[bool]] = set()

    def dispatch(self, event: str, /, *args: Any, **kwargs: Any) -> None:
        super().dispatch(event, *args, **kwargs)
        if event == "interaction":
            task = asyncio.create_task(self._route(*args), name="reactcord: interaction")
            self._dispatches.add(task)
            task.add_done_callback(self._dispatches.discard)

    async def _route(self, interaction: discord.Interaction) -> None:
        try:
            await self.dispatcher.on_interaction(interaction)
        except Exception:
            # Same reporting path as discord.py's own event handlers
            await self.on_error("interaction_handler", interaction)
