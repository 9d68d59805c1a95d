"""Interaction Dispatcher - routes inbound interactions to registered handlers."""

import inspect
from collections.abc import Iterable
from typing import Any

from ..core.logging_config import get_logger, LogContext
from ..monitoring import metrics_collector
from .registry import InteractionRegistry, use_registry
from .types import DEFAULT_ONCE, InteractionKind, is_once


logger = get_logger(__name__)


def custom_id_of(interaction: Any) -> str | None:
    """Custom id carried by an interaction, or None if it isn't id-routed."""
    data = getattr(interaction, "data", None)
    if not isinstance(data, dict):
        return None
    custom_id = data.get("custom_id")
    return custom_id if isinstance(custom_id, str) else None


class InteractionDispatcher:
    """Looks up, invokes and expires handlers for inbound interactions."""

    def __init__(
        self,
        registry: InteractionRegistry,
        default_once: Iterable[InteractionKind] = DEFAULT_ONCE,
    ) -> None:
        self.registry = registry
        self.default_once = frozenset(default_once)

        logger.info("initialized", default_once=sorted(k.value for k in self.default_once))

    async def on_interaction(self, interaction: Any) -> bool:
        """
        Dispatch one inbound interaction.

        Interactions without a custom id, or whose id has no handler, are
        ignored. The handler runs to completion (awaited if it returns an
        awaitable) before the once-rule decides whether to expire it.

        Args:
            interaction: Platform interaction event

        Returns:
            True if a handler ran
        """
        custom_id = custom_id_of(interaction)
        if custom_id is None:
            return False

        entry = self.registry.get(custom_id)
        if entry is None:
            logger.debug("no_listener", custom_id=custom_id)
            metrics_collector.record_interaction("unknown", "miss")
            return False

        def off() -> bool:
            return self.registry.unregister(custom_id)

        with LogContext(custom_id=custom_id, kind=entry.kind.value):
            try:
                with use_registry(self.registry):
                    result = entry.handler(interaction, off)
                    if inspect.isawaitable(result):
                        await result
            except Exception as e:
                metrics_collector.record_interaction(entry.kind.value, "error")
                logger.error("handler_failed", error=str(e))
                raise

            if is_once(entry, self.default_once):
                off()

            metrics_collector.set_listeners(len(self.registry))
            metrics_collector.record_interaction(entry.kind.value, "handled")
            logger.debug("handled")

        return True
