"""
Component Base
Stateful components that own one live message
"""

import asyncio
import inspect
from collections.abc import Coroutine, Mapping
from typing import Any

from ..core.logging_config import get_logger
from ..delivery.transport import edit_message, update_interaction
from ..interactions.registry import current_registry, use_registry
from ..monitoring import metrics_collector

logger = get_logger(__name__)


class LiveMessage:
    """
    Platform message owned by a component.

    Attribute access is forwarded to the wrapped message. Deleting through
    the wrapper unmounts the component first.
    """

    def __init__(self, message: Any, component: "Component") -> None:
        self.wrapped = message
        self._component = component

    async def delete(self, **kwargs: Any) -> None:
        """Call the component's unmount hook, then delete the message."""
        try:
            result = self._component.component_will_unmount()
            if inspect.isawaitable(result):
                await result
        finally:
            await self.wrapped.delete(**kwargs)
            self._component._detach(self)
            logger.debug("unmounted", component=self._component.name)

    def __getattr__(self, name: str) -> Any:
        return getattr(self.wrapped, name)

    def __repr__(self) -> str:
        return f"<LiveMessage {self.wrapped!r}>"


class Component:
    """
    Base class for class components.

    Subclasses implement render(); a render that returns a message element
    makes create_element() hand back the component itself, which can then
    be mounted with deliver() and updated with set_state().

    Optional hooks:
        should_component_update(next_state) -> bool
        component_did_update(prev_state)
        component_will_unmount()
        component_did_catch(error)  (not defined here: render errors
            propagate unless a subclass defines it)
    """

    def __init__(self, props: Mapping[str, Any] | None = None) -> None:
        self.props: Mapping[str, Any] = props or {}
        self.state: dict[str, Any] = {}
        self._message: LiveMessage | None = None
        self._registry = current_registry()
        self._pending: set[asyncio.Task[None]] = set()

    @property
    def name(self) -> str:
        return type(self).__name__

    def render(self) -> Any:
        raise NotImplementedError(f"{self.name} doesn't have a 'render' method.")

    # ------------------------------------------------------------------
    # Live message
    # ------------------------------------------------------------------

    @property
    def message(self) -> LiveMessage | None:
        """The live message showing this component, if mounted."""
        return self._message

    @message.setter
    def message(self, message: Any) -> None:
        if message is None or isinstance(message, LiveMessage):
            self._message = message
        else:
            self._message = LiveMessage(message, self)

    def _detach(self, live: LiveMessage) -> None:
        if self._message is live:
            self._message = None

    # ------------------------------------------------------------------
    # Lifecycle hooks
    # ------------------------------------------------------------------

    def should_component_update(self, next_state: Mapping[str, Any]) -> bool:
        return True

    def component_did_update(self, prev_state: Mapping[str, Any]) -> None:
        pass

    def component_will_unmount(self) -> None:
        pass

    # ------------------------------------------------------------------
    # Rendering
    # ------------------------------------------------------------------

    def render_payload(self) -> Any:
        """
        Render with error interception.

        Handlers of elements rendered here are registered in the registry
        that was active when the component was created.

        Returns:
            The rendered element, or None if component_did_catch handled an error
        """
        catch = getattr(self, "component_did_catch", None)
        with use_registry(self._registry):
            try:
                with metrics_collector.time_render(self.name):
                    return self.render()
            except Exception as e:
                if catch is None:
                    raise
                logger.warning("render_caught", component=self.name, error=str(e))
                catch(e)
                return None

    def set_state(self, state: Mapping[str, Any], interaction: Any = None) -> "asyncio.Task[None] | None":
        """
        Merge state and re-render.

        The merge always happens. If should_component_update() approves and
        the render produces something, delivery is scheduled on the running
        loop: the originating interaction is updated if given, otherwise the
        live message is edited.

        Args:
            state: Keys to merge into the current state
            interaction: Interaction to answer with the new render

        Returns:
            The delivery task (awaitable), or None if nothing is delivered
        """
        prev_state = self.state
        self.state = {**self.state, **state}

        if not self.should_component_update(self.state):
            logger.debug("update_skipped", component=self.name)
            return None

        payload = self.render_payload()
        if payload is None:
            return None
        if interaction is None and self._message is None:
            logger.debug("not_mounted", component=self.name)
            return None

        return self._schedule(self._push(payload, interaction, prev_state))

    def force_update(self) -> "asyncio.Task[None] | None":
        """Re-render the current state and edit the live message."""
        payload = self.render_payload()
        if payload is None or self._message is None:
            return None
        return self._schedule(self._push(payload, None, dict(self.state)))

    async def _push(self, payload: Any, interaction: Any, prev_state: Mapping[str, Any]) -> None:
        if interaction is not None:
            await update_interaction(interaction, payload)
        elif self._message is not None:
            await edit_message(self._message.wrapped, payload)
        self.component_did_update(prev_state)

    def _schedule(self, coro: Coroutine[Any, Any, None]) -> "asyncio.Task[None]":
        try:
            loop = asyncio.get_running_loop()
        except RuntimeError:
            coro.close()
            raise
        task = loop.create_task(coro)
        self._pending.add(task)
        task.add_done_callback(self._pending.discard)
        return task
