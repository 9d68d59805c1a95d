"""Tree Builder - materializes element trees bottom-up."""

from collections.abc import Callable, Mapping
from enum import Enum
from typing import Any
from weakref import WeakKeyDictionary

from ..components.base import Component
from ..core.logging_config import get_logger
from ..interactions.registry import current_registry
from .models import MessagePayload
from .resolver import ElementResolver

logger = get_logger(__name__)


class FactoryKind(str, Enum):
    """What create_element() does with a tag"""
    INTRINSIC = "intrinsic"    # resolved by ElementResolver
    RENDERABLE = "renderable"  # Component subclass: instantiated and rendered
    PLAIN = "plain"            # function component: called with props
    FRAGMENT = "fragment"      # children passed through


def Fragment(props: Mapping[str, Any] | None = None) -> list[Any]:
    """Group children without a wrapper element."""
    children = (props or {}).get("children")
    return list(children) if children else []


_kinds: "WeakKeyDictionary[Any, FactoryKind]" = WeakKeyDictionary()


def classify(tag: Any) -> FactoryKind:
    """
    Classify a tag, caching the answer per factory.

    Raises:
        TypeError: If the tag is neither a name nor callable
    """
    if isinstance(tag, str):
        return FactoryKind.INTRINSIC
    if tag is Fragment:
        return FactoryKind.FRAGMENT

    try:
        return _kinds[tag]
    except (KeyError, TypeError):
        pass

    if isinstance(tag, type) and issubclass(tag, Component):
        kind = FactoryKind.RENDERABLE
    elif callable(tag):
        kind = FactoryKind.PLAIN
    else:
        raise TypeError(f"Invalid element type: {tag!r}")

    try:
        _kinds[tag] = kind
    except TypeError:
        # Not weak-referenceable; classified again on the next call
        pass
    return kind


def create_element(tag: "str | Callable[..., Any]", props: Any = None, *children: Any) -> Any:
    """
    Build one element.

    Positional children become ``props["children"]`` unless props already
    has a ``children`` key.

    Args:
        tag: Intrinsic tag name, Component subclass, function component or Fragment
        props: Element props (a bare string is accepted for ``footer``)
        *children: Child elements, nested lists allowed

    Returns:
        The resolved element; the component instance when a Component renders
        a message; None when resolution failed or a render error was caught
    """
    if props is None or isinstance(props, Mapping):
        props = dict(props or {})
        props.setdefault("children", list(children))
        resolved_children = props["children"]
    else:
        resolved_children = list(children)

    match classify(tag):
        case FactoryKind.FRAGMENT:
            return Fragment(props)
        case FactoryKind.RENDERABLE:
            return _build_component(tag, props)
        case FactoryKind.PLAIN:
            return tag(props)
        case FactoryKind.INTRINSIC:
            return ElementResolver(current_registry()).resolve(tag, props, resolved_children)


def _build_component(factory: type[Component], props: dict[str, Any]) -> Any:
    component = factory(props)
    rendered = component.render_payload()

    if isinstance(rendered, MessagePayload):
        # Top-level component: hand back the live, stateful handle
        logger.debug("component_built", component=component.name)
        return component
    return rendered
