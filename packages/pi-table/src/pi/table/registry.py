"""Registry mapping element kinds to the components that render them."""

from __future__ import annotations

from collections.abc import Callable, Mapping
from dataclasses import dataclass
from typing import Any

from pi.table.context import RenderContext
from pi.table.elements import HOST_KINDS, Element, ElementKind
from pi.table.errors import TableLayoutError

ComponentFunction = Callable[[Mapping[str, Any], RenderContext], Element]


@dataclass
class _RegisteredComponent:
    render: ComponentFunction
    source_id: str | None = None


_registry: dict[ElementKind, _RegisteredComponent] = {}


def register_component(
    kind: ElementKind, render: ComponentFunction, source_id: str | None = None
) -> None:
    """Register the component that renders elements of *kind*.

    Host primitives and fragments are drawn or unwrapped directly and cannot
    have a component.
    """
    if kind in HOST_KINDS or kind is ElementKind.FRAGMENT:
        raise TableLayoutError(f"Cannot register a component for '{kind.value}'")
    _registry[kind] = _RegisteredComponent(render=render, source_id=source_id)


def get_component(kind: ElementKind) -> ComponentFunction | None:
    entry = _registry.get(kind)
    return entry.render if entry else None


def unregister_components(source_id: str) -> None:
    """Remove all components registered with a given source ID."""
    to_remove = [kind for kind, entry in _registry.items() if entry.source_id == source_id]
    for kind in to_remove:
        del _registry[kind]
