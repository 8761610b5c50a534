"""Expansion of component elements into host primitives.

``render`` keeps calling the registered component for an element until it
gets back a ``view`` or ``text``, then does the same for every child.  The
result contains only host primitives and can be handed to a renderer.
"""

from __future__ import annotations

from pi.table.children import get_children_in_fragments
from pi.table.components import register_builtin_components
from pi.table.config import LayoutConfig
from pi.table.context import RenderContext
from pi.table.diagnostics import Diagnostics
from pi.table.elements import HOST_KINDS, Element, ElementKind
from pi.table.errors import TableLayoutError
from pi.table.registry import get_component

register_builtin_components()


def render(
    element: Element,
    diagnostics: Diagnostics | None = None,
    config: LayoutConfig | None = None,
) -> Element:
    """Render *element* down to ``view``/``text`` primitives."""
    ctx = RenderContext(
        diagnostics=diagnostics if diagnostics is not None else Diagnostics(),
        config=config or LayoutConfig(),
    )
    return _render(element, ctx)


def _render(element: Element, ctx: RenderContext) -> Element:
    component = get_component(element.kind)
    while component is not None:
        element = component(element.props, ctx)
        component = get_component(element.kind)

    if element.kind is ElementKind.TEXT:
        return element

    if element.kind not in HOST_KINDS and element.kind is not ElementKind.FRAGMENT:
        raise TableLayoutError(f"No component registered for '{element.kind.value}'")

    children = [
        _render(child, ctx) for child in get_children_in_fragments(element.children)
    ]
    return element.with_props(children=children)
