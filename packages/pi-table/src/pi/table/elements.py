"""Element records and their constructors.

An ``Element`` is a ``(kind, props)`` pair.  Every constructor in this module
stamps an explicit ``ElementKind`` so flattening and validation can dispatch
on the discriminant instead of on object identity.  Elements are never
mutated: :meth:`Element.with_props` builds a new record that shares every
untouched prop value with the original.
"""

from __future__ import annotations

from dataclasses import dataclass, field
from enum import Enum
from typing import Any, Mapping

__all__ = [
    "ElementKind",
    "Element",
    "HOST_KINDS",
    "create_element",
    "fragment",
    "view",
    "text",
    "table",
    "row",
    "auto_table",
    "auto_row",
    "is_fragment",
    "is_kind",
    "element_to_dict",
]


class ElementKind(str, Enum):
    FRAGMENT = "fragment"
    VIEW = "view"
    TEXT = "text"
    TABLE = "table"
    ROW = "row"
    AUTO_TABLE = "auto_table"
    AUTO_ROW = "auto_row"


# Kinds the host renderer draws directly; everything else except fragments is
# a layout component that must be rendered first.
HOST_KINDS = frozenset({ElementKind.VIEW, ElementKind.TEXT})


@dataclass(frozen=True)
class Element:
    """A tagged node with an open props bag."""

    kind: ElementKind
    props: Mapping[str, Any] = field(default_factory=dict)

    @property
    def children(self) -> Any:
        return self.props.get("children")

    @property
    def style(self) -> Mapping[str, Any]:
        return self.props.get("style") or {}

    def get(self, key: str, default: Any = None) -> Any:
        return self.props.get(key, default)

    def with_props(self, **overrides: Any) -> Element:
        """Return a copy of this element with *overrides* merged into its props."""
        return Element(self.kind, {**self.props, **overrides})


def create_element(
    kind: ElementKind, props: Mapping[str, Any] | None = None, *children: Any
) -> Element:
    """Build an element, the way a JSX ``createElement`` call would."""
    merged = dict(props or {})
    if children:
        merged["children"] = list(children)
    return Element(kind, merged)


def _without_none(**props: Any) -> dict[str, Any]:
    return {key: value for key, value in props.items() if value is not None}


# ---------------------------------------------------------------------------
# Host primitives
# ---------------------------------------------------------------------------


def fragment(*children: Any) -> Element:
    return create_element(ElementKind.FRAGMENT, None, *children)


def view(
    *children: Any,
    style: Mapping[str, Any] | None = None,
    wrap: bool | None = None,
    debug: bool | None = None,
) -> Element:
    props = _without_none(style=dict(style) if style is not None else None, wrap=wrap, debug=debug)
    props["children"] = list(children)
    return Element(ElementKind.VIEW, props)


def text(
    value: Any, style: Mapping[str, Any] | None = None, key: Any = None
) -> Element:
    props = _without_none(style=dict(style) if style is not None else None, key=key)
    props["children"] = value if isinstance(value, str) else str(value)
    return Element(ElementKind.TEXT, props)


# ---------------------------------------------------------------------------
# Layout components (declarations, rendered by pi.table.render)
# ---------------------------------------------------------------------------


def table(
    *children: Any,
    col_styles: list[Mapping[str, Any]] | None = None,
    style: Mapping[str, Any] | None = None,
    wrap: bool | None = None,
) -> Element:
    props = _without_none(col_styles=col_styles, style=style, wrap=wrap)
    props["children"] = list(children)
    return Element(ElementKind.TABLE, props)


def row(
    *children: Any,
    col_styles: list[Mapping[str, Any]] | None = None,
    style: Mapping[str, Any] | None = None,
    debug: bool = False,
) -> Element:
    props = _without_none(col_styles=col_styles, style=style)
    props["debug"] = debug
    props["children"] = list(children)
    return Element(ElementKind.ROW, props)


def auto_table(*children: Any, col_styles: list[Any]) -> Element:
    return Element(
        ElementKind.AUTO_TABLE,
        {"col_styles": list(col_styles), "children": list(children)},
    )


def auto_row(
    cells: list[Any],
    style: Mapping[str, Any] | None = None,
    debug: bool = False,
    col_styles: list[Mapping[str, Any]] | None = None,
) -> Element:
    props = _without_none(col_styles=col_styles, style=style)
    props["cells"] = list(cells)
    props["debug"] = debug
    return Element(ElementKind.AUTO_ROW, props)


# ---------------------------------------------------------------------------
# Predicates
# ---------------------------------------------------------------------------


def is_fragment(node: object) -> bool:
    return isinstance(node, Element) and node.kind is ElementKind.FRAGMENT


def is_kind(node: object, kind: ElementKind) -> bool:
    return isinstance(node, Element) and node.kind is kind


# ---------------------------------------------------------------------------
# Serialization
# ---------------------------------------------------------------------------


def _value_to_json(value: Any) -> Any:
    if isinstance(value, Element):
        return element_to_dict(value)
    if isinstance(value, Mapping):
        return {str(k): _value_to_json(v) for k, v in value.items()}
    if isinstance(value, (list, tuple)):
        return [_value_to_json(v) for v in value]
    if isinstance(value, Enum):
        return value.value
    if callable(value):
        name = getattr(value, "__name__", type(value).__name__)
        return f"<generator {name}>"
    return value


def element_to_dict(element: Element) -> dict[str, Any]:
    """Convert an element tree into JSON-compatible dicts."""
    return {
        "type": element.kind.value,
        "props": {key: _value_to_json(value) for key, value in element.props.items()},
    }
