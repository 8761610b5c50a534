"""Flattening of nested children into an ordered list of real elements."""

from __future__ import annotations

from collections.abc import Iterable, Mapping
from typing import Any

from pi.table.elements import Element, ElementKind, text


def _collect(value: Any, out: list[Element]) -> None:
    # None, False and True render nothing
    if value is None or isinstance(value, bool):
        return
    if isinstance(value, Element):
        out.append(value)
        return
    if isinstance(value, str):
        if value:
            out.append(text(value))
        return
    if isinstance(value, (int, float)):
        out.append(text(value))
        return
    if isinstance(value, Mapping):
        raise TypeError(f"Mappings are not valid children: {value!r}")
    if isinstance(value, (bytes, bytearray)):
        raise TypeError(f"Bytes are not valid children: {value!r}")
    if isinstance(value, Iterable):
        for item in value:
            _collect(item, out)
        return
    raise TypeError(f"Unsupported child of type {type(value).__name__}")


def normalize_children(value: Any) -> list[Element]:
    """Flatten *value* to any depth, dropping empty items and wrapping primitives.

    Strings and numbers become ``text`` elements; elements (including
    fragments) are returned as-is.
    """
    out: list[Element] = []
    _collect(value, out)
    return out


def get_children_in_fragments(value: Any) -> list[Element]:
    """Get all nested real children, unwrapping fragments in place."""
    children: list[Element] = []
    for child in normalize_children(value):
        if child.kind is not ElementKind.FRAGMENT:
            children.append(child)
            continue
        if child.children is None:
            continue
        children.extend(get_children_in_fragments(child.children))
    return children
