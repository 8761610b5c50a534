"""Style merging and pixel-width arithmetic."""

from __future__ import annotations

import re
from collections.abc import Iterable, Mapping
from typing import Any

from pi.table.diagnostics import Diagnostics

Style = Mapping[str, Any]

_LENGTH_RE = re.compile(
    r"^\s*(?P<number>[-+]?(?:\d+(?:\.\d*)?|\.\d+))\s*(?P<unit>[a-zA-Z%]*)\s*$"
)
_CAMEL_BOUNDARY_RE = re.compile(r"(?<!^)(?=[A-Z])")


def _aliases(name: str) -> list[str]:
    """``marginRight`` / ``margin_right`` / ``margin-right`` for any one of them."""
    snake = _CAMEL_BOUNDARY_RE.sub("_", name).replace("-", "_").lower()
    parts = snake.split("_")
    camel = parts[0] + "".join(p.capitalize() for p in parts[1:])
    kebab = "-".join(parts)
    seen: list[str] = []
    for alias in (name, camel, snake, kebab):
        if alias not in seen:
            seen.append(alias)
    return seen


def style_value(style: Style | None, name: str) -> Any:
    """Look up *name* in *style* under any of its spellings."""
    if not style:
        return None
    for alias in _aliases(name):
        if alias in style:
            return style[alias]
    return None


def merge_styles(*styles: Style | None) -> dict[str, Any]:
    """Merge styles left to right; later styles win on conflicting keys."""
    merged: dict[str, Any] = {}
    for style in styles:
        if not style:
            continue
        for key, value in style.items():
            # one spelling per property, the latest one wins
            for alias in _aliases(key):
                merged.pop(alias, None)
            merged[key] = value
    return merged


def from_px(
    value: str | float | None,
    diagnostics: Diagnostics | None = None,
    prop: str = "width",
) -> float:
    """Return the pixel value of a length.

    Numbers are used as-is, ``"12px"`` and ``"12"`` parse to ``12.0`` and a
    missing value is zero.  Other units cannot be summed as pixels; they
    contribute zero and are reported.
    """
    if value is None or value == "":
        return 0
    if isinstance(value, bool):
        raise TypeError(f"Invalid length for {prop}: {value!r}")
    if isinstance(value, (int, float)):
        return value

    match = _LENGTH_RE.match(str(value))
    if not match:
        if diagnostics is not None:
            diagnostics.report(
                "malformed_length",
                f"Could not parse {prop} value {value!r}, treating it as 0",
                prop=prop,
                value=value,
            )
        return 0

    unit = match.group("unit").lower()
    if unit not in ("", "px"):
        if diagnostics is not None:
            diagnostics.report(
                "unsupported_unit",
                f"Only px lengths can be summed, ignoring {prop} value {value!r}",
                prop=prop,
                value=value,
                unit=unit,
            )
        return 0
    return float(match.group("number"))


def width_from_col_styles(
    col_styles: Iterable[Style], diagnostics: Diagnostics | None = None
) -> float:
    """Get the total width of a set of columns (width plus right margin)."""
    total: float = 0
    for col_style in col_styles:
        total += from_px(style_value(col_style, "width"), diagnostics, "width")
        total += from_px(
            style_value(col_style, "marginRight"), diagnostics, "marginRight"
        )
    return total


total_width = width_from_col_styles
