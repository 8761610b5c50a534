"""Table layout components.

``layout_table`` and ``layout_row`` are the plain table primitives: the table
hands its column styles to every row, and each row merges the style of its
column into every cell.  ``layout_auto_table`` works out the column count
from its first row, expands generative column styles and cell arrays to that
count, and drops rows that do not fit before delegating to ``layout_table``.

Example -- a two column table, 25px wide then a right-aligned 75px column::

    auto_table(
        auto_row(["Name", "Total"]),
        auto_row(["Apples", 3]),
        col_styles=[{"width": "25px"}, {"width": "75px", "textAlign": "right"}],
    )
"""

from __future__ import annotations

import logging
from collections.abc import Mapping, Sequence
from typing import Any

from pi.table.auto_array import AutoArray, expand_auto_array, has_generator
from pi.table.children import get_children_in_fragments
from pi.table.context import RenderContext
from pi.table.elements import Element, ElementKind, is_kind, text, view
from pi.table.errors import (
    AutoArrayLengthError,
    ColumnStyleMismatchError,
    EmptyTableError,
    GenerativeFirstRowError,
    InvalidFirstRowError,
    RowValidationError,
    TableLayoutError,
)
from pi.table.registry import register_component
from pi.table.styles import Style, merge_styles, width_from_col_styles

logger = logging.getLogger(__name__)

BUILTIN_SOURCE_ID = "pi.table"


# ---------------------------------------------------------------------------
# Table / Row
# ---------------------------------------------------------------------------


def layout_table(
    children: Any,
    col_styles: Sequence[Style] | None = None,
    style: Style | None = None,
    wrap: bool | None = None,
    *,
    context: RenderContext | None = None,
) -> Element:
    """Lay out rows as a column, handing every row the table's column styles."""
    ctx = context or RenderContext()
    styles = list(col_styles or [])
    rows_with_cols = [
        child.with_props(col_styles=styles)
        for child in get_children_in_fragments(children)
    ]
    return view(
        *rows_with_cols,
        style=merge_styles({"flexDirection": "column"}, style),
        wrap=ctx.config.default_wrap if wrap is None else wrap,
    )


def style_row_children(
    children: Any,
    col_styles: Sequence[Style],
    context: RenderContext | None = None,
) -> list[Element]:
    """Get a row's cells with the style of their column merged in."""
    ctx = context or RenderContext()
    cells = get_children_in_fragments(children)
    if len(cells) != len(col_styles) and ctx.config.report_style_mismatch:
        ctx.diagnostics.report(
            "row_style_mismatch",
            f"Got '{len(cells)}' children in row but only '{len(col_styles)}' styles",
            cells=len(cells),
            styles=len(col_styles),
        )

    styled: list[Element] = []
    for idx, cell in enumerate(cells):
        col_style = col_styles[idx] if idx < len(col_styles) else {}
        styled.append(cell.with_props(style=merge_styles(col_style, cell.style)))
    return styled


def layout_row(
    children: Any,
    col_styles: Sequence[Style] | None = None,
    style: Style | None = None,
    debug: bool = False,
    *,
    context: RenderContext | None = None,
) -> Element:
    cells = style_row_children(children or [], list(col_styles or []), context)
    return view(
        *cells,
        style=merge_styles({"flexDirection": "row"}, style),
        debug=debug,
    )


# ---------------------------------------------------------------------------
# AutoTable / AutoRow
# ---------------------------------------------------------------------------


def layout_auto_row(
    cells: AutoArray[Any],
    col_styles: Sequence[Style] | None,
    style: Style | None = None,
    debug: bool = False,
    *,
    context: RenderContext | None = None,
) -> Element:
    """Expand an auto array of cell values into a styled row of text cells."""
    if col_styles is None:
        raise TableLayoutError(
            "AutoRow needs col_styles to size its cells; render it inside an AutoTable"
        )
    values = expand_auto_array(cells, len(col_styles))
    texts = [text(value, key=idx) for idx, value in enumerate(values)]
    return layout_row(texts, col_styles, style, debug, context=context)


def _drop_row(ctx: RenderContext, row_index: int, code: Any, message: str, **details: Any) -> None:
    if ctx.config.strict_rows:
        raise RowValidationError(message, row_index)
    ctx.diagnostics.report(code, message, row_index=row_index, **details)


def _row_is_valid(row: Element, row_index: int, col_count: int, ctx: RenderContext) -> bool:
    if not is_kind(row, ElementKind.AUTO_ROW):
        _drop_row(
            ctx,
            row_index,
            "wrong_row_type",
            f"AutoTable children must be AutoRows, got '{row.kind.value}'. Skipping element",
            kind=row.kind.value,
        )
        return False

    try:
        cell_length = len(expand_auto_array(row.get("cells") or [], col_count))
    except AutoArrayLengthError as e:
        _drop_row(
            ctx,
            row_index,
            "row_expansion_failed",
            f"AutoTable row cells could not be expanded: {e}. Skipping element",
            expected=col_count,
        )
        return False

    if cell_length != col_count:
        _drop_row(
            ctx,
            row_index,
            "row_length_mismatch",
            f"AutoTable row must be of correct length, got {cell_length}, "
            f"expected {col_count}. Skipping element",
            got=cell_length,
            expected=col_count,
        )
        return False
    return True


def layout_auto_table(
    children: Any,
    col_styles: AutoArray[Style],
    *,
    context: RenderContext | None = None,
) -> Element:
    """Table that sizes its columns from its first row.

    *col_styles* may contain a generator which is called for every column
    the literal styles do not cover.
    """
    ctx = context or RenderContext()

    rows = get_children_in_fragments(children)
    if not rows:
        raise EmptyTableError()
    first = rows[0]
    if not is_kind(first, ElementKind.AUTO_ROW):
        raise InvalidFirstRowError(first.kind.value)
    first_cells = first.get("cells") or []
    if has_generator(first_cells):
        raise GenerativeFirstRowError()
    col_count = len(first_cells)

    try:
        resolved_styles = expand_auto_array(col_styles, col_count)
    except AutoArrayLengthError as e:
        raise ColumnStyleMismatchError(col_count, len(col_styles)) from e
    if len(resolved_styles) != col_count:
        raise ColumnStyleMismatchError(col_count, len(resolved_styles))

    valid_rows = [
        row for idx, row in enumerate(rows) if _row_is_valid(row, idx, col_count, ctx)
    ]
    if len(valid_rows) != len(rows):
        logger.debug("Dropped %d of %d rows", len(rows) - len(valid_rows), len(rows))

    width = width_from_col_styles(resolved_styles, ctx.diagnostics)
    return layout_table(valid_rows, resolved_styles, {"width": width}, context=ctx)


# ---------------------------------------------------------------------------
# Registration
# ---------------------------------------------------------------------------


def _render_table(props: Mapping[str, Any], ctx: RenderContext) -> Element:
    return layout_table(
        props.get("children"),
        props.get("col_styles"),
        props.get("style"),
        props.get("wrap"),
        context=ctx,
    )


def _render_row(props: Mapping[str, Any], ctx: RenderContext) -> Element:
    return layout_row(
        props.get("children"),
        props.get("col_styles"),
        props.get("style"),
        bool(props.get("debug", False)),
        context=ctx,
    )


def _render_auto_table(props: Mapping[str, Any], ctx: RenderContext) -> Element:
    return layout_auto_table(
        props.get("children"), props.get("col_styles") or [], context=ctx
    )


def _render_auto_row(props: Mapping[str, Any], ctx: RenderContext) -> Element:
    return layout_auto_row(
        props.get("cells") or [],
        props.get("col_styles"),
        props.get("style"),
        bool(props.get("debug", False)),
        context=ctx,
    )


def register_builtin_components() -> None:
    register_component(ElementKind.TABLE, _render_table, BUILTIN_SOURCE_ID)
    register_component(ElementKind.ROW, _render_row, BUILTIN_SOURCE_ID)
    register_component(ElementKind.AUTO_TABLE, _render_auto_table, BUILTIN_SOURCE_ID)
    register_component(ElementKind.AUTO_ROW, _render_auto_row, BUILTIN_SOURCE_ID)
