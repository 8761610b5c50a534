"""CLI entry point for pi-table. Uses Click for argument parsing."""

from __future__ import annotations

import json
import logging
import sys
import time

import click

from pi.table.config import load_config
from pi.table.diagnostics import Diagnostics
from pi.table.elements import (
    Element,
    ElementKind,
    auto_row,
    auto_table,
    element_to_dict,
    fragment,
)
from pi.table.errors import TableLayoutError
from pi.table.render import render


def _format_outline(element: Element, depth: int = 0) -> list[str]:
    indent = "  " * depth
    style = element.get("style")
    style_text = f" {json.dumps(style, sort_keys=True)}" if style else ""
    if element.kind is ElementKind.TEXT:
        return [f"{indent}text {element.children!r}{style_text}"]

    lines = [f"{indent}{element.kind.value}{style_text}"]
    for child in element.children or []:
        lines.extend(_format_outline(child, depth + 1))
    return lines


def _demo_table() -> Element:
    def value_col(idx: int) -> dict:
        return {"width": "40px", "marginRight": "4px", "textAlign": "right"}

    def subtotal(idx: int) -> str:
        return f"={idx * 100}"

    return auto_table(
        auto_row(["Item", "Q1", "Q2", "Q3", "Q4"], style={"fontWeight": "bold"}),
        fragment(
            auto_row(["Apples", 10, 12, 9, 14]),
            auto_row(["Pears", 3, 4, 4, 6]),
        ),
        auto_row(["Subtotal", subtotal]),
        auto_row(["Broken", 1, 2]),
        col_styles=[{"width": "80px"}, value_col],
    )


@click.group()
@click.option(
    "--log-level",
    default="warning",
    type=click.Choice(["debug", "info", "warning", "error"]),
    help="Logging level (default: warning)",
)
def main(log_level):
    """Resolve declarative tables into host layout trees."""
    logging.basicConfig(
        level=getattr(logging, log_level.upper()),
        format="%(asctime)s [%(levelname)s] %(name)s: %(message)s",
    )


@main.command()
@click.option("--rows", default=500, show_default=True, help="Number of rows")
@click.option("--cols", default=26, show_default=True, help="Number of columns")
@click.option("--col-width", default=10, show_default=True, help="Width of each column in px")
def stress(rows, cols, col_width):
    """Lay out a rows x cols table of numbers and report how long it took."""
    col_styles = [{"width": col_width} for _ in range(cols)]
    element = auto_table(
        [auto_row(list(range(cols))) for _ in range(rows)],
        col_styles=col_styles,
    )

    diagnostics = Diagnostics()
    start = time.perf_counter()
    try:
        result = render(element, diagnostics, load_config())
    except TableLayoutError as e:
        click.echo(f"Error: {e}", err=True)
        sys.exit(1)
    elapsed_ms = (time.perf_counter() - start) * 1000

    width = result.style.get("width")
    click.echo(
        f"DONE in {elapsed_ms:.0f}ms: {len(result.children)} rows x {cols} cols, width {width:g}"
    )
    if len(diagnostics):
        click.echo(f"{len(diagnostics)} diagnostics reported", err=True)


@main.command()
@click.option("--json", "as_json", is_flag=True, help="Print the layout tree as JSON")
def demo(as_json):
    """Render a small sample table and show the resulting layout tree."""
    diagnostics = Diagnostics()
    try:
        result = render(_demo_table(), diagnostics, load_config())
    except TableLayoutError as e:
        click.echo(f"Error: {e}", err=True)
        sys.exit(1)

    if as_json:
        click.echo(json.dumps(element_to_dict(result), indent=2))
    else:
        click.echo("\n".join(_format_outline(result)))

    for diagnostic in diagnostics:
        click.echo(f"{diagnostic.severity}: [{diagnostic.code}] {diagnostic.message}", err=True)


if __name__ == "__main__":
    main()
