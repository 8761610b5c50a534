"""Tests for rendering declarations down to host primitives."""

from __future__ import annotations

import pytest

from pi.table.config import LayoutConfig
from pi.table.diagnostics import Diagnostics
from pi.table.elements import (
    Element,
    ElementKind,
    auto_row,
    auto_table,
    element_to_dict,
    fragment,
    is_fragment,
    is_kind,
    row,
    table,
    text,
    view,
)
from pi.table.errors import EmptyTableError, RowValidationError, TableLayoutError
from pi.table.registry import get_component, register_component, unregister_components
from pi.table.render import render


def _kinds(element: Element) -> set[ElementKind]:
    kinds = {element.kind}
    if element.kind is not ElementKind.TEXT:
        for child in element.children or []:
            kinds |= _kinds(child)
    return kinds


def _cell_texts(result: Element) -> list[list[str]]:
    return [[cell.children for cell in r.children] for r in result.children]


class TestRenderTable:
    def test_table_of_rows(self) -> None:
        result = render(
            table(
                row("a", "b"),
                row("c", fragment("d")),
                col_styles=[{"width": 10}, {"width": 20, "textAlign": "right"}],
            )
        )
        assert _kinds(result) == {ElementKind.VIEW, ElementKind.TEXT}
        assert _cell_texts(result) == [["a", "b"], ["c", "d"]]
        assert result.children[1].children[1].style == {"width": 20, "textAlign": "right"}

    def test_host_primitives_render_to_themselves(self) -> None:
        tree = view(text("x"), style={"padding": 4})
        assert render(tree) == tree

    def test_unknown_kind_without_component(self, builtin_components) -> None:
        unregister_components("pi.table")
        with pytest.raises(TableLayoutError):
            render(table(row("a")))


class TestRenderAutoTable:
    def test_auto_table_end_to_end(self) -> None:
        diagnostics = Diagnostics()
        result = render(
            auto_table(
                auto_row(["Item", "Q1", "Q2"]),
                fragment(auto_row(["Apples", 1, 2]), auto_row(["Pears", 3])),
                auto_row(["Total", lambda idx: f"sum{idx}"]),
                col_styles=[{"width": "50px"}, lambda idx: {"width": "20px"}],
            ),
            diagnostics,
        )
        assert _cell_texts(result) == [
            ["Item", "Q1", "Q2"],
            ["Apples", "1", "2"],
            ["Total", "sum1", "sum2"],
        ]
        assert result.style["width"] == 90
        assert diagnostics.codes() == ["row_length_mismatch"]
        assert diagnostics.records[0].row_index == 2

    def test_cells_carry_column_styles(self) -> None:
        result = render(
            auto_table(
                auto_row(["a", "b"]),
                col_styles=[{"width": 10}, {"width": 20}],
            )
        )
        [only_row] = result.children
        assert only_row.style == {"flexDirection": "row"}
        assert [c.style for c in only_row.children] == [{"width": 10}, {"width": 20}]

    def test_fatal_errors_propagate(self) -> None:
        with pytest.raises(EmptyTableError):
            render(view(auto_table(col_styles=[{}])))

    def test_strict_config_reaches_components(self) -> None:
        tree = auto_table(auto_row([1, 2]), auto_row([1]), col_styles=[{}, {}])
        with pytest.raises(RowValidationError):
            render(tree, config=LayoutConfig(strict_rows=True))

    def test_rerender_of_literal_table_is_identical(self) -> None:
        def build() -> Element:
            return auto_table(
                auto_row(["a", "b", "c"]),
                auto_row([1, 2, 3]),
                col_styles=[{"width": 10}, {"width": 20}, {"width": 30}],
            )

        first = render(build())
        second = render(build())
        assert first == second
        assert element_to_dict(first) == element_to_dict(second)

    def test_source_tree_is_not_mutated(self) -> None:
        first_row = auto_row(["a"])
        tree = auto_table(first_row, col_styles=[{"width": 1}])
        render(tree)
        assert "col_styles" not in first_row.props
        assert tree.children == [first_row]


class TestRegistry:
    def test_builtins_registered(self) -> None:
        for kind in (
            ElementKind.TABLE,
            ElementKind.ROW,
            ElementKind.AUTO_TABLE,
            ElementKind.AUTO_ROW,
        ):
            assert get_component(kind) is not None
        assert get_component(ElementKind.VIEW) is None

    @pytest.mark.parametrize(
        "kind", [ElementKind.VIEW, ElementKind.TEXT, ElementKind.FRAGMENT]
    )
    def test_host_kinds_cannot_have_components(self, kind: ElementKind) -> None:
        with pytest.raises(TableLayoutError):
            register_component(kind, lambda props, ctx: view(), source_id="test")
        assert get_component(kind) is None

    def test_host_can_override_a_component(self, builtin_components) -> None:
        def plain_row(props, ctx):
            return view(*props.get("children", []), style={"border": 1})

        register_component(ElementKind.ROW, plain_row, source_id="test")
        result = render(table(row("a"), col_styles=[{"width": 3}]))
        assert result.children[0].style == {"border": 1}
        # overriding component skipped the column styles
        assert result.children[0].children[0].get("style") is None


class TestElementToDict:
    def test_generators_are_named(self) -> None:
        def filler(idx: int) -> str:
            return ""

        data = element_to_dict(auto_row(["a", filler]))
        assert data == {
            "type": "auto_row",
            "props": {"cells": ["a", "<generator filler>"], "debug": False},
        }

    def test_nested_children(self) -> None:
        data = element_to_dict(view(text("x", style={"color": "red"})))
        assert data["type"] == "view"
        assert data["props"]["children"] == [
            {"type": "text", "props": {"style": {"color": "red"}, "children": "x"}}
        ]


class TestPredicates:
    def test_is_kind(self) -> None:
        assert is_kind(auto_row([1]), ElementKind.AUTO_ROW)
        assert not is_kind(row("a"), ElementKind.AUTO_ROW)
        assert not is_kind("auto_row", ElementKind.AUTO_ROW)

    def test_is_fragment(self) -> None:
        assert is_fragment(fragment())
        assert not is_fragment(view())
        assert not is_fragment(None)
