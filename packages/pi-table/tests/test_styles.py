"""Tests for style merging and width arithmetic."""

from __future__ import annotations

import pytest

from pi.table.styles import (
    from_px,
    merge_styles,
    style_value,
    total_width,
    width_from_col_styles,
)


class TestMergeStyles:
    def test_later_style_wins(self) -> None:
        merged = merge_styles({"width": 10, "align": "left"}, {"align": "right"})
        assert merged == {"width": 10, "align": "right"}

    def test_none_and_empty_are_skipped(self) -> None:
        assert merge_styles(None, {}, {"color": "red"}) == {"color": "red"}

    def test_later_spelling_replaces_earlier_one(self) -> None:
        merged = merge_styles({"marginRight": 5, "width": 1}, {"margin_right": 0})
        assert merged == {"width": 1, "margin_right": 0}

    def test_inputs_are_not_mutated(self) -> None:
        base = {"width": 10}
        merge_styles(base, {"width": 20})
        assert base == {"width": 10}


class TestStyleValue:
    @pytest.mark.parametrize("key", ["marginRight", "margin_right", "margin-right"])
    def test_any_spelling_matches(self, key: str) -> None:
        assert style_value({key: "5px"}, "marginRight") == "5px"
        assert style_value({key: "5px"}, "margin-right") == "5px"

    def test_missing_value(self) -> None:
        assert style_value({"width": 1}, "marginRight") is None
        assert style_value(None, "width") is None


class TestFromPx:
    def test_number_used_as_is(self) -> None:
        assert from_px(12) == 12
        assert from_px(2.5) == 2.5

    def test_px_string(self) -> None:
        assert from_px("12px") == 12.0
        assert from_px("12.5px") == 12.5

    def test_unitless_string(self) -> None:
        assert from_px("7") == 7.0

    def test_absent_is_zero(self) -> None:
        assert from_px(None) == 0
        assert from_px("") == 0

    def test_other_units_contribute_zero(self, diagnostics) -> None:
        assert from_px("25%", diagnostics) == 0
        assert from_px("10pt", diagnostics) == 0
        assert diagnostics.codes() == ["unsupported_unit", "unsupported_unit"]
        assert diagnostics.records[0].details["unit"] == "%"

    def test_malformed_contributes_zero(self, diagnostics) -> None:
        assert from_px("wide", diagnostics) == 0
        assert diagnostics.codes() == ["malformed_length"]

    def test_no_sink_means_silent_zero(self) -> None:
        assert from_px("3em") == 0

    def test_bool_rejected(self) -> None:
        with pytest.raises(TypeError):
            from_px(True)


class TestWidthFromColStyles:
    def test_sums_width_and_margin_right(self) -> None:
        styles = [{"width": "10px"}, {"width": "20px", "marginRight": "5px"}]
        assert width_from_col_styles(styles) == 35

    def test_mixed_numbers_and_strings(self) -> None:
        styles = [{"width": 10}, {"width": "20px", "margin-right": 2}]
        assert width_from_col_styles(styles) == 32

    def test_missing_values_are_zero(self) -> None:
        assert width_from_col_styles([{}, {"textAlign": "right"}]) == 0

    def test_empty(self) -> None:
        assert width_from_col_styles([]) == 0

    def test_percent_widths_reported(self, diagnostics) -> None:
        styles = [{"width": "25%"}, {"width": "75px"}]
        assert width_from_col_styles(styles, diagnostics) == 75
        assert diagnostics.codes() == ["unsupported_unit"]

    def test_total_width_alias(self) -> None:
        assert total_width is width_from_col_styles
