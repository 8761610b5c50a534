"""Exceptions raised while resolving table layouts."""

from __future__ import annotations


class TableLayoutError(Exception):
    """Base class for every fatal layout error."""


class AutoArrayLengthError(TableLayoutError, ValueError):
    """An auto array cannot be expanded to the requested length."""

    def __init__(self, length: int, to_length: int) -> None:
        super().__init__(
            f"Cannot expand auto array of length {length} to {to_length}"
        )
        self.length = length
        self.to_length = to_length


class EmptyTableError(TableLayoutError):
    def __init__(self) -> None:
        super().__init__("At least one row must be passed to AutoTable")


class InvalidFirstRowError(TableLayoutError):
    def __init__(self, kind: str) -> None:
        super().__init__(f"First row of an AutoTable must be an AutoRow, got '{kind}'")
        self.kind = kind


class GenerativeFirstRowError(TableLayoutError):
    def __init__(self) -> None:
        super().__init__(
            "First row cannot contain an auto array (generator cells need a known column count)"
        )


class ColumnStyleMismatchError(TableLayoutError):
    def __init__(self, col_count: int, style_count: int) -> None:
        super().__init__(
            f"Column count and resolved column styles differ: {col_count} != {style_count}"
        )
        self.col_count = col_count
        self.style_count = style_count


class RowValidationError(TableLayoutError):
    """A row failed validation while strict row checking is enabled."""

    def __init__(self, message: str, row_index: int) -> None:
        super().__init__(message)
        self.row_index = row_index
