"""Structured diagnostics for recoverable and cosmetic layout problems.

Fatal problems raise (see :mod:`pi.table.errors`).  Everything else is
reported here: each record is kept on the sink, logged, and handed to an
optional reporter callback so hosts can route warnings wherever they like.
"""

from __future__ import annotations

import logging
from collections.abc import Iterator
from typing import Any, Callable, Literal

from pydantic import BaseModel, Field

logger = logging.getLogger(__name__)

DiagnosticCode = Literal[
    "row_style_mismatch",
    "wrong_row_type",
    "row_length_mismatch",
    "row_expansion_failed",
    "unsupported_unit",
    "malformed_length",
]

Severity = Literal["warning", "error"]


class Diagnostic(BaseModel):
    code: DiagnosticCode
    message: str
    severity: Severity = "warning"
    row_index: int | None = None
    details: dict[str, Any] = Field(default_factory=dict)


Reporter = Callable[[Diagnostic], None]


class Diagnostics:
    """Collecting sink for :class:`Diagnostic` records."""

    def __init__(self, reporter: Reporter | None = None) -> None:
        self.records: list[Diagnostic] = []
        self._reporter = reporter

    def report(
        self,
        code: DiagnosticCode,
        message: str,
        *,
        severity: Severity = "warning",
        row_index: int | None = None,
        **details: Any,
    ) -> Diagnostic:
        diagnostic = Diagnostic(
            code=code,
            message=message,
            severity=severity,
            row_index=row_index,
            details=details,
        )
        self.records.append(diagnostic)

        if severity == "error":
            logger.error("%s: %s", code, message)
        else:
            logger.warning("%s: %s", code, message)

        if self._reporter:
            self._reporter(diagnostic)
        return diagnostic

    def codes(self) -> list[str]:
        return [d.code for d in self.records]

    def clear(self) -> None:
        self.records = []

    def __len__(self) -> int:
        return len(self.records)

    def __iter__(self) -> Iterator[Diagnostic]:
        return iter(self.records)
