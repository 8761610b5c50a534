"""Layout configuration, read from ``PI_TABLE_*`` environment variables."""

from __future__ import annotations

import os
from dataclasses import dataclass

_TRUTHY = {"1", "true", "yes", "on"}


@dataclass
class LayoutConfig:
    """Layout behaviour switches."""

    # Raise RowValidationError instead of dropping malformed rows
    strict_rows: bool = False
    # Whether tables may be split across page boundaries by the host
    default_wrap: bool = True
    report_style_mismatch: bool = True


def _env_flag(name: str, default: bool) -> bool:
    value = os.environ.get(name)
    if value is None or value.strip() == "":
        return default
    return value.strip().lower() in _TRUTHY


def load_config() -> LayoutConfig:
    return LayoutConfig(
        strict_rows=_env_flag("PI_TABLE_STRICT_ROWS", False),
        default_wrap=_env_flag("PI_TABLE_WRAP", True),
        report_style_mismatch=_env_flag("PI_TABLE_REPORT_STYLE_MISMATCH", True),
    )
