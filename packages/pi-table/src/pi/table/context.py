"""Per-render state threaded through every component call."""

from __future__ import annotations

from dataclasses import dataclass, field

from pi.table.config import LayoutConfig
from pi.table.diagnostics import Diagnostics


@dataclass
class RenderContext:
    diagnostics: Diagnostics = field(default_factory=Diagnostics)
    config: LayoutConfig = field(default_factory=LayoutConfig)
