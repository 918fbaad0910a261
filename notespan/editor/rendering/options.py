"""
Display configuration for rendered segments.

Centralizes appearance knobs so callers can tune defaults without touching
core logic.
"""

from __future__ import annotations

from dataclasses import dataclass
from typing import Optional


@dataclass(frozen=True)
class RenderConfig:
    # Logging/debug
    debug: bool = False

    # Heading sizes in points; header1 wins when both apply.
    header1_font_size: float = 24.0
    header2_font_size: float = 20.0

    # Optional text color applied to every segment (CSS color string)
    base_color: Optional[str] = None

    # Keep leading spaces/tabs visible in HTML output
    preserve_leading_whitespace: bool = True

    # Spaces per tab when preserving leading whitespace
    tab_width: int = 4
