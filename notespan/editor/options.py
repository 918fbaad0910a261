"""
Editing behaviour flags.

All fields default to the reference behaviour; ``from_env`` lets hosts flip
them without code changes.
"""

from __future__ import annotations

import os
from dataclasses import dataclass


def _env_flag(name: str, default: bool) -> bool:
    raw = os.getenv(name)
    if raw is None:
        return default
    return raw.strip().lower() in {"1", "true", "yes", "on"}


@dataclass(frozen=True)
class EditorConfig:
    # Toggling with a collapsed cursor normally does nothing. When enabled it
    # leaves an empty span at the cursor so the next typed text is styled.
    collapsed_toggle_anchors: bool = False

    @classmethod
    def from_env(cls) -> "EditorConfig":
        return cls(
            collapsed_toggle_anchors=_env_flag("NOTESPAN_COLLAPSED_TOGGLE", False),
        )
