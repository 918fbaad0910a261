"""
Coalesce same-type spans so no two of them overlap or touch.

Spans of different types are independent and never merged.
"""

from __future__ import annotations

import logging
from typing import List

from .domain import FormattingSpan, StyleType

LOGGER = logging.getLogger(__name__)


def merge_spans(spans: List[FormattingSpan], type: StyleType) -> None:
    """Coalesce overlapping or touching spans of ``type`` in place."""
    typed = sorted((s for s in spans if s.type == type), key=lambda s: s.start)
    if not typed:
        return

    merged: List[FormattingSpan] = []
    current = typed[0].copy_with()
    for nxt in typed[1:]:
        if nxt.start <= current.end:
            current.end = max(current.end, nxt.end)
        else:
            merged.append(current)
            current = nxt.copy_with()
    merged.append(current)

    if len(merged) != len(typed):
        LOGGER.debug(
            "editor.merge type=%s %d -> %d", type.name, len(typed), len(merged)
        )
    spans[:] = [s for s in spans if s.type != type] + merged


def merge_present_types(spans: List[FormattingSpan]) -> None:
    for type in sorted({s.type for s in spans}):
        merge_spans(spans, type)
