"""
Turn styles on/off over a selection, clear formatting, and report the styles
active at a selection.

Known asymmetry: only a span that *encloses* the whole selection turns the
style off. A selection crossing one boundary of an existing span is not
enclosed, so the style is turned on and the merger joins the two, i.e. the
style ends up on across the union.

``current_styles`` for a non-collapsed selection reflects the style at the
selection start only, not uniform coverage of the selection (toolbar
highlight convention).
"""

from __future__ import annotations

import logging
from typing import List, Optional, Set

from .domain import FormattingSpan, Selection, StyleType
from .merging import merge_spans

LOGGER = logging.getLogger(__name__)


def _find_enclosing(
    spans: List[FormattingSpan], start: int, end: int, type: StyleType
) -> Optional[int]:
    for idx, s in enumerate(spans):
        if s.type == type and s.start <= start and s.end >= end:
            return idx
    return None


def _split_out(
    spans: List[FormattingSpan], idx: int, start: int, end: int
) -> FormattingSpan:
    """Remove ``spans[idx]`` and re-add its parts outside ``[start, end)``."""
    span = spans.pop(idx)
    if span.start < start:
        spans.append(span.copy_with(end=start))
    if span.end > end:
        spans.append(span.copy_with(start=end))
    return span


def toggle_style(
    spans: List[FormattingSpan],
    start: int,
    end: int,
    type: StyleType,
    text_length: int,
    *,
    allow_collapsed: bool = False,
) -> bool:
    """Toggle ``type`` over ``[start, end)``. Returns True when spans changed."""
    sel = Selection(start, end)
    if not sel.is_valid_for(text_length):
        LOGGER.debug(
            "editor.toggle ignored: [%d, %d) outside length %d", start, end, text_length
        )
        return False
    if sel.is_collapsed and not allow_collapsed:
        return False

    idx = _find_enclosing(spans, start, end, type)
    if idx is not None:
        removed = _split_out(spans, idx, start, end)
        LOGGER.debug(
            "editor.toggle off type=%s selection=[%d, %d) span=[%d, %d)",
            type.name,
            start,
            end,
            removed.start,
            removed.end,
        )
        return True

    spans.append(FormattingSpan(start, end, type))
    merge_spans(spans, type)
    LOGGER.debug("editor.toggle on type=%s selection=[%d, %d)", type.name, start, end)
    return True


def clear_formatting(
    spans: List[FormattingSpan], start: int, end: int, text_length: int
) -> bool:
    """Strip every style from ``[start, end)``; spans are split at the edges."""
    sel = Selection(start, end)
    if sel.is_collapsed or not sel.is_valid_for(text_length):
        return False

    changed = False
    for idx in range(len(spans) - 1, -1, -1):
        s = spans[idx]
        if s.start < end and s.end > start:
            _split_out(spans, idx, start, end)
            changed = True
    if changed:
        LOGGER.debug("editor.clear selection=[%d, %d)", start, end)
    return changed


def current_styles(
    spans: List[FormattingSpan], selection: Selection, text_length: int
) -> Set[StyleType]:
    sel = selection.normalized()
    if not sel.is_valid_for(text_length):
        return set()

    styles: Set[StyleType] = set()
    c = sel.start
    for s in spans:
        if sel.is_collapsed:
            if s.start <= c <= s.end:
                styles.add(s.type)
        elif s.start <= c < s.end:
            styles.add(s.type)
    return styles
