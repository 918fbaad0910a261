"""
Keep spans anchored to the same logical text across a single edit.

Rules, evaluated per span in this order (``p`` is the edit position):

  1. edit starts after the span end       -> untouched
  2. edit ends before the span start      -> shifted by delta
  3. pure insertion at/inside the span    -> absorbed, except that typing
     right before a non-empty run does not extend it (the run moves instead);
     an empty span at ``p`` grows so "toggle, then type" formats new text
  4. anything else                        -> each boundary remapped; points
     inside the replaced region collapse to ``p``

Spans left empty are dropped afterwards, then runs of the same type that now
touch (e.g. the gap between them was deleted) are merged.
"""

from __future__ import annotations

import logging
from typing import List

from .diffing import compute_edit_region
from .domain import EditRegion, FormattingSpan
from .merging import merge_present_types

LOGGER = logging.getLogger(__name__)


def _map_index(idx: int, region: EditRegion) -> int:
    if idx <= region.prefix_len:
        return idx
    if idx >= region.old_end:
        return idx + region.delta
    return region.prefix_len


def _shift_one(span: FormattingSpan, region: EditRegion) -> None:
    p = region.prefix_len
    delta = region.delta

    if p > span.end:
        return

    if region.old_end < span.start:
        span.start += delta
        span.end += delta
        return

    if region.is_insertion and span.start <= p <= span.end:
        if p == span.start:
            if span.start == span.end:
                span.end += delta
            else:
                span.start += delta
                span.end += delta
        else:
            span.end += delta
        return

    span.start = _map_index(span.start, region)
    span.end = _map_index(span.end, region)
    if span.end < span.start:
        span.end = span.start


def shift_spans(region: EditRegion, spans: List[FormattingSpan]) -> None:
    """Mutate ``spans`` in place to follow ``region``; drops empty spans and
    merges same-type spans brought together by the edit."""
    if region.is_noop:
        return
    for span in spans:
        _shift_one(span, region)
    before = len(spans)
    spans[:] = [s for s in spans if not s.is_degenerate]
    if len(spans) != before:
        LOGGER.debug("editor.shift pruned=%d kept=%d", before - len(spans), len(spans))
    merge_present_types(spans)


def apply_text_change(
    old_text: str, new_text: str, spans: List[FormattingSpan]
) -> EditRegion:
    region = compute_edit_region(old_text, new_text)
    shift_spans(region, spans)
    return region
