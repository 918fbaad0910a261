"""
Mutable span collection owned by one editing session.

The list is never handed out directly; readers get copies so a rendering
snapshot cannot alias the live spans.
"""

from __future__ import annotations

import logging
from typing import Iterable, Iterator, List, Optional, Set, Tuple

from . import toggling
from .domain import EditRegion, FormattingSpan, Selection, StyleType
from .merging import merge_present_types, merge_spans
from .shifting import apply_text_change

LOGGER = logging.getLogger(__name__)


class SpanStore:
    def __init__(self, spans: Optional[Iterable[FormattingSpan]] = None):
        self._spans: List[FormattingSpan] = [s.copy_with() for s in spans or ()]

    def __len__(self) -> int:
        return len(self._spans)

    def __iter__(self) -> Iterator[FormattingSpan]:
        return iter(self.snapshot())

    def snapshot(self) -> Tuple[FormattingSpan, ...]:
        return tuple(s.copy_with() for s in self._spans)

    def replace_all(self, spans: Iterable[FormattingSpan]) -> None:
        self._spans = [s.copy_with() for s in spans]

    # Mutations

    def add(self, span: FormattingSpan, *, merge: bool = True) -> None:
        self._spans.append(span.copy_with())
        if merge:
            merge_spans(self._spans, span.type)

    def merge(self) -> None:
        """Restore the no-overlap invariant for every type present."""
        merge_present_types(self._spans)

    def clamp(self, length: int) -> int:
        """Clamp boundaries into ``[0, length]``. Returns how many spans moved.

        A span that clamping leaves empty is dropped; it would otherwise act as
        a sticky anchor at the buffer edge. Spans that were already empty and
        in range are kept.
        """
        moved = 0
        kept: List[FormattingSpan] = []
        for s in self._spans:
            start = min(max(s.start, 0), length)
            end = min(max(s.end, 0), length)
            if end < start:
                end = start
            if (start, end) != (s.start, s.end):
                moved += 1
                if start == end:
                    continue
                s.start, s.end = start, end
            kept.append(s)
        if moved:
            self._spans = kept
            LOGGER.debug(
                "editor.store clamped=%d kept=%d length=%d", moved, len(kept), length
            )
        return moved

    def apply_text_change(self, old_text: str, new_text: str) -> EditRegion:
        return apply_text_change(old_text, new_text, self._spans)

    def toggle(
        self,
        selection: Selection,
        type: StyleType,
        text_length: int,
        *,
        allow_collapsed: bool = False,
    ) -> bool:
        sel = selection.normalized()
        return toggling.toggle_style(
            self._spans,
            sel.start,
            sel.end,
            type,
            text_length,
            allow_collapsed=allow_collapsed,
        )

    def clear_range(self, selection: Selection, text_length: int) -> bool:
        sel = selection.normalized()
        return toggling.clear_formatting(self._spans, sel.start, sel.end, text_length)

    def active_styles(self, selection: Selection, text_length: int) -> Set[StyleType]:
        return toggling.current_styles(self._spans, selection, text_length)
