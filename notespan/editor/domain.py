# notespan/editor/domain.py
from __future__ import annotations

from dataclasses import dataclass, field, replace
from enum import IntEnum
from typing import List, Optional

from notespan.exceptions import InvalidSelectionError


class StyleType(IntEnum):
    # Values are the persisted ordinals; do not reorder.
    BOLD = 0
    ITALIC = 1
    UNDERLINE = 2
    HEADER1 = 3
    HEADER2 = 4


@dataclass
class FormattingSpan:
    """Half-open range ``[start, end)`` of the current buffer carrying ``type``."""

    start: int
    end: int
    type: StyleType

    @property
    def is_degenerate(self) -> bool:
        return self.start >= self.end

    def copy_with(
        self,
        *,
        start: Optional[int] = None,
        end: Optional[int] = None,
        type: Optional[StyleType] = None,
    ) -> "FormattingSpan":
        return FormattingSpan(
            self.start if start is None else start,
            self.end if end is None else end,
            self.type if type is None else type,
        )

    def key(self):
        return (self.start, self.end, int(self.type))


@dataclass
class Document:
    text: str = ""
    spans: List[FormattingSpan] = field(default_factory=list)

    def copy(self) -> "Document":
        return Document(text=self.text, spans=[replace(s) for s in self.spans])

    def span_keys(self):
        """Order-independent view of the spans, for comparisons."""
        return sorted(s.key() for s in self.spans)


@dataclass(frozen=True)
class EditRegion:
    """Single contiguous region that differs between two buffer states.

    Old text changed in ``[prefix_len, prefix_len + old_len)``, new text in
    ``[prefix_len, prefix_len + new_len)``.
    """

    prefix_len: int
    old_len: int
    new_len: int

    @property
    def delta(self) -> int:
        return self.new_len - self.old_len

    @property
    def old_end(self) -> int:
        return self.prefix_len + self.old_len

    @property
    def is_insertion(self) -> bool:
        return self.old_len == 0 and self.new_len > 0

    @property
    def is_noop(self) -> bool:
        return self.old_len == 0 and self.new_len == 0


@dataclass(frozen=True)
class Selection:
    start: int = 0
    end: int = 0

    @property
    def is_collapsed(self) -> bool:
        return self.start == self.end

    def normalized(self) -> "Selection":
        if self.start <= self.end:
            return self
        return Selection(self.end, self.start)

    def is_valid_for(self, length: int) -> bool:
        return 0 <= self.start <= self.end <= length

    def require_valid(self, length: int) -> "Selection":
        sel = self.normalized()
        if not sel.is_valid_for(length):
            raise InvalidSelectionError(sel.start, sel.end, length)
        return sel
