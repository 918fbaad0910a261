"""
Persisted ("wire") form of a note body.

    {"text": "...", "spans": [{"start": 0, "end": 5, "type": 0}, ...]}

``type`` is the StyleType ordinal. A null ``text`` or ``spans`` reads as its
default.
"""

from __future__ import annotations

from typing import List

from pydantic import Field, StrictInt, StrictStr, field_validator

from ..domain import Document, FormattingSpan, StyleType
from ._base import WireModel


class SpanRecord(WireModel):
    start: StrictInt
    end: StrictInt
    type: StyleType

    @classmethod
    def from_span(cls, span: FormattingSpan) -> "SpanRecord":
        return cls(start=span.start, end=span.end, type=span.type)

    def to_span(self) -> FormattingSpan:
        return FormattingSpan(self.start, self.end, StyleType(self.type))


class DocumentRecord(WireModel):
    text: StrictStr = ""
    spans: List[SpanRecord] = Field(default_factory=list)

    @field_validator("text", "spans", mode="before")
    @classmethod
    def _null_to_default(cls, v, info):
        """Writers that emit explicit nulls mean "absent"."""
        if v is None:
            return "" if info.field_name == "text" else []
        return v

    @classmethod
    def from_document(cls, document: Document) -> "DocumentRecord":
        return cls(
            text=document.text,
            spans=[SpanRecord.from_span(s) for s in document.spans],
        )

    def to_document(self) -> Document:
        return Document(text=self.text, spans=[r.to_span() for r in self.spans])
