"""Public exports for persisted document models."""

from __future__ import annotations

from .document import DocumentRecord, SpanRecord

__all__ = [
    "DocumentRecord",
    "SpanRecord",
]
