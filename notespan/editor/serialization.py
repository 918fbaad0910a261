"""
Convert a Document to and from its persisted string form.

Loading never raises: notes saved before formatting existed are plain text,
and a blob that looks structured but cannot be parsed is treated the same
way. Span offsets are clamped into the text so the result always renders; spans
that clamping empties are dropped and same-type overlaps are merged.
"""

from __future__ import annotations

import logging
from typing import Optional

from pydantic import ValidationError

from notespan.exceptions import DocumentFormatError

from .domain import Document
from .models import DocumentRecord
from .store import SpanStore

LOGGER = logging.getLogger(__name__)


def looks_structured(data: str) -> bool:
    return data.lstrip().startswith("{")


def serialize(document: Document) -> str:
    return DocumentRecord.from_document(document).model_dump_json()


def parse_document(data: str) -> Document:
    """Strict parse of a structured blob; raises DocumentFormatError."""
    try:
        record = DocumentRecord.model_validate_json(data)
    except ValidationError as e:
        raise DocumentFormatError(
            f"Invalid document payload ({e.error_count()} errors)", payload=data
        ) from e
    return record.to_document()


def deserialize(data: Optional[str]) -> Document:
    if data is None:
        return Document()
    if not looks_structured(data):
        LOGGER.debug("editor.load plain_text len=%d", len(data))
        return Document(text=data)

    try:
        doc = parse_document(data)
    except DocumentFormatError as e:
        LOGGER.debug("editor.load fallback_plain_text %s", e)
        return Document(text=data)

    store = SpanStore(doc.spans)
    store.clamp(len(doc.text))
    store.merge()
    doc.spans = list(store.snapshot())
    LOGGER.debug(
        "editor.load structured len=%d spans=%d", len(doc.text), len(doc.spans)
    )
    return doc
