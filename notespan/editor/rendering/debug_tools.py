"""
Debug helpers for mapping spans to the exact text slices they cover.

Intended for troubleshooting shifting/merging issues. No I/O; safe to use in
tests.
"""

from __future__ import annotations

from typing import Dict, List

from rich.markup import escape
from rich.table import Table

from ..domain import Document


def map_spans(document: Document) -> List[Dict[str, object]]:
    """Return one dict per span, ordered by (start, end, type).

    Each dict contains:
      - index: position in the ordered listing
      - start/end: stored offsets
      - type: style name
      - text: covered slice (offsets clamped into the buffer)
      - in_range: whether the stored offsets were already inside the buffer
    """
    n = len(document.text)
    ordered = sorted(document.spans, key=lambda s: (s.start, s.end, int(s.type)))
    out: List[Dict[str, object]] = []
    for idx, s in enumerate(ordered):
        a = min(max(s.start, 0), n)
        b = min(max(s.end, 0), n)
        out.append(
            {
                "index": idx,
                "start": s.start,
                "end": s.end,
                "type": s.type.name.lower(),
                "text": document.text[a:b] if b > a else "",
                "in_range": 0 <= s.start <= s.end <= n,
            }
        )
    return out


def span_table(document: Document, title: str = "Spans") -> Table:
    table = Table("#", "Type", "Start", "End", "Text", title=title)
    for row in map_spans(document):
        text = escape(repr(row["text"]))
        if not row["in_range"]:
            text += " [yellow](clamped)[/yellow]"
        table.add_row(
            str(row["index"]),
            str(row["type"]),
            str(row["start"]),
            str(row["end"]),
            text,
        )
    return table
