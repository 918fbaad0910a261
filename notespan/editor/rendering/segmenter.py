"""
Flatten overlapping spans into ordered, non-overlapping display segments.

Segments are rebuilt from scratch on every call; note bodies are small.
"""

from __future__ import annotations

from dataclasses import dataclass
from typing import Iterable, List, Optional, Set

from ..domain import FormattingSpan, StyleType
from .options import RenderConfig


@dataclass(frozen=True)
class ResolvedStyle:
    heading: Optional[StyleType] = None
    font_size: Optional[float] = None
    bold: bool = False
    italic: bool = False
    underline: bool = False

    @property
    def is_plain(self) -> bool:
        return not (self.heading or self.bold or self.italic or self.underline)

    @staticmethod
    def from_types(
        types: Set[StyleType], config: Optional[RenderConfig] = None
    ) -> "ResolvedStyle":
        cfg = config or RenderConfig()
        heading = None
        size = None
        if StyleType.HEADER1 in types:
            heading = StyleType.HEADER1
            size = cfg.header1_font_size
        elif StyleType.HEADER2 in types:
            heading = StyleType.HEADER2
            size = cfg.header2_font_size
        return ResolvedStyle(
            heading=heading,
            font_size=size,
            bold=heading is not None or StyleType.BOLD in types,
            italic=StyleType.ITALIC in types,
            underline=StyleType.UNDERLINE in types,
        )


@dataclass(frozen=True)
class Segment:
    text: str
    style: ResolvedStyle
    start: int
    end: int


def boundary_points(text_length: int, spans: Iterable[FormattingSpan]) -> List[int]:
    points = {0, text_length}
    for s in spans:
        points.add(min(max(s.start, 0), text_length))
        points.add(min(max(s.end, 0), text_length))
    return sorted(points)


def build_segments(
    text: str,
    spans: Iterable[FormattingSpan],
    config: Optional[RenderConfig] = None,
) -> List[Segment]:
    if not text:
        return []
    spans = list(spans)
    points = boundary_points(len(text), spans)

    out: List[Segment] = []
    for a, b in zip(points, points[1:]):
        if a >= b:
            continue
        types = {s.type for s in spans if s.start <= a and s.end >= b}
        out.append(
            Segment(
                text=text[a:b],
                style=ResolvedStyle.from_types(types, config),
                start=a,
                end=b,
            )
        )
    return out
