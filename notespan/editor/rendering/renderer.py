"""
Pure renderers for display segments.

Turns the segment list into an HTML fragment, a full HTML page, a
``rich.text.Text`` for terminals, or ANSI-styled text for files. No I/O.
"""

from __future__ import annotations

import html
import io
from typing import List, Optional

from rich.console import Console
from rich.text import Text

from ..domain import Document, StyleType
from .options import RenderConfig
from .segmenter import ResolvedStyle, Segment, build_segments

_HEADING_TAGS = {StyleType.HEADER1: "h1", StyleType.HEADER2: "h2"}


def _preserve_leading_ws(text: str, tab_width: int = 4) -> str:
    # Leading spaces/tabs on each line become &nbsp; so indentation survives
    # whitespace collapsing; line breaks become <br>.
    out: List[str] = []
    for n, line in enumerate(text.split("\n")):
        if n:
            out.append("<br>")
        k = 0
        prefix: List[str] = []
        for ch in line:
            if ch == " ":
                prefix.append("&nbsp;")
            elif ch == "\t":
                prefix.append("&nbsp;" * tab_width)
            else:
                break
            k += 1
        out.append("".join(prefix) + html.escape(line[k:]))
    return "".join(out)


def _escape_lines(text: str) -> str:
    return "<br>".join(html.escape(line) for line in text.split("\n"))


def style_css(style: ResolvedStyle, config: Optional[RenderConfig] = None) -> List[str]:
    styles: List[str] = []
    if style.font_size:
        styles.append(f"font-size:{float(style.font_size):.0f}pt")
    if style.bold:
        styles.append("font-weight:bold")
    if style.italic:
        styles.append("font-style:italic")
    if style.underline:
        styles.append("text-decoration:underline")
    if config and config.base_color:
        styles.append(f"color:{config.base_color}")
    return styles


def wrap_inline(
    style: ResolvedStyle, html_text: str, config: Optional[RenderConfig] = None
) -> str:
    styles = style_css(style, config)
    if not styles:
        return html_text
    attrs = [f"style='{'; '.join(styles)}'"]
    if style.heading is not None:
        attrs.insert(0, f'class="{_HEADING_TAGS[style.heading]}"')
    return f"<span {' '.join(attrs)}>{html_text}</span>"


def render_segments_html(
    segments: List[Segment], config: Optional[RenderConfig] = None
) -> str:
    cfg = config or RenderConfig()
    fragments: List[str] = []
    for seg in segments:
        if cfg.preserve_leading_whitespace:
            safe = _preserve_leading_ws(seg.text, cfg.tab_width)
        else:
            safe = _escape_lines(seg.text)
        if cfg.debug:
            fragments.append(f"<!-- [{seg.start}, {seg.end}) -->")
        fragments.append(wrap_inline(seg.style, safe, cfg))
    return "".join(fragments)


def render_document_page(title: str, html_fragment: str, extra_css: str = "") -> str:
    return (
        '<!doctype html><meta charset="utf-8">'
        '<meta name="color-scheme" content="light dark">'
        f"<title>{html.escape(title)}</title>"
        "<style>"
        "body{font-family:-apple-system,BlinkMacSystemFont,Segoe UI,Roboto,Helvetica,Arial,sans-serif;line-height:1.4;background:#fff;color:#000}"
        ".note-content{white-space:normal}"
        "@media (prefers-color-scheme: dark){"
        "body{background:#111;color:#eee}"
        "}"
        f'{extra_css}</style><div class="note-content">{html_fragment}</div>'
    )


def rich_style(style: ResolvedStyle) -> str:
    parts: List[str] = []
    if style.bold:
        parts.append("bold")
    if style.italic:
        parts.append("italic")
    if style.underline:
        parts.append("underline")
    if style.heading == StyleType.HEADER1:
        parts.append("bright_white")
    elif style.heading == StyleType.HEADER2:
        parts.append("white")
    return " ".join(parts)


def to_rich_text(segments: List[Segment]) -> Text:
    out = Text()
    for seg in segments:
        out.append(seg.text, style=rich_style(seg.style) or None)
    return out


class DocumentRenderer:
    """Class-based interface for document rendering."""

    def __init__(self, config: Optional[RenderConfig] = None):
        self.config = config or RenderConfig()

    def segments(self, document: Document) -> List[Segment]:
        return build_segments(document.text, document.spans, self.config)

    def render(self, document: Document) -> str:
        """Render the document body to an HTML fragment string."""
        return render_segments_html(self.segments(document), self.config)

    def render_full_page(self, title: str, html_fragment: str) -> str:
        """Wrap an HTML fragment in a full page with CSS."""
        return render_document_page(title, html_fragment)

    def render_console(self, document: Document) -> Text:
        return to_rich_text(self.segments(document))

    def render_ansi(self, document: Document) -> str:
        """Console rendering as a string with ANSI style codes, unwrapped."""
        console = Console(
            record=True, file=io.StringIO(), force_terminal=True, color_system="truecolor"
        )
        console.print(self.render_console(document), soft_wrap=True)
        return console.export_text(styles=True)
