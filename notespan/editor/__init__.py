"""Public API for the formatting engine."""

from .controller import RichTextController
from .diffing import compute_edit_region
from .domain import Document, EditRegion, FormattingSpan, Selection, StyleType
from .merging import merge_spans
from .options import EditorConfig
from .rendering.options import RenderConfig
from .rendering.segmenter import ResolvedStyle, Segment, build_segments
from .serialization import deserialize, serialize
from .shifting import apply_text_change, shift_spans
from .store import SpanStore
from .toggling import clear_formatting, current_styles, toggle_style

__all__ = [
    "RichTextController",
    "SpanStore",
    "Document",
    "FormattingSpan",
    "StyleType",
    "Selection",
    "EditRegion",
    "Segment",
    "ResolvedStyle",
    "EditorConfig",
    "RenderConfig",
    "compute_edit_region",
    "shift_spans",
    "apply_text_change",
    "merge_spans",
    "toggle_style",
    "clear_formatting",
    "current_styles",
    "build_segments",
    "serialize",
    "deserialize",
]
