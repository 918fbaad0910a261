"""notespan: span-based rich-text formatting for note editors."""

from notespan.editor import (
    Document,
    FormattingSpan,
    RichTextController,
    StyleType,
    deserialize,
    serialize,
)

__all__ = [
    "RichTextController",
    "Document",
    "FormattingSpan",
    "StyleType",
    "serialize",
    "deserialize",
]
