"""
Editing session for one note body.

The host editor reports every text change and selection change; explicit user
actions (toggle, clear) act on the current selection. Listeners are called
synchronously after each mutating call has finished its work, so a re-render
triggered from a listener always sees the new state.

Public API:
  - RichTextController.on_text_changed(old_text, new_text, selection=None)
  - RichTextController.set_value(new_text, selection=None)
  - RichTextController.set_selection(start, end)
  - RichTextController.toggle_style(type) / clear_formatting()
  - RichTextController.current_styles() -> Set[StyleType]
  - RichTextController.build_segments() -> List[Segment]
  - RichTextController.serialize() -> str / load(data)
  - RichTextController.add_listener(cb) / remove_listener(cb)
"""

from __future__ import annotations

import logging
from typing import Callable, Iterable, List, Optional, Set, Tuple

from .domain import Document, EditRegion, FormattingSpan, Selection, StyleType
from .options import EditorConfig
from .rendering.options import RenderConfig
from .rendering.segmenter import Segment, build_segments
from .serialization import deserialize, serialize
from .store import SpanStore

LOGGER = logging.getLogger(__name__)

Listener = Callable[["RichTextController"], None]


class RichTextController:
    def __init__(
        self,
        text: str = "",
        spans: Optional[Iterable[FormattingSpan]] = None,
        config: Optional[EditorConfig] = None,
        render_config: Optional[RenderConfig] = None,
    ):
        self.config = config or EditorConfig()
        self.render_config = render_config or RenderConfig()
        self._text = text
        self._store = SpanStore(spans)
        self._store.clamp(len(text))
        self._store.merge()
        self._selection = Selection(len(text), len(text))
        self._listeners: List[Listener] = []

    # ------------------------------ State -----------------------------------

    @property
    def text(self) -> str:
        return self._text

    @property
    def spans(self) -> Tuple[FormattingSpan, ...]:
        return self._store.snapshot()

    @property
    def selection(self) -> Selection:
        return self._selection

    def document(self) -> Document:
        return Document(text=self._text, spans=list(self._store.snapshot()))

    # ---------------------------- Listeners ---------------------------------

    def add_listener(self, listener: Listener) -> None:
        self._listeners.append(listener)

    def remove_listener(self, listener: Listener) -> None:
        try:
            self._listeners.remove(listener)
        except ValueError:
            pass

    def _notify(self) -> None:
        for listener in list(self._listeners):
            listener(self)

    # ------------------------- Host editor input ----------------------------

    def on_text_changed(
        self,
        old_text: str,
        new_text: str,
        selection: Optional[Selection] = None,
    ) -> EditRegion:
        if old_text != self._text:
            LOGGER.debug(
                "editor.controller old_text differs from buffer (len %d vs %d)",
                len(old_text),
                len(self._text),
            )
        region = self._store.apply_text_change(old_text, new_text)
        self._text = new_text
        if selection is not None:
            self._selection = selection.normalized()
        else:
            # Cursor after the inserted text
            cursor = region.prefix_len + region.new_len
            self._selection = Selection(cursor, cursor)
        self._store.clamp(len(new_text))
        self._notify()
        return region

    def set_value(
        self, new_text: str, selection: Optional[Selection] = None
    ) -> EditRegion:
        return self.on_text_changed(self._text, new_text, selection)

    def set_selection(self, start: int, end: int) -> None:
        self._selection = Selection(start, end).normalized()
        self._notify()

    # ---------------------------- User actions ------------------------------

    def toggle_style(self, type: StyleType) -> bool:
        changed = self._store.toggle(
            self._selection,
            type,
            len(self._text),
            allow_collapsed=self.config.collapsed_toggle_anchors,
        )
        if changed:
            self._notify()
        return changed

    def clear_formatting(self) -> bool:
        changed = self._store.clear_range(self._selection, len(self._text))
        if changed:
            self._notify()
        return changed

    # ------------------------------ Output ----------------------------------

    def current_styles(self) -> Set[StyleType]:
        return self._store.active_styles(self._selection, len(self._text))

    def build_segments(self) -> List[Segment]:
        return build_segments(self._text, self._store.snapshot(), self.render_config)

    # ---------------------------- Persistence -------------------------------

    def serialize(self) -> str:
        return serialize(self.document())

    def load(self, data: Optional[str]) -> None:
        doc = deserialize(data)
        self._text = doc.text
        self._store.replace_all(doc.spans)
        self._selection = Selection(len(doc.text), len(doc.text))
        self._notify()
