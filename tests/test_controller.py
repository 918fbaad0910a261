"""Tests for the editing session."""

import unittest
from unittest.mock import MagicMock

from notespan.editor.controller import RichTextController
from notespan.editor.domain import FormattingSpan, Selection, StyleType
from notespan.editor.options import EditorConfig

B = StyleType.BOLD
I = StyleType.ITALIC


def keys(controller):
    return sorted((s.start, s.end, s.type) for s in controller.spans)


class RichTextControllerTest(unittest.TestCase):
    def setUp(self):
        self.controller = RichTextController("Hello World")
        self.listener = MagicMock()
        self.controller.add_listener(self.listener)

    def test_toggle_then_type_at_end(self):
        c = self.controller
        c.set_selection(6, 11)
        self.assertTrue(c.toggle_style(B))
        c.on_text_changed("Hello World", "Hello World!")
        self.assertEqual(keys(c), [(6, 12, B)])
        self.assertEqual(c.text, "Hello World!")
        self.assertEqual(c.selection, Selection(12, 12))

    def test_toggle_off_enclosed(self):
        c = RichTextController("Hello World", [FormattingSpan(0, 11, B)])
        c.set_selection(2, 5)
        c.toggle_style(B)
        self.assertEqual(keys(c), [(0, 2, B), (5, 11, B)])

    def test_listeners_fire_once_per_mutation(self):
        c = self.controller
        c.set_selection(0, 5)
        c.toggle_style(I)
        c.set_value("Hello there World")
        c.clear_formatting()
        self.assertEqual(self.listener.call_count, 3)
        self.listener.assert_called_with(c)

    def test_clear_formatting_on_selection(self):
        c = self.controller
        c.set_selection(0, 11)
        c.toggle_style(B)
        c.set_selection(3, 8)
        self.assertTrue(c.clear_formatting())
        self.assertEqual(keys(c), [(0, 3, B), (8, 11, B)])

    def test_noop_actions_do_not_notify(self):
        c = self.controller
        c.set_selection(4, 4)
        self.listener.reset_mock()
        self.assertFalse(c.toggle_style(B))
        self.assertFalse(c.clear_formatting())
        self.listener.assert_not_called()

    def test_current_styles_follow_selection(self):
        c = self.controller
        c.set_selection(0, 5)
        c.toggle_style(B)
        c.set_selection(5, 5)
        self.assertEqual(c.current_styles(), {B})
        c.set_selection(5, 9)
        self.assertEqual(c.current_styles(), set())

    def test_reversed_selection(self):
        c = self.controller
        c.set_selection(5, 0)
        self.assertEqual(c.selection, Selection(0, 5))
        c.toggle_style(B)
        self.assertEqual(keys(c), [(0, 5, B)])

    def test_spans_are_snapshots(self):
        c = RichTextController("Hello", [FormattingSpan(0, 5, B)])
        c.spans[0].end = 1
        c.document().spans[0].start = 3
        self.assertEqual(keys(c), [(0, 5, B)])

    def test_build_segments(self):
        c = RichTextController("Hello World", [FormattingSpan(0, 5, B)])
        segs = c.build_segments()
        self.assertEqual([s.text for s in segs], ["Hello", " World"])
        self.assertTrue(segs[0].style.bold)

    def test_serialize_and_load(self):
        c = RichTextController("Hello World", [FormattingSpan(6, 11, I)])
        blob = c.serialize()
        other = RichTextController()
        listener = MagicMock()
        other.add_listener(listener)
        other.load(blob)
        self.assertEqual(other.text, "Hello World")
        self.assertEqual(keys(other), [(6, 11, I)])
        listener.assert_called_once_with(other)

    def test_load_legacy_plain_text(self):
        c = RichTextController("x", [FormattingSpan(0, 1, B)])
        c.load("plain text note")
        self.assertEqual(c.text, "plain text note")
        self.assertEqual(c.spans, ())

    def test_remove_listener(self):
        self.controller.remove_listener(self.listener)
        self.controller.remove_listener(self.listener)
        self.controller.set_selection(1, 2)
        self.listener.assert_not_called()

    def test_constructor_clamps_spans(self):
        c = RichTextController("abc", [FormattingSpan(1, 10, B)])
        self.assertEqual(keys(c), [(1, 3, B)])


class CollapsedToggleAnchorTest(unittest.TestCase):
    def test_disabled_by_default(self):
        c = RichTextController("Hello ")
        c.set_selection(6, 6)
        self.assertFalse(c.toggle_style(B))
        c.set_value("Hello World")
        self.assertEqual(c.spans, ())

    def test_anchor_styles_next_typed_text(self):
        c = RichTextController("Hello ", config=EditorConfig(collapsed_toggle_anchors=True))
        c.set_selection(6, 6)
        self.assertTrue(c.toggle_style(B))
        self.assertEqual(keys(c), [(6, 6, B)])
        c.set_value("Hello W")
        c.set_value("Hello Wo")
        self.assertEqual(keys(c), [(6, 8, B)])

    def test_from_env(self):
        with unittest.mock.patch.dict("os.environ", {"NOTESPAN_COLLAPSED_TOGGLE": "1"}):
            self.assertTrue(EditorConfig.from_env().collapsed_toggle_anchors)
        with unittest.mock.patch.dict("os.environ", {}, clear=True):
            self.assertFalse(EditorConfig.from_env().collapsed_toggle_anchors)


if __name__ == "__main__":
    unittest.main()
