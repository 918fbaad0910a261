"""Tests for the persisted document form."""

import json
import unittest

from notespan.editor.controller import RichTextController
from notespan.editor.domain import Document, FormattingSpan, StyleType
from notespan.editor.serialization import deserialize, parse_document, serialize
from notespan.exceptions import DocumentFormatError


class SerializeTest(unittest.TestCase):
    def test_canonical_shape(self):
        doc = Document("Hello", [FormattingSpan(0, 5, StyleType.HEADER2)])
        payload = json.loads(serialize(doc))
        self.assertEqual(
            payload, {"text": "Hello", "spans": [{"start": 0, "end": 5, "type": 4}]}
        )

    def test_round_trip(self):
        doc = Document(
            "Hello World\nSecond line",
            [
                FormattingSpan(6, 11, StyleType.ITALIC),
                FormattingSpan(0, 5, StyleType.BOLD),
                FormattingSpan(0, 11, StyleType.HEADER1),
                FormattingSpan(12, 18, StyleType.UNDERLINE),
            ],
        )
        loaded = deserialize(serialize(doc))
        self.assertEqual(loaded.text, doc.text)
        self.assertEqual(loaded.span_keys(), doc.span_keys())

    def test_round_trip_unicode_and_empty(self):
        for doc in (Document(), Document('quote " and éè ☃', [])):
            loaded = deserialize(serialize(doc))
            self.assertEqual(loaded.text, doc.text)
            self.assertEqual(loaded.spans, [])


class DeserializeTest(unittest.TestCase):
    def test_legacy_plain_text(self):
        doc = deserialize("plain text note")
        self.assertEqual(doc.text, "plain text note")
        self.assertEqual(doc.spans, [])

    def test_none_is_empty_document(self):
        doc = deserialize(None)
        self.assertEqual((doc.text, doc.spans), ("", []))

    def test_broken_json_falls_back_to_plain_text(self):
        data = '{"text": "oops", "spans": ['
        doc = deserialize(data)
        self.assertEqual(doc.text, data)
        self.assertEqual(doc.spans, [])

    def test_unknown_style_ordinal_falls_back(self):
        data = '{"text": "abc", "spans": [{"start": 0, "end": 1, "type": 9}]}'
        doc = deserialize(data)
        self.assertEqual(doc.text, data)
        self.assertEqual(doc.spans, [])

    def test_wrong_field_types_fall_back(self):
        for data in (
            '{"text": 5}',
            '{"text": "abc", "spans": [{"start": "0", "end": 1, "type": 0}]}',
            '{"text": "abc", "spans": {"start": 0}}',
        ):
            self.assertEqual(deserialize(data).text, data)

    def test_leading_whitespace_still_structured(self):
        doc = deserialize('  \n{"text": "hi", "spans": []}')
        self.assertEqual(doc.text, "hi")

    def test_missing_fields_default(self):
        self.assertEqual(deserialize("{}").text, "")
        doc = deserialize('{"text": "abc"}')
        self.assertEqual((doc.text, doc.spans), ("abc", []))

    def test_out_of_range_offsets_are_clamped(self):
        data = json.dumps(
            {
                "text": "Hello",
                "spans": [
                    {"start": -3, "end": 2, "type": 0},
                    {"start": 3, "end": 99, "type": 1},
                    {"start": 4, "end": 1, "type": 2},
                ],
            }
        )
        doc = deserialize(data)
        self.assertEqual(
            doc.span_keys(), [(0, 2, 0), (3, 5, 1)]
        )

    def test_span_emptied_by_clamping_is_dropped(self):
        data = '{"text": "Hello", "spans": [{"start": 40, "end": 90, "type": 2}]}'
        self.assertEqual(deserialize(data).spans, [])
        c = RichTextController()
        c.load(data)
        c.set_value("Hello!")
        self.assertEqual(c.spans, ())

    def test_empty_span_in_range_is_kept(self):
        doc = Document("Hello", [FormattingSpan(5, 5, StyleType.BOLD)])
        self.assertEqual(deserialize(serialize(doc)).span_keys(), [(5, 5, 0)])

    def test_null_fields_take_defaults(self):
        doc = deserialize('{"text": "abc", "spans": null}')
        self.assertEqual((doc.text, doc.spans), ("abc", []))
        doc = deserialize('{"text": null, "spans": []}')
        self.assertEqual((doc.text, doc.spans), ("", []))

    def test_overlapping_spans_merge_on_load(self):
        data = json.dumps(
            {
                "text": "Hello World",
                "spans": [
                    {"start": 0, "end": 5, "type": 0},
                    {"start": 3, "end": 8, "type": 0},
                    {"start": 8, "end": 11, "type": 0},
                    {"start": 2, "end": 4, "type": 1},
                ],
            }
        )
        self.assertEqual(deserialize(data).span_keys(), [(0, 11, 0), (2, 4, 1)])

    def test_parse_document_is_strict(self):
        with self.assertRaises(DocumentFormatError):
            parse_document('{"text": "abc", "spans": [{"type": 0}]}')


if __name__ == "__main__":
    unittest.main()
