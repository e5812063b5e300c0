"""
Tests for Document construction.
"""

import dataclasses

import pytest

from conceptcheck.models import Document


class TestDocument:

    def test_splits_all_line_endings(self):
        doc = Document.from_text("a\r\nb\rc\nd")
        assert doc.lines == ("a", "b", "c", "d")

    def test_trailing_newline_keeps_empty_last_line(self):
        assert Document.from_text("a\n").lines == ("a", "")

    def test_form_feed_is_not_a_line_break(self):
        assert Document.from_text("a\x0cb").lines == ("a\x0cb",)

    def test_default_source(self):
        assert Document.from_text("").source == "<memory>"

    def test_is_immutable(self):
        doc = Document.from_text("a")
        with pytest.raises(dataclasses.FrozenInstanceError):
            doc.lines = ("b",)

    def test_text_roundtrip_of_lf_input(self):
        assert Document.from_text("a\nb").text == "a\nb"
