"""Tests for sentence segmentation."""
from __future__ import annotations

from studycards.segmenter import segment, sentence_body, split_chunks


class TestSegment:
    def test_empty(self):
        assert segment("") == []

    def test_whitespace_only(self):
        assert segment("   \n\t  ") == []

    def test_all_short(self):
        assert segment("Short. Also short! Tiny?") == []

    def test_keeps_terminator(self):
        result = segment("This sentence is long enough to count. Tiny.")
        assert result == ["This sentence is long enough to count."]

    def test_repeated_terminators(self):
        text = "Is this really what you meant?!? Yes it is indeed true."
        assert segment(text) == ["Is this really what you meant?!?", "Yes it is indeed true."]

    def test_exact_minimum_length_kept(self):
        # body is exactly 20 characters
        assert segment("abcdefghij abcdefghi.") == ["abcdefghij abcdefghi."]

    def test_nineteen_characters_dropped(self):
        assert segment("abcdefghij abcdefgh.") == []

    def test_trailing_text_without_terminator(self):
        result = segment("First sentence is quite long. and this tail has no full stop")
        assert result[-1] == "and this tail has no full stop"

    def test_custom_min_length(self):
        assert segment("One two three four.", min_length=5) == ["One two three four."]

    def test_restartable(self):
        text = "The first sentence is long enough. The second one is long enough too."
        assert segment(text) == segment(text)


class TestHelpers:
    def test_sentence_body(self):
        assert sentence_body("Hello there world?!") == "Hello there world"

    def test_sentence_body_no_terminator(self):
        assert sentence_body("no punctuation") == "no punctuation"

    def test_split_chunks(self, unpunctuated_text):
        chunks = split_chunks(unpunctuated_text, 30)
        assert chunks == [
            "mitochondria produce cellular energy for the cell",
            "ribosomes assemble proteins from amino acids",
        ]
