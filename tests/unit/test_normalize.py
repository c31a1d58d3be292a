"""Unit tests for signword_catalog.normalize."""

from __future__ import annotations

import pytest

from signword_catalog.normalize import (
    VideoKind,
    blank_to_empty,
    collation_key,
    normalize_video_kind,
    split_tags,
    trim,
)


# ---------------------------------------------------------------------------
# trim / blank_to_empty
# ---------------------------------------------------------------------------

class TestTrim:
    def test_strips(self):
        assert trim("  noun  ") == "noun"

    def test_blank_is_none(self):
        assert trim("   ") is None
        assert trim("") is None
        assert trim(None) is None


class TestBlankToEmpty:
    def test_strips(self):
        assert blank_to_empty(" 김수어 ") == "김수어"

    def test_blank_is_empty_string(self):
        assert blank_to_empty("") == ""
        assert blank_to_empty("  ") == ""
        assert blank_to_empty(None) == ""


# ---------------------------------------------------------------------------
# split_tags
# ---------------------------------------------------------------------------

class TestSplitTags:
    def test_mixed_separators_and_blanks(self):
        assert split_tags("a, b;c ,,d") == ["a", "b", "c", "d"]

    def test_preserves_order_and_duplicates(self):
        assert split_tags("과일;음식,과일") == ["과일", "음식", "과일"]

    def test_blank_and_none(self):
        assert split_tags(None) == []
        assert split_tags("") == []
        assert split_tags(" ; , ") == []

    def test_single_tag(self):
        assert split_tags("  동물 ") == ["동물"]


# ---------------------------------------------------------------------------
# normalize_video_kind
# ---------------------------------------------------------------------------

class TestNormalizeVideoKind:
    @pytest.mark.parametrize("value", ["sentence", "Sentence", "SENTENCE"])
    def test_sentence_any_case(self, value):
        assert normalize_video_kind(value) is VideoKind.SENTENCE

    @pytest.mark.parametrize("value", ["word", "WORD", "", None, "sentences", " sentence ", "clip"])
    def test_everything_else_is_word(self, value):
        assert normalize_video_kind(value) is VideoKind.WORD

    def test_kind_values(self):
        assert VideoKind.WORD.value == "word"
        assert VideoKind.SENTENCE.value == "sentence"


# ---------------------------------------------------------------------------
# collation_key
# ---------------------------------------------------------------------------

class TestCollationKey:
    def test_hangul_dictionary_order(self):
        words = ["나무", "가방", "하늘"]
        assert sorted(words, key=collation_key) == ["가방", "나무", "하늘"]

    def test_case_insensitive(self):
        assert sorted(["banana", "Apple", "cherry"], key=collation_key) == ["Apple", "banana", "cherry"]

    def test_accents_sort_with_base_letter(self):
        assert sorted(["ecole", "éclair", "dog"], key=collation_key) == ["dog", "éclair", "ecole"]

    def test_ties_are_total(self):
        assert collation_key("Apple") != collation_key("apple")
