"""Unit tests for text normalization.

Tests normalize() and prepare() for:
- Case folding, trimming and whitespace collapsing
- Unicode punctuation/symbol stripping
- Total behavior on None, empty and non-ASCII input
- Idempotence
"""

import pytest

from signmatch.normalization import DEFAULT_VARIANT_RULES, normalize, prepare

SAMPLES = [
    "",
    "   ",
    "How are you?",
    "  How ARE you?!  ",
    "what   are\tyou\ndoing",
    "i don’t understand.",
    "¿Cómo estás?",
    "!!!...???",
    "price: $5 (approx.)",
    "thanks 👍👍 a lot",
    "a-b_c/d",
]


class TestNormalize:
    """Tests for normalize()."""

    def test_lowercases_and_strips_punctuation(self):
        """Test case and trailing punctuation are removed."""
        assert normalize("How are you?") == "how are you"

    def test_trims_after_punctuation_removal(self):
        """Test punctuation at the ends leaves no stray spaces."""
        assert normalize("  How ARE you?!  ") == "how are you"
        assert normalize("...hello") == "hello"

    def test_collapses_whitespace(self):
        """Test every whitespace run becomes a single space."""
        assert normalize("what   are\tyou\ndoing") == "what are you doing"

    def test_punctuation_run_becomes_single_space(self):
        """Test a run of punctuation between words collapses to one space."""
        assert normalize("hello...world") == "hello world"
        assert normalize("a-b_c/d") == "a b c d"

    def test_apostrophes_split_words(self):
        """Test straight and curly apostrophes are both stripped."""
        assert normalize("i don’t understand.") == "i don t understand"
        assert normalize("I don't understand") == "i don t understand"

    def test_symbols_are_stripped(self):
        """Test currency and emoji symbols are treated like punctuation."""
        assert normalize("price: $5") == "price 5"
        assert normalize("thanks 👍👍 a lot") == "thanks a lot"

    def test_non_ascii_letters_preserved(self):
        """Test accented letters survive normalization."""
        assert normalize("¿Cómo estás?") == "cómo estás"

    @pytest.mark.parametrize("value", [None, "", "   ", "!!!...???"])
    def test_empty_like_input_normalizes_to_empty(self, value):
        """Test None, blank and all-punctuation input give an empty string."""
        assert normalize(value) == ""

    @pytest.mark.parametrize("value", SAMPLES)
    def test_idempotent(self, value):
        """Test normalize(normalize(s)) == normalize(s)."""
        once = normalize(value)
        assert normalize(once) == once

    @pytest.mark.parametrize("value", SAMPLES)
    def test_no_edge_or_double_spaces(self, value):
        """Test output has no leading/trailing whitespace and no double spaces."""
        result = normalize(value)
        assert result == result.strip()
        assert "  " not in result


class TestPrepare:
    """Tests for prepare() (normalize then canonicalize)."""

    def test_applies_variant_rules_after_normalization(self):
        """Test punctuation is gone before rules run."""
        assert prepare("What are doing?", DEFAULT_VARIANT_RULES) == "what are you doing"

    def test_without_rules_equals_normalize(self):
        """Test prepare with no rules is plain normalization."""
        assert prepare("How are you?") == normalize("How are you?")

    def test_missing_apostrophe_variant(self):
        """Test 'dont' is rewritten to match the catalog's "don’t"."""
        assert prepare("I dont understand", DEFAULT_VARIANT_RULES) == prepare(
            "i don’t understand.", DEFAULT_VARIANT_RULES
        )
