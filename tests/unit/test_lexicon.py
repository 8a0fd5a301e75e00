"""
Unit tests for the lexicon tables, schemas and singleton manager.
"""

import pytest
from pydantic import ValidationError

from text_metrics.features.dictionaries import (
    INTENSIFIERS,
    NEGATIVE_WORDS,
    POSITIVE_WORDS,
    STOP_WORDS,
    LexiconEntry,
    LexiconManager,
    SentimentLexicon,
)


class TestConstants:
    """Compiled-in tables are immutable and consistent."""

    def test_tables_are_read_only(self):
        with pytest.raises(TypeError):
            POSITIVE_WORDS["meh"] = 0.5

    def test_weight_signs(self):
        assert all(w > 0 for w in POSITIVE_WORDS.values())
        assert all(w < 0 for w in NEGATIVE_WORDS.values())
        assert all(w > 0 for w in INTENSIFIERS.values())

    def test_tables_are_disjoint(self):
        assert not set(POSITIVE_WORDS) & set(NEGATIVE_WORDS)
        assert not set(INTENSIFIERS) & (set(POSITIVE_WORDS) | set(NEGATIVE_WORDS))

    def test_known_weights(self):
        assert POSITIVE_WORDS["amazing"] == 3.0
        assert NEGATIVE_WORDS["terrible"] == -3.0
        assert INTENSIFIERS["absolutely"] == 1.8

    def test_stop_words(self):
        assert isinstance(STOP_WORDS, frozenset)
        assert "their" in STOP_WORDS
        assert "model" not in STOP_WORDS


class TestLexiconEntry:
    """LexiconEntry validation."""

    def test_word_normalized(self):
        entry = LexiconEntry(word="  Amazing ", weight=3.0, kind="positive")
        assert entry.word == "amazing"

    def test_empty_word_rejected(self):
        with pytest.raises(ValidationError):
            LexiconEntry(word="   ", weight=1.0, kind="positive")

    @pytest.mark.parametrize("weight,kind", [
        (1.0, "negative"),
        (-1.0, "positive"),
        (0.0, "intensifier"),
    ])
    def test_weight_sign_must_match_kind(self, weight, kind):
        with pytest.raises(ValidationError):
            LexiconEntry(word="word", weight=weight, kind=kind)

    def test_unknown_kind_rejected(self):
        with pytest.raises(ValidationError):
            LexiconEntry(word="word", weight=1.0, kind="neutral")

    def test_frozen(self):
        entry = LexiconEntry(word="good", weight=1.5, kind="positive")
        with pytest.raises(ValidationError):
            entry.weight = 2.0


class TestSentimentLexicon:
    """Assembled lexicon lookups and validation."""

    def test_overlap_rejected(self):
        with pytest.raises(ValidationError, match="both positive and negative"):
            SentimentLexicon(positive={"fine": 1.0}, negative={"fine": -1.0}, intensifiers={})

    def test_bad_weight_rejected(self):
        with pytest.raises(ValidationError):
            SentimentLexicon(positive={"fine": -1.0}, negative={}, intensifiers={})

    def test_lookups(self):
        lexicon = SentimentLexicon(
            positive={"good": 1.5}, negative={"bad": -2.0}, intensifiers={"very": 1.5}
        )
        assert lexicon.sentiment_weight("good") == 1.5
        assert lexicon.sentiment_weight("bad") == -2.0
        assert lexicon.sentiment_weight("very") is None
        assert lexicon.intensifier_weight("very") == 1.5
        assert lexicon.get_entry("table") is None
        assert len(lexicon) == 3

    def test_get_kind_words_returns_copy(self):
        lexicon = SentimentLexicon(positive={"good": 1.5}, negative={}, intensifiers={})
        words = lexicon.get_kind_words("positive")
        words["extra"] = 1.0

        assert "extra" not in lexicon.positive

    def test_get_kind_words_invalid(self):
        lexicon = SentimentLexicon(positive={}, negative={}, intensifiers={})
        with pytest.raises(ValueError, match="Invalid kind"):
            lexicon.get_kind_words("neutral")


class TestLexiconManager:
    """Singleton manager behavior."""

    def test_singleton(self, fresh_lexicon_manager):
        assert LexiconManager.get_instance() is fresh_lexicon_manager

    def test_reset_instance(self, fresh_lexicon_manager):
        LexiconManager.reset_instance()
        assert LexiconManager.get_instance() is not fresh_lexicon_manager

    def test_lazy_load(self, fresh_lexicon_manager):
        assert repr(fresh_lexicon_manager) == "<LexiconManager (not loaded)>"

        fresh_lexicon_manager.load_lexicon()
        assert "words" in repr(fresh_lexicon_manager)

    def test_load_is_cached(self, fresh_lexicon_manager):
        first = fresh_lexicon_manager.load_lexicon()
        assert fresh_lexicon_manager.load_lexicon() is first
        assert fresh_lexicon_manager.load_lexicon(force_reload=True) is not first

    def test_word_checks(self, fresh_lexicon_manager):
        manager = fresh_lexicon_manager
        assert manager.is_positive("amazing")
        assert manager.is_negative("terrible")
        assert manager.is_intensifier("very")
        assert manager.is_stop_word("the")
        assert "amazing" in manager
        assert "table" not in manager
        assert manager.get_entry("absolutely").kind == "intensifier"

    def test_total_size(self, fresh_lexicon_manager):
        expected = len(POSITIVE_WORDS) + len(NEGATIVE_WORDS) + len(INTENSIFIERS)
        assert len(fresh_lexicon_manager) == expected

    def test_custom_tables(self):
        manager = LexiconManager(positive={"sunny": 1.0}, negative={}, intensifiers={})

        assert manager.sentiment_weight("sunny") == 1.0
        assert manager.sentiment_weight("amazing") is None
