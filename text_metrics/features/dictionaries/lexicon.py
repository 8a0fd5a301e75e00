"""
Sentiment Lexicon Manager

This module builds and serves the sentiment lexicons.
Uses singleton pattern so the lexicon is assembled and validated only once per process.

The manager handles:
1. Building the SentimentLexicon from the compiled-in constant tables
2. Validating weights and kinds on first load
3. Convenience methods for word lookup
"""

import time
from typing import Optional, Dict
import logging

from .constants import (
    INTENSIFIERS,
    LEXICON_VERSION,
    NEGATIVE_WORDS,
    POSITIVE_WORDS,
    STOP_WORDS,
)
from .schemas import LexiconEntry, SentimentLexicon

logger = logging.getLogger(__name__)


class LexiconManager:
    """
    Singleton manager for the sentiment lexicons.

    The lexicon is read-only after loading, so the same instance can be shared
    by every analyzer without locking.

    Usage:
        manager = LexiconManager.get_instance()
        weight = manager.sentiment_weight("amazing")
        multiplier = manager.intensifier_weight("very")
    """

    _instance: Optional['LexiconManager'] = None
    _lexicon: Optional[SentimentLexicon] = None

    def __init__(
        self,
        positive: Optional[Dict[str, float]] = None,
        negative: Optional[Dict[str, float]] = None,
        intensifiers: Optional[Dict[str, float]] = None,
    ):
        """
        Initialize lexicon manager.

        Args:
            positive: Positive word weights. Defaults to POSITIVE_WORDS.
            negative: Negative word weights. Defaults to NEGATIVE_WORDS.
            intensifiers: Intensifier multipliers. Defaults to INTENSIFIERS.
        """
        self._positive = positive if positive is not None else POSITIVE_WORDS
        self._negative = negative if negative is not None else NEGATIVE_WORDS
        self._intensifiers = intensifiers if intensifiers is not None else INTENSIFIERS
        self._lexicon = None

    @classmethod
    def get_instance(cls) -> 'LexiconManager':
        """
        Get singleton instance of the lexicon manager.

        Returns:
            Singleton instance built from the compiled-in tables
        """
        if cls._instance is None:
            cls._instance = cls()
        return cls._instance

    @classmethod
    def reset_instance(cls):
        """Reset singleton instance (useful for testing)."""
        cls._instance = None

    def load_lexicon(self, force_reload: bool = False) -> SentimentLexicon:
        """
        Build the lexicon from the word tables.

        Args:
            force_reload: If True, rebuild even if already loaded

        Returns:
            Loaded SentimentLexicon object

        Raises:
            ValueError: If any entry has a weight inconsistent with its kind
        """
        if self._lexicon is not None and not force_reload:
            logger.debug("Lexicon already loaded, returning cached version")
            return self._lexicon

        start_time = time.time()
        self._lexicon = SentimentLexicon(
            positive=dict(self._positive),
            negative=dict(self._negative),
            intensifiers=dict(self._intensifiers),
        )
        load_time = time.time() - start_time

        logger.info(
            f"Lexicon loaded in {load_time:.3f}s: "
            f"{len(self._lexicon.positive)} positive, "
            f"{len(self._lexicon.negative)} negative, "
            f"{len(self._lexicon.intensifiers)} intensifiers, "
            f"version {self._lexicon.version}"
        )
        return self._lexicon

    @property
    def lexicon(self) -> SentimentLexicon:
        """
        Get loaded lexicon, loading if necessary.

        Returns:
            SentimentLexicon object
        """
        if self._lexicon is None:
            self.load_lexicon()
        return self._lexicon

    @property
    def stop_words(self) -> frozenset[str]:
        """Stop words excluded from keyword counting."""
        return STOP_WORDS

    def get_entry(self, word: str) -> Optional[LexiconEntry]:
        """Get the lexicon entry for a word, or None if it is neutral."""
        return self.lexicon.get_entry(word)

    def intensifier_weight(self, word: str) -> Optional[float]:
        """Get the multiplier for an intensifier, or None."""
        return self.lexicon.intensifier_weight(word)

    def sentiment_weight(self, word: str) -> Optional[float]:
        """Get the signed weight of a sentiment word, or None."""
        return self.lexicon.sentiment_weight(word)

    # Convenience methods for common checks
    def is_positive(self, word: str) -> bool:
        """Check if word is positive."""
        return word in self.lexicon.positive

    def is_negative(self, word: str) -> bool:
        """Check if word is negative."""
        return word in self.lexicon.negative

    def is_intensifier(self, word: str) -> bool:
        """Check if word is an intensifier."""
        return word in self.lexicon.intensifiers

    def is_stop_word(self, word: str) -> bool:
        """Check if word is a stop word."""
        return word in STOP_WORDS

    def __len__(self) -> int:
        """Return number of words across all lexicons."""
        return len(self.lexicon)

    def __contains__(self, word: str) -> bool:
        """Check if word exists in any lexicon."""
        return self.lexicon.get_entry(word) is not None

    def __repr__(self) -> str:
        """String representation."""
        if self._lexicon is None:
            return "<LexiconManager (not loaded)>"
        return f"<LexiconManager ({len(self)} words, v{LEXICON_VERSION})>"
