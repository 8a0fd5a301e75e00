"""
Sentiment Lexicon Management

This package holds the compiled-in word tables used by the scorers.

Key components:
- constants: Immutable word tables (positive, negative, intensifiers, stop words)
- schemas: Pydantic models for lexicon entries and the assembled lexicon
- lexicon: Lexicon manager with singleton pattern

Usage:
    from text_metrics.features.dictionaries import LexiconManager

    manager = LexiconManager.get_instance()

    if manager.is_positive("amazing"):
        print("'amazing' is a positive word")

    entry = manager.get_entry("absolutely")
"""

from .constants import (
    LEXICON_VERSION,
    LEXICON_KINDS,
    POSITIVE_WORDS,
    NEGATIVE_WORDS,
    INTENSIFIERS,
    STOP_WORDS,
)

from .schemas import (
    LexiconEntry,
    SentimentLexicon,
)

from .lexicon import LexiconManager

__all__ = [
    # Constants
    "LEXICON_VERSION",
    "LEXICON_KINDS",
    "POSITIVE_WORDS",
    "NEGATIVE_WORDS",
    "INTENSIFIERS",
    "STOP_WORDS",
    # Schemas
    "LexiconEntry",
    "SentimentLexicon",
    # Manager
    "LexiconManager",
]
