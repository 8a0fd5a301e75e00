"""
Immutable constants for the sentiment lexicons and stop-word list.

This module contains the word tables that define the scoring vocabulary.
These values should NEVER change at runtime - they define WHAT the lexicons ARE.

Constants include:
- Lexicon metadata (version, kinds)
- Positive and negative word weights
- Intensifier multipliers
- Stop words excluded from keyword counting

For runtime configuration (HOW the lexicons are applied), see configs/features/sentiment.yaml
"""

from types import MappingProxyType
from typing import Final, Mapping

# ===========================
# Lexicon Metadata
# ===========================

LEXICON_VERSION: Final[str] = "1.0.0"
"""Version of the compiled-in lexicon tables."""

LEXICON_KINDS: Final[tuple[str, ...]] = (
    "positive",
    "negative",
    "intensifier",
)
"""
All lexicon kinds.
Positive and negative entries carry signed weights; intensifiers carry multipliers.
"""

# ===========================
# Sentiment Word Weights
# ===========================

POSITIVE_WORDS: Final[Mapping[str, float]] = MappingProxyType({
    "excellent": 3.0,
    "amazing": 3.0,
    "outstanding": 3.0,
    "fantastic": 3.0,
    "wonderful": 2.5,
    "great": 2.0,
    "good": 1.5,
    "nice": 1.5,
    "happy": 2.0,
    "joy": 2.5,
    "love": 2.5,
    "like": 1.0,
    "positive": 1.5,
    "perfect": 2.5,
    "brilliant": 2.5,
    "superb": 2.5,
    "marvelous": 2.5,
    "incredible": 2.5,
    "awesome": 2.0,
    "terrific": 2.0,
    "magnificent": 2.5,
    "delightful": 2.0,
})
"""Positive words and their weights (all > 0)."""

NEGATIVE_WORDS: Final[Mapping[str, float]] = MappingProxyType({
    "terrible": -3.0,
    "awful": -3.0,
    "horrible": -3.0,
    "disgusting": -3.0,
    "bad": -2.0,
    "poor": -1.5,
    "sad": -1.5,
    "angry": -2.0,
    "hate": -2.5,
    "dislike": -1.5,
    "disappointed": -2.0,
    "frustrated": -2.0,
    "annoying": -1.5,
    "boring": -1.0,
    "worst": -3.0,
    "useless": -2.5,
    "pathetic": -2.5,
    "ridiculous": -2.0,
    "stupid": -2.5,
    "trash": -2.5,
})
"""Negative words and their weights (all < 0)."""

INTENSIFIERS: Final[Mapping[str, float]] = MappingProxyType({
    "very": 1.5,
    "extremely": 2.0,
    "incredibly": 2.0,
    "absolutely": 1.8,
    "completely": 1.7,
    "totally": 1.6,
    "really": 1.3,
    "quite": 1.2,
})
"""Multipliers applied to the sentiment word that immediately follows."""

# ===========================
# Stop Words
# ===========================

STOP_WORDS: Final[frozenset[str]] = frozenset({
    "the", "and", "or", "but", "in", "on", "at", "to", "for", "of", "with", "by", "from",
    "up", "about", "into", "through", "during", "before", "after", "above", "below",
    "between", "among", "this", "that", "these", "those", "i", "me", "my", "myself",
    "we", "our", "ours", "ourselves", "you", "your", "yours", "yourself", "yourselves",
    "he", "him", "his", "himself", "she", "her", "hers", "herself", "it", "its", "itself",
    "they", "them", "their", "theirs", "themselves", "what", "which", "who", "whom",
    "whose", "am", "is", "are", "was", "were", "be",
    "been", "being", "have", "has", "had", "having", "do", "does", "did", "doing",
    "will", "would", "could", "should", "may", "might", "must", "can", "shall",
})
"""Common words excluded from keyword frequency counts."""
