"""
Immutable constants for readability and text complexity analysis.

These values should NEVER change at runtime - they define WHAT the complexity score IS.

Constants include:
- Module metadata (version)
- Flesch Reading Ease coefficients
- Sentence terminators and vowels used by the heuristics
- Low / Medium / High bounds for the complexity score

For runtime configuration (HOW to report readability), see configs/features/readability.yaml
"""

from typing import Final

# ===========================
# Module Metadata
# ===========================

READABILITY_MODULE_VERSION: Final[str] = "1.0.0"
"""Version of the readability analysis module."""


# ===========================
# Flesch Reading Ease
# ===========================
# flesch = BASE - SENTENCE_WEIGHT * words/sentence - SYLLABLE_WEIGHT * syllables/word

FLESCH_BASE: Final[float] = 206.835
FLESCH_SENTENCE_WEIGHT: Final[float] = 1.015
FLESCH_SYLLABLE_WEIGHT: Final[float] = 84.6

FLESCH_SCALE: Final[float] = 100.0
"""complexity = (FLESCH_SCALE - flesch) / FLESCH_SCALE, clamped to [0, 1]."""

# ===========================
# Heuristic Character Sets
# ===========================

SENTENCE_TERMINATORS: Final[frozenset[str]] = frozenset(".!?")
"""Every occurrence counts as one sentence end."""

VOWELS: Final[frozenset[str]] = frozenset("aeiou")
"""Vowels for syllable estimation ('y' is not a vowel here)."""

MIN_SYLLABLES_PER_WORD: Final[int] = 1
MIN_SENTENCE_COUNT: Final[int] = 1

# ===========================
# Interpretation
# ===========================

COMPLEXITY_THRESHOLDS: Final[dict[str, float]] = {
    "low": 0.4,
    "medium": 0.7,
}
"""Exclusive upper bounds: above 'low' is Medium, above 'medium' is High."""
