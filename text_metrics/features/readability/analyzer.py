"""
Readability Analyzer

Estimates text complexity with a Flesch Reading Ease style formula built from
token, sentence and syllable counts.

Usage:
    from text_metrics.features.readability import ReadabilityAnalyzer

    analyzer = ReadabilityAnalyzer()
    features = analyzer.extract_features(text)
    print(f"Complexity: {features.complexity}")
"""

import logging
from typing import List, Optional, Sequence

from text_metrics.config import settings
from text_metrics.features.tokenizer import tokenize
from .schemas import (
    ReadabilityFeatures,
    ReadabilityAnalysisMetadata,
    ReadabilityAnalysisResult
)
from .constants import (
    FLESCH_BASE,
    FLESCH_SCALE,
    FLESCH_SENTENCE_WEIGHT,
    FLESCH_SYLLABLE_WEIGHT,
    MIN_SENTENCE_COUNT,
    MIN_SYLLABLES_PER_WORD,
    SENTENCE_TERMINATORS,
    VOWELS,
)

logger = logging.getLogger(__name__)


def count_syllables(word: str) -> int:
    """
    Estimate syllables as the number of vowel groups in a normalized word.

    A syllable starts at every non-vowel -> vowel transition. Words with no
    vowel group still count as one syllable.
    """
    syllables = 0
    prev_was_vowel = False
    for char in word:
        is_vowel = char in VOWELS
        if is_vowel and not prev_was_vowel:
            syllables += 1
        prev_was_vowel = is_vowel
    return max(MIN_SYLLABLES_PER_WORD, syllables)


def count_sentences(text: Optional[str]) -> int:
    """Count sentence terminators in raw text, floored at 1."""
    if not text:
        return MIN_SENTENCE_COUNT
    terminators = sum(1 for char in text if char in SENTENCE_TERMINATORS)
    return max(MIN_SENTENCE_COUNT, terminators)


class ReadabilityAnalyzer:
    """
    Readability and text complexity feature extractor.

    This class:
    1. Loads configuration from settings
    2. Tokenizes text with the shared tokenizer
    3. Counts sentences from raw punctuation and syllables from vowel groups
    4. Converts Flesch Reading Ease into a [0, 1] complexity score

    Input text should keep its punctuation: sentence counting reads '.', '!'
    and '?' straight from the raw string.

    Usage:
        analyzer = ReadabilityAnalyzer()
        complexity = analyzer.score(text)
    """

    def __init__(self, config: Optional[object] = None):
        """
        Initialize readability analyzer.

        Args:
            config: Optional ReadabilityConfig object. If None, loads from settings.
        """
        self.config = config or settings.readability
        logger.info("Initialized ReadabilityAnalyzer")

    def flesch_reading_ease(
        self,
        word_count: int,
        sentence_count: int,
        syllable_count: int
    ) -> float:
        """
        Flesch Reading Ease from raw counts.

        Both word_count and sentence_count must be >= 1.
        """
        avg_sentence_length = word_count / sentence_count
        avg_syllables_per_word = syllable_count / word_count
        return (
            FLESCH_BASE
            - FLESCH_SENTENCE_WEIGHT * avg_sentence_length
            - FLESCH_SYLLABLE_WEIGHT * avg_syllables_per_word
        )

    @staticmethod
    def complexity_from_flesch(flesch: float) -> float:
        """Invert and normalize a Flesch score into [0, 1]."""
        return max(0.0, min(1.0, (FLESCH_SCALE - flesch) / FLESCH_SCALE))

    def score(self, text: Optional[str]) -> float:
        """
        Compute the complexity score of text.

        Args:
            text: Raw input text

        Returns:
            Complexity in [0.0, 1.0]; 0.0 when the text has no tokens
        """
        return self.extract_features_from_tokens(tokenize(text), text).complexity

    def extract_features_from_tokens(
        self,
        words: Sequence[str],
        text: Optional[str]
    ) -> ReadabilityFeatures:
        """
        Extract readability features from tokens and their raw text.

        Args:
            words: Tokens produced from text
            text: The raw text (needed for sentence terminators)

        Returns:
            ReadabilityFeatures
        """
        if not words:
            return self._empty_features()

        word_count = len(words)
        sentence_count = count_sentences(text)
        syllable_count = sum(count_syllables(word) for word in words)

        avg_word_length = sum(len(word) for word in words) / word_count
        avg_sentence_length = word_count / sentence_count
        avg_syllables_per_word = syllable_count / word_count

        flesch = self.flesch_reading_ease(word_count, sentence_count, syllable_count)
        complexity = self.complexity_from_flesch(flesch)

        logger.debug(
            f"Readability: {word_count} words, {sentence_count} sentences, "
            f"{syllable_count} syllables, flesch={flesch:.2f}"
        )

        return ReadabilityFeatures(
            word_count=word_count,
            sentence_count=sentence_count,
            syllable_count=syllable_count,
            avg_word_length=avg_word_length,
            avg_sentence_length=avg_sentence_length,
            avg_syllables_per_word=avg_syllables_per_word,
            flesch_reading_ease=flesch,
            complexity=complexity,
        )

    def extract_features(
        self,
        text: Optional[str],
        return_metadata: bool = False
    ) -> ReadabilityFeatures | ReadabilityAnalysisResult:
        """
        Extract readability features from text.

        Args:
            text: Input text to analyze (punctuation preserved)
            return_metadata: If True, return ReadabilityAnalysisResult with metadata.
                           If False (default), return only ReadabilityFeatures.

        Returns:
            ReadabilityFeatures or ReadabilityAnalysisResult
        """
        features = self.extract_features_from_tokens(tokenize(text), text)

        if not return_metadata:
            return features

        metadata = ReadabilityAnalysisMetadata(
            text_length=len(text or ""),
            word_count=features.word_count,
            sentence_count=features.sentence_count,
            warnings=self._collect_warnings(features),
            config_used=self._get_config_dict()
        )

        return ReadabilityAnalysisResult(features=features, metadata=metadata)

    def extract_features_batch(
        self,
        texts: List[Optional[str]],
        return_metadata: bool = False
    ) -> List[ReadabilityFeatures] | List[ReadabilityAnalysisResult]:
        """
        Extract features from multiple texts.

        Args:
            texts: List of text strings
            return_metadata: If True, return results with metadata

        Returns:
            List of ReadabilityFeatures or ReadabilityAnalysisResult objects
        """
        return [self.extract_features(text, return_metadata=return_metadata) for text in texts]

    # ===========================
    # Private Helper Methods
    # ===========================

    def _collect_warnings(self, features: ReadabilityFeatures) -> List[str]:
        """Flag texts too short for the formula to be meaningful."""
        warnings = []
        min_words = self.config.text_processing.min_word_count
        min_sentences = self.config.text_processing.min_sentence_count

        if features.word_count < min_words:
            warnings.append(
                f"Word count ({features.word_count}) below minimum ({min_words}). "
                f"Results may be unreliable."
            )
        if features.sentence_count < min_sentences:
            warnings.append(
                f"Sentence count ({features.sentence_count}) below minimum ({min_sentences}). "
                f"Results may be unreliable."
            )
        for warning in warnings:
            logger.warning(warning)
        return warnings

    def _get_config_dict(self) -> dict:
        """Get configuration as dictionary for metadata."""
        try:
            return self.config.model_dump()
        except AttributeError:
            return {"source": "config object (not serializable)"}

    def _empty_features(self) -> ReadabilityFeatures:
        """Return zero/empty features for text without tokens."""
        return ReadabilityFeatures(
            word_count=0,
            sentence_count=0,
            syllable_count=0,
            avg_word_length=0.0,
            avg_sentence_length=0.0,
            avg_syllables_per_word=0.0,
            flesch_reading_ease=0.0,
            complexity=0.0,
        )
