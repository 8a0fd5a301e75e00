"""
Sentiment Scoring Feature Extractor

This module scores text against the compiled-in positive, negative and
intensifier lexicons.

The analyzer:
1. Tokenizes text into normalized words
2. Walks tokens left to right, applying an intensifier only to the token right after it
3. Dampens the raw score for long texts and clamps it into [-1, 1]
4. Returns a structured SentimentFeatures dataclass

Usage:
    from text_metrics.features import SentimentAnalyzer

    analyzer = SentimentAnalyzer()
    features = analyzer.extract_features("This is an absolutely amazing product")

    print(f"Score: {features.score}")
    print(f"Label: {features.label}")
"""

import json
from dataclasses import dataclass, asdict
from pathlib import Path
from typing import Dict, List, Optional, Sequence
import logging

from text_metrics.config import settings
from text_metrics.features.dictionaries import LexiconManager
from text_metrics.features.tokenizer import tokenize

logger = logging.getLogger(__name__)

SENTIMENT_LABELS = ("POSITIVE", "NEGATIVE", "NEUTRAL")


def clamp(value: float, lower: float, upper: float) -> float:
    """Clamp value into [lower, upper]."""
    return max(lower, min(upper, value))


@dataclass
class SentimentFeatures:
    """
    Structured sentiment features extracted from text.

    score is the bounded value reported to callers; raw_score and
    normalized_score are the intermediate values it is derived from.
    """
    word_count: int
    raw_score: float = 0.0
    normalized_score: float = 0.0
    score: float = 0.0
    label: str = "NEUTRAL"

    # Matched lexicon words
    positive_count: int = 0
    negative_count: int = 0
    intensified_count: int = 0

    def save_to_json(self, output_path: Path) -> None:
        """
        Save features to JSON file.

        Args:
            output_path: Path to output JSON file
        """
        output_path.parent.mkdir(parents=True, exist_ok=True)
        with open(output_path, 'w', encoding='utf-8') as f:
            json.dump(asdict(self), f, indent=2)
        logger.info(f"Saved sentiment features to {output_path}")

    @classmethod
    def load_from_json(cls, input_path: Path) -> 'SentimentFeatures':
        """
        Load features from JSON file.

        Args:
            input_path: Path to input JSON file

        Returns:
            SentimentFeatures object
        """
        with open(input_path, 'r', encoding='utf-8') as f:
            data = json.load(f)
        logger.info(f"Loaded sentiment features from {input_path}")
        return cls(**data)

    def to_dict(self) -> Dict:
        """Convert to dictionary."""
        return asdict(self)

    def get_match_counts(self) -> Dict[str, int]:
        """Get dictionary of matched word counts."""
        return {
            "positive": self.positive_count,
            "negative": self.negative_count,
            "intensified": self.intensified_count,
        }


class SentimentAnalyzer:
    """
    Lexicon-weighted sentiment scorer.

    This class:
    1. Loads configuration from settings
    2. Shares the process-wide lexicon
    3. Tokenizes text
    4. Computes the bounded score and its label

    Usage:
        analyzer = SentimentAnalyzer()
        score = analyzer.score(tokens)
        features = analyzer.extract_features(text)
    """

    def __init__(
        self,
        config: Optional[object] = None,
        lexicon_manager: Optional[LexiconManager] = None
    ):
        """
        Initialize sentiment analyzer.

        Args:
            config: Optional SentimentConfig object. If None, loads from settings.
            lexicon_manager: Optional LexiconManager with custom tables.
                           If None, the shared instance is used.
        """
        self.config = config or settings.sentiment
        self._lexicon_manager: Optional[LexiconManager] = lexicon_manager

        labels = self.config.labels
        if labels.negative_threshold > labels.positive_threshold:
            raise ValueError(
                f"negative_threshold ({labels.negative_threshold}) must not exceed "
                f"positive_threshold ({labels.positive_threshold})"
            )

        logger.info(
            f"Initialized SentimentAnalyzer with normalization window "
            f"{self.config.scoring.normalization_window} and scale "
            f"{self.config.scoring.score_scale}"
        )

    @property
    def lexicon_manager(self) -> LexiconManager:
        """Injected lexicon manager, or the shared instance on first use."""
        if self._lexicon_manager is None:
            self._lexicon_manager = LexiconManager.get_instance()
        return self._lexicon_manager

    def tokenize(self, text: Optional[str]) -> List[str]:
        """
        Tokenize text into words.

        Args:
            text: Input text

        Returns:
            List of tokens (words)
        """
        return tokenize(text)

    def _walk(self, tokens: Sequence[str]) -> Dict[str, float]:
        """
        Single left-to-right pass accumulating the raw score.

        The multiplier set by an intensifier is reset on the very next token,
        whether or not that token carries sentiment.
        """
        default_multiplier = self.config.scoring.default_multiplier
        multiplier = default_multiplier
        raw_score = 0.0
        positive = negative = intensified = 0
        lexicon = self.lexicon_manager.lexicon

        for token in tokens:
            boost = lexicon.intensifier_weight(token)
            if boost is not None:
                multiplier = boost
                continue

            weight = lexicon.sentiment_weight(token)
            if weight is not None:
                raw_score += weight * multiplier
                if weight > 0:
                    positive += 1
                else:
                    negative += 1
                if multiplier != default_multiplier:
                    intensified += 1

            multiplier = default_multiplier

        return {
            "raw_score": raw_score,
            "positive_count": positive,
            "negative_count": negative,
            "intensified_count": intensified,
        }

    def normalize(self, raw_score: float, token_count: int) -> float:
        """Dampen a raw score by text length: raw / max(1, n / window)."""
        window = self.config.scoring.normalization_window
        return raw_score / max(1.0, token_count / window)

    def score(self, tokens: Sequence[str]) -> float:
        """
        Score a token sequence.

        Args:
            tokens: Normalized tokens

        Returns:
            Sentiment score in [-1.0, 1.0]; 0.0 for no tokens or no matches
        """
        raw_score = self._walk(tokens)["raw_score"]
        normalized = self.normalize(raw_score, len(tokens))
        return clamp(normalized / self.config.scoring.score_scale, -1.0, 1.0)

    def label(self, score: float) -> str:
        """
        Map a score to POSITIVE, NEGATIVE or NEUTRAL.

        Thresholds are exclusive: a score equal to a threshold is NEUTRAL.
        """
        labels = self.config.labels
        if score > labels.positive_threshold:
            return "POSITIVE"
        if score < labels.negative_threshold:
            return "NEGATIVE"
        return "NEUTRAL"

    def extract_features_from_tokens(self, tokens: Sequence[str]) -> SentimentFeatures:
        """
        Extract sentiment features from pre-tokenized text.

        Args:
            tokens: Normalized tokens

        Returns:
            SentimentFeatures dataclass with all computed features
        """
        walk = self._walk(tokens)
        normalized = self.normalize(walk["raw_score"], len(tokens))
        score = clamp(normalized / self.config.scoring.score_scale, -1.0, 1.0)

        return SentimentFeatures(
            word_count=len(tokens),
            raw_score=walk["raw_score"],
            normalized_score=normalized,
            score=score,
            label=self.label(score),
            positive_count=walk["positive_count"],
            negative_count=walk["negative_count"],
            intensified_count=walk["intensified_count"],
        )

    def extract_features(self, text: Optional[str]) -> SentimentFeatures:
        """
        Extract sentiment features from text.

        Args:
            text: Input text to analyze

        Returns:
            SentimentFeatures dataclass with all computed features
        """
        return self.extract_features_from_tokens(self.tokenize(text))

    def extract_features_batch(self, texts: List[Optional[str]]) -> List[SentimentFeatures]:
        """
        Extract features from multiple texts.

        Args:
            texts: List of text strings

        Returns:
            List of SentimentFeatures objects
        """
        return [self.extract_features(text) for text in texts]
