"""Feature extraction configuration modules."""

from text_metrics.config.features.sentiment import SentimentConfig
from text_metrics.config.features.keywords import KeywordsConfig
from text_metrics.config.features.readability import ReadabilityConfig
from text_metrics.config.features.reading_time import ReadingTimeConfig

__all__ = [
    "SentimentConfig",
    "KeywordsConfig",
    "ReadabilityConfig",
    "ReadingTimeConfig",
]
