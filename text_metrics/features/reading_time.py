"""
Reading-Time Estimator

Converts a word count into whole minutes at a fixed reading speed.
"""

import math
import logging
from typing import Optional

from text_metrics.config import settings

logger = logging.getLogger(__name__)


class ReadingTimeEstimator:
    """
    Estimate reading time from a word count.

    Usage:
        estimator = ReadingTimeEstimator()
        minutes = estimator.estimate(450)   # 2
    """

    def __init__(self, config: Optional[object] = None):
        """
        Initialize estimator.

        Args:
            config: Optional ReadingTimeConfig object. If None, loads from settings.
        """
        self.config = config or settings.reading_time
        if self.config.words_per_minute <= 0:
            raise ValueError(
                f"words_per_minute must be positive, got {self.config.words_per_minute}"
            )

    @property
    def words_per_minute(self) -> float:
        return self.config.words_per_minute

    def estimate(self, word_count: int) -> int:
        """
        Minutes needed to read word_count words.

        Args:
            word_count: Number of tokens

        Returns:
            ceil(word_count / words_per_minute), never below minimum_minutes (1)
        """
        minutes = math.ceil(word_count / self.config.words_per_minute)
        return max(self.config.minimum_minutes, minutes)


def estimate_reading_time(word_count: int) -> int:
    """Estimate reading minutes with the default settings."""
    return ReadingTimeEstimator().estimate(word_count)
