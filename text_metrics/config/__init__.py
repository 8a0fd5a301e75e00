"""
Text Metrics Configuration Package.

This module uses Pydantic Settings to:
1. Define the schema for all configuration
2. Load defaults from configs/config.yaml and configs/features/*.yaml
3. Automatically override with environment variables from .env or the shell

Usage:
    from text_metrics.config import settings

    # Sentiment normalization
    window = settings.sentiment.scoring.normalization_window

    # Keyword defaults
    top_n = settings.keywords.max_keywords

    # Reading speed
    wpm = settings.reading_time.words_per_minute
"""

from pydantic import Field
from pydantic_settings import BaseSettings, SettingsConfigDict

from text_metrics.config.output import OutputConfig

# Feature configs
from text_metrics.config.features import (
    SentimentConfig,
    KeywordsConfig,
    ReadabilityConfig,
    ReadingTimeConfig,
)


class Settings(BaseSettings):
    """
    Main settings class that combines all configuration sections.

    Usage:
        from text_metrics.config import settings

        settings.sentiment.labels.positive_threshold
        settings.keywords.max_keywords
        settings.reading_time.words_per_minute
    """
    model_config = SettingsConfigDict(
        env_file='.env',
        env_file_encoding='utf-8',
        case_sensitive=False,
        extra='ignore'
    )

    sentiment: SentimentConfig = Field(default_factory=SentimentConfig)
    keywords: KeywordsConfig = Field(default_factory=KeywordsConfig)
    readability: ReadabilityConfig = Field(default_factory=ReadabilityConfig)
    reading_time: ReadingTimeConfig = Field(default_factory=ReadingTimeConfig)
    output: OutputConfig = Field(default_factory=OutputConfig)


# ===========================
# Global Settings Instance
# ===========================

settings = Settings()


# ===========================
# Public API
# ===========================

__all__ = [
    "settings",
    "Settings",
    "OutputConfig",
    "SentimentConfig",
    "KeywordsConfig",
    "ReadabilityConfig",
    "ReadingTimeConfig",
]
