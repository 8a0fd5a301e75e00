"""Sentiment scoring configuration."""

from pydantic import Field
from pydantic_settings import BaseSettings, SettingsConfigDict

from text_metrics.config._loader import load_yaml_section


def _get_config() -> dict:
    return load_yaml_section("features/sentiment.yaml", "sentiment")


class SentimentScoringConfig(BaseSettings):
    """Normalization constants for the lexicon score."""
    model_config = SettingsConfigDict(
        env_prefix='SENTIMENT_SCORING_',
        case_sensitive=False
    )

    normalization_window: float = Field(
        default_factory=lambda: _get_config().get('scoring', {}).get('normalization_window', 10.0),
        gt=0.0,
        description="Token count per unit of length damping"
    )
    score_scale: float = Field(
        default_factory=lambda: _get_config().get('scoring', {}).get('score_scale', 5.0),
        gt=0.0,
        description="Divisor applied before clamping into [-1, 1]"
    )
    default_multiplier: float = Field(
        default_factory=lambda: _get_config().get('scoring', {}).get('default_multiplier', 1.0)
    )


class SentimentLabelConfig(BaseSettings):
    """Thresholds for the POSITIVE / NEGATIVE / NEUTRAL label."""
    model_config = SettingsConfigDict(
        env_prefix='SENTIMENT_LABEL_',
        case_sensitive=False
    )

    positive_threshold: float = Field(
        default_factory=lambda: _get_config().get('labels', {}).get('positive_threshold', 0.1)
    )
    negative_threshold: float = Field(
        default_factory=lambda: _get_config().get('labels', {}).get('negative_threshold', -0.1)
    )


class SentimentConfig(BaseSettings):
    """
    Sentiment scoring configuration.
    Loads from configs/features/sentiment.yaml with environment variable overrides.
    """
    model_config = SettingsConfigDict(
        env_prefix='SENTIMENT_',
        env_nested_delimiter='__',
        case_sensitive=False
    )

    scoring: SentimentScoringConfig = Field(
        default_factory=SentimentScoringConfig
    )
    labels: SentimentLabelConfig = Field(
        default_factory=SentimentLabelConfig
    )
