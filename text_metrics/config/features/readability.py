"""Readability analysis configuration."""

from pydantic import Field
from pydantic_settings import BaseSettings, SettingsConfigDict

from text_metrics.config._loader import load_yaml_section


def _get_config() -> dict:
    return load_yaml_section("features/readability.yaml", "readability")


class ReadabilityTextProcessingConfig(BaseSettings):
    """Thresholds below which results are flagged as unreliable."""
    model_config = SettingsConfigDict(
        env_prefix='READABILITY_TEXT_',
        case_sensitive=False
    )

    min_word_count: int = Field(
        default_factory=lambda: _get_config().get('text_processing', {}).get('min_word_count', 30)
    )
    min_sentence_count: int = Field(
        default_factory=lambda: _get_config().get('text_processing', {}).get('min_sentence_count', 3)
    )


class ReadabilityConfig(BaseSettings):
    """
    Readability analysis configuration.
    Loads from configs/features/readability.yaml with environment variable overrides.
    """
    model_config = SettingsConfigDict(
        env_prefix='READABILITY_',
        env_nested_delimiter='__',
        case_sensitive=False
    )

    text_processing: ReadabilityTextProcessingConfig = Field(
        default_factory=ReadabilityTextProcessingConfig
    )
