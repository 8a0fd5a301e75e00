"""Keyword extraction configuration."""

from pydantic import Field
from pydantic_settings import BaseSettings, SettingsConfigDict

from text_metrics.config._loader import load_yaml_section


def _get_config() -> dict:
    return load_yaml_section("features/keywords.yaml", "keywords")


class KeywordsConfig(BaseSettings):
    """
    Keyword extraction configuration.
    Loads from configs/features/keywords.yaml with environment variable overrides.
    """
    model_config = SettingsConfigDict(
        env_prefix='KEYWORDS_',
        case_sensitive=False
    )

    max_keywords: int = Field(
        default_factory=lambda: _get_config().get('max_keywords', 10)
    )
    min_keyword_length: int = Field(
        default_factory=lambda: _get_config().get('min_keyword_length', 4),
        ge=1
    )
    remove_stopwords: bool = Field(
        default_factory=lambda: _get_config().get('remove_stopwords', True)
    )
