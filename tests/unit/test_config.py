"""
Unit tests for the settings layer: YAML defaults and environment overrides.
"""

import pytest
from pydantic import ValidationError

from text_metrics.config import Settings, settings
from text_metrics.config._loader import CONFIGS_DIR, clear_config_cache, load_yaml_section
from text_metrics.config.features import (
    KeywordsConfig,
    ReadingTimeConfig,
    SentimentConfig,
)


class TestYamlLoader:
    """YAML section loading."""

    def test_loads_feature_section(self):
        section = load_yaml_section("features/keywords.yaml", "keywords")
        assert section["max_keywords"] == 10

    def test_loads_reading_time_section(self):
        section = load_yaml_section("features/reading_time.yaml", "reading_time")
        assert section["words_per_minute"] == 225.0

    def test_missing_section_returns_empty(self):
        assert load_yaml_section("features/keywords.yaml", "sentiment") == {}

    def test_configs_dir_holds_shipped_files(self):
        assert (CONFIGS_DIR / "config.yaml").is_file()
        assert (CONFIGS_DIR / "features" / "keywords.yaml").is_file()

    def test_missing_file_returns_empty(self):
        clear_config_cache()
        assert load_yaml_section("features/does_not_exist.yaml") == {}


class TestDefaults:
    """Shipped defaults."""

    def test_sentiment_defaults(self):
        config = settings.sentiment
        assert config.scoring.normalization_window == 10.0
        assert config.scoring.score_scale == 5.0
        assert config.labels.positive_threshold == 0.1
        assert config.labels.negative_threshold == -0.1

    def test_keyword_defaults(self):
        assert settings.keywords.max_keywords == 10
        assert settings.keywords.min_keyword_length == 4
        assert settings.keywords.remove_stopwords is True

    def test_reading_time_defaults(self):
        assert settings.reading_time.words_per_minute == 225.0
        assert settings.reading_time.minimum_minutes == 1
        assert settings.reading_time.zero_for_empty_input is True

    def test_output_defaults(self):
        assert settings.output.precision == 3
        assert settings.output.include_keywords is True


class TestOverrides:
    """Environment variables and constructor arguments win over YAML."""

    def test_env_override(self, monkeypatch):
        monkeypatch.setenv("KEYWORDS_MAX_KEYWORDS", "3")
        assert KeywordsConfig().max_keywords == 3

    def test_nested_env_override(self, monkeypatch):
        monkeypatch.setenv("SENTIMENT_SCORING_SCORE_SCALE", "2.5")
        assert SentimentConfig().scoring.score_scale == 2.5

    def test_invalid_words_per_minute(self):
        with pytest.raises(ValidationError):
            ReadingTimeConfig(words_per_minute=0)

    def test_settings_sections_replaceable(self):
        custom = Settings(reading_time=ReadingTimeConfig(zero_for_empty_input=False))
        assert custom.reading_time.zero_for_empty_input is False
        assert custom.keywords.max_keywords == settings.keywords.max_keywords
