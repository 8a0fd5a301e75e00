"""Reading-time estimation configuration."""

from pydantic import Field, field_validator
from pydantic_settings import BaseSettings, SettingsConfigDict

from text_metrics.config._loader import load_yaml_section


def _get_config() -> dict:
    return load_yaml_section("features/reading_time.yaml", "reading_time")


class ReadingTimeConfig(BaseSettings):
    """
    Reading-time estimation configuration.
    Loads from configs/features/reading_time.yaml with environment variable overrides.
    """
    model_config = SettingsConfigDict(
        env_prefix='READING_TIME_',
        case_sensitive=False
    )

    words_per_minute: float = Field(
        default_factory=lambda: _get_config().get('words_per_minute', 225.0)
    )
    minimum_minutes: int = Field(
        default_factory=lambda: _get_config().get('minimum_minutes', 1),
        ge=0
    )
    zero_for_empty_input: bool = Field(
        default_factory=lambda: _get_config().get('zero_for_empty_input', True),
        description="Report 0 minutes for None/empty text instead of the estimator floor"
    )

    @field_validator('words_per_minute')
    @classmethod
    def validate_words_per_minute(cls, v: float) -> float:
        """Reading speed must be positive."""
        if v <= 0:
            raise ValueError(f"words_per_minute must be positive, got {v}")
        return v
