"""Report output configuration."""

from pydantic import Field
from pydantic_settings import BaseSettings, SettingsConfigDict

from text_metrics.config._loader import load_yaml_section


def _get_config() -> dict:
    return load_yaml_section("config.yaml").get("output", {})


class OutputConfig(BaseSettings):
    """Settings for JSON reports written by the command line."""
    model_config = SettingsConfigDict(
        env_prefix='OUTPUT_',
        case_sensitive=False
    )

    precision: int = Field(
        default_factory=lambda: _get_config().get('precision', 3),
        ge=0
    )
    indent: int = Field(
        default_factory=lambda: _get_config().get('indent', 2),
        ge=0
    )
    include_keywords: bool = Field(
        default_factory=lambda: _get_config().get('include_keywords', True)
    )
