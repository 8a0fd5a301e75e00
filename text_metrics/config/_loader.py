"""
YAML defaults for the settings sections.

Every section class in text_metrics.config reads its defaults through
load_yaml_section; environment variables are applied on top by
pydantic-settings.

Usage:
    from text_metrics.config._loader import load_yaml_section

    # Top-level key of a feature file
    keywords = load_yaml_section("features/keywords.yaml", "keywords")
    wpm = load_yaml_section("features/reading_time.yaml", "reading_time").get("words_per_minute")

    # Whole file
    general = load_yaml_section("config.yaml")
"""

from functools import lru_cache
from pathlib import Path
from typing import Any
import logging

import yaml

logger = logging.getLogger(__name__)

CONFIGS_DIR = Path(__file__).resolve().parents[2] / "configs"
"""Repository-level directory holding config.yaml and features/*.yaml."""


@lru_cache(maxsize=16)
def load_yaml_section(config_file: str, section: str | None = None) -> dict[str, Any]:
    """
    Read one YAML file under CONFIGS_DIR, optionally narrowed to a top-level key.

    Args:
        config_file: Path relative to CONFIGS_DIR, e.g. "features/keywords.yaml"
        section: Top-level key to return, e.g. "keywords"

    Returns:
        The mapping found, or {} when the file or key is absent so that
        field defaults apply
    """
    path = CONFIGS_DIR / config_file
    if not path.is_file():
        logger.debug(f"No YAML defaults at {path}, using built-in values")
        return {}

    with open(path, 'r', encoding='utf-8') as f:
        data = yaml.safe_load(f) or {}

    if section is None:
        return data
    return data.get(section) or {}


def clear_config_cache() -> None:
    """Forget cached YAML so the next settings object re-reads the files."""
    load_yaml_section.cache_clear()
