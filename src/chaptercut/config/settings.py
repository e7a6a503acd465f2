"""Pydantic settings for Chaptercut configuration."""

from functools import lru_cache
from pathlib import Path
from typing import Any

import yaml
from pydantic import BaseModel, Field, field_validator
from pydantic_settings import BaseSettings, SettingsConfigDict

from chaptercut.exceptions import ConfigError

# Empirically chosen thresholds carried over from the import pipeline.
MIN_TITLE_LENGTH = 10
MAX_TITLE_LENGTH = 300
MAX_BLOCK_LENGTH = 800
FALLBACK_WORDS_PER_CHAPTER = 1500
FALLBACK_MAX_CHAPTERS = 8
FALLBACK_MIN_PARAGRAPHS = 5
FALLBACK_TITLE_SCAN = 3
FALLBACK_TITLE_MAX_DISPLAY = 60
DEFAULT_LANGUAGES = ("en", "es")


def get_config_dir() -> Path:
    """Get the configuration directory, creating it if needed."""
    config_dir = Path.home() / ".chaptercut"
    config_dir.mkdir(parents=True, exist_ok=True)
    return config_dir


def get_config_path() -> Path:
    """Get the path to the config file."""
    return get_config_dir() / "config.yaml"


def _load_yaml_config() -> dict[str, Any]:
    """Load configuration from YAML file if it exists.

    Returns:
        Dictionary of configuration values, or empty dict if file doesn't exist.
    """
    config_path = get_config_path()
    if config_path.exists():
        try:
            with open(config_path) as f:
                data = yaml.safe_load(f)
        except (yaml.YAMLError, OSError):
            # Silently ignore malformed or unreadable config
            return {}
        return data if isinstance(data, dict) else {}
    return {}


class SegmentationSettings(BaseModel):
    """Thresholds and language selection for the segmentation engine."""

    min_title_length: int = Field(default=MIN_TITLE_LENGTH, ge=1)
    max_title_length: int = Field(default=MAX_TITLE_LENGTH, gt=0)
    max_block_length: int = Field(default=MAX_BLOCK_LENGTH, gt=0)
    fallback_words_per_chapter: int = Field(default=FALLBACK_WORDS_PER_CHAPTER, gt=0)
    fallback_max_chapters: int = Field(default=FALLBACK_MAX_CHAPTERS, gt=0)
    fallback_min_paragraphs: int = Field(default=FALLBACK_MIN_PARAGRAPHS, ge=0)
    fallback_title_scan: int = Field(default=FALLBACK_TITLE_SCAN, ge=0)
    fallback_title_max_display: int = Field(default=FALLBACK_TITLE_MAX_DISPLAY, gt=0)
    languages: list[str] = Field(default_factory=lambda: list(DEFAULT_LANGUAGES))

    @field_validator("languages")
    @classmethod
    def _check_languages(cls, value: list[str]) -> list[str]:
        from chaptercut.segmentation.lexicon import get_lexicons

        try:
            lexicons = get_lexicons(value)
        except ConfigError as e:
            raise ValueError(e.message) from e
        return [lex.code for lex in lexicons]


class OutputSettings(BaseModel):
    """Settings for rendered output."""

    html_document_title: bool = True
    preview_chars: int = 80


class Settings(BaseSettings):
    """Main settings model for Chaptercut."""

    model_config = SettingsConfigDict(
        env_prefix="CHAPTERCUT_",
        env_nested_delimiter="__",
        extra="ignore",
    )

    segmentation: SegmentationSettings = Field(default_factory=SegmentationSettings)
    output: OutputSettings = Field(default_factory=OutputSettings)


@lru_cache
def get_settings() -> Settings:
    """Get cached settings instance.

    Settings are loaded from (in order of priority, highest first):
    1. YAML config file (~/.chaptercut/config.yaml)
    2. Environment variables (CHAPTERCUT_* prefix)
    3. Default values

    A top-level key in the YAML file replaces the whole group, so
    ``segmentation:`` in YAML shadows every CHAPTERCUT_SEGMENTATION__* variable.
    """
    yaml_config = _load_yaml_config()
    return Settings(**yaml_config)
