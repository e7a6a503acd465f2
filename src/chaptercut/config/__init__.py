"""Configuration for Chaptercut."""

from chaptercut.config.settings import (
    OutputSettings,
    SegmentationSettings,
    Settings,
    get_settings,
)

__all__ = [
    "OutputSettings",
    "SegmentationSettings",
    "Settings",
    "get_settings",
]
