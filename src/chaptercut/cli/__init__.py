"""Command-line interface for Chaptercut."""

from chaptercut.cli.app import app

__all__ = ["app"]
