"""Output rendering for Chaptercut."""

from chaptercut.output.formatter import OutputFormatter, get_formatter
from chaptercut.output.html import render_chapter_html, render_html

__all__ = [
    "OutputFormatter",
    "get_formatter",
    "render_chapter_html",
    "render_html",
]
