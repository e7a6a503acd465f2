"""Paragraph splitting and word counting."""

from __future__ import annotations

import re

# One or more blank lines (a newline, optional whitespace, another newline)
PARAGRAPH_BREAK = re.compile(r"\n\s*\n")


def split_paragraphs(text: str) -> list[str]:
    """Split raw text into stripped, non-empty paragraphs.

    Args:
        text: Raw text with paragraphs separated by blank lines.

    Returns:
        Paragraphs in document order.
    """
    return [part.strip() for part in PARAGRAPH_BREAK.split(text) if part.strip()]


def count_words(text: str) -> int:
    """Count whitespace-delimited tokens. The empty string has none."""
    return len(text.split())
