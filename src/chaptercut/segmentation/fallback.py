"""Fallback segmentation for documents without detectable headings.

Long untitled documents are divided into evenly sized runs of paragraphs,
sized so that each run holds roughly a fixed number of words.
"""

from __future__ import annotations

import logging
import math
import re
from collections.abc import Callable, Sequence

from chaptercut.config.settings import (
    FALLBACK_MAX_CHAPTERS,
    FALLBACK_MIN_PARAGRAPHS,
    FALLBACK_TITLE_MAX_DISPLAY,
    FALLBACK_TITLE_SCAN,
    FALLBACK_WORDS_PER_CHAPTER,
)
from chaptercut.segmentation.lexicon import ENGLISH
from chaptercut.segmentation.models import Chapter, TitleKind

logger = logging.getLogger(__name__)

# A numbered heading such as "2. Method" qualifies whatever its length
NUMBERED = re.compile(r"\d+\.")


def should_fallback(
    any_title_detected: bool,
    paragraph_count: int,
    min_paragraphs: int = FALLBACK_MIN_PARAGRAPHS,
) -> bool:
    """Decide whether heading-based chapters are replaced by the fallback."""
    return not any_title_detected and paragraph_count > min_paragraphs


def plan_chapter_count(
    total_words: int,
    words_per_chapter: int = FALLBACK_WORDS_PER_CHAPTER,
    max_chapters: int = FALLBACK_MAX_CHAPTERS,
) -> int:
    """Number of artificial chapters for a document of ``total_words``."""
    return max(1, min(math.ceil(total_words / words_per_chapter), max_chapters))


def derive_title(
    paragraphs: Sequence[str],
    scan: int = FALLBACK_TITLE_SCAN,
    max_display: int = FALLBACK_TITLE_MAX_DISPLAY,
) -> str | None:
    """Pick a readable title from the leading paragraphs of a run.

    The first of the leading ``scan`` paragraphs wins if it is 21-149
    characters long without any period, or opens with a number like "2.".
    Titles longer than ``max_display`` are shortened with an ellipsis.
    """
    for paragraph in paragraphs[:scan]:
        candidate = paragraph.strip()
        plain = 20 < len(candidate) < 150 and "." not in candidate
        if plain or NUMBERED.match(candidate):
            if len(candidate) > max_display:
                return candidate[:max_display] + "..."
            return candidate
    return None


def fallback_segment(
    paragraphs: Sequence[str],
    total_words: int,
    chunk: Callable[[str], list[str]],
    words_per_chapter: int = FALLBACK_WORDS_PER_CHAPTER,
    max_chapters: int = FALLBACK_MAX_CHAPTERS,
    title_scan: int = FALLBACK_TITLE_SCAN,
    title_max_display: int = FALLBACK_TITLE_MAX_DISPLAY,
    section_word: str = ENGLISH.section_word,
) -> list[Chapter]:
    """Divide paragraphs into artificial chapters by word count.

    Args:
        paragraphs: All paragraphs in document order.
        total_words: Word count of the whole document.
        chunk: Splits a paragraph into content blocks.
        words_per_chapter: Target words per chapter.
        max_chapters: Hard cap on the number of chapters.
        title_scan: How many leading paragraphs to inspect for a title.
        title_max_display: Longest derived title before truncation.
        section_word: Word used for untitled runs ("Section 1").

    Returns:
        Chapters in order; never more than ``max_chapters``.
    """
    if not paragraphs:
        return []

    planned = plan_chapter_count(total_words, words_per_chapter, max_chapters)
    per_chapter = math.ceil(len(paragraphs) / planned)
    logger.debug(
        f"Fallback: {planned} chapters planned, {per_chapter} paragraphs each"
    )

    chapters: list[Chapter] = []
    for number, start in enumerate(range(0, len(paragraphs), per_chapter), 1):
        run = paragraphs[start : start + per_chapter]
        title = derive_title(run, title_scan, title_max_display)
        blocks = [block for paragraph in run for block in chunk(paragraph)]
        chapters.append(
            Chapter(
                title=title if title is not None else f"{section_word} {number}",
                blocks=blocks,
                title_kind=TitleKind.DERIVED if title is not None else TitleKind.PLACEHOLDER,
            )
        )
    return chapters
