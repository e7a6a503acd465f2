"""Segmentation engine: raw text in, chapters out.

The engine is total over strings. Every input, including the empty string,
yields a result with at least one chapter; nothing is raised for text.
"""

from __future__ import annotations

import logging

from chaptercut.config.settings import SegmentationSettings
from chaptercut.segmentation.assembler import assemble
from chaptercut.segmentation.chunker import chunk_paragraph
from chaptercut.segmentation.fallback import fallback_segment, should_fallback
from chaptercut.segmentation.lexicon import Lexicon, get_lexicons
from chaptercut.segmentation.models import (
    BoundaryVerdict,
    Chapter,
    SegmentationResult,
    SegmentationStrategy,
    TitleKind,
)
from chaptercut.segmentation.rules import BoundaryClassifier
from chaptercut.segmentation.splitter import count_words, split_paragraphs

logger = logging.getLogger(__name__)


class Segmenter:
    """Reconstructs chapter structure from plain text.

    A Segmenter holds only its settings and rule table, so one instance can
    be shared freely across calls and threads.
    """

    def __init__(self, settings: SegmentationSettings | None = None):
        """Initialize the segmenter.

        Args:
            settings: Thresholds and languages; defaults are used if omitted.

        Raises:
            UnknownLanguageError: If a configured language has no lexicon.
        """
        self.settings = settings or SegmentationSettings()
        self.lexicons = get_lexicons(self.settings.languages)
        self.classifier = BoundaryClassifier.from_settings(self.settings)

    @property
    def lexicon(self) -> Lexicon:
        """Lexicon supplying placeholder words."""
        return self.lexicons[0]

    def split(self, text: str) -> list[str]:
        """Split raw text into paragraphs."""
        return split_paragraphs(text)

    def classify(self, paragraph: str) -> BoundaryVerdict:
        """Classify one paragraph."""
        return self.classifier.classify(paragraph)

    def chunk(self, paragraph: str) -> list[str]:
        """Split one paragraph into length-bounded blocks."""
        return chunk_paragraph(paragraph, self.settings.max_block_length)

    def segment(self, text: str) -> SegmentationResult:
        """Segment raw text into chapters.

        Args:
            text: Raw document text, paragraphs separated by blank lines.

        Returns:
            SegmentationResult with at least one chapter.
        """
        paragraphs = self.split(text)
        total_words = count_words(text)

        primary = assemble(
            paragraphs,
            classify=self.classify,
            chunk=self.chunk,
            placeholder_word=self.lexicon.chapter_word,
        )

        if should_fallback(
            primary.any_title_detected,
            len(paragraphs),
            self.settings.fallback_min_paragraphs,
        ):
            logger.debug("No chapters detected, creating content-based divisions")
            chapters = fallback_segment(
                paragraphs,
                total_words,
                chunk=self.chunk,
                words_per_chapter=self.settings.fallback_words_per_chapter,
                max_chapters=self.settings.fallback_max_chapters,
                title_scan=self.settings.fallback_title_scan,
                title_max_display=self.settings.fallback_title_max_display,
                section_word=self.lexicon.section_word,
            )
            strategy = SegmentationStrategy.FALLBACK
        else:
            chapters = list(primary.chapters)
            strategy = SegmentationStrategy.HEADINGS

        if not chapters:
            chapters = [
                Chapter(
                    title=self.lexicon.full_document_title,
                    blocks=[block for paragraph in paragraphs for block in self.chunk(paragraph)],
                    title_kind=TitleKind.DOCUMENT,
                )
            ]
            strategy = SegmentationStrategy.WHOLE_DOCUMENT

        result = SegmentationResult(
            chapters=chapters,
            total_words=total_words,
            paragraph_count=len(paragraphs),
            strategy=strategy,
        )
        logger.info(
            f"Chapter structure complete. Detected {result.chapter_count} chapters, "
            f"{total_words} words total ({strategy.value})"
        )
        return result


def segment(text: str, settings: SegmentationSettings | None = None) -> SegmentationResult:
    """Segment raw text into chapters.

    Args:
        text: Raw document text.
        settings: Optional thresholds and languages.

    Returns:
        SegmentationResult with at least one chapter.

    Example:
        >>> result = segment("Chapter 1\\n\\nHello world.")
        >>> result.chapters[0].title
        'Chapter 1'
    """
    return Segmenter(settings).segment(text)
