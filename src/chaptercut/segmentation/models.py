"""Data models for segmentation results."""

from __future__ import annotations

import math
from enum import Enum
from typing import Any

from pydantic import BaseModel, ConfigDict, Field

# Words per printed page, used for the page estimate shown after import.
WORDS_PER_PAGE = 250


class BoundaryVerdict(str, Enum):
    """Classification of a single paragraph."""

    TITLE = "title"
    BODY = "body"


class TitleKind(str, Enum):
    """Where a chapter's title came from."""

    DETECTED = "detected"  # A paragraph classified as a title
    PLACEHOLDER = "placeholder"  # "Chapter N" / "Section N"
    DERIVED = "derived"  # Picked from the leading paragraphs by the fallback
    DOCUMENT = "document"  # The single "Full Document" chapter


class SegmentationStrategy(str, Enum):
    """Which path produced the chapters."""

    HEADINGS = "headings"
    FALLBACK = "fallback"
    WHOLE_DOCUMENT = "whole_document"


class Chapter(BaseModel):
    """A chapter reconstructed from plain text."""

    model_config = ConfigDict(frozen=True)

    title: str
    blocks: list[str] = Field(default_factory=list)
    title_kind: TitleKind = TitleKind.DETECTED

    @property
    def content(self) -> str:
        """Blocks joined by blank lines."""
        return "\n\n".join(self.blocks)

    @property
    def block_count(self) -> int:
        """Number of content blocks."""
        return len(self.blocks)

    @property
    def word_count(self) -> int:
        """Whitespace-delimited words across all blocks."""
        return sum(len(block.split()) for block in self.blocks)


class SegmentationResult(BaseModel):
    """Chapters plus document statistics."""

    model_config = ConfigDict(frozen=True)

    chapters: list[Chapter] = Field(min_length=1)
    total_words: int = Field(ge=0)
    paragraph_count: int = Field(default=0, ge=0)
    strategy: SegmentationStrategy = SegmentationStrategy.HEADINGS

    @property
    def chapter_count(self) -> int:
        """Number of chapters."""
        return len(self.chapters)

    @property
    def block_count(self) -> int:
        """Content blocks across all chapters."""
        return sum(ch.block_count for ch in self.chapters)

    @property
    def estimated_pages(self) -> int:
        """Approximate printed page count."""
        return math.ceil(self.total_words / WORDS_PER_PAGE)

    def to_dict(self, include_blocks: bool = True) -> dict[str, Any]:
        """Convert to dictionary for serialization."""
        chapters = []
        for i, ch in enumerate(self.chapters, 1):
            entry: dict[str, Any] = {
                "id": i,
                "title": ch.title,
                "title_kind": ch.title_kind.value,
                "block_count": ch.block_count,
                "word_count": ch.word_count,
            }
            if include_blocks:
                entry["blocks"] = list(ch.blocks)
            chapters.append(entry)
        return {
            "strategy": self.strategy.value,
            "total_words": self.total_words,
            "paragraph_count": self.paragraph_count,
            "estimated_pages": self.estimated_pages,
            "count": self.chapter_count,
            "chapters": chapters,
        }
