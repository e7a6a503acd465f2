"""Convenience API for Chaptercut.

This module provides simple, high-level functions for common tasks:

    >>> from chaptercut import segment_pages
    >>> result = segment_pages(["Chapter 1", "It was a dark night."])
    >>> [ch.title for ch in result.chapters]
    ['Chapter 1']

For more control, use :class:`chaptercut.Segmenter` directly.
"""

from collections.abc import Iterable
from pathlib import Path
from typing import Union

from chaptercut.config.settings import SegmentationSettings
from chaptercut.exceptions import DecodeError, EmptyInputError
from chaptercut.preprocess import join_pages, normalize_extracted_text
from chaptercut.segmentation.engine import segment
from chaptercut.segmentation.models import SegmentationResult

PathLike = Union[Path, str]


def segment_pages(
    pages: Iterable[str],
    normalize: bool = False,
    settings: SegmentationSettings | None = None,
) -> SegmentationResult:
    """Segment text supplied one page at a time.

    Args:
        pages: Already-decoded text of each page.
        normalize: Re-paragraph the text as PDF output (one sentence per
            paragraph) before segmenting.
        settings: Optional segmentation settings.

    Returns:
        SegmentationResult for the joined pages.
    """
    text = join_pages(pages)
    if normalize:
        text = normalize_extracted_text(text)
    return segment(text, settings)


def load_text(path: PathLike, encoding: str = "utf-8") -> str:
    """Read an already-extracted text file.

    Args:
        path: Path to a text file.
        encoding: Text encoding.

    Returns:
        File contents.

    Raises:
        FileNotFoundError: If the file does not exist.
        DecodeError: If the file is not text in the given encoding.
        EmptyInputError: If the file holds only whitespace.
    """
    path = Path(path)
    try:
        text = path.read_text(encoding=encoding)
    except UnicodeDecodeError as e:
        raise DecodeError(
            f"Cannot decode {path.name} as {encoding}",
            details=str(e),
        ) from e
    if not text.strip():
        raise EmptyInputError(f"No text found in {path.name}")
    return text
