"""HTML rendering of segmented documents for the editor surface."""

from __future__ import annotations

from html import escape

from chaptercut.segmentation.models import Chapter, SegmentationResult


def render_chapter_html(chapter: Chapter) -> str:
    """Render one chapter as a heading followed by its paragraphs."""
    parts = [f"<h2>{escape(chapter.title)}</h2>"]
    parts.extend(f"<p>{escape(block)}</p>" for block in chapter.blocks)
    return "\n\n".join(parts)


def render_html(result: SegmentationResult, document_title: str | None = None) -> str:
    """Render a segmentation result as editor HTML.

    Args:
        result: Segmentation result.
        document_title: Optional ``<h1>`` heading (usually the file name).

    Returns:
        HTML fragment with chapters separated by blank lines.
    """
    parts = []
    if document_title:
        parts.append(f"<h1>{escape(document_title)}</h1>")
    parts.extend(render_chapter_html(ch) for ch in result.chapters)
    return "\n\n".join(parts) + "\n"
