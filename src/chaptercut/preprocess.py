"""Text preparation for segmentation.

PDF text extraction yields one string per page with line breaks that carry
no paragraph information. These helpers turn that into the blank-line
separated paragraphs the segmenter understands.
"""

from __future__ import annotations

import re
from collections.abc import Iterable

WHITESPACE_RUN = re.compile(r"\s+")
SENTENCE_END = re.compile(r"([.!?])\s+")


def join_pages(pages: Iterable[str]) -> str:
    """Join per-page text, skipping empty pages.

    Args:
        pages: Text of each page in reading order.

    Returns:
        Pages separated by a blank line.
    """
    return "\n\n".join(page.strip() for page in pages if page and page.strip())


def normalize_extracted_text(text: str) -> str:
    """Re-paragraph text lifted from a PDF.

    Collapses every whitespace run to a single space, then starts a new
    paragraph after each sentence-ending punctuation mark.

    Args:
        text: Extracted text.

    Returns:
        Text with one sentence per paragraph.
    """
    collapsed = WHITESPACE_RUN.sub(" ", text)
    return SENTENCE_END.sub(r"\1\n\n", collapsed).strip()
