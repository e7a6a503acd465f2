"""Paragraph chunker for handling long paragraphs."""

from __future__ import annotations

import re

from chaptercut.config.settings import MAX_BLOCK_LENGTH

# Handles periods, exclamation marks, question marks followed by whitespace
SENTENCE_BREAK = re.compile(r"(?<=[.!?])\s+")


def sentence_spans(paragraph: str) -> list[tuple[int, int]]:
    """Locate sentences as (start, end) offsets into the paragraph.

    Offsets exclude the whitespace between sentences, so slicing the
    paragraph with them reproduces each sentence exactly.
    """
    spans: list[tuple[int, int]] = []
    start = 0
    for match in SENTENCE_BREAK.finditer(paragraph):
        if match.start() > start:
            spans.append((start, match.start()))
        start = match.end()
    if start < len(paragraph):
        spans.append((start, len(paragraph)))
    return spans


def chunk_paragraph(paragraph: str, max_length: int = MAX_BLOCK_LENGTH) -> list[str]:
    """Split a paragraph into blocks of at most ``max_length`` characters.

    Sentences are accumulated greedily and a block is closed before the
    sentence that would push it over the limit. A single sentence longer
    than the limit becomes its own oversized block rather than being cut.

    Args:
        paragraph: Paragraph text.
        max_length: Maximum characters per block.

    Returns:
        Non-empty blocks in sentence order. Each block is a slice of the
        original paragraph, so inner whitespace is kept as-is.
    """
    paragraph = paragraph.strip()
    if not paragraph:
        return []
    if len(paragraph) <= max_length:
        return [paragraph]

    blocks: list[str] = []
    block_start: int | None = None
    block_end = 0

    for start, end in sentence_spans(paragraph):
        if block_start is not None and end - block_start > max_length:
            blocks.append(paragraph[block_start:block_end])
            block_start = start
        elif block_start is None:
            block_start = start
        block_end = end

    if block_start is not None:
        blocks.append(paragraph[block_start:block_end])

    return blocks
