"""Chapter assembly: fold classified paragraphs into chapters.

The fold state is an immutable value and ``advance`` is a pure transition,
so each step can be tested on its own. Blocks and sealed chapters are kept
in persistent stacks: a step pushes onto the stack it was given and shares
everything below, so a document is assembled in linear time.
"""

from __future__ import annotations

import logging
from collections.abc import Callable, Iterable
from dataclasses import dataclass, field, replace
from functools import reduce
from typing import Any

from chaptercut.segmentation.lexicon import ENGLISH
from chaptercut.segmentation.models import BoundaryVerdict, Chapter, TitleKind

logger = logging.getLogger(__name__)

Chunker = Callable[[str], list[str]]
Classifier = Callable[[str], BoundaryVerdict]


@dataclass(frozen=True, eq=False)
class Frame:
    """One pushed group of items; ``below`` is shared, never copied."""

    items: tuple[Any, ...]
    below: Frame | None = None


def push(stack: Frame | None, items: Iterable[Any]) -> Frame | None:
    """Push a group of items; an empty group leaves the stack unchanged."""
    items = tuple(items)
    return Frame(items, stack) if items else stack


def unwind(stack: Frame | None) -> list[Any]:
    """All items on the stack, oldest first."""
    groups = []
    while stack is not None:
        groups.append(stack.items)
        stack = stack.below
    return [item for group in reversed(groups) for item in group]


@dataclass(frozen=True)
class AssemblyState:
    """Accumulator threaded through the paragraph stream."""

    sealed_stack: Frame | None = None
    title: str | None = None
    block_stack: Frame | None = None
    chapter_count: int = 0
    any_title_detected: bool = False
    placeholder_word: str = field(default=ENGLISH.chapter_word, compare=False)

    @property
    def sealed(self) -> tuple[Chapter, ...]:
        """Chapters closed so far."""
        return tuple(unwind(self.sealed_stack))

    @property
    def blocks(self) -> tuple[str, ...]:
        """Blocks of the chapter in progress."""
        return tuple(unwind(self.block_stack))

    @property
    def has_blocks(self) -> bool:
        return self.block_stack is not None

    def seal(self, number: int) -> AssemblyState:
        """Close the chapter in progress, if it has content.

        An untitled chapter can only open the document, before any title
        was seen. It is named "Chapter ``number``": the engine passes the
        count of titles seen so far, so a preface ahead of "Chapter 1"
        becomes "Chapter 0" and a document with no titles at all becomes
        "Chapter 1".
        """
        if not self.has_blocks:
            return replace(self, title=None)
        if self.title is None:
            chapter = Chapter(
                title=f"{self.placeholder_word} {number}",
                blocks=unwind(self.block_stack),
                title_kind=TitleKind.PLACEHOLDER,
            )
        else:
            chapter = Chapter(title=self.title, blocks=unwind(self.block_stack))
        return replace(
            self,
            sealed_stack=push(self.sealed_stack, (chapter,)),
            title=None,
            block_stack=None,
        )


@dataclass(frozen=True)
class AssemblyOutcome:
    """Chapters from the primary pass plus the fallback gate input."""

    chapters: tuple[Chapter, ...]
    any_title_detected: bool
    chapter_count: int


def advance(
    state: AssemblyState,
    paragraph: str,
    verdict: BoundaryVerdict,
    chunk: Chunker,
) -> AssemblyState:
    """Apply one classified paragraph to the assembly state."""
    if verdict is BoundaryVerdict.BODY:
        return replace(state, block_stack=push(state.block_stack, chunk(paragraph)))

    if state.title is not None and not state.has_blocks:
        # A heading directly under another heading opens its content
        return replace(state, block_stack=push(None, chunk(paragraph)), any_title_detected=True)

    logger.debug(f"Detected chapter: {paragraph[:50]}")
    return replace(
        state.seal(state.chapter_count),
        title=paragraph,
        chapter_count=state.chapter_count + 1,
        any_title_detected=True,
    )


def finish(state: AssemblyState, chunk: Chunker) -> AssemblyOutcome:
    """Seal the last chapter and report the outcome."""
    chapters = state.seal(state.chapter_count + 1).sealed
    if state.title is not None and not state.has_blocks and chapters:
        # Trailing title with nothing under it: keep it with the previous chapter
        last = chapters[-1]
        chapters = chapters[:-1] + (
            last.model_copy(update={"blocks": [*last.blocks, *chunk(state.title)]}),
        )
    return AssemblyOutcome(
        chapters=chapters,
        any_title_detected=state.any_title_detected,
        chapter_count=state.chapter_count,
    )


def assemble(
    paragraphs: Iterable[str],
    classify: Classifier,
    chunk: Chunker,
    placeholder_word: str = ENGLISH.chapter_word,
) -> AssemblyOutcome:
    """Fold paragraphs into chapters.

    Args:
        paragraphs: Paragraphs in document order.
        classify: Paragraph classifier.
        chunk: Splits a body paragraph into content blocks.
        placeholder_word: Word used for an untitled opening chapter.

    Returns:
        Assembled chapters and whether any title was seen.
    """
    initial = AssemblyState(placeholder_word=placeholder_word)
    state = reduce(
        lambda acc, paragraph: advance(acc, paragraph, classify(paragraph), chunk),
        paragraphs,
        initial,
    )
    return finish(state, chunk)
