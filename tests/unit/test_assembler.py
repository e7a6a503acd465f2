"""Tests for folding classified paragraphs into chapters."""

from chaptercut.segmentation.assembler import (
    AssemblyState,
    advance,
    assemble,
    finish,
    push,
    unwind,
)
from chaptercut.segmentation.models import BoundaryVerdict, TitleKind

TITLE = BoundaryVerdict.TITLE
BODY = BoundaryVerdict.BODY


def _classify(paragraph: str) -> BoundaryVerdict:
    """Headings are marked with a leading '#' in these tests."""
    return TITLE if paragraph.startswith("#") else BODY


def _chunk(paragraph: str) -> list[str]:
    return [paragraph]


def _feed(*paragraphs: str, state: AssemblyState | None = None) -> AssemblyState:
    """Advance a state through paragraphs one step at a time."""
    state = state or AssemblyState()
    for paragraph in paragraphs:
        state = advance(state, paragraph, _classify(paragraph), _chunk)
    return state


def _titles(outcome) -> list[str]:
    return [ch.title for ch in outcome.chapters]


class TestStack:
    """Tests for the persistent block stack."""

    def test_unwind_oldest_first(self):
        stack = push(push(None, ["a", "b"]), ["c"])
        assert unwind(stack) == ["a", "b", "c"]

    def test_empty_push_keeps_stack(self):
        stack = push(None, ["a"])
        assert push(stack, []) is stack
        assert push(None, []) is None

    def test_push_shares_earlier_items(self):
        """Appending a block does not copy the blocks before it."""
        before = _feed("a.", "b.")
        after = advance(before, "c.", BODY, _chunk)

        assert after.block_stack.below is before.block_stack
        assert before.blocks == ("a.", "b.")
        assert after.blocks == ("a.", "b.", "c.")


class TestAdvance:
    """Tests for single fold steps."""

    def test_body_appends_blocks(self):
        state = advance(AssemblyState(), "Hello.", BODY, _chunk)
        assert state.blocks == ("Hello.",)
        assert state.title is None

    def test_body_uses_chunker(self):
        state = advance(AssemblyState(), "A. B.", BODY, lambda p: p.split(" "))
        assert state.blocks == ("A.", "B.")

    def test_title_opens_chapter(self):
        state = advance(AssemblyState(), "# One", TITLE, _chunk)
        assert state.title == "# One"
        assert state.blocks == ()
        assert state.sealed == ()
        assert state.chapter_count == 1
        assert state.any_title_detected

    def test_title_seals_previous_chapter(self):
        state = _feed("# One", "Body.", "# Two")

        assert [ch.title for ch in state.sealed] == ["# One"]
        assert state.sealed[0].blocks == ["Body."]
        assert state.title == "# Two"
        assert state.blocks == ()
        assert state.chapter_count == 2

    def test_title_after_preface_seals_placeholder(self):
        """Untitled leading content is numbered ahead of the first title."""
        state = _feed("Preface.", "# One")

        assert state.sealed[0].title == "Chapter 0"
        assert state.sealed[0].title_kind is TitleKind.PLACEHOLDER
        assert state.sealed[0].blocks == ["Preface."]

    def test_title_under_empty_title_becomes_content(self):
        """A heading right after a heading is the first block."""
        state = _feed("# One", "# Subtitle")

        assert state.title == "# One"
        assert state.blocks == ("# Subtitle",)
        assert state.chapter_count == 1

    def test_state_is_not_mutated(self):
        initial = AssemblyState()
        advance(initial, "Hello.", BODY, _chunk)
        assert initial == AssemblyState()
        assert initial.blocks == ()


class TestFinish:
    """Tests for sealing the last chapter."""

    def test_seals_open_chapter(self):
        outcome = finish(_feed("# One", "Body."), _chunk)
        assert _titles(outcome) == ["# One"]

    def test_trailing_title_joins_previous_chapter(self):
        outcome = finish(_feed("# One", "Body.", "# Two"), _chunk)

        assert _titles(outcome) == ["# One"]
        assert outcome.chapters[0].blocks == ["Body.", "# Two"]

    def test_trailing_title_is_chunked(self):
        state = _feed("# One", "Body.", "# Two. Three.")
        outcome = finish(state, lambda p: p.split(" "))
        assert outcome.chapters[0].blocks[-2:] == ["# Two.", "Three."]

    def test_lone_title_yields_nothing(self):
        outcome = finish(_feed("# One"), _chunk)
        assert outcome.chapters == ()
        assert outcome.chapter_count == 1


class TestAssemble:
    """Tests for the full fold."""

    def test_two_chapters(self):
        outcome = assemble(["# One", "a.", "# Two", "b."], _classify, _chunk)

        assert _titles(outcome) == ["# One", "# Two"]
        assert [ch.blocks for ch in outcome.chapters] == [["a."], ["b."]]
        assert outcome.any_title_detected
        assert outcome.chapter_count == 2

    def test_no_titles_single_placeholder(self):
        outcome = assemble(["a.", "b.", "c."], _classify, _chunk)

        assert _titles(outcome) == ["Chapter 1"]
        assert outcome.chapters[0].blocks == ["a.", "b.", "c."]
        assert not outcome.any_title_detected

    def test_preface_numbered_before_first_title(self):
        """A preface does not share its placeholder with the next chapter."""
        outcome = assemble(["a.", "# One", "b."], _classify, _chunk)
        assert _titles(outcome) == ["Chapter 0", "# One"]

    def test_placeholder_word(self):
        outcome = assemble(["a."], _classify, _chunk, placeholder_word="Capítulo")
        assert _titles(outcome) == ["Capítulo 1"]

    def test_consecutive_titles(self):
        outcome = assemble(["# One", "# Two"], _classify, _chunk)

        assert _titles(outcome) == ["# One"]
        assert outcome.chapters[0].blocks == ["# Two"]
        assert outcome.chapter_count == 1

    def test_empty_titled_chapters_are_dropped(self):
        """A chapter never ends up without blocks."""
        outcome = assemble(["# One", "a.", "# Two", "# Three", "# Four"], _classify, _chunk)

        assert _titles(outcome) == ["# One", "# Two"]
        assert outcome.chapters[1].blocks == ["# Three", "# Four"]
        assert outcome.chapters[0].blocks == ["a."]
        assert all(ch.blocks for ch in outcome.chapters)

    def test_empty_input(self):
        outcome = assemble([], _classify, _chunk)
        assert outcome.chapters == ()
        assert not outcome.any_title_detected

    def test_paragraph_order_preserved(self):
        paragraphs = ["intro.", "# A", "a1.", "a2.", "# B", "# B2", "b1.", "# C"]
        outcome = assemble(paragraphs, _classify, _chunk)

        flattened = []
        for ch in outcome.chapters:
            if ch.title_kind is TitleKind.DETECTED:
                flattened.append(ch.title)
            flattened.extend(ch.blocks)
        assert flattened == paragraphs
