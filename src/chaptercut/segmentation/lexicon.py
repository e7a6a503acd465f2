"""Per-language keyword tables for heading detection.

Each lexicon lists the words that mark structural headings in one language
and the words used for placeholder titles. Several lexicons can be active at
once; their keywords are merged and the first one supplies placeholders.
"""

from __future__ import annotations

from dataclasses import dataclass

from chaptercut.exceptions import ConfigError, UnknownLanguageError


@dataclass(frozen=True)
class Lexicon:
    """Keywords for one language."""

    code: str
    chapter_markers: tuple[str, ...]
    part_markers: tuple[str, ...]
    section_markers: tuple[str, ...]
    academic_sections: tuple[str, ...]
    caption_words: tuple[str, ...]
    chapter_word: str
    section_word: str
    full_document_title: str
    minor_words: tuple[str, ...] = ()
    extra_uppercase: str = ""

    @property
    def structural_markers(self) -> tuple[str, ...]:
        """Chapter, part and section markers together."""
        return self.chapter_markers + self.part_markers + self.section_markers


ENGLISH = Lexicon(
    code="en",
    chapter_markers=("chapter",),
    part_markers=("part",),
    section_markers=("section", "sec"),
    academic_sections=(
        "introduction",
        "abstract",
        "conclusion",
        "references",
        "bibliography",
        "methodology",
        "results",
        "discussion",
        "theoretical framework",
        "state of the art",
        "background",
        "proposal",
    ),
    caption_words=("figure", "table"),
    chapter_word="Chapter",
    section_word="Section",
    full_document_title="Full Document",
    minor_words=(
        "a", "an", "and", "as", "at", "but", "by", "for", "from",
        "in", "into", "of", "on", "or", "the", "to", "with",
    ),
)

SPANISH = Lexicon(
    code="es",
    chapter_markers=("capítulo", "cap"),
    part_markers=("parte",),
    section_markers=("sección", "sec"),
    academic_sections=(
        "introducción",
        "resumen",
        "conclusión",
        "referencias",
        "bibliografía",
        "metodología",
        "resultados",
        "discusión",
        "marco teórico",
        "estado del arte",
        "antecedentes",
        "propuesta",
    ),
    caption_words=("figura", "tabla"),
    chapter_word="Capítulo",
    section_word="Sección",
    full_document_title="Documento Completo",
    minor_words=(
        "a", "al", "con", "de", "del", "el", "en", "la", "las",
        "lo", "los", "o", "para", "por", "un", "una", "y",
    ),
    extra_uppercase="ÁÉÍÓÚÑÜ",
)

LEXICONS: dict[str, Lexicon] = {lex.code: lex for lex in (ENGLISH, SPANISH)}


def get_lexicon(code: str) -> Lexicon:
    """Look up a lexicon by language code.

    Raises:
        UnknownLanguageError: If no lexicon exists for the code.
    """
    try:
        return LEXICONS[code.lower()]
    except KeyError:
        raise UnknownLanguageError(code, supported=sorted(LEXICONS)) from None


def get_lexicons(codes: list[str] | tuple[str, ...]) -> tuple[Lexicon, ...]:
    """Resolve language codes in order, dropping duplicates."""
    seen: dict[str, Lexicon] = {}
    for code in codes:
        lexicon = get_lexicon(code)
        seen.setdefault(lexicon.code, lexicon)
    if not seen:
        raise ConfigError(
            "At least one language is required",
            hint=f"Supported languages: {', '.join(sorted(LEXICONS))}",
        )
    return tuple(seen.values())
