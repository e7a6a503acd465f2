"""Boundary rules: decide whether a paragraph is a chapter or section title.

Rules are plain records in an ordered table so they can be listed, tested
and reordered on their own. Structural rules recognise explicit cues
(chapter markers, numbered headings, captions) and are gated by length and
by the absence of a sentence-ending period. Heuristic rules only run when
no structural rule fired.
"""

from __future__ import annotations

import logging
import re
from collections.abc import Callable, Iterable
from dataclasses import dataclass
from enum import Enum

from chaptercut.config.settings import MAX_TITLE_LENGTH, MIN_TITLE_LENGTH, SegmentationSettings
from chaptercut.segmentation.lexicon import ENGLISH, SPANISH, Lexicon, get_lexicons
from chaptercut.segmentation.models import BoundaryVerdict

logger = logging.getLogger(__name__)

# A period that ends a sentence, as opposed to "2.1" or "U.S"
SENTENCE_PERIOD = re.compile(r"\.(?:\s|$)")
TERMINAL_PUNCTUATION = (".", "!", "?")
ROMAN = "IVXLCDM"
TITLE_CASE_PUNCTUATION = " ,:;'’-"


class RuleKind(str, Enum):
    """Evaluation stage of a rule."""

    STRUCTURAL = "structural"
    HEURISTIC = "heuristic"


@dataclass(frozen=True)
class BoundaryRule:
    """One title-detection rule."""

    name: str
    kind: RuleKind
    priority: int
    predicate: Callable[[str], bool]
    description: str = ""
    allows_period: bool = False  # Numbering like "1." or "IV." contains periods
    ignores_min_length: bool = False  # "Part I" is shorter than the minimum
    abbreviation: re.Pattern[str] | None = None  # Leading "Cap." whose period is not a sentence end

    def matches(self, paragraph: str) -> bool:
        """Run the predicate alone, without length or period gates."""
        return self.predicate(paragraph)


def has_sentence_period(text: str) -> bool:
    """Check for a period followed by whitespace or the end of text."""
    return SENTENCE_PERIOD.search(text) is not None


def _alternation(words: Iterable[str]) -> str:
    """Case-insensitive alternation, longest first so phrases beat prefixes."""
    ordered = sorted(set(words), key=lambda w: (-len(w), w))
    return "(?i:" + "|".join(re.escape(w) for w in ordered) + ")"


def _abbreviated(rule: BoundaryRule, paragraph: str) -> bool:
    """True when the only sentence periods belong to a leading abbreviation."""
    if rule.abbreviation is None:
        return False
    return not has_sentence_period(rule.abbreviation.sub("", paragraph, count=1))


def _search(pattern: str) -> Callable[[str], bool]:
    compiled = re.compile(pattern)
    return lambda text: compiled.search(text) is not None


def _title_case(minor_words: frozenset[str]) -> Callable[[str], bool]:
    def predicate(text: str) -> bool:
        if not 20 <= len(text) <= 100:
            return False
        if not all(ch.isalpha() or ch in TITLE_CASE_PUNCTUATION for ch in text):
            return False
        words = [w.strip(TITLE_CASE_PUNCTUATION) for w in text.split()]
        words = [w for w in words if w]
        if len(words) < 2 or not words[0][0].isupper():
            return False
        return all(w[0].isupper() for w in words[1:] if w.lower() not in minor_words)

    return predicate


def _all_caps(text: str) -> bool:
    return text.isupper() and 15 < len(text) < 150


def _unterminated_phrase(text: str) -> bool:
    return (
        len(text) < 200
        and not text.endswith(TERMINAL_PUNCTUATION)
        and len(text.split()) > 3
    )


def build_rules(lexicons: Iterable[Lexicon] = (ENGLISH, SPANISH)) -> tuple[BoundaryRule, ...]:
    """Build the ordered rule table for a set of languages.

    Args:
        lexicons: Active keyword lexicons.

    Returns:
        Rules sorted by priority (lowest number is evaluated first).
    """
    lexicons = tuple(lexicons)
    upper = "A-Z" + "".join(dict.fromkeys("".join(lex.extra_uppercase for lex in lexicons)))
    markers = _alternation(m for lex in lexicons for m in lex.structural_markers)
    academic = _alternation(s for lex in lexicons for s in lex.academic_sections)
    captions = _alternation(c for lex in lexicons for c in lex.caption_words)
    minor = frozenset(w for lex in lexicons for w in lex.minor_words)

    rules = [
        BoundaryRule(
            name="chapter_marker",
            kind=RuleKind.STRUCTURAL,
            priority=10,
            predicate=_search(rf"^{markers}\.?\s*(?:\d+|[{ROMAN}]+)\b"),
            description="Chapter, part or section keyword with a number",
            ignores_min_length=True,
            abbreviation=re.compile(rf"^{markers}\."),
        ),
        BoundaryRule(
            name="numbered_heading",
            kind=RuleKind.STRUCTURAL,
            priority=20,
            predicate=_search(rf"^\d+\.\s*[{upper}][^.]{{10,}}"),
            description="Numbered heading such as '1. Introduction'",
            allows_period=True,
        ),
        BoundaryRule(
            name="outline_number",
            kind=RuleKind.STRUCTURAL,
            priority=30,
            predicate=_search(rf"^\d+\.\d+\s*[{upper}]"),
            description="Outline number such as '1.1 Scope'",
            allows_period=True,
        ),
        BoundaryRule(
            name="roman_heading",
            kind=RuleKind.STRUCTURAL,
            priority=40,
            predicate=_search(rf"^[{ROMAN}]+\.\s*[{upper}]"),
            description="Roman-numeral heading such as 'IV. Results'",
            allows_period=True,
        ),
        BoundaryRule(
            name="numeric_prefix",
            kind=RuleKind.STRUCTURAL,
            priority=50,
            predicate=_search(r"^\d+\."),
            description="Any paragraph opening with 'N.'",
            allows_period=True,
        ),
        BoundaryRule(
            name="academic_section",
            kind=RuleKind.STRUCTURAL,
            priority=60,
            predicate=_search(rf"^{academic}\b"),
            description="Known academic section name",
        ),
        BoundaryRule(
            name="caption",
            kind=RuleKind.STRUCTURAL,
            priority=70,
            predicate=_search(rf"^{captions}\s*\d+"),
            description="Figure or table caption",
            allows_period=True,
        ),
        BoundaryRule(
            name="numbered_caps_title",
            kind=RuleKind.STRUCTURAL,
            priority=80,
            predicate=_search(rf"^\d+\s+[{upper}][{upper}\s]{{15,80}}$"),
            description="Number followed by an upper-case title",
        ),
        BoundaryRule(
            name="caps_heading",
            kind=RuleKind.STRUCTURAL,
            priority=90,
            predicate=_search(rf"^[{upper}][{upper}\s]{{20,100}}$"),
            description="Long heading in capitals",
        ),
        BoundaryRule(
            name="title_case_heading",
            kind=RuleKind.STRUCTURAL,
            priority=100,
            predicate=_title_case(minor),
            description="Heading with every significant word capitalised",
        ),
        BoundaryRule(
            name="all_caps",
            kind=RuleKind.HEURISTIC,
            priority=200,
            predicate=_all_caps,
            description="Upper-case paragraph of 16-149 characters",
        ),
        BoundaryRule(
            name="unterminated_phrase",
            kind=RuleKind.HEURISTIC,
            priority=210,
            predicate=_unterminated_phrase,
            description="Short multi-word phrase without closing punctuation",
        ),
        BoundaryRule(
            name="numbered_phrase",
            kind=RuleKind.HEURISTIC,
            priority=220,
            predicate=_search(rf"^\d+\s+[{upper}]"),
            description="Bare number followed by a capitalised word",
        ),
    ]
    return tuple(sorted(rules, key=lambda r: r.priority))


class BoundaryClassifier:
    """Stateless paragraph classifier over an ordered rule table."""

    def __init__(
        self,
        rules: Iterable[BoundaryRule] | None = None,
        min_length: int = MIN_TITLE_LENGTH,
        max_title_length: int = MAX_TITLE_LENGTH,
    ):
        """Initialize the classifier.

        Args:
            rules: Rule table; defaults to English and Spanish rules.
            min_length: Paragraphs shorter than this are body text.
            max_title_length: Upper length bound for structural rules.
        """
        self.rules = tuple(sorted(rules if rules is not None else build_rules(), key=lambda r: r.priority))
        self.min_length = min_length
        self.max_title_length = max_title_length

    @classmethod
    def from_settings(cls, settings: SegmentationSettings) -> BoundaryClassifier:
        """Create a classifier for the configured languages and thresholds."""
        return cls(
            rules=build_rules(get_lexicons(settings.languages)),
            min_length=settings.min_title_length,
            max_title_length=settings.max_title_length,
        )

    def match_rule(self, paragraph: str) -> BoundaryRule | None:
        """Return the first rule that fires for a paragraph, if any."""
        length = len(paragraph)
        too_short = length < self.min_length
        sentence_period = has_sentence_period(paragraph)

        for rule in self.rules:
            if too_short and not rule.ignores_min_length:
                continue
            if rule.kind is RuleKind.STRUCTURAL:
                if length > self.max_title_length:
                    continue
                if sentence_period and not rule.allows_period and not _abbreviated(rule, paragraph):
                    continue
            if rule.predicate(paragraph):
                return rule
        return None

    def classify(self, paragraph: str) -> BoundaryVerdict:
        """Classify a paragraph as a title or body text."""
        rule = self.match_rule(paragraph)
        if rule is None:
            return BoundaryVerdict.BODY
        logger.debug(f"Title by {rule.name}: {paragraph[:50]}")
        return BoundaryVerdict.TITLE
