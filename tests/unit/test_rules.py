"""Tests for boundary rules and paragraph classification."""

import pytest

from chaptercut.config.settings import SegmentationSettings
from chaptercut.segmentation.lexicon import ENGLISH, SPANISH
from chaptercut.segmentation.models import BoundaryVerdict
from chaptercut.segmentation.rules import (
    BoundaryClassifier,
    RuleKind,
    build_rules,
    has_sentence_period,
)


@pytest.fixture
def classifier() -> BoundaryClassifier:
    """Classifier with the default English and Spanish rules."""
    return BoundaryClassifier()


def _rule_name(classifier: BoundaryClassifier, paragraph: str) -> str | None:
    rule = classifier.match_rule(paragraph)
    return rule.name if rule else None


class TestRuleTable:
    """Tests for the shape of the rule table."""

    def test_rules_sorted_by_priority(self):
        priorities = [rule.priority for rule in build_rules()]
        assert priorities == sorted(priorities)
        assert len(set(priorities)) == len(priorities)

    def test_rule_names_unique(self):
        names = [rule.name for rule in build_rules()]
        assert len(set(names)) == len(names)

    def test_structural_rules_come_first(self):
        """Heuristic rules only run after every structural rule."""
        kinds = [rule.kind for rule in build_rules()]
        first_heuristic = kinds.index(RuleKind.HEURISTIC)
        assert all(kind is RuleKind.STRUCTURAL for kind in kinds[:first_heuristic])
        assert all(kind is RuleKind.HEURISTIC for kind in kinds[first_heuristic:])

    def test_classifier_sorts_custom_rules(self):
        """Rules passed out of order are evaluated by priority."""
        rules = list(reversed(build_rules()))
        classifier = BoundaryClassifier(rules=rules)
        assert classifier.rules[0].name == "chapter_marker"


class TestSentencePeriod:
    """Tests for sentence-ending period detection."""

    def test_period_before_space(self):
        assert has_sentence_period("It ends. Then more")

    def test_period_at_end(self):
        assert has_sentence_period("It ends.")

    def test_decimal_and_abbreviation_periods(self):
        """Periods inside numbers or initialisms do not end a sentence."""
        assert not has_sentence_period("Section 2.1 Methods")
        assert not has_sentence_period("The U.S Constitution")


class TestStructuralRules:
    """Tests for structural title rules."""

    @pytest.mark.parametrize(
        "paragraph",
        ["Chapter 3", "CHAPTER IV", "Part II", "Section 2.1 Methods", "Capítulo 7", "Sección 2"],
    )
    def test_chapter_markers(self, classifier, paragraph):
        """Chapter, part and section keywords followed by a number."""
        assert _rule_name(classifier, paragraph) == "chapter_marker"

    @pytest.mark.parametrize("paragraph", ["Cap. 3", "Sec. 2", "CAP IV", "sec 4", "Cap. 12 La llegada"])
    def test_abbreviated_markers(self, classifier, paragraph):
        """Abbreviated markers count, with or without their period."""
        assert _rule_name(classifier, paragraph) == "chapter_marker"
        assert classifier.classify(paragraph) is BoundaryVerdict.TITLE

    def test_abbreviation_period_does_not_excuse_prose(self, classifier):
        assert classifier.classify("Cap. 3 begins here. It continues.") is BoundaryVerdict.BODY

    def test_marker_needs_number(self, classifier):
        """A word starting with a marker is not a marker."""
        assert _rule_name(classifier, "Partly sunny skies are expected") != "chapter_marker"
        assert _rule_name(classifier, "Capital 3") != "chapter_marker"
        assert _rule_name(classifier, "Second 2 runners") != "chapter_marker"

    @pytest.mark.parametrize(
        ("paragraph", "expected"),
        [
            ("1. Introduction to the problem", "numbered_heading"),
            ("2.1 Data collection", "outline_number"),
            ("IV. Results and discussion", "roman_heading"),
            ("3. the results were inconclusive", "numeric_prefix"),
            ("Introduction", "academic_section"),
            ("Resultados y discusión", "academic_section"),
            ("Figure 3: Distribution of responses", "caption"),
            ("Figure 3. Distribution of responses.", "caption"),
            ("1 THE LONG ROAD HOME AGAIN", "numbered_caps_title"),
            ("THE DECLINE AND FALL OF EMPIRES", "caps_heading"),
            ("LA HISTORIA DE ESPAÑA MODERNA", "caps_heading"),
            ("The Decline and Fall of Empires", "title_case_heading"),
        ],
    )
    def test_rule_matched(self, classifier, paragraph, expected):
        assert _rule_name(classifier, paragraph) == expected
        assert classifier.classify(paragraph) is BoundaryVerdict.TITLE

    def test_sentence_period_blocks_marker(self, classifier):
        """A chapter marker followed by prose is body text."""
        paragraph = "Chapter 3 begins here. It continues."
        assert classifier.classify(paragraph) is BoundaryVerdict.BODY

    def test_over_long_paragraph_skips_structural_rules(self, classifier):
        """Structural rules ignore paragraphs longer than the title bound."""
        paragraph = "Chapter 1 " + "x" * 400
        assert classifier.classify(paragraph) is BoundaryVerdict.BODY

    def test_title_length_bound_is_inclusive(self):
        """A paragraph exactly at the bound can still be a title."""
        classifier = BoundaryClassifier(max_title_length=30)
        paragraph = "Chapter 1 " + "x" * 20
        assert len(paragraph) == 30
        assert _rule_name(classifier, paragraph) == "chapter_marker"

    def test_roman_numerals_are_upper_case(self, classifier):
        """Lower-case letters are not read as roman numerals."""
        assert _rule_name(classifier, "Part vi") is None
        assert _rule_name(classifier, "Part VI") == "chapter_marker"


class TestHeuristicRules:
    """Tests for the fallback heuristics."""

    def test_all_caps(self):
        """All-caps paragraphs fall back to the all_caps heuristic."""
        heuristics = [rule for rule in build_rules() if rule.kind is RuleKind.HEURISTIC]
        classifier = BoundaryClassifier(rules=heuristics)
        assert _rule_name(classifier, "INTRODUCTION TO THE STUDY OF LIGHT") == "all_caps"

    def test_academic_caps_heading_is_structural(self, classifier):
        """Academic keywords win over the all-caps heuristic."""
        assert _rule_name(classifier, "INTRODUCTION TO THE STUDY OF LIGHT") == "academic_section"

    def test_unterminated_phrase(self, classifier):
        """A short phrase without closing punctuation reads as a heading."""
        assert _rule_name(classifier, "The pen is mightier than the sword") == "unterminated_phrase"

    def test_unterminated_phrase_needs_four_words(self, classifier):
        assert classifier.classify("Some quiet evening") is BoundaryVerdict.BODY

    def test_numbered_phrase(self, classifier):
        paragraph = "42 Reasons why the project failed, according to the final audit report."
        assert _rule_name(classifier, paragraph) == "numbered_phrase"


class TestBodyText:
    """Tests for paragraphs that must stay body text."""

    @pytest.mark.parametrize(
        "paragraph",
        [
            "It was a bright cold day in April, and the clocks were striking thirteen.",
            "Hello world.",
            "Hi there",
            "ABC",
            "",
            "Did the experiment work?",
        ],
    )
    def test_body(self, classifier, paragraph):
        assert classifier.classify(paragraph) is BoundaryVerdict.BODY

    def test_short_paragraph_only_checks_markers(self, classifier):
        """Below the minimum length, only chapter markers can fire."""
        assert classifier.classify("ABSTRACT") is BoundaryVerdict.BODY
        assert classifier.classify("Part I") is BoundaryVerdict.TITLE


class TestLanguages:
    """Tests for language-specific keyword tables."""

    def test_spanish_only_ignores_english_markers(self):
        classifier = BoundaryClassifier(rules=build_rules([SPANISH]))
        assert classifier.classify("Chapter 3") is BoundaryVerdict.BODY
        assert classifier.classify("Capítulo 3") is BoundaryVerdict.TITLE

    def test_english_only_ignores_spanish_markers(self):
        classifier = BoundaryClassifier(rules=build_rules([ENGLISH]))
        assert classifier.classify("Capítulo 3") is BoundaryVerdict.BODY
        assert classifier.classify("Cap. 3") is BoundaryVerdict.BODY
        assert classifier.classify("Sec. 3") is BoundaryVerdict.TITLE

    def test_from_settings(self):
        settings = SegmentationSettings(languages=["es"], min_title_length=5, max_title_length=50)
        classifier = BoundaryClassifier.from_settings(settings)
        assert classifier.min_length == 5
        assert classifier.max_title_length == 50
        assert classifier.classify("Chapter 3") is BoundaryVerdict.BODY


class TestDeterminism:
    """Classification is a pure function of the paragraph."""

    def test_same_verdict_every_time(self, classifier):
        paragraph = "The Decline and Fall of Empires"
        verdicts = {classifier.classify(paragraph) for _ in range(5)}
        assert verdicts == {BoundaryVerdict.TITLE}
