"""Chapter segmentation of plain text.

Pipeline:
1. Split raw text into paragraphs
2. Classify each paragraph as a title or body text
3. Fold the stream into chapters, chunking long paragraphs
4. Fall back to word-count divisions when no titles were found
"""

from chaptercut.segmentation.assembler import (
    AssemblyOutcome,
    AssemblyState,
    advance,
    assemble,
    finish,
)
from chaptercut.segmentation.chunker import chunk_paragraph, sentence_spans
from chaptercut.segmentation.engine import Segmenter, segment
from chaptercut.segmentation.fallback import (
    derive_title,
    fallback_segment,
    plan_chapter_count,
    should_fallback,
)
from chaptercut.segmentation.lexicon import (
    ENGLISH,
    LEXICONS,
    SPANISH,
    Lexicon,
    get_lexicon,
    get_lexicons,
)
from chaptercut.segmentation.models import (
    BoundaryVerdict,
    Chapter,
    SegmentationResult,
    SegmentationStrategy,
    TitleKind,
)
from chaptercut.segmentation.rules import (
    BoundaryClassifier,
    BoundaryRule,
    RuleKind,
    build_rules,
    has_sentence_period,
)
from chaptercut.segmentation.splitter import count_words, split_paragraphs

__all__ = [
    # Engine
    "Segmenter",
    "segment",
    # Models
    "BoundaryVerdict",
    "Chapter",
    "SegmentationResult",
    "SegmentationStrategy",
    "TitleKind",
    # Splitter
    "split_paragraphs",
    "count_words",
    # Classifier
    "BoundaryClassifier",
    "BoundaryRule",
    "RuleKind",
    "build_rules",
    "has_sentence_period",
    # Chunker
    "chunk_paragraph",
    "sentence_spans",
    # Assembler
    "AssemblyState",
    "AssemblyOutcome",
    "advance",
    "assemble",
    "finish",
    # Fallback
    "should_fallback",
    "plan_chapter_count",
    "derive_title",
    "fallback_segment",
    # Lexicons
    "Lexicon",
    "ENGLISH",
    "SPANISH",
    "LEXICONS",
    "get_lexicon",
    "get_lexicons",
]
