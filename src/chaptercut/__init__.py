"""Chaptercut: Rebuild chapter structure from plain text.

Given text extracted from an imported document (a plain-text file, or
text lifted from a PDF page by page), Chaptercut reconstructs chapters:
titles plus ordered content blocks ready for a structured editor.

Simple API:
    >>> from chaptercut import segment
    >>>
    >>> result = segment("Chapter 1\\n\\nHello world.\\n\\nChapter 2\\n\\nGoodbye world.")
    >>> [ch.title for ch in result.chapters]
    ['Chapter 1', 'Chapter 2']

Advanced usage (for more control):
    >>> from chaptercut import Segmenter, SegmentationSettings
    >>>
    >>> segmenter = Segmenter(SegmentationSettings(languages=["es"], max_block_length=600))
    >>> result = segmenter.segment(text)
"""

__version__ = "1.0.0"

# Exceptions
from chaptercut.exceptions import (
    ChaptercutError,
    ConfigError,
    DecodeError,
    EmptyInputError,
    InputError,
    UnknownLanguageError,
)

# Configuration
from chaptercut.config.settings import SegmentationSettings, Settings, get_settings

# Segmentation engine
from chaptercut.segmentation import (
    BoundaryClassifier,
    BoundaryRule,
    BoundaryVerdict,
    Chapter,
    SegmentationResult,
    SegmentationStrategy,
    Segmenter,
    TitleKind,
    build_rules,
    segment,
)

# Convenience API
from chaptercut.api import load_text, segment_pages
from chaptercut.preprocess import join_pages, normalize_extracted_text

# Output
from chaptercut.output import OutputFormatter, get_formatter, render_html

__all__ = [
    # Version
    "__version__",
    # Exceptions
    "ChaptercutError",
    "InputError",
    "EmptyInputError",
    "DecodeError",
    "ConfigError",
    "UnknownLanguageError",
    # Configuration
    "Settings",
    "SegmentationSettings",
    "get_settings",
    # Engine
    "segment",
    "Segmenter",
    "BoundaryClassifier",
    "BoundaryRule",
    "BoundaryVerdict",
    "build_rules",
    # Models
    "Chapter",
    "SegmentationResult",
    "SegmentationStrategy",
    "TitleKind",
    # Convenience API
    "segment_pages",
    "load_text",
    "join_pages",
    "normalize_extracted_text",
    # Output
    "OutputFormatter",
    "get_formatter",
    "render_html",
]
