"""Custom exceptions for Chaptercut.

The segmentation engine itself never raises for text input. These errors
come from the edges: invalid configuration and the CLI's file reading.
"""


class ChaptercutError(Exception):
    """Base exception for all Chaptercut errors."""

    exit_code: int = 1
    default_hint: str | None = None

    def __init__(
        self,
        message: str,
        details: str | None = None,
        hint: str | None = None,
    ):
        self.message = message
        self.details = details
        self.hint = hint or self.default_hint
        super().__init__(message)


# Input errors (20-29)
class InputError(ChaptercutError):
    """Error while reading text to segment."""

    exit_code = 20


class EmptyInputError(InputError):
    """Input file contains no text."""

    exit_code = 21
    default_hint = "Scanned or image-only documents have no text layer to segment"


class DecodeError(InputError):
    """Input file is not decodable text."""

    exit_code = 22
    default_hint = "Extract the text first (e.g. pdftotext) and pass the .txt file"


# Configuration errors (30-39)
class ConfigError(ChaptercutError):
    """Configuration error."""

    exit_code = 30


class UnknownLanguageError(ConfigError):
    """Requested keyword lexicon does not exist."""

    exit_code = 31
    default_hint = "Supported languages: en, es"

    def __init__(self, code: str, supported: list[str] | None = None):
        hint = f"Supported languages: {', '.join(supported)}" if supported else None
        super().__init__(f"Unknown language: {code}", hint=hint)
        self.code = code
