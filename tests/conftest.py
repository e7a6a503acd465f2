"""Pytest fixtures for Chaptercut tests."""

import logging

import pytest
from typer.testing import CliRunner

from chaptercut.config.settings import get_settings


@pytest.fixture
def cli_runner():
    """Typer CLI test runner."""
    return CliRunner()


@pytest.fixture(autouse=True)
def isolated_settings(tmp_path, monkeypatch):
    """Keep tests away from the user's ~/.chaptercut/config.yaml."""
    config_path = tmp_path / "config" / "config.yaml"
    config_path.parent.mkdir()
    monkeypatch.setattr("chaptercut.config.settings.get_config_path", lambda: config_path)
    get_settings.cache_clear()
    yield config_path
    get_settings.cache_clear()

    # The CLI callback installs its own handler; undo it for caplog
    logger = logging.getLogger("chaptercut")
    logger.handlers = []
    logger.setLevel(logging.NOTSET)
    logger.propagate = True


@pytest.fixture
def two_chapters_text() -> str:
    """Two explicit chapter markers, one body paragraph each."""
    return "Chapter 1\n\nHello world.\n\nChapter 2\n\nGoodbye world."


@pytest.fixture
def novel_text() -> str:
    """A short novel excerpt with an untitled opening and subtitles."""
    return (
        "It was a bright cold day in April, and the clocks were striking thirteen.\n\n"
        "Chapter 1\n\n"
        "The Beginning\n\n"
        "Winston Smith slipped quickly through the glass doors of Victory Mansions.\n\n"
        "The hallway smelt of boiled cabbage and old rag mats.\n\n"
        "Chapter 2\n\n"
        "Outside, even through the shut window-pane, the world looked cold."
    )


@pytest.fixture
def long_paragraph() -> str:
    """One paragraph of ten sentences, 197 characters each."""
    sentences = [f"Sentence {i} " + "x" * 185 + "." for i in range(10)]
    return " ".join(sentences)


@pytest.fixture
def untitled_long_text() -> str:
    """Six untitled paragraphs of 1500 words each."""
    paragraph = " ".join(["lorem"] * 1499) + " end."
    return "\n\n".join([paragraph] * 6)
