"""Allow ``python -m chaptercut``."""

from chaptercut.cli.app import app

app()
