"""Commands for inspecting title detection."""

import typer

from chaptercut.cli.utils import is_quiet, resolve_settings
from chaptercut.output import get_formatter
from chaptercut.segmentation.rules import BoundaryClassifier


def classify(
    text: str = typer.Argument(..., help="Paragraph to classify"),
    languages: list[str] | None = typer.Option(
        None,
        "--language",
        "-l",
        help="Heading keyword language (repeatable): en, es",
    ),
    use_json: bool = typer.Option(False, "--json", help="Force JSON output"),
    pretty: bool = typer.Option(False, "--pretty", help="Force pretty output"),
):
    """Show whether a paragraph would start a new chapter, and why.

    Example:

        chaptercut classify "Chapter 3"
    """
    settings = resolve_settings(languages)
    classifier = BoundaryClassifier.from_settings(settings)
    paragraph = text.strip()
    rule = classifier.match_rule(paragraph)

    data = {
        "success": True,
        "text": paragraph,
        "verdict": classifier.classify(paragraph).value,
        "rule": rule.name if rule else None,
        "kind": rule.kind.value if rule else None,
        "description": rule.description if rule else None,
    }
    get_formatter(json_flag=use_json, pretty_flag=pretty, quiet=is_quiet()).output(data)


def rules(
    languages: list[str] | None = typer.Option(
        None,
        "--language",
        "-l",
        help="Heading keyword language (repeatable): en, es",
    ),
    use_json: bool = typer.Option(False, "--json", help="Force JSON output"),
    pretty: bool = typer.Option(False, "--pretty", help="Force pretty output"),
):
    """List the boundary rules in evaluation order."""
    settings = resolve_settings(languages)
    classifier = BoundaryClassifier.from_settings(settings)

    data = {
        "success": True,
        "languages": settings.languages,
        "rules": [
            {
                "priority": rule.priority,
                "name": rule.name,
                "kind": rule.kind.value,
                "allows_period": rule.allows_period,
                "description": rule.description,
            }
            for rule in classifier.rules
        ],
    }
    get_formatter(json_flag=use_json, pretty_flag=pretty, quiet=is_quiet()).output(data)
