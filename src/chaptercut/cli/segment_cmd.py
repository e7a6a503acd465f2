"""Segment command for rebuilding chapter structure."""

import sys
from pathlib import Path

import typer
from rich.console import Console

from chaptercut.api import load_text
from chaptercut.cli.utils import is_quiet, resolve_settings
from chaptercut.config.settings import get_settings
from chaptercut.exceptions import EmptyInputError
from chaptercut.output import get_formatter, render_html
from chaptercut.preprocess import normalize_extracted_text
from chaptercut.segmentation.engine import Segmenter

console = Console(stderr=True)


def segment(
    source: Path = typer.Argument(..., help="Text file to segment ('-' for stdin)"),
    pdf_text: bool = typer.Option(
        False,
        "--pdf-text",
        help="Treat input as text extracted from a PDF (re-paragraph by sentence)",
    ),
    languages: list[str] | None = typer.Option(
        None,
        "--language",
        "-l",
        help="Heading keyword language (repeatable): en, es",
    ),
    max_block_length: int | None = typer.Option(
        None,
        "--max-block-length",
        help="Maximum characters per content block",
    ),
    show_blocks: bool = typer.Option(
        False,
        "--blocks",
        "-b",
        help="Include content blocks in the output",
    ),
    html_output: Path | None = typer.Option(
        None,
        "--html",
        help="Write editor HTML to this file",
    ),
    use_json: bool = typer.Option(
        False,
        "--json",
        help="Force JSON output",
    ),
    pretty: bool = typer.Option(
        False,
        "--pretty",
        help="Force pretty output",
    ),
):
    """Rebuild the chapter structure of a plain-text document.

    Paragraphs must be separated by blank lines. Text extracted from a PDF
    usually is not; pass --pdf-text to split it into sentences first.

    Examples:

        chaptercut segment thesis.txt

        chaptercut segment book.txt --blocks --pretty

        pdftotext report.pdf - | chaptercut segment - --pdf-text --json

        chaptercut segment tesis.txt -l es --html tesis.html
    """
    settings = resolve_settings(languages, max_block_length)

    if str(source) == "-":
        text = sys.stdin.read()
        if not text.strip():
            raise EmptyInputError("No text received on stdin")
        name = "stdin"
    else:
        text = load_text(source)
        name = source.name

    if pdf_text:
        text = normalize_extracted_text(text)

    result = Segmenter(settings).segment(text)

    if html_output:
        title = Path(name).stem if get_settings().output.html_document_title else None
        html_output.write_text(render_html(result, document_title=title), encoding="utf-8")
        if not is_quiet():
            console.print(f"[green]Saved:[/green] {html_output}")

    formatter = get_formatter(
        json_flag=use_json,
        pretty_flag=pretty,
        quiet=is_quiet(),
        preview_chars=get_settings().output.preview_chars,
    )
    formatter.output(
        {
            "success": True,
            "file": name,
            **result.to_dict(include_blocks=show_blocks),
        }
    )
