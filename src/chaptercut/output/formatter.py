"""Output formatter with JSON/pretty modes and TTY detection."""

import io
import json
import sys
from dataclasses import dataclass, field
from typing import Any

from rich.console import Console
from rich.table import Table

def _preview(text: str, limit: int) -> str:
    """Single-line preview of a block."""
    flat = " ".join(text.split())
    return flat if len(flat) <= limit else flat[:limit] + "..."


@dataclass
class OutputFormatter:
    """Handles output formatting with JSON/pretty modes.

    Auto-detects TTY for default mode:
    - TTY (terminal): Pretty formatted output with colors
    - Non-TTY (pipe/redirect): JSON output for machine consumption

    Supports quiet mode to suppress all output.
    """

    force_json: bool = False
    force_pretty: bool = False
    quiet: bool = False
    preview_chars: int = 80
    _console: Console | None = field(default=None, repr=False)

    def __post_init__(self) -> None:
        if self._console is None:
            if self.quiet:
                # Null console - discards output
                self._console = Console(file=io.StringIO())
            else:
                self._console = Console()

    @property
    def console(self) -> Console:
        """Get the console instance (guaranteed non-None after init)."""
        assert self._console is not None
        return self._console

    @property
    def use_json(self) -> bool:
        """Determine if JSON output should be used."""
        if self.force_json:
            return True
        if self.force_pretty:
            return False
        # Auto-detect: JSON if stdout is not a TTY
        return not sys.stdout.isatty()

    def output(self, data: dict[str, Any]) -> None:
        """Output data in appropriate format.

        Args:
            data: Dictionary to output.
        """
        if self.quiet:
            return  # Suppress all output in quiet mode

        if self.use_json:
            self._output_json(data)
        else:
            self._output_pretty_default(data)

    def _output_json(self, data: dict[str, Any]) -> None:
        """Output as JSON."""
        print(json.dumps(data, indent=2, ensure_ascii=False))

    def _output_pretty_default(self, data: dict[str, Any]) -> None:
        """Default pretty output using Rich."""
        if "chapters" in data:
            self._output_chapters(data)
        elif "verdict" in data:
            self._output_verdict(data)
        elif "rules" in data:
            self._output_rules(data)
        else:
            # Fallback to JSON for unknown structures
            self._output_json(data)

    def _output_chapters(self, data: dict[str, Any]) -> None:
        """Output segmented chapters."""
        self.console.print(f"\n[bold]{data.get('file', 'Document')}[/bold]")
        self.console.print(
            f"[dim]Words: {data.get('total_words', 0):,} | "
            f"Paragraphs: {data.get('paragraph_count', 0):,} | "
            f"Pages (approx.): {data.get('estimated_pages', 0):,} | "
            f"Strategy: {data.get('strategy', '?')}[/dim]\n"
        )

        chapters = data.get("chapters", [])
        self.console.print(f"[bold]Chapters ({len(chapters)}):[/bold]")

        table = Table(show_header=True, header_style="bold")
        table.add_column("ID", style="cyan", width=4)
        table.add_column("Title")
        table.add_column("Source", style="dim", width=12)
        table.add_column("Blocks", justify="right", width=7)
        table.add_column("Words", justify="right", width=8)

        for ch in chapters:
            table.add_row(
                str(ch.get("id", "")),
                ch.get("title", ""),
                ch.get("title_kind", ""),
                str(ch.get("block_count", 0)),
                f"{ch.get('word_count', 0):,}",
            )

        self.console.print(table)

        # Block previews, only present with --blocks
        for ch in chapters:
            blocks = ch.get("blocks")
            if not blocks:
                continue
            self.console.print(f"\n[bold cyan]#{ch.get('id')}[/bold cyan] [bold]{ch.get('title', '')}[/bold]")
            for i, block in enumerate(blocks, 1):
                self.console.print(f"  [dim]{i:>3}[/dim] {_preview(block, self.preview_chars)}")

    def _output_verdict(self, data: dict[str, Any]) -> None:
        """Output a single paragraph classification."""
        verdict = data.get("verdict", "body")
        style = "green" if verdict == "title" else "yellow"
        self.console.print(f"[{style}]{verdict.upper()}[/{style}] {_preview(data.get('text', ''), self.preview_chars)}")
        if data.get("rule"):
            self.console.print(f"[dim]Rule: {data['rule']} ({data.get('kind', '')}) - {data.get('description', '')}[/dim]")
        else:
            self.console.print("[dim]No rule matched[/dim]")

    def _output_rules(self, data: dict[str, Any]) -> None:
        """Output the boundary rule table."""
        rules = data.get("rules", [])
        self.console.print(f"\n[bold]Boundary rules ({len(rules)}):[/bold]")
        self.console.print(f"[dim]Languages: {', '.join(data.get('languages', []))}[/dim]\n")

        table = Table(show_header=True, header_style="bold")
        table.add_column("Priority", justify="right", width=8)
        table.add_column("Name", style="cyan")
        table.add_column("Kind", width=10)
        table.add_column("Period", justify="center", width=6)
        table.add_column("Description")

        for rule in rules:
            table.add_row(
                str(rule.get("priority", "")),
                rule.get("name", ""),
                rule.get("kind", ""),
                "yes" if rule.get("allows_period") else "",
                rule.get("description", ""),
            )

        self.console.print(table)


def get_formatter(
    json_flag: bool = False,
    pretty_flag: bool = False,
    quiet: bool = False,
    preview_chars: int = 80,
) -> OutputFormatter:
    """Get an output formatter with the specified flags.

    Args:
        json_flag: Force JSON output.
        pretty_flag: Force pretty output.
        quiet: Suppress all output.
        preview_chars: Characters shown per block preview.

    Returns:
        Configured OutputFormatter instance.
    """
    return OutputFormatter(
        force_json=json_flag,
        force_pretty=pretty_flag,
        quiet=quiet,
        preview_chars=preview_chars,
    )
