"""Main Typer application for Chaptercut CLI."""

import typer
from rich.console import Console

from chaptercut import __version__
from chaptercut.cli.utils import configure_logging, handle_errors, set_context

# Default console for output
console = Console(stderr=True)

app = typer.Typer(
    name="chaptercut",
    help="""Chaptercut: rebuild chapters from plain text.

    [bold]Commands:[/bold]
    segment     Split a text file into titled chapters
    classify    Explain the title verdict for one paragraph
    rules       List the boundary rules in evaluation order
    """,
    no_args_is_help=True,
    rich_markup_mode="rich",
)


def version_callback(value: bool):
    """Print version and exit."""
    if value:
        console.print(f"chaptercut version {__version__}")
        raise typer.Exit()


@app.callback()
def main(
    ctx: typer.Context,
    version: bool | None = typer.Option(
        None,
        "--version",
        "-V",
        callback=version_callback,
        is_eager=True,
        help="Show version and exit.",
    ),
    verbose: bool = typer.Option(
        False,
        "--verbose",
        "-v",
        help="Show engine logs and full tracebacks.",
    ),
    quiet: bool = typer.Option(
        False,
        "--quiet",
        "-q",
        help="Suppress status output; still shows errors.",
    ),
    silent: bool = typer.Option(
        False,
        "--silent",
        help="Completely silent (exit code only).",
    ),
):
    """Chaptercut: rebuild chapters from plain text."""
    # Store flags in context for subcommands
    ctx.ensure_object(dict)
    quiet_level = 2 if silent else 1 if quiet else 0
    ctx.obj["verbose"] = verbose
    ctx.obj["quiet"] = quiet_level

    # Also set global context for modules that can't access typer context
    set_context(verbose=verbose, quiet=quiet_level)
    configure_logging(verbose)


def _setup_commands():
    """Register commands with error handling."""
    from chaptercut.cli import rules_cmd, segment_cmd

    app.command("segment")(handle_errors(segment_cmd.segment))
    app.command("classify")(handle_errors(rules_cmd.classify))
    app.command("rules")(handle_errors(rules_cmd.rules))


_setup_commands()


if __name__ == "__main__":
    app()
