"""Shared utilities for CLI commands."""

import functools
import io
import logging
from collections.abc import Callable
from typing import Any, TypeVar

import typer
from rich.console import Console
from rich.logging import RichHandler

from chaptercut.config.settings import SegmentationSettings, get_settings
from chaptercut.exceptions import ChaptercutError
from chaptercut.segmentation.lexicon import get_lexicons

# Type variable for decorators
F = TypeVar("F", bound=Callable[..., Any])

# Context storage for flags
_context: dict[str, Any] = {"verbose": False, "quiet": 0}


def set_context(verbose: bool = False, quiet: int = 0) -> None:
    """Set global context values."""
    _context["verbose"] = verbose
    _context["quiet"] = quiet


def get_context_value(key: str, default: Any = None) -> Any:
    """Get a value from the context."""
    return _context.get(key, default)


def get_console() -> Console:
    """Get a Console instance respecting quiet mode.

    Returns a null console when quiet mode is enabled.
    """
    if is_quiet():
        return Console(file=io.StringIO(), stderr=True)
    return Console(stderr=True)


def is_quiet() -> bool:
    """Check if quiet mode is enabled (-q or --silent)."""
    quiet_val = get_context_value("quiet", 0)
    if isinstance(quiet_val, bool):
        return quiet_val
    return bool(quiet_val >= 1)


def is_silent() -> bool:
    """Check if silent mode is enabled.

    In silent mode, even errors are suppressed (exit code only).
    """
    quiet_val = get_context_value("quiet", 0)
    if isinstance(quiet_val, bool):
        return False
    return bool(quiet_val >= 2)


def is_verbose() -> bool:
    """Check if verbose mode is enabled (-v)."""
    return bool(get_context_value("verbose", False))


def configure_logging(verbose: bool) -> None:
    """Route library log records to stderr through Rich.

    Only verbose runs show engine logs; otherwise warnings and above.
    """
    root = logging.getLogger("chaptercut")
    root.handlers = [RichHandler(console=Console(stderr=True), show_path=False)]
    root.setLevel(logging.DEBUG if verbose else logging.WARNING)
    root.propagate = False


def resolve_settings(
    languages: list[str] | None = None,
    max_block_length: int | None = None,
) -> SegmentationSettings:
    """Apply command-line overrides on top of configured settings.

    Raises:
        UnknownLanguageError: If a language has no lexicon.
    """
    base = get_settings().segmentation
    overrides: dict[str, Any] = {}
    if languages:
        overrides["languages"] = [lex.code for lex in get_lexicons(languages)]
    if max_block_length is not None:
        if max_block_length <= 0:
            raise typer.BadParameter("must be positive", param_hint="--max-block-length")
        overrides["max_block_length"] = max_block_length
    if not overrides:
        return base
    return SegmentationSettings.model_validate({**base.model_dump(), **overrides})


def handle_errors(func: F) -> F:
    """Decorator for consistent CLI error handling.

    Catches common exceptions and displays user-friendly error messages
    instead of raw Python tracebacks. Respects --verbose and --quiet flags.

    Quiet levels:
    - -q: Suppress status messages, show errors with hints
    - --silent: Suppress everything (exit code only)
    """

    @functools.wraps(func)
    def wrapper(*args: Any, **kwargs: Any) -> Any:
        err_console = get_console()
        verbose = is_verbose()
        silent = is_silent()

        try:
            return func(*args, **kwargs)
        except ChaptercutError as e:
            if not silent:
                if verbose:
                    err_console.print_exception()
                else:
                    err_console.print(f"[red]Error:[/red] {e.message}")
                    if e.details:
                        err_console.print(f"[dim]{e.details}[/dim]")
                    if e.hint:
                        err_console.print(f"[dim]Hint: {e.hint}[/dim]")
            raise typer.Exit(e.exit_code)
        except FileNotFoundError as e:
            if not silent:
                if verbose:
                    err_console.print_exception()
                else:
                    filename = getattr(e, "filename", None) or str(e)
                    err_console.print(f"[red]File not found:[/red] {filename}")
            raise typer.Exit(1)
        except PermissionError as e:
            if not silent:
                if verbose:
                    err_console.print_exception()
                else:
                    filename = getattr(e, "filename", None) or str(e)
                    err_console.print(f"[red]Permission denied:[/red] {filename}")
            raise typer.Exit(1)
        except IsADirectoryError as e:
            if not silent:
                if verbose:
                    err_console.print_exception()
                else:
                    filename = getattr(e, "filename", None) or str(e)
                    err_console.print(f"[red]Expected file, got directory:[/red] {filename}")
            raise typer.Exit(1)
        except KeyboardInterrupt:
            if not silent:
                err_console.print("\n[yellow]Interrupted[/yellow]")
            raise typer.Exit(130)
        except typer.Exit:
            raise
        except typer.BadParameter:
            raise
        except Exception as e:
            if not silent:
                if verbose:
                    err_console.print_exception()
                else:
                    err_console.print(f"[red]Unexpected error:[/red] {type(e).__name__}: {e}")
            raise typer.Exit(1)

    return wrapper  # type: ignore[return-value]
