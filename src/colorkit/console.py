"""Shared diagnostic console for colorkit."""

from typing import Any

from rich.console import Console
from rich.markup import escape

_console = Console(soft_wrap=True, stderr=True)
_verbose = False
_trace = False


def set_verbose(*, trace: bool = False) -> None:
    """Turn on verbose mode, and optionally trace mode.

    Note: Tests use autouse fixture reset_verbose to clear between tests.
    """
    global _verbose, _trace  # noqa: PLW0603
    _verbose = True
    _trace = trace


def is_verbose() -> bool:
    """Check if verbose mode is enabled."""
    return _verbose


def _print(*args: Any, style: str) -> None:  # noqa: ANN401
    _console.print(*args, style=style)
    _console.file.flush()


def print_verbose(*args: Any) -> None:  # noqa: ANN401
    """Print general verbose messages."""
    if _verbose:
        _print(*args, style="dim")


def print_trace(*args: Any) -> None:  # noqa: ANN401
    """Print renderer decisions, trace mode only."""
    if _trace:
        _print(*args, style="dim")


def print_event(message: str) -> None:
    """Print an event message, verbose mode."""
    if _verbose:
        _print("[bold]>", escape(message), style="magenta")


def print_warning(message: str) -> None:
    """Print a warning, verbose mode."""
    if _verbose:
        _print("[bold]!", escape(message), style="yellow")


def print_error(title: str | None, *args: Any) -> None:  # noqa: ANN401
    """Print an error message, always shown."""
    _print(f"[bold]{title or 'Error:'}", *args, style="red")
