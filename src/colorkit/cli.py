"""Colorkit command line interface.

Render text with ANSI color codes from shell scripts, list the known color
names, or strip color codes from program output.
"""

import io
import sys
from collections.abc import Iterable, Mapping
from pathlib import Path

import typer
from rich.markup import escape

from colorkit.ansi import strip_codes
from colorkit.codes import (
    BG_COLORS,
    EX_BG_COLORS,
    EX_FG_COLORS,
    FG_COLORS,
    OPTIONS,
    Color,
    InvalidCodeError,
    UnknownColorError,
    lookup_color,
    lookup_option,
    parse_codes,
)
from colorkit.compose import join_codes
from colorkit.console import (
    print_error,
    print_event,
    print_verbose,
    print_warning,
    set_verbose,
)
from colorkit.detect import detect_support
from colorkit.renderer import get_renderer

app = typer.Typer()


# ruff: noqa: FBT001 FBT003 Typer API uses boolean arguments for flags
# ruff: noqa: B008 function-call-in-default-argument


TABLES: list[tuple[str, Mapping[str, Color]]] = [
    ("Foreground colors", FG_COLORS),
    ("Extra foreground colors", EX_FG_COLORS),
    ("Background colors", BG_COLORS),
    ("Extra background colors", EX_BG_COLORS),
    ("Options", OPTIONS),
]


@app.callback()
def main(
    verbose: bool = typer.Option(
        False, "-v", "--verbose", help="Show verbose output"
    ),
    trace: bool = typer.Option(
        False, "--trace", help="Show verbose output and renderer decisions"
    ),
    no_color: bool = typer.Option(
        False, "--no-color", help="Disable color output"
    ),
) -> None:
    """Colorkit: render text with ANSI color codes."""
    if verbose or trace:
        set_verbose(trace=trace)
    renderer = get_renderer()
    if no_color:
        renderer.disable()
    print_verbose(
        f"Renderer: enabled={renderer.enabled}"
        f" supported={renderer.supported}"
        f" legacy_console={renderer.legacy_console}"
    )


@app.command()
def render(  # noqa: PLR0913
    text: list[str] = typer.Argument(..., help="Words of the message"),
    fg: str = typer.Option("", "--fg", help="Foreground color name"),
    bg: str = typer.Option("", "--bg", help="Background color name"),
    opt: list[str] | None = typer.Option(
        None, "-o", "--opt", help="Option name, like bold (repeatable)"
    ),
    code: str = typer.Option(
        "", "-c", "--code", help="Raw code string, like 35;1"
    ),
    no_reset: bool = typer.Option(
        False, "--no-reset", help="Set attributes and leave them on"
    ),
) -> None:
    """Print TEXT rendered with the chosen colors and options.

    Codes are applied in order: options, foreground, background, raw codes.
    """
    try:
        codes = _collect_codes(fg, bg, opt or [], code)
    except (UnknownColorError, InvalidCodeError) as error:
        print_error(None, escape(str(error)))
        raise typer.Exit(1) from error

    message = " ".join(text)
    renderer = get_renderer()
    print_event(f"Render codes: {join_codes(*codes)!r}")
    if not renderer.active:
        print_warning("Colors disabled or not supported, printing plain text")
    if no_reset and (renderer.active or renderer.legacy_console):
        renderer.set_attributes(*codes)
        renderer.print("", message, newline=True)
    else:
        renderer.print(join_codes(*codes), message, newline=True)


def _collect_codes(
    fg: str, bg: str, options: Iterable[str], code: str
) -> list[int]:
    codes: list[int] = [lookup_option(name) for name in options]
    if fg:
        codes.append(lookup_color(fg))
    if bg:
        codes.append(lookup_color(bg, background=True))
    codes.extend(parse_codes(code))
    return codes


@app.command()
def strip(
    path: Path | None = typer.Argument(
        None, help="File to read, standard input by default"
    ),
) -> None:
    """Copy a file or standard input to standard output, without colors.

    Bytes that are not valid UTF-8 are replaced with U+FFFD.
    """
    if path is None:
        if isinstance(sys.stdin, io.TextIOWrapper):
            sys.stdin.reconfigure(errors="replace")
        _strip_lines(sys.stdin)
        return
    print_verbose(f"Reading {path}")
    try:
        with path.open(encoding="utf-8", errors="replace") as file:
            _strip_lines(file)
    except OSError as error:
        print_error("Error reading file:", error)
        raise typer.Exit(1) from error


def _strip_lines(lines: Iterable[str]) -> None:
    for line in lines:
        sys.stdout.write(strip_codes(line))


@app.command()
def codes() -> None:
    """List color and option names with their codes."""
    renderer = get_renderer()
    for title, table in TABLES:
        renderer.print("", title, newline=True)
        for name, color in table.items():
            color.println(f"  {name:<14}{color.code:>4}")


@app.command()
def check() -> None:
    """Report whether standard output supports colors."""
    info = detect_support()
    renderer = get_renderer()
    write = sys.stdout.write
    write(f"color support: {_yes_no(info.supported)} ({info.reason})\n")
    write(f"legacy console: {_yes_no(info.legacy_console)}\n")
    enabled = "enabled" if renderer.enabled else "disabled"
    write(f"color output: {enabled}\n")


def _yes_no(value: bool) -> str:
    return "yes" if value else "no"
