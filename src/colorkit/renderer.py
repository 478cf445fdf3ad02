"""Environment-aware rendering of color codes.

The renderer is the single place deciding whether output is styled or plain.
A process-wide default renderer is created at import, with color support
detected once from the environment.
"""

from __future__ import annotations

import sys
import typing
from dataclasses import dataclass, field

from colorkit.ansi import strip_codes
from colorkit.compose import RESET_SET, join_codes, wrap_full, wrap_set_only
from colorkit.console import print_trace
from colorkit.detect import detect_support
from colorkit.winconsole import ConsoleAdapter, RichConsoleAdapter

if typing.TYPE_CHECKING:
    from typing import TextIO


@dataclass
class Renderer:
    """Render messages with color codes, or strip them.

    Attributes:
        enabled: Color output switch, see disable() and enable().
        supported: Whether the output understands escape sequences.
        legacy_console: Route direct output through the console adapter.
        file: Output of the writing methods, None for the current sys.stdout.
        adapter: Console adapter used in legacy console mode.
    """

    enabled: bool = True
    supported: bool = False
    legacy_console: bool = False
    file: TextIO | None = None
    adapter: ConsoleAdapter | None = field(default=None, repr=False)

    def __post_init__(self) -> None:
        """Create the console adapter if needed."""
        if self.legacy_console and self.adapter is None:
            self.adapter = RichConsoleAdapter()

    @property
    def out(self) -> TextIO:
        """Output stream of the writing methods."""
        return sys.stdout if self.file is None else self.file

    @property
    def active(self) -> bool:
        """Whether rendered strings include escape sequences."""
        return self.enabled and self.supported

    def render_code(self, code: str, *args: object) -> str:
        """Render the concatenation of args with a code string.

        Args are joined with join_args.

        Usage:
            msg = renderer.render_code("3;32;45", "some", "message")
        """
        message = join_args(*args)
        if not code:
            return message
        if not self.active:
            return strip_codes(message)
        return wrap_full(code, message)

    def render_string(self, code: str, text: str) -> str:
        """Render a string with a code string.

        Unlike render_code, an empty code or text is returned as-is, without
        stripping.
        """
        if not code or not text:
            return text
        if not self.active:
            return strip_codes(text)
        return wrap_full(code, text)

    def set_attributes(self, *codes: int) -> int:
        """Set console attributes until reset_attributes is called.

        Returns the number of characters written.
        """
        if not self.enabled:
            return 0
        code = join_codes(*codes)
        if self.legacy_console:
            print_trace("Console adapter set:", code)
            return self._get_adapter().set(code)
        return self.out.write(wrap_set_only(code))

    def reset_attributes(self) -> int:
        """Reset console attributes.

        Returns the number of characters written.
        """
        if not self.enabled:
            return 0
        if self.legacy_console:
            print_trace("Console adapter reset")
            return self._get_adapter().reset()
        return self.out.write(RESET_SET)

    def print(self, code: str, *args: object, newline: bool = False) -> None:
        """Write args rendered with a code string to the output."""
        if self.legacy_console:
            message = join_args(*args)
            if not self.enabled:
                code, message = "", strip_codes(message)
            adapter = self._get_adapter()
            if newline:
                adapter.print_line(message, code)
            else:
                adapter.print(message, code)
        elif newline:
            self.out.write(self.render_code(code, *args) + "\n")
        else:
            message = join_args(*args)
            self.out.write(self.render_string(code, message))

    def disable(self) -> None:
        """Disable color output, rendering strips codes from now on."""
        self.enabled = False

    def enable(self) -> None:
        """Enable color output again."""
        self.enabled = True

    def _get_adapter(self) -> ConsoleAdapter:
        assert self.adapter is not None
        return self.adapter


def join_args(*args: object) -> str:
    """Concatenate args with str, spacing two adjacent non-string args.

    join_args("a", 1, "b") == "a1b", join_args(1, 2) == "1 2"
    """
    parts: list[str] = []
    previous: object = ""
    for arg in args:
        if not isinstance(arg, str) and not isinstance(previous, str):
            parts.append(" ")
        parts.append(str(arg))
        previous = arg
    return "".join(parts)


def _create_default_renderer() -> Renderer:
    info = detect_support()
    return Renderer(
        supported=info.supported, legacy_console=info.legacy_console
    )


_renderer = _create_default_renderer()


def get_renderer() -> Renderer:
    """Return the process-wide renderer."""
    return _renderer


def set_renderer(renderer: Renderer) -> Renderer:
    """Replace the process-wide renderer, return the previous one."""
    global _renderer  # noqa: PLW0603
    previous = _renderer
    _renderer = renderer
    return previous


def render_code(code: str, *args: object) -> str:
    """Render args with the process-wide renderer."""
    return _renderer.render_code(code, *args)


def render_string(code: str, text: str) -> str:
    """Render text with the process-wide renderer."""
    return _renderer.render_string(code, text)


def set_attributes(*codes: int) -> int:
    """Set console attributes with the process-wide renderer."""
    return _renderer.set_attributes(*codes)


def reset_attributes() -> int:
    """Reset console attributes with the process-wide renderer."""
    return _renderer.reset_attributes()


def disable() -> None:
    """Disable color output of the process-wide renderer."""
    _renderer.disable()


def enable() -> None:
    """Enable color output of the process-wide renderer."""
    _renderer.enable()
