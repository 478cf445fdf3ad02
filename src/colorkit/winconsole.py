"""Styled output for legacy Windows consoles.

Consoles like cmd.exe do not interpret escape sequences. Rich drives the
Win32 console API itself when legacy_windows is set and the output is the
real console, so the adapter decodes our escape sequences into rich Text and
lets rich do the rest.
"""

from typing import Protocol

from rich.console import Console
from rich.text import Text

from colorkit.compose import wrap_full


class ConsoleAdapter(Protocol):
    """Interface for setting console attributes without escape sequences.

    Codes are code strings, as returned by join_codes. Methods return the
    number of characters of message written.
    """

    def set(self, code: str) -> int:
        """Set attributes for subsequent output."""
        ...

    def reset(self) -> int:
        """Revert attributes to the console defaults."""
        ...

    def print(self, message: str, code: str = "") -> int:
        """Write message with code applied on top of the set attributes."""
        ...

    def print_line(self, message: str, code: str = "") -> int:
        """Same as print, followed by a newline."""
        ...


class RichConsoleAdapter:
    """Console adapter writing through a rich Console."""

    def __init__(self, console: Console | None = None) -> None:
        """Initialize with a console, by default a legacy Windows one."""
        if console is None:
            console = Console(legacy_windows=True, soft_wrap=True)
        self.console = console
        self.pending = ""

    def set(self, code: str) -> int:
        """Remember attributes, applied to subsequent prints."""
        if code:
            self.pending = f"{self.pending};{code}" if self.pending else code
        return 0

    def reset(self) -> int:
        """Forget attributes set with set()."""
        self.pending = ""
        return 0

    def print(self, message: str, code: str = "") -> int:
        """Write styled message, without newline."""
        return self._write(message, code, end="")

    def print_line(self, message: str, code: str = "") -> int:
        """Write styled message, followed by a newline."""
        return self._write(message, code, end="\n")

    def _write(self, message: str, code: str, end: str) -> int:
        full_code = ";".join(x for x in (self.pending, code) if x)
        text = Text.from_ansi(wrap_full(full_code, message), end="")
        self.console.print(text, end=end, highlight=False)
        self.console.file.flush()
        return len(message)
