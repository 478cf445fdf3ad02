"""Color support detection for the current terminal."""

from __future__ import annotations

import os
import sys
import typing
from dataclasses import dataclass

if typing.TYPE_CHECKING:
    from typing import TextIO

# Windows hosts known to interpret ANSI sequences themselves
ANSI_HOST_VARIABLES = ("WT_SESSION", "ANSICON", "TERM", "TERM_PROGRAM")


@dataclass(frozen=True)
class SupportInfo:
    """Result of color support detection."""

    supported: bool
    legacy_console: bool
    reason: str


def is_like_in_cmd(platform: str | None = None) -> bool:
    """Check if we run in a legacy Windows console, like cmd.exe.

    Such a console does not interpret escape sequences, styling must go
    through the console API instead.
    """
    platform = sys.platform if platform is None else platform
    if platform != "win32":
        return False
    if any(os.getenv(name) for name in ANSI_HOST_VARIABLES):
        return False
    return os.getenv("ConEmuANSI") != "ON"


def detect_support(
    stream: TextIO | None = None, platform: str | None = None
) -> SupportInfo:
    """Detect whether stream supports ANSI colors, and why.

    Priority:
    1. NO_COLOR environment variable (if defined and not empty)
    2. Legacy Windows console
    3. FORCE_COLOR environment variable (if defined, not empty and not "0")
    4. TERM=dumb
    5. Stream attached to a terminal
    """
    stream = sys.stdout if stream is None else stream
    legacy = is_like_in_cmd(platform)
    supported, reason = _check_environment(stream, legacy=legacy)
    return SupportInfo(
        supported=supported,
        legacy_console=legacy,
        reason=reason,
    )


def is_support_color(
    stream: TextIO | None = None, platform: str | None = None
) -> bool:
    """Check whether stream supports ANSI colors."""
    return detect_support(stream, platform).supported


def _check_environment(stream: TextIO, *, legacy: bool) -> tuple[bool, str]:
    if os.getenv("NO_COLOR"):
        return False, "NO_COLOR is set"

    if legacy:
        return False, "legacy Windows console"

    force_color = os.getenv("FORCE_COLOR")
    if force_color and force_color != "0":
        return True, "FORCE_COLOR is set"

    if os.getenv("TERM") == "dumb":
        return False, "TERM is dumb"

    try:
        isatty = stream.isatty()
    except (AttributeError, ValueError):
        # Replaced or closed stream
        isatty = False
    if not isatty:
        return False, "output is not a terminal"

    return True, "output is a terminal"
