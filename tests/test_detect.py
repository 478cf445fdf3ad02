"""Tests for color support detection."""

import io
import os
from unittest.mock import MagicMock, patch

import pytest

from colorkit.detect import detect_support, is_like_in_cmd, is_support_color


def tty_stream() -> MagicMock:
    """Return a stream attached to a terminal."""
    stream = MagicMock()
    stream.isatty.return_value = True
    return stream


def test_terminal_supports_color() -> None:
    """A terminal on a POSIX platform supports colors."""
    with patch.dict(os.environ, {"TERM": "xterm-256color"}, clear=True):
        info = detect_support(tty_stream(), platform="linux")
    assert info.supported
    assert not info.legacy_console
    assert info.reason == "output is a terminal"


def test_pipe_does_not_support_color() -> None:
    """Output redirected to a file or pipe does not support colors."""
    with patch.dict(os.environ, {"TERM": "xterm"}, clear=True):
        assert not is_support_color(io.StringIO(), platform="linux")


def test_closed_stream_does_not_support_color() -> None:
    """A closed stream does not support colors."""
    stream = io.StringIO()
    stream.close()
    with patch.dict(os.environ, {}, clear=True):
        assert not is_support_color(stream, platform="linux")


@pytest.mark.parametrize("value", ["1", "true", "anything"])
def test_no_color(value: str) -> None:
    """NO_COLOR disables colors, even with FORCE_COLOR."""
    env = {"NO_COLOR": value, "FORCE_COLOR": "1"}
    with patch.dict(os.environ, env, clear=True):
        info = detect_support(tty_stream(), platform="linux")
    assert not info.supported
    assert info.reason == "NO_COLOR is set"


def test_empty_no_color_is_ignored() -> None:
    """An empty NO_COLOR is the same as not set."""
    with patch.dict(os.environ, {"NO_COLOR": ""}, clear=True):
        assert is_support_color(tty_stream(), platform="linux")


def test_force_color() -> None:
    """FORCE_COLOR enables colors on pipes and dumb terminals."""
    env = {"FORCE_COLOR": "1", "TERM": "dumb"}
    with patch.dict(os.environ, env, clear=True):
        info = detect_support(io.StringIO(), platform="linux")
    assert info.supported
    assert info.reason == "FORCE_COLOR is set"


def test_force_color_zero_is_ignored() -> None:
    """FORCE_COLOR=0 does not force colors."""
    with patch.dict(os.environ, {"FORCE_COLOR": "0"}, clear=True):
        assert not is_support_color(io.StringIO(), platform="linux")


def test_dumb_terminal() -> None:
    """TERM=dumb does not support colors."""
    with patch.dict(os.environ, {"TERM": "dumb"}, clear=True):
        info = detect_support(tty_stream(), platform="linux")
    assert not info.supported
    assert info.reason == "TERM is dumb"


def test_like_in_cmd() -> None:
    """A bare Windows console is a legacy console."""
    with patch.dict(os.environ, {}, clear=True):
        assert is_like_in_cmd("win32")
        assert not is_like_in_cmd("linux")
        assert not is_like_in_cmd("darwin")


@pytest.mark.parametrize(
    "env",
    [
        {"WT_SESSION": "0a1b"},
        {"ANSICON": "120x1000 (120x30)"},
        {"ConEmuANSI": "ON"},
        {"TERM": "cygwin"},
        {"TERM_PROGRAM": "vscode"},
    ],
)
def test_not_like_in_cmd(env: dict[str, str]) -> None:
    """Windows hosts interpreting escape sequences are not legacy consoles."""
    with patch.dict(os.environ, env, clear=True):
        assert not is_like_in_cmd("win32")


def test_legacy_console_never_supports_color() -> None:
    """Legacy consoles do not support colors, even forced."""
    with patch.dict(os.environ, {"FORCE_COLOR": "1"}, clear=True):
        info = detect_support(tty_stream(), platform="win32")
    assert info.legacy_console
    assert not info.supported
    assert info.reason == "legacy Windows console"


def test_legacy_console_reason() -> None:
    """Legacy console detection is reported as the reason."""
    with patch.dict(os.environ, {}, clear=True):
        info = detect_support(tty_stream(), platform="win32")
    assert not info.supported
    assert info.reason == "legacy Windows console"


def test_default_stream_is_stdout() -> None:
    """Detection checks sys.stdout by default."""
    with (
        patch.dict(os.environ, {}, clear=True),
        patch("sys.stdout", tty_stream()),
    ):
        assert is_support_color(platform="linux")
