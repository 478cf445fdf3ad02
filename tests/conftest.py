"""Common test fixtures."""

from __future__ import annotations

from dataclasses import dataclass, field
from io import StringIO
from typing import TYPE_CHECKING
from unittest.mock import patch

import pytest
from rich.console import Console

import colorkit.console
from colorkit.renderer import Renderer, set_renderer

if TYPE_CHECKING:
    from collections.abc import Callable, Iterator


@dataclass
class ConsoleFixture:
    """Console output fixture that tracks whether output was checked.

    Usage patterns:
    1. Verify specific output: assert console_out.getvalue() == "expected"
    2. No output expected: don't call getvalue(), fixture verifies empty
    3. Ignore output: call console_out.ignore_output()

    NEVER call getvalue() without asserting its value - this defeats the
    safety check for unexpected output.
    """

    _output: StringIO
    _checked: bool = field(default=False, init=False)

    def getvalue(self) -> str:
        """Get console output, marking it as checked."""
        self._checked = True
        return self._output.getvalue()

    def ignore_output(self) -> None:
        """Mark output as intentionally ignored."""
        self._checked = True

    def assert_no_unexpected_output(self) -> None:
        """Assert no unexpected output if not already checked."""
        if not self._checked:
            output = self._output.getvalue()
            assert output == "", "Unexpected console output"


@pytest.fixture(autouse=True)
def reset_verbose() -> Iterator[None]:
    """Clear verbose and trace modes after each test."""
    yield
    colorkit.console._verbose = False
    colorkit.console._trace = False


@pytest.fixture
def console_out() -> Iterator[ConsoleFixture]:
    """Patch console with test console using StringIO (no colors)."""
    output = StringIO()
    test_console = Console(file=output, force_terminal=False, soft_wrap=True)
    fixture = ConsoleFixture(output)

    with patch("colorkit.console._console", test_console):
        yield fixture

    fixture.assert_no_unexpected_output()


@dataclass
class RendererFixture:
    """Renderer writing to a StringIO."""

    renderer: Renderer
    output: StringIO

    def getvalue(self) -> str:
        """Get what the renderer wrote."""
        return self.output.getvalue()


@pytest.fixture
def make_renderer() -> Callable[..., RendererFixture]:
    """Return a factory of renderers writing to a StringIO."""

    def factory(**kwargs: object) -> RendererFixture:
        output = StringIO()
        renderer = Renderer(file=output, **kwargs)  # type: ignore[arg-type]
        return RendererFixture(renderer, output)

    return factory


@pytest.fixture
def color_renderer() -> Iterator[Renderer]:
    """Install a process-wide renderer with color support.

    The renderer writes to the current sys.stdout, so capsys and CliRunner
    see its output.
    """
    renderer = Renderer(supported=True)
    previous = set_renderer(renderer)
    yield renderer
    set_renderer(previous)


@pytest.fixture
def plain_renderer() -> Iterator[Renderer]:
    """Install a process-wide renderer without color support."""
    renderer = Renderer(supported=False)
    previous = set_renderer(renderer)
    yield renderer
    set_renderer(previous)
