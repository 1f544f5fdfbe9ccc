"""
Tests for package termdraw.terminal
"""

import logging
from io import StringIO
from pathlib import Path

import pytest

from termdraw.terminal import (
    Ansi,
    AnsiColor,
    Percent,
    Screen,
    TerminalSize,
    background,
    bold,
    color,
    display_width,
    get_terminal_size,
    move_to,
    resolve_size,
    strip_ansi,
)

log = logging.getLogger(__name__)


def test_ansi_styles() -> None:
    assert color("a\nb", AnsiColor.RED) == "\033[31ma\033[0m\n\033[31mb\033[0m"
    assert background("x", AnsiColor.BLUE) == "\033[44mx\033[0m"
    assert bold("x") == "\033[1mx\033[0m"

    assert AnsiColor.GREEN.foreground == "\033[32m"
    assert AnsiColor.WHITE.background == "\033[47m"


def test_ansi_move_to() -> None:
    assert move_to("ab\ncd", 3, 5) == "\033[5;3Hab\033[6;3Hcd"
    assert move_to("", 1, 1) == "\033[1;1H"


def test_strip_ansi() -> None:
    styled = bold(color("hello\nworld", AnsiColor.CYAN))

    assert strip_ansi(styled) == "hello\nworld"
    assert strip_ansi(Ansi.CLEAR_SCREEN + move_to("x", 2, 2)) == "x"
    assert display_width(color("héllo", AnsiColor.RED)) == 5
    assert display_width("plain") == 5


def test_percent() -> None:
    assert Percent(50).of(81) == 40
    assert Percent(100).of(24) == 24
    assert Percent(0).of(24) == 0
    assert Percent(10) == Percent(10)
    assert Percent(10) != Percent(20)
    assert repr(Percent(5)) == "Percent(5)"

    for value in [-1, 101]:
        with pytest.raises(ValueError):
            Percent(value)


def test_resolve_size(monkeypatch: pytest.MonkeyPatch) -> None:
    terminal = TerminalSize(columns=80, lines=40)

    assert resolve_size(Percent(50), Percent(25), terminal=terminal) == (40, 10)
    assert resolve_size(12, Percent(50), terminal=terminal) == (12, 20)
    assert resolve_size(10, 5) == (10, 5)
    assert resolve_size(10, -1, current_height=3) == (10, 4)

    monkeypatch.setattr(
        "termdraw.terminal._size.get_terminal_size", lambda fd=None: None
    )
    with pytest.raises(ValueError):
        resolve_size(Percent(10), 5)


def test_get_terminal_size(tmp_path: Path) -> None:
    # a regular file is not a terminal
    with open(tmp_path / "out.txt", "w") as f:
        assert get_terminal_size(f.fileno()) is None


def test_screen_buffer() -> None:
    out = StringIO()
    screen = Screen(out=out)

    screen.println("a", "b")
    screen.printf("%d%%\n", 5)
    screen.print("x", "y", sep="-")

    assert screen.current_height == 2
    assert screen.getvalue() == "a b\n5%\nx-y"

    # nothing is written before the screen is flushed
    assert out.getvalue() == ""

    screen.flush(max_lines=10)
    assert out.getvalue() == "a b\n5%\nx-y\n"
    assert screen.getvalue() == ""
    assert screen.current_height == 0


def test_screen_cursor() -> None:
    screen = Screen(out=StringIO())
    screen.clear()
    screen.move_cursor(2, 3)
    screen.printf("100%")

    assert screen.getvalue() == "\033[2J\033[3;2H100%"

    screen.reset()
    assert screen.getvalue() == ""


def test_screen_flush_limit(
    monkeypatch: pytest.MonkeyPatch, caplog: pytest.LogCaptureFixture
) -> None:
    out = StringIO()
    screen = Screen(out=out)
    for i in range(5):
        screen.println(f"line {i}")

    with caplog.at_level(logging.WARNING):
        screen.flush(max_lines=2)

    assert out.getvalue() == "line 0\nline 1\n"
    assert "dropping 3 lines" in caplog.text

    # by default, the output is limited to the height of the terminal
    monkeypatch.setattr(
        "termdraw.terminal._screen.get_terminal_size",
        lambda fd=None: TerminalSize(columns=80, lines=3),
    )
    out = StringIO()
    screen = Screen(out=out)
    for i in range(5):
        screen.println(f"line {i}")
    screen.flush()

    assert out.getvalue() == "line 0\nline 1\nline 2\n"

    # without a terminal, all lines are written
    monkeypatch.setattr(
        "termdraw.terminal._screen.get_terminal_size", lambda fd=None: None
    )
    out = StringIO()
    screen = Screen(out=out)
    for i in range(5):
        screen.println(f"line {i}")
    screen.flush()

    assert out.getvalue().count("\n") == 5
