"""
ANSI escape sequences for styling terminal text.
"""

import logging
import re
from enum import IntEnum
from typing import Callable

from ..api import AllTracker

log = logging.getLogger(__name__)


#
# Exported names
#

__all__ = [
    "Ansi",
    "AnsiColor",
    "background",
    "bold",
    "color",
    "display_width",
    "move_to",
    "strip_ansi",
]


#
# Ensure all symbols introduced below are included in __all__
#

__tracker = AllTracker(globals())


#
# Classes
#


class Ansi:
    """
    Escape sequences without parameters.
    """

    #: Reset all attributes.
    RESET = "\033[0m"

    #: Bold text.
    BOLD = "\033[1m"

    #: Clear the entire screen.
    CLEAR_SCREEN = "\033[2J"

    #: Matches any CSI or two-character escape sequence.
    PATTERN = re.compile(r"\x1B(?:[@-Z\\-_]|\[[0-?]*[ -/]*[@-~])")


class AnsiColor(IntEnum):
    """
    The eight standard ANSI terminal colors.
    """

    BLACK = 0
    RED = 1
    GREEN = 2
    YELLOW = 3
    BLUE = 4
    MAGENTA = 5
    CYAN = 6
    WHITE = 7

    @property
    def foreground(self) -> str:
        """
        The escape sequence selecting this color for the text.
        """
        return f"\033[3{self.value}m"

    @property
    def background(self) -> str:
        """
        The escape sequence selecting this color for the background.
        """
        return f"\033[4{self.value}m"


#
# Functions
#


def color(text: str, code: AnsiColor) -> str:
    """
    Render text in the given color.

    :param text: the text to style; each line is styled separately
    :param code: the text color
    :return: the styled text
    """
    return _transform_lines(
        text, lambda idx, line: f"{code.foreground}{line}{Ansi.RESET}"
    )


def background(text: str, code: AnsiColor) -> str:
    """
    Render text on the given background color.

    :param text: the text to style; each line is styled separately
    :param code: the background color
    :return: the styled text
    """
    return _transform_lines(
        text, lambda idx, line: f"{code.background}{line}{Ansi.RESET}"
    )


def bold(text: str) -> str:
    """
    Render text in bold.

    :param text: the text to style; each line is styled separately
    :return: the styled text
    """
    return _transform_lines(text, lambda idx, line: f"{Ansi.BOLD}{line}{Ansi.RESET}")


def move_to(text: str, x: int, y: int) -> str:
    """
    Prefix each line of the text with a cursor movement, so that the text is shown
    as a block whose top left corner is at the given terminal position.

    :param text: the text to position
    :param x: the 1-based terminal column
    :param y: the 1-based terminal row of the first line
    :return: the text with cursor movements
    """
    # the cursor movements replace the line breaks
    return _transform_lines(
        text, lambda idx, line: f"\033[{y + idx};{x}H{line}", separator=""
    )


def strip_ansi(text: str) -> str:
    """
    Remove all ANSI escape sequences from the given text.

    :param text: the text to clean
    :return: the text without escape sequences
    """
    return Ansi.PATTERN.sub("", text)


def display_width(text: str) -> int:
    """
    Get the number of terminal cells the given single-line text occupies.

    Escape sequences take no space; every other character takes one cell.

    :param text: the text to measure
    :return: the display width
    """
    return len(strip_ansi(text))


__tracker.validate()


def _transform_lines(
    text: str, transform: Callable[[int, str], str], separator: str = "\n"
) -> str:
    return separator.join(
        transform(idx, line) for idx, line in enumerate(text.split("\n"))
    )
