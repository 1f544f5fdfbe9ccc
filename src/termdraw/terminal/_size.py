"""
Terminal size queries, and sizes relative to the terminal.
"""

import logging
import os
import sys
from typing import NamedTuple, Optional, Tuple, Union

from ..api import AllTracker

log = logging.getLogger(__name__)


#
# Exported names
#

__all__ = ["Percent", "TerminalSize", "get_terminal_size", "resolve_size"]


#
# Ensure all symbols introduced below are included in __all__
#

__tracker = AllTracker(globals())


#
# Classes
#


class TerminalSize(NamedTuple):
    """
    The size of a terminal, in character cells.
    """

    #: the number of columns
    columns: int

    #: the number of lines
    lines: int


class Percent:
    """
    A width or height given as a percentage of the terminal size.
    """

    #: the percentage, between 0 and 100
    value: int

    def __init__(self, value: int) -> None:
        """
        :param value: the percentage, between 0 and 100
        """
        if not 0 <= value <= 100:
            raise ValueError(f"arg value={value} must be in the range from 0 to 100")
        self.value = value

    def of(self, total: int) -> int:
        """
        Apply this percentage to a total size.

        :param total: the total size, in character cells
        :return: this percentage of the total, rounded down
        """
        return self.value * total // 100

    def __eq__(self, other: object) -> bool:
        return isinstance(other, Percent) and other.value == self.value

    def __hash__(self) -> int:
        return hash((Percent, self.value))

    def __repr__(self) -> str:
        return f"{type(self).__name__}({self.value})"


#
# Functions
#


def get_terminal_size(fd: Optional[int] = None) -> Optional[TerminalSize]:
    """
    Query the size of the terminal connected to the given file descriptor.

    :param fd: the file descriptor to query (defaults to the descriptor of
        :obj:`sys.stdout`)
    :return: the terminal size, or ``None`` if the size cannot be determined,
        e.g., because the output is not a terminal
    """
    try:
        if fd is None:
            fd = sys.stdout.fileno()
        size = os.get_terminal_size(fd)
    except (AttributeError, ValueError, OSError) as e:
        log.debug(f"terminal size is unavailable: {e}")
        return None

    return TerminalSize(columns=size.columns, lines=size.lines)


def resolve_size(
    width: Union[int, Percent],
    height: Union[int, Percent],
    *,
    terminal: Optional[TerminalSize] = None,
    current_height: int = 0,
) -> Tuple[int, int]:
    """
    Convert a width and height to absolute sizes in character cells.

    Percentages are applied to the terminal size.
    A height of ``-1`` stands for the current height of the output plus one.

    :param width: the width, in cells or as a percentage of the terminal width
    :param height: the height, in cells or as a percentage of the terminal height
    :param terminal: the terminal size to apply percentages to (queried with
        :func:`.get_terminal_size` if not specified)
    :param current_height: the number of lines already written to the output;
        used to resolve a height of ``-1``
    :return: the absolute width and height
    :raise ValueError: a percentage was given but the terminal size is unavailable
    """

    if isinstance(width, Percent) or isinstance(height, Percent):
        if terminal is None:
            terminal = get_terminal_size()
        if terminal is None:
            raise ValueError(
                "cannot resolve a percentage size: terminal size is unavailable"
            )

    if isinstance(width, Percent):
        width = width.of(terminal.columns)

    if isinstance(height, Percent):
        height = height.of(terminal.lines)
    elif height == -1:
        height = current_height + 1

    return width, height


__tracker.validate()
