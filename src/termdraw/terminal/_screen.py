"""
An explicit output buffer for terminal screens.
"""

import logging
import sys
from io import StringIO
from typing import Any, Optional, TextIO

from ..api import AllTracker
from ._ansi import Ansi
from ._size import get_terminal_size

log = logging.getLogger(__name__)


#
# Exported names
#

__all__ = ["Screen"]


#
# Ensure all symbols introduced below are included in __all__
#

__tracker = AllTracker(globals())


#
# Classes
#


class Screen:
    """
    A text buffer collecting output for a terminal until it is flushed.

    Text written to the screen is kept in memory; method :meth:`.flush` writes it to
    the output stream in one go and empties the buffer.

    Screens are not thread-safe; concurrent renders should use separate instances.
    """

    #: The output stream this screen is flushed to.
    out: TextIO

    def __init__(self, out: Optional[TextIO] = None) -> None:
        """
        :param out: the output stream to flush to (defaults to :obj:`sys.stdout`)
        """
        self.out = sys.stdout if out is None else out
        self._buffer = StringIO()

    @property
    def current_height(self) -> int:
        """
        The number of line breaks written to the buffer since the last flush.
        """
        return self._buffer.getvalue().count("\n")

    def print(self, *values: Any, sep: str = " ") -> None:
        """
        Write values to the buffer, separated by arg ``sep``.

        :param values: the values to write
        :param sep: the separator between values
        """
        self._buffer.write(sep.join(map(str, values)))

    def println(self, *values: Any, sep: str = " ") -> None:
        """
        Write values to the buffer, followed by a line break.

        :param values: the values to write
        :param sep: the separator between values
        """
        self.print(*values, sep=sep)
        self._buffer.write("\n")

    def printf(self, format_string: str, *args: Any) -> None:
        """
        Write a %-formatted string to the buffer.

        :param format_string: the format string
        :param args: the values to format
        """
        self._buffer.write(format_string % args if args else format_string)

    def move_cursor(self, x: int, y: int) -> None:
        """
        Write a cursor movement to the buffer.

        :param x: the 1-based target column
        :param y: the 1-based target row
        """
        self._buffer.write(f"\033[{y};{x}H")

    def clear(self) -> None:
        """
        Write an escape sequence to the buffer that clears the whole screen.
        """
        self._buffer.write(Ansi.CLEAR_SCREEN)

    def getvalue(self) -> str:
        """
        Get the text buffered since the last flush.
        """
        return self._buffer.getvalue()

    def reset(self) -> None:
        """
        Discard the buffered text.
        """
        self._buffer = StringIO()

    def flush(self, max_lines: Optional[int] = None) -> None:
        """
        Write the buffered lines to the output stream and empty the buffer.

        Lines beyond the height of the screen are dropped.

        :param max_lines: the maximum number of lines to write (defaults to the
            height of the terminal; unlimited if the terminal size is unavailable)
        """
        lines = self._buffer.getvalue().split("\n")
        if lines[-1] == "":
            lines.pop()

        if max_lines is None:
            terminal = get_terminal_size()
            if terminal is not None:
                max_lines = terminal.lines

        if max_lines is not None and len(lines) > max_lines:
            log.warning(
                f"dropping {len(lines) - max_lines} lines exceeding "
                f"the screen height of {max_lines}"
            )
            lines = lines[:max_lines]

        for line in lines:
            print(line, file=self.out)

        self.out.flush()
        self.reset()


__tracker.validate()
