"""
Bordered text boxes.
"""
import logging
from io import StringIO
from typing import List, Union

from ..api import AllTracker
from ..terminal import Ansi, Percent, display_width, resolve_size

log = logging.getLogger(__name__)


#
# Exported names
#

__all__ = ["Box"]


#
# Ensure all symbols introduced below are included in __all__
#

__tracker = AllTracker(globals())


#
# Classes
#


class Box:
    """
    A fixed-size text box with a border.

    Text is written to the box using :meth:`.write`; converting the box to a string
    renders the text inside the border:

    - the first and last rows are border rows
    - the next ``padding_y`` rows below the top border and above the bottom border
      are blank
    - all other rows show one line of text each, framed by the vertical border glyph
      and ``padding_x`` spaces on either side; lines are cut or right-padded with
      spaces to fit the box

    Lines of text that do not fit in the box are not shown.
    ANSI escape sequences in the text take no space in the box.
    """

    #: The default border: horizontal and vertical line, then the top left,
    #: top right, bottom left, and bottom right corners.
    DEFAULT_BORDER = "- │ ┌ ┐ └ ┘"

    #: The width of the box, including the border.
    width: int

    #: The height of the box, including the border.
    height: int

    #: The number of spaces between the vertical border and the text.
    padding_x: int

    #: The number of blank rows between the horizontal border and the text.
    padding_y: int

    def __init__(
        self,
        width: Union[int, Percent],
        height: Union[int, Percent],
        *,
        padding_x: int = 1,
        padding_y: int = 0,
        border: str = DEFAULT_BORDER,
    ) -> None:
        """
        :param width: the width of the box in character cells, or as a percentage of
            the terminal width
        :param height: the height of the box in lines, or as a percentage of the
            terminal height
        :param padding_x: the number of spaces between the vertical border and the
            text (default: 1)
        :param padding_y: the number of blank rows between the horizontal border and
            the text (default: 0)
        :param border: six space-separated border glyphs: horizontal line, vertical
            line, and the top left, top right, bottom left, and bottom right corners
        """
        width, height = resolve_size(width, height)

        if padding_x < 0 or padding_y < 0:
            raise ValueError(
                f"args padding_x={padding_x} and padding_y={padding_y} "
                "must not be negative"
            )
        if width < 2 * (padding_x + 1):
            raise ValueError(
                f"arg width={width} is too small for a box with padding_x={padding_x}"
            )
        if height < 2:
            raise ValueError(f"arg height={height} must be at least 2")

        glyphs = border.split(" ")
        if len(glyphs) != 6:
            raise ValueError(
                f"arg border must consist of 6 space-separated glyphs: {border!r}"
            )

        self.width = width
        self.height = height
        self.padding_x = padding_x
        self.padding_y = padding_y
        self._glyphs = glyphs
        self._buffer = StringIO()

    @property
    def border(self) -> str:
        """
        The border glyphs of this box, separated by spaces.
        """
        return " ".join(self._glyphs)

    @property
    def content_width(self) -> int:
        """
        The number of character cells available for text in each row.
        """
        return self.width - 2 * (self.padding_x + 1)

    def write(self, text: str) -> int:
        """
        Append text to the contents of this box.

        :param text: the text to append
        :return: the number of characters written
        """
        return self._buffer.write(text)

    def __str__(self) -> str:
        horizontal, vertical, top_left, top_right, bottom_left, bottom_right = (
            self._glyphs
        )
        width = self.width
        height = self.height
        padding_y = self.padding_y
        content_width = self.content_width

        lines = self._buffer.getvalue().split("\n")
        offset = padding_y + 1

        padding = " " * self.padding_x
        prefix = vertical + padding
        suffix = padding + vertical

        rows: List[str] = []
        for y in range(height):
            if y == 0:
                row = top_left + horizontal * (width - 2) + top_right
            elif y == height - 1:
                row = bottom_left + horizontal * (width - 2) + bottom_right
            elif y <= padding_y or y >= height - padding_y:
                row = vertical + " " * (width - 2) + vertical
            else:
                line = lines[y - offset] if y - offset < len(lines) else ""
                row = prefix + _fit(line, content_width) + suffix
            rows.append(row)

        n_hidden = len(lines) - (height - 2 * offset)
        if n_hidden > 0:
            log.debug(f"box of height {height} hides {n_hidden} lines of text")

        return "\n".join(rows)


__tracker.validate()


def _fit(line: str, width: int) -> str:
    # cut or pad the line to the given display width, keeping escape sequences
    excess = display_width(line) - width
    if excess <= 0:
        return line + " " * -excess

    parts: List[str] = []
    n_visible = 0
    has_escapes = False
    pos = 0
    while pos < len(line) and n_visible < width:
        match = Ansi.PATTERN.match(line, pos)
        if match:
            parts.append(match.group())
            has_escapes = True
            pos = match.end()
        else:
            parts.append(line[pos])
            n_visible += 1
            pos += 1

    if has_escapes:
        parts.append(Ansi.RESET)
    return "".join(parts)
