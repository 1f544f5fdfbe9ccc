"""
Tab-aligned text tables.
"""
import logging
from io import StringIO
from typing import List

from ..api import AllTracker

log = logging.getLogger(__name__)


#
# Exported names
#

__all__ = ["Table"]


#
# Ensure all symbols introduced below are included in __all__
#

__tracker = AllTracker(globals())


#
# Classes
#


class Table:
    """
    A writer aligning tab-separated text in columns, using elastic tab stops.

    Text written to the table is split into lines, and each line into cells at tab
    characters.
    A cell is terminated by a tab; the text after the last tab of a line is not part
    of a column and is output as is.

    The cells in column `j` of a run of adjacent lines that all have a terminated
    cell `j` form a column block; all cells of a block are padded to the same width,
    i.e., the width of the widest cell plus ``padding``, or ``min_width`` if that is
    larger.
    """

    #: The minimum width of a cell, including padding.
    min_width: int

    #: The width of a tab character; used when padding with tabs.
    tab_width: int

    #: The number of padding characters added to the widest cell of a column.
    padding: int

    #: The padding character.
    pad_char: str

    #: If ``True``, align cell contents to the right.
    align_right: bool

    def __init__(
        self,
        min_width: int = 0,
        tab_width: int = 8,
        padding: int = 1,
        pad_char: str = " ",
        align_right: bool = False,
    ) -> None:
        """
        :param min_width: the minimum width of a cell, including padding
        :param tab_width: the width of a tab character; used when padding with tabs
        :param padding: the number of padding characters added to the widest cell of
            a column
        :param pad_char: the padding character; if this is a tab, cells are padded
            with tabs to the next multiple of ``tab_width`` and contents are always
            left-aligned
        :param align_right: if ``True``, align cell contents to the right
        """
        if min_width < 0 or padding < 0:
            raise ValueError(
                f"args min_width={min_width} and padding={padding} "
                "must not be negative"
            )
        if tab_width <= 0:
            raise ValueError(f"arg tab_width={tab_width} must be positive")
        if len(pad_char) != 1:
            raise ValueError(f"arg pad_char must be a single character: {pad_char!r}")

        self.min_width = min_width
        self.tab_width = tab_width
        self.padding = padding
        self.pad_char = pad_char
        self.align_right = align_right
        self._buffer = StringIO()

    def write(self, text: str) -> int:
        """
        Append text to this table.

        :param text: the text to append
        :return: the number of characters written
        """
        return self._buffer.write(text)

    def __str__(self) -> str:
        lines = [line.split("\t") for line in self._buffer.getvalue().split("\n")]

        # the last cell of each line is not terminated by a tab
        n_terminated = [len(cells) - 1 for cells in lines]
        widths: List[List[int]] = [[0] * n for n in n_terminated]

        column = 0
        while True:
            block: List[int] = []
            for row, n in enumerate(n_terminated + [0]):
                if n > column:
                    block.append(row)
                elif block:
                    width = self._column_width(
                        max(len(lines[r][column]) for r in block)
                    )
                    for r in block:
                        widths[r][column] = width
                    block = []
            column += 1
            if column >= max(n_terminated, default=0):
                break

        return "\n".join(
            "".join(
                self._pad(cell, width) for cell, width in zip(cells, cell_widths)
            )
            + cells[-1]
            for cells, cell_widths in zip(lines, widths)
        )

    def _column_width(self, cell_width: int) -> int:
        width = max(cell_width + self.padding, self.min_width)
        if self.pad_char == "\t":
            # round up to the next tab stop
            width = -(-width // self.tab_width) * self.tab_width
        return width

    def _pad(self, cell: str, width: int) -> str:
        if self.pad_char == "\t":
            return cell + "\t" * -(-(width - len(cell)) // self.tab_width)
        fill = self.pad_char * (width - len(cell))
        return fill + cell if self.align_right else cell + fill


__tracker.validate()
