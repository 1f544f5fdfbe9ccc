"""
Character grids and formatted text tables.
"""

import logging
from typing import Any, Iterable, Iterator, List, Optional, Sequence, Tuple, Union

import numpy as np
import pandas as pd

from ..api import AllTracker
from ..data import DataTable

log = logging.getLogger(__name__)


#
# Exported names
#

__all__ = ["CharacterMatrix", "format_table"]


#
# Ensure all symbols introduced below are included in __all__
#

__tracker = AllTracker(globals())


#
# Type definitions
#

_Index = Union[int, slice]

#
# Constants
#

_ALIGNMENTS = ("<", "^", ">")

#
# Classes
#


class CharacterMatrix:
    """
    A fixed-size grid of characters, initially filled with spaces.

    Row 0 is the top row, column 0 the leftmost column.
    Cells are read and written with ``(row, column)`` index pairs, where either
    index may be a slice:

    - ``matrix[r, c] = "x"`` sets one cell
    - ``matrix[r, c0:c1] = "text"`` writes the text from column ``c0``, cutting it
      off at column ``c1``
    - ``matrix[r, c0:c1] = "x"`` fills columns ``c0`` to ``c1 - 1`` with ``x``
    - ``matrix[r0:r1, …] = …`` does the same for each of rows ``r0`` to ``r1 - 1``

    Integer indices outside the grid, including negative integers, address no
    cell, so that drawing across the border of the grid clips the drawing.
    """

    def __init__(self, n_rows: int, n_columns: int) -> None:
        """
        :param n_rows: the number of rows
        :param n_columns: the number of columns
        """
        if n_rows <= 0 or n_columns <= 0:
            raise ValueError(
                f"args n_rows={n_rows} and n_columns={n_columns} must be positive"
            )
        self._n_columns = n_columns
        self._rows: List[List[str]] = [[" "] * n_columns for _ in range(n_rows)]

    @property
    def n_rows(self) -> int:
        """
        The number of rows; same as ``len(self)``.
        """
        return len(self._rows)

    @property
    def n_columns(self) -> int:
        """
        The number of columns.
        """
        return self._n_columns

    def lines(self, rows: Optional[Iterable[int]] = None) -> Iterator[str]:
        """
        Get rows of this matrix as strings.

        :param rows: the indices of the rows to get (default: all rows)
        :return: the rows, in the given order
        """
        selected = self._rows if rows is None else (self._rows[i] for i in rows)
        return ("".join(row) for row in selected)

    def __getitem__(self, key: Tuple[_Index, _Index]) -> str:
        rows, columns = _as_slices(key)
        return "\n".join("".join(row[columns]) for row in self._rows[rows])

    def __setitem__(self, key: Tuple[_Index, _Index], value: Any) -> None:
        rows, columns = _as_slices(key)
        text = str(value)
        positions = range(*columns.indices(self._n_columns))
        if len(text) == 1:
            text = text * len(positions)
        for row in self._rows[rows]:
            for position, char in zip(positions, text):
                row[position] = char

    def __len__(self) -> int:
        return len(self._rows)

    def __str__(self) -> str:
        return "\n".join(self.lines())


#
# Functions
#


def format_table(
    headings: Sequence[str],
    data: Union[DataTable, pd.DataFrame, np.ndarray, Sequence[Sequence[Any]]],
    formats: Optional[Sequence[Optional[str]]] = None,
    alignment: Optional[Sequence[str]] = None,
) -> str:
    """
    Format data as a text table with a heading row and a divider row.

    Columns are separated by two spaces and are as wide as their widest entry.

    :param headings: the column headings
    :param data: the rows of the table, as a :class:`.DataTable`, a data frame,
        or any other nested sequence of shape `(n_rows, n_columns)`
    :param formats: a format specification for each column, e.g., ``".2f"``;
        ``None`` formats the values of a column with :class:`str` (default:
        ``None`` for all columns)
    :param alignment: the alignment of each column's values: ``"<"`` (left),
        ``"^"`` (centered), or ``">"`` (right); headings are always left-aligned
        (default: left-aligned)
    :return: the table, with a line break after each row
    """
    n_columns = len(headings)

    if formats is None:
        formats = [None] * n_columns
    elif len(formats) != n_columns:
        raise ValueError("arg formats must have the same length as arg headings")

    if alignment is None:
        alignment = ["<"] * n_columns
    elif len(alignment) != n_columns:
        raise ValueError("arg alignment must have the same length as arg headings")
    elif any(align not in _ALIGNMENTS for align in alignment):
        raise ValueError(
            "arg alignment must only contain alignment options "
            + ", ".join(_ALIGNMENTS)
        )

    if isinstance(data, DataTable):
        rows: Iterable[Sequence[Any]] = data.rows()
    elif isinstance(data, pd.DataFrame):
        rows = data.itertuples(index=False, name=None)
    else:
        rows = data

    body: List[List[str]] = []
    for row in rows:
        if len(row) != n_columns:
            raise ValueError(
                "rows in data matrix must have the same length as arg headings"
            )
        body.append(
            [
                str(value) if fmt is None else format(value, fmt)
                for value, fmt in zip(row, formats)
            ]
        )

    widths = [
        max([len(heading), *(len(row[i]) for row in body)])
        for i, heading in enumerate(headings)
    ]

    lines = [
        "  ".join(f"{heading:<{width}}" for heading, width in zip(headings, widths)),
        "  ".join("=" * width for width in widths),
        *(
            "  ".join(
                f"{cell:{align}{width}}"
                for cell, align, width in zip(row, alignment, widths)
            )
            for row in body
        ),
    ]
    return "\n".join(lines) + "\n"


__tracker.validate()


def _as_slices(key: Tuple[_Index, _Index]) -> Tuple[slice, slice]:
    if not isinstance(key, tuple) or len(key) != 2:
        raise ValueError(f"expected (row, column) tuple but got {key!r}")
    return _as_slice(key[0]), _as_slice(key[1])


def _as_slice(index: _Index) -> slice:
    if isinstance(index, slice):
        return index
    elif index < 0:
        return slice(0, 0)
    else:
        return slice(index, index + 1)
