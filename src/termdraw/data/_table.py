"""
Core implementation of :mod:`termdraw.data`.
"""

import logging
from typing import Any, Iterator, List, Tuple

import numpy as np
import numpy.typing as npt
import pandas as pd

from ..api import AllTracker

log = logging.getLogger(__name__)


#
# Exported names
#

__all__ = ["DataTable", "DuplicateColumnError", "RowWidthMismatchError"]


#
# Ensure all symbols introduced below are included in __all__
#

__tracker = AllTracker(globals())


#
# Exceptions
#


class DuplicateColumnError(ValueError):
    """
    Raised when adding a column whose name already exists in a :class:`.DataTable`.
    """


class RowWidthMismatchError(ValueError):
    """
    Raised when the width of a row does not match the number of columns of a
    :class:`.DataTable`.
    """


#
# Classes
#


class DataTable:
    """
    A column-labelled, row-oriented table of floating point values.

    Columns and rows can only be appended, never removed or updated.
    Every row holds exactly one value per column.

    When plotted by a :class:`.LineChart`, the first column provides the x values
    and each further column is one series.
    """

    def __init__(self) -> None:
        self._columns: List[str] = []
        self._rows: List[Tuple[float, ...]] = []

    @classmethod
    def from_frame(cls, frame: pd.DataFrame) -> "DataTable":
        """
        Create a table from a data frame, using the frame's column labels as
        column names.

        :param frame: the data frame to convert; all values must be numeric
        :return: the new table
        """
        table = cls()
        for column in frame.columns:
            table.add_column(str(column))
        for row in frame.itertuples(index=False, name=None):
            table.add_row(*row)
        return table

    @property
    def columns(self) -> Tuple[str, ...]:
        """
        The column names, in insertion order.
        """
        return tuple(self._columns)

    @property
    def n_columns(self) -> int:
        """
        The number of columns in this table.
        """
        return len(self._columns)

    @property
    def n_rows(self) -> int:
        """
        The number of rows in this table.
        """
        return len(self._rows)

    def add_column(self, name: str) -> None:
        """
        Append a column.

        :param name: the name of the new column
        :raise DuplicateColumnError: a column with the same name already exists
        :raise RowWidthMismatchError: the table already has rows
        """
        if name in self._columns:
            raise DuplicateColumnError(f"column {name!r} already exists")
        if self._rows:
            raise RowWidthMismatchError(
                f"cannot add column {name!r} to a table with {len(self._rows)} rows"
            )
        self._columns.append(name)

    def add_row(self, *values: Any) -> None:
        """
        Append a row.

        :param values: one value per column, in column order
        :raise RowWidthMismatchError: the number of values differs from the number
            of columns
        """
        if len(values) != len(self._columns):
            raise RowWidthMismatchError(
                f"expected {len(self._columns)} values per row "
                f"but got {len(values)}"
            )
        self._rows.append(tuple(float(value) for value in values))

    def column_name(self, index: int) -> str:
        """
        Get the name of a column.

        :param index: the index of the column
        :return: the column name
        """
        return self._columns[index]

    def value(self, row: int, column: int) -> float:
        """
        Get the value in a cell.

        :param row: the row index
        :param column: the column index
        :return: the value at the given row and column
        """
        return self._rows[row][column]

    def rows(self) -> Iterator[Tuple[float, ...]]:
        """
        Iterate over all rows, in insertion order.
        """
        return iter(self._rows)

    def column_values(self, index: int) -> npt.NDArray[np.float64]:
        """
        Get all values of one column.

        :param index: the index of the column
        :return: the column values as a 1d array
        """
        if not -len(self._columns) <= index < len(self._columns):
            raise IndexError(f"column index {index} out of range")
        return np.array([row[index] for row in self._rows], dtype=np.float64)

    def to_frame(self) -> pd.DataFrame:
        """
        Convert this table to a data frame.

        :return: a data frame with one column per table column
        """
        return pd.DataFrame(
            data=self._rows or None, columns=list(self._columns), dtype=np.float64
        )

    def __len__(self) -> int:
        return len(self._rows)

    def __repr__(self) -> str:
        return (
            f"{type(self).__name__}(columns={self._columns!r}, "
            f"n_rows={len(self._rows)})"
        )


__tracker.validate()
