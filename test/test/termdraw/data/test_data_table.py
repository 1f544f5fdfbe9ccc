"""
Tests for package termdraw.data
"""

import logging

import numpy as np
import pandas as pd
import pytest

from termdraw.data import DataTable, DuplicateColumnError, RowWidthMismatchError

log = logging.getLogger(__name__)


def test_data_table_shape() -> None:
    table = DataTable()
    assert table.n_columns == 0
    assert table.n_rows == 0
    assert len(table) == 0

    table.add_column("x")
    table.add_column("y")
    table.add_row(1, 2.5)
    table.add_row(2, -1)

    assert table.columns == ("x", "y")
    assert table.n_columns == 2
    assert table.n_rows == len(table) == 2
    assert table.column_name(1) == "y"
    assert table.value(1, 1) == -1.0
    assert list(table.rows()) == [(1.0, 2.5), (2.0, -1.0)]
    assert repr(table) == "DataTable(columns=['x', 'y'], n_rows=2)"

    values = table.column_values(1)
    assert values.dtype == np.float64
    assert values.tolist() == [2.5, -1.0]


def test_data_table_errors() -> None:
    table = DataTable()
    table.add_column("x")

    with pytest.raises(DuplicateColumnError, match="column 'x' already exists"):
        table.add_column("x")

    with pytest.raises(RowWidthMismatchError, match="expected 1 values per row"):
        table.add_row(1, 2)

    assert table.n_rows == 0

    table.add_row(1)

    # columns cannot be added once the table has rows
    with pytest.raises(RowWidthMismatchError):
        table.add_column("y")

    assert table.columns == ("x",)

    with pytest.raises(IndexError):
        table.column_values(1)

    # both error types are value errors
    assert issubclass(DuplicateColumnError, ValueError)
    assert issubclass(RowWidthMismatchError, ValueError)


def test_data_table_non_finite_values() -> None:
    table = DataTable()
    table.add_column("x")
    table.add_column("y")
    table.add_row(0, float("nan"))
    table.add_row(1, float("inf"))

    values = table.column_values(1)
    assert np.isnan(values[0])
    assert np.isposinf(values[1])


def test_data_table_frame_conversion() -> None:
    frame = pd.DataFrame(dict(x=[0, 1, 2], y=[0.5, 1.5, 2.5]))

    table = DataTable.from_frame(frame)
    assert table.columns == ("x", "y")
    assert table.n_rows == 3
    assert table.value(2, 0) == 2.0

    pd.testing.assert_frame_equal(table.to_frame(), frame.astype(np.float64))

    empty = DataTable()
    empty.add_column("a")
    assert empty.to_frame().shape == (0, 1)
