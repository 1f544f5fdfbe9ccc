import logging

import matplotlib
import numpy as np
import pytest

from termdraw.data import DataTable

# render matplotlib charts without a display
matplotlib.use("Agg")

logging.basicConfig(level=logging.DEBUG)
log = logging.getLogger(__name__)


@pytest.fixture
def sine_table() -> DataTable:
    """A table with x values from 0 to 99 and two sine waves of different scale."""
    table = DataTable()
    table.add_column("x")
    table.add_column("f(x)")
    table.add_column("g(x)")
    for i in range(100):
        table.add_row(i, np.sin(i / 5.0) * 10.0, np.sin(i / 5.0) * 2.0)
    return table


@pytest.fixture
def ramp_table() -> DataTable:
    """A table with a single rising series, from 0 to 9."""
    table = DataTable()
    table.add_column("x")
    table.add_column("y")
    for i in range(10):
        table.add_row(i, i)
    return table


@pytest.fixture
def disjoint_table() -> DataTable:
    """
    A table with a rising series in range [0, 1], and a falling series in range
    [1000, 1001].
    """
    table = DataTable()
    table.add_column("x")
    table.add_column("low")
    table.add_column("high")
    for i in range(10):
        table.add_row(i, i / 9, 1000 + (9 - i) / 9)
    return table
