"""
Tests for text tables and character matrices in package termdraw.text
"""

import logging

import numpy as np
import pandas as pd
import pytest

from termdraw.data import DataTable
from termdraw.text import CharacterMatrix, Table, format_table

log = logging.getLogger(__name__)


def test_table_alignment() -> None:
    table = Table()
    table.write("a\tbbb\tc\n")
    table.write("aaa\tb\tc")

    assert str(table) == "a   bbb c\naaa b   c"

    table = Table(align_right=True)
    table.write("a\tb\naaa\tb")

    assert str(table) == "   ab\n aaab"


def test_table_column_blocks() -> None:
    table = Table(padding=2)
    table.write("a\tb\nno tabs here\nccc\td")

    # a line without tabs ends the column block
    assert str(table) == "a  b\nno tabs here\nccc  d"

    table = Table(min_width=6, pad_char=".")
    table.write("x\t1\nyy\t2\n")

    assert str(table) == "x.....1\nyy....2\n"


def test_table_tab_padding() -> None:
    table = Table(tab_width=8, pad_char="\t")
    table.write("a\tb\nabcdefgh\tc")

    assert str(table) == "a\t\tb\nabcdefgh\tc"


def test_table_invalid_args() -> None:
    with pytest.raises(ValueError):
        Table(padding=-1)
    with pytest.raises(ValueError):
        Table(tab_width=0)
    with pytest.raises(ValueError):
        Table(pad_char="..")


def test_format_table() -> None:
    table = DataTable()
    table.add_column("x")
    table.add_column("y")
    table.add_row(1, 2.5)
    table.add_row(10, -1)

    expected = "x   y    \n==  =====\n 1   2.50\n10  -1.00\n"

    assert (
        format_table(
            headings=["x", "y"],
            data=table,
            formats=[".0f", ".2f"],
            alignment=[">", ">"],
        )
        == expected
    )

    assert (
        format_table(
            headings=["x", "y"],
            data=table.to_frame(),
            formats=[".0f", ".2f"],
            alignment=[">", ">"],
        )
        == expected
    )

    assert format_table(
        headings=["name", "n"], data=np.array([["a", 1], ["bb", 22]], dtype=object)
    ) == ("name  n \n====  ==\na     1 \nbb    22\n")

    with pytest.raises(ValueError, match="same length"):
        format_table(headings=["x", "y"], data=[[1, 2, 3]])

    with pytest.raises(ValueError, match="alignment options"):
        format_table(headings=["x"], data=pd.DataFrame([[1]]), alignment=["?"])


def test_character_matrix() -> None:
    matrix = CharacterMatrix(n_rows=2, n_columns=5)
    assert len(matrix) == 2
    assert matrix.n_columns == 5

    matrix[0, 1:4] = "abcdef"
    matrix[1, :] = "-"
    matrix[0:2, 0] = "|"

    # positions outside the matrix are ignored
    matrix[1, -1] = "x"
    matrix[1, 7] = "y"
    matrix[-1, 2] = "z"

    assert str(matrix) == "|abc \n|----"
    assert matrix[0, 1:4] == "abc"
    assert list(matrix.lines(rows=[1])) == ["|----"]

    with pytest.raises(ValueError):
        CharacterMatrix(n_rows=0, n_columns=5)
