"""
Drawing polylines onto a character grid.
"""

import logging
import math
from itertools import groupby
from typing import (
    Callable,
    Iterable,
    Iterator,
    List,
    Mapping,
    NamedTuple,
    Optional,
    Tuple,
)

import numpy as np
import numpy.typing as npt

from ...api import AllTracker
from ...terminal import AnsiColor, color
from ...text import CharacterMatrix
from ._scale import ScaleDomain

log = logging.getLogger(__name__)


#
# Exported names
#

__all__ = ["NonFiniteValueSkipped", "Rasterizer"]


#
# Ensure all symbols introduced below are included in __all__
#

__tracker = AllTracker(globals())


#
# Classes
#


class NonFiniteValueSkipped(NamedTuple):
    """
    Notification that a data point was not drawn because its x or y value is NaN or
    infinite.

    The polyline of the series is interrupted at the skipped point; rendering
    continues with the next point.
    """

    #: the column index of the series
    series: int

    #: the row index of the skipped point
    row: int

    #: the non-finite value
    value: float


class Rasterizer:
    """
    Draws the series of a chart as polylines onto a :class:`.CharacterMatrix`.

    Consecutive points of a series are connected by straight lines of the series'
    glyph, computed with Bresenham's algorithm.
    Where series overlap, the series drawn last owns the cell.
    """

    #: The character grid to draw on.
    canvas: CharacterMatrix

    #: Function to call for every point that is skipped because of a non-finite
    #: value (optional).
    on_skipped: Optional[Callable[[NonFiniteValueSkipped], None]]

    def __init__(
        self,
        canvas: CharacterMatrix,
        *,
        on_skipped: Optional[Callable[[NonFiniteValueSkipped], None]] = None,
    ) -> None:
        """
        :param canvas: the character grid to draw on
        :param on_skipped: function to call for every point that is skipped because
            of a non-finite value (optional)
        """
        self.canvas = canvas
        self.on_skipped = on_skipped
        self._owners: List[List[Optional[int]]] = [
            [None] * canvas.n_columns for _ in range(canvas.n_rows)
        ]

    def owner(self, row: int, column: int) -> Optional[int]:
        """
        Get the series owning a cell.

        :param row: the row of the cell
        :param column: the column of the cell
        :return: the column index of the series drawn last at the given cell, or
            ``None`` if the cell is blank
        """
        return self._owners[row][column]

    def draw_series(
        self,
        *,
        series: int,
        x: npt.ArrayLike,
        y: npt.ArrayLike,
        x_domain: ScaleDomain,
        y_domain: ScaleDomain,
        glyph: str,
    ) -> None:
        """
        Draw one series as a polyline.

        :param series: the column index of the series
        :param x: the x value of each point
        :param y: the y value of each point
        :param x_domain: the domain to map x values onto the canvas width
        :param y_domain: the domain to map y values onto the canvas height
        :param glyph: the character to draw the series with
        """
        if len(glyph) != 1:
            raise ValueError(f"arg glyph must be a single character: {glyph!r}")

        xs = np.asarray(x, dtype=np.float64)
        ys = np.asarray(y, dtype=np.float64)
        if xs.shape != ys.shape:
            raise ValueError(
                f"args x and y must have the same shape: {xs.shape} != {ys.shape}"
            )

        n_rows = self.canvas.n_rows
        n_columns = self.canvas.n_columns

        previous: Optional[Tuple[int, int]] = None

        for row, (x_value, y_value) in enumerate(zip(xs.tolist(), ys.tolist())):
            non_finite = next(
                (v for v in (x_value, y_value) if not math.isfinite(v)), None
            )
            if non_finite is not None:
                self._skip(NonFiniteValueSkipped(series, row, non_finite))
                previous = None
                continue

            # rows are counted from the top, values grow towards the top
            cell = (
                x_domain.position(x_value, n_columns),
                n_rows - 1 - y_domain.position(y_value, n_rows),
            )

            if previous is None:
                self._plot(*cell, glyph=glyph, series=series)
            else:
                for column, line_row in _line(*previous, *cell):
                    self._plot(column, line_row, glyph=glyph, series=series)

            previous = cell

    def lines(self, colors: Optional[Mapping[int, AnsiColor]] = None) -> Iterator[str]:
        """
        Get the rows of the canvas as strings.

        :param colors: the color for each series, keyed by column index (optional);
            cells owned by series not in this mapping are not colored
        :return: the rows of the canvas, from top to bottom
        """
        if not colors:
            yield from self.canvas.lines()
            return

        for line, owners in zip(self.canvas.lines(), self._owners):
            yield "".join(
                _colored("".join(line[i] for i, _ in cells), colors.get(owner))
                for owner, cells in groupby(enumerate(owners), key=lambda c: c[1])
            )

    def _plot(self, column: int, row: int, *, glyph: str, series: int) -> None:
        if 0 <= row < self.canvas.n_rows and 0 <= column < self.canvas.n_columns:
            self.canvas[row, column] = glyph
            self._owners[row][column] = series

    def _skip(self, event: NonFiniteValueSkipped) -> None:
        log.debug(
            f"skipped point {event.row} of series {event.series}: "
            f"non-finite value {event.value}"
        )
        if self.on_skipped is not None:
            self.on_skipped(event)


__tracker.validate()


def _line(x0: int, y0: int, x1: int, y1: int) -> Iterable[Tuple[int, int]]:
    # all cells on the line from (x0, y0) to (x1, y1), both ends included
    dx = abs(x1 - x0)
    dy = -abs(y1 - y0)
    step_x = 1 if x0 < x1 else -1
    step_y = 1 if y0 < y1 else -1
    error = dx + dy

    while True:
        yield x0, y0
        if x0 == x1 and y0 == y1:
            return
        doubled = 2 * error
        if doubled >= dy:
            error += dy
            x0 += step_x
        if doubled <= dx:
            error += dx
            y0 += step_y


def _colored(text: str, code: Optional[AnsiColor]) -> str:
    return text if code is None else color(text, code)
