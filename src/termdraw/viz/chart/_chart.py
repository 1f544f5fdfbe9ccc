"""
Rendering line charts as blocks of text.
"""

import logging
from numbers import Integral
from typing import Callable, Dict, List, Optional, Sequence, Tuple

from ...api import AllTracker, to_list
from ...data import DataTable
from ...terminal import AnsiColor
from ...text import Box, CharacterMatrix
from ._raster import NonFiniteValueSkipped, Rasterizer
from ._scale import AxisScaler, ScaleDomain, ScalingMode

log = logging.getLogger(__name__)


#
# Exported names
#

__all__ = ["InvalidDimensionsError", "LineChart"]


#
# Ensure all symbols introduced below are included in __all__
#

__tracker = AllTracker(globals())


#
# Exceptions
#


class InvalidDimensionsError(ValueError):
    """
    Raised when a chart is too small to be drawn.
    """


#
# Classes
#


class LineChart:
    """
    Renders the series of a :class:`.DataTable` as an ASCII line chart.

    The first column of the table provides the x values, and each further column is
    drawn as a polyline using its own glyph.
    The chart is returned as a block of exactly :attr:`height` lines, each
    :attr:`width` character cells wide, without axes or labels.

    Drawing does not change the chart or the table, so drawing the same table
    twice yields the same text.

    Example:

    .. code-block:: python

        table = DataTable()
        table.add_column("x")
        table.add_column("x²")
        for x in range(-10, 11):
            table.add_row(x, x * x)

        print(LineChart(width=60, height=15).draw(table))
    """

    #: The glyphs used for the series, in series order; repeated for charts with
    #: more series than glyphs.
    DEFAULT_GLYPHS = ("*", "+", "o", "x", "#", "@", "%", "=")

    #: The width of the chart, in character cells.
    width: int

    #: The height of the chart, in lines.
    height: int

    #: The scaling strategy for the vertical axis.
    mode: ScalingMode

    #: The glyphs for the series, in series order.
    glyphs: List[str]

    #: The ANSI colors for the series, in series order; no colors if empty.
    colors: List[AnsiColor]

    #: Function to call for every point that cannot be drawn because of a
    #: non-finite value (optional).
    on_skipped: Optional[Callable[[NonFiniteValueSkipped], None]]

    def __init__(
        self,
        width: int,
        height: int,
        *,
        mode: ScalingMode = ScalingMode.SHARED,
        glyphs: Optional[Sequence[str]] = None,
        colors: Optional[Sequence[AnsiColor]] = None,
        on_skipped: Optional[Callable[[NonFiniteValueSkipped], None]] = None,
    ) -> None:
        """
        :param width: the width of the chart, in character cells; at least 2
        :param height: the height of the chart, in lines; at least 2
        :param mode: the scaling strategy for the vertical axis
            (default: :attr:`.ScalingMode.SHARED`)
        :param glyphs: the characters to draw the series with, in series order
            (default: :attr:`.DEFAULT_GLYPHS`)
        :param colors: the ANSI colors to draw the series with, in series order
            (optional)
        :param on_skipped: function to call for every point that cannot be drawn
            because of a non-finite value (optional)
        """
        glyphs = to_list(
            glyphs if glyphs is not None else LineChart.DEFAULT_GLYPHS,
            element_type=str,
            arg_name="glyphs",
        )
        if not glyphs or any(len(glyph) != 1 for glyph in glyphs):
            raise ValueError(
                f"arg glyphs must be one or more single characters: {glyphs!r}"
            )

        self.width = width
        self.height = height
        self.mode = mode
        self.glyphs = glyphs
        self.colors = to_list(
            colors, element_type=AnsiColor, optional=True, arg_name="colors"
        )
        self.on_skipped = on_skipped

    def domains(self, table: DataTable) -> Tuple[ScaleDomain, List[ScaleDomain]]:
        """
        Get the scale domains used when drawing the given table.

        :param table: the table to plot
        :return: the domain of the horizontal axis, and one domain of the vertical
            axis for each series
        """
        scaler = AxisScaler(self.mode)
        return scaler.x_domain(table), scaler.y_domains(table)

    def draw(self, table: DataTable) -> str:
        """
        Draw the series of the given table.

        Points with NaN or infinite values are skipped; a table without rows yields
        a blank chart.

        :param table: the table to plot
        :return: the chart as :attr:`height` lines, separated by line breaks
        :raise InvalidDimensionsError: the width or height of this chart is not an
            integer of at least 2
        """
        self._validate_dimensions()

        x_domain, y_domains = self.domains(table)
        x_values = AxisScaler.x_values(table)

        rasterizer = Rasterizer(
            CharacterMatrix(n_rows=self.height, n_columns=self.width),
            on_skipped=self.on_skipped,
        )

        series_colors: Dict[int, AnsiColor] = {}
        for n, (series, y_domain) in enumerate(
            zip(AxisScaler.series_indices(table), y_domains)
        ):
            rasterizer.draw_series(
                series=series,
                x=x_values,
                y=table.column_values(series),
                x_domain=x_domain,
                y_domain=y_domain,
                glyph=self.glyphs[n % len(self.glyphs)],
            )
            if self.colors:
                series_colors[series] = self.colors[n % len(self.colors)]

        return "\n".join(rasterizer.lines(colors=series_colors))

    def draw_boxed(self, table: DataTable, *, padding_x: int = 1) -> str:
        """
        Draw the series of the given table inside a border.

        :param table: the table to plot
        :param padding_x: the number of spaces between the border and the chart
        :return: the bordered chart, :attr:`height` + 2 lines high
        """
        box = Box(
            width=self.width + 2 * (padding_x + 1),
            height=self.height + 2,
            padding_x=padding_x,
        )
        box.write(self.draw(table))
        return str(box)

    def _validate_dimensions(self) -> None:
        for name, value in (("width", self.width), ("height", self.height)):
            if (
                not isinstance(value, Integral)
                or isinstance(value, bool)
                or value < 2
            ):
                raise InvalidDimensionsError(
                    f"chart {name} must be an integer of at least 2 but is {value!r}"
                )


__tracker.validate()
