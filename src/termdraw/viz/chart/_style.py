"""
Line chart styles.
"""

import logging
from typing import Any, Dict, Iterable, List, Optional, Sequence, TextIO, Union

import numpy as np
import numpy.typing as npt
from matplotlib.axes import Axes

from ...api import AllTracker, inheritdoc, to_list
from ...terminal import AnsiColor
from ...text import Box, CharacterMatrix
from .. import MatplotStyle, TextStyle
from ._chart import InvalidDimensionsError, LineChart
from ._raster import Rasterizer
from ._scale import ScaleDomain, ScalingMode
from .base import LineChartStyle

log = logging.getLogger(__name__)


#
# Exported names
#

__all__ = ["LineChartMatplotStyle", "LineChartReportStyle"]


#
# Ensure all symbols introduced below are included in __all__
#

__tracker = AllTracker(globals())


#
# Classes
#


@inheritdoc(match="[see superclass]")
class LineChartMatplotStyle(LineChartStyle, MatplotStyle):
    """
    Draws line charts using `matplotlib`.

    With independent scaling, each series is normalized to the range `[0, 1]` of
    its own domain so that all series share the vertical axis.
    """

    def __init__(
        self,
        *,
        ax: Optional[Axes] = None,
        font_family: Optional[Union[str, Iterable[str]]] = None,
    ) -> None:
        """[see superclass]"""
        super().__init__(ax=ax, font_family=font_family)
        self._normalize = False

    def start_drawing(
        self,
        *,
        title: str,
        x_label: Optional[str] = None,
        x_domain: Optional[ScaleDomain] = None,
        y_domains: Optional[Sequence[ScaleDomain]] = None,
        mode: Optional[ScalingMode] = None,
        **kwargs: Any,
    ) -> None:
        """[see superclass]"""
        super().start_drawing(
            title=title,
            x_label=x_label,
            x_domain=x_domain,
            y_domains=y_domains,
            mode=mode,
            **kwargs,
        )

        ax = self.ax
        self._normalize = mode is ScalingMode.INDEPENDENT

        ax.set_xlim(x_domain.minimum, x_domain.maximum)
        if self._normalize:
            ax.set_ylim(0.0, 1.0)
            ax.set_ylabel("normalized value")
        elif y_domains:
            ax.set_ylim(y_domains[0].minimum, y_domains[0].maximum)
        if x_label:
            ax.set_xlabel(x_label)

    def draw_series(
        self,
        *,
        index: int,
        series: int,
        name: str,
        x: npt.NDArray[np.float64],
        y: npt.NDArray[np.float64],
        x_domain: ScaleDomain,
        y_domain: ScaleDomain,
    ) -> None:
        """[see superclass]"""
        # NaN values are shown as gaps in the line
        values = y_domain.normalize(y) if self._normalize else y
        self.ax.plot(x, values, label=name)

    def finalize_drawing(self, **kwargs: Any) -> None:
        """[see superclass]"""
        try:
            self._normalize = False
        finally:
            super().finalize_drawing(**kwargs)


@inheritdoc(match="[see superclass]")
class LineChartReportStyle(LineChartStyle, TextStyle):
    """
    Renders line charts as ASCII graphics for inclusion in plain-text reports.

    The chart is :attr:`width` characters wide and :attr:`height` lines high,
    excluding the title.
    With a shared vertical scale, the maximum and minimum of the scale are shown
    left of the top and bottom rows; the last line shows the range of the x axis.
    """

    #: The number of lines of the chart, excluding the title.
    height: int

    #: If ``True``, draw a border around the chart.
    boxed: bool

    #: The glyphs for the series, in series order.
    glyphs: List[str]

    #: The ANSI colors for the series, in series order; no colors if empty.
    colors: List[AnsiColor]

    #: the number of format digits for axis labels
    _LABEL_DIGITS = 4

    def __init__(
        self,
        out: Optional[TextIO] = None,
        width: int = 80,
        height: int = 20,
        *,
        bold_title: bool = False,
        boxed: bool = False,
        glyphs: Optional[Sequence[str]] = None,
        colors: Optional[Sequence[AnsiColor]] = None,
    ) -> None:
        """
        :param height: the number of lines of the chart, excluding the title
            (default: 20)
        :param boxed: if ``True``, draw a border around the chart
        :param glyphs: the characters to draw the series with, in series order
            (default: :attr:`.LineChart.DEFAULT_GLYPHS`)
        :param colors: the ANSI colors to draw the series with, in series order
            (optional)
        """
        super().__init__(out=out, width=width, bold_title=bold_title)
        if height <= 0:
            raise ValueError(f"arg height={height} expected to be a positive integer")

        self.height = height
        self.boxed = boxed
        self.glyphs = to_list(
            glyphs if glyphs is not None else LineChart.DEFAULT_GLYPHS,
            element_type=str,
            arg_name="glyphs",
        )
        self.colors = to_list(
            colors, element_type=AnsiColor, optional=True, arg_name="colors"
        )

        self._rasterizer: Optional[Rasterizer] = None
        self._series_colors: Dict[int, AnsiColor] = {}
        self._margin: List[str] = []
        self._footer = ""

    __init__.__doc__ = TextStyle.__init__.__doc__ + __init__.__doc__

    def start_drawing(
        self,
        *,
        title: str,
        x_domain: Optional[ScaleDomain] = None,
        y_domains: Optional[Sequence[ScaleDomain]] = None,
        mode: Optional[ScalingMode] = None,
        **kwargs: Any,
    ) -> None:
        """
        Prepare the character grid for a new line chart.

        :param title: the title of the chart
        :param x_domain: the domain of the horizontal axis
        :param y_domains: the domain of the vertical axis for each series
        :param mode: the scaling strategy that produced the vertical domains
        :param kwargs: additional drawer-specific arguments
        :raise InvalidDimensionsError: the chart leaves less than 2 × 2 characters
            for the plot
        """
        super().start_drawing(
            title=title, x_domain=x_domain, y_domains=y_domains, mode=mode, **kwargs
        )

        # with independent scales, no single set of y labels applies
        if mode is ScalingMode.INDEPENDENT or not y_domains:
            top_label = bottom_label = ""
        else:
            top_label = self._format_label(y_domains[0].maximum)
            bottom_label = self._format_label(y_domains[0].minimum)

        label_width = max(len(top_label), len(bottom_label))
        border_width = 4 if self.boxed else 0
        plot_width = self.width - border_width - label_width - 2
        plot_height = self.height - border_width // 2 - 1

        if plot_width < 2 or plot_height < 2:
            raise InvalidDimensionsError(
                f"a chart of width={self.width} and height={self.height} leaves "
                f"only {plot_width} x {plot_height} characters for the plot"
            )

        self._margin = [
            top_label.rjust(label_width) + " ┤"
            if row == 0
            else bottom_label.rjust(label_width) + " ┤"
            if row == plot_height - 1
            else " " * label_width + " │"
            for row in range(plot_height)
        ]
        self._footer = " " * (label_width + 2) + self._format_x_range(
            x_domain, plot_width
        )
        self._rasterizer = Rasterizer(
            CharacterMatrix(n_rows=plot_height, n_columns=plot_width)
        )
        self._series_colors = {}

    def draw_series(
        self,
        *,
        index: int,
        series: int,
        name: str,
        x: npt.NDArray[np.float64],
        y: npt.NDArray[np.float64],
        x_domain: ScaleDomain,
        y_domain: ScaleDomain,
    ) -> None:
        """[see superclass]"""
        self._rasterizer.draw_series(
            series=series,
            x=x,
            y=y,
            x_domain=x_domain,
            y_domain=y_domain,
            glyph=self.glyphs[index % len(self.glyphs)],
        )
        if self.colors:
            self._series_colors[series] = self.colors[index % len(self.colors)]

    def finalize_drawing(self, **kwargs: Any) -> None:
        """
        Write the chart to the output stream.

        :param kwargs: additional drawer-specific arguments
        """
        try:
            lines = [
                margin + line
                for margin, line in zip(
                    self._margin, self._rasterizer.lines(colors=self._series_colors)
                )
            ]
            lines.append(self._footer)
            text = "\n".join(lines)

            if self.boxed:
                box = Box(width=self.width, height=self.height)
                box.write(text)
                text = str(box)

            print(text, file=self.out)
        finally:
            self._rasterizer = None
            self._series_colors = {}
            super().finalize_drawing(**kwargs)

    def _format_label(self, value: float) -> str:
        return f"{value:.{self._LABEL_DIGITS}g}"

    def _format_x_range(self, x_domain: ScaleDomain, width: int) -> str:
        left = self._format_label(x_domain.minimum)
        right = self._format_label(x_domain.maximum)
        gap = width - len(left) - len(right)
        if gap < 1:
            return left[:width]
        return left + " " * gap + right


__tracker.validate()
