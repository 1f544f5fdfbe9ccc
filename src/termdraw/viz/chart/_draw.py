"""
Drawing line charts.
"""

import logging
from typing import Any, Dict, Iterable, Optional, Type, Union

from ...api import AllTracker, inheritdoc
from ...data import DataTable
from .. import Drawer
from ._scale import AxisScaler, ScalingMode
from ._style import LineChartMatplotStyle, LineChartReportStyle
from .base import LineChartStyle

log = logging.getLogger(__name__)


#
# Exported names
#

__all__ = ["LineChartDrawer"]


#
# Ensure all symbols introduced below are included in __all__
#

__tracker = AllTracker(globals())


#
# Classes
#


@inheritdoc(match="[see superclass]")
class LineChartDrawer(Drawer[DataTable, LineChartStyle]):
    """
    Draws line charts of the series in a :class:`.DataTable`.

    The first column of the table holds the x values, and each further column is
    drawn as one line; the vertical axis is scaled according to :attr:`mode`.
    """

    # defined in superclass, repeated here for Sphinx
    style: LineChartStyle

    #: The scaling strategy for the vertical axis.
    mode: ScalingMode

    def __init__(
        self,
        style: Optional[Union[LineChartStyle, str]] = None,
        *,
        mode: ScalingMode = ScalingMode.SHARED,
    ) -> None:
        """
        :param mode: the scaling strategy for the vertical axis
            (default: :attr:`.ScalingMode.SHARED`)
        """
        super().__init__(style=style)
        self.mode = mode

    __init__.__doc__ = Drawer.__init__.__doc__ + __init__.__doc__

    @classmethod
    def get_style_classes(cls) -> Iterable[Type[LineChartStyle]]:
        """[see superclass]"""
        return [
            LineChartReportStyle,
            LineChartMatplotStyle,
        ]

    def get_style_kwargs(self, data: DataTable) -> Dict[str, Any]:
        """[see superclass]"""
        scaler = AxisScaler(self.mode)
        series = scaler.series_indices(data)

        return dict(
            x_label=data.column_name(0) if data.n_columns > 1 else "row",
            series_names=tuple(data.column_name(index) for index in series),
            x_domain=scaler.x_domain(data),
            y_domains=scaler.y_domains(data, series),
            mode=self.mode,
            **super().get_style_kwargs(data=data),
        )

    def _draw(self, data: DataTable) -> None:
        # draw the series in column order, so later columns are drawn on top
        scaler = AxisScaler(self.mode)
        series = scaler.series_indices(data)
        x_domain = scaler.x_domain(data)
        x_values = scaler.x_values(data)

        for index, (column, y_domain) in enumerate(
            zip(series, scaler.y_domains(data, series))
        ):
            self.style.draw_series(
                index=index,
                series=column,
                name=data.column_name(column),
                x=x_values,
                y=data.column_values(column),
                x_domain=x_domain,
                y_domain=y_domain,
            )


__tracker.validate()
