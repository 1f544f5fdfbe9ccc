"""
Base classes for line chart styles.
"""

import logging
from abc import ABCMeta, abstractmethod
from typing import Any, List, Optional, Sequence

import numpy as np
import numpy.typing as npt

from termdraw.api import AllTracker
from termdraw.viz import DrawingStyle

from .._scale import ScaleDomain, ScalingMode

log = logging.getLogger(__name__)

#
# Exported names
#

__all__ = ["LineChartStyle"]


#
# Ensure all symbols introduced below are included in __all__
#

__tracker = AllTracker(globals())


#
# Classes
#


class LineChartStyle(DrawingStyle, metaclass=ABCMeta):
    """
    Base class for line chart drawing styles.
    """

    def start_drawing(
        self,
        *,
        title: str,
        x_label: Optional[str] = None,
        series_names: Optional[Sequence[str]] = None,
        x_domain: Optional[ScaleDomain] = None,
        y_domains: Optional[Sequence[ScaleDomain]] = None,
        mode: Optional[ScalingMode] = None,
        **kwargs: Any,
    ) -> None:
        """
        Prepare a new line chart for drawing, using the given title.

        :param title: the title of the chart
        :param x_label: the label of the horizontal axis
        :param series_names: the names of all series, in drawing order
        :param x_domain: the domain of the horizontal axis
        :param y_domains: the domain of the vertical axis for each series
        :param mode: the scaling strategy that produced the vertical domains
        :param kwargs: additional drawer-specific arguments
        """

        none_args: List[str] = [
            arg
            for arg, value in {
                "x_label": x_label,
                "series_names": series_names,
                "x_domain": x_domain,
                "y_domains": y_domains,
                "mode": mode,
            }.items()
            if value is None
        ]
        if none_args:
            raise ValueError(
                "keyword arguments must not be None: " + ", ".join(none_args)
            )

        super().start_drawing(title=title, **kwargs)

    def finalize_drawing(
        self,
        *,
        x_label: Optional[str] = None,
        series_names: Optional[Sequence[str]] = None,
        x_domain: Optional[ScaleDomain] = None,
        y_domains: Optional[Sequence[ScaleDomain]] = None,
        mode: Optional[ScalingMode] = None,
        **kwargs: Any,
    ) -> None:
        """
        Finalize the line chart.

        :param x_label: the label of the horizontal axis
        :param series_names: the names of all series, in drawing order
        :param x_domain: the domain of the horizontal axis
        :param y_domains: the domain of the vertical axis for each series
        :param mode: the scaling strategy that produced the vertical domains
        :param kwargs: additional drawer-specific arguments
        """
        super().finalize_drawing(**kwargs)

    @abstractmethod
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
        """
        Draw one series as a line.

        :param index: the position of the series in drawing order, starting at 0
        :param series: the column index of the series in the data table
        :param name: the name of the series
        :param x: the x value of each point
        :param y: the y value of each point
        :param x_domain: the domain of the horizontal axis
        :param y_domain: the domain of the vertical axis for this series
        """
        pass


__tracker.validate()
