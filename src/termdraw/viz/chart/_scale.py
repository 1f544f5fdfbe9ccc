"""
Mapping data values to positions on a character grid.
"""

import logging
import math
import sys
from enum import Enum
from typing import List, NamedTuple, Optional, Sequence

import numpy as np
import numpy.typing as npt

from ...api import AllTracker
from ...data import DataTable

log = logging.getLogger(__name__)


#
# Exported names
#

__all__ = ["AxisScaler", "ScaleDomain", "ScalingMode"]


#
# Ensure all symbols introduced below are included in __all__
#

__tracker = AllTracker(globals())


#
# Constants
#

# relative amount by which degenerate domains are widened on either side
_EPSILON = 1e-9

# the largest finite float
_FLOAT_MAX = sys.float_info.max


#
# Classes
#


class ScalingMode(Enum):
    """
    The strategy for scaling the vertical axis of a line chart.
    """

    #: All series share one scale. The scale starts at zero unless there are
    #: negative values, in which case it spans the full range of the data.
    SHARED = "shared"

    #: All series share one scale, spanning exactly the range of the data, so that
    #: differences in magnitude between series remain visible.
    RELATIVE = "relative"

    #: Each series is scaled to its own range, so that trends can be compared
    #: across series of different magnitude.
    INDEPENDENT = "independent"


class ScaleDomain(NamedTuple):
    """
    The range of values mapped onto one axis of a character grid.

    The minimum is never greater than the maximum; use :meth:`.from_bounds` or
    :meth:`.of` to also ensure that the domain has a non-zero span.
    """

    #: the value mapped to the first cell of the axis
    minimum: float

    #: the value mapped to the last cell of the axis
    maximum: float

    @classmethod
    def from_bounds(cls, minimum: float, maximum: float) -> "ScaleDomain":
        """
        Create a domain from its bounds, widening it if both bounds are equal.

        :param minimum: the lower bound
        :param maximum: the upper bound
        :return: the new domain
        :raise ValueError: the lower bound is greater than the upper bound
        """
        if minimum > maximum:
            raise ValueError(
                f"arg minimum={minimum} must not be greater than arg maximum={maximum}"
            )
        if minimum == maximum:
            value = minimum
            # both bounds must stay finite near the float limits
            margin = min(_EPSILON * max(1.0, abs(value)), _FLOAT_MAX - abs(value))
            if margin > 0.0:
                minimum, maximum = value - margin, value + margin
            elif value > 0.0:
                minimum = float(np.nextafter(value, 0.0))
            else:
                maximum = float(np.nextafter(value, 0.0))
        return cls(minimum=minimum, maximum=maximum)

    @classmethod
    def of(
        cls, values: npt.ArrayLike, *, include_zero: bool = False
    ) -> "ScaleDomain":
        """
        Get the domain spanning all finite values in the given array.

        NaN and infinite values are ignored; if there are no finite values at all,
        the domain is `(0, 1)`.

        :param values: the values to span
        :param include_zero: if ``True`` and all values are positive, extend the
            domain down to zero
        :return: the domain
        """
        array = np.asarray(values, dtype=np.float64)
        finite = array[np.isfinite(array)]

        if finite.size == 0:
            return cls(minimum=0.0, maximum=1.0)

        minimum = float(finite.min())
        maximum = float(finite.max())

        if include_zero and minimum > 0.0:
            minimum = 0.0

        return cls.from_bounds(minimum, maximum)

    @property
    def span(self) -> float:
        """
        The difference between the maximum and the minimum; infinite if it exceeds
        the largest finite float.
        """
        return self.maximum - self.minimum

    def position(self, value: float, extent: int) -> int:
        """
        Map a value to a cell along an axis of the given length.

        The minimum maps to cell `0` and the maximum to cell `extent - 1`; values
        outside the domain are clamped to the nearest of these cells.

        :param value: a finite value
        :param extent: the number of cells along the axis
        :return: the index of the cell
        """
        # halved operands keep differences of large values finite
        half_span = self.maximum / 2 - self.minimum / 2
        if half_span > 0.0:
            ratio = (value / 2 - self.minimum / 2) / half_span
        else:
            ratio = 0.0
        ratio = min(max(ratio, 0.0), 1.0)
        return min(math.floor(ratio * (extent - 1)), extent - 1)

    def normalize(self, values: npt.ArrayLike) -> npt.NDArray[np.float64]:
        """
        Map values linearly so that this domain becomes the range `[0, 1]`.

        :param values: the values to map
        :return: the normalized values
        """
        array = np.asarray(values, dtype=np.float64)
        return (array / 2 - self.minimum / 2) / (self.maximum / 2 - self.minimum / 2)


class AxisScaler:
    """
    Determines the scale domains for plotting the series of a :class:`.DataTable`.

    The first column of the table holds the x values for all series, and each
    further column is one series.
    If the table has a single column, that column is the only series and is
    plotted against the row index.

    The horizontal axis is always scaled to the range of the x values; the vertical
    axis is scaled according to the :class:`.ScalingMode`.
    """

    #: The scaling strategy for the vertical axis.
    mode: ScalingMode

    def __init__(self, mode: ScalingMode = ScalingMode.SHARED) -> None:
        """
        :param mode: the scaling strategy for the vertical axis
        """
        if not isinstance(mode, ScalingMode):
            raise TypeError(
                f"arg mode must be a {ScalingMode.__name__} but is {mode!r}"
            )
        self.mode = mode

    @staticmethod
    def series_indices(table: DataTable) -> List[int]:
        """
        Get the column indices of all series in the given table.

        :param table: the table to plot
        :return: the column indices of the series, in plotting order
        """
        if table.n_columns <= 1:
            return list(range(table.n_columns))
        else:
            return list(range(1, table.n_columns))

    @staticmethod
    def x_values(table: DataTable) -> npt.NDArray[np.float64]:
        """
        Get the horizontal position of each row of the given table.

        :param table: the table to plot
        :return: the values of the first column, or the row indices if the table
            has only one column
        """
        if table.n_columns <= 1:
            return np.arange(table.n_rows, dtype=np.float64)
        else:
            return table.column_values(0)

    def x_domain(self, table: DataTable) -> ScaleDomain:
        """
        Get the domain of the horizontal axis.

        :param table: the table to plot
        :return: the domain spanning all x values
        """
        return ScaleDomain.of(self.x_values(table))

    def y_domains(
        self, table: DataTable, series: Optional[Sequence[int]] = None
    ) -> List[ScaleDomain]:
        """
        Get the domains of the vertical axis, one for each series.

        In mode :attr:`.ScalingMode.INDEPENDENT`, each series gets a domain spanning
        its own values; otherwise all series get the same domain.

        :param table: the table to plot
        :param series: the column indices of the series to scale (default: all
            series, see :meth:`.series_indices`)
        :return: one domain per series, in the order of arg ``series``
        """
        if series is None:
            series = self.series_indices(table)

        columns = [table.column_values(index) for index in series]

        domains: List[ScaleDomain]
        if self.mode is ScalingMode.INDEPENDENT:
            domains = [ScaleDomain.of(values) for values in columns]
        else:
            shared = ScaleDomain.of(
                np.concatenate(columns) if columns else np.empty(0),
                include_zero=self.mode is ScalingMode.SHARED,
            )
            domains = [shared] * len(columns)

        log.debug(
            f"{self.mode.value} y domains for series {list(series)}: "
            f"{[tuple(domain) for domain in domains]}"
        )

        return domains


__tracker.validate()
