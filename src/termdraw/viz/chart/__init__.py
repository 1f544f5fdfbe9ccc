"""
Line charts: scaling, rasterization, and drawers and styles rendering tabular
numeric data as text or as `matplotlib` charts.
"""

from ._chart import *
from ._draw import *
from ._raster import *
from ._scale import *
from ._style import *
from .base import *

__all__ = [
    "AxisScaler",
    "InvalidDimensionsError",
    "LineChart",
    "LineChartDrawer",
    "LineChartMatplotStyle",
    "LineChartReportStyle",
    "LineChartStyle",
    "NonFiniteValueSkipped",
    "Rasterizer",
    "ScaleDomain",
    "ScalingMode",
]
