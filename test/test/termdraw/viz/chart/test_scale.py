"""
Tests for axis scaling in package termdraw.viz.chart
"""

import logging
import math
import sys

import numpy as np
import pytest

from termdraw.data import DataTable
from termdraw.viz.chart import AxisScaler, ScaleDomain, ScalingMode

log = logging.getLogger(__name__)


def test_scale_domain_of() -> None:
    assert ScaleDomain.of([3, -1, 2]) == (-1.0, 3.0)
    assert ScaleDomain.of([2, 5], include_zero=True) == (0.0, 5.0)
    assert ScaleDomain.of([-2, 5], include_zero=True) == (-2.0, 5.0)

    # non-finite values are ignored
    assert ScaleDomain.of([1, np.nan, 4, np.inf, -np.inf]) == (1.0, 4.0)
    assert ScaleDomain.of([]) == (0.0, 1.0)
    assert ScaleDomain.of([np.nan]) == (0.0, 1.0)


def test_scale_domain_degenerate() -> None:
    domain = ScaleDomain.from_bounds(3.0, 3.0)
    assert domain.minimum < 3.0 < domain.maximum
    assert domain.span > 0.0
    assert math.isclose(domain.span, 6e-9, rel_tol=1e-3)

    # near zero, the domain is widened by at least the absolute epsilon
    assert ScaleDomain.of([0.0, 0.0]).span >= 2e-9

    with pytest.raises(ValueError):
        ScaleDomain.from_bounds(2.0, 1.0)


def test_scale_domain_position() -> None:
    domain = ScaleDomain(minimum=0.0, maximum=10.0)

    assert domain.position(0.0, 11) == 0
    assert domain.position(10.0, 11) == 10
    assert domain.position(5.0, 11) == 5

    # values outside the domain are clamped
    assert domain.position(-5.0, 11) == 0
    assert domain.position(20.0, 11) == 10

    np.testing.assert_allclose(domain.normalize([0, 5, 10]), [0.0, 0.5, 1.0])


def test_scale_domain_extreme_values() -> None:
    max_float = sys.float_info.max

    # the span of this domain is not a finite float
    domain = ScaleDomain.of([-1e308, 1e308])
    assert domain.position(-1e308, 5) == 0
    assert domain.position(0.0, 5) == 2
    assert domain.position(1e308, 5) == 4
    np.testing.assert_allclose(domain.normalize([-1e308, 0.0, 1e308]), [0.0, 0.5, 1.0])

    # values far outside a narrow domain are clamped
    narrow = ScaleDomain(minimum=0.0, maximum=1e-300)
    assert narrow.position(max_float, 5) == 4
    assert narrow.position(-max_float, 5) == 0

    # widened degenerate domains keep finite bounds
    for value in [1e308, max_float, -max_float]:
        domain = ScaleDomain.of([value])
        assert math.isfinite(domain.minimum) and math.isfinite(domain.maximum)
        assert domain.minimum <= value <= domain.maximum
        assert domain.minimum < domain.maximum

    assert ScaleDomain.of([1e308]).position(1e308, 4) == 1
    assert ScaleDomain.of([max_float]).position(max_float, 4) == 3
    assert ScaleDomain.of([-max_float]).position(-max_float, 4) == 0


def test_axis_scaler_modes(disjoint_table: DataTable) -> None:
    with pytest.raises(TypeError):
        AxisScaler("shared")  # type: ignore

    assert AxisScaler.series_indices(disjoint_table) == [1, 2]
    assert AxisScaler().x_domain(disjoint_table) == (0.0, 9.0)

    shared = AxisScaler(ScalingMode.SHARED).y_domains(disjoint_table)
    assert shared == [(0.0, 1001.0), (0.0, 1001.0)]

    independent = AxisScaler(ScalingMode.INDEPENDENT).y_domains(disjoint_table)
    assert independent == [(0.0, 1.0), (1000.0, 1001.0)]

    # a subset of series can be scaled
    assert AxisScaler(ScalingMode.RELATIVE).y_domains(disjoint_table, [2]) == [
        (1000.0, 1001.0)
    ]


def test_axis_scaler_zero_anchor() -> None:
    table = DataTable()
    table.add_column("x")
    table.add_column("y")
    for x in range(5):
        table.add_row(x, 5 + x)

    # the shared scale starts at zero for positive data, the relative scale does not
    assert AxisScaler(ScalingMode.SHARED).y_domains(table) == [(0.0, 9.0)]
    assert AxisScaler(ScalingMode.RELATIVE).y_domains(table) == [(5.0, 9.0)]


def test_axis_scaler_single_column() -> None:
    table = DataTable()
    table.add_column("y")
    for value in [4, 2, 7]:
        table.add_row(value)

    assert AxisScaler.series_indices(table) == [0]
    assert AxisScaler.x_values(table).tolist() == [0.0, 1.0, 2.0]
    assert AxisScaler().x_domain(table) == (0.0, 2.0)
    assert AxisScaler().y_domains(table) == [(0.0, 7.0)]
