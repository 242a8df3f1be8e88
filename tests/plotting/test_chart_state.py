"""Unit tests for ChartState defaults and validation."""

import pytest

from genotables.plotting.chart_state import ChartState, ChartType


def test_chart_state_defaults():
    state = ChartState(x="sample", y="count")
    assert state.chart_type == ChartType.SCATTER
    assert state.barmode == "group"
    assert state.color is None
    assert state.symbol is None
    assert state.show_legend is True


def test_chart_type_values():
    assert ChartType("bar") is ChartType.BAR
    with pytest.raises(ValueError):
        ChartType("pie")


def test_chart_state_rejects_unknown_barmode():
    with pytest.raises(ValueError):
        ChartState(x="a", y="b", chart_type=ChartType.BAR, barmode="overlay")
    assert ChartState(x="a", y="b", barmode="stack").barmode == "stack"
