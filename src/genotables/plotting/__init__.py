"""Plotly charts for the genotables report."""

from genotables.plotting.chart_state import ChartState, ChartType
from genotables.plotting.figure_generator import (
    FigureGenerator,
    deamination_bar,
    fusion_support_scatter,
    vaf_scatter,
)
from genotables.plotting.theme import ReportTheme, apply_theme

__all__ = [
    "ChartState",
    "ChartType",
    "FigureGenerator",
    "ReportTheme",
    "apply_theme",
    "deamination_bar",
    "fusion_support_scatter",
    "vaf_scatter",
]
