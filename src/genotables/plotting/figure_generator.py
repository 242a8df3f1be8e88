"""Plotly figure generation for report charts.

This module provides the FigureGenerator class for turning a table and a
ChartState into a Plotly figure dictionary, plus the three charts the report
draws (deamination bars, VAF scatter, fusion support scatter).
"""

from __future__ import annotations

from typing import Optional

import numpy as np
import pandas as pd
import plotly.graph_objects as go

from genotables.plotting.chart_state import ChartState, ChartType
from genotables.plotting.theme import ReportTheme, apply_theme
from genotables.utils.logging import get_logger

logger = get_logger(__name__)

# Plotly marker symbols, assigned in order of sorted symbol values
PLOTLY_SYMBOLS = [
    "circle", "square", "diamond", "triangle-up", "triangle-down",
    "triangle-left", "triangle-right", "pentagon", "hexagon", "star",
    "hexagram", "cross", "x", "star-square", "star-diamond", "hourglass",
]


def symbol_map(values: pd.Series) -> dict[str, str]:
    """Map each distinct value (as string) to a Plotly marker symbol."""
    unique_values = sorted(values.dropna().astype(str).unique())
    return {v: PLOTLY_SYMBOLS[i % len(PLOTLY_SYMBOLS)] for i, v in enumerate(unique_values)}


class FigureGenerator:
    """Generates Plotly figure dictionaries from a table and a ChartState.

    Attributes:
        theme: ReportTheme applied to every figure (None = default theme).
    """

    def __init__(self, theme: Optional[ReportTheme] = None) -> None:
        self.theme = theme

    def make_figure(self, df: pd.DataFrame, state: ChartState) -> dict:
        """Generate a Plotly figure dictionary for the chart described by state.

        Raises:
            KeyError: If a column named in state is not in df.
        """
        needed = [state.x, state.y] + [c for c in (state.color, state.symbol) if c]
        missing = [c for c in needed if c not in df.columns]
        if missing:
            raise KeyError(f"Unknown column(s) {missing}; available: {list(df.columns)}")

        logger.info(
            f"FigureGenerator.make_figure: chart_type={state.chart_type.value}, rows={len(df)}, "
            f"x={state.x}, y={state.y}, color={state.color}"
        )

        if state.chart_type == ChartType.BAR:
            fig = self._figure_bar(df, state)
        else:
            fig = self._figure_scatter(df, state)

        layout_updates = {
            "xaxis_title": state.xaxis_title or state.x,
            "yaxis_title": state.yaxis_title or state.y,
            "showlegend": state.show_legend,
        }
        if state.title:
            layout_updates["title"] = state.title
        if state.color:
            layout_updates["legend_title_text"] = (
                f"{state.color} / {state.symbol}" if state.symbol and state.symbol != state.color else state.color
            )
        fig.update_layout(**layout_updates)
        apply_theme(fig, self.theme)

        result = fig.to_dict()
        logger.debug(f"Figure generated: {len(result.get('data', []))} traces")
        return result

    def _figure_bar(self, df: pd.DataFrame, state: ChartState) -> go.Figure:
        """Bar chart; one trace per color value, side by side (barmode group) or stacked."""
        fig = go.Figure()
        if state.color:
            for color_val, sub in df.groupby(df[state.color].astype(str), sort=True):
                fig.add_trace(go.Bar(
                    x=sub[state.x].astype(str).tolist(),
                    y=pd.to_numeric(sub[state.y], errors="coerce").tolist(),
                    name=str(color_val),
                    hovertemplate=(
                        f"{state.x}=%{{x}}<br>{state.color}={color_val}<br>"
                        f"{state.y}=%{{y}}<extra></extra>"
                    ),
                ))
        else:
            fig.add_trace(go.Bar(
                x=df[state.x].astype(str).tolist(),
                y=pd.to_numeric(df[state.y], errors="coerce").tolist(),
                name=state.y,
            ))
        fig.update_layout(barmode=state.barmode, xaxis_tickangle=-30)
        return fig

    def _figure_scatter(self, df: pd.DataFrame, state: ChartState) -> go.Figure:
        """Scatter plot; color splits traces, symbol maps to marker shapes across all traces."""
        tmp = pd.DataFrame({
            "x": pd.to_numeric(df[state.x], errors="coerce") if self._is_numeric(df, state.x) else df[state.x],
            "y": pd.to_numeric(df[state.y], errors="coerce"),
        })
        if state.color:
            tmp["color"] = df[state.color].astype(str)
        if state.symbol:
            tmp["symbol"] = df[state.symbol].astype(str)
        tmp = tmp.dropna(subset=["x", "y"])

        # Log axes cannot show values <= 0
        if state.log_x and self._is_numeric(tmp, "x"):
            tmp = tmp[tmp["x"] > 0]
        if state.log_y:
            tmp = tmp[tmp["y"] > 0]

        symbols = symbol_map(tmp["symbol"]) if "symbol" in tmp.columns else None

        fig = go.Figure()
        groups = tmp.groupby("color", sort=True) if "color" in tmp.columns else [(None, tmp)]
        for color_val, sub in groups:
            marker = dict(size=state.point_size, opacity=0.85, line=dict(width=0.5, color="#333333"))
            hover_parts = [f"{state.x}=%{{x}}", f"{state.y}=%{{y}}"]
            customdata = None
            if symbols is not None:
                marker["symbol"] = [symbols[s] for s in sub["symbol"]]
                customdata = np.column_stack([sub["symbol"].to_numpy()])
                hover_parts.append(f"{state.symbol}=%{{customdata[0]}}")
            if color_val is not None:
                hover_parts.insert(0, f"{state.color}={color_val}")
            fig.add_trace(go.Scatter(
                x=sub["x"].tolist(),
                y=sub["y"].tolist(),
                mode="markers",
                name=str(color_val) if color_val is not None else "Data",
                marker=marker,
                customdata=customdata,
                hovertemplate="<br>".join(hover_parts) + "<extra></extra>",
            ))

        if state.log_x:
            fig.update_xaxes(type="log")
        if state.log_y:
            fig.update_yaxes(type="log")
        return fig

    @staticmethod
    def _is_numeric(df: pd.DataFrame, col: str) -> bool:
        """Return True if the column is numeric (int/float)."""
        return getattr(df[col].dtype, "kind", None) in {"i", "u", "f"}


def deamination_bar(summary: pd.DataFrame, *, value: str = "count", theme: Optional[ReportTheme] = None) -> dict:
    """Dodged bars per sample, one bar per deamination status.

    Args:
        summary: Output of deamination_summary().
        value: "count" or "mean_vaf".
    """
    state = ChartState(
        x="sample",
        y=value,
        chart_type=ChartType.BAR,
        color="deaminated",
        barmode="group",
        title="Deamination by sample" if value == "count" else "Mean VAF by deamination status",
        yaxis_title="Variants" if value == "count" else "Mean VAF (%)",
    )
    return FigureGenerator(theme).make_figure(summary, state)


def vaf_scatter(variants: pd.DataFrame, *, theme: Optional[ReportTheme] = None) -> dict:
    """Genome position vs numeric VAF, colored by sample and shaped by variant type."""
    state = ChartState(
        x="genome_position",
        y="vaf_numeric",
        chart_type=ChartType.SCATTER,
        color="sample",
        symbol="type",
        title="Variant allele fraction by position",
        xaxis_title="Genome position",
        yaxis_title="VAF (%)",
    )
    return FigureGenerator(theme).make_figure(variants, state)


def fusion_support_scatter(fusions: pd.DataFrame, *, theme: Optional[ReportTheme] = None) -> dict:
    """Junction reads vs spanning reads on log-log axes, colored by sample."""
    state = ChartState(
        x="junction_reads",
        y="spanning_reads",
        chart_type=ChartType.SCATTER,
        color="sample",
        log_x=True,
        log_y=True,
        title="Fusion read support",
        xaxis_title="Junction reads",
        yaxis_title="Spanning fragments",
    )
    return FigureGenerator(theme).make_figure(fusions, state)
