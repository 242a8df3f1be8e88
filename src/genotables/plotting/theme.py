"""Plotly theming for report charts.

ReportTheme holds the cosmetic settings (template, font, margins, colorway)
shared by every report figure; apply_theme writes them onto a go.Figure.
"""

from __future__ import annotations

from dataclasses import dataclass, field
from typing import Optional

import plotly.graph_objects as go

# Colorblind-friendly palette (Okabe-Ito)
OKABE_ITO = [
    "#E69F00", "#56B4E9", "#009E73", "#F0E442",
    "#0072B2", "#D55E00", "#CC79A7", "#000000",
]


@dataclass
class ReportTheme:
    """Cosmetic settings shared by every report chart."""
    template: str = "simple_white"
    font_family: str = "Arial, Helvetica, sans-serif"
    font_size: int = 12
    title_size: int = 14
    colorway: list[str] = field(default_factory=lambda: list(OKABE_ITO))
    margin: dict[str, int] = field(default_factory=lambda: dict(l=60, r=20, t=50, b=60))
    gridlines: bool = True
    height: Optional[int] = 420


DEFAULT_THEME = ReportTheme()


def apply_theme(fig: go.Figure, theme: Optional[ReportTheme] = None) -> go.Figure:
    """Apply theme to fig in place and return it."""
    theme = theme or DEFAULT_THEME
    fig.update_layout(
        template=theme.template,
        font=dict(family=theme.font_family, size=theme.font_size),
        title_font=dict(size=theme.title_size),
        colorway=theme.colorway,
        margin=theme.margin,
        legend=dict(bgcolor="rgba(255,255,255,0.6)"),
    )
    if theme.height is not None:
        fig.update_layout(height=theme.height)
    if theme.gridlines:
        fig.update_xaxes(showgrid=True, gridcolor="#e5e5e5")
        fig.update_yaxes(showgrid=True, gridcolor="#e5e5e5")
    return fig
