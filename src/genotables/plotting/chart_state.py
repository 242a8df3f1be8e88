"""Chart state for report figures.

This module defines the ChartType enum and ChartState dataclass used to
describe a single bar or scatter chart.
"""

from __future__ import annotations

from dataclasses import dataclass
from enum import Enum
from typing import Optional


class ChartType(Enum):
    """Enumeration of available chart types."""
    BAR = "bar"
    SCATTER = "scatter"


@dataclass
class ChartState:
    """Configuration for a single chart.

    Column fields name columns of the frame handed to FigureGenerator.
    """
    x: str
    y: str
    chart_type: ChartType = ChartType.SCATTER
    color: Optional[str] = None       # one trace per value (bar: dodged groups)
    symbol: Optional[str] = None      # scatter only: marker symbol per value
    barmode: str = "group"            # "group" (dodged) or "stack"
    log_x: bool = False
    log_y: bool = False
    title: Optional[str] = None
    xaxis_title: Optional[str] = None
    yaxis_title: Optional[str] = None
    point_size: int = 8
    show_legend: bool = True


    def __post_init__(self) -> None:
        if self.barmode not in ("group", "stack"):
            raise ValueError(f"barmode must be 'group' or 'stack', got {self.barmode!r}")
