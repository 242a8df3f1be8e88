"""
genotables: tabular manipulation and plotting over small genomic tables.

This package provides:
- Loaders for a tab-separated variant table and fusion table
- Column derivation, projection, filtering, sorting, sampling and unification
- Grouped summaries (e.g. deamination counts per sample)
- Plotly bar and scatter charts with a shared report theme
- A report builder reproducing the teaching notebook step by step

For logging configuration in notebooks/apps:
    ```python
    from genotables.utils.logging import configure_logging
    configure_logging(level="DEBUG")
    ```
"""

import logging

from genotables.utils.logging import configure_logging, get_logger

from genotables.tables.schema import load_fusion_table, load_variant_table
from genotables.report.report_builder import ReportStep, build_report

# NullHandler so logs don't propagate to root until an app calls configure_logging().
_logger = logging.getLogger("genotables")
if not _logger.handlers:
    _logger.addHandler(logging.NullHandler())

__all__ = [
    "ReportStep",
    "build_report",
    "configure_logging",
    "get_logger",
    "load_fusion_table",
    "load_variant_table",
]

__version__ = "0.1.0"
