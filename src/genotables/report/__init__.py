"""Report assembly and report configuration."""

from genotables.report.report_builder import ReportStep, build_report, render_text
from genotables.report.report_config import ReportConfig, ReportConfigData

__all__ = [
    "ReportConfig",
    "ReportConfigData",
    "ReportStep",
    "build_report",
    "render_text",
]
