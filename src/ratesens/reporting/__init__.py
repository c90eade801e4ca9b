"""
Reporting module for sensitivity analytics.

Provides:
- Sensitivity tables (pandas)
- Key-rate tenor buckets
- Console reports and CSV export
"""

from .sensitivity_report import (
    ReportSection,
    RiskReport,
    ReportFormatter,
    sensitivities_to_frame,
    curve_totals_frame,
    bucket_by_tenor,
    build_sensitivity_report,
    export_to_csv,
)


__all__ = [
    "ReportSection",
    "RiskReport",
    "ReportFormatter",
    "sensitivities_to_frame",
    "curve_totals_frame",
    "bucket_by_tenor",
    "build_sensitivity_report",
    "export_to_csv",
]
