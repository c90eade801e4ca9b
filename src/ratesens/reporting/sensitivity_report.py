"""
Sensitivity reporting.

Provides tabular views and formatted console output of point sensitivities:
- Aggregated sensitivity vector as a DataFrame
- Totals per curve and currency
- Key-rate tenor buckets
- CSV export of a report, one file per section
"""

import logging
from dataclasses import dataclass, field
from datetime import date, datetime
from pathlib import Path
from typing import Any, Dict, Iterable, List, Optional, Sequence, Union

import numpy as np
import pandas as pd

from ..config import get_config
from ..dates import DateUtils
from ..sensitivity.aggregation import PointSensitivities, aggregate
from ..sensitivity.point import PointSensitivity

logger = logging.getLogger(__name__)

SENSITIVITY_COLUMNS = ["kind", "risk_factor", "currency", "date", "sensitivity"]


@dataclass
class ReportSection:
    """
    A section of a report.

    Attributes:
        title: Section title
        data: Data (DataFrame or dict)
        notes: Optional notes
    """
    title: str
    data: Union[pd.DataFrame, Dict[str, Any]]
    notes: Optional[str] = None


@dataclass
class RiskReport:
    """
    Complete sensitivity report.

    Attributes:
        report_date: Date of report
        portfolio_name: Name of portfolio
        sections: List of report sections
        metadata: Additional metadata
    """
    report_date: date
    portfolio_name: str
    sections: List[ReportSection] = field(default_factory=list)
    metadata: Dict[str, Any] = field(default_factory=dict)

    def add_section(
        self,
        title: str,
        data: Union[pd.DataFrame, Dict[str, Any]],
        notes: Optional[str] = None
    ):
        """Add a section to the report."""
        self.sections.append(ReportSection(title, data, notes))

    def section(self, title: str) -> ReportSection:
        """Look up a section by title."""
        for s in self.sections:
            if s.title == title:
                return s
        raise KeyError(f"No section titled {title!r}")

    def to_dict(self) -> Dict:
        """Convert entire report to dictionary."""
        result = {
            "report_date": str(self.report_date),
            "portfolio_name": self.portfolio_name,
            "metadata": self.metadata,
            "sections": {}
        }

        for section in self.sections:
            if isinstance(section.data, pd.DataFrame):
                result["sections"][section.title] = section.data.to_dict(orient="records")
            else:
                result["sections"][section.title] = section.data

        return result


class ReportFormatter:
    """
    Formats reports for console output.
    """

    def __init__(
        self,
        width: int = 80,
        precision: Optional[int] = None,
        thousands_sep: bool = True
    ):
        """
        Initialize formatter.

        Args:
            width: Console width
            precision: Decimal precision for floats (default from config)
            thousands_sep: Whether to use thousands separator
        """
        self.width = width
        self.precision = precision if precision is not None else get_config().report_precision
        self.thousands_sep = thousands_sep

    def format_number(self, value: float, precision: Optional[int] = None) -> str:
        """Format a number for display."""
        p = precision if precision is not None else self.precision

        if abs(value) >= 1e6:
            return f"{value/1e6:,.{p}f}M"
        elif abs(value) >= 1e3 and self.thousands_sep:
            return f"{value:,.{p}f}"
        return f"{value:.{p}f}"

    def header(self, title: str) -> str:
        """Create a header line."""
        return f"\n{'='*self.width}\n{title.center(self.width)}\n{'='*self.width}\n"

    def subheader(self, title: str) -> str:
        """Create a subheader."""
        return f"\n{'-'*self.width}\n{title}\n{'-'*self.width}\n"

    def format_dict(self, data: Dict[str, Any], indent: int = 2) -> str:
        """Format dictionary as key-value pairs."""
        pad = " " * indent
        lines = []
        for key, value in data.items():
            formatted = self.format_number(value) if isinstance(value, float) else str(value)
            lines.append(f"{pad}{key}: {formatted}")
        return "\n".join(lines)

    def format_dataframe(self, df: pd.DataFrame, max_rows: int = 50) -> str:
        """Format DataFrame for console."""
        if df.empty:
            return "  (none)"
        with pd.option_context(
            'display.max_rows', max_rows,
            'display.width', self.width,
            'display.float_format', lambda x: self.format_number(x)
        ):
            return df.to_string(index=False)

    def format_report(self, report: RiskReport) -> str:
        """Format entire report for console."""
        lines = [
            self.header(f"Sensitivity Report: {report.portfolio_name}"),
            f"Report Date: {report.report_date}",
            f"Generated: {datetime.now().strftime('%Y-%m-%d %H:%M:%S')}",
        ]

        if report.metadata:
            lines.append("\nMetadata:")
            lines.append(self.format_dict(report.metadata))

        for section in report.sections:
            lines.append(self.subheader(section.title))
            if isinstance(section.data, pd.DataFrame):
                lines.append(self.format_dataframe(section.data))
            else:
                lines.append(self.format_dict(section.data))
            if section.notes:
                lines.append(f"\nNote: {section.notes}")

        lines.append(f"\n{'='*self.width}")
        lines.append("End of Report")
        return "\n".join(lines)


def sensitivities_to_frame(items: Iterable[PointSensitivity]) -> pd.DataFrame:
    """
    One row per point sensitivity, in iteration order.

    Risk factors and currencies are rendered through their string forms.
    """
    rows = [
        {
            "kind": s.kind.value,
            "risk_factor": str(s.risk_factor),
            "currency": s.currency.code,
            "date": s.date,
            "sensitivity": s.sensitivity,
        }
        for s in items
    ]
    return pd.DataFrame(rows, columns=SENSITIVITY_COLUMNS)


def curve_totals_frame(items: Iterable[PointSensitivity]) -> pd.DataFrame:
    """Total sensitivity per curve key and currency."""
    totals = PointSensitivities.of(items).total_by_curve()
    rows = [
        {"curve": str(key.index), "currency": key.currency.code, "sensitivity": value}
        for key, value in totals.items()
    ]
    df = pd.DataFrame(rows, columns=["curve", "currency", "sensitivity"])
    return df.sort_values(["curve", "currency"], ignore_index=True)


def bucket_by_tenor(
    items: Iterable[PointSensitivity],
    valuation_date: date,
    tenors: Optional[Sequence[str]] = None
) -> pd.DataFrame:
    """
    Bucket sensitivities to the nearest key-rate tenor.

    Each sensitivity is assigned to the tenor closest to the time between
    valuation_date and its curve date (ACT/365). Dates before valuation
    land in the shortest bucket.

    Args:
        items: Point sensitivities
        valuation_date: Date the tenors are measured from
        tenors: Key-rate tenors (default from config)

    Returns:
        DataFrame with one row per (risk_factor, currency) and one column per tenor
    """
    tenors = list(tenors or get_config().key_rate_tenors)
    tenor_years = np.array([DateUtils.tenor_to_years(t) for t in tenors])

    frame = sensitivities_to_frame(items)
    if frame.empty:
        return pd.DataFrame(columns=["risk_factor", "currency"] + tenors)

    years = np.array([(d - valuation_date).days / 365.0 for d in frame["date"]])
    nearest = np.abs(tenor_years[np.newaxis, :] - years[:, np.newaxis]).argmin(axis=1)
    frame["tenor"] = [tenors[i] for i in nearest]

    pivot = frame.pivot_table(
        index=["risk_factor", "currency"],
        columns="tenor",
        values="sensitivity",
        aggfunc="sum",
        fill_value=0.0,
    )
    pivot = pivot.reindex(columns=tenors, fill_value=0.0)
    pivot.columns.name = None
    return pivot.reset_index()


def build_sensitivity_report(
    sensitivities: Iterable[PointSensitivity],
    report_date: date,
    portfolio_name: str,
    valuation_date: Optional[date] = None,
    tenors: Optional[Sequence[str]] = None
) -> RiskReport:
    """
    Build a report from raw point sensitivities.

    The sensitivities are aggregated first; sections are the aggregated
    vector, the totals per curve and the tenor buckets.
    """
    aggregated = aggregate(sensitivities)
    valuation_date = valuation_date or report_date

    report = RiskReport(
        report_date=report_date,
        portfolio_name=portfolio_name,
        metadata={
            "valuation_date": str(valuation_date),
            "num_sensitivities": len(aggregated),
            "total_sensitivity": float(sum(s.sensitivity for s in aggregated)),
        },
    )
    report.add_section("Point Sensitivities", sensitivities_to_frame(aggregated))
    report.add_section("Curve Totals", curve_totals_frame(aggregated))
    report.add_section(
        "Tenor Buckets",
        bucket_by_tenor(aggregated, valuation_date, tenors),
        notes="Nearest key-rate tenor, ACT/365 from valuation date",
    )
    return report


def export_to_csv(
    report: RiskReport,
    output_dir: Union[str, Path],
    prefix: Optional[str] = None
) -> List[str]:
    """
    Export report to CSV files.

    Creates one CSV per section plus a metadata file.

    Args:
        report: RiskReport to export
        output_dir: Output directory
        prefix: Optional filename prefix

    Returns:
        List of created file paths
    """
    output_path = Path(output_dir)
    output_path.mkdir(parents=True, exist_ok=True)

    prefix = prefix or report.portfolio_name.replace(" ", "_")
    date_str = report.report_date.strftime("%Y%m%d")

    created_files = []

    meta_file = output_path / f"{prefix}_{date_str}_metadata.csv"
    pd.DataFrame([{
        "report_date": str(report.report_date),
        "portfolio_name": report.portfolio_name,
        **report.metadata
    }]).to_csv(meta_file, index=False)
    created_files.append(str(meta_file))

    for section in report.sections:
        safe_title = section.title.replace(" ", "_").replace("/", "_")
        filename = output_path / f"{prefix}_{date_str}_{safe_title}.csv"

        if isinstance(section.data, pd.DataFrame):
            section.data.to_csv(filename, index=False)
        else:
            pd.DataFrame([section.data]).to_csv(filename, index=False)

        created_files.append(str(filename))

    logger.info(f"Exported report '{report.portfolio_name}' to {len(created_files)} files in {output_path}")
    return created_files


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
