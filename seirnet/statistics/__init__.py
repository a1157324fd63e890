"""Post-run statistics: peaks, attack rates, growth slope and reproduction number."""

from seirnet.statistics.report import (
    PeakFraction,
    Report,
    StepPeak,
    compute_report,
    report_for_run,
)
from seirnet.statistics.windows import (
    WindowEstimate,
    max_growth_slope,
    max_reproduction_number,
)

__all__ = [
    "PeakFraction",
    "Report",
    "StepPeak",
    "WindowEstimate",
    "compute_report",
    "max_growth_slope",
    "max_reproduction_number",
    "report_for_run",
]
