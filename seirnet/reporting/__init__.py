"""Run outputs: tab-separated tables, summary text and the HTML report."""

from seirnet.reporting.embed import embed_figure
from seirnet.reporting.single import generate_run_report
from seirnet.reporting.tabular import (
    UNDEFINED,
    format_generations,
    format_summary,
    format_timeline,
    write_generations,
    write_summary,
    write_timeline,
)

__all__ = [
    "UNDEFINED",
    "embed_figure",
    "format_generations",
    "format_summary",
    "format_timeline",
    "generate_run_report",
    "write_generations",
    "write_summary",
    "write_timeline",
]
