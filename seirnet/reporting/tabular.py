"""Tab-separated timeline and generation tables, and the summary text.

Pure formatting lives in the ``format_*`` functions; ``write_*`` wrap them
with file handling.
"""

import logging
from pathlib import Path
from typing import Iterable, Iterator, Sequence

from seirnet.epidemic.types import Snapshot
from seirnet.statistics.report import PeakFraction, Report, StepPeak
from seirnet.statistics.windows import WindowEstimate

log = logging.getLogger(__name__)

UNDEFINED = "undefined (no qualifying window)"


def format_timeline(snapshots: Iterable[Snapshot]) -> Iterator[str]:
    """One ``step\\tS\\tE\\tI\\tR`` line per snapshot."""
    for s in snapshots:
        yield "\t".join(str(v) for v in s.as_row())


def format_generations(generation_counts: Sequence[int]) -> Iterator[str]:
    """One ``g\\tcount`` line per generation."""
    for g, count in enumerate(generation_counts):
        yield f"{g}\t{count}"


def _peak_fraction_line(label: str, peak: PeakFraction | None) -> str:
    if peak is None:
        return f"{label}: none (no step executed)"
    return (
        f"{label}: {peak.fraction:f} "
        f"(at step {peak.step}: attack rate {peak.attack_rate:f})"
    )


def _step_peak_line(label: str, peak: StepPeak | None) -> str:
    if peak is None:
        return f"{label}: none (no step executed)"
    return f"{label}: {peak.count} (at step {peak.step})"


def _slope_line(estimate: WindowEstimate | None) -> str:
    label = "max log slope of infected cases is"
    if estimate is None:
        return f"{label}: {UNDEFINED}"
    return (
        f"{label}: {estimate.value:f} per time step "
        f"(between steps {estimate.start} and {estimate.end})"
    )


def _repnum_line(estimate: WindowEstimate | None) -> str:
    label = "max generational reproduction number is"
    if estimate is None:
        return f"{label}: {UNDEFINED}"
    return (
        f"{label}: {estimate.value:f} "
        f"(between gens {estimate.start} and {estimate.end})"
    )


def format_summary(report: Report) -> list[str]:
    """Human-readable summary statistics, one statistic per line."""
    lines = [f"finished in {report.steps} steps"]
    if report.truncated:
        lines.append("stopped early by the step ceiling")
    lines += [
        f"final attack rate: {report.final_attack_rate:f}",
        _peak_fraction_line("peak infected fraction", report.peak_infected),
        _peak_fraction_line("peak infectious fraction", report.peak_infectious),
        f"total attempted infections: {report.total_attempted_infections}",
        f"total actual infections: {report.total_actual_infections}",
        _step_peak_line("peak attempted infections", report.peak_attempted),
        _step_peak_line("peak actual infections", report.peak_actual),
        _slope_line(report.growth_slope),
        _repnum_line(report.reproduction_number),
    ]
    return lines


def _write_lines(lines: Iterable[str], path: Path | str) -> Path:
    path = Path(path)
    path.parent.mkdir(parents=True, exist_ok=True)
    with open(path, "w") as f:
        for line in lines:
            f.write(line + "\n")
    return path


def write_timeline(snapshots: Iterable[Snapshot], path: Path | str) -> Path:
    return _write_lines(format_timeline(snapshots), path)


def write_generations(generation_counts: Sequence[int], path: Path | str) -> Path:
    return _write_lines(format_generations(generation_counts), path)


def write_summary(report: Report, path: Path | str) -> Path:
    return _write_lines(format_summary(report), path)
