"""Summary report computed once the epidemic has died out."""

from dataclasses import asdict, dataclass
from typing import Any, Sequence

from seirnet.config.simulation import StatisticsConfig
from seirnet.epidemic.run import EpidemicRun
from seirnet.epidemic.types import RunningPeaks, Snapshot
from seirnet.statistics.windows import (
    WindowEstimate,
    max_growth_slope,
    max_reproduction_number,
)


@dataclass(frozen=True, slots=True)
class PeakFraction:
    """Peak share of the population and the attack rate at that step."""

    fraction: float
    step: int
    attack_rate: float


@dataclass(frozen=True, slots=True)
class StepPeak:
    count: int
    step: int


@dataclass(frozen=True, slots=True)
class Report:
    """Read-only run statistics.

    Optional fields are None when nothing was observed: no step ran (peaks)
    or no window cleared the sqrt(N) floor (growth estimates).
    """

    n: int
    steps: int
    final_attack_rate: float
    peak_infected: PeakFraction | None
    peak_infectious: PeakFraction | None
    total_attempted_infections: int
    total_actual_infections: int
    peak_attempted: StepPeak | None
    peak_actual: StepPeak | None
    growth_slope: WindowEstimate | None
    reproduction_number: WindowEstimate | None
    truncated: bool = False

    def to_scalars(self) -> dict[str, Any]:
        """Flat JSON-ready dict (None for undefined statistics)."""
        scalars: dict[str, Any] = {
            "n": self.n,
            "steps": self.steps,
            "final_attack_rate": self.final_attack_rate,
            "total_attempted_infections": self.total_attempted_infections,
            "total_actual_infections": self.total_actual_infections,
            "truncated": self.truncated,
        }
        for name in (
            "peak_infected",
            "peak_infectious",
            "peak_attempted",
            "peak_actual",
            "growth_slope",
            "reproduction_number",
        ):
            value = getattr(self, name)
            scalars[name] = None if value is None else asdict(value)
        return scalars


def _fraction(count: int, n: int) -> float:
    return count / n if n > 0 else 0.0


def compute_report(
    snapshots: Sequence[Snapshot],
    generation_counts: Sequence[int],
    peaks: RunningPeaks,
    n: int,
    slope_ival: int = 20,
    repnum_ival: int = 2,
    truncated: bool = False,
) -> Report:
    """Derive the Report from a finished run's timeline and generation table."""
    final = snapshots[-1]

    peak_infected = None
    if peaks.peak_infected_step is not None:
        peak_infected = PeakFraction(
            fraction=_fraction(peaks.peak_infected, n),
            step=peaks.peak_infected_step,
            attack_rate=_fraction(peaks.peak_infected_attacked, n),
        )
    peak_infectious = None
    if peaks.peak_infectious_step is not None:
        peak_infectious = PeakFraction(
            fraction=_fraction(peaks.peak_infectious, n),
            step=peaks.peak_infectious_step,
            attack_rate=_fraction(peaks.peak_infectious_attacked, n),
        )
    peak_attempted = None
    if peaks.peak_attempted_step is not None:
        peak_attempted = StepPeak(peaks.peak_attempted, peaks.peak_attempted_step)
    peak_actual = None
    if peaks.peak_actual_step is not None:
        peak_actual = StepPeak(peaks.peak_actual, peaks.peak_actual_step)

    return Report(
        n=n,
        steps=final.step,
        final_attack_rate=_fraction(final.recovered, n),
        peak_infected=peak_infected,
        peak_infectious=peak_infectious,
        total_attempted_infections=peaks.total_attempted,
        total_actual_infections=peaks.total_actual,
        peak_attempted=peak_attempted,
        peak_actual=peak_actual,
        growth_slope=max_growth_slope(snapshots, n, slope_ival),
        reproduction_number=max_reproduction_number(
            generation_counts, n, repnum_ival
        ),
        truncated=truncated,
    )


def report_for_run(run: EpidemicRun, config: StatisticsConfig) -> Report:
    return compute_report(
        run.snapshots,
        run.generation_counts,
        run.peaks,
        run.n,
        slope_ival=config.slope_ival,
        repnum_ival=config.repnum_ival,
        truncated=run.truncated,
    )
