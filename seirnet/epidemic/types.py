"""Epidemic data structures: compartments, snapshots and live peak tracking."""

from dataclasses import dataclass
from enum import IntEnum


class InvariantViolation(RuntimeError):
    """Raised when the S -> E -> I -> R progression is broken.

    Indicates a logic defect in the engine, never a recoverable condition.
    """


class Compartment(IntEnum):
    """SEIR compartments. Values are stored in the engine's per-node array."""

    SUSCEPTIBLE = 0
    EXPOSED = 1
    INFECTIOUS = 2
    RECOVERED = 3


ACTIVE = (Compartment.EXPOSED, Compartment.INFECTIOUS)


@dataclass(frozen=True, slots=True)
class Snapshot:
    """Population counts at the end of a step (step 0 = right after seeding)."""

    step: int
    susceptible: int
    exposed: int
    infectious: int
    recovered: int

    @property
    def infected(self) -> int:
        """Currently infected, E + I."""
        return self.exposed + self.infectious

    @property
    def attacked(self) -> int:
        """Ever infected, E + I + R."""
        return self.exposed + self.infectious + self.recovered

    @property
    def total(self) -> int:
        return self.susceptible + self.exposed + self.infectious + self.recovered

    def as_row(self) -> tuple[int, int, int, int, int]:
        return (
            self.step,
            self.susceptible,
            self.exposed,
            self.infectious,
            self.recovered,
        )


@dataclass(frozen=True, slots=True)
class StepActivity:
    """Infection attempts made during one step and how many took hold."""

    attempted: int
    actual: int


@dataclass(slots=True)
class RunningPeaks:
    """Running maxima updated after every step.

    A peak is replaced only by a strictly greater value, so ties keep the
    earliest step. Counts start at -1 so the first step always registers.
    """

    peak_infected: int = -1
    peak_infected_step: int | None = None
    peak_infected_attacked: int = 0
    peak_infectious: int = -1
    peak_infectious_step: int | None = None
    peak_infectious_attacked: int = 0
    total_attempted: int = 0
    total_actual: int = 0
    peak_attempted: int = -1
    peak_attempted_step: int | None = None
    peak_actual: int = -1
    peak_actual_step: int | None = None

    def update(self, snapshot: Snapshot, activity: StepActivity) -> None:
        step = snapshot.step
        if snapshot.infected > self.peak_infected:
            self.peak_infected = snapshot.infected
            self.peak_infected_step = step
            self.peak_infected_attacked = snapshot.attacked
        if snapshot.infectious > self.peak_infectious:
            self.peak_infectious = snapshot.infectious
            self.peak_infectious_step = step
            self.peak_infectious_attacked = snapshot.attacked
        self.total_attempted += activity.attempted
        self.total_actual += activity.actual
        if activity.attempted > self.peak_attempted:
            self.peak_attempted = activity.attempted
            self.peak_attempted_step = step
        if activity.actual > self.peak_actual:
            self.peak_actual = activity.actual
            self.peak_actual_step = step
