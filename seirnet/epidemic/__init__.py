"""SEIR epidemic engine: per-node state machine, step loop and live peaks."""

from seirnet.epidemic.engine import EpidemicEngine
from seirnet.epidemic.run import EpidemicRun, run_epidemic
from seirnet.epidemic.types import (
    Compartment,
    InvariantViolation,
    RunningPeaks,
    Snapshot,
    StepActivity,
)

__all__ = [
    "Compartment",
    "EpidemicEngine",
    "EpidemicRun",
    "InvariantViolation",
    "RunningPeaks",
    "Snapshot",
    "StepActivity",
    "run_epidemic",
]
