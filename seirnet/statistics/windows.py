"""Fixed-window growth estimates over the timeline and the generation table.

Both scans only look at windows whose starting value clears a sqrt(N)
noise floor, keep the largest ratio (earliest on ties) and return None
when no window qualifies.
"""

import math
from dataclasses import dataclass
from typing import Sequence

import numpy as np

from seirnet.epidemic.types import Snapshot


@dataclass(frozen=True, slots=True)
class WindowEstimate:
    """A per-unit growth figure and the window [start, end] it came from."""

    value: float
    start: int
    end: int


def _max_ratio(
    floor_values: np.ndarray,
    numerators: np.ndarray,
    denominators: np.ndarray,
    floor: float,
) -> tuple[float, int] | None:
    """Largest positive numerator/denominator among windows above the floor.

    Returns:
        (ratio, window index) or None if no window qualifies.
    """
    qualifying = floor_values > floor
    ratios = np.zeros(len(numerators), dtype=np.float64)
    np.divide(
        numerators,
        denominators,
        out=ratios,
        where=qualifying & (denominators > 0),
    )
    candidates = qualifying & (ratios > 0)
    if not candidates.any():
        return None
    masked = np.where(candidates, ratios, -np.inf)
    idx = int(np.argmax(masked))
    return float(ratios[idx]), idx


def max_growth_slope(
    snapshots: Sequence[Snapshot], n: int, ival: int = 20
) -> WindowEstimate | None:
    """Maximal exponential growth rate of E+I over ``ival`` steps.

    For every step t with I(t) > sqrt(n) and t + ival inside the timeline,
    ratio = (E+I)(t+ival) / (E+I)(t). The result is ln(max ratio) / ival.
    """
    if len(snapshots) <= ival:
        return None

    infectious = np.array([s.infectious for s in snapshots], dtype=np.float64)
    infected = np.array([s.infected for s in snapshots], dtype=np.float64)

    found = _max_ratio(
        floor_values=infectious[:-ival],
        numerators=infected[ival:],
        denominators=infected[:-ival],
        floor=math.sqrt(n),
    )
    if found is None:
        return None
    ratio, idx = found
    start = snapshots[idx].step
    return WindowEstimate(
        value=math.log(ratio) / ival,
        start=start,
        end=snapshots[idx + ival].step,
    )


def max_reproduction_number(
    generation_counts: Sequence[int], n: int, ival: int = 2
) -> WindowEstimate | None:
    """Maximal generational reproduction number over ``ival`` generations.

    For every generation g with count(g) > sqrt(n) and g + ival defined,
    ratio = count(g+ival) / count(g). The result is max ratio ** (1/ival).
    """
    if len(generation_counts) <= ival:
        return None

    counts = np.asarray(generation_counts, dtype=np.float64)
    found = _max_ratio(
        floor_values=counts[:-ival],
        numerators=counts[ival:],
        denominators=counts[:-ival],
        floor=math.sqrt(n),
    )
    if found is None:
        return None
    ratio, g = found
    return WindowEstimate(value=ratio ** (1.0 / ival), start=g, end=g + ival)
