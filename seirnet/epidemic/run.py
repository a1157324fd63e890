"""Step-loop driver: seed, then step until the infected pool is empty."""

import logging
from dataclasses import dataclass

from seirnet.config.simulation import EpidemicConfig
from seirnet.epidemic.engine import EpidemicEngine
from seirnet.epidemic.types import RunningPeaks, Snapshot
from seirnet.graph.types import SocialGraph
from seirnet.reproducibility.random_source import RandomSource

log = logging.getLogger(__name__)


@dataclass(frozen=True)
class EpidemicRun:
    """Everything the statistics pass needs from a finished run.

    ``snapshots[0]`` is the state right after seeding; ``snapshots[t]`` the
    state at the end of step ``t``.
    """

    n: int
    snapshots: tuple[Snapshot, ...]
    generation_counts: tuple[int, ...]
    peaks: RunningPeaks
    seeded: int
    truncated: bool  # stopped by max_steps with infections still active

    @property
    def steps(self) -> int:
        return len(self.snapshots) - 1

    @property
    def final(self) -> Snapshot:
        return self.snapshots[-1]


def run_epidemic(
    graph: SocialGraph, config: EpidemicConfig, rng: RandomSource
) -> EpidemicRun:
    """Seed the epidemic and step it to extinction.

    The loop stops when no node is exposed or infectious, or, if
    ``config.max_steps`` is set, after that many steps.
    """
    engine = EpidemicEngine(graph, config, rng)
    seeded = engine.seed(config.init_seeds)
    snapshots = [engine.snapshot()]

    truncated = False
    while not engine.is_finished:
        if config.max_steps is not None and engine.step_count >= config.max_steps:
            truncated = True
            log.warning(
                "Stopped after max_steps=%d with %d nodes still infected",
                config.max_steps,
                snapshots[-1].infected,
            )
            break
        snapshot = engine.step()
        snapshots.append(snapshot)
        log.debug(
            "step %d: S=%d E=%d I=%d R=%d",
            snapshot.step,
            snapshot.susceptible,
            snapshot.exposed,
            snapshot.infectious,
            snapshot.recovered,
        )

    log.info("finished in %d steps", engine.step_count)
    return EpidemicRun(
        n=graph.n,
        snapshots=tuple(snapshots),
        generation_counts=engine.generation_counts,
        peaks=engine.peaks,
        seeded=seeded,
        truncated=truncated,
    )
