"""Discrete-time stochastic SEIR engine on a social graph.

Each infected node carries a timer counting steps since infection. An
exposed node turns infectious once its timer reaches ``incubation_time``
and recovers once it reaches ``recovery_time``. While infectious it tries,
every step, to infect each neighbor with probability ``contagiousness``
and one uniformly random node with probability
``extra_random_contagiousness``. Every candidate event is its own
Bernoulli draw.
"""

import logging

import numpy as np

from seirnet.config.simulation import EpidemicConfig
from seirnet.epidemic.types import (
    ACTIVE,
    Compartment,
    InvariantViolation,
    RunningPeaks,
    Snapshot,
    StepActivity,
)
from seirnet.graph.types import SocialGraph
from seirnet.reproducibility.random_source import RandomSource

log = logging.getLogger(__name__)

_UNSET = -1


class EpidemicEngine:
    """Owns all per-node SEIR state and the running statistics of one run.

    The infected pool holds exactly the nodes in E or I. It is walked in
    ascending node id order each step so that a fixed seed reproduces the
    run exactly.
    """

    def __init__(
        self, graph: SocialGraph, config: EpidemicConfig, rng: RandomSource
    ) -> None:
        self.graph = graph
        self.config = config
        self.rng = rng

        n = graph.n
        self._compartment = np.zeros(n, dtype=np.int8)
        self._timer = np.full(n, _UNSET, dtype=np.int64)
        self._generation = np.full(n, _UNSET, dtype=np.int64)
        self._pool: set[int] = set()
        self._counts = [n, 0, 0, 0]  # indexed by Compartment
        self._generation_counts: list[int] = []
        self._step = 0
        self.peaks = RunningPeaks()
        self.last_activity = StepActivity(attempted=0, actual=0)

    # ── Read-only views ────────────────────────────────────────────

    @property
    def n(self) -> int:
        return self.graph.n

    @property
    def step_count(self) -> int:
        """Number of completed calls to ``step``."""
        return self._step

    @property
    def pool(self) -> frozenset[int]:
        return frozenset(self._pool)

    @property
    def generation_counts(self) -> tuple[int, ...]:
        return tuple(self._generation_counts)

    @property
    def is_finished(self) -> bool:
        """True once no node is exposed or infectious."""
        return not self._pool

    def compartment_of(self, node: int) -> Compartment:
        return Compartment(int(self._compartment[node]))

    def timer_of(self, node: int) -> int | None:
        timer = int(self._timer[node])
        return None if timer == _UNSET else timer

    def generation_of(self, node: int) -> int | None:
        generation = int(self._generation[node])
        return None if generation == _UNSET else generation

    def snapshot(self) -> Snapshot:
        s, e, i, r = self._counts
        return Snapshot(self._step, s, e, i, r)

    # ── Transitions ────────────────────────────────────────────────

    def _move(self, node: int, src: Compartment, dst: Compartment) -> None:
        self._compartment[node] = dst
        self._counts[src] -= 1
        self._counts[dst] += 1

    def infect(self, node: int, generation: int) -> bool:
        """Expose a susceptible node; no-op for any other compartment.

        Returns:
            True if the node was susceptible and is now exposed.

        Raises:
            InvariantViolation: A susceptible node is already pooled or
                already has a generation recorded.
        """
        if self._compartment[node] != Compartment.SUSCEPTIBLE:
            return False
        if node in self._pool:
            raise InvariantViolation(f"susceptible node {node} is in the infected pool")
        if self._generation[node] != _UNSET:
            raise InvariantViolation(
                f"susceptible node {node} already has generation "
                f"{int(self._generation[node])}"
            )

        self._move(node, Compartment.SUSCEPTIBLE, Compartment.EXPOSED)
        self._timer[node] = 0
        self._generation[node] = generation
        self._pool.add(node)

        while len(self._generation_counts) <= generation:
            self._generation_counts.append(0)
        self._generation_counts[generation] += 1
        return True

    def seed(self, init_seeds: int) -> int:
        """Infect ``init_seeds`` uniformly random nodes at generation 0.

        Collisions are not redrawn, so fewer distinct nodes may end up
        seeded.

        Returns:
            Number of nodes actually infected.
        """
        if self.n == 0:
            if init_seeds:
                log.warning("Empty graph: %d seeds dropped", init_seeds)
            return 0
        seeded = 0
        for _ in range(init_seeds):
            seeded += self.infect(self.rng.below(self.n), 0)
        log.info("Seeded %d of %d requested initial infections", seeded, init_seeds)
        return seeded

    def _spread(self, node: int) -> StepActivity:
        """Contagion attempts of one infectious node for the current step."""
        rng = self.rng
        contagiousness = self.config.contagiousness
        next_generation = int(self._generation[node]) + 1
        attempted = 0
        actual = 0

        for neighbor in self.graph.neighbors[node]:
            if rng.uniform() < contagiousness:
                attempted += 1
                actual += self.infect(neighbor, next_generation)

        if rng.uniform() < self.config.extra_random_contagiousness:
            attempted += 1
            actual += self.infect(rng.below(self.n), next_generation)

        return StepActivity(attempted, actual)

    def step(self) -> Snapshot:
        """Advance simulated time by one unit.

        Only nodes pooled at the start of the step are processed; nodes
        infected during the step wait for the next one. For each processed
        node the timer is incremented, the incubation threshold is tested
        first, then the recovery threshold; a node that is infectious after
        that spreads immediately.

        Returns:
            Snapshot of the counts at the end of the step.
        """
        incubation_time = self.config.incubation_time
        recovery_time = self.config.recovery_time
        attempted = 0
        actual = 0

        for node in sorted(self._pool):
            state = Compartment(int(self._compartment[node]))
            if state not in ACTIVE:
                raise InvariantViolation(f"pooled node {node} is {state.name}")
            self._timer[node] += 1
            timer = int(self._timer[node])

            if state == Compartment.EXPOSED and timer >= incubation_time:
                self._move(node, state, Compartment.INFECTIOUS)
                state = Compartment.INFECTIOUS
            elif timer >= recovery_time:
                if state != Compartment.INFECTIOUS:
                    raise InvariantViolation(
                        f"node {node} reached recovery while {state.name}"
                    )
                self._move(node, state, Compartment.RECOVERED)
                state = Compartment.RECOVERED
                self._pool.remove(node)

            if state == Compartment.INFECTIOUS:
                activity = self._spread(node)
                attempted += activity.attempted
                actual += activity.actual

        self._step += 1
        snapshot = self.snapshot()
        if snapshot.total != self.n:
            raise InvariantViolation(
                f"compartment counts sum to {snapshot.total}, expected {self.n}"
            )
        if snapshot.infected != len(self._pool):
            raise InvariantViolation(
                f"{snapshot.infected} nodes in E+I but {len(self._pool)} pooled"
            )

        self.last_activity = StepActivity(attempted, actual)
        self.peaks.update(snapshot, self.last_activity)
        return snapshot
