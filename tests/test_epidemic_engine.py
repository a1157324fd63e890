"""Tests for the SEIR state machine, step loop and live peak tracking.

Covers infect/seed semantics, the compartment timeline of a single node,
same-step spreading after incubation, conservation of the population,
invariant enforcement, truncation and reproducibility.
"""

import pytest

from seirnet.config import EpidemicConfig
from seirnet.epidemic import (
    Compartment,
    EpidemicEngine,
    InvariantViolation,
    Snapshot,
    run_epidemic,
)
from seirnet.graph import SocialGraph, build_social_graph
from seirnet.reproducibility import RandomSource

SILENT = EpidemicConfig(
    init_seeds=1,
    contagiousness=0.0,
    extra_random_contagiousness=0.0,
    incubation_time=5,
    recovery_time=30,
)


def _path_graph(n: int) -> SocialGraph:
    """0 - 1 - ... - (n-1)."""
    neighbors = tuple(
        tuple(k for k in (i - 1, i + 1) if 0 <= k < n) for i in range(n)
    )
    edges = tuple((i, i - 1) for i in range(1, n))
    return SocialGraph(n=n, neighbors=neighbors, edges=edges)


def _isolated_graph(n: int) -> SocialGraph:
    return SocialGraph(n=n, neighbors=((),) * n, edges=())


def _engine(graph: SocialGraph, config: EpidemicConfig = SILENT, seed: int = 0):
    return EpidemicEngine(graph, config, RandomSource(seed))


class TestInfect:
    def test_infect_susceptible(self):
        engine = _engine(_path_graph(4))
        assert engine.infect(2, 0) is True
        assert engine.compartment_of(2) == Compartment.EXPOSED
        assert engine.timer_of(2) == 0
        assert engine.generation_of(2) == 0
        assert engine.pool == frozenset({2})
        assert engine.snapshot() == Snapshot(0, 3, 1, 0, 0)
        assert engine.generation_counts == (1,)

    def test_susceptible_has_no_timer_or_generation(self):
        engine = _engine(_path_graph(4))
        assert engine.compartment_of(1) == Compartment.SUSCEPTIBLE
        assert engine.timer_of(1) is None
        assert engine.generation_of(1) is None

    def test_infect_twice_is_noop(self):
        engine = _engine(_path_graph(4))
        engine.infect(2, 0)
        assert engine.infect(2, 3) is False
        assert engine.generation_of(2) == 0
        assert engine.snapshot() == Snapshot(0, 3, 1, 0, 0)
        assert engine.generation_counts == (1,)

    def test_generation_counts_grow_with_gaps(self):
        engine = _engine(_path_graph(4))
        engine.infect(0, 2)
        assert engine.generation_counts == (0, 0, 1)

    def test_infect_recovered_is_noop(self):
        engine = _engine(_isolated_graph(3))
        engine.infect(0, 0)
        for _ in range(SILENT.recovery_time):
            engine.step()
        assert engine.compartment_of(0) == Compartment.RECOVERED
        assert engine.infect(0, 1) is False
        assert engine.generation_of(0) == 0
        assert engine.is_finished

    def test_infect_rejects_corrupted_generation(self):
        engine = _engine(_path_graph(4))
        engine._generation[3] = 0
        with pytest.raises(InvariantViolation, match="generation"):
            engine.infect(3, 1)

    def test_infect_rejects_pooled_susceptible(self):
        engine = _engine(_path_graph(4))
        engine._pool.add(3)
        with pytest.raises(InvariantViolation, match="pool"):
            engine.infect(3, 0)


class TestSeed:
    def test_seed_single(self):
        engine = _engine(_path_graph(100))
        assert engine.seed(1) == 1
        assert len(engine.pool) == 1
        assert engine.generation_counts == (1,)

    def test_seed_collisions_accepted(self):
        engine = _engine(_isolated_graph(1))
        assert engine.seed(5) == 1
        assert engine.generation_counts == (1,)
        assert engine.snapshot() == Snapshot(0, 0, 1, 0, 0)

    def test_seed_empty_graph(self):
        engine = _engine(_isolated_graph(0))
        assert engine.seed(5) == 0
        assert engine.is_finished

    def test_seed_zero(self):
        engine = _engine(_path_graph(10))
        assert engine.seed(0) == 0
        assert engine.generation_counts == ()


class TestStep:
    def test_single_node_timeline(self):
        """Exposed for timers 0..4, infectious 5..29, recovered at 30."""
        engine = _engine(_path_graph(10))
        engine.infect(4, 0)
        assert engine.compartment_of(4) == Compartment.EXPOSED

        for step in range(1, 31):
            snapshot = engine.step()
            assert snapshot.step == step
            assert engine.timer_of(4) == step
            if step < 5:
                assert engine.compartment_of(4) == Compartment.EXPOSED
                assert 4 in engine.pool
            elif step < 30:
                assert engine.compartment_of(4) == Compartment.INFECTIOUS
                assert 4 in engine.pool
            else:
                assert engine.compartment_of(4) == Compartment.RECOVERED
                assert 4 not in engine.pool

        assert engine.is_finished
        assert engine.snapshot() == Snapshot(30, 9, 0, 0, 1)

    def test_spreads_in_the_step_it_becomes_infectious(self):
        config = EpidemicConfig(
            contagiousness=1.0,
            extra_random_contagiousness=0.0,
            incubation_time=1,
            recovery_time=3,
        )
        engine = _engine(_path_graph(3), config)
        engine.infect(0, 0)

        engine.step()
        assert engine.compartment_of(0) == Compartment.INFECTIOUS
        assert engine.compartment_of(1) == Compartment.EXPOSED
        assert engine.generation_of(1) == 1
        # Infected this step, so not yet processed
        assert engine.timer_of(1) == 0
        assert engine.last_activity.attempted == 1
        assert engine.last_activity.actual == 1

        engine.step()
        assert engine.compartment_of(1) == Compartment.INFECTIOUS
        assert engine.compartment_of(2) == Compartment.EXPOSED
        assert engine.generation_of(2) == 2
        # 0->1 (already infected), 1->0 (already infected), 1->2
        assert engine.last_activity.attempted == 3
        assert engine.last_activity.actual == 1
        assert engine.generation_counts == (1, 1, 1)

    def test_random_channel_attempts(self):
        config = EpidemicConfig(
            contagiousness=0.0,
            extra_random_contagiousness=1.0,
            incubation_time=1,
            recovery_time=2,
        )
        engine = _engine(_isolated_graph(5), config)
        engine.infect(0, 0)
        engine.step()
        assert engine.last_activity.attempted == 1
        assert engine.peaks.total_attempted == 1

    def test_zero_contagiousness_never_attempts(self):
        engine = _engine(_path_graph(5))
        engine.infect(2, 0)
        while not engine.is_finished:
            engine.step()
        assert engine.peaks.total_attempted == 0
        assert engine.peaks.total_actual == 0

    def test_step_rejects_susceptible_in_pool(self):
        engine = _engine(_path_graph(10))
        engine.infect(1, 0)
        engine._pool.add(5)
        with pytest.raises(InvariantViolation, match="SUSCEPTIBLE"):
            engine.step()

    def test_peaks_track_first_maximum(self):
        engine = _engine(_isolated_graph(3))
        engine.infect(0, 0)
        engine.infect(1, 0)
        while not engine.is_finished:
            engine.step()
        peaks = engine.peaks
        assert peaks.peak_infected == 2
        assert peaks.peak_infected_step == 1
        assert peaks.peak_infected_attacked == 2
        assert peaks.peak_infectious == 2
        assert peaks.peak_infectious_step == SILENT.incubation_time
        assert peaks.peak_attempted == 0
        assert peaks.peak_attempted_step == 1


class TestRunEpidemic:
    def test_isolated_seed_runs_recovery_time_steps(self):
        graph = build_social_graph(100, 3, 1.0, RandomSource(42))
        run = run_epidemic(graph, SILENT, RandomSource(42))
        assert run.steps == SILENT.recovery_time
        assert run.final == Snapshot(30, 99, 0, 0, 1)
        assert run.generation_counts == (1,)
        assert not run.truncated

    def test_conservation_and_monotonicity(self):
        config = EpidemicConfig(
            init_seeds=5,
            contagiousness=0.08,
            extra_random_contagiousness=0.01,
            incubation_time=2,
            recovery_time=8,
        )
        rng = RandomSource(7)
        graph = build_social_graph(1000, 4, 0.2, rng)
        run = run_epidemic(graph, config, rng)

        for prev, cur in zip(run.snapshots, run.snapshots[1:]):
            assert cur.step == prev.step + 1
            assert cur.susceptible <= prev.susceptible
            assert cur.recovered >= prev.recovered
        for snapshot in run.snapshots:
            assert snapshot.total == graph.n

        final = run.final
        assert final.exposed == 0 and final.infectious == 0
        assert final.susceptible + final.recovered == graph.n
        assert sum(run.generation_counts) == final.recovered
        assert run.peaks.total_actual == final.recovered - run.seeded

    def test_same_seed_identical_snapshots(self):
        config = EpidemicConfig(
            init_seeds=3, contagiousness=0.1, incubation_time=2, recovery_time=6
        )

        def once():
            rng = RandomSource(2024)
            graph = build_social_graph(500, 3, 0.2, rng)
            return run_epidemic(graph, config, rng)

        a, b = once(), once()
        assert a.snapshots == b.snapshots
        assert a.generation_counts == b.generation_counts

    def test_max_steps_truncates(self):
        config = EpidemicConfig(
            init_seeds=1,
            contagiousness=0.0,
            extra_random_contagiousness=0.0,
            incubation_time=5,
            recovery_time=30,
            max_steps=3,
        )
        run = run_epidemic(_path_graph(10), config, RandomSource(0))
        assert run.truncated
        assert run.steps == 3
        assert run.final.infected == 1

    def test_no_seeds_no_steps(self):
        config = EpidemicConfig(init_seeds=0)
        run = run_epidemic(_path_graph(10), config, RandomSource(0))
        assert run.steps == 0
        assert run.snapshots == (Snapshot(0, 10, 0, 0, 0),)
        assert run.peaks.peak_infected_step is None

    def test_empty_graph(self):
        run = run_epidemic(_isolated_graph(0), SILENT, RandomSource(0))
        assert run.snapshots == (Snapshot(0, 0, 0, 0, 0),)
        assert run.seeded == 0

    def test_recovery_before_incubation_rejected_before_any_draw(self):
        rng = RandomSource(0)
        with pytest.raises(ValueError, match="recovery_time"):
            run_epidemic(
                _path_graph(5),
                EpidemicConfig(incubation_time=5, recovery_time=3),
                rng,
            )
        assert rng.uniform() == RandomSource(0).uniform()
