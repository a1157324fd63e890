"""The three ordered phases of a simulation: graph, epidemic, statistics.

Each phase finishes and hands its output, read-only, to the next. One
RandomSource is threaded through the first two phases.
"""

import logging
from dataclasses import dataclass

from seirnet.config.simulation import SimulationConfig
from seirnet.epidemic.run import EpidemicRun, run_epidemic
from seirnet.graph.builder import build_from_config
from seirnet.graph.types import SocialGraph
from seirnet.graph.validation import check_graph
from seirnet.reproducibility.random_source import RandomSource, make_random_source
from seirnet.statistics.report import Report, report_for_run

log = logging.getLogger(__name__)


@dataclass(frozen=True)
class SimulationResult:
    graph: SocialGraph
    run: EpidemicRun
    report: Report
    entropy: int  # resolved seed of the random source


def simulate(
    config: SimulationConfig, rng: RandomSource | None = None
) -> SimulationResult:
    """Build and check the social graph, run the epidemic to extinction, summarize it.

    Args:
        config: Full simulation configuration.
        rng: Random source to use; defaults to one seeded from ``config.seed``.

    Raises:
        GraphConstructionError: The built graph fails structural validation.
        InvariantViolation: The epidemic breaks the S -> E -> I -> R progression.
    """
    if rng is None:
        rng = make_random_source(config.seed)

    log.info(
        "prob_unbiased = %f, contagiousness = %f, extra_random_contagiousness = %f",
        config.graph.prob_unbiased,
        config.epidemic.contagiousness,
        config.epidemic.extra_random_contagiousness,
    )
    log.debug("Random source: %r", rng)

    graph = build_from_config(config.graph, rng)
    check_graph(graph)
    run = run_epidemic(graph, config.epidemic, rng)
    report = report_for_run(run, config.statistics)

    return SimulationResult(graph=graph, run=run, report=report, entropy=rng.entropy)
