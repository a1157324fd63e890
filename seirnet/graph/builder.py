"""Incremental preferential-attachment social graph builder.

Nodes are added one at a time. Each new node makes a random number of
edge attempts (mean ``edges_per_node``). Every attempt targets either a
uniformly random existing node (probability ``prob_unbiased``, or always
while no edge exists yet) or a random endpoint of a random existing edge,
which favors nodes that already have many contacts (Barabási & Albert,
*Science* 286 (1999) 509-512).
"""

import logging

from seirnet.config.simulation import GraphConfig
from seirnet.graph.types import SocialGraph
from seirnet.reproducibility.random_source import RandomSource

log = logging.getLogger(__name__)


def pick_candidate(
    node: int,
    edges: list[tuple[int, int]],
    prob_unbiased: float,
    rng: RandomSource,
) -> int:
    """Choose the node that ``node`` will try to connect to.

    The unbiased draw is skipped entirely while no edge exists, so the
    draw sequence matches the short-circuit of the selection rule.
    """
    if not edges or rng.uniform() < prob_unbiased:
        return rng.below(node + 1)
    edge = edges[rng.below(len(edges))]
    return edge[rng.below(2)]


def build_social_graph(
    nbnodes: int,
    edges_per_node: float,
    prob_unbiased: float,
    rng: RandomSource,
    max_attempts_per_node: int | None = None,
) -> SocialGraph:
    """Build an undirected social graph of ``nbnodes`` nodes.

    For each new node: pick a candidate, keep the edge unless it is a
    self-loop or a duplicate, then continue while
    ``uniform() * edges_per_node >= 1``. Rejected candidates are simply
    dropped; the stopping rule alone controls repetition.

    Args:
        nbnodes: Number of nodes to create.
        edges_per_node: Mean number of edge attempts per node.
        prob_unbiased: Probability of a uniform (non-preferential) pick.
        rng: Shared random source; consumed in node order.
        max_attempts_per_node: Optional hard cap on attempts for one node.

    Returns:
        The finished, read-only SocialGraph.
    """
    adjacency: list[set[int]] = []
    edges: list[tuple[int, int]] = []
    capped = 0

    for i in range(nbnodes):
        adjacency.append(set())
        attempts = 0
        while True:
            k = pick_candidate(i, edges, prob_unbiased, rng)
            if k != i and k not in adjacency[i]:
                adjacency[i].add(k)
                adjacency[k].add(i)
                edges.append((i, k))
            attempts += 1
            if rng.uniform() * edges_per_node < 1:
                break
            if max_attempts_per_node is not None and attempts >= max_attempts_per_node:
                capped += 1
                break

    if capped:
        log.debug("Edge attempt cap reached for %d nodes", capped)
    log.info("social network has %d nodes, %d edges", nbnodes, len(edges))

    return SocialGraph(
        n=nbnodes,
        neighbors=tuple(tuple(sorted(nbrs)) for nbrs in adjacency),
        edges=tuple(edges),
    )


def build_from_config(config: GraphConfig, rng: RandomSource) -> SocialGraph:
    """Build the social graph described by a GraphConfig."""
    return build_social_graph(
        config.nbnodes,
        config.edges_per_node,
        config.prob_unbiased,
        rng,
        max_attempts_per_node=config.max_attempts_per_node,
    )
