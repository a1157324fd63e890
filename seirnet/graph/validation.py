"""Structural checks and degree/component summaries for social graphs."""

from dataclasses import dataclass

import numpy as np
from scipy.sparse.csgraph import connected_components

from seirnet.graph.types import SocialGraph


class GraphConstructionError(RuntimeError):
    """Raised when a built graph violates its structural invariants."""


def validate_graph(graph: SocialGraph) -> list[str]:
    """Validate a social graph.

    Checks (cheapest first):
    1. One neighbor list per node
    2. No self-loops, no duplicate neighbors
    3. Symmetric adjacency
    4. Total degree equals twice the edge count

    Returns:
        List of error strings (empty = valid graph).
    """
    errors: list[str] = []

    if len(graph.neighbors) != graph.n:
        errors.append(
            f"Expected {graph.n} neighbor lists, found {len(graph.neighbors)}"
        )
        return errors

    for i, nbrs in enumerate(graph.neighbors):
        if i in nbrs:
            errors.append(f"Self-loop at node {i}")
        if len(set(nbrs)) != len(nbrs):
            errors.append(f"Duplicate neighbors at node {i}")
        for k in nbrs:
            if not 0 <= k < graph.n:
                errors.append(f"Node {i} has out-of-range neighbor {k}")
            elif i not in graph.neighbors[k]:
                errors.append(f"Asymmetric edge {i}->{k}")

    total_degree = int(graph.degrees().sum())
    if total_degree != 2 * graph.n_edges:
        errors.append(
            f"Total degree {total_degree} != 2 * edges ({2 * graph.n_edges})"
        )

    return errors


def check_graph(graph: SocialGraph) -> None:
    """Raise GraphConstructionError if ``validate_graph`` finds anything."""
    errors = validate_graph(graph)
    if errors:
        shown = "; ".join(errors[:5])
        more = f" (+{len(errors) - 5} more)" if len(errors) > 5 else ""
        raise GraphConstructionError(f"Invalid social graph: {shown}{more}")


@dataclass(frozen=True, slots=True)
class DegreeSummary:
    """Degree distribution and connectivity overview of a graph."""

    n: int
    n_edges: int
    mean_degree: float
    max_degree: int
    isolated: int  # nodes with degree 0
    n_components: int
    largest_component: int


def summarize_graph(graph: SocialGraph) -> DegreeSummary:
    """Compute degree statistics and connected components (scipy csgraph)."""
    if graph.n == 0:
        return DegreeSummary(0, 0, 0.0, 0, 0, 0, 0)

    degrees = graph.degrees()
    n_components, labels = connected_components(graph.to_csr(), directed=False)
    component_sizes = np.bincount(labels)

    return DegreeSummary(
        n=graph.n,
        n_edges=graph.n_edges,
        mean_degree=float(degrees.mean()),
        max_degree=int(degrees.max()),
        isolated=int((degrees == 0).sum()),
        n_components=int(n_components),
        largest_component=int(component_sizes.max()),
    )
