"""Plain-text exports of a social graph: Graphviz DOT and degree listing."""

import logging
from pathlib import Path
from typing import Iterator

from seirnet.graph.types import SocialGraph

log = logging.getLogger(__name__)


def iter_dot_lines(graph: SocialGraph) -> Iterator[str]:
    """Yield the lines of an undirected DOT description.

    Every node is declared; each edge is written once, from the higher id
    to the lower one.
    """
    yield "graph social {"
    for i, nbrs in enumerate(graph.neighbors):
        yield f"\tn{i};"
        for k in nbrs:
            if k < i:
                yield f"\tn{i}--n{k};"
    yield "}"


def write_dot(graph: SocialGraph, path: Path | str) -> Path:
    path = Path(path)
    path.parent.mkdir(parents=True, exist_ok=True)
    with open(path, "w") as f:
        for line in iter_dot_lines(graph):
            f.write(line + "\n")
    log.info("Graph DOT written to %s", path)
    return path


def write_degrees(graph: SocialGraph, path: Path | str) -> Path:
    """Write one ``node<TAB>degree`` line per node."""
    path = Path(path)
    path.parent.mkdir(parents=True, exist_ok=True)
    with open(path, "w") as f:
        for i, nbrs in enumerate(graph.neighbors):
            f.write(f"{i}\t{len(nbrs)}\n")
    log.info("Degree listing written to %s", path)
    return path
