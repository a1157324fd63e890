"""Social graph data structure produced by the builder."""

from dataclasses import dataclass

import numpy as np
import scipy.sparse


@dataclass(frozen=True)
class SocialGraph:
    """Immutable undirected contact graph.

    ``neighbors[i]`` lists the neighbors of node ``i`` in ascending order,
    which fixes the order in which per-edge contagion draws are consumed.
    ``edges`` keeps the (new_node, target) pairs in creation order.
    """

    n: int  # number of nodes, ids 0..n-1
    neighbors: tuple[tuple[int, ...], ...]
    edges: tuple[tuple[int, int], ...]

    @property
    def n_edges(self) -> int:
        return len(self.edges)

    def degree(self, node: int) -> int:
        return len(self.neighbors[node])

    def degrees(self) -> np.ndarray:
        """Int array of length n with the degree of every node."""
        return np.fromiter(
            (len(nbrs) for nbrs in self.neighbors), dtype=np.int64, count=self.n
        )

    def has_edge(self, i: int, k: int) -> bool:
        return k in self.neighbors[i]

    def to_csr(self) -> scipy.sparse.csr_matrix:
        """Symmetric sparse adjacency matrix (n x n)."""
        if not self.edges:
            return scipy.sparse.csr_matrix((self.n, self.n), dtype=np.int8)
        pairs = np.asarray(self.edges, dtype=np.int64)
        rows = np.concatenate([pairs[:, 0], pairs[:, 1]])
        cols = np.concatenate([pairs[:, 1], pairs[:, 0]])
        data = np.ones(len(rows), dtype=np.int8)
        return scipy.sparse.csr_matrix((data, (rows, cols)), shape=(self.n, self.n))
