"""
Spanning forest and fundamental cycles.

A breadth-first spanning forest splits the edges of a graph into tree edges
and chords. Each chord closes exactly one cycle with the tree (its
fundamental cycle), and the fundamental cycles together form a cycle basis.
That basis is generally not minimal, which makes it a useful upper bound for
the minimum cycle basis.
"""

from __future__ import annotations

import logging
from collections import deque
from typing import Sequence

from ringbasis.cycles.paths import cycle_path
from ringbasis.exceptions import GraphError
from ringbasis.graph import Graph, as_graph

logger = logging.getLogger(__name__)


class SpanningTree:
    """BFS spanning forest of a graph.

    Each component is rooted at its smallest vertex and neighbours are
    visited in ascending order.

    Args:
        graph: A :class:`Graph` or an edge list.

    Example:
        >>> tree = SpanningTree([(0, 1), (1, 2), (2, 0), (2, 3)])
        >>> tree.cycle_rank, tree.chords
        (1, [(1, 2)])
        >>> tree.path(1, 3)
        [1, 0, 2, 3]
    """

    __slots__ = ("_graph", "_parent", "_depth", "_tree", "_chords")

    def __init__(self, graph: Graph | Sequence[Sequence[int]]) -> None:
        g = as_graph(graph)
        n = g.num_vertices
        parent = [-1] * n
        depth = [-1] * n
        tree: set[int] = set()

        for root in g.vertices():
            if depth[root] >= 0:
                continue
            depth[root] = 0
            queue = deque([root])
            while queue:
                node = queue.popleft()
                for nbr in g.neighbors(node):
                    if depth[nbr] < 0:
                        depth[nbr] = depth[node] + 1
                        parent[nbr] = node
                        tree.add(g.edge_index(node, nbr))
                        queue.append(nbr)

        self._graph = g
        self._parent = tuple(parent)
        self._depth = tuple(depth)
        self._tree = frozenset(tree)
        self._chords = tuple(i for i in range(g.num_edges) if i not in tree)

        logger.debug("spanning forest: %d tree edges, %d chords", len(tree), len(self._chords))

    @property
    def graph(self) -> Graph:
        return self._graph

    @property
    def tree_edges(self) -> list[tuple[int, int]]:
        """Tree edges as ``(min, max)`` pairs in edge-index order."""
        return [self._graph.edge(i) for i in sorted(self._tree)]

    @property
    def chords(self) -> list[tuple[int, int]]:
        """Non-tree edges as ``(min, max)`` pairs in edge-index order."""
        return [self._graph.edge(i) for i in self._chords]

    @property
    def cycle_rank(self) -> int:
        """Number of chords, equal to the dimension of the cycle space."""
        return len(self._chords)

    @property
    def num_components(self) -> int:
        return self._graph.num_vertices - len(self._tree)

    @property
    def is_disconnected(self) -> bool:
        return self.num_components > 1

    def is_tree_edge(self, u: int, v: int) -> bool:
        return self._graph.edge_index(u, v) in self._tree

    def path(self, u: int, v: int) -> list[int]:
        """Vertices on the tree path from ``u`` to ``v`` (inclusive).

        Raises:
            GraphError: If ``u`` or ``v`` is not a vertex of the graph, or
                they lie in different components.
        """
        n = self._graph.num_vertices
        for x in (u, v):
            if not 0 <= x < n:
                raise GraphError(f"vertex {x} is not in the graph ({n} vertices)")
        parent, depth = self._parent, self._depth
        up: list[int] = []
        down: list[int] = []
        a, b = u, v
        while a != b:
            if depth[a] >= depth[b]:
                if parent[a] < 0:
                    break
                up.append(a)
                a = parent[a]
            else:
                down.append(b)
                b = parent[b]
        if a != b:
            raise GraphError(f"vertices {u} and {v} are not connected")
        return up + [a] + down[::-1]

    def fundamental_cycles(self) -> list[tuple[int, ...]]:
        """Canonical closed walk of the fundamental cycle of every chord."""
        cycles = []
        for i in self._chords:
            u, v = self._graph.edge(i)
            walk = self.path(u, v)
            edges = [self._graph.edge_index(a, b) for a, b in zip(walk, walk[1:])]
            cycles.append(cycle_path(self._graph, edges + [i]))
        return cycles
