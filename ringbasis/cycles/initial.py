"""
Initial (candidate) cycles for minimum cycle basis computation.

A breadth-first search is run from every vertex. BFS visits neighbours in
ascending order, so the search tree of each root is fixed. Whenever the search,
while expanding ``x``, meets an already visited ``y`` that is neither ``x``'s
parent nor ``x``'s child, the edge ``(x, y)`` closes a cycle: the two tree paths
from ``x`` and ``y`` up to their last common ancestor, joined by ``(x, y)``.
When that ancestor is the root the cycle passes through the root, and the
shortest such cycle is the smallest ring the root belongs to.

The candidate set is every distinct closed cycle over all roots. It contains
Horton's candidate set (cycles through the root built from two shortest
paths) and therefore a minimum cycle basis, and since it includes all
fundamental cycles of at least one spanning forest it always spans the cycle
space.

    >>> from ringbasis.graph import Graph
    >>> naphthalene = Graph([(0, 1), (1, 2), (2, 3), (3, 4), (4, 5), (5, 0),
    ...                      (4, 6), (6, 7), (7, 8), (8, 9), (9, 5)])
    >>> initial = InitialCycles(naphthalene)
    >>> initial.lengths()
    [6, 10]
    >>> initial.shortest(0).path
    (0, 1, 2, 3, 4, 5, 0)
"""

from __future__ import annotations

import logging
from collections import deque
from dataclasses import dataclass, field
from typing import Iterable, Iterator, Sequence

from ringbasis.cycles.paths import cycle_path
from ringbasis.gf2 import BitVector
from ringbasis.graph import Graph, as_graph

logger = logging.getLogger(__name__)


@dataclass(frozen=True, slots=True)
class Cycle:
    """A simple cycle of a graph.

    Equality and hashing use the edge set only, so the same ring reached from
    different roots or traversed in either direction compares equal.

    Attributes:
        path: Canonical closed vertex walk (first vertex repeated at the end).
        edges: Indices of the edges the cycle uses.
        vector: Edge-incidence vector over all edges of the graph.
    """

    path: tuple[int, ...] = field(compare=False)
    edges: frozenset[int]
    vector: BitVector = field(compare=False, repr=False)

    @classmethod
    def from_edges(cls, graph: Graph, edge_indices: Iterable[int]) -> Cycle:
        edges = frozenset(edge_indices)
        return cls(
            path=cycle_path(graph, edges),
            edges=edges,
            vector=BitVector.from_indices(graph.num_edges, edges),
        )

    @property
    def weight(self) -> int:
        """Number of edges (equal to the number of vertices, the ring size)."""
        return len(self.edges)

    @property
    def vertices(self) -> tuple[int, ...]:
        """Vertices in walk order, without the closing repeat."""
        return self.path[:-1]

    @property
    def sort_key(self) -> tuple[int, tuple[int, ...]]:
        """Ordering used everywhere: weight first, then canonical path."""
        return (len(self.edges), self.path)

    def __contains__(self, vertex: int) -> bool:
        return vertex in self.path


def _closures(graph: Graph, root: int) -> Iterator[tuple[list[int], bool]]:
    """Cycles closed by the BFS tree rooted at ``root``.

    Yields:
        ``(edge_indices, through_root)`` once per non-tree edge of the
        root's component.
    """
    parent: dict[int, int] = {root: -1}
    depth: dict[int, int] = {root: 0}
    closed: set[int] = set()
    queue = deque([root])

    while queue:
        x = queue.popleft()
        for y in graph.neighbors(x):
            if y not in parent:
                parent[y] = x
                depth[y] = depth[x] + 1
                queue.append(y)
                continue
            if y == parent[x] or parent[y] == x:
                continue

            closing = graph.edge_index(x, y)
            if closing in closed:
                continue
            closed.add(closing)

            edges = [closing]
            a, b = x, y
            while a != b:
                if depth[a] >= depth[b]:
                    edges.append(graph.edge_index(a, parent[a]))
                    a = parent[a]
                else:
                    edges.append(graph.edge_index(b, parent[b]))
                    b = parent[b]
            yield edges, a == root


class InitialCycles:
    """Candidate cycles of a graph, one BFS per vertex.

    Args:
        graph: A :class:`Graph` or an edge list.

    Raises:
        GraphError: If ``graph`` is None or malformed.
    """

    __slots__ = ("_graph", "_cycles", "_shortest")

    def __init__(self, graph: Graph | Sequence[Sequence[int]]) -> None:
        g = as_graph(graph)
        found: dict[frozenset[int], Cycle] = {}
        shortest: list[Cycle | None] = [None] * g.num_vertices

        for root in g.vertices():
            best = None
            for edges, through_root in _closures(g, root):
                key = frozenset(edges)
                cycle = found.get(key)
                if cycle is None:
                    cycle = found[key] = Cycle.from_edges(g, key)
                if through_root and (best is None or cycle.sort_key < best.sort_key):
                    best = cycle
            shortest[root] = best

        self._graph = g
        self._cycles: tuple[Cycle, ...] = tuple(sorted(found.values(), key=lambda c: c.sort_key))
        self._shortest: tuple[Cycle | None, ...] = tuple(shortest)

        logger.debug(
            "%d candidate cycles from %d roots (%d vertices on a cycle)",
            len(self._cycles), g.num_vertices, sum(c is not None for c in shortest),
        )

    @property
    def graph(self) -> Graph:
        return self._graph

    def cycles(self) -> list[Cycle]:
        """All candidates sorted by weight, then canonical path."""
        return list(self._cycles)

    def shortest(self, vertex: int) -> Cycle | None:
        """Shortest cycle through ``vertex``, or None if it lies on no cycle.

        Ties are broken by the smallest canonical path.
        """
        return self._shortest[vertex]

    def lengths(self) -> list[int]:
        """Distinct candidate weights in ascending order."""
        return sorted({c.weight for c in self._cycles})

    def cycles_of_length(self, length: int) -> list[Cycle]:
        return [c for c in self._cycles if c.weight == length]

    def __len__(self) -> int:
        return len(self._cycles)

    def __iter__(self) -> Iterator[Cycle]:
        return iter(self._cycles)

    def __repr__(self) -> str:
        return f"InitialCycles(num_cycles={len(self._cycles)}, lengths={self.lengths()})"
