"""
Immutable adjacency model for molecular graphs.

Atoms are dense integer vertices ``0..n-1`` and bonds are unordered vertex
pairs. A :class:`Graph` is built once, from an edge list (as produced from a
molecule's bonds) or from an adjacency list, and never changes afterwards.
Every edge has a stable index which the cycle code uses as its bit position
in GF(2) incidence vectors.

    >>> g = Graph([(0, 1), (1, 2), (2, 0), (2, 3)])
    >>> g.num_vertices, g.num_edges
    (4, 4)
    >>> g.neighbors(2)
    (0, 1, 3)
    >>> g.cycle_rank
    1
"""

from __future__ import annotations

import operator
from typing import Iterable, Iterator, Sequence

from ringbasis.exceptions import GraphError


def _vertex(value: object) -> int:
    """Vertex index as an int; bools and non-integral numbers are rejected."""
    if isinstance(value, bool):
        raise TypeError(f"vertex index must be an integer, got {value!r}")
    return operator.index(value)


class Graph:
    """Simple undirected graph over integer vertices.

    Args:
        edges: Sequence of ``(u, v)`` vertex pairs. The position of a pair in
            the sequence is its edge index.
        num_vertices: Total vertex count. Defaults to the largest vertex
            index plus one; pass a larger value to include trailing isolated
            vertices.

    Raises:
        GraphError: If ``edges`` is None, or contains self-loops, negative or
            out-of-range vertices, malformed pairs or duplicate edges.
    """

    __slots__ = ("_n", "_edges", "_adj", "_index", "_components")

    def __init__(
        self,
        edges: Sequence[Sequence[int]],
        num_vertices: int | None = None,
    ) -> None:
        if edges is None:
            raise GraphError("graph edges must not be None")

        pairs: list[tuple[int, int]] = []
        for edge in edges:
            try:
                u, v = edge
                u, v = _vertex(u), _vertex(v)
            except (TypeError, ValueError):
                raise GraphError(f"edge must be a pair of vertices, got {edge!r}") from None
            if u < 0 or v < 0:
                raise GraphError("negative vertex index", (u, v))
            if u == v:
                raise GraphError("self-loop", (u, v))
            pairs.append((u, v) if u < v else (v, u))

        n = max((v for _, v in pairs), default=-1) + 1
        if num_vertices is not None:
            if num_vertices < n:
                raise GraphError(
                    f"num_vertices={num_vertices} is smaller than the largest vertex index + 1 ({n})"
                )
            n = num_vertices

        index: dict[tuple[int, int], int] = {}
        adj: list[list[int]] = [[] for _ in range(n)]
        for i, (u, v) in enumerate(pairs):
            if (u, v) in index:
                raise GraphError("duplicate edge", (u, v))
            index[(u, v)] = i
            adj[u].append(v)
            adj[v].append(u)

        self._n = n
        self._edges: tuple[tuple[int, int], ...] = tuple(pairs)
        self._adj: tuple[tuple[int, ...], ...] = tuple(tuple(sorted(a)) for a in adj)
        self._index = index
        self._components = self._find_components()

    @classmethod
    def from_edges(
        cls,
        edges: Sequence[Sequence[int]],
        num_vertices: int | None = None,
    ) -> Graph:
        """Build a graph from a list of vertex pairs."""
        return cls(edges, num_vertices)

    @classmethod
    def from_adjacency(cls, adjacency: Sequence[Sequence[int]]) -> Graph:
        """Build a graph from an adjacency list.

        ``adjacency[v]`` lists the neighbours of ``v``. Every edge must be
        listed from both ends. Edges are indexed in ascending ``(u, v)``
        order with ``u < v``.

        Example:
            >>> g = Graph.from_adjacency([[1, 2], [0, 2], [0, 1]])
            >>> g.edges
            ((0, 1), (0, 2), (1, 2))

        Raises:
            GraphError: If ``adjacency`` or one of its entries is None, an
                entry is not a list of integers, or the lists are not
                symmetric.
        """
        if adjacency is None:
            raise GraphError("adjacency list must not be None")

        rows: list[set[int]] = []
        for u, neighbors in enumerate(adjacency):
            if neighbors is None:
                raise GraphError(f"adjacency entry for vertex {u} is None")
            try:
                row = [_vertex(v) for v in neighbors]
            except TypeError:
                raise GraphError(
                    f"adjacency entry for vertex {u} must list integer neighbours, got {neighbors!r}"
                ) from None
            if len(set(row)) != len(row):
                raise GraphError(f"adjacency entry for vertex {u} repeats a neighbour")
            rows.append(set(row))

        n = len(rows)
        edges: list[tuple[int, int]] = []
        for u, neighbors in enumerate(rows):
            for v in sorted(neighbors):
                if not 0 <= v < n:
                    raise GraphError("neighbour index out of range", (u, v))
                if u == v:
                    raise GraphError("self-loop", (u, v))
                if u not in rows[v]:
                    raise GraphError("adjacency list is not symmetric", (u, v))
                if u < v:
                    edges.append((u, v))
        return cls(edges, n)

    # ------------------------------------------------------------------
    # Basic accessors
    # ------------------------------------------------------------------

    @property
    def num_vertices(self) -> int:
        """Number of vertices (atoms)."""
        return self._n

    @property
    def num_edges(self) -> int:
        """Number of edges (bonds)."""
        return len(self._edges)

    @property
    def edges(self) -> tuple[tuple[int, int], ...]:
        """All edges as ``(min, max)`` pairs in edge-index order."""
        return self._edges

    def vertices(self) -> range:
        return range(self._n)

    def neighbors(self, v: int) -> tuple[int, ...]:
        """Neighbours of ``v`` in ascending order."""
        return self._adj[v]

    def degree(self, v: int) -> int:
        return len(self._adj[v])

    def edge(self, i: int) -> tuple[int, int]:
        """Endpoints ``(min, max)`` of the edge with index ``i``."""
        return self._edges[i]

    def has_edge(self, u: int, v: int) -> bool:
        key = (u, v) if u < v else (v, u)
        return key in self._index

    def edge_index(self, u: int, v: int) -> int:
        """Stable index of the edge between ``u`` and ``v``.

        Raises:
            GraphError: If ``u`` and ``v`` are not adjacent.
        """
        key = (u, v) if u < v else (v, u)
        try:
            return self._index[key]
        except KeyError:
            raise GraphError("no such edge", key) from None

    def to_adjacency(self) -> list[list[int]]:
        """Adjacency list form (``adj[v]`` = sorted neighbours of ``v``)."""
        return [list(a) for a in self._adj]

    # ------------------------------------------------------------------
    # Connectivity
    # ------------------------------------------------------------------

    def components(self) -> list[list[int]]:
        """Connected components, each as an ascending vertex list.

        Components are ordered by their smallest vertex. Isolated vertices
        form components of their own.
        """
        return [list(c) for c in self._components]

    @property
    def num_components(self) -> int:
        return len(self._components)

    @property
    def cycle_rank(self) -> int:
        """Dimension of the cycle space: ``|E| - |V| + components``."""
        return self.num_edges - self._n + len(self._components)

    def _find_components(self) -> tuple[tuple[int, ...], ...]:
        seen = [False] * self._n
        found: list[tuple[int, ...]] = []
        for start in range(self._n):
            if seen[start]:
                continue
            seen[start] = True
            stack = [start]
            members: list[int] = []
            while stack:
                node = stack.pop()
                members.append(node)
                for nbr in self._adj[node]:
                    if not seen[nbr]:
                        seen[nbr] = True
                        stack.append(nbr)
            found.append(tuple(sorted(members)))
        return tuple(found)

    # ------------------------------------------------------------------
    # Python protocol
    # ------------------------------------------------------------------

    def __len__(self) -> int:
        return self._n

    def __iter__(self) -> Iterator[int]:
        return iter(range(self._n))

    def __eq__(self, other: object) -> bool:
        if not isinstance(other, Graph):
            return NotImplemented
        return self._n == other._n and self._edges == other._edges

    def __hash__(self) -> int:
        return hash((self._n, self._edges))

    def __repr__(self) -> str:
        return f"Graph(num_vertices={self._n}, num_edges={self.num_edges})"


def as_graph(graph: Graph | Iterable[Sequence[int]]) -> Graph:
    """Coerce ``graph`` to a :class:`Graph`.

    A Graph is returned unchanged; anything else is treated as an edge list.

    Raises:
        GraphError: If ``graph`` is None or not a valid edge list.
    """
    if graph is None:
        raise GraphError("graph must not be None")
    if isinstance(graph, Graph):
        return graph
    return Graph(list(graph))
