"""
Ring search: which atoms and bonds are cyclic, and how rings group.

Unlike the cycle basis, ring search does not enumerate rings. A single
depth-first pass (Tarjan's low-link method) splits the bonds into bridges and
biconnected blocks. Every bond that is not a bridge lies on a ring, and every
block with more than one bond is a ring system: an isolated ring when it has
as many bonds as atoms, a fused (or bridged) system otherwise. Spiro-linked
rings share an atom but not a block, so they are reported as two isolated
systems.

    >>> spiro = RingSearch([(0, 1), (1, 2), (2, 0), (0, 3), (3, 4), (4, 0)])
    >>> spiro.isolated()
    [[0, 1, 2], [0, 3, 4]]
    >>> spiro.fused()
    []
"""

from __future__ import annotations

import logging
from typing import Sequence

from ringbasis.graph import Graph, as_graph
from ringbasis.types import RingSystem

logger = logging.getLogger(__name__)


def _blocks(graph: Graph) -> tuple[list[list[int]], set[int]]:
    """Biconnected blocks (as edge-index lists) and bridges of ``graph``.

    Iterative form of Tarjan's algorithm so long chains do not hit the
    recursion limit.
    """
    n = graph.num_vertices
    disc = [-1] * n
    low = [0] * n
    counter = 0
    blocks: list[list[int]] = []
    bridges: set[int] = set()

    for start in range(n):
        if disc[start] >= 0:
            continue
        disc[start] = low[start] = counter
        counter += 1
        stack = [(start, -1, iter(graph.neighbors(start)))]
        edge_stack: list[int] = []

        while stack:
            node, parent_edge, neighbors = stack[-1]
            descended = False
            for nbr in neighbors:
                e = graph.edge_index(node, nbr)
                if e == parent_edge:
                    continue
                if disc[nbr] < 0:
                    disc[nbr] = low[nbr] = counter
                    counter += 1
                    edge_stack.append(e)
                    stack.append((nbr, e, iter(graph.neighbors(nbr))))
                    descended = True
                    break
                if disc[nbr] < disc[node]:
                    # back edge to an ancestor
                    low[node] = min(low[node], disc[nbr])
                    edge_stack.append(e)
            if descended:
                continue

            stack.pop()
            if not stack:
                continue
            parent = stack[-1][0]
            low[parent] = min(low[parent], low[node])
            if low[node] >= disc[parent]:
                block: list[int] = []
                while True:
                    e = edge_stack.pop()
                    block.append(e)
                    if e == parent_edge:
                        break
                blocks.append(block)
                if low[node] > disc[parent]:
                    bridges.add(parent_edge)

    return blocks, bridges


class RingSearch:
    """Cyclic atoms, cyclic bonds and ring systems of a graph.

    Args:
        graph: A :class:`Graph` or an edge list.

    Example:
        >>> toluene = RingSearch([(0, 1), (1, 2), (2, 3), (3, 4), (4, 5),
        ...                       (5, 0), (0, 6)])
        >>> toluene.cyclic()
        [0, 1, 2, 3, 4, 5]
        >>> toluene.is_cyclic(6)
        False
    """

    __slots__ = ("_graph", "_cyclic_edges", "_cyclic_atoms", "_systems")

    def __init__(self, graph: Graph | Sequence[Sequence[int]]) -> None:
        g = as_graph(graph)
        blocks, bridges = _blocks(g)

        systems = []
        for block in blocks:
            if len(block) < 2:
                continue
            bonds = sorted(g.edge(e) for e in block)
            atoms = sorted({a for bond in bonds for a in bond})
            systems.append(RingSystem(tuple(atoms), tuple(bonds)))
        systems.sort(key=lambda s: s.atoms)

        cyclic_edges = frozenset(i for i in range(g.num_edges) if i not in bridges)
        self._graph = g
        self._cyclic_edges = cyclic_edges
        self._cyclic_atoms = frozenset(a for i in cyclic_edges for a in g.edge(i))
        self._systems: tuple[RingSystem, ...] = tuple(systems)

        logger.debug(
            "ring search: %d cyclic atoms, %d ring systems",
            len(self._cyclic_atoms), len(self._systems),
        )

    @property
    def graph(self) -> Graph:
        return self._graph

    def cyclic(self) -> list[int]:
        """Atoms that lie on at least one ring, ascending."""
        return sorted(self._cyclic_atoms)

    def is_cyclic(self, atom: int) -> bool:
        return atom in self._cyclic_atoms

    def is_cyclic_edge(self, u: int, v: int) -> bool:
        """True if the bond ``u-v`` lies on a ring.

        Raises:
            GraphError: If ``u`` and ``v`` are not bonded.
        """
        return self._graph.edge_index(u, v) in self._cyclic_edges

    def cyclic_edges(self) -> list[tuple[int, int]]:
        """Ring bonds as ``(min, max)`` pairs in edge-index order."""
        return [self._graph.edge(i) for i in sorted(self._cyclic_edges)]

    def ring_fragments(self) -> list[RingSystem]:
        """All ring systems, ordered by their atom lists."""
        return list(self._systems)

    def isolated_ring_fragments(self) -> list[RingSystem]:
        return [s for s in self._systems if not s.is_fused]

    def fused_ring_fragments(self) -> list[RingSystem]:
        return [s for s in self._systems if s.is_fused]

    def isolated(self) -> list[list[int]]:
        """Atom lists of the isolated (single ring) systems."""
        return [list(s.atoms) for s in self.isolated_ring_fragments()]

    def fused(self) -> list[list[int]]:
        """Atom lists of the fused or bridged ring systems."""
        return [list(s.atoms) for s in self.fused_ring_fragments()]
