"""
Conversion of cycles between edge sets and ordered vertex paths.

A cycle is stored internally as a set of edge indices. Consumers (ring
membership, ring sizes, fused ring detection) want an ordered closed walk
instead. The walk is canonical: it starts at the smallest vertex of the cycle,
steps first to the smaller of that vertex's two cycle neighbours, and repeats
the start vertex at the end.

    >>> from ringbasis.graph import Graph
    >>> g = Graph([(0, 1), (1, 2), (2, 3), (3, 0)])
    >>> cycle_path(g, [0, 1, 2, 3])
    (0, 1, 2, 3, 0)
"""

from __future__ import annotations

import logging
from typing import TYPE_CHECKING, Iterable, Sequence

from ringbasis.exceptions import CycleBasisError

if TYPE_CHECKING:
    from ringbasis.graph import Graph

logger = logging.getLogger(__name__)


def _fail(message: str) -> CycleBasisError:
    logger.error(message)
    return CycleBasisError(message)


def cycle_path(graph: "Graph", edge_indices: Iterable[int]) -> tuple[int, ...]:
    """Closed canonical vertex walk for a simple cycle given by its edges.

    Args:
        graph: Graph the edge indices refer to.
        edge_indices: Indices of the edges forming one simple cycle.

    Returns:
        Tuple ``(v0, v1, ..., vk-1, v0)`` where ``v0`` is the smallest vertex
        and ``v1 < vk-1``.

    Raises:
        CycleBasisError: If the edges do not form exactly one simple cycle.
    """
    indices = set(edge_indices)
    count = len(indices)
    local: dict[int, list[int]] = {}
    for i in indices:
        u, v = graph.edge(i)
        local.setdefault(u, []).append(v)
        local.setdefault(v, []).append(u)

    if count < 3:
        raise _fail(f"edge set of size {count} cannot form a cycle")
    for vertex, nbrs in local.items():
        if len(nbrs) != 2:
            raise _fail(f"vertex {vertex} has cycle degree {len(nbrs)}, expected 2")

    start = min(local)
    first, last = sorted(local[start])
    path = [start, first]
    prev, curr = start, first
    while curr != start:
        a, b = local[curr]
        nxt = b if a == prev else a
        prev, curr = curr, nxt
        path.append(curr)

    if len(path) - 1 != count:
        raise _fail(f"edge set splits into several circuits ({count} edges, walk of {len(path) - 1})")
    return tuple(path)


def path_edges(graph: "Graph", path: Sequence[int]) -> list[int]:
    """Edge indices traversed by a closed vertex walk.

    Raises:
        GraphError: If two consecutive vertices are not adjacent.
    """
    return [graph.edge_index(path[i], path[i + 1]) for i in range(len(path) - 1)]


def canonical_path(path: Sequence[int]) -> tuple[int, ...]:
    """Rotate and orient a vertex cycle into canonical closed form.

    ``path`` may be open (``[0, 1, 2]``) or closed (``[1, 2, 0, 1]``).

    Example:
        >>> canonical_path([3, 2, 1, 0, 3])
        (0, 1, 2, 3, 0)
    """
    ring = list(path)
    if len(ring) > 1 and ring[0] == ring[-1]:
        ring.pop()
    if not ring:
        return ()

    k = ring.index(min(ring))
    ring = ring[k:] + ring[:k]
    if len(ring) > 2 and ring[-1] < ring[1]:
        ring = [ring[0]] + ring[:0:-1]
    ring.append(ring[0])
    return tuple(ring)
