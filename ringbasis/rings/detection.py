"""
Ring detection queries.

This module answers the ring questions asked by SMARTS-style matching and
aromaticity code: which atoms are in a ring, how many rings each atom is in,
what ring sizes each atom sees, and which rings are fused together.

Ring counts and sizes come from the minimum cycle basis (the SSSR), so fused
systems are counted correctly: each bridgehead atom of naphthalene is in two
six-membered rings, and the ten-membered envelope is never reported.
Membership-only questions use the linear-time :class:`RingSearch` instead.
"""

from __future__ import annotations

from typing import Sequence, Union

from ringbasis.cycles import InitialCycles, MinimumCycleBasis
from ringbasis.graph import Graph, as_graph
from ringbasis.rings.search import RingSearch
from ringbasis.types import Ring

GraphLike = Union[Graph, Sequence[Sequence[int]]]


def find_sssr(graph: GraphLike, max_ring_size: int | None = None) -> list[set[int]]:
    """Find Smallest Set of Smallest Rings (SSSR).

    The SSSR is a linearly independent basis of cycles where:
    - The number of rings equals the cyclomatic complexity (E - V + C)
    - Larger rings that can be expressed as combinations of smaller rings are excluded

    For example, naphthalene has cyclomatic complexity 2 (11 bonds - 10 atoms + 1),
    so its SSSR contains exactly 2 rings (the two 6-membered rings), not the
    10-membered envelope ring.

    Args:
        graph: Graph (or edge list) to analyze.
        max_ring_size: Maximum ring size to report (default None = no limit).

    Returns:
        List of rings, each as a set of atom indices, smallest first.

    Example:
        >>> benzene = [(0, 1), (1, 2), (2, 3), (3, 4), (4, 5), (5, 0)]
        >>> rings = find_sssr(benzene)
        >>> len(rings), len(rings[0])
        (1, 6)
    """
    g = as_graph(graph)
    if g.num_vertices == 0:
        return []

    rings = [set(path[:-1]) for path in MinimumCycleBasis(g).paths()]
    if max_ring_size is not None:
        return [r for r in rings if len(r) <= max_ring_size]
    return rings


def find_rings(graph: GraphLike) -> list[Ring]:
    """SSSR rings as :class:`Ring` objects, in minimum cycle basis order."""
    return MinimumCycleBasis(as_graph(graph)).rings()


def get_ring_membership(graph: GraphLike) -> dict[int, int]:
    """Fast ring membership detection (is atom in any ring?).

    Uses Tarjan's bridge algorithm for O(V+E) performance.
    For each atom, returns 1 if in a ring, 0 otherwise.

    Note: This doesn't count HOW MANY rings an atom is in, just whether
    it's in at least one. For accurate ring counts, use get_ring_info().
    """
    g = as_graph(graph)
    search = RingSearch(g)
    return {i: (1 if search.is_cyclic(i) else 0) for i in g.vertices()}


def get_ring_info(
    graph: GraphLike,
    _use_sssr: bool = True,
) -> tuple[dict[int, int], dict[int, set[int]]]:
    """Get ring membership and sizes for each atom.

    This is useful for SMARTS queries like [R] (in ring), [R2] (in 2 rings),
    [r5] (in 5-membered ring), etc.

    Args:
        graph: Graph (or edge list) to analyze.
        _use_sssr: If True, use SSSR for accurate counts. If False, only mark
            ring membership (count 1, no sizes).

    Returns:
        A tuple of (ring_count, ring_sizes) where:
        - ring_count: dict mapping atom index to number of SSSR rings it's in
        - ring_sizes: dict mapping atom index to set of ring sizes it's in

    Example:
        >>> naphthalene = [(0, 1), (1, 2), (2, 3), (3, 4), (4, 5), (5, 0),
        ...                (4, 6), (6, 7), (7, 8), (8, 9), (9, 5)]
        >>> ring_count, ring_sizes = get_ring_info(naphthalene)
        >>> ring_count[4]  # bridgehead carbon
        2
        >>> ring_sizes[4]
        {6}
    """
    g = as_graph(graph)
    ring_count: dict[int, int] = {i: 0 for i in g.vertices()}
    ring_sizes: dict[int, set[int]] = {i: set() for i in g.vertices()}

    if g.num_vertices == 0:
        return ring_count, ring_sizes

    if _use_sssr:
        for ring in MinimumCycleBasis(g).rings():
            for atom_idx in ring:
                ring_count[atom_idx] += 1
                ring_sizes[atom_idx].add(ring.size)
    else:
        for atom_idx in RingSearch(g).cyclic():
            ring_count[atom_idx] = 1

    return ring_count, ring_sizes


def get_ring_info_fast(graph: GraphLike) -> tuple[dict[int, int], dict[int, set[int]]]:
    """Fast ring detection without accurate counts.

    Returns ring_count with 1 for atoms in any ring, 0 otherwise.
    ring_sizes will be empty (no size information).

    Use this for SMARTS queries that only check [R] (in ring) or [R0] (not in ring),
    but don't need [R2] or [r5] type queries.
    """
    g = as_graph(graph)
    ring_count = get_ring_membership(g)
    ring_sizes: dict[int, set[int]] = {i: set() for i in g.vertices()}
    return ring_count, ring_sizes


def get_min_ring_sizes(graph: GraphLike, ring_atoms: set[int] | None = None) -> dict[int, int]:
    """Get the smallest ring size for each atom.

    The shortest cycle through each atom is found by a breadth-first search
    rooted at that atom. Unlike SSSR membership this sees every ring: the
    bridgehead atoms of bicyclo[2.2.2]octane all report 6 even though only
    two of the three six-membered rings are in the SSSR.

    Args:
        graph: Graph (or edge list) to analyze.
        ring_atoms: Optional precomputed set of ring atom indices; atoms
            outside it report 0 without being searched.

    Returns:
        Dict mapping atom index to minimum ring size (0 if not in any ring).
    """
    g = as_graph(graph)
    if g.num_vertices == 0:
        return {}

    initial = InitialCycles(g)
    min_ring_size: dict[int, int] = {}
    for atom_idx in g.vertices():
        cycle = initial.shortest(atom_idx)
        if cycle is None or (ring_atoms is not None and atom_idx not in ring_atoms):
            min_ring_size[atom_idx] = 0
        else:
            min_ring_size[atom_idx] = cycle.weight
    return min_ring_size


def get_ring_bonds(graph: GraphLike) -> set[tuple[int, int]]:
    """Get all bonds that are part of a ring.

    Uses Tarjan's bridge-finding algorithm for O(V+E) performance.
    A bond is a ring bond if it's not a bridge (removing it doesn't disconnect the graph).

    Returns:
        Set of (atom1_idx, atom2_idx) tuples for ring bonds,
        where atom1_idx < atom2_idx.

    Example:
        >>> toluene = [(0, 1), (1, 2), (2, 3), (3, 4), (4, 5), (5, 0), (0, 6)]
        >>> len(get_ring_bonds(toluene))  # 6 bonds in benzene ring
        6
    """
    return set(RingSearch(graph).cyclic_edges())


def find_ring_systems(rings: Sequence[set[int] | Ring]) -> list[list[set[int] | Ring]]:
    """Group rings into fused ring systems.

    Two rings are considered fused if they share at least 2 atoms (a bond).
    Accepts atom sets (as returned by :func:`find_sssr`) or :class:`Ring`
    objects; each system lists the input objects themselves.

    Example:
        >>> naphthalene = [(0, 1), (1, 2), (2, 3), (3, 4), (4, 5), (5, 0),
        ...                (4, 6), (6, 7), (7, 8), (8, 9), (9, 5)]
        >>> systems = find_ring_systems(find_sssr(naphthalene))
        >>> len(systems), len(systems[0])
        (1, 2)
    """
    if not rings:
        return []

    atom_sets = [r.atoms if isinstance(r, Ring) else frozenset(r) for r in rings]
    n = len(rings)
    parent = list(range(n))

    def find(x: int) -> int:
        while parent[x] != x:
            parent[x] = parent[parent[x]]
            x = parent[x]
        return x

    def union(x: int, y: int) -> None:
        px, py = find(x), find(y)
        if px != py:
            parent[px] = py

    for i in range(n):
        for j in range(i + 1, n):
            if len(atom_sets[i] & atom_sets[j]) >= 2:
                union(i, j)

    systems: dict[int, list[set[int] | Ring]] = {}
    for i in range(n):
        systems.setdefault(find(i), []).append(rings[i])

    return list(systems.values())
