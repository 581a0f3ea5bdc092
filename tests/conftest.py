"""Test configuration and fixtures for ringbasis tests.

Reference molecules are given as bond lists over atom indices, the form the
library receives from molecule readers.
"""

from __future__ import annotations

import pytest

from ringbasis import Graph


def ring_edges(atoms: list[int]) -> list[tuple[int, int]]:
    """Bonds closing ``atoms`` into a ring, in order."""
    return [(atoms[i], atoms[(i + 1) % len(atoms)]) for i in range(len(atoms))]


def assert_valid_path(graph: Graph, path: list[int]) -> None:
    """A basis path must be closed, simple, and follow graph edges."""
    assert len(path) >= 4
    assert path[0] == path[-1]
    interior = path[:-1]
    assert len(set(interior)) == len(interior)
    for a, b in zip(path, path[1:]):
        assert graph.has_edge(a, b), f"{a}-{b} is not a bond"


@pytest.fixture
def benzene() -> list[tuple[int, int]]:
    return ring_edges([0, 1, 2, 3, 4, 5])


@pytest.fixture
def toluene() -> list[tuple[int, int]]:
    return ring_edges([0, 1, 2, 3, 4, 5]) + [(0, 6)]


@pytest.fixture
def naphthalene() -> list[tuple[int, int]]:
    """Two six-membered rings fused at bond 4-5 (10 atoms, 11 bonds)."""
    return [
        (0, 1), (1, 2), (2, 3), (3, 4), (4, 5), (5, 0),
        (4, 6), (6, 7), (7, 8), (8, 9), (9, 5),
    ]


@pytest.fixture
def anthracene(naphthalene) -> list[tuple[int, int]]:
    """Three linearly fused six-membered rings (14 atoms, 16 bonds)."""
    return naphthalene + [(8, 10), (10, 11), (11, 12), (12, 13), (13, 7)]


@pytest.fixture
def pentalane() -> list[tuple[int, int]]:
    """Bicyclo[3.3.0]octane: two five-membered rings sharing bond 3-4."""
    return [
        (0, 1), (1, 2), (2, 3), (3, 4), (4, 0),
        (3, 5), (5, 6), (6, 7), (7, 4),
    ]


@pytest.fixture
def bicyclo222() -> list[tuple[int, int]]:
    """Bicyclo[2.2.2]octane: bridgeheads 2 and 5, three two-atom bridges."""
    return [
        (0, 1), (1, 2), (2, 3), (3, 4), (4, 5), (5, 0),
        (2, 7), (7, 6), (6, 5),
    ]


@pytest.fixture
def norbornane() -> list[tuple[int, int]]:
    """Bicyclo[2.2.1]heptane: bridgeheads 2 and 5, one-atom bridge 6."""
    return [
        (0, 1), (1, 2), (2, 3), (3, 4), (4, 5), (5, 0),
        (5, 6), (6, 2),
    ]


@pytest.fixture
def cyclophane() -> list[tuple[int, int]]:
    """Benzene bridged across its para positions by a six-atom chain."""
    return ring_edges([0, 1, 2, 3, 4, 5]) + [
        (3, 6), (6, 7), (7, 8), (8, 9), (9, 10), (10, 11), (11, 0),
    ]


@pytest.fixture
def paracyclophane() -> list[tuple[int, int]]:
    """[2.2]Paracyclophane: two benzenes joined by two ethano bridges."""
    return (
        ring_edges([0, 1, 2, 3, 4, 5])
        + ring_edges([6, 7, 8, 9, 10, 11])
        + [(0, 12), (12, 13), (13, 6), (3, 14), (14, 15), (15, 9)]
    )


@pytest.fixture
def spiropentane() -> list[tuple[int, int]]:
    """Two three-membered rings sharing only atom 0."""
    return [(0, 1), (1, 2), (2, 0), (0, 3), (3, 4), (4, 0)]


@pytest.fixture
def biphenyl() -> list[tuple[int, int]]:
    return ring_edges([0, 1, 2, 3, 4, 5]) + [(0, 6)] + ring_edges([6, 7, 8, 9, 10, 11])


@pytest.fixture
def branched_aliphatic() -> list[tuple[int, int]]:
    """Acyclic branched chain (a tree)."""
    return [(0, 1), (1, 2), (2, 3), (1, 4), (4, 5), (4, 6), (6, 7)]


@pytest.fixture
def cube() -> list[tuple[int, int]]:
    """Cubane skeleton: six four-membered faces, cycle rank 5."""
    return (
        ring_edges([0, 1, 2, 3])
        + ring_edges([4, 5, 6, 7])
        + [(0, 4), (1, 5), (2, 6), (3, 7)]
    )


@pytest.fixture
def k4() -> list[tuple[int, int]]:
    """Tetrahedrane skeleton (complete graph on four atoms)."""
    return [(0, 1), (0, 2), (0, 3), (1, 2), (1, 3), (2, 3)]


REFERENCE_GRAPHS = [
    "benzene",
    "toluene",
    "naphthalene",
    "anthracene",
    "pentalane",
    "bicyclo222",
    "norbornane",
    "cyclophane",
    "paracyclophane",
    "spiropentane",
    "biphenyl",
    "branched_aliphatic",
    "cube",
    "k4",
]


@pytest.fixture(params=REFERENCE_GRAPHS)
def reference_graph(request) -> Graph:
    """Each reference molecule in turn, as a Graph."""
    return Graph(request.getfixturevalue(request.param))
