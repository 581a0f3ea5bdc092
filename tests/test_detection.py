"""Tests for SSSR-based ring queries and ring value types."""

from __future__ import annotations

import pytest

from ringbasis import Graph, Ring, RingSystem
from ringbasis.rings import (
    find_ring_systems,
    find_rings,
    find_sssr,
    get_min_ring_sizes,
    get_ring_bonds,
    get_ring_info,
    get_ring_info_fast,
    get_ring_membership,
)


class TestFindSSSR:
    """Test smallest set of smallest rings."""

    def test_benzene(self, benzene) -> None:
        """Benzene has one six-membered ring."""
        rings = find_sssr(benzene)
        assert rings == [{0, 1, 2, 3, 4, 5}]

    def test_naphthalene_excludes_envelope(self, naphthalene) -> None:
        """The ten-ring envelope is not part of the SSSR."""
        rings = find_sssr(naphthalene)
        assert len(rings) == 2
        assert all(len(r) == 6 for r in rings)

    def test_max_ring_size(self, cyclophane) -> None:
        """Rings above the size limit are dropped."""
        assert find_sssr(cyclophane, max_ring_size=6) == [{0, 1, 2, 3, 4, 5}]
        assert len(find_sssr(cyclophane)) == 2

    def test_acyclic(self, branched_aliphatic) -> None:
        """An acyclic graph has no rings."""
        assert find_sssr(branched_aliphatic) == []

    def test_empty(self) -> None:
        """An empty graph has no rings."""
        assert find_sssr(Graph([])) == []

    def test_find_rings(self, norbornane) -> None:
        """Test SSSR as Ring objects."""
        rings = find_rings(norbornane)
        assert [r.size for r in rings] == [5, 5]
        assert rings[0].path == (0, 1, 2, 6, 5, 0)


class TestRingInfo:
    """Test per-atom ring counts and sizes."""

    def test_naphthalene_bridgeheads(self, naphthalene) -> None:
        """Bridgehead atoms are in two rings."""
        ring_count, ring_sizes = get_ring_info(naphthalene)
        assert ring_count[4] == 2
        assert ring_count[5] == 2
        assert ring_count[0] == 1
        assert ring_sizes[4] == {6}

    def test_toluene_substituent(self, toluene) -> None:
        """The methyl carbon is in no ring."""
        ring_count, ring_sizes = get_ring_info(toluene)
        assert ring_count[6] == 0
        assert ring_sizes[6] == set()
        assert ring_count[3] == 1

    def test_mixed_sizes(self, cyclophane) -> None:
        """Atoms shared by rings of different sizes see both sizes."""
        ring_count, ring_sizes = get_ring_info(cyclophane)
        assert ring_sizes[0] == {6, 10}
        assert ring_sizes[8] == {10}
        assert ring_count[4] == 1
        assert ring_count[1] == 2

    def test_without_sssr(self, naphthalene) -> None:
        """Membership-only mode marks every ring atom once."""
        ring_count, ring_sizes = get_ring_info(naphthalene, _use_sssr=False)
        assert set(ring_count.values()) == {1}
        assert all(not s for s in ring_sizes.values())

    def test_without_sssr_skips_substituents(self, toluene) -> None:
        """Membership-only mode still leaves acyclic atoms at zero."""
        ring_count, _ = get_ring_info(toluene, _use_sssr=False)
        assert ring_count[6] == 0
        assert ring_count[0] == 1

    def test_always_computed_from_graph(self, naphthalene) -> None:
        """Ring atoms cannot be supplied by the caller."""
        with pytest.raises(TypeError):
            get_ring_info(naphthalene, _ring_atoms=set())

    def test_acyclic(self, branched_aliphatic) -> None:
        """No atom of an acyclic graph is in a ring."""
        ring_count, _ = get_ring_info(branched_aliphatic)
        assert set(ring_count.values()) == {0}

    def test_fast(self, toluene) -> None:
        """The fast variant reports membership without sizes."""
        ring_count, ring_sizes = get_ring_info_fast(toluene)
        assert ring_count == {0: 1, 1: 1, 2: 1, 3: 1, 4: 1, 5: 1, 6: 0}
        assert all(not s for s in ring_sizes.values())


class TestMembership:
    """Test ring atom and ring bond detection."""

    def test_membership(self, biphenyl) -> None:
        """Both phenyl rings are marked, the biaryl bond is not a ring."""
        membership = get_ring_membership(biphenyl)
        assert all(membership[i] == 1 for i in range(12))

    def test_ring_bonds(self, toluene) -> None:
        """Only the six benzene bonds are ring bonds."""
        bonds = get_ring_bonds(toluene)
        assert len(bonds) == 6
        assert (0, 6) not in bonds
        assert all(a < b for a, b in bonds)


class TestMinRingSizes:
    """Test smallest ring size per atom."""

    def test_bicyclo222_sees_every_ring(self, bicyclo222) -> None:
        """Every atom sees a six-ring, including ones outside the SSSR."""
        assert set(get_min_ring_sizes(bicyclo222).values()) == {6}

    def test_cyclophane(self, cyclophane) -> None:
        """Chain atoms report the large ring size."""
        sizes = get_min_ring_sizes(cyclophane)
        assert [sizes[i] for i in range(6)] == [6] * 6
        assert [sizes[i] for i in range(6, 12)] == [10] * 6

    def test_acyclic_substituent(self, toluene) -> None:
        """A substituent reports 0."""
        sizes = get_min_ring_sizes(toluene)
        assert sizes[6] == 0
        assert sizes[0] == 6

    def test_ring_atoms_filter(self, toluene) -> None:
        """Atoms outside the given set report 0."""
        sizes = get_min_ring_sizes(toluene, ring_atoms={0, 1})
        assert sizes[0] == 6
        assert sizes[2] == 0

    def test_fused_small_ring(self) -> None:
        """Test a cyclopropane fused to a cyclohexane."""
        edges = [(0, 1), (1, 2), (2, 3), (3, 4), (4, 5), (5, 0), (0, 6), (6, 1)]
        sizes = get_min_ring_sizes(edges)
        assert sizes[6] == 3
        assert sizes[0] == 3
        assert sizes[3] == 6

    def test_empty(self) -> None:
        """An empty graph has no atoms to report."""
        assert get_min_ring_sizes(Graph([])) == {}


class TestRingSystems:
    """Test grouping rings into fused systems."""

    def test_naphthalene_one_system(self, naphthalene) -> None:
        """Naphthalene forms a single ring system."""
        systems = find_ring_systems(find_sssr(naphthalene))
        assert len(systems) == 1
        assert len(systems[0]) == 2

    def test_biphenyl_two_systems(self, biphenyl) -> None:
        """Biphenyl rings do not share a bond."""
        systems = find_ring_systems(find_sssr(biphenyl))
        assert len(systems) == 2

    def test_accepts_ring_objects(self, anthracene) -> None:
        """Ring objects are grouped like atom sets."""
        rings = find_rings(anthracene)
        systems = find_ring_systems(rings)
        assert systems == [rings]

    def test_empty(self) -> None:
        """No rings give no systems."""
        assert find_ring_systems([]) == []


class TestRing:
    """Test the Ring value type."""

    def test_normalised(self) -> None:
        """Rings are stored in canonical form."""
        assert Ring([3, 2, 1, 0, 3]) == Ring([0, 1, 2, 3])
        assert Ring([2, 0, 1]).path == (0, 1, 2, 0)

    def test_properties(self) -> None:
        """Test size, atoms, bonds and membership."""
        ring = Ring([4, 5, 9, 8, 7, 6])
        assert ring.size == len(ring) == 6
        assert ring.atoms == frozenset({4, 5, 6, 7, 8, 9})
        assert (4, 5) in ring.bonds
        assert ring.contains_bond(6, 4)
        assert not ring.contains_bond(5, 6)
        assert 9 in ring
        assert list(ring) == [4, 5, 9, 8, 7, 6]

    def test_of_size(self) -> None:
        """Test rings built over consecutive atoms."""
        ring = Ring.of_size(5)
        assert ring.size == 5
        assert len(ring.bonds) == 5
        assert Ring.of_size(3, start=10).path == (10, 11, 12, 10)

    @pytest.mark.parametrize("path", [[0, 1], [0, 1, 0], [0, 1, 2, 1]])
    def test_invalid(self, path) -> None:
        """Paths that are not simple rings raise ValueError."""
        with pytest.raises(ValueError):
            Ring(path)

    def test_spiro_rings_not_fused(self, spiropentane) -> None:
        """Spiro rings share an atom but no bond."""
        a, b = find_rings(spiropentane)
        assert not a.shares_bond_with(b)

    def test_hashable(self) -> None:
        """Equal rings hash equal."""
        assert len({Ring([0, 1, 2]), Ring([2, 1, 0])}) == 1


class TestRingSystemType:
    """Test the RingSystem value type."""

    def test_isolated(self) -> None:
        """A single ring is an isolated system."""
        system = RingSystem((0, 1, 2), ((0, 1), (0, 2), (1, 2)))
        assert not system.is_fused
        assert system.num_rings == 1
        assert 1 in system
        assert len(system) == 3
