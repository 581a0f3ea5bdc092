"""
Ring value types.

This module defines the small immutable records handed to ring consumers:
:class:`Ring`, a single ring given by its closed atom path, and
:class:`RingSystem`, a block of fused (or a lone isolated) ring.
"""

from __future__ import annotations

from dataclasses import dataclass
from typing import Iterator, Sequence

from ringbasis.cycles.paths import canonical_path


@dataclass(frozen=True, slots=True)
class Ring:
    """A ring as a closed walk over atom indices.

    The path is normalised on construction, so rings built from any rotation
    or direction of the same walk compare equal.

    Attributes:
        path: Closed atom walk, smallest atom first and repeated at the end.

    Example:
        >>> ring = Ring([2, 1, 0, 2])
        >>> ring.path, ring.size
        ((0, 1, 2, 0), 3)
    """

    path: tuple[int, ...]

    def __init__(self, path: Sequence[int]) -> None:
        closed = canonical_path(path)
        if len(closed) < 4:
            raise ValueError(f"a ring needs at least 3 atoms, got {list(path)}")
        if len(set(closed[:-1])) != len(closed) - 1:
            raise ValueError(f"ring path repeats an atom: {list(path)}")
        object.__setattr__(self, "path", closed)

    @classmethod
    def of_size(cls, size: int, start: int = 0) -> Ring:
        """Ring over consecutive atoms ``start .. start + size - 1``."""
        return cls(list(range(start, start + size)))

    @property
    def size(self) -> int:
        """Number of atoms (and bonds) in the ring."""
        return len(self.path) - 1

    @property
    def atoms(self) -> frozenset[int]:
        return frozenset(self.path[:-1])

    @property
    def bonds(self) -> frozenset[tuple[int, int]]:
        """Ring bonds as ``(min, max)`` atom pairs."""
        return frozenset(
            (a, b) if a < b else (b, a) for a, b in zip(self.path, self.path[1:])
        )

    def contains_bond(self, a: int, b: int) -> bool:
        return ((a, b) if a < b else (b, a)) in self.bonds

    def shares_bond_with(self, other: Ring) -> bool:
        """True if the two rings are fused (have a bond in common)."""
        return not self.bonds.isdisjoint(other.bonds)

    def __contains__(self, atom: int) -> bool:
        return atom in self.path

    def __iter__(self) -> Iterator[int]:
        return iter(self.path[:-1])

    def __len__(self) -> int:
        return self.size


@dataclass(frozen=True, slots=True)
class RingSystem:
    """Atoms and bonds of one ring system.

    A ring system is a biconnected block of ring bonds. A lone ring has as
    many bonds as atoms; every extra bond adds one more ring to the system.

    Attributes:
        atoms: Atom indices in ascending order.
        bonds: Bonds as ``(min, max)`` pairs in ascending order.
    """

    atoms: tuple[int, ...]
    bonds: tuple[tuple[int, int], ...]

    @property
    def num_rings(self) -> int:
        """Cycle rank of the block (number of SSSR rings it contains)."""
        return len(self.bonds) - len(self.atoms) + 1

    @property
    def is_fused(self) -> bool:
        return len(self.bonds) > len(self.atoms)

    def __contains__(self, atom: int) -> bool:
        return atom in self.atoms

    def __len__(self) -> int:
        return len(self.atoms)
