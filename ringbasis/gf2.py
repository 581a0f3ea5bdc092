"""
Linear algebra over GF(2).

Cycles are compared as edge-incidence vectors: one bit per edge of the graph,
set when the cycle uses that edge. Addition in GF(2) is XOR, so the sum of two
cycles is the symmetric difference of their edge sets. A set of cycles is
independent when no non-empty subset XORs to zero.

:class:`BitVector` stores the bits in a Python int, which gives arbitrary
width and fast XOR. :class:`EchelonBasis` keeps the rows in row-echelon form
keyed by their highest set bit (the pivot), so testing a new vector costs at
most one XOR per stored row.

    >>> a = BitVector.from_indices(5, [0, 1, 2])
    >>> b = BitVector.from_indices(5, [1, 2, 3])
    >>> (a ^ b).indices()
    [0, 3]
    >>> basis = EchelonBasis(5)
    >>> basis.add(a), basis.add(b), basis.add(a ^ b)
    (True, True, False)
"""

from __future__ import annotations

from dataclasses import dataclass
from typing import Iterable, Iterator


@dataclass(frozen=True, slots=True)
class BitVector:
    """Fixed-width vector over GF(2).

    Attributes:
        width: Number of coordinates (the size of the edge universe).
        bits: Integer whose bit ``i`` is coordinate ``i``.
    """

    width: int
    bits: int = 0

    def __post_init__(self) -> None:
        if self.width < 0:
            raise ValueError(f"width must be non-negative, got {self.width}")
        if self.bits < 0 or self.bits >> self.width:
            raise ValueError(f"bits {self.bits:#x} do not fit in width {self.width}")

    @classmethod
    def from_indices(cls, width: int, indices: Iterable[int]) -> BitVector:
        """Vector with the given coordinates set.

        Raises:
            ValueError: If an index is outside ``0..width-1``.
        """
        bits = 0
        for i in indices:
            if not 0 <= i < width:
                raise ValueError(f"index {i} outside vector of width {width}")
            bits |= 1 << i
        return cls(width, bits)

    @classmethod
    def zero(cls, width: int) -> BitVector:
        return cls(width, 0)

    def __xor__(self, other: BitVector) -> BitVector:
        if not isinstance(other, BitVector):
            return NotImplemented
        if other.width != self.width:
            raise ValueError(f"width mismatch: {self.width} != {other.width}")
        return BitVector(self.width, self.bits ^ other.bits)

    __add__ = __xor__

    def __bool__(self) -> bool:
        return self.bits != 0

    def __contains__(self, i: int) -> bool:
        return 0 <= i < self.width and bool(self.bits >> i & 1)

    def __iter__(self) -> Iterator[int]:
        return iter(self.indices())

    def __len__(self) -> int:
        return self.width

    @property
    def pivot(self) -> int:
        """Index of the highest set bit, or -1 for the zero vector."""
        return self.bits.bit_length() - 1

    def count(self) -> int:
        """Number of set coordinates (the Hamming weight)."""
        return bin(self.bits).count("1")

    def indices(self) -> list[int]:
        """Set coordinates in ascending order."""
        out: list[int] = []
        bits = self.bits
        while bits:
            low = bits & -bits
            out.append(low.bit_length() - 1)
            bits ^= low
        return out

    def __repr__(self) -> str:
        return f"BitVector(width={self.width}, indices={self.indices()})"


class EchelonBasis:
    """Row-echelon basis of a subspace of GF(2)^width.

    Every stored row has a distinct pivot, and rows are reduced against all
    rows with higher pivots when inserted. A vector is dependent on the basis
    exactly when reducing it leaves zero.

    Args:
        width: Dimension of the ambient space.
    """

    __slots__ = ("_width", "_rows")

    def __init__(self, width: int) -> None:
        if width < 0:
            raise ValueError(f"width must be non-negative, got {width}")
        self._width = width
        self._rows: dict[int, int] = {}

    @property
    def width(self) -> int:
        return self._width

    @property
    def rank(self) -> int:
        """Number of independent rows stored."""
        return len(self._rows)

    def __len__(self) -> int:
        return len(self._rows)

    def _check(self, vec: BitVector) -> None:
        if vec.width != self._width:
            raise ValueError(f"width mismatch: basis {self._width}, vector {vec.width}")

    def _reduce_bits(self, bits: int) -> int:
        rows = self._rows
        while bits:
            row = rows.get(bits.bit_length() - 1)
            if row is None:
                break
            bits ^= row
        return bits

    def reduce(self, vec: BitVector) -> BitVector:
        """Residue of ``vec`` after eliminating against the basis.

        The residue is zero iff ``vec`` lies in the span of the basis.
        """
        self._check(vec)
        return BitVector(self._width, self._reduce_bits(vec.bits))

    def is_independent(self, vec: BitVector) -> bool:
        self._check(vec)
        return self._reduce_bits(vec.bits) != 0

    def add(self, vec: BitVector) -> bool:
        """Insert ``vec`` if it is independent of the current rows.

        Returns:
            True if the vector was independent and has been added, False if
            it is a combination of existing rows (the basis is unchanged).
        """
        self._check(vec)
        residue = self._reduce_bits(vec.bits)
        if not residue:
            return False
        self._rows[residue.bit_length() - 1] = residue
        return True

    def rows(self) -> list[BitVector]:
        """Stored rows ordered by descending pivot."""
        return [BitVector(self._width, self._rows[p]) for p in sorted(self._rows, reverse=True)]

    def __repr__(self) -> str:
        return f"EchelonBasis(width={self._width}, rank={self.rank})"
