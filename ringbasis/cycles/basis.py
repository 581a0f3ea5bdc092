"""
Minimum cycle basis.

The cycles of a graph form a vector space over GF(2) of dimension
``|E| - |V| + components``. A minimum cycle basis (MCB) is a basis of that
space whose total weight (summed ring sizes) is as small as possible. Cycle
sets are a matroid, so the greedy algorithm is exact: take the candidates from
:class:`~ringbasis.cycles.initial.InitialCycles` shortest first and keep each
one that is independent of those already kept.

Equal-weight candidates are taken in order of their canonical vertex path, so
repeated runs on the same graph return the same basis, path for path.

    >>> from ringbasis.graph import Graph
    >>> norbornane = Graph([(0, 1), (1, 2), (2, 3), (3, 4), (4, 5), (5, 0),
    ...                     (5, 6), (6, 2)])
    >>> mcb = MinimumCycleBasis(norbornane)
    >>> mcb.size()
    2
    >>> mcb.paths()
    [[0, 1, 2, 6, 5, 0], [2, 3, 4, 5, 6, 2]]
"""

from __future__ import annotations

import logging
from typing import TYPE_CHECKING, Iterator, Sequence

from ringbasis.cycles.initial import Cycle, InitialCycles
from ringbasis.exceptions import CycleBasisError, GraphError
from ringbasis.gf2 import EchelonBasis
from ringbasis.graph import Graph

if TYPE_CHECKING:
    from ringbasis.types import Ring

logger = logging.getLogger(__name__)


class MinimumCycleBasis:
    """Minimum-weight cycle basis of a graph.

    Args:
        source: A :class:`Graph`, an edge list, or pre-computed
            :class:`InitialCycles`.

    Raises:
        GraphError: If ``source`` is None or not a valid graph.
        CycleBasisError: If the candidate cycles do not span the cycle
            space (an internal error; no partial basis is returned).

    Example:
        >>> mcb = MinimumCycleBasis([(0, 1), (1, 2), (2, 0)])
        >>> mcb.paths()
        [[0, 1, 2, 0]]
    """

    __slots__ = ("_graph", "_cycles")

    def __init__(self, source: Graph | InitialCycles | Sequence[Sequence[int]]) -> None:
        if source is None:
            raise GraphError("graph or initial cycles must not be None")
        initial = source if isinstance(source, InitialCycles) else InitialCycles(source)

        self._graph = initial.graph
        self._cycles = _select(initial)

    @property
    def graph(self) -> Graph:
        return self._graph

    @property
    def rank(self) -> int:
        """Dimension of the cycle space, equal to :meth:`size`."""
        return len(self._cycles)

    @property
    def cycles(self) -> tuple[Cycle, ...]:
        """Basis cycles, ascending by weight then canonical path."""
        return self._cycles

    def size(self) -> int:
        """Number of cycles in the basis."""
        return len(self._cycles)

    def paths(self) -> list[list[int]]:
        """Closed vertex walk of every basis cycle.

        Each walk starts and ends at the smallest vertex of its cycle. Walks
        are ordered by ascending weight, equal weights by the walk itself.
        """
        return [list(c.path) for c in self._cycles]

    def weights(self) -> list[int]:
        return [c.weight for c in self._cycles]

    @property
    def total_weight(self) -> int:
        return sum(c.weight for c in self._cycles)

    def rings(self) -> list["Ring"]:
        """Basis cycles as :class:`~ringbasis.types.Ring` objects."""
        from ringbasis.types import Ring
        return [Ring(c.path) for c in self._cycles]

    def __len__(self) -> int:
        return len(self._cycles)

    def __iter__(self) -> Iterator[list[int]]:
        return iter(self.paths())

    def __repr__(self) -> str:
        return f"MinimumCycleBasis(size={self.size()}, weights={self.weights()})"


def _select(initial: InitialCycles) -> tuple[Cycle, ...]:
    """Greedy GF(2)-independent selection from sorted candidates."""
    graph = initial.graph
    target = graph.cycle_rank
    if target == 0:
        return ()

    echelon = EchelonBasis(graph.num_edges)
    selected: list[Cycle] = []
    for cycle in initial:
        if echelon.add(cycle.vector):
            selected.append(cycle)
            if len(selected) == target:
                break

    if len(selected) < target:
        logger.error(
            "candidate cycles span only %d of %d dimensions (%d candidates)",
            len(selected), target, len(initial),
        )
        raise CycleBasisError("candidate cycles do not span the cycle space", target, len(selected))

    logger.debug(
        "minimum cycle basis: %d cycles, total weight %d",
        len(selected), sum(c.weight for c in selected),
    )
    return tuple(selected)
