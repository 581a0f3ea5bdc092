"""Cycle space computations: candidate cycles, minimum cycle basis, spanning trees."""

from ringbasis.cycles.paths import cycle_path, canonical_path, path_edges
from ringbasis.cycles.initial import Cycle, InitialCycles
from ringbasis.cycles.basis import MinimumCycleBasis
from ringbasis.cycles.spanning import SpanningTree

__all__ = [
    "cycle_path",
    "canonical_path",
    "path_edges",
    "Cycle",
    "InitialCycles",
    "MinimumCycleBasis",
    "SpanningTree",
]
