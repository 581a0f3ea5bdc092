"""
Ringbasis - Pure Python ring perception for molecular graphs.

A zero-dependency library for computing minimum cycle bases (the SSSR) and
ring membership of molecules given as plain bond lists.

    >>> from ringbasis import MinimumCycleBasis
    >>> mcb = MinimumCycleBasis([(0, 1), (1, 2), (2, 3), (3, 0), (0, 4)])
    >>> mcb.size(), mcb.paths()
    (1, [[0, 1, 2, 3, 0]])

Submodules:
    ringbasis.cycles - Candidate cycles, minimum cycle basis, spanning trees
    ringbasis.rings  - Ring search and SSSR-based ring queries
    ringbasis.gf2    - Bit vectors and echelon bases over GF(2)
"""

__version__ = "0.1.0"

# Core types
from ringbasis.graph import Graph, as_graph
from ringbasis.types import Ring, RingSystem

# Cycle basis
from ringbasis.cycles import Cycle, InitialCycles, MinimumCycleBasis, SpanningTree
from ringbasis.rings import RingSearch, find_sssr

# Exceptions
from ringbasis.exceptions import ChemError, GraphError, CycleBasisError

# Submodules
from ringbasis import cycles, gf2, rings

__all__ = [
    # Types
    "Graph", "as_graph", "Ring", "RingSystem",
    # Cycles
    "Cycle", "InitialCycles", "MinimumCycleBasis", "SpanningTree",
    # Rings
    "RingSearch", "find_sssr",
    # Exceptions
    "ChemError", "GraphError", "CycleBasisError",
    # Submodules
    "cycles", "gf2", "rings",
]
