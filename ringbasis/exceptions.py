"""Custom exceptions for ringbasis."""

from __future__ import annotations


class ChemError(Exception):
    """Base exception for chemistry-related errors."""
    pass


class GraphError(ChemError, ValueError):
    """Invalid graph input (missing graph, malformed or duplicate edges)."""

    def __init__(self, message: str, edge: tuple[int, ...] | None = None):
        self.message = message
        self.edge = edge

        if edge is not None:
            super().__init__(f"{message}: {edge}")
        else:
            super().__init__(message)


class CycleBasisError(ChemError, RuntimeError):
    """Internal invariant violated while computing a cycle basis.

    Raised when the candidate cycles cannot span the cycle space or when an
    edge set handed to the path reconstructor is not a single simple cycle.
    This signals a programming error, not a recoverable condition.
    """

    def __init__(self, message: str, expected: int | None = None, found: int | None = None):
        self.expected = expected
        self.found = found

        if expected is not None and found is not None:
            super().__init__(f"{message} (expected {expected}, found {found})")
        else:
            super().__init__(message)
