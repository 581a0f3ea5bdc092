#!/usr/bin/env python3
"""
Benchmark script comparing minimum cycle basis speed between networkx and ringbasis.

Molecules are read with RDKit and handed to both libraries as bond lists.

Usage:
    python benchmarks/bench_cycle_basis.py [--extended]

Options:
    --extended    Run extended benchmark with multiple molecules and detailed metrics
"""

import sys
import os
import time
from dataclasses import dataclass
from typing import Optional

# Ensure local ringbasis is used (not installed version)
sys.path.insert(0, os.path.dirname(os.path.dirname(os.path.abspath(__file__))))

# Test molecules with varying ring complexity
TEST_MOLECULES = {
    "naphthalene": "c1ccc2ccccc2c1",
    "cholesterol": "CC(C)CCCC(C)C1CCC2C1(CCC3C2CC=C4C3(CCC(C4)O)C)C",
    "coronene": "c1cc2ccc3ccc4ccc5ccc6ccc1c7c2c3c4c5c67",
    "large_complex": "CCn1c2ccc3cc2c2cc(ccc21)C(=O)c1ccc(cc1)Cn1c[n+](c2ccccc21)Cc1ccc(cc1)C(=O)c1ccc2c(c1)c1cc(ccc1n2CC)C(=O)c1ccc(cc1)C[n+]1cn(c2ccccc21)Cc1ccc(cc1)C3=O",
}

# Default molecule for quick benchmark
LARGE_MOLECULE = TEST_MOLECULES["large_complex"]

ITERATIONS = 200
EXTENDED_ITERATIONS = 100


@dataclass
class BenchmarkResult:
    """Results from a single benchmark run."""
    smiles: str
    time_seconds: float
    iterations: int
    num_rings: int
    total_weight: int
    num_atoms: int
    num_bonds: int

    @property
    def time_per_call_ms(self) -> float:
        return (self.time_seconds / self.iterations) * 1000

    @property
    def time_per_bond_us(self) -> float:
        """Microseconds per bond per call."""
        return (self.time_seconds / self.iterations / self.num_bonds) * 1_000_000


def bonds_from_smiles(smiles: str) -> tuple[list[tuple[int, int]], int]:
    """Bond list and atom count of a molecule, read with RDKit."""
    from rdkit import Chem
    mol = Chem.MolFromSmiles(smiles)
    if mol is None:
        raise ValueError(f"RDKit failed to parse SMILES: {smiles}")
    bonds = [(b.GetBeginAtomIdx(), b.GetEndAtomIdx()) for b in mol.GetBonds()]
    return bonds, mol.GetNumAtoms()


def benchmark_networkx(smiles: str, iterations: int) -> BenchmarkResult:
    """Benchmark networkx minimum_cycle_basis."""
    import networkx as nx

    bonds, num_atoms = bonds_from_smiles(smiles)
    graph = nx.Graph()
    graph.add_nodes_from(range(num_atoms))
    graph.add_edges_from(bonds)

    # Warmup
    cycles = nx.minimum_cycle_basis(graph)

    start = time.perf_counter()
    for _ in range(iterations):
        cycles = nx.minimum_cycle_basis(graph)
    end = time.perf_counter()

    return BenchmarkResult(
        smiles=smiles,
        time_seconds=end - start,
        iterations=iterations,
        num_rings=len(cycles),
        total_weight=sum(len(c) for c in cycles),
        num_atoms=num_atoms,
        num_bonds=len(bonds),
    )


def benchmark_ringbasis(smiles: str, iterations: int) -> BenchmarkResult:
    """Benchmark ringbasis MinimumCycleBasis (graph construction included)."""
    from ringbasis import Graph, MinimumCycleBasis

    bonds, num_atoms = bonds_from_smiles(smiles)

    # Warmup
    mcb = MinimumCycleBasis(Graph(bonds, num_atoms))

    start = time.perf_counter()
    for _ in range(iterations):
        mcb = MinimumCycleBasis(Graph(bonds, num_atoms))
    end = time.perf_counter()

    return BenchmarkResult(
        smiles=smiles,
        time_seconds=end - start,
        iterations=iterations,
        num_rings=mcb.size(),
        total_weight=mcb.total_weight,
        num_atoms=num_atoms,
        num_bonds=len(bonds),
    )


def _run(label: str, func, smiles: str, iterations: int) -> Optional[BenchmarkResult]:
    try:
        return func(smiles, iterations)
    except ImportError as e:
        print(f"  {label}: SKIPPED ({e.name} not installed)")
    except Exception as e:
        print(f"  {label}: ERROR ({e})")
    return None


def run_single_benchmark():
    """Run basic single-molecule benchmark."""
    print("=" * 70)
    print("Minimum Cycle Basis Benchmark: networkx vs ringbasis")
    print("=" * 70)
    print(f"\nTest molecule ({len(LARGE_MOLECULE)} chars):")
    print(f"  {LARGE_MOLECULE[:60]}...")
    print(f"\nIterations: {ITERATIONS}")
    print("-" * 70)

    nx_result = _run("networkx", benchmark_networkx, LARGE_MOLECULE, ITERATIONS)
    rb_result = _run("ringbasis", benchmark_ringbasis, LARGE_MOLECULE, ITERATIONS)

    for label, result in (("networkx", nx_result), ("ringbasis", rb_result)):
        if result:
            print(f"\n{label}:")
            print(f"  Time: {result.time_seconds:.3f}s ({result.time_per_call_ms:.3f}ms per call)")
            print(f"  Rings: {result.num_rings} (total weight {result.total_weight})")

    print("\n" + "=" * 70)
    print("Summary")
    print("=" * 70)

    if nx_result and rb_result:
        if nx_result.total_weight != rb_result.total_weight:
            print("WARNING: total basis weights differ")
        ratio = rb_result.time_seconds / nx_result.time_seconds
        if ratio < 1:
            print(f"ringbasis is {1/ratio:.2f}x FASTER than networkx")
        else:
            print(f"ringbasis is {ratio:.2f}x SLOWER than networkx")
    else:
        print("Could not compare (one or both libraries failed)")


def run_extended_benchmark():
    """Run extended benchmark with multiple molecules and detailed metrics."""
    print("=" * 80)
    print("EXTENDED Minimum Cycle Basis Benchmark: networkx vs ringbasis")
    print("=" * 80)
    print(f"\nIterations per molecule: {EXTENDED_ITERATIONS}")

    header = f"{'Molecule':<16} {'Atoms':>6} {'Bonds':>6} {'Rings':>6} {'nx ms':>10} {'rb ms':>10} {'Ratio':>8} {'µs/bond':>10}"
    print(header)
    print("-" * 80)

    for name, smiles in TEST_MOLECULES.items():
        nx_res = _run("networkx", benchmark_networkx, smiles, EXTENDED_ITERATIONS)
        rb_res = _run("ringbasis", benchmark_ringbasis, smiles, EXTENDED_ITERATIONS)
        if not rb_res:
            print(f"{name:<16} {'N/A':>6}")
            continue
        nx_ms = f"{nx_res.time_per_call_ms:>10.4f}" if nx_res else f"{'N/A':>10}"
        ratio = f"{rb_res.time_seconds / nx_res.time_seconds:.2f}x" if nx_res else "N/A"
        print(f"{name:<16} "
              f"{rb_res.num_atoms:>6} "
              f"{rb_res.num_bonds:>6} "
              f"{rb_res.num_rings:>6} "
              f"{nx_ms} "
              f"{rb_res.time_per_call_ms:>10.4f} "
              f"{ratio:>8} "
              f"{rb_res.time_per_bond_us:>10.2f}")


def main():
    if "--extended" in sys.argv or "-e" in sys.argv:
        run_extended_benchmark()
    else:
        run_single_benchmark()
        print("\n" + "-" * 70)
        print("TIP: Run with --extended for detailed multi-molecule analysis")


if __name__ == "__main__":
    main()
