"""Benchmark dense Dijkstra and transitive closure."""

import time
from typing import Dict

import numpy as np

from densegraph import DiGraph


def build_random_digraph(n_nodes: int, density: float, seed: int = 0) -> DiGraph:
    """Random directed graph with weights in [1, 10)."""
    rng = np.random.default_rng(seed)
    g = DiGraph()
    g.add_nodes_from(range(n_nodes))
    mask = rng.random((n_nodes, n_nodes)) < density
    np.fill_diagonal(mask, False)
    weights = rng.uniform(1.0, 10.0, size=(n_nodes, n_nodes))
    for i, j in zip(*np.nonzero(mask)):
        g.add_edge(int(i), int(j), float(weights[i, j]))
    return g


def benchmark_dijkstra(n_nodes: int, density: float = 0.1, repeats: int = 10) -> Dict[str, float]:
    """Time single_source_dijkstra from node 0.

    Args:
        n_nodes: Number of nodes.
        density: Probability of each directed edge.
        repeats: Number of timed runs.

    Returns:
        Dictionary with timing results.
    """
    g = build_random_digraph(n_nodes, density)

    # Warmup
    g.single_source_dijkstra(0)

    start = time.perf_counter()
    for _ in range(repeats):
        g.single_source_dijkstra(0)
    end = time.perf_counter()

    total_time = end - start
    return {
        "n_nodes": n_nodes,
        "density": density,
        "total_time_sec": total_time,
        "time_per_run_sec": total_time / repeats,
    }


def benchmark_transitive_closure(n_nodes: int, density: float = 0.05) -> Dict[str, float]:
    """Time one transitive_closure call."""
    g = build_random_digraph(n_nodes, density)

    start = time.perf_counter()
    closure = g.transitive_closure()
    end = time.perf_counter()

    return {
        "n_nodes": n_nodes,
        "density": density,
        "closure_edges": closure.number_of_edges(),
        "time_sec": end - start,
    }


if __name__ == "__main__":
    print("Benchmarking single_source_dijkstra...")
    for n in [50, 100, 200, 400]:
        result = benchmark_dijkstra(n)
        print(f"  {n:4d} nodes: {result['time_per_run_sec'] * 1000:.2f} ms/run")

    print("\nBenchmarking transitive_closure...")
    for n in [50, 100, 200]:
        result = benchmark_transitive_closure(n)
        print(
            f"  {n:4d} nodes: {result['time_sec'] * 1000:.2f} ms "
            f"({result['closure_edges']} closure edges)"
        )
