"""Benchmarks for shortest path centralities.

This module benchmarks torchcentrality harmonic and closeness centrality
and compares against networkx baselines where applicable.
"""

from __future__ import annotations

import time
from typing import Any, Callable

import numpy as np
import torch

# networkx imports - handle optional dependency
try:
    import networkx

    NETWORKX_AVAILABLE = True
except ImportError:
    NETWORKX_AVAILABLE = False

from torchcentrality.graph import (
    HarmonicCentrality,
    closeness_centrality,
    harmonic_centrality,
)


def benchmark(
    func: Callable,
    *args: Any,
    warmup: int = 3,
    iterations: int = 10,
    **kwargs: Any,
) -> dict[str, float]:
    """Run a simple benchmark on a function.

    Parameters
    ----------
    func : callable
        Function to benchmark.
    *args : Any
        Positional arguments to pass to func.
    warmup : int, optional
        Number of warmup iterations. Default is 3.
    iterations : int, optional
        Number of timed iterations. Default is 10.
    **kwargs : Any
        Keyword arguments to pass to func.

    Returns
    -------
    dict
        Mean, standard deviation, minimum and maximum time in seconds.
    """
    for _ in range(warmup):
        func(*args, **kwargs)

    times = []
    for _ in range(iterations):
        start = time.perf_counter()
        func(*args, **kwargs)
        times.append(time.perf_counter() - start)

    return {
        "mean": np.mean(times),
        "std": np.std(times),
        "min": np.min(times),
        "max": np.max(times),
    }


def format_time(seconds: float) -> str:
    """Format time in appropriate units."""
    if seconds < 1e-3:
        return f"{seconds * 1e6:.3f}us"
    elif seconds < 1:
        return f"{seconds * 1e3:.3f}ms"
    else:
        return f"{seconds:.3f}s"


def print_comparison(
    name: str,
    ours: dict[str, float],
    baseline: dict[str, float] | None = None,
    baseline_name: str = "networkx",
) -> None:
    """Print benchmark comparison results."""
    print(f"\n{name}")
    print("-" * len(name))
    print(
        f"  torchcentrality: {format_time(ours['mean'])} "
        f"+/- {format_time(ours['std'])}"
    )
    if baseline is not None:
        print(
            f"  {baseline_name}:        {format_time(baseline['mean'])} "
            f"+/- {format_time(baseline['std'])}"
        )
        speedup = baseline["mean"] / ours["mean"]
        if speedup >= 1:
            print(f"  Speedup:         {speedup:.2f}x faster")
        else:
            print(f"  Speedup:         {1 / speedup:.2f}x slower")


def random_graph(
    n: int,
    p: float,
    *,
    negative: bool = False,
    seed: int = 0,
) -> torch.Tensor:
    """Random directed graph with weights in ``[0.5, 3)``.

    With ``negative=True``, edges ``i -> i + 1`` get weight ``-0.1``. Every
    cycle of the graph still has positive length.
    """
    generator = torch.Generator().manual_seed(seed)
    weights = 0.5 + 2.5 * torch.rand(
        n, n, generator=generator, dtype=torch.float64
    )
    present = torch.rand(n, n, generator=generator) < p
    adj = torch.where(present, weights, torch.full_like(weights, np.inf))
    adj.fill_diagonal_(0.0)

    if negative:
        # Every cycle has a backward edge, scaled to outweigh the chain
        idx = torch.arange(n - 1)
        adj[idx, idx + 1] = -0.1
        backward = torch.ones(n, n, dtype=torch.bool).tril(-1)
        adj = torch.where(backward, adj * n, adj)

    return adj


def to_networkx(adj: torch.Tensor):
    graph = networkx.DiGraph()
    graph.add_nodes_from(range(adj.size(0)))
    rows, cols = torch.isfinite(adj).nonzero(as_tuple=True)
    for u, v in zip(rows.tolist(), cols.tolist()):
        if u != v:
            graph.add_edge(u, v, weight=adj[u, v].item())
    return graph


class BenchShortestPathCentrality:
    """Benchmarks for harmonic and closeness centrality."""

    def __init__(self, warmup: int = 3, iterations: int = 10):
        """Initialize benchmark runner.

        Parameters
        ----------
        warmup : int, optional
            Number of warmup iterations. Default is 3.
        iterations : int, optional
            Number of timed iterations. Default is 10.
        """
        self.warmup = warmup
        self.iterations = iterations

    def _bench(
        self, func: Callable, *args: Any, **kwargs: Any
    ) -> dict[str, float]:
        return benchmark(
            func,
            *args,
            warmup=self.warmup,
            iterations=self.iterations,
            **kwargs,
        )

    def bench_harmonic_dijkstra(self, n: int = 100, p: float = 0.1) -> None:
        """Benchmark harmonic_centrality on non-negative weights.

        Parameters
        ----------
        n : int, optional
            Number of vertices. Default is 100.
        p : float, optional
            Edge probability. Default is 0.1.
        """
        adj = random_graph(n, p)

        ours = self._bench(
            harmonic_centrality, adj, incoming=True, normalized=False
        )

        baseline = None
        if NETWORKX_AVAILABLE:
            graph = to_networkx(adj)
            baseline = self._bench(
                networkx.harmonic_centrality, graph, distance="weight"
            )

        print_comparison(
            f"harmonic_centrality (Dijkstra, n={n}, p={p})", ours, baseline
        )

    def bench_harmonic_floyd_warshall(
        self, n: int = 100, p: float = 0.1
    ) -> None:
        """Benchmark harmonic_centrality with negative weights."""
        adj = random_graph(n, p, negative=True)

        ours = self._bench(harmonic_centrality, adj)

        print_comparison(
            f"harmonic_centrality (Floyd-Warshall, n={n}, p={p})", ours
        )

    def bench_harmonic_object(self, n: int = 100, p: float = 0.1) -> None:
        """Benchmark HarmonicCentrality, construction and first query."""
        adj = random_graph(n, p)

        ours = self._bench(lambda: HarmonicCentrality(adj).scores())

        print_comparison(f"HarmonicCentrality (n={n}, p={p})", ours)

    def bench_harmonic_batched(self, batch: int = 8, n: int = 50) -> None:
        """Benchmark batched harmonic_centrality."""
        adj = torch.stack(
            [random_graph(n, 0.1, seed=seed) for seed in range(batch)]
        )

        ours = self._bench(harmonic_centrality, adj)

        print_comparison(
            f"harmonic_centrality (batch={batch}, n={n})", ours
        )

    def bench_closeness(self, n: int = 100, p: float = 0.3) -> None:
        """Benchmark closeness_centrality vs networkx."""
        adj = random_graph(n, p)

        ours = self._bench(closeness_centrality, adj, incoming=True)

        baseline = None
        if NETWORKX_AVAILABLE:
            graph = to_networkx(adj)
            baseline = self._bench(
                networkx.closeness_centrality,
                graph,
                distance="weight",
                wf_improved=False,
            )

        print_comparison(
            f"closeness_centrality (n={n}, p={p})", ours, baseline
        )

    def run_all(self) -> None:
        """Run all centrality benchmarks."""
        print("=" * 60)
        print("SHORTEST PATH CENTRALITY BENCHMARKS")
        print("=" * 60)

        print("\n--- Harmonic Centrality ---")
        self.bench_harmonic_dijkstra()
        self.bench_harmonic_floyd_warshall()
        self.bench_harmonic_object()
        self.bench_harmonic_batched()

        print("\n--- Closeness Centrality ---")
        self.bench_closeness()

    def run_scaling(self) -> None:
        """Run scaling benchmarks with varying graph sizes."""
        print("=" * 60)
        print("SCALING BENCHMARKS")
        print("=" * 60)

        print("\n--- Dijkstra Vertex Count Scaling ---")
        for n in [50, 100, 200, 400]:
            self.bench_harmonic_dijkstra(n=n, p=10 / n)

        print("\n--- Floyd-Warshall Vertex Count Scaling ---")
        for n in [50, 100, 200]:
            self.bench_harmonic_floyd_warshall(n=n, p=10 / n)


if __name__ == "__main__":
    bench = BenchShortestPathCentrality(warmup=2, iterations=5)
    bench.run_all()
    print("\n")
    bench.run_scaling()
