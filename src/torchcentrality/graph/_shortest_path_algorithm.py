"""Choice of shortest path algorithm from a graph's edge weights."""

import enum

import torch
from torch import Tensor


class ShortestPathAlgorithm(enum.Enum):
    """Shortest path algorithm backing a distance source.

    Attributes
    ----------
    DIJKSTRA
        Single-source Dijkstra, run once per queried vertex. Requires
        non-negative weights. O(n (m + n log n)) for a full sweep.
    FLOYD_WARSHALL
        All-pairs Floyd-Warshall, run once up front and served per vertex.
        Supports negative weights. O(n^3).
    """

    DIJKSTRA = "dijkstra"
    FLOYD_WARSHALL = "floyd_warshall"


def select_shortest_path_algorithm(adjacency: Tensor) -> ShortestPathAlgorithm:
    """Pick the shortest path algorithm for ``adjacency``.

    Any weight strictly below zero, self-loops included, selects
    :attr:`ShortestPathAlgorithm.FLOYD_WARSHALL`; Dijkstra would return
    wrong distances on such a graph. Otherwise
    :attr:`ShortestPathAlgorithm.DIJKSTRA` is selected.

    The check is invariant under transposition and symmetrization, so the
    choice made for a graph also holds for its reversed or undirected view.

    Parameters
    ----------
    adjacency : Tensor
        Adjacency matrix of shape ``(N, N)``, ``inf`` for missing edges.

    Returns
    -------
    ShortestPathAlgorithm

    Examples
    --------
    >>> import torch
    >>> inf = float("inf")
    >>> select_shortest_path_algorithm(torch.tensor([[0.0, 1.0], [inf, 0.0]]))
    <ShortestPathAlgorithm.DIJKSTRA: 'dijkstra'>
    >>> select_shortest_path_algorithm(torch.tensor([[0.0, -1.0], [inf, 0.0]]))
    <ShortestPathAlgorithm.FLOYD_WARSHALL: 'floyd_warshall'>
    """
    with torch.no_grad():
        has_negative_weight = bool((adjacency < 0).any())

    if has_negative_weight:
        return ShortestPathAlgorithm.FLOYD_WARSHALL

    return ShortestPathAlgorithm.DIJKSTRA
