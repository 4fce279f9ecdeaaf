"""Per-vertex shortest path distances backed by a fixed algorithm."""

import abc
from typing import Optional

import torch
from torch import Tensor

from torchcentrality.graph._dijkstra import _adjacency_lists, _single_source
from torchcentrality.graph._floyd_warshall import floyd_warshall
from torchcentrality.graph._shortest_path_algorithm import (
    ShortestPathAlgorithm,
    select_shortest_path_algorithm,
)


class DistanceSource(abc.ABC):
    """Shortest path distances from any vertex of one graph.

    Every call to :meth:`distances_from` returns a new tensor, so results
    for different sources are independent and may be requested in any
    order.
    """

    algorithm: ShortestPathAlgorithm

    def __init__(self, adjacency: Tensor):
        self.adjacency = adjacency

    @property
    def num_vertices(self) -> int:
        return self.adjacency.size(-1)

    @abc.abstractmethod
    def distances_from(self, source: int) -> Tensor:
        """Distances ``(N,)`` from ``source``; ``inf`` where unreachable."""


class SingleSourceDistances(DistanceSource):
    """Runs Dijkstra once per queried source.

    Raises :class:`ValueError` from the constructor if any weight is
    negative, self-loops included.
    """

    algorithm = ShortestPathAlgorithm.DIJKSTRA

    def __init__(self, adjacency: Tensor):
        with torch.no_grad():
            has_negative_weight = bool((adjacency < 0).any())
        if has_negative_weight:
            raise ValueError(
                "SingleSourceDistances: graph contains negative edge "
                "weights. Use AllPairsDistances for graphs with negative "
                "weights."
            )

        super().__init__(adjacency)
        self._neighbors = _adjacency_lists(adjacency)

    def distances_from(self, source: int) -> Tensor:
        distances, _ = _single_source(self.adjacency, source, self._neighbors)
        return distances


class AllPairsDistances(DistanceSource):
    """Serves rows of a Floyd-Warshall table computed at construction.

    Raises :class:`NegativeCycleError` from the constructor if the graph
    has a negative cycle. The table is never written after that.
    """

    algorithm = ShortestPathAlgorithm.FLOYD_WARSHALL

    def __init__(self, adjacency: Tensor):
        super().__init__(adjacency)
        self._distances, _ = floyd_warshall(adjacency)

    def distances_from(self, source: int) -> Tensor:
        return self._distances[source].clone()


def distance_source(
    adjacency: Tensor,
    *,
    incoming: bool = False,
    directed: bool = True,
    algorithm: Optional[ShortestPathAlgorithm] = None,
) -> DistanceSource:
    r"""
    Bind a distance source to a graph.

    Parameters
    ----------
    adjacency : Tensor
        Dense adjacency matrix of shape ``(N, N)``, ``inf`` for missing
        edges.
    incoming : bool, default=False
        If True and the graph is directed, distances are measured along
        incoming paths: ``distances_from(v)[u]`` is the distance from
        ``u`` to ``v``. Has no effect on undirected graphs.
    directed : bool, default=True
        If False, symmetrize the adjacency matrix by taking the element-wise
        minimum of ``A`` and ``A.T``.
    algorithm : ShortestPathAlgorithm, optional
        Algorithm to use. If None, it is chosen with
        :func:`select_shortest_path_algorithm`.

    Returns
    -------
    DistanceSource
        :class:`SingleSourceDistances` or :class:`AllPairsDistances`.

    Raises
    ------
    NegativeCycleError
        If Floyd-Warshall is selected and the graph has a negative cycle.
    ValueError
        If Dijkstra is requested for a graph with negative weights.
    """
    if algorithm is None:
        algorithm = select_shortest_path_algorithm(adjacency)

    if not directed:
        adjacency = torch.minimum(adjacency, adjacency.T)
    elif incoming:
        adjacency = adjacency.T

    if algorithm is ShortestPathAlgorithm.DIJKSTRA:
        return SingleSourceDistances(adjacency)

    return AllPairsDistances(adjacency)
