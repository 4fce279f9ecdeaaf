"""Vertex scoring objects with lazily computed, cached scores."""

import numbers
import threading
from types import MappingProxyType
from typing import Hashable, Mapping, Optional, Sequence, Union

import torch
from torch import Tensor

from torchcentrality.graph._adjacency import _validate_adjacency
from torchcentrality.graph._aggregation import (
    CLOSENESS,
    HARMONIC,
    Aggregation,
)
from torchcentrality.graph._centrality_engine import (
    ZeroDistancePolicy,
    _check_zero_distance,
    _sweep,
    _warn_zero_distance,
)
from torchcentrality.graph._distance_source import distance_source
from torchcentrality.graph._shortest_path_algorithm import (
    select_shortest_path_algorithm,
)


class InvalidVertexError(KeyError):
    """Raised when a score is requested for a vertex not in the graph."""

    def __init__(self, vertex: Hashable):
        super().__init__(vertex)
        self.vertex = vertex

    def __str__(self) -> str:
        return f"unknown vertex {self.vertex!r}"


class _NotComputed:
    def __repr__(self) -> str:
        return "<not computed>"


_NOT_COMPUTED = _NotComputed()


class VertexScoring:
    """Shortest path centrality of every vertex of one graph.

    The shortest path algorithm is selected at construction and kept for
    the lifetime of the object. Scores are computed on first access, once,
    and cached on the instance. The adjacency must not be modified while
    the object is in use.

    Parameters
    ----------
    adjacency : Tensor
        Adjacency matrix of shape ``(N, N)``, ``inf`` for missing edges.
    incoming : bool, default=False
        Use incoming instead of outgoing paths.
    normalize : bool, default=True
        Normalize by ``n - 1``.
    vertices : sequence of hashable, optional
        Unique labels for the ``N`` vertices. Defaults to ``0 .. N-1``.
    directed : bool, default=True
        If False, treat the graph as undirected.
    """

    aggregation: Aggregation

    def __init__(
        self,
        adjacency: Tensor,
        incoming: bool = False,
        normalize: bool = True,
        *,
        vertices: Optional[Sequence[Hashable]] = None,
        directed: bool = True,
    ):
        name = type(self).__name__

        if adjacency.dim() != 2:
            raise ValueError(
                f"{name}: adjacency must be 2D, got {adjacency.dim()}D"
            )
        adjacency = _validate_adjacency(adjacency, name)
        if adjacency.device.type == "meta":
            raise ValueError(f"{name}: meta tensors are not supported")

        N = adjacency.size(-1)
        self._integer_vertices = vertices is None
        if vertices is None:
            vertices = range(N)
        vertices = tuple(vertices)
        if len(vertices) != N:
            raise ValueError(
                f"{name}: expected {N} vertex labels, got {len(vertices)}"
            )

        self._index = {vertex: i for i, vertex in enumerate(vertices)}
        if len(self._index) != N:
            raise ValueError(f"{name}: vertex labels must be unique")

        self._adjacency = adjacency.detach()
        self._vertices = vertices
        self.incoming = incoming
        self.normalize = normalize
        self.directed = directed
        self.algorithm = select_shortest_path_algorithm(self._adjacency)

        self._lock = threading.Lock()
        self._scores: Union[_NotComputed, Mapping[Hashable, float]] = (
            _NOT_COMPUTED
        )

    @property
    def vertices(self) -> tuple:
        return self._vertices

    def _zero_distance_policy(self) -> ZeroDistancePolicy:
        return "infinite"

    def _compute(self) -> Mapping[Hashable, float]:
        name = type(self).__name__
        source = distance_source(
            self._adjacency,
            incoming=self.incoming,
            directed=self.directed,
            algorithm=self.algorithm,
        )

        with torch.no_grad():
            values, zero_pairs = _sweep(
                source,
                self.aggregation,
                normalized=self.normalize,
                zero_distance=self._zero_distance_policy(),
                name=name,
            )

        if zero_pairs:
            _warn_zero_distance(name, zero_pairs, stacklevel=3)

        return MappingProxyType(dict(zip(self._vertices, values.tolist())))

    def scores(self) -> Mapping[Hashable, float]:
        """Read-only mapping from every vertex to its score."""
        with self._lock:
            if self._scores is _NOT_COMPUTED:
                self._scores = self._compute()
            return self._scores

    def score(self, vertex: Hashable) -> float:
        """Score of ``vertex``.

        Without labels, vertices are the integers ``0 .. N-1``; ``True``
        and ``1.0`` are not vertices. With labels, lookup follows ``dict``
        key equality.

        Raises
        ------
        InvalidVertexError
            If ``vertex`` is not a vertex of the graph.
        """
        if self._integer_vertices and (
            isinstance(vertex, bool)
            or not isinstance(vertex, numbers.Integral)
        ):
            raise InvalidVertexError(vertex)
        if vertex not in self._index:
            raise InvalidVertexError(vertex)
        return self.scores()[vertex]


class HarmonicCentrality(VertexScoring):
    r"""
    Harmonic centrality, :math:`H(x) = \sum_{y \neq x} 1 / d(x, y)`.

    By default the centrality is computed along outgoing paths and
    normalized by ``n - 1``. See :func:`harmonic_centrality`.

    Parameters
    ----------
    adjacency : Tensor
        Adjacency matrix of shape ``(N, N)``, ``inf`` for missing edges.
    incoming : bool, default=False
        Use incoming instead of outgoing paths.
    normalize : bool, default=True
        Normalize by ``n - 1``.
    vertices : sequence of hashable, optional
        Unique labels for the ``N`` vertices. Defaults to ``0 .. N-1``.
    directed : bool, default=True
        If False, treat the graph as undirected.
    zero_distance : {"infinite", "raise"}, default="infinite"
        Handling of distinct vertices at distance 0.

    Examples
    --------
    >>> import torch
    >>> inf = float("inf")
    >>> adj = torch.tensor([
    ...     [0.0, 1.0, inf],
    ...     [inf, 0.0, 1.0],
    ...     [inf, inf, 0.0],
    ... ])
    >>> hc = HarmonicCentrality(adj, vertices=["a", "b", "c"])
    >>> hc.score("a")
    0.75
    >>> dict(hc.scores())
    {'a': 0.75, 'b': 0.5, 'c': 0.0}
    """

    aggregation = HARMONIC

    def __init__(
        self,
        adjacency: Tensor,
        incoming: bool = False,
        normalize: bool = True,
        *,
        vertices: Optional[Sequence[Hashable]] = None,
        directed: bool = True,
        zero_distance: ZeroDistancePolicy = "infinite",
    ):
        _check_zero_distance(zero_distance, type(self).__name__)
        super().__init__(
            adjacency,
            incoming,
            normalize,
            vertices=vertices,
            directed=directed,
        )
        self.zero_distance = zero_distance

    def _zero_distance_policy(self) -> ZeroDistancePolicy:
        return self.zero_distance


class ClosenessCentrality(VertexScoring):
    r"""
    Closeness centrality, :math:`C(x) = (n - 1) / \sum_{y \neq x} d(x, y)`.

    Without normalization the score is ``1 / sum``. See
    :func:`closeness_centrality`.
    """

    aggregation = CLOSENESS
