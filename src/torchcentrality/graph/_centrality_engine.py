"""Shortest path centrality sweep shared by harmonic and closeness."""

import warnings
from typing import Literal, Tuple

import torch
from torch import Tensor

from torchcentrality.graph._adjacency import _validate_adjacency
from torchcentrality.graph._aggregation import (
    Aggregation,
    ZeroDistanceError,
    ZeroDistanceWarning,
)
from torchcentrality.graph._distance_source import (
    DistanceSource,
    distance_source,
)

ZeroDistancePolicy = Literal["infinite", "raise"]

_ZERO_DISTANCE_POLICIES = ("infinite", "raise")


def _check_zero_distance(zero_distance: str, name: str) -> None:
    if zero_distance not in _ZERO_DISTANCE_POLICIES:
        raise ValueError(
            f"{name}: zero_distance must be one of "
            f"{_ZERO_DISTANCE_POLICIES}, got {zero_distance!r}"
        )


def _warn_zero_distance(name: str, count: int, stacklevel: int) -> None:
    warnings.warn(
        f"{name}: {count} pair(s) of distinct vertices are at distance 0 "
        f"and contribute inf to the score",
        ZeroDistanceWarning,
        stacklevel=stacklevel + 1,
    )


def _sweep(
    source: DistanceSource,
    aggregation: Aggregation,
    *,
    normalized: bool,
    zero_distance: ZeroDistancePolicy,
    name: str,
) -> Tuple[Tensor, int]:
    """Score every vertex of the graph bound to ``source``.

    Returns the scores of shape ``(N,)`` and the number of zero-distance
    pairs seen by a reciprocal aggregation.
    """
    n = source.num_vertices
    adjacency = source.adjacency

    # No other vertex to aggregate over
    if n <= 1:
        return adjacency.new_zeros(n), 0

    vertices = torch.arange(n, device=adjacency.device)
    scores = []
    zero_pairs = 0

    for v in range(n):
        distances = source.distances_from(v)
        others = vertices != v
        d = distances[others]

        if aggregation.reciprocal:
            at_zero = d == 0
            if at_zero.any():
                if zero_distance == "raise":
                    u = vertices[others][at_zero][0].item()
                    raise ZeroDistanceError(
                        f"{name}: vertices {v} and {u} are at distance 0"
                    )
                zero_pairs += int(at_zero.sum())

        total = aggregation.term(d).sum()

        if normalized:
            total = total / (n - 1)

        scores.append(aggregation.finalize(total))

    return torch.stack(scores), zero_pairs


def compute_centrality(
    adjacency: Tensor,
    aggregation: Aggregation,
    *,
    incoming: bool = False,
    normalized: bool = True,
    directed: bool = True,
    zero_distance: ZeroDistancePolicy = "infinite",
) -> Tensor:
    r"""
    Compute a shortest path centrality for every vertex.

    For each graph the shortest path algorithm is selected once, from the
    signs of the edge weights, and used for every vertex. Each vertex
    ``v`` then gets

    .. math::
        C(v) = f\left(\frac{1}{s} \sum_{u \neq v} g(d(v, u))\right)

    where :math:`g` is ``aggregation.term``, :math:`f` is
    ``aggregation.finalize`` and :math:`s = n - 1` if ``normalized`` else 1.

    Parameters
    ----------
    adjacency : Tensor
        Adjacency matrix of shape ``(*, N, N)``, ``inf`` for missing edges.
        Dense or sparse COO.
    aggregation : Aggregation
        Aggregation rule, e.g. :data:`HARMONIC` or :data:`CLOSENESS`.
    incoming : bool, default=False
        Use distances along incoming paths (to ``v``) instead of outgoing
        paths (from ``v``). Ignored when ``directed=False``.
    normalized : bool, default=True
        Divide the sum by ``n - 1``. No-op for graphs with one vertex.
    directed : bool, default=True
        If False, symmetrize the adjacency matrix by taking the element-wise
        minimum of ``A`` and ``A.T``.
    zero_distance : {"infinite", "raise"}, default="infinite"
        What a reciprocal aggregation does with two distinct vertices at
        distance 0: contribute ``inf`` (with one :class:`ZeroDistanceWarning`
        per call) or raise :class:`ZeroDistanceError`.

    Returns
    -------
    Tensor
        Scores of shape ``(*, N)``.

    Raises
    ------
    NegativeCycleError
        If a graph has negative weights and a negative cycle.
    ZeroDistanceError
        If ``zero_distance="raise"`` and a zero distance is found.
    ValueError
        If the adjacency is malformed.
    """
    name = f"{aggregation.name}_centrality"

    _check_zero_distance(zero_distance, name)
    adjacency = _validate_adjacency(adjacency, name)

    if adjacency.device.type == "meta":
        return torch.empty(
            adjacency.shape[:-1], dtype=adjacency.dtype, device="meta"
        )

    if adjacency.numel() == 0:
        return adjacency.new_zeros(adjacency.shape[:-1])

    N = adjacency.size(-1)
    batch_shape = adjacency.shape[:-2]

    results = []
    zero_pairs = 0

    for graph in adjacency.reshape(-1, N, N):
        source = distance_source(graph, incoming=incoming, directed=directed)
        scores, count = _sweep(
            source,
            aggregation,
            normalized=normalized,
            zero_distance=zero_distance,
            name=name,
        )
        results.append(scores)
        zero_pairs += count

    if zero_pairs:
        _warn_zero_distance(name, zero_pairs, stacklevel=3)

    return torch.stack(results).reshape(*batch_shape, N)
