"""Floyd-Warshall all-pairs shortest paths implementation."""

from typing import Tuple

import torch
from torch import Tensor

from torchcentrality.graph._adjacency import _sparse_to_dense


class NegativeCycleError(ValueError):
    """Raised when the graph contains a negative cycle.

    The Floyd-Warshall algorithm cannot compute shortest paths when the
    graph contains a cycle with negative total weight, as paths can be
    made arbitrarily short by traversing the cycle repeatedly.
    """

    pass


def _floyd_warshall_forward(adjacency: Tensor) -> Tuple[Tensor, Tensor]:
    """Min-plus relaxation over every intermediate vertex.

    Written with ``torch.where`` so that gradients flow to the edges of
    the selected shortest paths.
    """
    N = adjacency.size(-1)
    eye = torch.eye(N, dtype=torch.bool, device=adjacency.device)

    # A vertex is at distance 0 from itself unless a negative self-loop
    # makes the diagonal negative, which is reported as a negative cycle.
    distances = torch.where(
        eye, torch.clamp(adjacency, max=0.0), adjacency
    )

    sources = torch.arange(N, device=adjacency.device).view(N, 1)
    predecessors = torch.where(
        torch.isfinite(adjacency) & ~eye,
        sources.expand(adjacency.shape),
        torch.full_like(adjacency, -1, dtype=torch.int64),
    )

    for k in range(N):
        via_k = distances[..., :, k : k + 1] + distances[..., k : k + 1, :]
        improved = via_k < distances
        distances = torch.where(improved, via_k, distances)
        predecessors = torch.where(
            improved,
            predecessors[..., k : k + 1, :].expand_as(predecessors),
            predecessors,
        )

    return distances, predecessors


def floyd_warshall(
    input: Tensor,
    *,
    directed: bool = True,
) -> Tuple[Tensor, Tensor]:
    r"""
    Compute all-pairs shortest paths using the Floyd-Warshall algorithm.

    The Floyd-Warshall algorithm computes the shortest path between every
    pair of vertices in a weighted graph. It works with both positive and
    negative edge weights, but the graph must not contain negative cycles.

    .. math::
        d_{ij}^{(k)} = \min(d_{ij}^{(k-1)}, d_{ik}^{(k-1)} + d_{kj}^{(k-1)})

    Parameters
    ----------
    input : Tensor
        Adjacency matrix of shape ``(*, N, N)`` where ``input[..., i, j]``
        is the edge weight from node ``i`` to node ``j``. Use ``float('inf')``
        for missing edges. Can be dense or sparse COO tensor; entries not
        stored in a sparse tensor are missing edges.
    directed : bool, default=True
        If True, treat graph as directed. If False, symmetrize the adjacency
        matrix by taking the element-wise minimum of ``A`` and ``A.T``.

    Returns
    -------
    distances : Tensor
        Tensor of shape ``(*, N, N)`` with shortest path distances.
        ``distances[..., i, j]`` is the length of the shortest path from
        node ``i`` to node ``j``, or ``inf`` if no path exists.
    predecessors : Tensor
        Tensor of shape ``(*, N, N)`` with dtype ``int64``.
        ``predecessors[..., i, j]`` is the node immediately before ``j``
        on the shortest path from ``i`` to ``j``, or ``-1`` if no path exists.

    Raises
    ------
    NegativeCycleError
        If the graph contains a negative cycle.
    ValueError
        If input is not at least 2D, last two dimensions are not equal,
        input is not floating-point, or contains NaN or ``-inf`` weights.

    Examples
    --------
    >>> import torch
    >>> from torchcentrality.graph import floyd_warshall
    >>> inf = float("inf")
    >>> adj = torch.tensor([
    ...     [0.0, 1.0, 4.0],
    ...     [inf, 0.0, 2.0],
    ...     [inf, inf, 0.0],
    ... ])
    >>> dist, pred = floyd_warshall(adj)
    >>> dist
    tensor([[0., 1., 3.],
            [inf, 0., 2.],
            [inf, inf, 0.]])

    Negative weights are supported:

    >>> adj = torch.tensor([
    ...     [0.0, 5.0, inf],
    ...     [inf, 0.0, -2.0],
    ...     [inf, inf, 0.0],
    ... ])
    >>> dist, _ = floyd_warshall(adj)
    >>> dist[0, 2]
    tensor(3.)

    Notes
    -----
    - **Complexity**: O(N^3) time, O(N^2) space per graph.
    - **Negative weights**: Supported, but negative cycles cause an error.
      A negative self-loop is a negative cycle.
    - **Path reconstruction**: ``pred[i, j]`` gives the node before ``j``
      on the shortest path from ``i`` to ``j``.

    References
    ----------
    .. [1] Floyd, R. W. (1962). "Algorithm 97: Shortest Path".
           Communications of the ACM. 5 (6): 345.
    .. [2] Warshall, S. (1962). "A theorem on Boolean matrices".
           Journal of the ACM. 9 (1): 11-12.

    See Also
    --------
    dijkstra : Single-source shortest paths for non-negative weights
    scipy.sparse.csgraph.floyd_warshall : SciPy implementation
    """
    if input.dim() < 2:
        raise ValueError(
            f"floyd_warshall: input must be at least 2D, got {input.dim()}D"
        )
    if input.size(-1) != input.size(-2):
        raise ValueError(
            f"floyd_warshall: last two dimensions must be equal, "
            f"got {input.size(-2)} x {input.size(-1)}"
        )
    if not input.is_floating_point():
        raise ValueError(
            f"floyd_warshall: input must be floating-point, got {input.dtype}"
        )

    if input.is_sparse:
        input = _sparse_to_dense(input)

    if input.device.type == "meta":
        return (
            torch.empty_like(input),
            torch.empty_like(input, dtype=torch.int64),
        )

    if not directed:
        input = torch.minimum(input, input.transpose(-2, -1))

    if torch.isnan(input).any() or torch.isneginf(input).any():
        raise ValueError(
            "floyd_warshall: input contains NaN or -inf weights"
        )

    distances, predecessors = _floyd_warshall_forward(input)

    has_negative_cycle = (
        distances.diagonal(dim1=-2, dim2=-1) < 0
    ).any()
    if has_negative_cycle:
        raise NegativeCycleError(
            "floyd_warshall: graph contains a negative cycle"
        )

    return distances, predecessors

