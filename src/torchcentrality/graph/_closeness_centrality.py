"""Closeness centrality algorithm implementation."""

from torch import Tensor

from torchcentrality.graph._aggregation import CLOSENESS
from torchcentrality.graph._centrality_engine import compute_centrality


def closeness_centrality(
    adjacency: Tensor,
    *,
    incoming: bool = False,
    normalized: bool = True,
    directed: bool = True,
) -> Tensor:
    r"""
    Compute closeness centrality for all nodes in a graph.

    Closeness centrality measures how close a node is to all other nodes.
    A node with high closeness can reach other nodes quickly.

    .. math::
        C(u) = \frac{n - 1}{\sum_{v \neq u} d(u, v)}

    where :math:`d(u, v)` is the shortest path distance from :math:`u` to
    :math:`v`, and :math:`n` is the number of nodes.

    Parameters
    ----------
    adjacency : Tensor
        Adjacency matrix of shape ``(*, N, N)`` where ``adjacency[..., i, j]``
        is the edge weight from node ``i`` to node ``j``. Use ``float('inf')``
        for missing edges. Can be dense or sparse COO tensor.
    incoming : bool, default=False
        If True, use distances along incoming paths instead of outgoing
        paths. Ignored when ``directed=False``.
    normalized : bool, default=True
        If True, return ``(n - 1) / sum``. If False, return ``1 / sum``.
    directed : bool, default=True
        If False, symmetrize the adjacency matrix by taking the element-wise
        minimum of ``A`` and ``A.T``.

    Returns
    -------
    Tensor
        Closeness centrality scores of shape ``(*, N)``. A node that cannot
        reach every other node has an infinite distance sum and
        centrality 0.

    Raises
    ------
    NegativeCycleError
        If the graph contains a negative cycle.
    ValueError
        If adjacency is not at least 2D, not square, not floating-point,
        or contains NaN or ``-inf`` weights.

    Examples
    --------
    Star graph (center has highest closeness):

    >>> import torch
    >>> from torchcentrality.graph import closeness_centrality
    >>> inf = float("inf")
    >>> adj = torch.tensor([
    ...     [0.0, 1.0, 1.0, 1.0],
    ...     [1.0, 0.0, inf, inf],
    ...     [1.0, inf, 0.0, inf],
    ...     [1.0, inf, inf, 0.0],
    ... ])
    >>> closeness_centrality(adj)
    tensor([1.0000, 0.6000, 0.6000, 0.6000])

    Notes
    -----
    - **Disconnected graphs**: Any unreachable node makes the score 0.
      Prefer :func:`harmonic_centrality` on disconnected graphs.
    - **Complexity**: Same as :func:`harmonic_centrality`.

    References
    ----------
    .. [1] Freeman, L. C. (1978). "Centrality in social networks: Conceptual
           clarification". Social Networks, 1(3), 215-239.

    See Also
    --------
    harmonic_centrality : Sum of reciprocal distances
    ClosenessCentrality : Lazily cached per-vertex scores
    networkx.closeness_centrality : NetworkX implementation
    """
    return compute_centrality(
        adjacency,
        CLOSENESS,
        incoming=incoming,
        normalized=normalized,
        directed=directed,
    )
