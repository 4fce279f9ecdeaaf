"""Adjacency tensor checks shared by the graph operators."""

import torch
from torch import Tensor


def _sparse_to_dense(adjacency: Tensor) -> Tensor:
    """Densify a sparse COO adjacency, filling unstored entries with inf.

    ``Tensor.to_dense`` fills with zeros, which would turn every missing
    edge into a zero-weight edge.
    """
    adjacency = adjacency.coalesce()
    dense = torch.full(
        adjacency.shape,
        float("inf"),
        dtype=adjacency.dtype,
        device=adjacency.device,
    )
    dense[tuple(adjacency.indices())] = adjacency.values()
    return dense


def _validate_adjacency(adjacency: Tensor, name: str) -> Tensor:
    """Check shape and dtype of a ``(*, N, N)`` adjacency.

    Returns the adjacency densified if it was sparse.
    """
    if adjacency.dim() < 2:
        raise ValueError(
            f"{name}: adjacency must be at least 2D, got {adjacency.dim()}D"
        )
    if adjacency.size(-1) != adjacency.size(-2):
        raise ValueError(
            f"{name}: adjacency must be square, "
            f"got {adjacency.size(-2)} x {adjacency.size(-1)}"
        )
    if not adjacency.is_floating_point():
        raise ValueError(
            f"{name}: adjacency must be floating-point, got {adjacency.dtype}"
        )

    if adjacency.is_sparse:
        adjacency = _sparse_to_dense(adjacency)

    # Skip for meta tensors since data-dependent operations don't work
    if adjacency.device.type != "meta":
        if torch.isnan(adjacency).any() or torch.isneginf(adjacency).any():
            raise ValueError(
                f"{name}: adjacency contains NaN or -inf weights"
            )

    return adjacency
