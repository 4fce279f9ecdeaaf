"""Hypothesis strategies for graph operator testing."""

from ._adjacency_matrices import adjacency_matrices
from ._edge_weights import edge_weights

__all__ = [
    "adjacency_matrices",
    "edge_weights",
]
