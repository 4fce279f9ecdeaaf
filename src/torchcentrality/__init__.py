"""torchcentrality: shortest path vertex centrality for PyTorch."""

from . import graph

__all__ = [
    "graph",
]

__version__ = "0.1.0"
