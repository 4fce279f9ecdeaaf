"""Testing utilities for torchcentrality."""

from . import strategies

__all__ = [
    "strategies",
]
