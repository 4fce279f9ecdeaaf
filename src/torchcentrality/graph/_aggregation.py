"""Rules turning a vertex's distances into a centrality score."""

from dataclasses import dataclass
from typing import Callable

from torch import Tensor


class ZeroDistanceError(ValueError):
    """Raised when two distinct vertices are at shortest path distance 0.

    Harmonic centrality sums ``1 / d``, which has no finite value for a
    zero distance. Only raised with ``zero_distance="raise"``.
    """

    pass


class ZeroDistanceWarning(RuntimeWarning):
    """Two distinct vertices are at distance 0 and contribute ``inf``."""

    pass


@dataclass(frozen=True)
class Aggregation:
    """Per-vertex aggregation rule shared by the centrality engine.

    Attributes
    ----------
    name : str
        Name of the measure, used in error messages.
    term : callable
        Maps the distances from one vertex to every *other* vertex to
        per-vertex contributions, which are summed.
    finalize : callable
        Maps the (optionally normalized) sum to the score.
    reciprocal : bool
        Whether ``term`` divides by the distance, making a zero distance
        between distinct vertices a boundary case.
    """

    name: str
    term: Callable[[Tensor], Tensor]
    finalize: Callable[[Tensor], Tensor]
    reciprocal: bool = False


def _identity(total: Tensor) -> Tensor:
    return total


def _harmonic_term(distances: Tensor) -> Tensor:
    # 1 / inf == 0 for unreachable vertices, 1 / 0 == inf
    return distances.reciprocal()


def _closeness_term(distances: Tensor) -> Tensor:
    return distances


def _closeness_finalize(total: Tensor) -> Tensor:
    # A single unreachable vertex makes the sum inf and the score 0
    return total.reciprocal()


HARMONIC = Aggregation(
    name="harmonic",
    term=_harmonic_term,
    finalize=_identity,
    reciprocal=True,
)

CLOSENESS = Aggregation(
    name="closeness",
    term=_closeness_term,
    finalize=_closeness_finalize,
)
