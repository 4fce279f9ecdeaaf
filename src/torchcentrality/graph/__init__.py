from torchcentrality.graph._aggregation import (
    CLOSENESS,
    HARMONIC,
    Aggregation,
    ZeroDistanceError,
    ZeroDistanceWarning,
)
from torchcentrality.graph._centrality_engine import compute_centrality
from torchcentrality.graph._closeness_centrality import (
    closeness_centrality,
)
from torchcentrality.graph._dijkstra import dijkstra
from torchcentrality.graph._distance_source import (
    AllPairsDistances,
    DistanceSource,
    SingleSourceDistances,
    distance_source,
)
from torchcentrality.graph._floyd_warshall import (
    NegativeCycleError,
    floyd_warshall,
)
from torchcentrality.graph._harmonic_centrality import (
    harmonic_centrality,
)
from torchcentrality.graph._shortest_path_algorithm import (
    ShortestPathAlgorithm,
    select_shortest_path_algorithm,
)
from torchcentrality.graph._vertex_scoring import (
    ClosenessCentrality,
    HarmonicCentrality,
    InvalidVertexError,
    VertexScoring,
)

__all__ = [
    "Aggregation",
    "AllPairsDistances",
    "CLOSENESS",
    "ClosenessCentrality",
    "DistanceSource",
    "HARMONIC",
    "HarmonicCentrality",
    "InvalidVertexError",
    "NegativeCycleError",
    "ShortestPathAlgorithm",
    "SingleSourceDistances",
    "VertexScoring",
    "ZeroDistanceError",
    "ZeroDistanceWarning",
    "closeness_centrality",
    "compute_centrality",
    "dijkstra",
    "distance_source",
    "floyd_warshall",
    "harmonic_centrality",
    "select_shortest_path_algorithm",
]
