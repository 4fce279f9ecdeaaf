import hypothesis.strategies


def edge_weights(
    min_value: float = 0.1,
    max_value: float = 10.0,
) -> hypothesis.strategies.SearchStrategy[float]:
    """Strategy for finite edge weights in ``[min_value, max_value]``."""
    return hypothesis.strategies.floats(
        min_value=min_value,
        max_value=max_value,
        allow_nan=False,
        allow_infinity=False,
    )
