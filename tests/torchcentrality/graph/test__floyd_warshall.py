"""Tests for floyd_warshall as used for graphs with negative weights."""

import pytest
import torch

from torchcentrality.graph import NegativeCycleError, floyd_warshall

inf = float("inf")


class TestFloydWarshallNegativeWeights:
    """Negative edges without negative cycles."""

    def test_negative_edge_beats_direct_edge(self):
        # 0 -> 1 (1), 0 -> 2 (3), 2 -> 1 (-3), 1 -> 3 (1)
        adj = torch.tensor(
            [
                [0.0, 1.0, 3.0, inf],
                [inf, 0.0, inf, 1.0],
                [inf, -3.0, 0.0, inf],
                [inf, inf, inf, 0.0],
            ]
        )

        dist, pred = floyd_warshall(adj)

        assert dist[0].tolist() == [0.0, 0.0, 3.0, 1.0]
        assert dist[2].tolist() == [inf, -3.0, 0.0, -2.0]
        assert pred[0, 1] == 2
        assert pred[0, 3] == 1

    def test_predecessors_walk_back_to_source(self):
        adj = torch.tensor(
            [
                [0.0, 5.0, 1.0, inf],
                [inf, 0.0, inf, -2.0],
                [inf, 2.0, 0.0, 6.0],
                [inf, inf, inf, 0.0],
            ]
        )

        dist, pred = floyd_warshall(adj)

        path = [3]
        while path[-1] != 0:
            path.append(pred[0, path[-1]].item())
        assert path[::-1] == [0, 2, 1, 3]
        assert dist[0, 3] == 1.0

    def test_unreachable_stays_inf(self):
        adj = torch.tensor(
            [
                [0.0, -1.0, inf],
                [inf, 0.0, inf],
                [inf, 4.0, 0.0],
            ]
        )

        dist, pred = floyd_warshall(adj)

        assert dist[0, 2] == inf
        assert dist[1].tolist() == [inf, 0.0, inf]
        assert pred[0, 2] == -1

    def test_gradcheck(self):
        adj = torch.tensor(
            [
                [0.0, 2.0, 0.5, 4.0],
                [1.5, 0.0, 3.0, -0.7],
                [2.6, 1.1, 0.0, 2.9],
                [0.8, 3.3, 1.7, 0.0],
            ],
            dtype=torch.float64,
            requires_grad=True,
        )
        off_diagonal = 1.0 - torch.eye(4, dtype=torch.float64)

        def func(adj):
            dist, _ = floyd_warshall(adj * off_diagonal)
            return dist

        assert torch.autograd.gradcheck(func, (adj,), eps=1e-6, atol=1e-4)


class TestFloydWarshallDiagonal:
    """Self-distances and negative cycles."""

    @pytest.mark.parametrize("self_loop", [0.0, 3.0, inf])
    def test_non_negative_self_loops_give_zero(self, self_loop):
        adj = torch.tensor(
            [
                [0.0, 1.0],
                [-0.5, 0.0],
            ]
        )
        adj.fill_diagonal_(self_loop)

        dist, pred = floyd_warshall(adj)

        assert dist.diagonal().tolist() == [0.0, 0.0]
        assert pred.diagonal().tolist() == [-1, -1]

    def test_negative_self_loop_is_a_cycle(self):
        adj = torch.tensor(
            [
                [0.0, 1.0, inf],
                [inf, 0.0, 1.0],
                [inf, inf, -0.1],
            ]
        )

        with pytest.raises(NegativeCycleError, match="negative cycle"):
            floyd_warshall(adj)

    def test_three_cycle(self):
        adj = torch.tensor(
            [
                [0.0, 2.0, inf],
                [inf, 0.0, -1.0],
                [-1.5, inf, 0.0],
            ]
        )

        with pytest.raises(NegativeCycleError):
            floyd_warshall(adj)

    def test_zero_length_cycle_is_allowed(self):
        adj = torch.tensor(
            [
                [0.0, 1.0],
                [-1.0, 0.0],
            ]
        )

        dist, _ = floyd_warshall(adj)

        assert dist.tolist() == [[0.0, 1.0], [-1.0, 0.0]]

    def test_undirected_negative_edge_is_a_cycle(self):
        adj = torch.tensor(
            [
                [0.0, inf],
                [-0.2, 0.0],
            ]
        )

        floyd_warshall(adj)
        with pytest.raises(NegativeCycleError):
            floyd_warshall(adj, directed=False)

    def test_one_bad_graph_fails_the_batch(self):
        good = torch.tensor([[0.0, -1.0], [inf, 0.0]])
        bad = torch.tensor([[0.0, -1.0], [0.5, 0.0]])

        with pytest.raises(NegativeCycleError):
            floyd_warshall(torch.stack([good, bad]))

    def test_negative_cycle_error_is_value_error(self):
        assert issubclass(NegativeCycleError, ValueError)


class TestFloydWarshallInput:
    """Sparse and malformed input."""

    def test_sparse_unstored_entries_are_missing_edges(self):
        adj = torch.sparse_coo_tensor(
            torch.tensor([[0, 1], [1, 2]]), torch.tensor([-1.0, 0.0]), (3, 3)
        )

        dist, _ = floyd_warshall(adj)

        assert dist.tolist() == [
            [0.0, -1.0, -1.0],
            [inf, 0.0, 0.0],
            [inf, inf, 0.0],
        ]

    @pytest.mark.parametrize("bad", [float("nan"), -inf])
    def test_rejects_nan_and_negative_infinity(self, bad):
        adj = torch.tensor(
            [
                [0.0, 1.0],
                [bad, 0.0],
            ]
        )

        with pytest.raises(ValueError, match="NaN or -inf"):
            floyd_warshall(adj)

    def test_meta(self):
        dist, pred = floyd_warshall(torch.empty(2, 3, 3, device="meta"))

        assert dist.shape == pred.shape == (2, 3, 3)
        assert pred.dtype == torch.int64
        assert dist.device.type == "meta"
