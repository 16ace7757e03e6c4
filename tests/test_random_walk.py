"""Tests for random walks over the word graph."""

import random

from textgraph.graph_construction.graph import Graph, build_graph_from_text
from textgraph.network_analysis.random_walk import random_walk


def edges_of(walk):
    return list(zip(walk, walk[1:]))


class TestRandomWalk:
    def test_seeded_walk_is_reproducible(self, sample_graph):
        first = random_walk(sample_graph, rng=random.Random(7))
        second = random_walk(sample_graph, rng=random.Random(7))
        assert first == second

    def test_follows_existing_edges_once(self, sample_graph):
        for seed in range(50):
            walk = random_walk(sample_graph, rng=random.Random(seed))
            assert len(walk) >= 1
            steps = edges_of(walk)
            assert len(steps) == len(set(steps))
            for u, v in steps:
                assert sample_graph.edge_weight(u, v) is not None

    def test_stops_at_dead_end(self):
        graph = build_graph_from_text("a b")
        for seed in range(20):
            assert random_walk(graph, rng=random.Random(seed)) in (["a", "b"], ["b"])

    def test_self_loop_is_traversed_once(self):
        graph = build_graph_from_text("a a")
        assert random_walk(graph, rng=random.Random(0)) == ["a", "a"]

    def test_cycle_closes_then_stops(self):
        graph = build_graph_from_text("a b c a")
        for seed in range(10):
            walk = random_walk(graph, rng=random.Random(seed))
            assert len(walk) == 4
            assert walk[0] == walk[-1]

    def test_empty_graph(self):
        assert random_walk(Graph()) == []

    def test_default_rng(self, sample_graph):
        walk = random_walk(sample_graph)
        assert walk[0] in sample_graph
