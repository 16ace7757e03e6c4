"""Shared fixtures for the textgraph test suite."""

import pytest

from textgraph.graph_construction.graph import build_graph_from_text


SAMPLE_TEXT = (
    "To @ explore strange new worlds,\n"
    "To seek out new life and new civilizations?"
)


@pytest.fixture
def sample_graph():
    """Graph of a short two-line text with repeated words."""
    return build_graph_from_text(SAMPLE_TEXT)


@pytest.fixture
def detour_graph():
    """
    s -> t has weight 3 while the detour s -> m -> t costs 2.

    Tokens: s t s t s t s m t
    """
    return build_graph_from_text("s t s t s t s m t")


@pytest.fixture
def corpus_file(tmp_path):
    path = tmp_path / "corpus.txt"
    path.write_text(SAMPLE_TEXT, encoding="utf-8")
    return path
