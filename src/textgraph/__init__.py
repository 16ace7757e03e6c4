"""
Word adjacency graphs built from plain text, with bridge words, shortest
paths, PageRank, random walks and bridge-word text generation.
"""

from .common.errors import BuildError, ExportError, TextGraphError, WordNotFoundError
from .export import edges_frame, format_adjacency, ranks_frame, render_graph, save_random_walk, to_dot
from .graph_construction import Edge, Graph, Node, build_graph, build_graph_from_file, build_graph_from_text, tokenize
from .network_analysis import (
    PathResult,
    all_pairs_shortest_paths,
    bridge_words,
    compute_tfidf,
    describe_bridge_words,
    page_rank,
    random_walk,
    shortest_path,
    shortest_paths_from,
    weighted_page_rank,
)
from .text_generation import synthesize_text

__version__ = "0.1.0"

__all__ = [
    "BuildError",
    "ExportError",
    "TextGraphError",
    "WordNotFoundError",
    "edges_frame",
    "format_adjacency",
    "ranks_frame",
    "render_graph",
    "save_random_walk",
    "to_dot",
    "Edge",
    "Graph",
    "Node",
    "build_graph",
    "build_graph_from_file",
    "build_graph_from_text",
    "tokenize",
    "PathResult",
    "all_pairs_shortest_paths",
    "bridge_words",
    "compute_tfidf",
    "describe_bridge_words",
    "page_rank",
    "random_walk",
    "shortest_path",
    "shortest_paths_from",
    "weighted_page_rank",
    "synthesize_text",
]
