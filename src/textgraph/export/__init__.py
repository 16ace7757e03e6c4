"""
Export helpers around the graph:
- DOT text and Graphviz rendering
- adjacency listing and pandas tables
- saving random walks.
"""

from .dot import render_graph, to_dot
from .tables import edges_frame, format_adjacency, ranks_frame, save_random_walk

__all__ = [
    "render_graph",
    "to_dot",
    "edges_frame",
    "format_adjacency",
    "ranks_frame",
    "save_random_walk",
]
