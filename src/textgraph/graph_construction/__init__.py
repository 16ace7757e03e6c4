"""
Building the word adjacency graph:
- tokenizing raw text into lowercase words
- accumulating weighted edges between consecutive words.
"""

from .graph import Edge, Graph, Node, build_graph, build_graph_from_file, build_graph_from_text
from .tokenizer import normalize_text, tokenize

__all__ = [
    "Edge",
    "Graph",
    "Node",
    "build_graph",
    "build_graph_from_file",
    "build_graph_from_text",
    "normalize_text",
    "tokenize",
]
