"""
Network analysis algorithms on the word graph:
- bridge words between two words
- shortest paths (Dijkstra)
- PageRank, uniform and TF-IDF weighted
- random walks.
"""

from .bridge_words import bridge_words, describe_bridge_words
from .compute_pagerank import page_rank, weighted_page_rank
from .random_walk import random_walk
from .shortest_path import PathResult, all_pairs_shortest_paths, shortest_path, shortest_paths_from
from .tfidf import compute_tfidf, inverse_document_frequencies, term_frequencies

__all__ = [
    "bridge_words",
    "describe_bridge_words",
    "page_rank",
    "weighted_page_rank",
    "random_walk",
    "PathResult",
    "all_pairs_shortest_paths",
    "shortest_path",
    "shortest_paths_from",
    "compute_tfidf",
    "inverse_document_frequencies",
    "term_frequencies",
]
