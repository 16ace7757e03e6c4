import os
from typing import Dict, List

import pandas as pd

from textgraph.graph_construction.graph import Graph


def format_adjacency(graph: Graph) -> List[str]:
    """One line per word: `word -> next(weight), next(weight)`."""
    lines: List[str] = []
    for node in graph.all_nodes():
        edges = node.edges
        if not edges:
            lines.append(f"{node.name} -> (no outgoing edges)")
            continue
        targets = ", ".join(f"{e.target}({e.weight})" for e in edges)
        lines.append(f"{node.name} -> {targets}")
    return lines


def edges_frame(graph: Graph) -> pd.DataFrame:
    """Edge table with columns sourceId, targetId, weight."""
    rows = [
        {"sourceId": e.source, "targetId": e.target, "weight": e.weight}
        for e in graph.edges()
    ]
    return pd.DataFrame(rows, columns=["sourceId", "targetId", "weight"])


def ranks_frame(ranks: Dict[str, float]) -> pd.DataFrame:
    """Rank table sorted by score, highest first."""
    df = pd.DataFrame(list(ranks.items()), columns=["word", "score"])
    return df.sort_values("score", ascending=False, kind="mergesort").reset_index(drop=True)


def save_random_walk(walk: List[str], path: str) -> str:
    """Write the walk as one space-separated line."""
    parent = os.path.dirname(path)
    if parent:
        os.makedirs(parent, exist_ok=True)
    with open(path, "w", encoding="utf-8") as f:
        f.write(" ".join(walk) + "\n")
    return path
