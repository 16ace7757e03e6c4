import random
from typing import List, Optional, Set, Tuple

from textgraph.graph_construction.graph import Graph


def random_walk(graph: Graph, rng: Optional[random.Random] = None) -> List[str]:
    """
    Walk the graph from a uniformly random start node.

    At each step a uniformly random outgoing edge is chosen. The walk stops at
    a node without outgoing edges, or when the chosen edge was already
    traversed in this walk (that edge is not traversed again). Since no edge
    is used twice the walk always ends.

    Returns the visited words in order; an empty graph gives an empty list.
    """
    if rng is None:
        rng = random.Random()

    nodes = graph.node_names()
    if not nodes:
        return []

    succ = graph.nx_graph.succ
    current = rng.choice(nodes)
    walk = [current]
    visited_edges: Set[Tuple[str, str]] = set()

    while True:
        targets = list(succ[current])
        if not targets:
            break

        nxt = rng.choice(targets)
        edge = (current, nxt)
        if edge in visited_edges:
            break

        visited_edges.add(edge)
        current = nxt
        walk.append(current)

    return walk
