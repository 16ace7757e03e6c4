import math
from dataclasses import dataclass
from typing import Dict, List, Optional, Tuple

import networkx as nx

from textgraph.common.errors import WordNotFoundError
from textgraph.graph_construction.graph import Graph


@dataclass(frozen=True)
class PathResult:
    """
    Result of a shortest path query.

    path is None and distance is math.inf when the target is unreachable.
    """
    path: Optional[List[str]]
    distance: float

    @property
    def reachable(self) -> bool:
        return self.path is not None

    @classmethod
    def unreachable(cls) -> "PathResult":
        return cls(path=None, distance=math.inf)


def _dijkstra(graph: Graph, source: str) -> Tuple[Dict[str, int], Dict[str, List[str]]]:
    """
    One networkx Dijkstra run from source over the edge weights.

    Nodes missing from the returned maps are unreachable.
    """
    return nx.single_source_dijkstra(graph.nx_graph, source, weight="weight")


def _result(target: str, dist: Dict[str, int], paths: Dict[str, List[str]]) -> PathResult:
    if target not in dist:
        return PathResult.unreachable()
    return PathResult(path=list(paths[target]), distance=dist[target])


def shortest_path(graph: Graph, source: str, target: str) -> PathResult:
    """
    Shortest weighted path source -> target.

    Raises:
        WordNotFoundError: if source or target is not in the graph (source checked first).
    """
    source = source.lower()
    target = target.lower()
    if not graph.contains_node(source):
        raise WordNotFoundError(source)
    if not graph.contains_node(target):
        raise WordNotFoundError(target)

    dist, paths = _dijkstra(graph, source)
    return _result(target, dist, paths)


def shortest_paths_from(graph: Graph, source: str) -> Dict[str, PathResult]:
    """
    Shortest paths from source to every other node, from a single Dijkstra run.

    Raises:
        WordNotFoundError: if source is not in the graph.
    """
    source = source.lower()
    if not graph.contains_node(source):
        raise WordNotFoundError(source)

    dist, paths = _dijkstra(graph, source)
    return {
        name: _result(name, dist, paths)
        for name in graph.node_names()
        if name != source
    }


def all_pairs_shortest_paths(graph: Graph) -> Dict[str, Dict[str, PathResult]]:
    """shortest_paths_from for every node of the graph."""
    return {name: shortest_paths_from(graph, name) for name in graph.node_names()}
