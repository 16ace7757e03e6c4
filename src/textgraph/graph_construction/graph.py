from dataclasses import dataclass
from typing import Iterator, List, Optional, Sequence, Set

import networkx as nx

from textgraph.common.errors import BuildError, WordNotFoundError
from textgraph.graph_construction.tokenizer import tokenize


@dataclass(frozen=True)
class Edge:
    """A weighted directed edge source -> target."""
    source: str
    target: str
    weight: int


class Node:
    """
    Read-only view over one word of a Graph.

    The node itself stores nothing but its name; edges are looked up in the
    owning graph so the view never goes stale.
    """

    def __init__(self, graph: "Graph", name: str):
        self._graph = graph
        self.name = name

    @property
    def edges(self) -> List[Edge]:
        adj = self._graph.nx_graph.succ[self.name]
        return [Edge(self.name, target, data["weight"]) for target, data in adj.items()]

    @property
    def out_degree(self) -> int:
        return len(self._graph.nx_graph.succ[self.name])

    def neighbors(self) -> Set[str]:
        return set(self._graph.nx_graph.succ[self.name])

    def has_edge_to(self, other) -> bool:
        target = other.name if isinstance(other, Node) else str(other).lower()
        return self._graph.nx_graph.has_edge(self.name, target)

    def __eq__(self, other):
        return isinstance(other, Node) and other._graph is self._graph and other.name == self.name

    def __hash__(self):
        return hash(self.name)

    def __repr__(self):
        return f"Node(name={self.name!r}, out_degree={self.out_degree})"


class Graph:
    """
    Word adjacency graph.

    Nodes are lowercase words; an edge a -> b carries the number of times b
    immediately followed a. Storage is a networkx DiGraph, which keeps a
    predecessor index next to the successor index.
    """

    def __init__(self, directed: bool = True):
        self.directed = directed
        self.nx_graph = nx.DiGraph()

    def add_node(self, name: str) -> None:
        name = name.lower()
        if name not in self.nx_graph:
            self.nx_graph.add_node(name)

    def add_edge(self, source: str, target: str, weight: int = 1) -> None:
        """Create source -> target, or add weight to it if the edge already exists."""
        src = source.lower()
        dst = target.lower()

        self.add_node(src)
        self.add_node(dst)

        self._accumulate(src, dst, weight)
        if not self.directed and src != dst:
            self._accumulate(dst, src, weight)

    def _accumulate(self, src: str, dst: str, weight: int) -> None:
        if self.nx_graph.has_edge(src, dst):
            self.nx_graph[src][dst]["weight"] += weight
        else:
            self.nx_graph.add_edge(src, dst, weight=weight)

    def contains_node(self, name: str) -> bool:
        return name.lower() in self.nx_graph

    def get_node(self, name: str) -> Optional[Node]:
        name = name.lower()
        if name not in self.nx_graph:
            return None
        return Node(self, name)

    def all_nodes(self) -> List[Node]:
        return [Node(self, name) for name in self.nx_graph.nodes]

    def node_names(self) -> List[str]:
        return list(self.nx_graph.nodes)

    def edges(self) -> List[Edge]:
        return [Edge(u, v, data["weight"]) for u, v, data in self.nx_graph.edges(data=True)]

    def successors(self, name: str) -> Set[str]:
        name = name.lower()
        if name not in self.nx_graph:
            raise WordNotFoundError(name)
        return set(self.nx_graph.succ[name])

    def predecessors(self, name: str) -> Set[str]:
        name = name.lower()
        if name not in self.nx_graph:
            raise WordNotFoundError(name)
        return set(self.nx_graph.pred[name])

    def edge_weight(self, source: str, target: str) -> Optional[int]:
        data = self.nx_graph.get_edge_data(source.lower(), target.lower())
        return None if data is None else data["weight"]

    def number_of_edges(self) -> int:
        return self.nx_graph.number_of_edges()

    def __contains__(self, name) -> bool:
        return isinstance(name, str) and self.contains_node(name)

    def __len__(self) -> int:
        return self.nx_graph.number_of_nodes()

    def __iter__(self) -> Iterator[str]:
        return iter(self.nx_graph.nodes)

    def __repr__(self):
        return f"Graph(nodes={len(self)}, edges={self.number_of_edges()}, directed={self.directed})"


def build_graph(tokens: Sequence[str], directed: bool = True) -> Graph:
    """
    Build the adjacency graph of a token sequence: one edge per consecutive
    pair (w_i, w_i+1), repeated pairs adding to the weight.

    Raises:
        BuildError: if the sequence is empty.
    """
    if not tokens:
        raise BuildError("Input text contains no words; no graph was built.")

    graph = Graph(directed=directed)
    for word in tokens:
        graph.add_node(word)
    for current, nxt in zip(tokens, tokens[1:]):
        graph.add_edge(current, nxt, 1)
    return graph


def build_graph_from_text(text: str) -> Graph:
    return build_graph(tokenize(text))


def build_graph_from_file(path: str, encoding: str = "utf-8") -> Graph:
    """Read a text file and build its word graph."""
    with open(path, "r", encoding=encoding) as f:
        content = f.read()
    return build_graph_from_text(content)
