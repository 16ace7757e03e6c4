from typing import Dict, List, Optional

from tqdm import tqdm

from textgraph.common.config import DEFAULT_DAMPING, DEFAULT_ITERATIONS, TFIDF_EPSILON
from textgraph.graph_construction.graph import Graph
from textgraph.network_analysis.tfidf import compute_tfidf


def _check_params(damping: float, iterations: int) -> None:
    if not 0.0 <= damping <= 1.0:
        raise ValueError(f"damping must lie in [0, 1], got {damping}.")
    if iterations < 0:
        raise ValueError(f"iterations must not be negative, got {iterations}.")


def _link_step(
    graph: Graph,
    nodes: List[str],
    index: Dict[str, int],
    out_degree: List[int],
    rank: List[float],
    damping: float,
) -> List[float]:
    """
    Mass that reaches every node through links in one iteration:
    d * (sum over in-edges of rank(u) / outdeg(u) + dangling_sum / n).

    Reads only `rank` and returns a fresh list, so all nodes update from the
    same snapshot.
    """
    n = len(nodes)
    succ = graph.nx_graph.succ
    new_rank = [0.0] * n
    # Tổng rank của các node "dangling" (không có outgoing edge)
    dangling_sum = 0.0

    for i, node in enumerate(nodes):
        if out_degree[i] == 0:
            dangling_sum += rank[i]
            continue
        share = rank[i] / out_degree[i]
        for target in succ[node]:
            new_rank[index[target]] += damping * share

    dangling_share = damping * dangling_sum / n
    return [r + dangling_share for r in new_rank]


def page_rank(
    graph: Graph,
    damping: float = DEFAULT_DAMPING,
    iterations: int = DEFAULT_ITERATIONS,
    show_progress: bool = False,
) -> Dict[str, float]:
    """
    Plain PageRank by power iteration.

    Runs exactly `iterations` steps, no convergence test. Dangling nodes
    spread their rank uniformly over all nodes; out-degree counts distinct
    edges, not weights. The update is self-normalizing, so no
    renormalization happens.

    Returns a dict word -> rank.
    """
    _check_params(damping, iterations)
    nodes = graph.node_names()
    n = len(nodes)
    if n == 0:
        return {}

    index = {node: i for i, node in enumerate(nodes)}
    out_degree = [graph.nx_graph.out_degree(node) for node in nodes]

    # Khởi tạo rank đều nhau
    rank = [1.0 / n] * n
    teleport = (1.0 - damping) / n

    for _ in tqdm(range(iterations), disable=not show_progress, desc="PageRank", unit="iter"):
        linked = _link_step(graph, nodes, index, out_degree, rank, damping)
        rank = [teleport + r for r in linked]

    return {node: rank[index[node]] for node in nodes}


def _normalize(values: List[float]) -> List[float]:
    total = sum(values)
    if total <= 0:
        return values
    return [v / total for v in values]


def weighted_page_rank(
    graph: Graph,
    damping: float = DEFAULT_DAMPING,
    iterations: int = DEFAULT_ITERATIONS,
    reference_text: Optional[str] = None,
    show_progress: bool = False,
    epsilon: float = TFIDF_EPSILON,
) -> Dict[str, float]:
    """
    PageRank whose start and restart distribution come from TF-IDF scores of
    `reference_text` instead of the uniform 1/n.

    - start: tfidf(word) + epsilon, normalized to sum 1
    - restart term: (1 - d) * tfidf(word), or (1 - d) / n for words absent
      from the reference text
    - the distribution is renormalized to sum 1 after every step
    """
    _check_params(damping, iterations)
    nodes = graph.node_names()
    n = len(nodes)
    if n == 0:
        return {}

    tfidf = compute_tfidf(reference_text or "")
    index = {node: i for i, node in enumerate(nodes)}
    out_degree = [graph.nx_graph.out_degree(node) for node in nodes]

    rank = _normalize([tfidf.get(node, 0.0) + epsilon for node in nodes])
    restart = [(1.0 - damping) * tfidf.get(node, 1.0 / n) for node in nodes]

    for _ in tqdm(range(iterations), disable=not show_progress, desc="Weighted PageRank", unit="iter"):
        linked = _link_step(graph, nodes, index, out_degree, rank, damping)
        rank = _normalize([restart[i] + linked[i] for i in range(n)])

    return {node: rank[index[node]] for node in nodes}
