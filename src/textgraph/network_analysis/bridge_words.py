from typing import Set

from textgraph.common.errors import WordNotFoundError
from textgraph.graph_construction.graph import Graph


def bridge_words(graph: Graph, word1: str, word2: str) -> Set[str]:
    """
    Words C with edges word1 -> C and C -> word2.

    word1 is checked before word2, so when both are missing the error names word1.
    An empty set means both words exist but nothing bridges them.

    Raises:
        WordNotFoundError: if either word is not in the graph.
    """
    word1 = word1.lower()
    word2 = word2.lower()

    if not graph.contains_node(word1):
        raise WordNotFoundError(word1)
    if not graph.contains_node(word2):
        raise WordNotFoundError(word2)

    return graph.successors(word1) & graph.predecessors(word2)


def describe_bridge_words(graph: Graph, word1: str, word2: str) -> str:
    """Human-readable answer to a bridge word query."""
    word1 = word1.lower()
    word2 = word2.lower()

    try:
        found = bridge_words(graph, word1, word2)
    except WordNotFoundError as e:
        return str(e)

    if not found:
        return f"No bridge words from {word1} to {word2}!"

    ordered = sorted(found)
    if len(ordered) == 1:
        return f"The bridge word from {word1} to {word2} is: {ordered[0]}"
    return (
        f"The bridge words from {word1} to {word2} are: "
        f"{', '.join(ordered[:-1])} and {ordered[-1]}"
    )
