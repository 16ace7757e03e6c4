import random
from typing import List, Optional

from textgraph.common.errors import WordNotFoundError
from textgraph.graph_construction.graph import Graph
from textgraph.graph_construction.tokenizer import tokenize
from textgraph.network_analysis.bridge_words import bridge_words


def _restore_capitals(original_text: str, words: List[str]) -> List[str]:
    """
    Re-capitalize words whose positional counterpart in the original text
    starts with an uppercase letter.

    Applies only when the counts match, which means no bridge word was inserted.
    """
    original_words = original_text.split()
    if len(original_words) != len(words):
        return words

    restored = list(words)
    for i, original in enumerate(original_words):
        if original[:1].isupper() and restored[i]:
            restored[i] = restored[i][0].upper() + restored[i][1:]
    return restored


def synthesize_text(graph: Graph, input_text: str, rng: Optional[random.Random] = None) -> str:
    """
    Rewrite input_text by inserting a bridge word between every consecutive
    pair of its words that has one.

    When several bridge words exist one is picked uniformly with rng. Pairs
    whose words are missing from the graph are left as they are. Text without
    any word is returned unchanged.
    """
    if rng is None:
        rng = random.Random()

    words = tokenize(input_text)
    if not words:
        return input_text

    result = [words[0]]
    for current, nxt in zip(words, words[1:]):
        try:
            candidates = bridge_words(graph, current, nxt)
        except WordNotFoundError:
            candidates = set()

        if candidates:
            result.append(rng.choice(sorted(candidates)))
        result.append(nxt)

    return " ".join(_restore_capitals(input_text, result))
