import math
from collections import Counter
from typing import Dict

from textgraph.graph_construction.tokenizer import tokenize


def term_frequencies(text: str) -> Counter:
    """Raw occurrence count of every word in text."""
    return Counter(tokenize(text))


def inverse_document_frequencies(text: str) -> Dict[str, float]:
    """
    IDF measured inside a single text: ln(total words / occurrences of the word).

    "Document frequency" here is the raw count of the word in the same text,
    not a count over several documents.
    """
    counts = term_frequencies(text)
    total = sum(counts.values())
    return {word: math.log(total / freq) for word, freq in counts.items()}


def compute_tfidf(text: str) -> Dict[str, float]:
    """
    TF-IDF score of every word in text, divided by the largest score so the
    values lie in [0, 1].

    When the largest score is not positive (empty text, or a single distinct
    word whose idf is 0) the raw scores are returned.
    """
    tf = term_frequencies(text)
    idf = inverse_document_frequencies(text)

    tfidf: Dict[str, float] = {word: freq * idf.get(word, 0.0) for word, freq in tf.items()}
    if not tfidf:
        return tfidf

    max_score = max(tfidf.values())
    if max_score <= 0:
        return tfidf
    return {word: score / max_score for word, score in tfidf.items()}
