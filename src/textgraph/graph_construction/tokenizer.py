import re
from typing import List


_NON_LETTER = re.compile(r"[^a-zA-Z\s]")
_WHITESPACE = re.compile(r"\s+")


def normalize_text(text: str) -> str:
    """
    Replace every character that is neither an ASCII letter nor whitespace
    with a space, collapse whitespace runs and lowercase the result.
    """
    text = _NON_LETTER.sub(" ", text)
    text = _WHITESPACE.sub(" ", text)
    return text.lower()


def tokenize(text: str) -> List[str]:
    """Split text into lowercase words made only of ASCII letters."""
    return normalize_text(text).split()
