"""Exceptions raised by the text graph core and its export helpers."""


class TextGraphError(Exception):
    """Base class for every error raised by textgraph."""


class BuildError(TextGraphError):
    """The input text held no words, so no graph could be built."""


class WordNotFoundError(TextGraphError, KeyError):
    """A queried word is not a node of the graph."""

    def __init__(self, word: str):
        self.word = word
        super().__init__(word)

    def __str__(self) -> str:
        return f"No {self.word} in the graph!"


class ExportError(TextGraphError):
    """Rendering the graph with Graphviz failed."""
