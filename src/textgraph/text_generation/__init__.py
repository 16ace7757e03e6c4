"""Generating new text from the word graph by bridge word insertion."""

from .synthesize import synthesize_text

__all__ = ["synthesize_text"]
