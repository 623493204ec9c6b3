# markov_textgen/context/tokenizer.py
# whitespace tokenizer and its inverse

from __future__ import annotations

from typing import Iterable, List

from .tokens import Token, Word, is_marker


def tokenize(line: str) -> List[Word]:
    """
    Split a line into words on any run of whitespace.
    Case and punctuation stay attached to the word they came with, so
    render() gives the line back for single-spaced input.
    """
    if not line:
        return []
    return line.split()


def render(tokens: Iterable[Token]) -> str:
    """Join tokens with single spaces, dropping START/END markers."""
    return " ".join(t for t in tokens if not is_marker(t))
