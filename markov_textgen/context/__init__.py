# markov_textgen/context/__init__.py
# text handling: tokens, tokenizer and corpus line filtering

from .tokens import Marker, START, END, Token, Word, is_marker
from .tokenizer import tokenize, render
from .normalizer import (
    DEFAULT_REJECT_PATTERN,
    normalize_whitespace,
    fold_ascii,
    sentence_input,
)

__all__ = [
    "Marker",
    "START",
    "END",
    "Token",
    "Word",
    "is_marker",
    "tokenize",
    "render",
    "DEFAULT_REJECT_PATTERN",
    "normalize_whitespace",
    "fold_ascii",
    "sentence_input",
]
