"""
markov_textgen

Build a first-order Markov chain from lines of text and generate new lines from it.

    >>> from markov_textgen import TextModel
    >>> model = TextModel("hello world")
    >>> model.generate()
    'hello world'
"""

from .context import END, START, Marker, render, tokenize
from .core import ChainStateError, GenerationConfig, MarkovChain, TextModel, TextOptions

__all__ = [
    "END",
    "START",
    "Marker",
    "render",
    "tokenize",
    "ChainStateError",
    "GenerationConfig",
    "MarkovChain",
    "TextModel",
    "TextOptions",
]

__version__ = "0.1.0"
