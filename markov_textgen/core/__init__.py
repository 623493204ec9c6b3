"""
markov_textgen.core

The generation engine.
Contains:
 - the bigram transition table and weighted random walk (MarkovChain)
 - the corpus-level wrapper with retries and output checks (TextModel)
"""

from .markov_chain import ChainStateError, GenerationConfig, MarkovChain
from .text_model import TextModel, TextOptions

__all__ = [
    "ChainStateError",
    "GenerationConfig",
    "MarkovChain",
    "TextModel",
    "TextOptions",
]
