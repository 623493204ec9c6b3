# markov_textgen/core/text_model.py
"""
TextModel - corpus in, generated sentences out.

Wraps a MarkovChain with the corpus handling around it:
 - splits the corpus into lines, one training example each
 - drops blank lines (and, optionally, lines matching a reject pattern)
 - retries walks until one satisfies the word-count limits
 - optional overlap check so output is not a verbatim copy of the corpus

Generation returns None rather than raising when nothing acceptable comes out.
"""

from __future__ import annotations

import logging
import math
from dataclasses import dataclass
from typing import Dict, List, Optional

import numpy as np

from markov_textgen.context.normalizer import (
    RejectArg,
    compile_reject,
    normalize_whitespace,
    sentence_input,
)
from markov_textgen.context.tokenizer import render, tokenize
from markov_textgen.context.tokens import Word
from markov_textgen.core.markov_chain import DEFAULT_MAX_LENGTH, GenerationConfig, MarkovChain
from markov_textgen.utils.logger_utils import time_block

logger = logging.getLogger(__name__)


@dataclass(frozen=True)
class TextOptions:
    """
    Sentence-level generation settings.
    max_words=None disables the upper word-count filter.
    test_output turns on the overlap check against the corpus.
    """
    tries: int = 999
    min_words: int = 0
    max_words: Optional[int] = None
    max_length: int = DEFAULT_MAX_LENGTH
    test_output: bool = False
    max_overlap_ratio: float = 0.7
    max_overlap_total: int = 15

    def __post_init__(self) -> None:
        if self.tries < 1:
            raise ValueError("tries must be at least 1")
        if self.min_words < 0:
            raise ValueError("min_words cannot be negative")
        if self.max_words is not None and self.max_words < self.min_words:
            raise ValueError("max_words must be >= min_words")
        if self.max_length < 1:
            raise ValueError("max_length must be at least 1")

    def generation_config(self) -> GenerationConfig:
        return GenerationConfig(max_length=self.max_length)


class TextModel:
    """Markov text generator trained eagerly on a block of newline-separated sentences."""

    def __init__(
        self,
        corpus: str,
        reject_pattern: RejectArg = None,
        seed: Optional[int] = None,
    ) -> None:
        self._reject = compile_reject(reject_pattern)
        self._sentences, self._rejoined = self._parse(corpus)
        with time_block("chain training", logger):
            self._chain = MarkovChain(self._sentences, rng=np.random.default_rng(seed))
        logger.info(
            "model built from %d sentences (%d states)", len(self._sentences), len(self._chain)
        )

    def _parse(self, corpus: str):
        lines = [s for s in (corpus or "").split("\n") if sentence_input(s, self._reject)]
        runs = [tokenize(s) for s in lines]
        return runs, " ".join(normalize_whitespace(s) for s in lines)

    # ------------------------------------------------------------------
    # Introspection
    # ------------------------------------------------------------------
    @property
    def chain(self) -> MarkovChain:
        return self._chain

    @property
    def sentences(self) -> List[List[Word]]:
        return [list(run) for run in self._sentences]

    def stats(self) -> Dict[str, float]:
        return self._chain.stats()

    # ------------------------------------------------------------------
    # Output checks
    # ------------------------------------------------------------------
    def verify(self, words: List[Word], max_overlap_ratio: float, max_overlap_total: int) -> bool:
        """
        False if any run of overlap_max + 1 consecutive words appears verbatim
        in the corpus, where overlap_max = min(total, ratio * len(words) rounded).
        """
        # half rounds up
        overlap_ratio = int(math.floor(max_overlap_ratio * len(words) + 0.5))
        overlap_max = min(max_overlap_total, overlap_ratio)
        overlap_over = overlap_max + 1
        gram_count = max(len(words) - overlap_max, 1)
        for i in range(gram_count):
            gram = words[i:i + overlap_over]
            if render(gram) in self._rejoined:
                return False
        return True

    def _accept(self, words: List[Word], opts: TextOptions) -> bool:
        if len(words) < opts.min_words:
            return False
        if opts.max_words is not None and len(words) > opts.max_words:
            return False
        if opts.test_output:
            return self.verify(words, opts.max_overlap_ratio, opts.max_overlap_total)
        return True

    # ------------------------------------------------------------------
    # Generation (public API)
    # ------------------------------------------------------------------
    def generate(self, options: Optional[TextOptions] = None) -> Optional[str]:
        """Generate one sentence from the start of the chain, or None if no attempt is accepted."""
        return self._generate(None, options or TextOptions())

    def generate_with_start(self, start: Word, options: Optional[TextOptions] = None) -> Optional[str]:
        """
        Generate one sentence beginning with start.
        Returns None when start never preceded another word in the corpus.
        """
        return self._generate(start, options or TextOptions())

    def _generate(self, start: Optional[Word], opts: TextOptions) -> Optional[str]:
        cfg = opts.generation_config()
        for attempt in range(opts.tries):
            if start is None:
                words = self._chain.generate(cfg)
            else:
                words = self._chain.generate_with_start(start, cfg)
            if words is None:
                # the start token has no transitions, every retry would fail the same way
                return None
            if start is not None:
                words = [start, *words]
            if self._accept(words, opts):
                logger.debug("accepted sentence on attempt %d", attempt + 1)
                return render(words)
        logger.debug("no acceptable sentence after %d tries", opts.tries)
        return None
