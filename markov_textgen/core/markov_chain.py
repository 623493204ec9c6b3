# markov_textgen/core/markov_chain.py
# first-order Markov chain over word tokens: training and weighted random walk.

from __future__ import annotations

import logging
from collections import Counter, defaultdict
from dataclasses import dataclass, replace
from typing import Dict, Iterable, List, Optional, Sequence, Tuple

import numpy as np

from markov_textgen.context.tokens import END, START, Token, Word

logger = logging.getLogger(__name__)

DEFAULT_MAX_LENGTH = 300

# successors and their running weight totals, aligned by index
Compiled = Tuple[List[Token], np.ndarray]


class ChainStateError(RuntimeError):
    """The transition table holds a predecessor with nothing to draw from."""


@dataclass(frozen=True)
class GenerationConfig:
    """
    Knobs for a single walk over the chain.
    max_length caps the number of successor draws, so a walk always ends
    even when some reachable state has no path to END.
    start overrides the START marker as the first predecessor.
    """
    max_length: int = DEFAULT_MAX_LENGTH
    start: Optional[Token] = None

    def __post_init__(self) -> None:
        if self.max_length < 1:
            raise ValueError("max_length must be at least 1")


class MarkovChain:
    """
    Bigram transition table built from runs of words.

    Each run is framed as [START, w1, ..., wn, END] and every adjacent pair
    adds one to table[prev][next]. Generation starts from START (or a given
    token) and draws successors in proportion to their counts until END.
    Counts keep accumulating across train() calls.

    The table is only written by train(); generating from one chain in
    several threads is not supported because the random generator is shared.
    """

    def __init__(
        self,
        runs: Iterable[Sequence[Word]] = (),
        rng: Optional[np.random.Generator] = None,
    ) -> None:
        # prev -> Counter(next)
        self._table: Dict[Token, Counter] = defaultdict(Counter)
        # prev -> cumulative weights, rebuilt lazily after training touches prev
        self._compiled: Dict[Token, Compiled] = {}
        self._rng = rng if rng is not None else np.random.default_rng()
        self.train(runs)

    # ------------------------------------------------------------------
    # Training
    # ------------------------------------------------------------------
    def train(self, runs: Iterable[Sequence[Word]]) -> int:
        """
        Add the transitions of every run to the table.
        Empty runs carry no signal and are skipped.
        Returns the number of runs used.
        """
        used = 0
        for run in runs:
            if not run:
                continue
            items: List[Token] = [START, *run, END]
            for prev, nxt in zip(items, items[1:]):
                self._table[prev][nxt] += 1
                self._compiled.pop(prev, None)
            used += 1
        logger.debug("trained on %d runs, %d states", used, len(self._table))
        return used

    # ------------------------------------------------------------------
    # Introspection helpers
    # ------------------------------------------------------------------
    def __contains__(self, token: object) -> bool:
        return token in self._table

    def __len__(self) -> int:
        return len(self._table)

    def transitions(self, token: Token) -> Dict[Token, int]:
        counter = self._table.get(token)
        return dict(counter) if counter else {}

    def stats(self) -> Dict[str, float]:
        if not self._table:
            return {"states": 0, "transitions": 0, "avg_transitions_per_state": 0.0}
        total = sum(sum(c.values()) for c in self._table.values())
        return {
            "states": len(self._table),
            "transitions": total,
            "avg_transitions_per_state": total / len(self._table),
        }

    # ------------------------------------------------------------------
    # Weighted draw
    # ------------------------------------------------------------------
    def _compile(self, token: Token) -> Compiled:
        cached = self._compiled.get(token)
        if cached is not None:
            return cached
        if token not in self._table:
            raise KeyError(token)
        counter = self._table[token]
        choices = list(counter.keys())
        weights = np.fromiter(counter.values(), dtype=np.int64, count=len(choices))
        if not choices or weights.min() < 1:
            raise ChainStateError(f"no valid successors recorded for {token!r}")
        compiled = (choices, np.cumsum(weights))
        self._compiled[token] = compiled
        return compiled

    def next_token(self, token: Token) -> Token:
        """
        Draw a successor of token; one seen k times out of n total
        is picked with probability k/n.
        Raises KeyError if token was never seen as a predecessor,
        use generate() or check `token in chain` for a None-returning path.
        """
        choices, cumdist = self._compile(token)
        r = self._rng.random() * cumdist[-1]
        return choices[int(np.searchsorted(cumdist, r, side="right"))]

    # ------------------------------------------------------------------
    # Generation (public API)
    # ------------------------------------------------------------------
    def generate(self, config: Optional[GenerationConfig] = None) -> Optional[List[Word]]:
        """
        Walk the chain from config.start (START by default) until END is drawn.
        Returns the drawn words, or None when the start token was never seen
        as a predecessor. Hitting max_length truncates the walk and returns
        the words collected so far.
        """
        cfg = config or GenerationConfig()
        current = START if cfg.start is None else cfg.start
        if current not in self._table:
            logger.debug("no transitions recorded from %r", current)
            return None

        out: List[Word] = []
        for _ in range(cfg.max_length):
            nxt = self.next_token(current)
            if nxt is END:
                return out
            out.append(nxt)
            current = nxt

        logger.debug("walk truncated after %d draws", cfg.max_length)
        return out

    def generate_with_start(
        self, start: Token, config: Optional[GenerationConfig] = None
    ) -> Optional[List[Word]]:
        """Same walk as generate() but beginning at start; start is not included in the result."""
        cfg = replace(config or GenerationConfig(), start=start)
        return self.generate(cfg)
