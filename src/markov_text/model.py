"""
First-order Markov chain over word and boundary tokens.

``ChainModel.build`` reads a corpus once, folding every adjacent token pair
into the predecessor's TransitionTable, then compiles all tables. After that
the model is ready: ``step`` samples the successor of the cursor token and
moves the cursor to it. The boundary token keys the start table, so a chain
that reaches a boundary starts over on the next step.
"""

from __future__ import annotations

import logging
from pathlib import Path
from types import MappingProxyType
from typing import Iterable, Iterator, Mapping, Optional

import numpy as np

from .config import ChainConfig
from .corpus import load_corpus
from .errors import EmptyModelError, UsageError
from .tokenization import Tokenizer
from .transitions import TransitionTable

logger = logging.getLogger(__name__)


class ChainModel:
    """
    Markov chain built from a text buffer.

    Attributes:
        config: Boundary character and random seed
        boundary: The boundary token, also the key of the start table
    """

    def __init__(
        self,
        config: Optional[ChainConfig] = None,
        rng: Optional[np.random.Generator] = None,
    ):
        """
        Args:
            config: Chain settings (defaults to ChainConfig())
            rng: Random generator to own. Built from config.seed when omitted.
        """
        self.config = config or ChainConfig()
        self.boundary = self.config.boundary_char
        self._rng = rng if rng is not None else np.random.default_rng(self.config.seed)

        self._tables: dict[str, TransitionTable] = {}
        self._cursor: Optional[str] = None
        self._ready = False

    @classmethod
    def from_text(cls, text: str | bytes, config: Optional[ChainConfig] = None) -> "ChainModel":
        """Build a model straight from an in-memory corpus."""
        return cls(config).build(text)

    @classmethod
    def from_file(
        cls,
        path: str | Path,
        config: Optional[ChainConfig] = None,
        encoding: str = "utf-8",
    ) -> "ChainModel":
        """Read a corpus file and build a model from it."""
        return cls(config).build(load_corpus(path, encoding=encoding))

    @property
    def is_ready(self) -> bool:
        return self._ready

    @property
    def tables(self) -> Mapping[str, TransitionTable]:
        """Read-only view of the transition tables keyed by token."""
        return MappingProxyType(self._tables)

    def __len__(self) -> int:
        return len(self._tables)

    def __contains__(self, token: object) -> bool:
        return token in self._tables

    def num_tokens(self) -> int:
        """Number of distinct tokens with a transition table (start included)."""
        return len(self._tables)

    def table(self, token: Optional[str]) -> TransitionTable:
        """Transition table for `token`; None means the start table."""
        key = self.boundary if token is None else token
        try:
            return self._tables[key]
        except KeyError:
            raise KeyError(f"no transition table for {key!r}") from None

    def build(self, buffer: str | bytes) -> "ChainModel":
        """
        Build the chain from a whole corpus buffer.

        Any previous state is discarded. A corpus that does not end on a
        boundary gets one implicitly, so every word has a way to finish.

        Args:
            buffer: Corpus text (bytes are decoded as UTF-8)

        Returns:
            self, ready for sampling
        """
        self._ready = False
        self._cursor = None
        tables: dict[str, TransitionTable] = {self.boundary: TransitionTable(self.boundary)}

        def add_pair(curr: str, nxt: str) -> None:
            if curr not in tables:
                tables[curr] = TransitionTable(curr)
            tables[curr].observe(nxt)

        n_tokens = 0
        prev = self.boundary
        for token in Tokenizer(buffer, self.boundary):
            n_tokens += 1
            add_pair(prev, token)
            prev = token

        if prev != self.boundary:
            add_pair(prev, self.boundary)

        for table in tables.values():
            if table.total > 0:
                table.compile()

        self._tables = tables
        self._ready = True

        n_transitions = sum(t.total for t in tables.values())
        logger.info(f"Built chain: {n_tokens} tokens, {len(tables)} tables, {n_transitions} transitions")
        if n_transitions == 0:
            logger.warning("Corpus produced no transitions; the model has nothing to sample")
        return self

    def _check_build(self) -> None:
        if not self._ready:
            raise UsageError("model not built: call build() before sampling")

    def current(self) -> Optional[str]:
        """The cursor token, or None before the first step."""
        self._check_build()
        return self._cursor

    def at_boundary(self) -> bool:
        """True when the chain is at a natural stopping point."""
        self._check_build()
        return self._cursor is None or self._cursor == self.boundary

    def reset(self) -> None:
        """Move the cursor back to the start of a chain."""
        self._check_build()
        self._cursor = None

    def step(self) -> str:
        """Sample the successor of the cursor token and advance to it."""
        self._check_build()

        table = self.table(self._cursor)
        if table.total == 0:
            raise EmptyModelError("no transitions available: the corpus has no tokens")

        self._cursor = table.sample(self._rng)
        return self._cursor

    def generate(self, max_tokens: int, stop_at_boundary: bool = False) -> Iterator[str]:
        """
        Iterator over up to `max_tokens` tokens from repeated steps.

        Args:
            max_tokens: Upper bound on tokens produced
            stop_at_boundary: Stop after the first boundary token
        """
        if max_tokens < 0:
            raise ValueError("max_tokens must be >= 0")
        self._check_build()
        return self._generate(max_tokens, stop_at_boundary)

    def _generate(self, max_tokens: int, stop_at_boundary: bool) -> Iterator[str]:
        for _ in range(max_tokens):
            token = self.step()
            yield token
            if stop_at_boundary and token == self.boundary:
                break

    def spawn(self, seed: Optional[int] = None) -> "ChainModel":
        """
        New cursor over the same compiled tables with its own generator.

        The tables are read-only once compiled, so the spawned model can run
        on another thread. Rebuilding either model leaves the other intact.
        """
        self._check_build()
        child = ChainModel(ChainConfig(boundary_char=self.boundary, seed=seed))
        child._tables = self._tables
        child._ready = True
        return child

    def format_tokens(self, tokens: Iterable[str]) -> str:
        """Join words with spaces, turning boundary tokens into line breaks."""
        lines: list[list[str]] = [[]]
        for token in tokens:
            if token == self.boundary:
                lines.append([])
            else:
                lines[-1].append(token)
        return "\n".join(" ".join(words) for words in lines)

    def inspect(self) -> str:
        """Report of every table, start table first."""
        self._check_build()
        keys = [self.boundary] + sorted(k for k in self._tables if k != self.boundary)
        return "\n".join(self._tables[k].describe() for k in keys)
