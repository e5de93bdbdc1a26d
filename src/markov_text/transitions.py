"""Per-token successor counts and the categorical sampler built from them.

A table has two phases. While the corpus is read, ``observe`` only tallies
counts. ``compile`` then freezes a snapshot of those counts into an integer
cumulative-weight array, and ``sample`` draws from it in O(log k) for k
distinct successors. Observing again makes the table stale until the next
compile.
"""

from __future__ import annotations

from typing import Dict, List, Tuple

import numpy as np

from .errors import UsageError


class TransitionTable:
    """Observed successors of a single token."""

    def __init__(self, token: str):
        self.token = token
        self.counts: Dict[str, int] = {}
        self.total = 0

        self._successors: List[str] = []
        self._cumulative: np.ndarray = np.zeros(0, dtype=np.int64)
        self._distribution: List[Tuple[str, float]] = []
        self._compiled = False

    def __len__(self) -> int:
        return len(self.counts)

    def __repr__(self) -> str:
        return f"TransitionTable({self.token!r}, successors={len(self)}, total={self.total})"

    @property
    def is_compiled(self) -> bool:
        """False before the first compile and after any later observe."""
        return self._compiled

    @property
    def successors(self) -> List[str]:
        return list(self._successors)

    @property
    def distribution(self) -> List[Tuple[str, float]]:
        """(successor, probability) pairs from the last compile."""
        if not self._compiled:
            raise UsageError(f"transition table for {self.token!r} is not compiled")
        return list(self._distribution)

    def observe(self, successor: str) -> None:
        self.counts[successor] = self.counts.get(successor, 0) + 1
        self.total += 1
        self._compiled = False

    def compile(self) -> None:
        """Rebuild the sampling distribution from the current counts.

        Successors are ordered by their string value, so compiling the same
        counts twice gives identical arrays regardless of observation order.
        """
        if self.total == 0:
            raise UsageError(f"cannot compile {self.token!r}: no observed transitions")

        successors = sorted(self.counts)
        weights = np.array([self.counts[s] for s in successors], dtype=np.int64)

        self._successors = successors
        self._cumulative = np.cumsum(weights)
        self._distribution = [(s, int(w) / self.total) for s, w in zip(successors, weights)]
        self._compiled = True

    def sample(self, rng: np.random.Generator) -> str:
        """Draw one successor; each is returned with probability count/total."""
        if not self._compiled:
            raise UsageError(
                f"transition table for {self.token!r} must be compiled before sampling"
            )
        draw = rng.integers(int(self._cumulative[-1]))
        idx = int(np.searchsorted(self._cumulative, draw, side="right"))
        return self._successors[idx]

    def probability(self, successor: str) -> float:
        if self.total == 0:
            return 0.0
        return self.counts.get(successor, 0) / self.total

    def describe(self) -> str:
        """Report each successor with its count and probability."""
        lines = [_show(self.token)]
        prob_sum = 0.0
        for successor in sorted(self.counts):
            count = self.counts[successor]
            p = count / self.total
            prob_sum += p
            lines.append(f"\t -> {_show(successor)} probability ({count} / {self.total}): {p:.6g}")
        lines.append(
            f"\t total transitions: {sum(self.counts.values())} / {self.total} => {prob_sum:.6g}"
        )
        return "\n".join(lines)


def _show(token: str) -> str:
    # Quote tokens so boundary and whitespace characters stay visible.
    return repr(token)
