"""Pluggable randomness for catalog sampling.

Catalog lookups pick random entries from a subcategory. All such picks
go through a ``RandomSource`` so tests can substitute a deterministic
sequence. The production source is unseeded unless a seed is given,
so repeated calls intentionally vary.
"""

from __future__ import annotations

from typing import Protocol, Sequence, TypeVar

import numpy as np

T = TypeVar("T")


class RandomSource(Protocol):
    """Anything that can pick an index in ``range(n)``."""

    def choice_index(self, n: int) -> int:
        ...


class NumpyRandomSource:
    """RandomSource backed by a numpy ``Generator``."""

    def __init__(self, seed: int | None = None, generator: np.random.Generator | None = None) -> None:
        self._rng = generator if generator is not None else np.random.default_rng(seed)

    def choice_index(self, n: int) -> int:
        if n <= 0:
            raise ValueError("Cannot choose from an empty sequence")
        return int(self._rng.integers(0, n))


def pick(rng: RandomSource, items: Sequence[T]) -> T:
    """Choose one item from a non-empty sequence using ``rng``."""
    return items[rng.choice_index(len(items))]
