"""Small helpers shared by the opponent, the session and the arena."""
from __future__ import annotations

from typing import Optional, Sequence, TypeVar

import numpy as np

from .game import Mark, O, X

T = TypeVar("T")


def opponent(mark: Mark) -> Mark:
    return O if mark == X else X


def make_rng(seed: Optional[int] = None) -> np.random.Generator:
    """Return a generator seeded with ``seed`` (fresh entropy when ``None``)."""

    if seed is None:
        return np.random.default_rng()
    return np.random.default_rng(seed % (2**32))


def uniform_choice(rng: np.random.Generator, items: Sequence[T]) -> T:
    if not items:
        raise ValueError("cannot choose from an empty sequence")
    return items[int(rng.integers(len(items)))]


__all__ = ["make_rng", "opponent", "uniform_choice"]
