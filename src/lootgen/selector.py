from typing import Sequence, TypeVar

import numpy as np

from lootgen.host import RandomSource

T = TypeVar("T")


def choose_weighted(candidates: Sequence[tuple[T, float]], rng: RandomSource) -> T:
    """
    Pick one candidate with probability proportional to its weight.

    A uniform `r` in `[0, total)` selects the first candidate whose cumulative
    weight exceeds it, so zero weight candidates are never chosen.
    :param candidates: (candidate, weight) pairs, weights >= 0
    :param rng: source of uniform floats in `[0, 1)`
    """
    if not candidates:
        raise ValueError("Cannot choose from an empty set of candidates.")

    weights = np.array([weight for _, weight in candidates], dtype=float)
    if (weights < 0).any():
        raise ValueError(f"Weights must be non-negative, got {weights.tolist()}.")

    cumulative = weights.cumsum()
    total = cumulative[-1]
    if total <= 0:
        raise ValueError("At least one candidate must have a positive weight.")

    r = rng.uniform() * total
    index = int(np.searchsorted(cumulative, r, side="right"))
    if index >= len(candidates):
        # r landed on the upper bound through float rounding
        index = int(np.flatnonzero(weights)[-1])
    return candidates[index][0]


def choose_uniform(elements: Sequence[T], rng: RandomSource) -> T:
    if not elements:
        raise ValueError("Cannot choose from an empty sequence.")
    return elements[min(int(rng.uniform() * len(elements)), len(elements) - 1)]
