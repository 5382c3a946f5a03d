"""
PURPOSE: Explicit random source for the Monte Carlo engine.

The engine never touches numpy's global generator. Every run receives its own
source of uniform draws, so two runs with the same seed and inputs produce
bit-identical results, and concurrent runs share no state.
"""

from typing import Optional, Protocol, Union

import numpy as np


class RandomSource(Protocol):
    """Anything that yields uniform floats in [0, 1).

    numpy.random.Generator satisfies this protocol.
    """

    def random(self, size=None):
        ...


SeedLike = Union[int, np.random.Generator, None]


def make_random_source(random_source: Optional[Union[SeedLike, RandomSource]] = None) -> RandomSource:
    """
    Normalize a seed or an existing source into a RandomSource.

    Args:
        random_source: None for a fresh OS-seeded generator, an int seed,
            a numpy Generator, or any object with a random(size) method.

    Returns:
        An object with a random(size) method.
    """
    if isinstance(random_source, bool):
        raise TypeError("random_source must be a seed or a random source, got bool")
    if random_source is None or isinstance(random_source, (int, np.integer)):
        return np.random.default_rng(random_source)
    if callable(getattr(random_source, "random", None)):
        return random_source
    raise TypeError(f"random_source must be a seed or have a random(size) method, got {type(random_source)}")
