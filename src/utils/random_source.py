"""
Uniform integer source used for shape generation.

random_int(max) returns an integer in [0, max) for max > 0. Callers
inject their own source (tests pass a seeded random.Random's randrange).
"""

import random
from typing import Callable

RandomInt = Callable[[int], int]


def default_random_int(max_value: int) -> int:
    """Module-level PRNG, no reproducibility guarantee"""
    return random.randrange(max_value)


def seeded_random_int(seed: int) -> RandomInt:
    """Reproducible source for tests and dry runs"""
    return random.Random(seed).randrange
