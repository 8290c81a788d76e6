# catacomb_random.py
# Seeded random helpers: every room is rebuilt from its number alone

import math
import random
from typing import Callable, Sequence, TypeVar

from catacomb_errors import EmptyInputError

T = TypeVar("T")

RandomFn = Callable[[], float]


def seeded_random(seed: str) -> RandomFn:
    """
    Return a generator of floats in [0, 1) keyed by a string seed.
    The same seed always gives the same stream, on every platform.
    """
    return random.Random(seed).random


def random_int(min_value: int, max_value: int, rng: RandomFn = random.random) -> int:
    """Uniform integer in [min_value, max_value] (one draw)."""
    if max_value < min_value:
        raise EmptyInputError(f"Empty range [{min_value}, {max_value}]")
    return math.floor(rng() * (max_value - min_value + 1)) + min_value


def pick_one(values: Sequence[T], rng: RandomFn = random.random) -> T:
    if not values:
        raise EmptyInputError("Cannot pick from an empty sequence")
    return values[random_int(0, len(values) - 1, rng)]


def shuffle(values: list[T], rng: RandomFn = random.random, new_list: bool = False) -> list[T]:
    """
    Fisher-Yates shuffle.

    Walks from the last index down to 1 and swaps index i with
    floor(rng() * (i + 1)), so a list of n values consumes n - 1 draws.
    Shuffles in place unless new_list is set.
    """
    collection = list(values) if new_list else values

    for i in range(len(collection) - 1, 0, -1):
        j = math.floor(rng() * (i + 1))
        collection[i], collection[j] = collection[j], collection[i]

    return collection
