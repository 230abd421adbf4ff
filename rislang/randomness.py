"""Pseudo-random numbers and shuffling, seeded from the operating system."""

from __future__ import annotations

import random
from typing import MutableSequence, TypeVar

T = TypeVar("T")

_MAX_INT63 = (1 << 63) - 1

# random.Random() with no seed draws its seed from os.urandom.
_rng = random.Random()


def _as_int(value: object) -> int:
    if isinstance(value, bool) or not isinstance(value, int):
        raise TypeError(f"type error: expected an int (got {type(value).__name__})")
    return value


def random_float() -> float:
    """A float in the half-open interval [0.0, 1.0)."""
    return _rng.random()


def random_int() -> int:
    """A non-negative integer that fits in 63 bits."""
    return _rng.randint(0, _MAX_INT63)


def random_intn(n: int) -> int:
    """A non-negative integer less than ``n``; ``n`` must be positive."""
    limit = _as_int(n)
    if limit <= 0:
        raise ValueError("value error: rand.intn argument must be positive")
    return _rng.randrange(limit)


def norm_float() -> float:
    """A normally distributed float with mean 0 and standard deviation 1."""
    return _rng.gauss(0.0, 1.0)


def exp_float() -> float:
    """An exponentially distributed float with rate 1."""
    return _rng.expovariate(1.0)


def shuffle(items: MutableSequence[T]) -> MutableSequence[T]:
    """Shuffle a list in place and return it."""
    if not isinstance(items, list):
        raise TypeError(f"type error: expected a list (got {type(items).__name__})")
    _rng.shuffle(items)
    return items