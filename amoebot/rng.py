"""Shared random number generator for particles and systems."""

from __future__ import annotations

import random
from typing import MutableSequence, TypeVar

T = TypeVar("T")

_rng = random.Random()


def seed(value: int) -> None:
    """Reseed the shared generator."""
    _rng.seed(value)


def rand_int(start: int, stop: int) -> int:
    """Uniform integer in [start, stop)."""
    if stop <= start:
        raise ValueError("empty range for rand_int")
    return _rng.randrange(start, stop)


def rand_dir() -> int:
    """Uniform direction in 0..5."""
    return rand_int(0, 6)


def rand_float(start: float, stop: float) -> float:
    """Uniform real number in [start, stop)."""
    return start + (stop - start) * _rng.random()


def rand_double(start: float, stop: float) -> float:
    """Uniform real number in [start, stop)."""
    return rand_float(start, stop)


def rand_bool(true_prob: float = 0.5) -> bool:
    """True with probability `true_prob`."""
    return rand_float(0.0, 1.0) < true_prob


def shuffle(items: MutableSequence[T]) -> None:
    """Shuffle a sequence in place."""
    _rng.shuffle(items)