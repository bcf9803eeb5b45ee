"""Counts and measures capturing system progress."""

from __future__ import annotations

from abc import ABC, abstractmethod


class Count:
    """A named event counter, starting at zero, with a per-round history."""

    def __init__(self, name: str) -> None:
        self.name = name
        self.value = 0
        self.history: list[int] = []

    def record(self, num_events: int = 1) -> None:
        """Add the number of events being recorded to the count."""
        if num_events < 0:
            raise ValueError("number of events must be non-negative")
        self.value += num_events


class Measure(ABC):
    """A named quantity computed over the whole system every `freq` rounds."""

    def __init__(self, name: str, freq: int) -> None:
        if freq <= 0:
            raise ValueError("measure frequency must be positive")
        self.name = name
        self.freq = freq
        self.history: list[float] = []

    @abstractmethod
    def calculate(self) -> float:
        """Compute the current value of the measure."""