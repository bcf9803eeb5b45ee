"""Base particle system with metric access and connectivity checks."""

from __future__ import annotations

import threading
from abc import ABC, abstractmethod
from collections import deque
from datetime import datetime
from typing import Iterable, Iterator, Sequence

from amoebot.metric import Count, Measure
from amoebot.node import Node
from amoebot.objects import SolidObject
from amoebot.particle import Particle


class MetricNotFoundError(LookupError):
    """Raised when a count or measure with the requested name does not exist."""


def _format_number(value: float) -> str:
    if isinstance(value, int):
        return str(value)
    return format(value, "g")


class System(ABC):
    """A collection of particles and objects that can be activated."""

    def __init__(self) -> None:
        self.mutex = threading.RLock()

    @abstractmethod
    def activate(self) -> None:
        """Activate one particle of the system."""

    @abstractmethod
    def activate_particle_at(self, node: Node) -> None:
        """Activate the particle occupying `node`, if any."""

    @abstractmethod
    def __len__(self) -> int:
        """Number of particles in the system."""

    @abstractmethod
    def at(self, index: int) -> Particle:
        """Return the particle at the given index."""

    @abstractmethod
    def get_objects(self) -> Sequence[SolidObject]:
        """Return the objects in the system."""

    @abstractmethod
    def get_counts(self) -> Sequence[Count]:
        """Return the system's counts."""

    @abstractmethod
    def get_measures(self) -> Sequence[Measure]:
        """Return the system's measures."""

    def num_objects(self) -> int:
        return len(self.get_objects())

    def __iter__(self) -> Iterator[Particle]:
        for index in range(len(self)):
            yield self.at(index)

    def get_count(self, name: str) -> Count:
        for count in self.get_counts():
            if count.name == name:
                return count
        raise MetricNotFoundError(f"no count named {name!r}")

    def get_measure(self, name: str) -> Measure:
        for measure in self.get_measures():
            if measure.name == name:
                return measure
        raise MetricNotFoundError(f"no measure named {name!r}")

    def metrics_as_json(self) -> str:
        """Format the count and measure histories as a JSON string."""
        stamp = datetime.now().strftime("%Y-%m-%d %H:%M:%S")
        counts = ", ".join(
            '{"name" : "%s", "history" : [%s]}'
            % (c.name, ", ".join(_format_number(v) for v in c.history))
            for c in self.get_counts()
        )
        measures = ", ".join(
            '{"name" : "%s", "frequency" : %d, "history" : [%s]}'
            % (m.name, m.freq, ", ".join(_format_number(v) for v in m.history))
            for m in self.get_measures()
        )
        return (
            '{"title" : "AmoebotSim Metrics JSON", '
            f'"datetime" : "{stamp}", '
            '"algorithm" : "???", '
            f'"counts" : [{counts}], "measures" : [{measures}]}}'
        )

    def has_terminated(self) -> bool:
        return False

    @staticmethod
    def is_connected(particles: Iterable[Particle]) -> bool:
        """Check whether the occupied nodes form one connected component."""
        occupied: set[Node] = set()
        for p in particles:
            occupied.add(p.head)
            if p.is_expanded():
                occupied.add(p.tail())
        if not occupied:
            return True

        start = min(occupied)
        occupied.discard(start)
        queue = deque([start])
        while queue:
            node = queue.popleft()
            for direction in range(6):
                neighbour = node.node_in_dir(direction)
                if neighbour in occupied:
                    occupied.discard(neighbour)
                    queue.append(neighbour)
        return not occupied