"""Particle system that obeys the amoebot model, independent of any algorithm."""

from __future__ import annotations

from typing import Sequence

from amoebot import rng
from amoebot.amoebotparticle import AmoebotParticle
from amoebot.metric import Count, Measure
from amoebot.node import Node
from amoebot.objects import SolidObject
from amoebot.system import System

ROUNDS = "# Rounds"
ACTIVATIONS = "# Activations"
MOVES = "# Moves"


class AmoebotSystem(System):
    """Holds particles and objects, activates particles and tracks metrics."""

    def __init__(self) -> None:
        super().__init__()
        self.particles: list[AmoebotParticle] = []
        self.particle_map: dict[Node, AmoebotParticle] = {}
        self.activated_particles: set[AmoebotParticle] = set()
        self.objects: list[SolidObject] = []
        self.object_map: dict[Node, SolidObject] = {}
        self._counts: list[Count] = [Count(ROUNDS), Count(ACTIVATIONS), Count(MOVES)]
        self._measures: list[Measure] = []

    # Activation.

    def activate(self) -> None:
        """Activate a particle chosen uniformly at random, if there is one."""
        if self.particles:
            particle = self.particles[rng.rand_int(0, len(self.particles))]
            self.register_activation(particle)
            particle.activate()

    def activate_particle_at(self, node: Node) -> None:
        """Activate the particle occupying `node`, if any."""
        particle = self.particle_map.get(node)
        if particle is not None:
            self.register_activation(particle)
            particle.activate()

    # Contents.

    def __len__(self) -> int:
        return len(self.particles)

    def num_objects(self) -> int:
        return len(self.objects)

    def at(self, index: int) -> AmoebotParticle:
        return self.particles[index]

    def get_objects(self) -> Sequence[SolidObject]:
        return self.objects

    def _check_free(self, node: Node) -> None:
        if node in self.particle_map:
            raise ValueError(f"node {node} is already occupied by a particle")
        if node in self.object_map:
            raise ValueError(f"node {node} is already occupied by an object")

    def insert(self, particle: AmoebotParticle) -> None:
        """Insert a contracted or expanded particle; its nodes must be free."""
        self._check_free(particle.head)
        if particle.is_expanded():
            self._check_free(particle.tail())
        self.particles.append(particle)
        self.particle_map[particle.head] = particle
        if particle.is_expanded():
            self.particle_map[particle.tail()] = particle

    def insert_object(self, obj: SolidObject) -> None:
        """Insert an object; its node must be free."""
        self._check_free(obj.node)
        self.objects.append(obj)
        self.object_map[obj.node] = obj

    def remove(self, particle: AmoebotParticle) -> None:
        """Remove the particle and every node it occupies from the system."""
        self.particles = [p for p in self.particles if p is not particle]
        for node in [n for n, p in self.particle_map.items() if p is particle]:
            del self.particle_map[node]
        self.activated_particles.discard(particle)

    # Progress logging.

    def register_movement(self, num_moves: int = 1) -> None:
        self.get_count(MOVES).record(num_moves)

    def register_activation(self, particle: AmoebotParticle) -> None:
        """Log an activation; completes a round once every particle was active."""
        self.get_count(ACTIVATIONS).record()
        self.activated_particles.add(particle)
        if len(self.activated_particles) == len(self.particles):
            self.register_round()
            self.activated_particles.clear()

    def register_round(self) -> None:
        """Commit counts and due measures to their histories; count the round."""
        for count in self._counts:
            count.history.append(count.value)
        rounds = self.get_count(ROUNDS)
        for measure in self._measures:
            if rounds.value % measure.freq == 0:
                measure.history.append(measure.calculate())
        rounds.record()

    # Metrics.

    def get_counts(self) -> Sequence[Count]:
        return self._counts

    def get_measures(self) -> Sequence[Measure]:
        return self._measures

    def get_count(self, name: str) -> Count:
        return super().get_count(name)

    def get_measure(self, name: str) -> Measure:
        return super().get_measure(name)

    def add_measure(self, measure: Measure) -> None:
        """Track an additional measure."""
        self._measures.append(measure)

    def metrics_as_json(self) -> str:
        return super().metrics_as_json()