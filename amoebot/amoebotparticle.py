"""Particles that obey the amoebot model, independent of any algorithm.

Objects are not members of the particle system, but particles can sense
neighbouring objects through ``has_object_at_label`` and ``has_object_nbr``.
"""

from __future__ import annotations

from abc import abstractmethod
from collections import deque
from typing import Callable, Mapping, MutableMapping, Protocol, TypeVar

from amoebot.localparticle import LocalParticle
from amoebot.node import Node
from amoebot.objects import SolidObject
from amoebot.particle import Particle

P = TypeVar("P", bound=Particle)
T = TypeVar("T", bound="Token")


class ParticleHost(Protocol):
    """What a particle needs from the system it belongs to."""

    particle_map: MutableMapping[Node, AmoebotParticle]
    object_map: Mapping[Node, SolidObject]

    def register_movement(self, num_moves: int = 1) -> None: ...

    def register_activation(self, particle: AmoebotParticle) -> None: ...


class Token:
    """Base class for tokens carried by particles."""


class TokenNotFoundError(LookupError):
    """Raised when a particle holds no token of the requested kind."""


def _check_label(label: int, limit: int) -> None:
    if not 0 <= label < limit:
        raise ValueError(f"label must be in 0..{limit - 1}, got {label}")


class AmoebotParticle(LocalParticle):
    """A particle that moves by expansions, contractions and handovers."""

    def __init__(
        self,
        head: Node,
        global_tail_dir: int,
        orientation: int,
        system: ParticleHost,
    ) -> None:
        super().__init__(head, global_tail_dir, orientation)
        self.system = system
        self._tokens: deque[Token] = deque()

    @abstractmethod
    def activate(self) -> None:
        """Execute one activation of this particle."""

    # Direction markers for drawing.

    def _mark_to_global(self, direction: int) -> int:
        if not -1 <= direction < 6:
            raise ValueError(f"mark direction must be in -1..5, got {direction}")
        return -1 if direction == -1 else self.local_to_global_dir(direction)

    def head_mark_global_dir(self) -> int:
        """Global direction of the head marker, -1 for none."""
        return self._mark_to_global(self.head_mark_dir())

    def tail_mark_global_dir(self) -> int:
        """Global direction of the tail marker, -1 for none."""
        return self._mark_to_global(self.tail_mark_dir())

    def head_mark_dir(self) -> int:
        """Local direction of the head marker; override to draw one."""
        return -1

    def tail_mark_dir(self) -> int:
        """Local direction of the tail marker; override to draw one."""
        return -1

    # Movement.

    def can_expand(self, label: int) -> bool:
        """Whether the particle is contracted and the labelled node is free."""
        _check_label(label, 6)
        return (
            self.is_contracted()
            and not self.has_nbr_at_label(label)
            and not self.has_object_at_label(label)
        )

    def expand(self, label: int) -> None:
        if not self.can_expand(label):
            raise ValueError(f"cannot expand along label {label}")
        direction = self.local_to_global_dir(label)
        self.head = self.head.node_in_dir(direction)
        self.global_tail_dir = (direction + 3) % 6
        self.system.particle_map[self.head] = self
        self.system.register_movement()

    def can_push(self, label: int) -> bool:
        """Whether the particle is contracted and faces an expanded neighbour."""
        _check_label(label, 6)
        return (
            self.is_contracted()
            and self.has_nbr_at_label(label)
            and self.nbr_at_label(label).is_expanded()
        )

    def push(self, label: int) -> None:
        """Expand into a node of an expanded neighbour, which contracts."""
        if not self.can_push(label):
            raise ValueError(f"cannot push along label {label}")
        direction = self.local_to_global_dir(label)
        handover = self.head.node_in_dir(direction)
        neighbour = self.nbr_at_label(label, AmoebotParticle)

        self.head = handover
        self.global_tail_dir = (direction + 3) % 6
        self.system.particle_map[handover] = self

        if handover == neighbour.head:
            neighbour.head = neighbour.tail()
        neighbour.global_tail_dir = -1

        self.system.register_movement(2)
        self.system.register_activation(neighbour)

    def contract(self, label: int) -> None:
        """Contract into the head or tail, chosen by the contraction label."""
        _check_label(label, 10)
        if label == self.head_contraction_label():
            self.contract_head()
        elif label == self.tail_contraction_label():
            self.contract_tail()
        else:
            raise ValueError(f"label {label} is not a contraction label")

    def contract_head(self) -> None:
        """Contract into the tail node, releasing the head node."""
        self._require_expanded()
        self.system.particle_map.pop(self.head, None)
        self.head = self.tail()
        self.global_tail_dir = -1
        self.system.register_movement()

    def contract_tail(self) -> None:
        """Contract into the head node, releasing the tail node."""
        self._require_expanded()
        self.system.particle_map.pop(self.tail(), None)
        self.global_tail_dir = -1
        self.system.register_movement()

    def can_pull(self, label: int) -> bool:
        """Whether the particle is expanded and faces a contracted neighbour."""
        _check_label(label, 10)
        return (
            self.is_expanded()
            and self.has_nbr_at_label(label)
            and self.nbr_at_label(label).is_contracted()
        )

    def pull(self, label: int) -> None:
        """Contract and hand the released node to a contracted neighbour."""
        if not self.can_pull(label):
            raise ValueError(f"cannot pull along label {label}")
        pull_dir = self.label_to_global_dir(label)
        head_side = self.is_head_label(label)
        handover = self.head if head_side else self.tail()
        neighbour = self.nbr_at_label(label, AmoebotParticle)

        if head_side:
            self.head = self.tail()
        self.global_tail_dir = -1

        neighbour.head = handover
        neighbour.global_tail_dir = pull_dir
        self.system.particle_map[handover] = neighbour

        self.system.register_movement(2)
        self.system.register_activation(neighbour)

    # Neighbourhood.

    def nbr_at_label(self, label: int, particle_type: type[P] | None = None) -> P:
        """The neighbour reached via the label; fails if there is none."""
        node = self.nbr_node_reached_via_label(label)
        particle = self.system.particle_map.get(node)
        if particle is None:
            raise LookupError(f"no neighbour at label {label}")
        expected = particle_type if particle_type is not None else Particle
        if not isinstance(particle, expected):
            raise TypeError(
                f"neighbour at label {label} is not a {expected.__name__}"
            )
        return particle  # type: ignore[return-value]

    def has_nbr_at_label(self, label: int) -> bool:
        return self.nbr_node_reached_via_label(label) in self.system.particle_map

    def has_head_at_label(self, label: int) -> bool:
        """Whether a neighbour's head occupies the labelled node."""
        return (
            self.has_nbr_at_label(label)
            and self.nbr_at_label(label).head == self.nbr_node_reached_via_label(label)
        )

    def has_tail_at_label(self, label: int) -> bool:
        """Whether an expanded neighbour's tail occupies the labelled node."""
        if not self.has_nbr_at_label(label):
            return False
        neighbour = self.nbr_at_label(label)
        if neighbour.is_contracted():
            return False
        return neighbour.tail() == self.nbr_node_reached_via_label(label)

    def has_object_at_label(self, label: int) -> bool:
        return self.nbr_node_reached_via_label(label) in self.system.object_map

    def has_object_nbr(self) -> bool:
        return self.label_of_first_object_nbr() != -1

    def _labels_from(self, start_label: int) -> list[int]:
        limit = self._label_limit()
        return [(start_label + offset) % limit for offset in range(limit)]

    def label_of_first_object_nbr(self, start_label: int = 0) -> int:
        """First label, counter-clockwise from ``start_label``, facing an object."""
        return next(
            (
                label
                for label in self._labels_from(start_label)
                if self.has_object_at_label(label)
            ),
            -1,
        )

    def label_of_first_nbr_with_property(
        self,
        property_check: Callable[[P], bool],
        start_label: int = 0,
        particle_type: type[P] | None = None,
    ) -> int:
        """First label, counter-clockwise, facing a neighbour passing the check."""
        for label in self._labels_from(start_label):
            if self.has_nbr_at_label(label) and property_check(
                self.nbr_at_label(label, particle_type)
            ):
                return label
        return -1

    # Tokens.

    def put_token(self, token: Token) -> None:
        self._tokens.append(token)

    def _matching(
        self, token_type: type[T], property_check: Callable[[T], bool] | None
    ):
        for index, token in enumerate(self._tokens):
            if isinstance(token, token_type) and (
                property_check is None or property_check(token)
            ):
                yield index, token

    def peek_at_token(
        self,
        token_type: type[T],
        property_check: Callable[[T], bool] | None = None,
    ) -> T:
        """The first held token of the type (and property); fails if none."""
        for _, token in self._matching(token_type, property_check):
            return token
        raise TokenNotFoundError(f"no token of type {token_type.__name__}")

    def take_token(
        self,
        token_type: type[T],
        property_check: Callable[[T], bool] | None = None,
    ) -> T:
        """Like ``peek_at_token`` but also removes the token."""
        for index, token in self._matching(token_type, property_check):
            self._tokens[0], self._tokens[index] = self._tokens[index], self._tokens[0]
            self._tokens.popleft()
            return token
        raise TokenNotFoundError(f"no token of type {token_type.__name__}")

    def count_tokens(
        self,
        token_type: type[T],
        property_check: Callable[[T], bool] | None = None,
    ) -> int:
        return sum(1 for _ in self._matching(token_type, property_check))

    def has_token(
        self,
        token_type: type[T],
        property_check: Callable[[T], bool] | None = None,
    ) -> bool:
        return any(True for _ in self._matching(token_type, property_check))