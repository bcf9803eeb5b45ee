"""Particles that see only local compass directions and port labels.

Directions are numbers in 0..5. Global direction 0 points right on the
lattice and the others follow in turn. A particle's local direction is
``(global_dir - orientation) % 6``. Labels name the edges between a particle
and its neighbouring nodes: 0..5 for a contracted particle and 0..9 for an
expanded one. They run counter-clockwise from label 0, which points in local
direction 0, away from the particle.
"""

from __future__ import annotations

from amoebot.node import Node
from amoebot.particle import Particle

_SIX_LABELS: tuple[int, ...] = (0, 1, 2, 3, 4, 5)

# Head labels of an expanded particle, indexed by its local tail direction.
_LABELS: tuple[tuple[int, ...], ...] = (
    (3, 4, 5, 6, 7),
    (4, 5, 6, 7, 8),
    (7, 8, 9, 0, 1),
    (8, 9, 0, 1, 2),
    (9, 0, 1, 2, 3),
    (2, 3, 4, 5, 6),
)

_CONTRACT_LABELS: tuple[int, ...] = (0, 1, 4, 5, 6, 9)

# Local direction of each label of an expanded particle, by local tail direction.
_LABEL_DIR: tuple[tuple[int, ...], ...] = (
    (0, 1, 2, 1, 2, 3, 4, 5, 4, 5),
    (0, 1, 2, 3, 2, 3, 4, 5, 0, 5),
    (0, 1, 0, 1, 2, 3, 4, 3, 4, 5),
    (0, 1, 2, 1, 2, 3, 4, 5, 4, 5),
    (0, 1, 2, 3, 2, 3, 4, 5, 0, 5),
    (0, 1, 0, 1, 2, 3, 4, 3, 4, 5),
)


def _check_dir(direction: int, what: str = "direction") -> None:
    if not 0 <= direction < 6:
        raise ValueError(f"{what} must be in 0..5, got {direction}")


def _check_label(label: int, limit: int = 10) -> None:
    if not 0 <= label < limit:
        raise ValueError(f"label must be in 0..{limit - 1}, got {label}")


class LocalParticle(Particle):
    """A particle with a local compass offset by ``orientation``."""

    def __init__(
        self, head: Node | None = None, global_tail_dir: int = -1, orientation: int = 0
    ) -> None:
        super().__init__(head, global_tail_dir)
        _check_dir(orientation, "orientation")
        self._orientation = orientation

    @property
    def orientation(self) -> int:
        """Offset of the local compass from the global one."""
        return self._orientation

    def _require_expanded(self) -> None:
        if self.is_contracted():
            raise ValueError("operation requires an expanded particle")

    def _require_contracted(self) -> None:
        if self.is_expanded():
            raise ValueError("operation requires a contracted particle")

    def _label_limit(self) -> int:
        return 6 if self.is_contracted() else 10

    def tail_dir(self) -> int:
        """Local direction from head to tail, -1 if contracted."""
        if self.is_contracted():
            return -1
        return self.global_to_local_dir(self.global_tail_dir)

    def label_to_dir(self, label: int) -> int:
        """Local direction the edge with the given label points to."""
        if self.is_contracted():
            _check_label(label, 6)
            return label
        _check_label(label)
        return _LABEL_DIR[self.tail_dir()][label]

    def label_to_dir_after_expansion(self, label: int, expansion_dir: int) -> int:
        """Local direction of a label after expanding in ``expansion_dir``."""
        self._require_contracted()
        _check_label(label)
        _check_dir(expansion_dir, "expansion_dir")
        return _LABEL_DIR[(expansion_dir + 3) % 6][label]

    def unique_labels(self) -> list[int]:
        """Labels that address each neighbouring node exactly once."""
        if self.is_contracted():
            return list(_SIX_LABELS)
        return [
            label
            for label in range(10)
            if self.nbr_node_reached_via_label(label)
            != self.nbr_node_reached_via_label((label + 9) % 10)
        ]

    def head_labels(self) -> tuple[int, ...]:
        """Labels of edges incident to the head."""
        if self.is_contracted():
            return _SIX_LABELS
        return _LABELS[self.tail_dir()]

    def tail_labels(self) -> tuple[int, ...]:
        """Labels of edges incident to the tail; the particle must be expanded."""
        self._require_expanded()
        return _LABELS[(self.tail_dir() + 3) % 6]

    def is_head_label(self, label: int) -> bool:
        _check_label(label)
        return label in self.head_labels()

    def is_tail_label(self, label: int) -> bool:
        self._require_expanded()
        _check_label(label)
        return label in self.tail_labels()

    def dir_to_head_label(self, direction: int) -> int:
        """Head label of the edge pointing in the given local direction."""
        _check_dir(direction)
        for label in self.head_labels():
            if self.label_to_dir(label) == direction:
                return label
        raise ValueError(f"no head label points in direction {direction}")

    def dir_to_tail_label(self, direction: int) -> int:
        """Tail label of the edge pointing in the given local direction."""
        self._require_expanded()
        _check_dir(direction)
        for label in self.tail_labels():
            if self.label_to_dir(label) == direction:
                return label
        raise ValueError(f"no tail label points in direction {direction}")

    def head_contraction_label(self) -> int:
        """Label used to contract into the head."""
        self._require_expanded()
        return _CONTRACT_LABELS[self.tail_dir()]

    def tail_contraction_label(self) -> int:
        """Label used to contract into the tail."""
        self._require_expanded()
        return _CONTRACT_LABELS[(self.tail_dir() + 3) % 6]

    def head_labels_after_expansion(self, expansion_dir: int) -> tuple[int, ...]:
        self._require_contracted()
        _check_dir(expansion_dir, "expansion_dir")
        return _LABELS[(expansion_dir + 3) % 6]

    def tail_labels_after_expansion(self, expansion_dir: int) -> tuple[int, ...]:
        self._require_contracted()
        _check_dir(expansion_dir, "expansion_dir")
        return _LABELS[expansion_dir]

    def is_head_label_after_expansion(self, label: int, expansion_dir: int) -> bool:
        return label in self.head_labels_after_expansion(expansion_dir)

    def is_tail_label_after_expansion(self, label: int, expansion_dir: int) -> bool:
        return label in self.tail_labels_after_expansion(expansion_dir)

    def dir_to_head_label_after_expansion(
        self, direction: int, expansion_dir: int
    ) -> int:
        _check_dir(direction)
        for label in self.head_labels_after_expansion(expansion_dir):
            if self.label_to_dir_after_expansion(label, expansion_dir) == direction:
                return label
        raise ValueError(f"no head label points in direction {direction}")

    def dir_to_tail_label_after_expansion(
        self, direction: int, expansion_dir: int
    ) -> int:
        _check_dir(direction)
        for label in self.tail_labels_after_expansion(expansion_dir):
            if self.label_to_dir_after_expansion(label, expansion_dir) == direction:
                return label
        raise ValueError(f"no tail label points in direction {direction}")

    def head_contraction_label_after_expansion(self, expansion_dir: int) -> int:
        self._require_contracted()
        _check_dir(expansion_dir, "expansion_dir")
        return _CONTRACT_LABELS[(expansion_dir + 3) % 6]

    def tail_contraction_label_after_expansion(self, expansion_dir: int) -> int:
        self._require_contracted()
        _check_dir(expansion_dir, "expansion_dir")
        return _CONTRACT_LABELS[expansion_dir]

    def label_to_global_dir(self, label: int) -> int:
        """Global direction the edge with the given label points to."""
        _check_label(label)
        return self.local_to_global_dir(self.label_to_dir(label))

    def label_of_nbr_node_in_global_dir(self, node: Node, global_dir: int) -> int:
        """Label of the edge in ``global_dir`` that reaches ``node``."""
        _check_dir(global_dir, "global_dir")
        for label in range(self._label_limit()):
            if (
                self.label_to_global_dir(label) == global_dir
                and self.nbr_node_reached_via_label(label) == node
            ):
                return label
        raise ValueError(f"{node} is not reached in global direction {global_dir}")

    def occupied_node_incident_to_label(self, label: int) -> Node:
        """The head if ``label`` is a head label, otherwise the tail."""
        if self.is_contracted():
            _check_label(label, 6)
            return self.head
        _check_label(label)
        return self.head if self.is_head_label(label) else self.tail()

    def nbr_node_reached_via_label(self, label: int) -> Node:
        """The neighbouring node reached over the edge with the given label."""
        if self.is_contracted():
            _check_label(label, 6)
            return self.head.node_in_dir((self._orientation + label) % 6)
        _check_label(label)
        incident = self.occupied_node_incident_to_label(label)
        return incident.node_in_dir(self.label_to_global_dir(label))

    def local_to_global_dir(self, local_dir: int) -> int:
        _check_dir(local_dir, "local_dir")
        return (self._orientation + local_dir) % 6

    def global_to_local_dir(self, global_dir: int) -> int:
        _check_dir(global_dir, "global_dir")
        return (global_dir - self._orientation + 6) % 6

    def nbr_dir_to_dir(self, nbr: LocalParticle, nbr_dir: int) -> int:
        """Own local direction matching the neighbour's local ``nbr_dir``."""
        _check_dir(nbr_dir, "nbr_dir")
        return self.global_to_local_dir(nbr.local_to_global_dir(nbr_dir))

    def dir_to_nbr_dir(self, nbr: LocalParticle, my_dir: int) -> int:
        """Neighbour's local direction matching own local ``my_dir``."""
        _check_dir(my_dir, "my_dir")
        return nbr.global_to_local_dir(self.local_to_global_dir(my_dir))

    def points_at_me(self, nbr: LocalParticle, nbr_label: int) -> bool:
        """Whether the neighbour's labelled edge reaches this particle."""
        _check_label(nbr_label)
        if self.is_contracted():
            return self.points_at_my_head(nbr, nbr_label)
        return self.points_at_my_head(nbr, nbr_label) or self.points_at_my_tail(
            nbr, nbr_label
        )

    def points_at_my_head(self, nbr: LocalParticle, nbr_label: int) -> bool:
        _check_label(nbr_label)
        return nbr.nbr_node_reached_via_label(nbr_label) == self.head

    def points_at_my_tail(self, nbr: LocalParticle, nbr_label: int) -> bool:
        self._require_expanded()
        _check_label(nbr_label)
        return nbr.nbr_node_reached_via_label(nbr_label) == self.tail()