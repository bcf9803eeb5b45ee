"""Nodes of the triangular lattice."""

from __future__ import annotations

from dataclasses import dataclass

# Neighbour offsets in global directions: 0=E, 1=NE, 2=NW, 3=W, 4=SW, 5=SE.
_X_OFFSET = (1, 0, -1, -1, 0, 1)
_Y_OFFSET = (0, 1, 1, 0, -1, -1)


@dataclass(frozen=True, order=True)
class Node:
    """A lattice node; x runs left-right, y runs northeast-southwest.

    Nodes order by x first and then by y.
    """

    x: int = 0
    y: int = 0

    def node_in_dir(self, direction: int) -> Node:
        """Return the neighbouring node in the given global direction."""
        if not 0 <= direction <= 5:
            raise ValueError(f"direction must be in 0..5, got {direction}")
        return Node(self.x + _X_OFFSET[direction], self.y + _Y_OFFSET[direction])