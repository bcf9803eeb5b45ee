"""Base particle carrying what is needed to draw it."""

from __future__ import annotations

from amoebot.node import Node

BORDER_SEGMENTS = 18
BORDER_POINTS = 6


class Particle:
    """A particle with a head node and a global tail direction (-1 if contracted)."""

    def __init__(self, head: Node | None = None, global_tail_dir: int = -1) -> None:
        if not -1 <= global_tail_dir < 6:
            raise ValueError(
                f"global_tail_dir must be in -1..5, got {global_tail_dir}"
            )
        self.head = head if head is not None else Node()
        self.global_tail_dir = global_tail_dir

    def is_contracted(self) -> bool:
        return self.global_tail_dir == -1

    def is_expanded(self) -> bool:
        return not self.is_contracted()

    def tail(self) -> Node:
        """Return the node occupied by the tail; fails on a contracted particle."""
        if self.is_contracted():
            raise ValueError("a contracted particle has no tail")
        return self.head.node_in_dir(self.global_tail_dir)

    def head_mark_color(self) -> int:
        """Colour (0xRRGGBB) of the ring around the head, -1 for none."""
        return -1

    def tail_mark_color(self) -> int:
        """Colour (0xRRGGBB) of the ring around the tail, -1 for none."""
        return -1

    def head_mark_global_dir(self) -> int:
        """Global direction of the head marker, -1 for none."""
        return -1

    def tail_mark_global_dir(self) -> int:
        """Global direction of the tail marker, -1 for none."""
        return -1

    def border_colors(self) -> list[int]:
        """Colours of the 18 border segments, -1 for none."""
        return [-1] * BORDER_SEGMENTS

    def border_point_colors(self) -> list[int]:
        """Colours of the 6 border points, -1 for none."""
        return [-1] * BORDER_POINTS

    def inspection_text(self) -> str:
        """Text shown when the particle is inspected."""
        return "Overwrite Particle.inspection_text() to specify an inspection text."