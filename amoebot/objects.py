"""Static objects occupying single lattice nodes."""

from __future__ import annotations

from dataclasses import dataclass, field

from amoebot.node import Node


@dataclass
class SolidObject:
    """A single node of a solid object; particles can sense but not enter it."""

    node: Node = field(default_factory=Node)