"""Viewport onto the triangular lattice and lattice/world coordinate conversion."""

from __future__ import annotations

import math
import threading

from amoebot.node import Node

ZOOM_INIT = 16.0
ZOOM_MIN = 4.0
ZOOM_MAX = 128.0
ZOOM_ATTENUATION = 500.0

# Extra world-space margin around the visible area when culling particles.
INCLUDE_SLACK = 2.0

# Height of a triangle of the lattice when the side length is 1.
TRIANGLE_HEIGHT = math.sqrt(3.0 / 4.0)


def _round_half_away(value: float) -> int:
    return int(math.copysign(math.floor(abs(value) + 0.5), value))


def node_to_world_coord(node: Node) -> tuple[float, float]:
    """World-space position of the centre of a lattice node."""
    return (node.x + 0.5 * node.y, node.y * TRIANGLE_HEIGHT)


def world_coord_to_node(x: float, y: float) -> Node:
    """Lattice node nearest to the given world-space position."""
    node_y = _round_half_away(y / TRIANGLE_HEIGHT)
    node_x = _round_half_away(x - 0.5 * node_y)
    return Node(node_x, node_y)


class View:
    """A zoomable, movable window in world space; safe to share across threads."""

    def __init__(self) -> None:
        self._lock = threading.RLock()
        self._viewport_width = 900
        self._viewport_height = 600
        self._focus_x = 0.0
        self._focus_y = 0.0
        self._zoom = ZOOM_INIT

    @property
    def zoom(self) -> float:
        with self._lock:
            return self._zoom

    @property
    def focus_pos(self) -> tuple[float, float]:
        with self._lock:
            return (self._focus_x, self._focus_y)

    def left(self) -> float:
        with self._lock:
            return self._focus_x - 0.5 / self._zoom * self._viewport_width

    def right(self) -> float:
        with self._lock:
            return self._focus_x + 0.5 / self._zoom * self._viewport_width

    def bottom(self) -> float:
        with self._lock:
            return self._focus_y - 0.5 / self._zoom * self._viewport_height

    def top(self) -> float:
        with self._lock:
            return self._focus_y + 0.5 / self._zoom * self._viewport_height

    def includes(self, x: float, y: float) -> bool:
        """Whether a world position lies in the view, allowing some slack."""
        with self._lock:
            return (
                self.left() - INCLUDE_SLACK <= x <= self.right() + INCLUDE_SLACK
                and self.bottom() - INCLUDE_SLACK <= y <= self.top() + INCLUDE_SLACK
            )

    def set_viewport_size(self, width: int, height: int) -> None:
        with self._lock:
            self._viewport_width = width
            self._viewport_height = height

    def set_focus_pos(self, x: float, y: float) -> None:
        with self._lock:
            self._focus_x = x
            self._focus_y = y

    def set_zoom(self, zoom: float) -> None:
        """Set the zoom, clamped to the allowed range."""
        with self._lock:
            self._zoom = min(max(zoom, ZOOM_MIN), ZOOM_MAX)

    def modify_focus_pos(self, dx: float, dy: float) -> None:
        """Move the focus by a mouse offset given in screen pixels."""
        with self._lock:
            self._focus_x += dx / self._zoom
            self._focus_y += dy / self._zoom

    def modify_zoom(self, mouse_x: float, mouse_y: float, mouse_angle_delta: float) -> None:
        """Zoom by a wheel delta, keeping the point under the cursor fixed."""
        with self._lock:
            old_x = self.left() + mouse_x / self._zoom
            old_y = self.bottom() + mouse_y / self._zoom
            self.set_zoom(self._zoom * math.exp(mouse_angle_delta / ZOOM_ATTENUATION))
            new_x = self.left() + mouse_x / self._zoom
            new_y = self.bottom() + mouse_y / self._zoom
            self._focus_x += old_x - new_x
            self._focus_y += old_y - new_y