import math

import pytest

from amoebot.node import Node
from amoebot.view import (
    ZOOM_INIT,
    ZOOM_MAX,
    ZOOM_MIN,
    View,
    node_to_world_coord,
    world_coord_to_node,
)


def test_default_zoom():
    assert View().zoom == ZOOM_INIT == 16.0


def test_bounds_symmetric_around_focus():
    view = View()
    view.set_focus_pos(3.5, -2.25)
    assert view.left() + view.right() == pytest.approx(7.0)
    assert view.bottom() + view.top() == pytest.approx(-4.5)


def test_bounds_extent_matches_viewport_over_zoom():
    view = View()
    view.set_viewport_size(100, 50)
    view.set_zoom(10.0)
    assert view.right() - view.left() == pytest.approx(100 / 10.0)
    assert view.top() - view.bottom() == pytest.approx(50 / 10.0)


def test_set_zoom_clamps_low_and_high():
    view = View()
    view.set_zoom(1.0)
    assert view.zoom == ZOOM_MIN
    view.set_zoom(1000.0)
    assert view.zoom == ZOOM_MAX
    view.set_zoom(20.0)
    assert view.zoom == 20.0


def test_includes_respects_slack():
    view = View()
    view.set_viewport_size(100, 100)
    view.set_zoom(10.0)
    assert view.includes(0.0, 0.0)
    assert view.includes(view.right() + 1.9, 0.0)
    assert not view.includes(view.right() + 2.1, 0.0)
    assert not view.includes(0.0, view.bottom() - 2.1)


def test_modify_focus_pos_scales_by_zoom():
    view = View()
    view.set_zoom(8.0)
    view.modify_focus_pos(16.0, -8.0)
    assert view.focus_pos == pytest.approx((16.0 / 8.0, -8.0 / 8.0))


@pytest.mark.parametrize("delta", [120.0, -120.0, 600.0])
def test_modify_zoom_keeps_point_under_cursor(delta):
    view = View()
    view.set_focus_pos(1.0, 2.0)
    mx, my = 300.0, 150.0
    before = (view.left() + mx / view.zoom, view.bottom() + my / view.zoom)
    old_zoom = view.zoom
    view.modify_zoom(mx, my, delta)
    after = (view.left() + mx / view.zoom, view.bottom() + my / view.zoom)
    assert after == pytest.approx(before)
    assert (view.zoom > old_zoom) == (delta > 0)


def test_modify_zoom_respects_clamp():
    view = View()
    view.modify_zoom(0.0, 0.0, 100000.0)
    assert view.zoom == ZOOM_MAX


def test_node_to_world_coord_origin_and_row():
    assert node_to_world_coord(Node(0, 0)) == (0.0, 0.0)
    x, y = node_to_world_coord(Node(0, 1))
    assert x == 0.5
    assert y == pytest.approx(math.sqrt(0.75))


@pytest.mark.parametrize("x", range(-4, 5))
@pytest.mark.parametrize("y", range(-4, 5))
def test_world_coord_round_trip(x, y):
    node = Node(x, y)
    assert world_coord_to_node(*node_to_world_coord(node)) == node


def test_world_coord_nearby_point_maps_to_node():
    wx, wy = node_to_world_coord(Node(2, -3))
    assert world_coord_to_node(wx + 0.1, wy - 0.1) == Node(2, -3)


def test_world_coord_rounds_half_away_from_zero():
    assert world_coord_to_node(0.5, 0.0) == Node(1, 0)
    assert world_coord_to_node(-0.5, 0.0) == Node(-1, 0)