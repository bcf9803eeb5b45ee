import pytest

from amoebot.node import Node


def test_default_is_origin():
    assert Node() == Node(0, 0)


def test_east_neighbour_of_origin():
    assert Node().node_in_dir(0) == Node(1, 0)


@pytest.mark.parametrize("direction", range(6))
def test_opposite_direction_returns_home(direction):
    start = Node(3, -2)
    assert start.node_in_dir(direction).node_in_dir((direction + 3) % 6) == start


def test_six_neighbours_are_distinct():
    start = Node(0, 0)
    neighbours = {start.node_in_dir(d) for d in range(6)}
    assert len(neighbours) == 6
    assert start not in neighbours


@pytest.mark.parametrize("direction", [-1, 6])
def test_invalid_direction_raises(direction):
    with pytest.raises(ValueError):
        Node().node_in_dir(direction)


def test_ordering_compares_x_then_y():
    assert Node(0, 5) < Node(1, 0)
    assert Node(1, 0) < Node(1, 1)
    assert not Node(1, 1) < Node(1, 1)


def test_nodes_are_hashable_and_equal_by_value():
    mapping = {Node(2, 3): "a"}
    assert mapping[Node(2, 3)] == "a"
    assert Node(2, 3) != Node(3, 2)