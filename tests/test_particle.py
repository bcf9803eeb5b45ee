import pytest

from amoebot.node import Node
from amoebot.particle import Particle


def test_default_particle_is_contracted_at_origin():
    p = Particle()
    assert p.head == Node(0, 0)
    assert p.is_contracted()
    assert not p.is_expanded()


def test_expanded_particle_tail():
    p = Particle(Node(2, 2), 3)
    assert p.is_expanded()
    assert p.tail() == Node(2, 2).node_in_dir(3)


def test_tail_of_contracted_particle_raises():
    with pytest.raises(ValueError):
        Particle(Node(1, 1)).tail()


@pytest.mark.parametrize("tail_dir", [-2, 6])
def test_invalid_tail_dir_raises(tail_dir):
    with pytest.raises(ValueError):
        Particle(Node(), tail_dir)


def test_default_marks_are_absent():
    p = Particle(Node(), 0)
    assert p.head_mark_color() == -1
    assert p.tail_mark_color() == -1
    assert p.head_mark_global_dir() == -1
    assert p.tail_mark_global_dir() == -1


def test_default_border_colors():
    p = Particle()
    assert p.border_colors() == [-1] * 18
    assert p.border_point_colors() == [-1] * 6


def test_default_inspection_text():
    assert Particle().inspection_text() == (
        "Overwrite Particle.inspection_text() to specify an inspection text."
    )


def test_subclass_can_override_colors():
    class Red(Particle):
        def head_mark_color(self):
            return 0xFF0000

    red = Red(Node(1, 2))
    assert red.head_mark_color() == 0xFF0000
    assert Particle.head_mark_color(red) == -1
    assert Particle.tail_mark_color(red) == -1
    assert Particle.is_contracted(red)