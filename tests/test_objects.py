from amoebot.node import Node
from amoebot.objects import SolidObject


def test_default_object_sits_at_origin():
    assert SolidObject().node == Node(0, 0)


def test_object_keeps_given_node():
    obj = SolidObject(Node(4, -1))
    assert obj.node == Node(4, -1)


def test_object_node_can_be_moved():
    obj = SolidObject(Node(1, 1))
    obj.node = obj.node.node_in_dir(3)
    assert obj.node == Node(1, 1).node_in_dir(3)