"""Tests for the node arena and path reconstruction."""

from isopath.simulation.coordinates import Point3D
from isopath.simulation.node import Node, NodeArena


class TestNodeArena:
    def test_handles_are_sequential(self):
        arena = NodeArena()
        assert arena.add(Node(Point3D(0, 0))) == 0
        assert arena.add(Node(Point3D(1, 0))) == 1
        assert len(arena) == 2

    def test_lookup_returns_same_node(self):
        arena = NodeArena()
        node = Node(Point3D(2, 3))
        handle = arena.add(node)
        assert arena[handle] is node

    def test_path_to_root(self):
        arena = NodeArena()
        root = arena.add(Node(Point3D(0, 0)))
        assert arena.path_to(root) == [Point3D(0, 0)]

    def test_path_follows_parents(self):
        arena = NodeArena()
        a = arena.add(Node(Point3D(0, 0)))
        b = arena.add(Node(Point3D(1, 1), parent=a))
        arena.add(Node(Point3D(1, 0), parent=a))
        c = arena.add(Node(Point3D(2, 2), parent=b))
        assert arena.path_to(c) == [Point3D(0, 0), Point3D(1, 1), Point3D(2, 2)]

    def test_reparenting_changes_path(self):
        arena = NodeArena()
        a = arena.add(Node(Point3D(0, 0)))
        b = arena.add(Node(Point3D(0, 1), parent=a))
        c = arena.add(Node(Point3D(1, 1), parent=b))
        arena[c].parent = a
        assert arena.path_to(c) == [Point3D(0, 0), Point3D(1, 1)]
