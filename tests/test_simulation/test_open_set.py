"""Tests for the A* open set ordering."""

from isopath.simulation.coordinates import Point3D
from isopath.simulation.node import Node
from isopath.simulation.open_set import OpenSet


def _node(x: int, y: int, f: float, h: float = 0.0) -> Node:
    return Node(Point3D(x, y), h_cost=h, f_cost=f)


class TestOrdering:
    def test_lowest_f_first(self):
        open_set = OpenSet()
        open_set.push(_node(0, 0, f=3.0), 0)
        open_set.push(_node(1, 0, f=1.0), 1)
        open_set.push(_node(2, 0, f=2.0), 2)
        assert [open_set.pop() for _ in range(3)] == [1, 2, 0]

    def test_ties_broken_by_h(self):
        open_set = OpenSet()
        open_set.push(_node(0, 0, f=2.0, h=2.0), 0)
        open_set.push(_node(1, 0, f=2.0, h=0.5), 1)
        assert open_set.pop() == 1

    def test_full_ties_broken_by_insertion(self):
        open_set = OpenSet()
        open_set.push(_node(5, 5, f=1.0, h=1.0), 0)
        open_set.push(_node(0, 0, f=1.0, h=1.0), 1)
        open_set.push(_node(3, 3, f=1.0, h=1.0), 2)
        assert [open_set.pop() for _ in range(3)] == [0, 1, 2]


class TestMembership:
    def test_find_after_push(self):
        open_set = OpenSet()
        open_set.push(_node(1, 2, f=1.0), 7)
        assert open_set.find(Point3D(1, 2)) == 7
        assert open_set.find(Point3D(2, 1)) is None

    def test_pop_removes_membership(self):
        open_set = OpenSet()
        open_set.push(_node(1, 2, f=1.0), 0)
        open_set.pop()
        assert open_set.find(Point3D(1, 2)) is None
        assert len(open_set) == 0

    def test_repush_keeps_stale_entry(self):
        open_set = OpenSet()
        node = _node(1, 1, f=5.0)
        open_set.push(node, 0)
        open_set.push(_node(2, 2, f=3.0), 1)
        node.f_cost = 1.0
        open_set.push(node, 0)
        assert len(open_set) == 3
        assert open_set.pop() == 0
        assert open_set.find(Point3D(1, 1)) is None
        assert open_set.pop() == 1
        # The stale entry still comes out last
        assert open_set.pop() == 0
        assert not open_set
