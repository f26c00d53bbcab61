"""Tests for Point3D and the isometric projection."""

import math

from isopath.simulation.coordinates import (
    Point3D,
    cartesian_to_isometric,
    isometric_to_cartesian,
)


class TestPoint3D:
    def test_z_defaults_to_zero(self):
        assert Point3D(1, 2) == Point3D(1, 2, 0)

    def test_equality_is_exact(self):
        assert Point3D(1, 1, 0) != Point3D(1, 1, 1)
        assert Point3D(1, 1, 0) != Point3D(1.0000001, 1, 0)

    def test_hashable(self):
        seen = {Point3D(1, 2, 0), Point3D(1, 2, 0), Point3D(2, 1, 0)}
        assert len(seen) == 2

    def test_arithmetic(self):
        a = Point3D(1, 2, 3)
        b = Point3D(4, 5, 6)
        assert a.add(b) == Point3D(5, 7, 9)
        assert b.subtract(a) == Point3D(3, 3, 3)
        assert a.scale(2) == Point3D(2, 4, 6)

    def test_length_and_distance(self):
        assert Point3D(3, 4, 0).length() == 5
        assert Point3D(0, 0, 0).distance_to(Point3D(1, 1, 1)) == math.sqrt(3)

    def test_distance_includes_elevation(self):
        flat = Point3D(0, 0, 0).distance_to(Point3D(1, 1, 0))
        raised = Point3D(0, 0, 0).distance_to(Point3D(1, 1, 1))
        assert raised > flat

    def test_normalize(self):
        n = Point3D(3, 0, 4).normalize()
        assert math.isclose(n.length(), 1.0)
        assert math.isclose(n.x, 0.6)

    def test_normalize_zero_vector(self):
        assert Point3D(0, 0, 0).normalize() == Point3D(0, 0, 0)

    def test_str(self):
        assert str(Point3D(1, 2, 0)) == "(1, 2, 0)"


class TestIsometricProjection:
    def test_origin(self):
        assert cartesian_to_isometric(Point3D(0, 0, 0)) == Point3D(0, 0, 0)

    def test_unit_steps(self):
        # +x goes right and down, +y goes left and down
        assert cartesian_to_isometric(Point3D(1, 0, 0)) == Point3D(32, 16, 0)
        assert cartesian_to_isometric(Point3D(0, 1, 0)) == Point3D(-32, 16, 0)

    def test_elevation_becomes_world_height(self):
        assert cartesian_to_isometric(Point3D(0, 0, 2)).z == 64

    def test_inverse(self):
        for cell in [Point3D(0, 0, 0), Point3D(3, 1, 2), Point3D(2, 5, 1)]:
            assert isometric_to_cartesian(cartesian_to_isometric(cell)) == cell
