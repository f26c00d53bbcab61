"""Grid coordinates and the isometric projection.

A Point3D is used in two domains. In the cartesian domain x and y index a
grid cell and z is the cell's elevation in tile levels. After
cartesian_to_isometric it is a world position in pixels, with z as a world
height. Pathfinding only ever works in the cartesian domain.
"""

from __future__ import annotations

import math
from dataclasses import dataclass

from isopath.config import TILE_HEIGHT, TILE_WIDTH


@dataclass(frozen=True, slots=True)
class Point3D:
    """Immutable 3-component position. Equality is exact, no tolerance."""
    x: float
    y: float
    z: float = 0

    def add(self, other: Point3D) -> Point3D:
        return Point3D(self.x + other.x, self.y + other.y, self.z + other.z)

    def subtract(self, other: Point3D) -> Point3D:
        return Point3D(self.x - other.x, self.y - other.y, self.z - other.z)

    def scale(self, factor: float) -> Point3D:
        return Point3D(self.x * factor, self.y * factor, self.z * factor)

    def length(self) -> float:
        return math.sqrt(self.x * self.x + self.y * self.y + self.z * self.z)

    def normalize(self) -> Point3D:
        """Unit vector in the same direction. The zero vector stays zero."""
        length = self.length()
        if length == 0:
            return self
        return self.scale(1 / length)

    def distance_to(self, other: Point3D) -> float:
        """Euclidean distance over all three components."""
        return self.subtract(other).length()

    def __str__(self) -> str:
        return f"({self.x}, {self.y}, {self.z})"


def cartesian_to_isometric(position: Point3D) -> Point3D:
    """Project a grid cell to its world position (top corner of the tile)."""
    return Point3D(
        (position.x - position.y) * (TILE_WIDTH / 2),
        (position.x + position.y) * (TILE_HEIGHT / 2),
        position.z * TILE_HEIGHT,
    )


def isometric_to_cartesian(position: Point3D) -> Point3D:
    """Inverse of cartesian_to_isometric."""
    half_w = TILE_WIDTH / 2
    half_h = TILE_HEIGHT / 2
    return Point3D(
        (position.x / half_w + position.y / half_h) / 2,
        (position.y / half_h - position.x / half_w) / 2,
        position.z / TILE_HEIGHT,
    )
