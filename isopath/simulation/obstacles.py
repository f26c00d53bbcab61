"""Stackable boxes resting on tiles.

A box rests either directly on a tile or on top of the tallest box already
there. Boxes are square: `size` is both the footprint edge and the height,
in world units. Boxes may be repositioned between searches, never during
one.
"""

from __future__ import annotations

from collections.abc import Iterator
from dataclasses import dataclass

from isopath.config import OBSTACLE_MAX_SIZE, OBSTACLE_MIN_SIZE, TILE_HEIGHT
from isopath.simulation.coordinates import Point3D, cartesian_to_isometric
from isopath.simulation.heightmap import HeightMap


@dataclass(slots=True)
class Obstacle:
    """A box on the grid.

    Attributes:
        obstacle_id: Unique id within its ObstacleSet.
        cell: Cartesian tile the box (or its stack) rests on.
        size: Edge length in world units, also the box's height.
        base: World height of the bottom face.
    """
    obstacle_id: int
    cell: Point3D
    size: int
    base: float

    @property
    def top(self) -> float:
        return self.base + self.size

    @property
    def world_position(self) -> Point3D:
        """Isometric position of the box's tile, lifted to its base."""
        tile = cartesian_to_isometric(self.cell)
        return Point3D(tile.x, tile.y, self.base)


def clamp_size(size: int) -> int:
    return max(OBSTACLE_MIN_SIZE, min(size, OBSTACLE_MAX_SIZE))


class ObstacleSet:
    """All boxes on a height map, queried per cell by the pathfinder."""

    def __init__(self, height_map: HeightMap) -> None:
        self._height_map = height_map
        self._obstacles: list[Obstacle] = []
        self._next_id = 0

    def __iter__(self) -> Iterator[Obstacle]:
        return iter(self._obstacles)

    def __len__(self) -> int:
        return len(self._obstacles)

    def tallest_at(self, cell: Point3D, exclude: Obstacle | None = None) -> Obstacle | None:
        """The box with the highest top resting on tile (cell.x, cell.y)."""
        tallest: Obstacle | None = None
        for obstacle in self._obstacles:
            if obstacle is exclude:
                continue
            if obstacle.cell.x != cell.x or obstacle.cell.y != cell.y:
                continue
            if tallest is None or obstacle.top > tallest.top:
                tallest = obstacle
        return tallest

    def place(self, cell: Point3D, size: int) -> Obstacle:
        """Put a new box on a tile, stacking on whatever is already there.

        Raises:
            ValueError: If the tile does not exist or the box is larger than
                the box it would rest on.
        """
        tile = self._height_map.cell_at(cell.x, cell.y)
        if tile is None:
            raise ValueError(f"No tile at ({cell.x}, {cell.y})")
        size = clamp_size(size)
        base = self._resting_height(tile, size, exclude=None)
        if base is None:
            raise ValueError(
                f"Box of size {size} is larger than the box at ({cell.x}, {cell.y})"
            )
        obstacle = Obstacle(obstacle_id=self._next_id, cell=tile, size=size, base=base)
        self._next_id += 1
        self._obstacles.append(obstacle)
        return obstacle

    def move(self, obstacle: Obstacle, cell: Point3D) -> bool:
        """Reposition a box onto another tile.

        Returns False without changing anything if another box rests on
        this one, or if the target is the box's current tile, has no tile,
        or holds a smaller box.
        """
        if self.tallest_at(obstacle.cell) is not obstacle:
            return False
        if obstacle.cell.x == cell.x and obstacle.cell.y == cell.y:
            return False
        tile = self._height_map.cell_at(cell.x, cell.y)
        if tile is None:
            return False
        base = self._resting_height(tile, obstacle.size, exclude=obstacle)
        if base is None:
            return False
        obstacle.cell = tile
        obstacle.base = base
        return True

    def remove(self, obstacle: Obstacle) -> None:
        """Take a box away. Boxes stacked on it drop by its size."""
        self._obstacles.remove(obstacle)
        for other in self._obstacles:
            if (
                other.cell.x == obstacle.cell.x
                and other.cell.y == obstacle.cell.y
                and other.base >= obstacle.top
            ):
                other.base -= obstacle.size

    def sorted_for_drawing(self) -> list[Obstacle]:
        """Boxes in painter's order: by world height, then y, then x."""
        return sorted(
            self._obstacles,
            key=lambda o: (o.world_position.z, o.world_position.y, o.world_position.x),
        )

    def _resting_height(self, tile: Point3D, size: int, exclude: Obstacle | None) -> float | None:
        """Base height for a box of `size` on `tile`, or None if it won't fit."""
        below = self.tallest_at(tile, exclude=exclude)
        if below is None:
            return tile.z * TILE_HEIGHT
        if size > below.size:
            return None
        return below.top
