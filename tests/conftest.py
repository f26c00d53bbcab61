"""Shared test fixtures for isopath."""

from __future__ import annotations

import pytest

from isopath.simulation.heightmap import HeightMap
from isopath.simulation.obstacles import ObstacleSet
from isopath.simulation.pathfinding import Pathfinder


@pytest.fixture
def open_grid() -> HeightMap:
    """A 5x5 grid, every tile at elevation 0."""
    return HeightMap([[0] * 5 for _ in range(5)])


@pytest.fixture
def obstacles(open_grid: HeightMap) -> ObstacleSet:
    """An empty obstacle set on the open grid."""
    return ObstacleSet(open_grid)


@pytest.fixture
def pathfinder(open_grid: HeightMap, obstacles: ObstacleSet) -> Pathfinder:
    """Pathfinder over the open grid with the default agent."""
    return Pathfinder(open_grid, obstacles)
