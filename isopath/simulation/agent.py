"""An agent that walks the grid one waypoint at a time.

The agent asks the pathfinder for a route once per navigation request. If a
box is moved into its way while it walks, the next step detects it and the
agent replans from where it stands, accepting a partial route when the goal
has been cut off.
"""

from __future__ import annotations

import logging

from isopath.simulation.coordinates import Point3D, cartesian_to_isometric
from isopath.simulation.pathfinding import Pathfinder

logger = logging.getLogger(__name__)


class Agent:
    """Consumer of find_path.

    Attributes:
        cell: The cartesian cell the agent stands on.
        goal: Destination of the current route, or None when idle.
        path: Remaining waypoints, current cell excluded.
    """

    def __init__(self, pathfinder: Pathfinder, cell: Point3D) -> None:
        self._pathfinder = pathfinder
        self.cell = cell
        self.goal: Point3D | None = None
        self.path: list[Point3D] = []

    @property
    def pathfinder(self) -> Pathfinder:
        return self._pathfinder

    @property
    def is_moving(self) -> bool:
        return bool(self.path)

    @property
    def world_position(self) -> Point3D:
        return cartesian_to_isometric(self.cell)

    def navigate_to(self, goal: Point3D) -> bool:
        """Plan a route to `goal`. Returns False if there is none."""
        path = self._pathfinder.find_path(self.cell, goal)
        if path is None:
            logger.info("No valid path from %s to %s", self.cell, goal)
            self.stop()
            return False
        self.goal = goal
        self.path = path[1:]
        return True

    def stop(self) -> None:
        self.goal = None
        self.path = []

    def step(self) -> bool:
        """Advance to the next waypoint. Returns True if the agent moved."""
        if not self.path:
            return False

        if not self._pathfinder.can_move(self.cell, self.path[0]):
            logger.debug("Waypoint %s blocked, recalculating", self.path[0])
            if not self._recalculate():
                return False

        self.cell = self.path.pop(0)
        if not self.path:
            self.goal = None
        return True

    def _recalculate(self) -> bool:
        """Replan toward the current goal, accepting a partial route."""
        path = None
        if self.goal is not None:
            path = self._pathfinder.find_path(self.cell, self.goal, is_recalculating=True)
        if path is None or len(path) < 2:
            logger.info("No valid path from %s to %s", self.cell, self.goal)
            self.stop()
            return False
        self.path = path[1:]
        return True
