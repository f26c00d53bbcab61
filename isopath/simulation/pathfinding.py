"""A* pathfinding over the height map, around and on top of boxes.

8-directional movement. A cell can be entered when it has a tile, any box
on it is at least as wide as the agent, and its standable height is within
the agent's climbing reach of the current cell. A diagonal move is refused
when both cells flanking it are missing a tile or hold a box.

Move cost: by default the unit cost of a move (1 cardinal, sqrt(2)
diagonal) is multiplied by the candidate node's own g-cost, which is 0 for
a freshly proposed cell. Every g-cost therefore stays 0 and the search
ranks cells by the Euclidean heuristic alone (greedy best-first). Pass
accumulate_move_cost=True for the conventional current.g_cost + unit cost.

Tie-breaking: lower f-cost, then lower h-cost, then earlier insertion.
"""

from __future__ import annotations

import logging

from isopath.config import (
    AGENT_CLIMB_DENOMINATOR,
    AGENT_CLIMB_NUMERATOR,
    AGENT_HEIGHT,
    AGENT_WIDTH,
    CARDINAL_COST,
    DIAGONAL_COST,
    TILE_HEIGHT,
    TILE_THICKNESS,
)
from isopath.simulation.coordinates import Point3D
from isopath.simulation.heightmap import HeightMap
from isopath.simulation.node import Node, NodeArena
from isopath.simulation.obstacles import ObstacleSet
from isopath.simulation.open_set import OpenSet

logger = logging.getLogger(__name__)

# Expansion order: left, right, up, down, then the four diagonals
_NEIGHBOR_OFFSETS = [
    (-1, 0),
    (1, 0),
    (0, -1),
    (0, 1),
    (-1, -1),
    (1, 1),
    (-1, 1),
    (1, -1),
]


def is_diagonal_move(target: Point3D, source: Point3D) -> bool:
    """True if the move changes both x and y by exactly one."""
    return abs(target.x - source.x) == 1 and abs(target.y - source.y) == 1


class Pathfinder:
    """Finds routes for an agent of a given footprint over a height map.

    The height map and obstacle set are owned by the caller and only read.
    Each find_path call builds its own search state, so boxes may be moved
    freely between calls.
    """

    def __init__(
        self,
        height_map: HeightMap,
        obstacles: ObstacleSet,
        agent_width: int = AGENT_WIDTH,
        agent_height: int = AGENT_HEIGHT,
        accumulate_move_cost: bool = False,
    ) -> None:
        self._height_map = height_map
        self._obstacles = obstacles
        self._agent_width = agent_width
        self._max_climb = agent_height * AGENT_CLIMB_NUMERATOR / AGENT_CLIMB_DENOMINATOR
        self._accumulate_move_cost = accumulate_move_cost

    @property
    def height_map(self) -> HeightMap:
        return self._height_map

    @property
    def obstacles(self) -> ObstacleSet:
        return self._obstacles

    def find_path(
        self,
        start: Point3D,
        goal: Point3D,
        is_recalculating: bool = False,
    ) -> list[Point3D] | None:
        """Find a path from `start` to `goal` in cartesian cells.

        Returns the cells from start to goal, both inclusive. Returns None
        if either endpoint is not a valid cell, if start == goal, or if the
        goal cannot be reached. When `is_recalculating` is set an unreachable
        goal instead yields the path to the closest-approach cell (lowest
        f-cost reached), which is at least [start].

        Args:
            start: Start cell, z = its tile elevation.
            goal: Goal cell, z = its tile elevation.
            is_recalculating: Accept a partial path when the goal is cut off.
        """
        if not self._validate_input(start, goal):
            logger.debug("Rejected endpoints %s -> %s", start, goal)
            return None

        nodes = NodeArena()
        open_set = OpenSet()
        closed: set[Point3D] = set()

        start_h = start.distance_to(goal)
        start_handle = nodes.add(Node(start, h_cost=start_h, f_cost=start_h))
        self._update_node_height(nodes[start_handle])
        open_set.push(nodes[start_handle], start_handle)
        closest_handle = start_handle

        while open_set:
            current_handle = open_set.pop()
            current = nodes[current_handle]

            # Stale heap entry for a cell that was already expanded
            if current.position in closed:
                continue

            # Boxes may have moved since this node was proposed
            self._update_node_height(current)
            closed.add(current.position)

            if current.f_cost < nodes[closest_handle].f_cost:
                closest_handle = current_handle

            if current.position == goal:
                logger.debug(
                    "Path found %s -> %s, %d cells expanded", start, goal, len(closed),
                )
                return nodes.path_to(current_handle)

            for cell in self._neighbor_cells(current.position):
                if cell in closed:
                    continue
                self._process_neighbor(cell, current_handle, nodes, open_set, goal)

        logger.debug(
            "Open set exhausted %s -> %s after %d cells", start, goal, len(closed),
        )
        if is_recalculating:
            return nodes.path_to(closest_handle)
        return None

    def resolve_height(self, cell: Point3D) -> float:
        """Standable height of a cell in world units.

        The top of the tallest box on the cell, or the tile surface if the
        cell is empty.
        """
        tallest = self._obstacles.tallest_at(cell)
        if tallest is not None:
            return tallest.top
        return cell.z * TILE_HEIGHT + TILE_THICKNESS

    def is_obstacle(self, node: Node, current: Node) -> bool:
        """Whether `node` cannot be entered from `current`.

        Both nodes must have their heights resolved. A cell is refused if the
        box on it is narrower than the agent, or if it is higher than the
        agent can climb from `current`.
        """
        tallest = self._obstacles.tallest_at(node.position)
        is_narrower_than_agent = tallest is not None and tallest.size < self._agent_width
        is_too_high = node.height > current.height + self._max_climb
        return is_narrower_than_agent or is_too_high

    def is_path_obstructed(self, target: Point3D, source: Point3D) -> bool:
        """Whether a diagonal move would cut a solid corner.

        The two cells flanking the diagonal are (tx, ty - dy) and
        (tx - dx, ty). The move is obstructed when every flanking cell has
        no tile or holds a box. Straight moves are never obstructed.
        """
        if not is_diagonal_move(target, source):
            return False

        dx = target.x - source.x
        dy = target.y - source.y
        flanking = [(target.x, target.y - dy), (target.x - dx, target.y)]

        for x, y in flanking:
            cell = self._height_map.cell_at(x, y)
            if cell is not None and self._obstacles.tallest_at(cell) is None:
                return False
        return True

    def can_move(self, source: Point3D, target: Point3D) -> bool:
        """Check a single step against the current box layout."""
        if not self._height_map.is_valid_cell(target):
            return False
        current = Node(source)
        self._update_node_height(current)
        candidate = Node(target)
        self._update_node_height(candidate)
        return not (
            self.is_obstacle(candidate, current)
            or self.is_path_obstructed(target, source)
        )

    def _validate_input(self, start: Point3D, goal: Point3D) -> bool:
        return (
            self._height_map.is_valid_cell(start)
            and self._height_map.is_valid_cell(goal)
            and start != goal
        )

    def _update_node_height(self, node: Node) -> None:
        node.height = self.resolve_height(node.position)

    def _neighbor_cells(self, position: Point3D) -> list[Point3D]:
        """Tile-backed, in-bounds cells around `position`."""
        cells: list[Point3D] = []
        for dx, dy in _NEIGHBOR_OFFSETS:
            cell = self._height_map.cell_at(position.x + dx, position.y + dy)
            if cell is not None and self._height_map.in_bounds(cell):
                cells.append(cell)
        return cells

    def _move_cost(self, current: Node, neighbor: Node) -> float:
        unit = DIAGONAL_COST if is_diagonal_move(neighbor.position, current.position) else CARDINAL_COST
        if self._accumulate_move_cost:
            return unit
        return unit * neighbor.g_cost

    def _process_neighbor(
        self,
        cell: Point3D,
        current_handle: int,
        nodes: NodeArena,
        open_set: OpenSet,
        goal: Point3D,
    ) -> None:
        """Relax the edge current -> cell and queue the cell if it improved."""
        current = nodes[current_handle]
        neighbor = Node(cell)
        self._update_node_height(neighbor)

        if self.is_obstacle(neighbor, current) or self.is_path_obstructed(cell, current.position):
            return

        g_cost = current.g_cost + self._move_cost(current, neighbor)

        existing_handle = open_set.find(cell)
        if existing_handle is not None:
            if nodes[existing_handle].g_cost <= g_cost:
                return
            # Cheaper route to a cell already queued: update it in place
            handle = existing_handle
            neighbor = nodes[handle]
        else:
            handle = nodes.add(neighbor)

        neighbor.g_cost = g_cost
        neighbor.h_cost = cell.distance_to(goal)
        neighbor.f_cost = g_cost + neighbor.h_cost
        neighbor.parent = current_handle
        open_set.push(neighbor, handle)
