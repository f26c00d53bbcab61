"""isopath entry point.

Usage:
    Print a path:      python -m isopath.main maps/demo.txt --start 0,1 --goal 3,6
    Add boxes:         python -m isopath.main maps/demo.txt --goal 3,6 --box 2,2,16 --box 2,2,8
    Partial paths:     python -m isopath.main maps/demo.txt --goal 5,6 --recalculate
    Open the preview:  python -m isopath.main maps/demo.txt --show
"""

from __future__ import annotations

import argparse
import logging
import sys

from isopath.config import SCREEN_HEIGHT, SCREEN_WIDTH
from isopath.simulation.agent import Agent
from isopath.simulation.coordinates import Point3D
from isopath.simulation.heightmap import HeightMap, load_height_map
from isopath.simulation.obstacles import ObstacleSet
from isopath.simulation.pathfinding import Pathfinder

logger = logging.getLogger(__name__)


def main(argv: list[str] | None = None) -> int:
    parser = argparse.ArgumentParser(description="isopath: A* over a height map with stackable boxes")
    parser.add_argument("map", help="Height map file ('0'-'9' elevation, '.' no tile)")
    parser.add_argument(
        "--start", type=str, metavar="X,Y",
        help="Start cell (default: the valid cell closest to 0,0)",
    )
    parser.add_argument("--goal", type=str, metavar="X,Y", help="Goal cell")
    parser.add_argument(
        "--box", type=str, metavar="X,Y,SIZE", action="append", default=[],
        help="Place a box; repeat to stack boxes on the same tile",
    )
    parser.add_argument(
        "--recalculate", action="store_true",
        help="Return the closest partial path when the goal is unreachable",
    )
    parser.add_argument(
        "--accumulate-costs", action="store_true",
        help="Use conventional accumulated move costs",
    )
    parser.add_argument(
        "--show", action="store_true",
        help="Open the interactive preview window",
    )
    parser.add_argument(
        "-v", "--verbose", action="store_true",
        help="Enable debug logging",
    )
    args = parser.parse_args(argv)

    logging.basicConfig(
        level=logging.DEBUG if args.verbose else logging.INFO,
        format="%(asctime)s %(name)s %(levelname)s: %(message)s",
    )

    try:
        height_map = load_height_map(args.map)
        obstacles = ObstacleSet(height_map)
        for box in args.box:
            x, y, size = _parse_ints(box, 3)
            obstacles.place(Point3D(x, y), size)
        start = _resolve_start(height_map, args.start)
        goal = _resolve_cell(height_map, args.goal) if args.goal else None
    except (OSError, ValueError) as e:
        print(f"Error: {e}")
        return 1

    pathfinder = Pathfinder(
        height_map, obstacles, accumulate_move_cost=args.accumulate_costs,
    )

    if args.show:
        return _run_preview(pathfinder, start, goal)

    if goal is None:
        print("Error: --goal is required unless --show is given")
        return 1

    path = pathfinder.find_path(start, goal, is_recalculating=args.recalculate)
    if path is None:
        print("No valid path")
        return 1
    for cell in path:
        print(f"{cell.x},{cell.y},{cell.z}")
    return 0


def _run_preview(pathfinder: Pathfinder, start: Point3D, goal: Point3D | None) -> int:
    """Open the pygame preview with an agent at `start`."""
    import pygame

    from isopath.rendering.preview import Preview

    agent = Agent(pathfinder, start)
    if goal is not None:
        agent.navigate_to(goal)

    pygame.init()
    screen = pygame.display.set_mode((SCREEN_WIDTH, SCREEN_HEIGHT))
    pygame.display.set_caption("isopath")
    Preview(screen, agent).run()
    pygame.quit()
    return 0


def _parse_ints(text: str, count: int) -> tuple[int, ...]:
    """Parse 'a,b[,c]' into integers."""
    parts = text.split(",")
    if len(parts) != count:
        raise ValueError(f"Expected {count} comma-separated integers, got {text!r}")
    try:
        return tuple(int(p) for p in parts)
    except ValueError:
        raise ValueError(f"Expected integers, got {text!r}") from None


def _resolve_cell(height_map: HeightMap, text: str) -> Point3D:
    """Turn 'X,Y' into a cell with its elevation filled in."""
    x, y = _parse_ints(text, 2)
    cell = height_map.cell_at(x, y)
    if cell is None:
        raise ValueError(f"No tile at {x},{y}")
    return cell


def _resolve_start(height_map: HeightMap, text: str | None) -> Point3D:
    if text is not None:
        return _resolve_cell(height_map, text)
    origin = Point3D(0, 0, 0)
    if height_map.is_valid_cell(origin):
        return origin
    cell = height_map.closest_valid_cell(origin)
    if cell is None:
        raise ValueError("Map has no tiles")
    logger.info("Starting at %s, the closest valid cell to the origin", cell)
    return cell


if __name__ == "__main__":
    sys.exit(main())
