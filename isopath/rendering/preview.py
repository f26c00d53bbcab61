"""Debug preview: draws the height map, boxes, agent and path.

Tiles are drawn as isometric diamonds with a thin side face, boxes as
three-faced cubes. Clicking a tile sends the agent there; the agent takes
one waypoint every AGENT_STEP_MS. The geometry helpers are plain functions
so they can be tested without a display.
"""

from __future__ import annotations

import pygame

from isopath.config import (
    AGENT_HEIGHT,
    AGENT_STEP_MS,
    AGENT_WIDTH,
    COLOR_AGENT,
    COLOR_BG,
    COLOR_CUBE_LEFT,
    COLOR_CUBE_RIGHT,
    COLOR_CUBE_TOP,
    COLOR_DEBUG_TEXT,
    COLOR_PATH,
    COLOR_TILE_LEFT,
    COLOR_TILE_OUTLINE,
    COLOR_TILE_RIGHT,
    COLOR_TILE_SURFACE,
    FPS,
    MAP_ORIGIN_Y,
    TILE_HEIGHT,
    TILE_THICKNESS,
    TILE_WIDTH,
)
from isopath.simulation.agent import Agent
from isopath.simulation.coordinates import Point3D, cartesian_to_isometric
from isopath.simulation.heightmap import HeightMap
from isopath.simulation.obstacles import Obstacle
from isopath.simulation.pathfinding import Pathfinder

ScreenPoint = tuple[float, float]

HALF_W = TILE_WIDTH / 2
HALF_H = TILE_HEIGHT / 2


def map_origin(screen_width: int) -> ScreenPoint:
    """Screen position of the grid's (0, 0) tile bounding box."""
    return (screen_width / 2 - HALF_W, MAP_ORIGIN_Y)


def tile_center(cell: Point3D, origin: ScreenPoint, height: float | None = None) -> ScreenPoint:
    """Screen center of a tile's surface, lifted to `height` if given."""
    world = cartesian_to_isometric(cell)
    lift = world.z if height is None else height
    return (origin[0] + world.x + HALF_W, origin[1] + world.y + HALF_H - lift)


def tile_polygon(cell: Point3D, origin: ScreenPoint) -> list[ScreenPoint]:
    """Top, right, bottom, left corners of a tile's surface diamond."""
    cx, cy = tile_center(cell, origin)
    return [
        (cx, cy - HALF_H),
        (cx + HALF_W, cy),
        (cx, cy + HALF_H),
        (cx - HALF_W, cy),
    ]


def tile_sides(cell: Point3D, origin: ScreenPoint) -> tuple[list[ScreenPoint], list[ScreenPoint]]:
    """Left and right side faces below a tile's surface."""
    _top, right, bottom, left = tile_polygon(cell, origin)
    t = TILE_THICKNESS
    left_face = [left, bottom, (bottom[0], bottom[1] + t), (left[0], left[1] + t)]
    right_face = [bottom, right, (right[0], right[1] + t), (bottom[0], bottom[1] + t)]
    return left_face, right_face


def cube_faces(obstacle: Obstacle, origin: ScreenPoint) -> dict[str, list[ScreenPoint]]:
    """Top, left and right faces of a box, centered on its tile."""
    cx, cy = tile_center(obstacle.cell, origin, height=obstacle.base)
    s = obstacle.size
    half = s / 2
    return {
        "top": [(cx, cy - s - half), (cx + s, cy - s), (cx, cy - s + half), (cx - s, cy - s)],
        "left": [(cx - s, cy - s), (cx, cy - s + half), (cx, cy + half), (cx - s, cy)],
        "right": [(cx, cy - s + half), (cx + s, cy - s), (cx + s, cy), (cx, cy + half)],
    }


def drawing_order(height_map: HeightMap) -> list[Point3D]:
    """Tiles back to front."""
    return sorted(height_map.cells(), key=lambda c: (c.x + c.y, c.z, c.x))


def pick_cell(height_map: HeightMap, screen_x: float, screen_y: float, origin: ScreenPoint) -> Point3D | None:
    """The front-most tile whose surface diamond contains the screen point."""
    for cell in reversed(drawing_order(height_map)):
        cx, cy = tile_center(cell, origin)
        if abs(screen_x - cx) / HALF_W + abs(screen_y - cy) / HALF_H <= 1:
            return cell
    return None


def standing_point(pathfinder: Pathfinder, cell: Point3D, origin: ScreenPoint) -> ScreenPoint:
    """Screen point of the surface an agent stands on at `cell`."""
    return tile_center(cell, origin, height=pathfinder.resolve_height(cell))


class Preview:
    """Interactive window around one agent."""

    def __init__(self, screen: pygame.Surface, agent: Agent) -> None:
        self._screen = screen
        self._agent = agent
        self._height_map = agent.pathfinder.height_map
        self._obstacles = agent.pathfinder.obstacles
        self._origin = map_origin(screen.get_width())
        self._font = pygame.font.SysFont("monospace", 16)
        self._clock = pygame.time.Clock()
        self._last_step_ms = 0

    def run(self) -> None:
        """Main loop. Returns when the window is closed."""
        running = True
        while running:
            for event in pygame.event.get():
                if event.type == pygame.QUIT:
                    running = False
                elif event.type == pygame.KEYDOWN and event.key == pygame.K_ESCAPE:
                    running = False
                elif event.type == pygame.MOUSEBUTTONDOWN and event.button == 1:
                    self._handle_click(*event.pos)

            now = pygame.time.get_ticks()
            if now - self._last_step_ms >= AGENT_STEP_MS:
                self._agent.step()
                self._last_step_ms = now

            self._draw()
            self._clock.tick(FPS)

    def _handle_click(self, screen_x: int, screen_y: int) -> None:
        cell = pick_cell(self._height_map, screen_x, screen_y, self._origin)
        if cell is not None:
            self._agent.navigate_to(cell)

    def _draw(self) -> None:
        self._screen.fill(COLOR_BG)
        for cell in drawing_order(self._height_map):
            left_face, right_face = tile_sides(cell, self._origin)
            pygame.draw.polygon(self._screen, COLOR_TILE_LEFT, left_face)
            pygame.draw.polygon(self._screen, COLOR_TILE_RIGHT, right_face)
            surface = tile_polygon(cell, self._origin)
            pygame.draw.polygon(self._screen, COLOR_TILE_SURFACE, surface)
            pygame.draw.polygon(self._screen, COLOR_TILE_OUTLINE, surface, 1)

        for obstacle in self._obstacles.sorted_for_drawing():
            faces = cube_faces(obstacle, self._origin)
            pygame.draw.polygon(self._screen, COLOR_CUBE_LEFT, faces["left"])
            pygame.draw.polygon(self._screen, COLOR_CUBE_RIGHT, faces["right"])
            pygame.draw.polygon(self._screen, COLOR_CUBE_TOP, faces["top"])

        self._draw_path()
        self._draw_agent()
        self._draw_status()
        pygame.display.flip()

    def _draw_path(self) -> None:
        cells = [self._agent.cell] + self._agent.path
        if len(cells) < 2:
            return
        points = [
            standing_point(self._agent.pathfinder, cell, self._origin)
            for cell in cells
        ]
        pygame.draw.lines(self._screen, COLOR_PATH, False, points, 2)

    def _draw_agent(self) -> None:
        cell = self._agent.cell
        cx, cy = standing_point(self._agent.pathfinder, cell, self._origin)
        rect = pygame.Rect(int(cx - AGENT_WIDTH / 2), int(cy - AGENT_HEIGHT), AGENT_WIDTH, AGENT_HEIGHT)
        pygame.draw.rect(self._screen, COLOR_AGENT, rect)

    def _draw_status(self) -> None:
        goal = self._agent.goal
        text = f"at {self._agent.cell}  goal {goal if goal is not None else '-'}  waypoints {len(self._agent.path)}"
        surf = self._font.render(text, True, COLOR_DEBUG_TEXT)
        self._screen.blit(surf, (10, 10))
