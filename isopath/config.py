"""Shared constants for isopath. All project-wide configuration lives here."""

# --- Tiles ---
# Isometric tile footprint in world units (pixels at zoom 1).
TILE_WIDTH = 64
TILE_HEIGHT = 32
TILE_THICKNESS = 5  # standable surface sits this far above the tile's base

# --- Agent ---
AGENT_WIDTH = 20   # horizontal clearance the agent needs
AGENT_HEIGHT = 60
# Highest step the agent can climb, as a fraction of its own height
AGENT_CLIMB_NUMERATOR = 2
AGENT_CLIMB_DENOMINATOR = 3

# --- Obstacles (stackable boxes) ---
OBSTACLE_MIN_SIZE = 8
OBSTACLE_MAX_SIZE = TILE_HEIGHT

# --- Search ---
CARDINAL_COST = 1.0
DIAGONAL_COST = 2 ** 0.5

# --- Preview window ---
SCREEN_WIDTH = 1280
SCREEN_HEIGHT = 720
FPS = 60
AGENT_STEP_MS = 250  # one waypoint per step in the preview
MAP_ORIGIN_Y = 120   # vertical offset of the grid's top corner

# --- Colors ---
COLOR_BG = (24, 24, 32)
COLOR_TILE_SURFACE = (200, 60, 60)
COLOR_TILE_LEFT = (220, 20, 60)
COLOR_TILE_RIGHT = (160, 0, 0)
COLOR_TILE_OUTLINE = (60, 10, 10)
COLOR_CUBE_TOP = (255, 87, 51)
COLOR_CUBE_LEFT = (51, 153, 255)
COLOR_CUBE_RIGHT = (255, 215, 0)
COLOR_AGENT = (255, 0, 0)
COLOR_PATH = (240, 240, 240)
COLOR_DEBUG_TEXT = (200, 200, 200)
