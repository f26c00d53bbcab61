"""Height map: the elevation of every tile in the grid.

Rows are indexed by x and columns by y, so rows[x][y] is the elevation of
cell (x, y). Rows may have different lengths. Anything outside a row is
treated as NO_TILE, which is impassable.
"""

from __future__ import annotations

import math
import textwrap
from collections.abc import Iterator, Sequence

from isopath.simulation.coordinates import Point3D

NO_TILE = None

_VOID_CHAR = "."


class HeightMap:
    """Read-only elevation grid.

    Attributes:
        rows: Elevation rows, rows[x][y]. NO_TILE marks a missing tile.
        row_count: Number of rows (extent along x).
        column_count: Length of the longest row (extent along y).
    """

    def __init__(self, rows: Sequence[Sequence[int | None]]) -> None:
        self.rows: list[list[int | None]] = [list(row) for row in rows]
        self.row_count = len(self.rows)
        self.column_count = max((len(row) for row in self.rows), default=0)

    def elevation_at(self, x: int, y: int) -> int | None:
        """Elevation of tile (x, y), or NO_TILE if there is none."""
        if not (math.isfinite(x) and math.isfinite(y)):
            return NO_TILE
        if x < 0 or y < 0 or x != int(x) or y != int(y):
            return NO_TILE
        x, y = int(x), int(y)
        if x >= self.row_count:
            return NO_TILE
        row = self.rows[x]
        if y >= len(row):
            return NO_TILE
        return row[y]

    def in_bounds(self, cell: Point3D) -> bool:
        """Check x and y against the grid's extents (longest row)."""
        return (
            0 <= cell.x <= self.row_count - 1
            and 0 <= cell.y <= self.column_count - 1
        )

    def has_tile(self, cell: Point3D) -> bool:
        return self.elevation_at(cell.x, cell.y) is not NO_TILE

    def is_valid_cell(self, cell: Point3D) -> bool:
        """In bounds, tile-backed, and z names that tile's surface."""
        if not self.in_bounds(cell):
            return False
        elevation = self.elevation_at(cell.x, cell.y)
        return elevation is not NO_TILE and elevation == cell.z

    def cell_at(self, x: int, y: int) -> Point3D | None:
        """The cell at (x, y) with its elevation filled in, or None."""
        elevation = self.elevation_at(x, y)
        if elevation is NO_TILE:
            return None
        return Point3D(x, y, elevation)

    def cells(self) -> Iterator[Point3D]:
        """All tile-backed cells in row order."""
        for x, row in enumerate(self.rows):
            for y, elevation in enumerate(row):
                if elevation is not NO_TILE:
                    yield Point3D(x, y, elevation)

    def closest_valid_cell(self, position: Point3D) -> Point3D | None:
        """Find the tile-backed cell nearest to `position`.

        A cell sharing x and y with `position` wins outright (only its
        elevation differs). A cell exactly equal to `position` is skipped,
        so callers use this to relocate off an invalid position. Returns
        None if the map has no tiles.
        """
        closest: Point3D | None = None
        best = float("inf")
        for cell in self.cells():
            if cell == position:
                continue
            if cell.x == position.x and cell.y == position.y:
                priority = 0.0
            else:
                priority = position.distance_to(cell)
            if priority < best:
                closest = cell
                best = priority
        return closest


def parse_height_map(text: str) -> HeightMap:
    """Parse a text map. One line per row; '0'-'9' = elevation, '.' = no tile.

    Leading/trailing blank lines and common indentation are stripped.

    Raises:
        ValueError: On any other character.
    """
    lines = textwrap.dedent(text).strip().splitlines()
    rows: list[list[int | None]] = []
    for x, line in enumerate(lines):
        row: list[int | None] = []
        for y, ch in enumerate(line.rstrip()):
            if ch == _VOID_CHAR:
                row.append(NO_TILE)
            elif ch.isdigit():
                row.append(int(ch))
            else:
                raise ValueError(f"Invalid map character {ch!r} at row {x}, column {y}")
        rows.append(row)
    return HeightMap(rows)


def load_height_map(path: str) -> HeightMap:
    """Read and parse a map file."""
    with open(path, encoding="utf-8") as f:
        return parse_height_map(f.read())
