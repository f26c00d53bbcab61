"""Search nodes and the per-search node arena.

Nodes live in a NodeArena for the duration of one find_path call and refer
to their predecessor by integer handle into that arena.
"""

from __future__ import annotations

from dataclasses import dataclass

from isopath.simulation.coordinates import Point3D


@dataclass(slots=True)
class Node:
    """A cell under consideration by the search.

    Attributes:
        position: Cartesian cell.
        g_cost: Cost from the start along the best known route.
        h_cost: Heuristic estimate to the goal.
        f_cost: g_cost + h_cost.
        parent: Arena handle of the predecessor, None for the start node.
        height: Standable height, resolved when the node is reached.
    """
    position: Point3D
    g_cost: float = 0.0
    h_cost: float = 0.0
    f_cost: float = 0.0
    parent: int | None = None
    height: float = 0.0


class NodeArena:
    """Owns every node created during one search."""

    def __init__(self) -> None:
        self._nodes: list[Node] = []

    def __len__(self) -> int:
        return len(self._nodes)

    def __getitem__(self, handle: int) -> Node:
        return self._nodes[handle]

    def add(self, node: Node) -> int:
        """Store a node and return its handle."""
        self._nodes.append(node)
        return len(self._nodes) - 1

    def path_to(self, handle: int) -> list[Point3D]:
        """Walk parent links back to the root and return root-to-node positions."""
        path: list[Point3D] = []
        current: int | None = handle
        while current is not None:
            node = self._nodes[current]
            path.append(node.position)
            current = node.parent
        path.reverse()
        return path
