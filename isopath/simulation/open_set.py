"""Open set for A*: a min-heap on f-cost with lookup by position.

Heap entries are (f_cost, h_cost, sequence, handle, position). Ties on
f-cost go to the lower h-cost, then to the earlier insertion, so the pop
order never depends on heap internals. The sequence is unique, so positions
are never compared.

Decreasing a node's cost is done by pushing it again. The older entry stays
in the heap and is popped later; callers skip it through their closed set.
"""

from __future__ import annotations

import heapq

from isopath.simulation.coordinates import Point3D
from isopath.simulation.node import Node


class OpenSet:
    def __init__(self) -> None:
        self._heap: list[tuple[float, float, int, int, Point3D]] = []
        self._members: dict[Point3D, int] = {}
        self._sequence = 0

    def __len__(self) -> int:
        return len(self._heap)

    def push(self, node: Node, handle: int) -> None:
        """Insert (or re-insert after a cost decrease) the node at `handle`."""
        entry = (node.f_cost, node.h_cost, self._sequence, handle, node.position)
        heapq.heappush(self._heap, entry)
        self._sequence += 1
        self._members[node.position] = handle

    def pop(self) -> int:
        """Remove the lowest-cost entry and return its handle."""
        _f, _h, _seq, handle, position = heapq.heappop(self._heap)
        if self._members.get(position) == handle:
            del self._members[position]
        return handle

    def find(self, position: Point3D) -> int | None:
        """Handle of the open node at `position`, if any."""
        return self._members.get(position)
