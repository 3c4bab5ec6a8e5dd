"""In-memory map implementing the ``MapQuery`` capability.

Wall keys follow the search's convention:

  vertical wall (x, y)    boundary between cells (x-1, y) and (x, y)
  horizontal wall (x, y)  boundary between cells (x, y-1) and (x, y)

Unset walls cost ``default_wall_cost`` (1 = no surcharge). Vents carry an
outbound cost and an ordered partner list; ``link_vents`` registers both
directions but each side keeps its own cost.
"""

from __future__ import annotations

import math
from typing import Dict, Iterable, List, Sequence, Tuple

from .cells import Cell, as_cell

VENT_CHAR = "V"


class GridMap:
    def __init__(self, width: int, height: int, default_wall_cost: float = 1.0):
        if width <= 0 or height <= 0:
            raise ValueError(f"grid dimensions must be positive, got {width}x{height}")
        self._width = int(width)
        self._height = int(height)
        self.default_wall_cost = default_wall_cost
        self._vertical: Dict[Cell, float] = {}
        self._horizontal: Dict[Cell, float] = {}
        self._vent_costs: Dict[Cell, float] = {}
        self._vent_links: Dict[Cell, List[Cell]] = {}

    # ---- MapQuery -------------------------------------------------------

    @property
    def width(self) -> int:
        return self._width

    @property
    def height(self) -> int:
        return self._height

    def has_vent(self, x: int, y: int) -> bool:
        return Cell(x, y) in self._vent_costs

    def get_vent_cost(self, x: int, y: int) -> float:
        return self._vent_costs.get(Cell(x, y), math.inf)

    def get_other_vent_positions(self, cell) -> List[Cell]:
        return list(self._vent_links.get(as_cell(cell), ()))

    def get_vertical_wall_cost(self, x: int, y: int) -> float:
        return self._vertical.get(Cell(x, y), self.default_wall_cost)

    def get_horizontal_wall_cost(self, x: int, y: int) -> float:
        return self._horizontal.get(Cell(x, y), self.default_wall_cost)

    # ---- authoring ------------------------------------------------------

    def contains(self, cell) -> bool:
        x, y = cell
        return 0 <= x < self._width and 0 <= y < self._height

    def _require_inside(self, cell) -> Cell:
        c = as_cell(cell)
        if not self.contains(c):
            raise ValueError(f"{tuple(c)} is outside the {self._width}x{self._height} grid")
        return c

    @staticmethod
    def _check_cost(cost: float) -> float:
        cost = float(cost)
        if math.isnan(cost) or cost < 0:
            raise ValueError(f"cost must be a non-negative number or inf, got {cost}")
        return cost

    def set_vertical_wall(self, x: int, y: int, cost: float) -> None:
        self._vertical[Cell(x, y)] = self._check_cost(cost)

    def set_horizontal_wall(self, x: int, y: int, cost: float) -> None:
        self._horizontal[Cell(x, y)] = self._check_cost(cost)

    def set_wall_between(self, a, b, cost: float) -> None:
        """Set the wall on the shared edge of two 4-adjacent cells."""
        a = as_cell(a)
        b = as_cell(b)
        dx, dy = b.x - a.x, b.y - a.y
        if abs(dx) + abs(dy) != 1:
            raise ValueError(f"{tuple(a)} and {tuple(b)} are not 4-adjacent")
        if dx:
            self.set_vertical_wall(max(a.x, b.x), a.y, cost)
        else:
            self.set_horizontal_wall(a.x, max(a.y, b.y), cost)

    def enclose(self, cell, cost: float = math.inf) -> None:
        """Put a wall of ``cost`` on all four sides of ``cell``."""
        c = self._require_inside(cell)
        self.set_vertical_wall(c.x, c.y, cost)
        self.set_vertical_wall(c.x + 1, c.y, cost)
        self.set_horizontal_wall(c.x, c.y, cost)
        self.set_horizontal_wall(c.x, c.y + 1, cost)

    def add_vent(self, cell, cost: float = 1.0) -> Cell:
        c = self._require_inside(cell)
        self._vent_costs[c] = self._check_cost(cost)
        self._vent_links.setdefault(c, [])
        return c

    def link_vents(self, a, b) -> None:
        a = as_cell(a)
        b = as_cell(b)
        if a == b:
            raise ValueError("a vent cannot link to itself")
        for v in (a, b):
            if v not in self._vent_costs:
                raise ValueError(f"{tuple(v)} is not a vent")
        if b not in self._vent_links[a]:
            self._vent_links[a].append(b)
        if a not in self._vent_links[b]:
            self._vent_links[b].append(a)

    def vents(self) -> List[Cell]:
        return sorted(self._vent_costs)

    @classmethod
    def from_rows(cls, rows: Sequence[str], vent_cost: float = 1.0) -> "GridMap":
        """Build a map from text rows; row index is y, column index is x.

        ``V`` marks a vent; every vent is linked to every other one. Any other
        character is plain floor. Walls are added afterwards with the setters.
        """
        if not rows:
            raise ValueError("at least one row is required")
        width = len(rows[0])
        if any(len(r) != width for r in rows):
            raise ValueError("rows must all have the same length")
        grid = cls(width, len(rows))
        vents: List[Cell] = []
        for y, row in enumerate(rows):
            for x, ch in enumerate(row):
                if ch == VENT_CHAR:
                    vents.append(grid.add_vent((x, y), vent_cost))
        for i, a in enumerate(vents):
            for b in vents[i + 1:]:
                grid.link_vents(a, b)
        return grid

    def iter_cells(self) -> Iterable[Tuple[int, int]]:
        for y in range(self._height):
            for x in range(self._width):
                yield Cell(x, y)


__all__ = ["GridMap", "VENT_CHAR"]
