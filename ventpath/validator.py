"""Single-move legality check used by movement controllers (no search)."""

from __future__ import annotations

import math
from typing import Tuple

from .cells import manhattan
from .edge_cost import step_cost
from .map_query import MapQuery, is_inside


def is_movement_blocked(from_cell: Tuple[int, int], to_cell: Tuple[int, int], map_query: MapQuery) -> bool:
    """Return True if moving ``from_cell`` -> ``to_cell`` is not allowed.

    - destination outside the grid: blocked
    - non-adjacent move: allowed only when both cells are vents, whatever their
      declared cost or partner list
    - adjacent move: blocked iff the crossed wall is impassable
    """
    if not is_inside(to_cell, map_query):
        return True
    if manhattan(from_cell, to_cell) > 1:
        return not (map_query.has_vent(*from_cell) and map_query.has_vent(*to_cell))
    return math.isinf(step_cost(from_cell, to_cell, map_query))


__all__ = ["is_movement_blocked"]
