"""Edge cost model.

Adjacent steps cost a base of 1 plus the surcharge of the wall they cross:

  * horizontal move (dx != 0) crosses the vertical wall at
    x = to.x when moving right, from.x when moving left; y = from.y
  * vertical move (dy != 0) crosses the horizontal wall at
    x = from.x; y = to.y when moving up, from.y when moving down

Both travel directions resolve to the same physical wall. A wall cost of
``inf`` makes the step impassable; a finite cost c adds max(0, c - 1).

Vent (teleport) edges are directed and always priced with the source vent's
own cost, so A -> B and B -> A may differ.
"""

from __future__ import annotations

import math
from typing import Iterator, Tuple

from .cells import Cell, as_cell
from .map_query import MapQuery

IMPASSABLE = math.inf
BASE_STEP_COST = 1.0


def _wall_surcharge(wall_cost: float) -> float:
    if math.isinf(wall_cost):
        return IMPASSABLE
    return max(0.0, wall_cost - 1.0)


def step_cost(from_cell: Tuple[int, int], to_cell: Tuple[int, int], map_query: MapQuery) -> float:
    """Cost of a single 4-neighbour step, or IMPASSABLE.

    Any pair that is not exactly one axis-aligned step apart is IMPASSABLE.
    """
    fx, fy = from_cell
    tx, ty = to_cell
    dx = tx - fx
    dy = ty - fy
    if abs(dx) + abs(dy) != 1:
        return IMPASSABLE
    if dx != 0:
        wall = map_query.get_vertical_wall_cost(tx if dx > 0 else fx, fy)
    else:
        wall = map_query.get_horizontal_wall_cost(fx, ty if dy > 0 else fy)
    surcharge = _wall_surcharge(wall)
    if math.isinf(surcharge):
        return IMPASSABLE
    return BASE_STEP_COST + surcharge


def vent_cost(cell: Tuple[int, int], map_query: MapQuery) -> float:
    x, y = cell
    if not map_query.has_vent(x, y):
        return IMPASSABLE
    return map_query.get_vent_cost(x, y)


def teleport_edges(cell: Tuple[int, int], map_query: MapQuery) -> Iterator[Tuple[Cell, float]]:
    """Yield ``(partner, cost)`` for every outbound vent edge of ``cell``.

    Nothing is yielded for non-vents or vents whose cost is infinite.
    """
    cost = vent_cost(cell, map_query)
    if math.isinf(cost):
        return
    for partner in map_query.get_other_vent_positions(as_cell(cell)):
        yield as_cell(partner), cost


__all__ = ["IMPASSABLE", "BASE_STEP_COST", "step_cost", "vent_cost", "teleport_edges"]
