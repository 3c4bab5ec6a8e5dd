"""Navigation helpers for movement controllers.

Responsibility: the thin layer between a character controller and the search
core. The core returns outcomes as values and stays silent; this module is
where those outcomes get logged.

 - plan_route(map, start, goal)   full search, logs route_planned / route_failed
 - next_step(map, position, goal) the single cell to move to next, or None
 - legal_moves(map, cell)         every single move a controller may attempt
                                  from ``cell`` (open neighbours + vent partners)

A move counts as legal when it is an open 4-neighbour step or an outbound
teleport edge of the current vent. A teleport to a partner that happens to be
adjacent ignores the wall between the two cells, exactly as the search does.
"""

from __future__ import annotations

from typing import List, Optional, Tuple

from ventpath.cells import Cell, as_cell, neighbours
from ventpath.config import SearchConfig
from ventpath.edge_cost import teleport_edges
from ventpath.errors import ErrorKind
from ventpath.logging_utils import get_logger
from ventpath.map_query import MapQuery, is_inside
from ventpath.result import PathResult
from ventpath.search import CancelCheck, find_shortest_path
from ventpath.validator import is_movement_blocked

log = get_logger("navigation")


def plan_route(
    map_query: MapQuery,
    start: Tuple[int, int],
    goal: Tuple[int, int],
    config: Optional[SearchConfig] = None,
    *,
    should_cancel: Optional[CancelCheck] = None,
) -> PathResult:
    result = find_shortest_path(start, goal, map_query, config, should_cancel=should_cancel)
    if result.ok:
        log.info(
            event="route_planned",
            start=result.start,
            goal=result.goal,
            steps=result.steps,
            cost=result.cost,
            expanded=result.metrics.get("expanded"),
        )
    else:
        # Unreachable is an expected outcome; only bad input is a warning.
        emit = log.warn if result.error is ErrorKind.INVALID_INPUT else log.info
        emit(
            event="route_failed",
            start=result.start,
            goal=result.goal,
            reason=result.error.value,
        )
    return result


def _teleport_targets(here: Cell, map_query: MapQuery) -> List[Cell]:
    return [partner for partner, _ in teleport_edges(here, map_query)]


def next_step(
    map_query: MapQuery,
    position: Tuple[int, int],
    goal: Tuple[int, int],
    config: Optional[SearchConfig] = None,
) -> Optional[Cell]:
    """Return the next cell on the cheapest route, or None when there is none.

    None is also returned when ``position`` already equals ``goal``.
    """
    result = plan_route(map_query, position, goal, config)
    if not result.ok or len(result.path) < 2:
        return None
    here, step = result.path[0], result.path[1]
    if step in _teleport_targets(here, map_query):
        return step
    if is_movement_blocked(here, step, map_query):
        log.error(event="route_step_blocked", at=here, to=step)
        return None
    return step


def legal_moves(map_query: MapQuery, cell: Tuple[int, int]) -> List[Cell]:
    c = as_cell(cell)
    if not is_inside(c, map_query):
        return []
    moves = [n for n in neighbours(c) if not is_movement_blocked(c, n, map_query)]
    for partner in _teleport_targets(c, map_query):
        if partner not in moves and is_inside(partner, map_query):
            moves.append(partner)
    return moves


__all__ = ["plan_route", "next_step", "legal_moves"]
