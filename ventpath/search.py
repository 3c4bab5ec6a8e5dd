"""Dijkstra search over grid steps and vent teleports.

Lifecycle of one call:

  Initialized  distance[start] = 0 and (0, start) queued
  Running      pop the cheapest record; skip it when stale; stop at the goal;
               relax the four grid neighbours (+x, -x, +y, -y) and, for a vent
               with a finite cost, every partner vent
  Terminated   FOUND, UNREACHABLE, INVALID_INPUT or BUDGET_EXHAUSTED

Only strictly cheaper routes replace a recorded distance, and equal-cost
records leave the frontier in push order, so identical inputs always give the
identical path.

All state lives in ``_SearchState`` created per call. Nothing is shared
between calls, so concurrent searches over the same (unchanging) map are safe.
The map must not be mutated while a search is running.
"""

from __future__ import annotations

import math
import time
from typing import Callable, Dict, Optional, Tuple

from .cells import Cell, as_cell, neighbours
from .config import DEFAULT_CONFIG, SearchConfig
from .edge_cost import step_cost, teleport_edges
from .errors import ErrorKind
from .frontier import Frontier
from .map_query import MapQuery, is_inside
from .metrics import init_metrics
from .reconstruct import reconstruct_path
from .result import PathResult

CancelCheck = Callable[[], bool]


class _SearchState:
    __slots__ = ("distance", "predecessor", "frontier", "metrics")

    def __init__(self, enable_metrics: bool):
        self.distance: Dict[Cell, float] = {}
        self.predecessor: Dict[Cell, Cell] = {}
        self.frontier = Frontier()
        self.metrics = init_metrics() if enable_metrics else None

    def relax(self, node: Cell, via: Cell, candidate: float) -> bool:
        best = self.distance.get(node)
        if best is not None and candidate >= best:
            return False
        self.distance[node] = candidate
        self.predecessor[node] = via
        self.frontier.push(candidate, node)
        return True

    def count(self, key: str, amount: int = 1) -> None:
        if self.metrics is not None:
            self.metrics[key] += amount


def _expand(state: _SearchState, current: Cell, current_dist: float, map_query: MapQuery) -> None:
    for neighbour in neighbours(current):
        if not is_inside(neighbour, map_query):
            continue
        cost = step_cost(current, neighbour, map_query)
        if math.isinf(cost):
            continue
        if state.relax(neighbour, current, current_dist + cost):
            state.count('grid_relaxations')
    # Vent edges are priced by the source vent only.
    for partner, cost in teleport_edges(current, map_query):
        if state.relax(partner, current, current_dist + cost):
            state.count('vent_relaxations')


def find_shortest_path(
    start: Tuple[int, int],
    goal: Tuple[int, int],
    map_query: MapQuery,
    config: Optional[SearchConfig] = None,
    *,
    should_cancel: Optional[CancelCheck] = None,
) -> PathResult:
    """Minimum-cost path from ``start`` to ``goal``.

    Returns a PathResult whose ``path`` runs start -> goal inclusive, or whose
    ``error`` is INVALID_INPUT (an endpoint outside the grid or with
    non-integral coordinates; no wall or vent query is made), UNREACHABLE,
    or BUDGET_EXHAUSTED (only when
    ``config.max_expansions`` or ``should_cancel`` stopped the search early).
    """
    cfg = config or DEFAULT_CONFIG
    try:
        start = as_cell(start)
        goal = as_cell(goal)
    except ValueError:
        # Fractional coordinates name no cell; report them like out-of-bounds ones.
        return PathResult.failed(Cell(*start), Cell(*goal), ErrorKind.INVALID_INPUT)
    if not is_inside(start, map_query) or not is_inside(goal, map_query):
        return PathResult.failed(start, goal, ErrorKind.INVALID_INPUT)

    began = time.perf_counter()
    state = _SearchState(cfg.enable_metrics)
    state.distance[start] = 0.0
    state.frontier.push(0.0, start)
    outcome = ErrorKind.UNREACHABLE
    expanded = 0

    while state.frontier:
        record = state.frontier.pop_min()
        state.count('pops')
        current = record.cell
        current_dist = state.distance.get(current)
        if current_dist is None or record.cost > current_dist:
            state.count('stale_pops')
            continue
        if current == goal:
            outcome = None
            break
        if cfg.max_expansions is not None and expanded >= cfg.max_expansions:
            outcome = ErrorKind.BUDGET_EXHAUSTED
            break
        if should_cancel is not None and should_cancel():
            outcome = ErrorKind.BUDGET_EXHAUSTED
            break
        expanded += 1
        _expand(state, current, current_dist, map_query)

    metrics = {}
    if state.metrics is not None:
        state.metrics['expanded'] = expanded
        state.metrics['pushes'] = state.frontier.pushes
        state.metrics['runtime_ms'] = (time.perf_counter() - began) * 1000.0
        metrics = state.metrics

    if outcome is not None:
        return PathResult.failed(start, goal, outcome, metrics)
    goal_dist = state.distance.get(goal, math.inf)
    if math.isinf(goal_dist):
        return PathResult.failed(start, goal, ErrorKind.UNREACHABLE, metrics)
    path = reconstruct_path(state.predecessor, start, goal)
    return PathResult.found(start, goal, path, goal_dist, metrics)


__all__ = ["find_shortest_path", "CancelCheck"]
