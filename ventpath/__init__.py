"""Grid pathfinding with directional walls and vent teleports.

Public import surface:

    from ventpath import find_shortest_path, is_movement_blocked, GridMap

    grid = GridMap(10, 10)
    grid.set_wall_between((3, 4), (4, 4), float("inf"))
    result = find_shortest_path((0, 0), (9, 9), grid)
    if result.ok:
        print(result.path, result.cost)
    else:
        print(result.error)
"""

from .cells import Cell, DIRECTIONS, manhattan  # noqa: F401
from .config import SearchConfig
from .edge_cost import IMPASSABLE, step_cost
from .errors import (
    BudgetExhaustedError,
    ConfigError,
    ErrorKind,
    InvalidInputError,
    PathfindingError,
    UnreachableError,
)
from .grid_map import GridMap
from .map_query import MapQuery
from .result import PathResult
from .search import find_shortest_path
from .validator import is_movement_blocked

__all__ = [
    "Cell",
    "DIRECTIONS",
    "manhattan",
    "SearchConfig",
    "IMPASSABLE",
    "step_cost",
    "ErrorKind",
    "PathfindingError",
    "InvalidInputError",
    "UnreachableError",
    "BudgetExhaustedError",
    "ConfigError",
    "GridMap",
    "MapQuery",
    "PathResult",
    "find_shortest_path",
    "is_movement_blocked",
]
