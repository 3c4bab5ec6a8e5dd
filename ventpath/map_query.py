"""Read-only map capability consumed by the search and the validator.

The core never knows how walls or vents are stored; anything exposing the
members below can be searched. Implementations must not be mutated while a
search over them is in flight.

Costs are non-negative floats; ``math.inf`` marks an impassable wall or a
disabled vent.
"""

from __future__ import annotations

from typing import Iterable, Protocol, Tuple, runtime_checkable


@runtime_checkable
class MapQuery(Protocol):
    @property
    def width(self) -> int: ...

    @property
    def height(self) -> int: ...

    def has_vent(self, x: int, y: int) -> bool: ...

    def get_vent_cost(self, x: int, y: int) -> float: ...

    def get_other_vent_positions(self, cell: Tuple[int, int]) -> Iterable[Tuple[int, int]]: ...

    def get_vertical_wall_cost(self, x: int, y: int) -> float: ...

    def get_horizontal_wall_cost(self, x: int, y: int) -> float: ...


def is_inside(cell: Tuple[int, int], map_query: MapQuery) -> bool:
    x, y = cell
    return 0 <= x < map_query.width and 0 <= y < map_query.height


__all__ = ["MapQuery", "is_inside"]
