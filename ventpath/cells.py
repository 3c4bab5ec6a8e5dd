"""Grid cell value type and neighbour helpers."""

from __future__ import annotations

from typing import Iterator, NamedTuple, Tuple


class Cell(NamedTuple):
    """Immutable grid coordinate; compares equal to a plain ``(x, y)`` tuple."""

    x: int
    y: int

    def offset(self, dx: int, dy: int) -> "Cell":
        return Cell(self.x + dx, self.y + dy)


# Enumeration order is part of the tie-break contract: +x, -x, +y, -y.
DIRECTIONS: Tuple[Tuple[int, int], ...] = ((1, 0), (-1, 0), (0, 1), (0, -1))


def _coordinate(value) -> int:
    try:
        whole = int(value)
    except (TypeError, ValueError, OverflowError):
        raise ValueError(f"cell coordinate must be an integer, got {value!r}") from None
    if whole != value:
        raise ValueError(f"cell coordinate must be an integer, got {value!r}")
    return whole


def as_cell(value) -> Cell:
    """Coerce an ``(x, y)`` pair to a Cell.

    Integral floats such as ``2.0`` are accepted; anything that would need
    truncation raises ValueError.
    """
    if isinstance(value, Cell):
        return value
    x, y = value
    return Cell(_coordinate(x), _coordinate(y))


def manhattan(a: Tuple[int, int], b: Tuple[int, int]) -> int:
    return abs(a[0] - b[0]) + abs(a[1] - b[1])


def neighbours(cell: Cell) -> Iterator[Cell]:
    for dx, dy in DIRECTIONS:
        yield cell.offset(dx, dy)


__all__ = ["Cell", "DIRECTIONS", "as_cell", "manhattan", "neighbours"]
