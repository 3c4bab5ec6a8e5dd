"""Frontier scheduler: a binary min-heap of (cost, sequence_id, cell) records.

The sequence id comes from a per-frontier counter and exists only to make the
ordering a strict total order when costs tie; earlier pushes win. Records are
never updated in place. A cheaper route to a cell is pushed as a new record and
the search discards the outdated one when it surfaces (lazy deletion).
"""

from __future__ import annotations

import heapq
import itertools
from typing import List, NamedTuple

from .cells import Cell


class FrontierRecord(NamedTuple):
    cost: float
    seq: int
    cell: Cell


class FrontierEmpty(IndexError):
    pass


class Frontier:
    __slots__ = ("_heap", "_counter", "pushes")

    def __init__(self):
        self._heap: List[FrontierRecord] = []
        self._counter = itertools.count()
        self.pushes = 0

    def push(self, cost: float, cell: Cell) -> FrontierRecord:
        record = FrontierRecord(cost, next(self._counter), cell)
        heapq.heappush(self._heap, record)
        self.pushes += 1
        return record

    def pop_min(self) -> FrontierRecord:
        if not self._heap:
            raise FrontierEmpty("pop from an empty frontier")
        return heapq.heappop(self._heap)

    def __len__(self) -> int:
        return len(self._heap)

    def __bool__(self) -> bool:
        return bool(self._heap)


__all__ = ["Frontier", "FrontierRecord", "FrontierEmpty"]
