"""PathResult: the value returned by every search.

Success carries the cell sequence (start and goal inclusive) and its total
cost. Failure carries an ``ErrorKind`` and an empty path; it is an ordinary
outcome, not an exception.
"""

from __future__ import annotations

import math
from dataclasses import dataclass, field
from typing import Any, Dict, List, Optional, Tuple

from .cells import Cell
from .errors import ERROR_CLASSES, ErrorKind


@dataclass(frozen=True)
class PathResult:
    start: Cell
    goal: Cell
    path: Tuple[Cell, ...] = ()
    cost: float = math.inf
    error: Optional[ErrorKind] = None
    metrics: Dict[str, Any] = field(default_factory=dict, compare=False)

    @property
    def ok(self) -> bool:
        return self.error is None

    def __bool__(self) -> bool:
        return self.ok

    @property
    def steps(self) -> int:
        return max(0, len(self.path) - 1)

    def cells(self) -> List[Cell]:
        return list(self.path)

    def raise_for_error(self) -> "PathResult":
        if self.error is None:
            return self
        exc_cls = ERROR_CLASSES[self.error]
        raise exc_cls(f"{self.error.value}: {self.start} -> {self.goal}", start=self.start, goal=self.goal)

    @classmethod
    def found(cls, start: Cell, goal: Cell, path: List[Cell], cost: float, metrics=None) -> "PathResult":
        return cls(start=start, goal=goal, path=tuple(path), cost=cost, metrics=metrics or {})

    @classmethod
    def failed(cls, start: Cell, goal: Cell, error: ErrorKind, metrics=None) -> "PathResult":
        return cls(start=start, goal=goal, error=error, metrics=metrics or {})

    def to_dict(self) -> Dict[str, Any]:
        return {
            "start": list(self.start),
            "goal": list(self.goal),
            "path": [list(c) for c in self.path],
            "cost": None if math.isinf(self.cost) else self.cost,
            "error": self.error.value if self.error else None,
        }


__all__ = ["PathResult"]
