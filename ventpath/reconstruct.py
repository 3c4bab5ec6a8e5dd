from __future__ import annotations

from typing import Dict, List

from .cells import Cell
from .errors import PathReconstructionError


def reconstruct_path(predecessors: Dict[Cell, Cell], start: Cell, goal: Cell) -> List[Cell]:
    """Walk predecessors from goal back to start; returns [start .. goal]."""
    path: List[Cell] = [goal]
    node = goal
    # A chain longer than the map itself means a cycle.
    limit = len(predecessors) + 1
    while node != start:
        if node not in predecessors or len(path) > limit:
            raise PathReconstructionError(f"no predecessor chain from {goal} back to {start}")
        node = predecessors[node]
        path.append(node)
    path.reverse()
    return path


__all__ = ["reconstruct_path"]
