"""Outcome kinds and the optional exception hierarchy.

Search outcomes are returned as values (see ``PathResult``). Callers that
prefer exceptions can call ``PathResult.raise_for_error()`` which maps each
``ErrorKind`` onto one of the classes below.
"""

from __future__ import annotations

from enum import Enum


class ErrorKind(str, Enum):
    INVALID_INPUT = "invalid_input"
    UNREACHABLE = "unreachable"
    BUDGET_EXHAUSTED = "budget_exhausted"


class PathfindingError(Exception):
    kind: ErrorKind

    def __init__(self, message: str, start=None, goal=None):
        super().__init__(message)
        self.start = start
        self.goal = goal


class InvalidInputError(PathfindingError):
    kind = ErrorKind.INVALID_INPUT


class UnreachableError(PathfindingError):
    kind = ErrorKind.UNREACHABLE


class BudgetExhaustedError(PathfindingError):
    kind = ErrorKind.BUDGET_EXHAUSTED


class PathReconstructionError(RuntimeError):
    """Predecessor chain does not lead back to the start cell."""


class ConfigError(ValueError):
    pass


ERROR_CLASSES = {
    ErrorKind.INVALID_INPUT: InvalidInputError,
    ErrorKind.UNREACHABLE: UnreachableError,
    ErrorKind.BUDGET_EXHAUSTED: BudgetExhaustedError,
}


__all__ = [
    "ErrorKind",
    "PathfindingError",
    "InvalidInputError",
    "UnreachableError",
    "BudgetExhaustedError",
    "PathReconstructionError",
    "ConfigError",
    "ERROR_CLASSES",
]
