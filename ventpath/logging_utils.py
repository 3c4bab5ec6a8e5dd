"""Minimal structured logging helper.

Emits one line per event as key=value pairs (or a JSON object) with a level
and timestamp. The search core never logs; this is for the caller-facing
services layer.

Usage:
    from ventpath.logging_utils import get_logger
    log = get_logger("navigation")
    log.info(event="route_planned", start=Cell(0, 0), steps=12, cost=14.0)

Environment:
    VENTPATH_LOG_LEVEL  debug | info | warn | error (default info)
    VENTPATH_LOG_JSON   1/true/yes/on for JSON lines

Settings are read on every call so tests can flip them with monkeypatch.
Cell values are written as ``x,y``. Reserved keys: level, ts, logger.
"""

from __future__ import annotations

import json
import os
import sys
import time

from .cells import Cell

LEVELS = {"debug": 10, "info": 20, "warn": 30, "error": 40}
_TRUTHY = ("1", "true", "TRUE", "yes", "on")


def _current_level() -> int:
    return LEVELS.get(os.getenv("VENTPATH_LOG_LEVEL", "info").lower(), 20)


def _json_mode() -> bool:
    return os.getenv("VENTPATH_LOG_JSON", "0") in _TRUTHY


def _render(value):
    """Cells log as ``x,y`` in both line formats."""
    if isinstance(value, Cell):
        return f"{value.x},{value.y}"
    return value


def _format(level: str, **fields) -> str:
    ts = int(time.time())
    fields = {k: _render(v) for k, v in fields.items() if v is not None}
    if _json_mode():
        rec = dict(fields)
        rec["level"] = level
        rec["ts"] = ts
        return json.dumps(rec, separators=(",", ":"), default=str)
    parts = [f"level={level}", f"ts={ts}"]
    for k, v in fields.items():
        if isinstance(v, (int, float)) and not isinstance(v, bool):
            parts.append(f"{k}={v}")
        else:
            parts.append(f"{k}={str(v).replace(' ', '_')}")
    return " ".join(parts)


class _Logger:
    def __init__(self, name: str | None = None):
        self.name = name or "ventpath"

    def _log(self, lvl: str, **fields):
        if LEVELS[lvl] < _current_level():
            return
        fields.setdefault("logger", self.name)
        print(_format(lvl, **fields), file=sys.stderr if lvl == "error" else sys.stdout)

    def debug(self, **fields):
        self._log("debug", **fields)

    def info(self, **fields):
        self._log("info", **fields)

    def warn(self, **fields):
        self._log("warn", **fields)

    def error(self, **fields):
        self._log("error", **fields)


_LOGGER_CACHE = {}


def get_logger(name: str) -> _Logger:
    if name not in _LOGGER_CACHE:
        _LOGGER_CACHE[name] = _Logger(name)
    return _LOGGER_CACHE[name]


log = get_logger("ventpath")
