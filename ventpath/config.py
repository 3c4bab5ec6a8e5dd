"""Search configuration.

Values can be passed directly or resolved from the environment through
``SearchConfig.from_env``. Recognised variables:

  VENTPATH_MAX_EXPANSIONS   Upper bound on finalized cells per search (unset = unlimited)
  VENTPATH_ENABLE_METRICS   Attach counters to each PathResult (default on)

An optional ``.env`` file is loaded first when ``env_file`` is given.
"""

from __future__ import annotations

import os
from dataclasses import dataclass
from typing import Optional

from dotenv import load_dotenv

from .errors import ConfigError

_FALSY = {"0", "false", "no", "off", ""}


@dataclass(frozen=True)
class SearchConfig:
    max_expansions: Optional[int] = None
    enable_metrics: bool = True

    def __post_init__(self):
        if self.max_expansions is not None and self.max_expansions < 0:
            raise ConfigError(f"max_expansions must be >= 0, got {self.max_expansions}")

    @classmethod
    def from_env(cls, env_file: Optional[str] = None) -> "SearchConfig":
        if env_file:
            load_dotenv(env_file, override=False)
        raw_budget = os.getenv("VENTPATH_MAX_EXPANSIONS")
        max_expansions = None
        if raw_budget not in (None, ""):
            try:
                max_expansions = int(raw_budget)
            except ValueError:
                raise ConfigError(f"VENTPATH_MAX_EXPANSIONS is not an integer: {raw_budget!r}") from None
        enable_metrics = True
        if "VENTPATH_ENABLE_METRICS" in os.environ:
            enable_metrics = os.environ["VENTPATH_ENABLE_METRICS"].strip().lower() not in _FALSY
        return cls(max_expansions=max_expansions, enable_metrics=enable_metrics)


DEFAULT_CONFIG = SearchConfig()


__all__ = ["SearchConfig", "DEFAULT_CONFIG"]
