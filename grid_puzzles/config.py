"""Environment-driven settings for the word-search solver."""

from __future__ import annotations

import logging
import os
from dataclasses import dataclass
from typing import Dict, Optional

DEFAULTS: Dict[str, str] = {
    "WORD": "XMAS",
    "CROSS_WORD": "MAS",
    "LOG_LEVEL": "INFO",
}

ENV_PREFIX = "GRID_PUZZLES_"


@dataclass(frozen=True)
class SolverConfig:
    """Words to search for and how loudly to log."""

    word: str = DEFAULTS["WORD"]
    cross_word: str = DEFAULTS["CROSS_WORD"]
    log_level: str = DEFAULTS["LOG_LEVEL"]

    @property
    def level(self) -> int:
        return logging.getLevelName(self.log_level.upper())


def _from_env() -> Dict[str, str]:
    params = {}
    for key in DEFAULTS:
        value = os.environ.get(ENV_PREFIX + key)
        if value:
            params[key] = value
    return params


def load_config(overrides: Optional[Dict[str, str]] = None) -> SolverConfig:
    """Return :class:`SolverConfig` from defaults, environment and ``overrides``.

    Keys are the upper-case names in :data:`DEFAULTS`; ``None`` values in
    ``overrides`` are ignored.
    """
    params = dict(DEFAULTS)
    params.update(_from_env())
    if overrides:
        unknown = set(overrides) - set(DEFAULTS)
        if unknown:
            raise ValueError(f"unknown config keys: {sorted(unknown)}")
        params.update({k: v for k, v in overrides.items() if v is not None})

    if not params["WORD"]:
        raise ValueError("WORD must not be empty")
    if len(params["CROSS_WORD"]) % 2 == 0:
        raise ValueError(f"CROSS_WORD must have odd length, got {params['CROSS_WORD']!r}")
    level = params["LOG_LEVEL"].upper()
    if not isinstance(logging.getLevelName(level), int):
        raise ValueError(f"unknown LOG_LEVEL {params['LOG_LEVEL']!r}")

    return SolverConfig(word=params["WORD"], cross_word=params["CROSS_WORD"], log_level=level)


__all__ = ["DEFAULTS", "ENV_PREFIX", "SolverConfig", "load_config"]
