from __future__ import annotations

import os
from dataclasses import dataclass
from typing import Mapping, Optional

from . import logger

ENV_PREFIX = "REGIONQUAD_"

DEFAULT_MAX_OBJECTS = 10
# Deep enough to separate any two distinct finite doubles.
DEFAULT_MAX_DEPTH = 2100

_TRUE_VALUES = {"1", "true", "yes", "on"}


@dataclass(frozen=True)
class QuadTreeSettings:
    max_objects: int = DEFAULT_MAX_OBJECTS
    max_depth: int = DEFAULT_MAX_DEPTH
    debug: bool = False


def load_settings(environ: Optional[Mapping[str, str]] = None) -> QuadTreeSettings:
    env = os.environ if environ is None else environ
    return QuadTreeSettings(
        max_objects=_read_int(env, "MAX_OBJECTS", DEFAULT_MAX_OBJECTS, minimum=1),
        max_depth=_read_int(env, "MAX_DEPTH", DEFAULT_MAX_DEPTH, minimum=0),
        debug=env.get(ENV_PREFIX + "DEBUG", "").strip().lower() in _TRUE_VALUES,
    )


def apply_settings(settings: QuadTreeSettings) -> None:
    logger.set_debug(settings.debug)


def _read_int(env: Mapping[str, str], key: str, default: int, minimum: int) -> int:
    name = ENV_PREFIX + key
    raw = env.get(name)
    if raw is None or not raw.strip():
        return default
    try:
        value = int(raw)
    except ValueError:
        raise ValueError(f"{name} must be an integer, got {raw!r}") from None
    if value < minimum:
        raise ValueError(f"{name} must be >= {minimum}, got {value}")
    return value
