from __future__ import annotations
import logging
import os
from enum import Enum


class Scoping(str, Enum):
    # One mutable environment per closure generation; call bindings leak.
    SHARED = "shared"
    # Fresh frame per call, chained to the captured environment.
    LEXICAL = "lexical"


_TRUTHY = {"1", "true", "yes", "on"}

DEFAULT_SCOPING = Scoping.SHARED
DEFAULT_LOG_LEVEL = "WARNING"


def value_from_env(var: str, default: str) -> str:
    raw = os.environ.get(var)
    if raw is None or not raw.strip():
        return default
    return raw.strip()


def flag_from_env(var: str, default: bool = False) -> bool:
    raw = os.environ.get(var)
    if raw is None or not raw.strip():
        return default
    return raw.strip().lower() in _TRUTHY


def parse_scoping(name: str | Scoping) -> Scoping:
    if isinstance(name, Scoping):
        return name
    try:
        return Scoping(name.lower())
    except ValueError:
        choices = ", ".join(s.value for s in Scoping)
        raise ValueError(f"Unknown scoping '{name}', expected one of: {choices}")


def get_scoping() -> Scoping:
    return parse_scoping(value_from_env('SEVENLANG_SCOPING', DEFAULT_SCOPING.value))


def strict_strings() -> bool:
    """Whether an unterminated string literal is a lex error rather than running to end of input."""
    return flag_from_env('SEVENLANG_STRICT_STRINGS')


def get_log_level() -> int:
    name = value_from_env('SEVENLANG_LOG_LEVEL', DEFAULT_LOG_LEVEL).upper()
    level = logging.getLevelName(name)
    if not isinstance(level, int):
        raise ValueError(f"Unknown log level '{name}'")
    return level
