from __future__ import annotations

import logging
import os
from dataclasses import dataclass
from functools import lru_cache

_LOG_LEVEL_ENV = "PSTRUCTS_LOG_LEVEL"
_CHECK_INVARIANTS_ENV = "PSTRUCTS_CHECK_INVARIANTS"


def _bool_from_env(value: str | None, *, default: bool) -> bool:
    if value is None:
        return default
    value = value.strip().lower()
    if value in {"1", "true", "yes", "on"}:
        return True
    if value in {"0", "false", "no", "off"}:
        return False
    return default


def _parse_log_level(raw: str | None) -> int:
    if raw is None or raw.strip() == "":
        return logging.WARNING
    value = raw.strip()
    if value.isdigit():
        return int(value)
    level = logging.getLevelName(value.upper())
    if not isinstance(level, int):
        raise ValueError(f"Unsupported log level '{raw}'")
    return level


@dataclass(frozen=True)
class RuntimeConfig:
    """Process-wide settings read from the environment."""

    log_level: int = logging.WARNING
    check_invariants: bool = False

    @classmethod
    def from_env(cls) -> "RuntimeConfig":
        return cls(
            log_level=_parse_log_level(os.getenv(_LOG_LEVEL_ENV)),
            check_invariants=_bool_from_env(
                os.getenv(_CHECK_INVARIANTS_ENV), default=False
            ),
        )


@lru_cache(maxsize=None)
def runtime_config() -> RuntimeConfig:
    return RuntimeConfig.from_env()


def reset_runtime_config() -> None:
    """Forget the cached configuration so the next read hits the environment."""

    runtime_config.cache_clear()
