"""Virtual scroll configuration sourced from environment."""

from __future__ import annotations

import logging
import os
from dataclasses import dataclass

_LOG = logging.getLogger("virtual_scroll.config")

OVERSCAN_DEFAULT = 5


def _flag(name: str, default: bool = False) -> bool:
    raw = os.getenv(name)
    if raw is None:
        return default
    return raw.strip().lower() in {"1", "true", "yes", "on"}


def _int(name: str, default: int) -> int:
    raw = os.getenv(name)
    if raw is None:
        return default
    try:
        return int(raw)
    except ValueError:
        _LOG.debug("config_int_invalid name=%s raw=%r", name, raw, exc_info=True)
        return default


def _choice(name: str, default: str, allowed: frozenset[str]) -> str:
    raw = os.getenv(name)
    if raw is None:
        return default
    normalized = raw.strip().lower()
    return normalized if normalized in allowed else default


@dataclass(frozen=True, slots=True)
class ScrollConfig:
    """Immutable virtual scroll configuration."""

    default_overscan: int
    trace_enabled: bool
    log_level: str
    log_format: str
    log_file: str | None = None


def resolve_log_level_name(default: str = "INFO") -> str:
    """Resolve log level with package-prefixed override."""
    value = os.getenv("VSCROLL_LOG_LEVEL")
    if value is None:
        value = os.getenv("LOG_LEVEL", default)
    return value.strip().upper()


def load_scroll_config() -> ScrollConfig:
    """Load immutable configuration from env vars."""
    log_file = os.getenv("VSCROLL_LOG_FILE", "").strip()
    return ScrollConfig(
        default_overscan=max(0, _int("VSCROLL_DEFAULT_OVERSCAN", OVERSCAN_DEFAULT)),
        trace_enabled=_flag("VSCROLL_TRACE", False),
        log_level=resolve_log_level_name(),
        log_format=_choice("VSCROLL_LOG_FORMAT", "text", frozenset({"text", "json"})),
        log_file=log_file or None,
    )


def default_overscan() -> int:
    return load_scroll_config().default_overscan


def enabled_trace() -> bool:
    return load_scroll_config().trace_enabled
