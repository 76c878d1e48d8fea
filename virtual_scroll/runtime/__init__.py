"""Virtual scroll runtime modules."""

from virtual_scroll.runtime.config import (
    OVERSCAN_DEFAULT,
    ScrollConfig,
    default_overscan,
    load_scroll_config,
)
from virtual_scroll.runtime.logging import JsonFormatter, configure_logging, install_null_handler

__all__ = [
    "JsonFormatter",
    "OVERSCAN_DEFAULT",
    "ScrollConfig",
    "configure_logging",
    "default_overscan",
    "install_null_handler",
    "load_scroll_config",
]
