"""Logging setup for the ``virtual_scroll`` logger tree.

The package only ever logs below ``virtual_scroll``. Importing the package
installs a ``NullHandler`` there; ``configure_logging`` opts in to output.
Scan and list debug records carry their numbers as ``extra=`` fields, which the
JSON formatter emits under ``fields``.
"""

from __future__ import annotations

import logging
from datetime import UTC, datetime
from pathlib import Path

import orjson

from virtual_scroll.runtime.config import ScrollConfig, load_scroll_config

PACKAGE_LOGGER = "virtual_scroll"
SCROLL_FIELDS: tuple[str, ...] = (
    "tag",
    "num_of_items",
    "scroll_position",
    "container_size",
    "content_size",
    "window",
    "offset",
)

_HANDLER: logging.Handler | None = None


class JsonFormatter(logging.Formatter):
    """One JSON object per record with the scroll fields the record carries."""

    def format(self, record: logging.LogRecord) -> str:
        payload: dict[str, object] = {
            "ts": datetime.fromtimestamp(record.created, UTC).isoformat(),
            "level": record.levelname,
            "logger": record.name,
            "msg": record.getMessage(),
        }
        fields = {name: getattr(record, name) for name in SCROLL_FIELDS if hasattr(record, name)}
        if fields:
            payload["fields"] = fields
        if record.exc_info:
            payload["exc_info"] = self.formatException(record.exc_info)
        return orjson.dumps(payload, default=str).decode("utf-8")


def install_null_handler() -> logging.Logger:
    """Keep library records silent until the host configures logging."""
    logger = logging.getLogger(PACKAGE_LOGGER)
    if not any(isinstance(handler, logging.NullHandler) for handler in logger.handlers):
        logger.addHandler(logging.NullHandler())
    return logger


def configure_logging(config: ScrollConfig | None = None) -> logging.Handler:
    """Attach one output handler to the package logger, replacing a previous one."""
    global _HANDLER

    config = load_scroll_config() if config is None else config
    logger = logging.getLogger(PACKAGE_LOGGER)
    if _HANDLER is not None:
        logger.removeHandler(_HANDLER)
        _HANDLER.close()
        _HANDLER = None

    handler: logging.Handler
    if config.log_file:
        file_path = Path(config.log_file)
        file_path.parent.mkdir(parents=True, exist_ok=True)
        handler = logging.FileHandler(file_path, mode="a", encoding="utf-8", delay=True)
    else:
        handler = logging.StreamHandler()
    if config.log_format == "json":
        handler.setFormatter(JsonFormatter())
    else:
        handler.setFormatter(logging.Formatter("%(asctime)s %(levelname)s %(name)s: %(message)s"))

    logger.setLevel(getattr(logging, config.log_level, logging.INFO))
    logger.addHandler(handler)
    _HANDLER = handler
    return handler
