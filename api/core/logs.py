"""
Process-wide logging setup.

Modules log through `logging.getLogger(__name__)`; this module only decides
where the records go and how they look. JSON lines by default so the log
sink can index the `event key=value` messages without parsing plain text.
"""

from __future__ import annotations

import logging
import os
import sys

from pythonjsonlogger.json import JsonFormatter

_JSON_FORMAT = "%(asctime)s %(levelname)s %(name)s %(message)s"
_TEXT_FORMAT = "%(asctime)s | %(levelname)-8s | %(name)s | %(message)s"

_configured = False


def log_level() -> str:
    return os.environ.get("LOG_LEVEL", "INFO").strip().upper() or "INFO"


def log_format() -> str:
    return os.environ.get("LOG_FORMAT", "json").strip().lower() or "json"


def _build_formatter(fmt: str) -> logging.Formatter:
    if fmt == "text":
        return logging.Formatter(_TEXT_FORMAT)
    return JsonFormatter(_JSON_FORMAT)


def configure_logging(*, force: bool = False) -> None:
    """
    Install one stdout handler on the root logger. Safe to call repeatedly.
    """
    global _configured
    if _configured and not force:
        return None

    root = logging.getLogger()
    for handler in list(root.handlers):
        if getattr(handler, "_orders_api", False):
            root.removeHandler(handler)

    handler = logging.StreamHandler(sys.stdout)
    handler.setFormatter(_build_formatter(log_format()))
    handler._orders_api = True  # type: ignore[attr-defined]
    root.addHandler(handler)
    root.setLevel(getattr(logging, log_level(), logging.INFO))
    _configured = True
