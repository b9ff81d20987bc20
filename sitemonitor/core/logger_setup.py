"""
core/logger_setup.py - Logging configuration for hosts embedding the validators.

The validators only ever emit through ``logging.getLogger(__name__)``; a host
that wants readable output calls :func:`setup_logging` once at start-up.
Every record is passed through, so repeated rejections of the same input are
each logged.
"""

from __future__ import annotations

import copy
import logging
import logging.config
import os
import warnings
from typing import Any

from sitemonitor.core.settings import settings

__all__ = ["DEFAULT_LOGGING_CONFIG", "merge_dicts", "setup_logging"]

DEFAULT_LOGGING_CONFIG: dict[str, Any] = {
    "version": 1,
    "disable_existing_loggers": False,
    "formatters": {
        # RichHandler only honours datefmt
        "rich": {"datefmt": "%H:%M:%S"},
        "console": {"format": "%(asctime)s %(levelname)-8s %(name)s: %(message)s"},
    },
    "handlers": {
        "rich": {
            "class": "rich.logging.RichHandler",
            "markup": False,
            "rich_tracebacks": True,
            "show_path": False,
            "formatter": "rich",
        },
    },
    "loggers": {
        "sitemonitor": {"level": "NOTSET", "propagate": True},
    },
    "root": {
        "handlers": ["rich"],
        "level": "INFO",
    },
}

_CONSOLE_HANDLER: dict[str, Any] = {"class": "logging.StreamHandler", "formatter": "console"}


def merge_dicts(base: dict[str, Any], overrides: dict[str, Any]) -> dict[str, Any]:
    """
    Return a new dict holding *base* with *overrides* laid over it.

    Nested dicts merge key by key; any other override value replaces the base
    value, with a warning when the two types disagree.  Neither input is modified.
    """
    merged = copy.deepcopy(base)
    for key, value in overrides.items():
        current = merged.get(key)
        if isinstance(current, dict) and isinstance(value, dict):
            merged[key] = merge_dicts(current, value)
            continue
        if key in merged and not isinstance(current, type(value)):
            warnings.warn(
                f"Logging config key '{key}' changes type "
                f"({type(current).__name__} -> {type(value).__name__}); using the override."
            )
        merged[key] = copy.deepcopy(value)
    return merged


_CONFIGURED: bool = False


def setup_logging(config_overrides: dict[str, Any] | None = None, *, force: bool = False) -> None:
    """
    Apply the default logging configuration, merged with *config_overrides*.

    The root level comes from ``settings.log_level``; a ``LOG_LEVEL``
    environment variable takes precedence, and explicit overrides win over both.
    Repeated calls are no-ops unless *force* is set.
    """
    global _CONFIGURED
    if _CONFIGURED and not force:
        return

    level = (os.getenv("LOG_LEVEL") or settings.log_level).upper()
    config = merge_dicts(DEFAULT_LOGGING_CONFIG, {"root": {"level": level}})
    if config_overrides:
        config = merge_dicts(config, config_overrides)

    root = config.setdefault("root", {})
    if not config.get("handlers") or not root.get("handlers"):
        warnings.warn("Logging configuration missing handlers; using fallback console handler.")
        config["handlers"] = {"console": dict(_CONSOLE_HANDLER)}
        root["handlers"] = ["console"]

    # dictConfig replaces the root handlers, so earlier setups do not stack
    logging.config.dictConfig(config)
    _CONFIGURED = True


# End of core/logger_setup.py
