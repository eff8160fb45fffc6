# SPDX-FileCopyrightText: 2025 Hidayat Trimarsanto <trimarsanto@gmail.com>
# SPDX-License-Identifier: MPL-2.0

from __future__ import annotations

import copy
import logging
import logging.config
import os
from dataclasses import dataclass, field
from typing import Any


def get_env(var_name: str, default: str) -> str:
    return os.getenv(var_name, default)


def get_bool_env(var_name: str, default: bool) -> bool:
    value = os.getenv(var_name)
    if value is None:
        return default
    return value.strip().lower() in {"1", "true", "yes", "on"}


@dataclass
class AppConfig:

    COLOR_FORMAT: str = field(
        default_factory=lambda: get_env("SPECIMEN_COLOR_FORMAT", "hex")
    )
    """Colour format used when neither the spec nor the data carry one."""
    DATETIME_FORMAT: str = field(
        default_factory=lambda: get_env("SPECIMEN_DATETIME_FORMAT", "YYYY-MM-DD")
    )
    """Token format used when a datetime spec has no format."""
    LOG_LEVEL: str = field(
        default_factory=lambda: get_env("SPECIMEN_LOG_LEVEL", "WARNING").upper()
    )
    """Level of the specimen_types logger."""


settings = AppConfig()

# Define your config
logging_config: dict[str, Any] = {
    "version": 1,
    "disable_existing_loggers": False,
    "formatters": {
        "standard": {
            "format": "%(asctime)s %(levelname)s %(name)s: %(message)s",
        },
    },
    "handlers": {
        "console": {
            "class": "logging.StreamHandler",
            "formatter": "standard",
            "stream": "ext://sys.stderr",
        },
    },
    "loggers": {
        "specimen_types": {
            "level": settings.LOG_LEVEL,
            "handlers": ["console"],
            "propagate": False,
        },
    },
}

logger = logging.getLogger("specimen_types")


def configure_logging(level: str | None = None) -> logging.Logger:
    """Apply logging_config, optionally overriding the package log level.

    Args:
        level: a logging level name such as "DEBUG"; None keeps the configured one.

    Returns:
        The package logger.
    """
    config = copy.deepcopy(logging_config)
    if level:
        config["loggers"]["specimen_types"]["level"] = level.upper()
    logging.config.dictConfig(config)
    return logger


# EOF
