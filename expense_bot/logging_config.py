"""Logging configuration for the bot process."""

from __future__ import annotations

import logging.config

LOG_FORMAT = "%(asctime)s | %(levelname)s | %(name)s | %(message)s"


def setup_logging(log_level: str = "INFO") -> None:
    """Configure the root logger with a single stdout handler."""

    logging.config.dictConfig(
        {
            "version": 1,
            "disable_existing_loggers": False,
            "formatters": {
                "plain": {"format": LOG_FORMAT},
            },
            "handlers": {
                "console": {
                    "class": "logging.StreamHandler",
                    "formatter": "plain",
                    "stream": "ext://sys.stdout",
                },
            },
            "root": {
                "level": log_level.upper(),
                "handlers": ["console"],
            },
            # aiogram logs every polled update at INFO
            "loggers": {
                "aiogram.event": {"level": "WARNING"},
            },
        }
    )
