"""Logging for the ``twitter-social`` CLI: structlog rendered through stdlib logging.

The library itself only emits events; it never configures logging.
"""

from __future__ import annotations

import logging.config
import os

import structlog


def setup_logging(level: str | None = None) -> None:
    """Route structlog events to stderr, leaving stdout for command output.

    Reads from environment variables:
        TWITTERSOCIAL_LOG_LEVEL: library log level (default: INFO)
        TWITTERSOCIAL_LOG_FORMAT: console | json (default: console)

    An explicit *level* wins over the environment.
    """
    log_level = (level or os.environ.get("TWITTERSOCIAL_LOG_LEVEL", "INFO")).upper()
    log_format = os.environ.get("TWITTERSOCIAL_LOG_FORMAT", "console").lower()

    pre_chain: list[structlog.types.Processor] = [
        structlog.stdlib.add_log_level,
        structlog.stdlib.add_logger_name,
        structlog.processors.TimeStamper(fmt="iso", utc=True),
    ]
    if log_format == "json":
        renderer: structlog.types.Processor = structlog.processors.JSONRenderer()
    else:
        renderer = structlog.dev.ConsoleRenderer()

    structlog.configure(
        processors=pre_chain + [structlog.stdlib.ProcessorFormatter.wrap_for_formatter],
        logger_factory=structlog.stdlib.LoggerFactory(),
        wrapper_class=structlog.stdlib.BoundLogger,
        cache_logger_on_first_use=True,
    )

    logging.config.dictConfig(
        {
            "version": 1,
            "disable_existing_loggers": False,
            "formatters": {
                "structlog": {
                    "()": structlog.stdlib.ProcessorFormatter,
                    "foreign_pre_chain": pre_chain,
                    "processors": [
                        structlog.stdlib.ProcessorFormatter.remove_processors_meta,
                        renderer,
                    ],
                },
            },
            "handlers": {
                "stderr": {
                    "class": "logging.StreamHandler",
                    "stream": "ext://sys.stderr",
                    "formatter": "structlog",
                },
            },
            "root": {"handlers": ["stderr"], "level": "WARNING"},
            "loggers": {
                "twittersocial": {"level": log_level},
                # httpx logs every request at INFO
                "httpx": {"level": "WARNING"},
            },
        }
    )
