"""Logging setup for hosts that want md5salted's events.

The package never configures logging on import. Its loggers are stdlib
loggers under the package name with a ``NullHandler`` attached, so nothing
is written until a host either configures ``logging`` itself or calls
:func:`configure_logging`.
"""

from __future__ import annotations

import logging

import structlog

from .core.config import HashingConfig

PACKAGE_LOGGER = __name__.rpartition(".")[0]

logging.getLogger(PACKAGE_LOGGER).addHandler(logging.NullHandler())


def configure_logging(config: HashingConfig | None = None) -> None:
    """Emit md5salted events as JSON lines at ``config.log_level``.

    Only the package logger's level is changed; the root logger gets a
    handler through ``basicConfig`` when it has none yet.
    """

    settings = config or HashingConfig.build_default()
    level = settings.log_level.upper()
    logging.basicConfig(format="%(message)s")
    logging.getLogger(PACKAGE_LOGGER).setLevel(level)

    structlog.configure(
        processors=[
            structlog.stdlib.filter_by_level,
            structlog.stdlib.add_logger_name,
            structlog.processors.add_log_level,
            structlog.processors.TimeStamper(fmt="iso", key="ts"),
            structlog.processors.JSONRenderer(sort_keys=True),
        ],
        wrapper_class=structlog.stdlib.BoundLogger,
        cache_logger_on_first_use=False,
    )


__all__ = ["PACKAGE_LOGGER", "configure_logging"]
