"""Structured logging setup using structlog on top of stdlib logging.

Module loggers wrap ``logging.getLogger(name)``, so nothing is written until
an application attaches a handler, either its own or via
:func:`setup_logging`.
"""

from __future__ import annotations

import logging
import sys

import structlog

PACKAGE_LOGGER = "bignumerics"

logging.getLogger(PACKAGE_LOGGER).addHandler(logging.NullHandler())


def setup_logging(log_level: str | None = None):
    """Configure structlog with JSON output to stderr.

    The library never calls this itself; applications call it once at
    startup. *log_level* defaults to ``Settings().log_level``. Calling it
    again replaces the previous stream handler.
    """
    if log_level is None:
        from bignumerics.config import Settings

        log_level = Settings().log_level

    structlog.configure(
        processors=[
            structlog.stdlib.filter_by_level,
            structlog.contextvars.merge_contextvars,
            structlog.processors.add_log_level,
            structlog.processors.StackInfoRenderer(),
            structlog.processors.TimeStamper(fmt="iso"),
            structlog.processors.JSONRenderer(),
        ],
        wrapper_class=structlog.stdlib.BoundLogger,
        context_class=dict,
        logger_factory=structlog.stdlib.LoggerFactory(),
    )

    handler = logging.StreamHandler(sys.stderr)
    handler.setFormatter(logging.Formatter("%(message)s"))

    package_logger = logging.getLogger(PACKAGE_LOGGER)
    for existing in list(package_logger.handlers):
        if isinstance(existing, logging.StreamHandler):
            package_logger.removeHandler(existing)
    package_logger.addHandler(handler)
    package_logger.setLevel(getattr(logging, log_level.upper()))


def get_logger(name: str) -> structlog.stdlib.BoundLogger:
    """Return a bound logger for the given component *name*.

    The logger is bound to the stdlib logger of the same name; processors
    are taken from the structlog configuration at call time.
    """
    return structlog.wrap_logger(logging.getLogger(name), wrapper_class=structlog.stdlib.BoundLogger)
