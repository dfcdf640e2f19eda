# ===-----------------------------------------------------------------------===#
# Distributed under the 3-Clause BSD License. See accompanying file LICENSE or
# copy at https://opensource.org/licenses/BSD-3-Clause.
# SPDX-License-Identifier: BSD-3-Clause
# ===-----------------------------------------------------------------------===#

"""Logging utilities for ResourceCodeGen.

Stdlib logging wrapper that forwards records of the package logger
hierarchy to a :class:`~resource_codegen.reporting.Reporter`.
"""

from __future__ import annotations

import logging

from .reporting import Reporter

_LOGGER_NAME = "resource_codegen"

__all__ = [
    "get_logger",
    "configure_logging",
]


def get_logger() -> logging.Logger:
    return logging.getLogger(_LOGGER_NAME)


class _ReporterHandler(logging.Handler):
    def __init__(self, reporter: Reporter) -> None:
        super().__init__()
        self.reporter = reporter

    def emit(self, record: logging.LogRecord) -> None:  # noqa: D401
        msg = self.format(record)
        lvl = record.levelno
        if lvl >= logging.ERROR:
            self.reporter.error("%s", msg)
        elif lvl >= logging.WARNING:
            self.reporter.warn("%s", msg)
        elif lvl >= logging.INFO:
            self.reporter.info("%s", msg)
        else:
            self.reporter.debug("%s", msg)


def configure_logging(reporter: Reporter) -> logging.Logger:
    """Route the package logger to ``reporter``; safe to call repeatedly."""
    logger = get_logger()
    logger.setLevel(logging.DEBUG if reporter.verbosity >= 3 else logging.INFO)

    for h in list(logger.handlers):
        if isinstance(h, _ReporterHandler):
            logger.removeHandler(h)

    handler = _ReporterHandler(reporter)
    handler.setFormatter(logging.Formatter("%(message)s"))
    logger.addHandler(handler)
    logger.propagate = False
    return logger
