# Copyright 2026 Google LLC
#
# Licensed under the Apache License, Version 2.0 (the "License");
# you may not use this file except in compliance with the License.
# You may obtain a copy of the License at
#
#     http://www.apache.org/licenses/LICENSE-2.0
#
# Unless required by applicable law or agreed to in writing, software
# distributed under the License is distributed on an "AS IS" BASIS,
# WITHOUT WARRANTIES OR CONDITIONS OF ANY KIND, either express or implied.
# See the License for the specific language governing permissions and
# limitations under the License.
#
# SPDX-License-Identifier: Apache-2.0

"""Structured logging for commitlex.

Configures `structlog <https://www.structlog.org/>`_ with two output modes:

- **Console** (default): human-readable output, colored on a TTY.
- **JSON** (``json_log=True``): one JSON object per line.

Both modes write to stderr.  The level can be forced with the
``COMMITLEX_LOG_LEVEL`` environment variable (``DEBUG``, ``INFO``,
``WARNING``, ...), which takes precedence over the keyword flags.

Usage::

    from commitlex.logging import configure_logging, get_logger

    configure_logging(verbose=True)
    log = get_logger()
    log.debug('commit_parsed', type='feat')
"""

from __future__ import annotations

import logging
import os
import sys

import structlog

__all__ = [
    'LOG_LEVEL_ENV_VAR',
    'configure_logging',
    'get_logger',
]

LOG_LEVEL_ENV_VAR = 'COMMITLEX_LOG_LEVEL'


def _resolve_level(*, verbose: bool, quiet: bool) -> int:
    """Pick the log level from the environment, then the flags."""
    override = os.environ.get(LOG_LEVEL_ENV_VAR, '').strip().upper()
    if override:
        level = logging.getLevelName(override)
        if isinstance(level, int):
            return level
    if quiet:
        return logging.WARNING
    if verbose:
        return logging.DEBUG
    return logging.INFO


def configure_logging(
    *,
    verbose: bool = False,
    quiet: bool = False,
    json_log: bool = False,
) -> None:
    """Configure structlog for commitlex.

    Should be called once by the embedding application, before any
    logging calls.  Calling it again reconfigures everything.

    Args:
        verbose: Enable debug-level output.
        quiet: Suppress info-level output (only warnings and errors).
        json_log: Use JSON output instead of console output.
    """
    level = _resolve_level(verbose=verbose, quiet=quiet)

    logging.basicConfig(
        format='%(message)s',
        stream=sys.stderr,
        level=level,
        force=True,
    )

    shared_processors: list[structlog.types.Processor] = [
        structlog.contextvars.merge_contextvars,
        structlog.stdlib.add_log_level,
        structlog.stdlib.add_logger_name,
        structlog.processors.TimeStamper(fmt='iso'),
        structlog.processors.StackInfoRenderer(),
        structlog.processors.UnicodeDecoder(),
    ]

    if json_log:
        renderer: structlog.types.Processor = structlog.processors.JSONRenderer()
    else:
        renderer = structlog.dev.ConsoleRenderer(colors=sys.stderr.isatty())

    structlog.configure(
        processors=[
            *shared_processors,
            structlog.stdlib.ProcessorFormatter.wrap_for_formatter,
        ],
        logger_factory=structlog.stdlib.LoggerFactory(),
        wrapper_class=structlog.stdlib.BoundLogger,
        cache_logger_on_first_use=True,
    )

    formatter = structlog.stdlib.ProcessorFormatter(
        processors=[
            structlog.stdlib.ProcessorFormatter.remove_processors_meta,
            renderer,
        ],
    )
    for handler in logging.root.handlers:
        handler.setFormatter(formatter)


def get_logger(name: str = 'commitlex') -> structlog.stdlib.BoundLogger:
    """Return a bound structlog logger.

    Args:
        name: Logger name, used for filtering and identification.
    """
    return structlog.get_logger(name)
