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

"""Structured logging for bumpkit.

Configures `structlog <https://www.structlog.org/>`_ with two output modes:

- **Console** (default): human-readable output, colored on a TTY.
- **JSON** (``--json-log``): one JSON object per line, for CI logs.

Both modes write to stderr so stdout carries only the rendered plan
(e.g. ``bumpkit plan 1.2.3 --format json | jq``).

Usage::

    from bumpkit.logging import configure_logging, get_logger

    configure_logging(verbose=True)
    log = get_logger(__name__)
    log.info('workspace_found', members=3)

Every event logged while a plan is built carries the plan's identity::

    with plan_context(strategy='rust-workspace', version='1.2.3', source='origin/main'):
        plan = await strategy.plan('1.2.3')
    # {"event": "plan_built", "strategy": "rust-workspace", "source": "origin/main", ...}
"""

from __future__ import annotations

import logging
import sys
from collections.abc import Generator
from contextlib import contextmanager

import structlog

# Source label for plans read from the working tree rather than a git ref.
WORKTREE_SOURCE = 'worktree'


def configure_logging(
    *,
    verbose: bool = False,
    quiet: bool = False,
    json_log: bool = False,
) -> None:
    """Configure structlog for bumpkit.

    Should be called once at startup, before any logging calls. Calling
    it again reconfigures the level and renderer.

    Args:
        verbose: Enable debug-level output.
        quiet: Only emit warnings and errors.
        json_log: Use JSON output instead of console output.
    """
    if quiet:
        level = logging.WARNING
    elif verbose:
        level = logging.DEBUG
    else:
        level = logging.INFO

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
        renderer = structlog.dev.ConsoleRenderer(
            colors=sys.stderr.isatty(),
        )

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


def get_logger(name: str = 'bumpkit') -> structlog.stdlib.BoundLogger:
    """Return a bound structlog logger.

    Args:
        name: Logger name, used for filtering and identification.
    """
    return structlog.get_logger(name)


@contextmanager
def plan_context(*, strategy: str, version: str, source: str = WORKTREE_SOURCE) -> Generator[None, None, None]:
    """Bind the plan being built to every log event inside the block.

    The values live in :mod:`structlog.contextvars`, so concurrent member
    fetches and threads started with ``asyncio.to_thread`` inherit them.

    Args:
        strategy: Strategy name, e.g. ``"rust-workspace"``.
        version: Version being planned.
        source: Git ref the files are read from, or :data:`WORKTREE_SOURCE`.
    """
    with structlog.contextvars.bound_contextvars(strategy=strategy, version=version, source=source):
        yield


__all__ = [
    'WORKTREE_SOURCE',
    'configure_logging',
    'get_logger',
    'plan_context',
]
