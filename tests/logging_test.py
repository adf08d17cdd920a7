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

"""Tests for bumpkit.logging module."""

from __future__ import annotations

import json
import logging

import pytest
from bumpkit.logging import WORKTREE_SOURCE, configure_logging, get_logger, plan_context


class TestConfigureLogging:
    """Tests for configure_logging()."""

    def test_default_level_is_info(self) -> None:
        """Default logging level should be INFO."""
        configure_logging()
        assert logging.root.level == logging.INFO

    def test_verbose_sets_debug(self) -> None:
        """Verbose flag should set DEBUG level."""
        configure_logging(verbose=True)
        assert logging.root.level == logging.DEBUG

    def test_quiet_wins_over_verbose(self) -> None:
        """Quiet takes precedence when both flags are given."""
        configure_logging(verbose=True, quiet=True)
        assert logging.root.level == logging.WARNING

    def test_json_log_is_one_object_per_line(self, capsys: pytest.CaptureFixture[str]) -> None:
        """JSON mode renders each event as a JSON object on stderr."""
        configure_logging(json_log=True)
        logging.getLogger('bumpkit.test').info('plain_stdlib_event')
        err = capsys.readouterr().err.strip().splitlines()
        assert err
        assert err[-1].startswith('{')
        assert 'plain_stdlib_event' in err[-1]

    def test_reconfigure(self) -> None:
        """Calling configure_logging twice should not crash."""
        configure_logging()
        configure_logging(verbose=True)
        assert logging.root.level == logging.DEBUG


class TestGetLogger:
    """Tests for get_logger()."""

    def test_default_name(self) -> None:
        """Default logger should be usable without a name."""
        configure_logging()
        assert get_logger() is not None

    def test_logger_can_log(self) -> None:
        """Logger should be able to emit messages without crashing."""
        configure_logging(quiet=True)
        log = get_logger('test')
        log.info('workspace_found', members=2)
        log.debug('versions_map', versions={'a': '1.0.0'})
        log.warning('member_manifest_missing', member='crates/a')


class TestPlanContext:
    """Tests for plan_context()."""

    def test_events_carry_plan_identity(self, capsys: pytest.CaptureFixture[str]) -> None:
        """Events inside the block include strategy, version and source."""
        configure_logging(json_log=True)
        log = get_logger('bumpkit.test')
        with plan_context(strategy='rust-workspace', version='1.2.3', source='origin/main'):
            log.info('inside_plan')
        log.info('outside_plan')

        events = {e['event']: e for e in (json.loads(line) for line in capsys.readouterr().err.splitlines() if line.startswith('{'))}
        inside = events['inside_plan']
        assert (inside['strategy'], inside['version'], inside['source']) == ('rust-workspace', '1.2.3', 'origin/main')
        assert 'strategy' not in events['outside_plan']

    def test_default_source_is_worktree(self, capsys: pytest.CaptureFixture[str]) -> None:
        """Without a ref the source is the working tree."""
        configure_logging(json_log=True)
        with plan_context(strategy='rust-workspace', version='1.0.0'):
            get_logger('bumpkit.test').info('worktree_plan')
        line = next(line for line in capsys.readouterr().err.splitlines() if 'worktree_plan' in line)
        assert json.loads(line)['source'] == WORKTREE_SOURCE
