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

"""Configuration reader for bumpkit.

Reads an optional ``bumpkit.toml`` from the repository root and returns
a validated, frozen :class:`PlannerConfig`. A missing file means
defaults.

Supported keys::

    path           = "."              # workspace directory in the repo
    changelog_path = "CHANGELOG.md"   # relative to path
    skip_changelog = false            # omit the changelog update
    manifest_file  = "Cargo.toml"     # manifest file name
    lockfile       = "Cargo.lock"     # relative to path
    ref            = ""               # git ref to read; empty reads the working tree

Unknown keys are rejected with a "did you mean" hint::

    chagelog_path = "NEWS.md"
    → error[BK-CONFIG-INVALID-KEY]: Unknown key 'chagelog_path' in bumpkit.toml
      = hint: Did you mean 'changelog_path'?
"""

from __future__ import annotations

import difflib
from dataclasses import dataclass
from pathlib import Path
from typing import Any

import tomlkit
import tomlkit.exceptions

from bumpkit.errors import E, ConfigurationError
from bumpkit.logging import get_logger

logger = get_logger(__name__)

# The config file name at the repository root.
CONFIG_FILENAME = 'bumpkit.toml'

_TYPE_MAP: dict[str, type] = {
    'path': str,
    'changelog_path': str,
    'skip_changelog': bool,
    'manifest_file': str,
    'lockfile': str,
    'ref': str,
}

# All recognized keys in bumpkit.toml.
VALID_KEYS: frozenset[str] = frozenset(_TYPE_MAP)


@dataclass(frozen=True)
class PlannerConfig:
    """Settings for one planner run.

    Attributes:
        path: Workspace directory relative to the repository root.
        changelog_path: Changelog file, relative to ``path``.
        skip_changelog: Whether to omit the changelog update.
        manifest_file: Manifest file name.
        lockfile: Lockfile name, relative to ``path``.
        ref: Git ref to read files from; empty means the working tree.
        config_path: File the settings came from, ``None`` for defaults.
    """

    path: str = '.'
    changelog_path: str = 'CHANGELOG.md'
    skip_changelog: bool = False
    manifest_file: str = 'Cargo.toml'
    lockfile: str = 'Cargo.lock'
    ref: str = ''
    config_path: Path | None = None


def _suggest_key(unknown: str) -> str | None:
    """Return the closest valid key for a typo, or None."""
    matches = difflib.get_close_matches(unknown, VALID_KEYS, n=1, cutoff=0.6)
    return matches[0] if matches else None


def _validate_value_type(key: str, value: Any) -> None:  # noqa: ANN401 - dynamic config values
    """Raise if a config value has the wrong type."""
    expected = _TYPE_MAP[key]
    # bool is an int subclass; reject ints for bool keys and bools for str keys alike.
    if not isinstance(value, expected) or (expected is not bool and isinstance(value, bool)):
        raise ConfigurationError(
            code=E.CONFIG_INVALID_VALUE,
            message=f"'{key}' must be {expected.__name__}, got {type(value).__name__}",
            hint=f'Check the value of {key} in {CONFIG_FILENAME}.',
        )


def load_config(root: Path) -> PlannerConfig:
    """Load and validate ``bumpkit.toml`` from ``root``.

    Args:
        root: Directory that may contain ``bumpkit.toml``.

    Returns:
        A validated :class:`PlannerConfig`.

    Raises:
        ConfigurationError: If the file cannot be read or parsed, or
            contains an unknown key or a mistyped value.
    """
    config_path = root / CONFIG_FILENAME

    if not config_path.is_file():
        logger.debug('no_bumpkit_config', path=str(config_path))
        return PlannerConfig()

    try:
        text = config_path.read_text(encoding='utf-8')
    except OSError as exc:
        raise ConfigurationError(
            code=E.CONFIG_INVALID_VALUE,
            message=f'Failed to read {config_path}: {exc}',
        ) from exc

    try:
        doc = tomlkit.parse(text)
    except tomlkit.exceptions.TOMLKitError as exc:
        raise ConfigurationError(
            code=E.CONFIG_INVALID_VALUE,
            message=f'Failed to parse {config_path}: {exc}',
            hint=f'Check that {CONFIG_FILENAME} contains valid TOML.',
        ) from exc

    raw: dict[str, Any] = doc.unwrap()  # noqa: ANN401

    for key in raw:
        if key not in VALID_KEYS:
            suggestion = _suggest_key(key)
            raise ConfigurationError(
                code=E.CONFIG_INVALID_KEY,
                message=f"Unknown key '{key}' in {CONFIG_FILENAME}",
                hint=f"Did you mean '{suggestion}'?" if suggestion else f'Valid keys: {", ".join(sorted(VALID_KEYS))}.',
            )

    for key, value in raw.items():
        _validate_value_type(key, value)

    logger.debug('bumpkit_config_loaded', path=str(config_path), keys=sorted(raw))
    return PlannerConfig(**raw, config_path=config_path)


__all__ = [
    'CONFIG_FILENAME',
    'VALID_KEYS',
    'PlannerConfig',
    'load_config',
]
