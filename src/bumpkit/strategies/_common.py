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

"""Helpers shared by release strategies."""

from __future__ import annotations

from bumpkit.backends.content import ContentProvider
from bumpkit.logging import get_logger
from bumpkit.manifest import CargoManifest, parse_cargo_manifest
from bumpkit.update import Update
from bumpkit.updaters import Changelog
from bumpkit.workspace import join_path

log = get_logger(__name__)


def add_path(base: str, file: str) -> str:
    """Place ``file`` inside the strategy's package directory ``base``.

    ``"."`` and ``""`` mean the repository root::

        add_path('.', 'Cargo.toml')        → 'Cargo.toml'
        add_path('rust/', '/Cargo.lock')   → 'rust/Cargo.lock'
    """
    return join_path(base, file)


def stage_changelog(base: str, changelog_path: str, version: str, changelog_entry: str) -> Update:
    """Return the changelog update for a release; the file is created if missing."""
    return Update(
        path=add_path(base, changelog_path),
        create_if_missing=True,
        updater=Changelog(version=version, changelog_entry=changelog_entry),
    )


async def fetch_manifest(provider: ContentProvider, path: str) -> CargoManifest | None:
    """Fetch and parse a manifest, or return ``None`` if it does not exist.

    Raises:
        ContentAccessError: If the manifest cannot be read.
        ManifestParseError: If the manifest is not valid TOML.
    """
    found = await provider.get_content(path)
    if found is None:
        log.debug('manifest_not_found', path=path)
        return None
    return parse_cargo_manifest(found.content, path=path)


__all__ = [
    'add_path',
    'fetch_manifest',
    'stage_changelog',
]
