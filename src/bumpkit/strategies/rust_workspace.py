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

"""Release strategy for Cargo workspaces versioned as one unit.

Layout the strategy expects::

    Cargo.toml        ← [package].name names the release
                        [workspace].members lists the crates
                        [workspace.package].version is the source of truth
    Cargo.lock        ← every member crate is re-pinned here
    CHANGELOG.md      ← one entry per release (optional)
    core/Cargo.toml   ← version.workspace = true
    cli/Cargo.toml    ← version.workspace = true

Plan order is fixed::

    [CHANGELOG.md] → Cargo.toml → Cargo.lock

Nothing is returned unless every step succeeds: a bad root manifest or
an unreadable member manifest raises, discarding the staged changelog
update as well.
"""

from __future__ import annotations

from bumpkit.backends.content import ContentProvider
from bumpkit.errors import E, ConfigurationError
from bumpkit.logging import get_logger
from bumpkit.plan import ReleasePlan
from bumpkit.strategies._common import add_path, fetch_manifest, stage_changelog
from bumpkit.update import Update
from bumpkit.updaters import CargoLock, CargoWorkspaceToml
from bumpkit.workspace import (
    DEFAULT_MANIFEST_FILE,
    build_version_map,
    resolve_members,
    validate_root_manifest,
)

log = get_logger(__name__)


class RustWorkspace:
    """:class:`~bumpkit.strategies.Strategy` for a Cargo workspace.

    - ``[workspace.package].version`` in the root manifest is the source
      of truth.
    - The root ``[package].name`` names the release.
    - Every member crate is released at the same version.

    Args:
        provider: Source of file contents at the ref being released.
        path: Workspace directory relative to the repository root.
        changelog_path: Changelog file, relative to ``path``.
        skip_changelog: Default for omitting the changelog update.
        manifest_file: Manifest file name.
        lockfile: Lockfile name, relative to ``path``.
    """

    def __init__(
        self,
        provider: ContentProvider,
        *,
        path: str = '.',
        changelog_path: str = 'CHANGELOG.md',
        skip_changelog: bool = False,
        manifest_file: str = DEFAULT_MANIFEST_FILE,
        lockfile: str = 'Cargo.lock',
    ) -> None:
        """Initialize with the content provider and file layout."""
        self._provider = provider
        self.path = path
        self.changelog_path = changelog_path
        self.skip_changelog = skip_changelog
        self.manifest_file = manifest_file
        self.lockfile = lockfile

    async def plan(
        self,
        new_version: str,
        changelog_entry: str = '',
        *,
        skip_changelog: bool | None = None,
    ) -> ReleasePlan:
        """Compute the release plan for ``new_version``.

        Args:
            new_version: Version every workspace package is released at.
            changelog_entry: Pre-rendered changelog markdown.
            skip_changelog: Override the strategy's default.

        Returns:
            A :class:`~bumpkit.plan.ReleasePlan`.

        Raises:
            ConfigurationError: If ``new_version`` is empty or the root
                manifest is missing required fields.
            ContentAccessError: If a manifest cannot be read.
            ManifestParseError: If a manifest is not valid TOML.
        """
        if not new_version or not new_version.strip():
            raise ConfigurationError(
                code=E.VERSION_INVALID,
                message='A release version is required',
                hint='Pass the version to release, e.g. 1.2.3.',
            )
        skip = self.skip_changelog if skip_changelog is None else skip_changelog

        updates: list[Update] = []
        if not skip:
            updates.append(stage_changelog(self.path, self.changelog_path, new_version, changelog_entry))

        manifest_path = add_path(self.path, self.manifest_file)
        root = await fetch_manifest(self._provider, manifest_path)
        workspace = validate_root_manifest(root, manifest_file=self.manifest_file)

        log.info(
            'workspace_found',
            members=len(workspace.members),
            current=workspace.workspace_version,
            version=new_version,
        )

        resolutions = await resolve_members(
            workspace.members,
            self._provider,
            base_path=self.path,
            manifest_file=self.manifest_file,
        )
        versions = build_version_map(workspace.root_name, new_version, resolutions)

        updates.append(
            Update(
                path=manifest_path,
                create_if_missing=False,
                updater=CargoWorkspaceToml(version=new_version),
            )
        )
        updates.append(
            Update(
                path=add_path(self.path, self.lockfile),
                create_if_missing=False,
                updater=CargoLock(versions=versions),
            )
        )

        skipped = [r.warning for r in resolutions if r.warning is not None]
        log.info('plan_built', updates=len(updates), packages=len(versions), skipped=len(skipped))
        return ReleasePlan(
            new_version=new_version,
            updates=updates,
            version_map=versions,
            warnings=skipped,
        )

    async def build_updates(
        self,
        new_version: str,
        changelog_entry: str = '',
        *,
        skip_changelog: bool | None = None,
    ) -> list[Update]:
        """Return only the ordered updates of :meth:`plan`."""
        release = await self.plan(new_version, changelog_entry, skip_changelog=skip_changelog)
        return release.updates


__all__ = [
    'RustWorkspace',
]
