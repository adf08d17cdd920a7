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

"""Workspace resolution and version map construction.

Given a parsed root ``Cargo.toml`` and a content provider, works out
which crates the release covers and pins each of them to the new
version.

Pipeline::

    validate_root_manifest(root)          ConfigurationError on bad shape
         │
         ▼
    resolve_members(members, provider)    concurrent fetch, declared-order merge
         │                                 missing / nameless → warning + skip
         ▼                                 read / parse failure → raise
    build_version_map(root_name, ...)     {root: v, member-a: v, member-b: v}

The version map keeps insertion order: the root package first, then
members in declared order. Two members with the same package name
collapse to one entry (the later member wins).
"""

from __future__ import annotations

import asyncio
import posixpath
import warnings
from collections.abc import Sequence
from dataclasses import dataclass

from bumpkit.backends.content import ContentProvider
from bumpkit.errors import E, ConfigurationError, MemberResolutionWarning
from bumpkit.logging import get_logger
from bumpkit.manifest import CargoManifest, parse_cargo_manifest

log = get_logger(__name__)

# Package name → target version.
VersionMap = dict[str, str]

DEFAULT_MANIFEST_FILE = 'Cargo.toml'


@dataclass(frozen=True)
class ValidatedWorkspace:
    """The parts of a root manifest the planner relies on, all present.

    Attributes:
        root_name: ``[package].name`` of the root manifest.
        workspace_version: Current ``[workspace.package].version``.
        members: Declared member paths, never empty.
    """

    root_name: str
    workspace_version: str
    members: tuple[str, ...]


@dataclass(frozen=True)
class MemberResolution:
    """Outcome of resolving one declared member.

    Exactly one of ``name`` and ``warning`` is set.

    Attributes:
        member: Member path as declared in ``[workspace].members``.
        manifest_path: Path requested from the content provider.
        name: Package name of the member, when resolved.
        manifest: The parsed member manifest, when one was found.
        warning: Why the member was skipped, when it was.
    """

    member: str
    manifest_path: str
    name: str | None = None
    manifest: CargoManifest | None = None
    warning: MemberResolutionWarning | None = None

    @property
    def resolved(self) -> bool:
        """Whether the member contributes to the version map."""
        return self.name is not None


def join_path(*parts: str) -> str:
    """Join repository-relative path segments, dropping ``.`` and empty parts."""
    cleaned = [p.strip('/') for p in parts if p and p.strip('/') not in ('', '.')]
    if not cleaned:
        return '.'
    return posixpath.normpath('/'.join(cleaned))


def validate_root_manifest(manifest: CargoManifest | None, *, manifest_file: str = DEFAULT_MANIFEST_FILE) -> ValidatedWorkspace:
    """Check that the root manifest describes a versioned workspace.

    Checks run in a fixed order and the first failure is raised.

    Args:
        manifest: Parsed root manifest, or ``None`` if it does not exist.
        manifest_file: Manifest file name, used in messages.

    Raises:
        ConfigurationError: If the workspace table, the workspace version,
            the root package name, or the member list is missing.
    """
    if manifest is None or manifest.workspace is None:
        raise ConfigurationError(
            code=E.WORKSPACE_NOT_FOUND,
            message=f'RustWorkspace strategy requires a workspace in root {manifest_file}',
            hint=f'Add a [workspace] table to the root {manifest_file}.',
        )

    workspace = manifest.workspace
    if workspace.package is None or not workspace.package.version:
        raise ConfigurationError(
            code=E.WORKSPACE_NO_VERSION,
            message=f'RustWorkspace strategy requires workspace.package.version in root {manifest_file}',
            hint='Add version = "x.y.z" under [workspace.package].',
        )

    if manifest.package is None or not manifest.package.name:
        raise ConfigurationError(
            code=E.WORKSPACE_NO_ROOT_PACKAGE,
            message=f'RustWorkspace strategy requires package.name in root {manifest_file}',
            hint=f'Add a [package] table with a name to the root {manifest_file}.',
        )

    if not workspace.members:
        raise ConfigurationError(
            code=E.WORKSPACE_NO_MEMBERS,
            message=f'RustWorkspace strategy requires workspace members in root {manifest_file}',
            hint='List member crate directories in [workspace].members.',
        )

    return ValidatedWorkspace(
        root_name=manifest.package.name,
        workspace_version=workspace.package.version,
        members=workspace.members,
    )


def _skip(
    member: str,
    manifest_path: str,
    code: E,
    message: str,
    manifest: CargoManifest | None = None,
) -> MemberResolution:
    warning = MemberResolutionWarning(code=code, message=message, member=member)
    log.warning(code.name.lower(), member=member, manifest=manifest_path)
    warnings.warn(warning, stacklevel=3)
    return MemberResolution(member=member, manifest_path=manifest_path, manifest=manifest, warning=warning)


async def resolve_members(
    members: Sequence[str],
    provider: ContentProvider,
    *,
    base_path: str = '.',
    manifest_file: str = DEFAULT_MANIFEST_FILE,
) -> list[MemberResolution]:
    """Fetch and parse every member manifest.

    Fetches are issued concurrently; results are returned in declared
    order regardless of completion order.

    Args:
        members: Member paths as declared in the root manifest.
        provider: Source of file contents.
        base_path: Workspace directory relative to the repository root.
        manifest_file: Manifest file name inside each member directory.

    Returns:
        One :class:`MemberResolution` per declared member.

    Raises:
        ContentAccessError: If a member manifest cannot be read.
        ManifestParseError: If a member manifest is not valid TOML.
    """
    paths = [join_path(base_path, member, manifest_file) for member in members]
    contents = await asyncio.gather(*(provider.get_content(p) for p in paths))

    resolutions: list[MemberResolution] = []
    for member, manifest_path, found in zip(members, paths, contents):
        if found is None:
            resolutions.append(
                _skip(
                    member,
                    manifest_path,
                    E.MEMBER_MANIFEST_MISSING,
                    f'member {member} declared but did not find {manifest_file}',
                )
            )
            continue

        manifest = parse_cargo_manifest(found.content, path=manifest_path)
        if manifest.package is None or not manifest.package.name:
            resolutions.append(
                _skip(
                    member,
                    manifest_path,
                    E.MEMBER_NO_PACKAGE_NAME,
                    f'member {member} has no package name',
                    manifest=manifest,
                )
            )
            continue

        resolutions.append(
            MemberResolution(
                member=member,
                manifest_path=manifest_path,
                name=manifest.package.name,
                manifest=manifest,
            )
        )

    return resolutions


def build_version_map(
    root_name: str,
    new_version: str,
    resolutions: Sequence[MemberResolution],
) -> VersionMap:
    """Map the root package and every resolved member to ``new_version``.

    Args:
        root_name: Root ``[package].name``; always the first key.
        new_version: Version every package is released at.
        resolutions: Member outcomes in declared order.
    """
    versions: VersionMap = {root_name: new_version}
    claimed: dict[str, str] = {}
    for res in resolutions:
        if res.name is None:
            continue
        if res.name in claimed:
            # Later member wins; the earlier one stays out of the map.
            log.debug('member_name_reused', name=res.name, first=claimed[res.name], member=res.member)
        claimed[res.name] = res.member
        versions[res.name] = new_version

    log.debug('versions_map', versions=versions)
    return versions


async def compute_version_map(
    root_manifest: CargoManifest | None,
    new_version: str,
    provider: ContentProvider,
    *,
    base_path: str = '.',
    manifest_file: str = DEFAULT_MANIFEST_FILE,
) -> VersionMap:
    """Validate the root manifest and build the workspace version map.

    Args:
        root_manifest: Parsed root manifest, or ``None`` if missing.
        new_version: Version every package is released at.
        provider: Source of member manifest contents.
        base_path: Workspace directory relative to the repository root.
        manifest_file: Manifest file name.

    Raises:
        ConfigurationError: If the root manifest has the wrong shape.
        ContentAccessError: If a member manifest cannot be read.
        ManifestParseError: If a member manifest is not valid TOML.
    """
    validated = validate_root_manifest(root_manifest, manifest_file=manifest_file)
    resolutions = await resolve_members(
        validated.members,
        provider,
        base_path=base_path,
        manifest_file=manifest_file,
    )
    return build_version_map(validated.root_name, new_version, resolutions)


__all__ = [
    'DEFAULT_MANIFEST_FILE',
    'MemberResolution',
    'ValidatedWorkspace',
    'VersionMap',
    'build_version_map',
    'compute_version_map',
    'join_path',
    'resolve_members',
    'validate_root_manifest',
]
