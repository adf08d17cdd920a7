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

"""Cargo manifest parsing.

Turns ``Cargo.toml`` text into a :class:`CargoManifest` holding only the
fields the planner needs::

    [package]
    name = "my-app"              → manifest.package.name
    version = "0.1.0"            → manifest.package.version

    [workspace]
    members = ["core", "cli"]    → manifest.workspace.members

    [workspace.package]
    version = "0.1.0"            → manifest.workspace.package.version

Everything else in the file is ignored. A field with the wrong TOML type
(``members = "core"``, ``name = 3``) is reported as absent so that the
caller's "missing field" branches handle it.
"""

from __future__ import annotations

from dataclasses import dataclass
from typing import Any

import tomlkit
import tomlkit.exceptions

from bumpkit.errors import E, ManifestParseError


@dataclass(frozen=True)
class CargoPackage:
    """The ``[package]`` table."""

    name: str | None = None
    version: str | None = None


@dataclass(frozen=True)
class CargoWorkspacePackage:
    """The ``[workspace.package]`` table (values inherited by members)."""

    version: str | None = None


@dataclass(frozen=True)
class CargoWorkspace:
    """The ``[workspace]`` table.

    Attributes:
        members: Member paths in declared order. ``None`` when the key is
            absent, an empty tuple when it is an empty array.
        package: The ``[workspace.package]`` table, if present.
    """

    members: tuple[str, ...] | None = None
    package: CargoWorkspacePackage | None = None


@dataclass(frozen=True)
class CargoManifest:
    """Structured view of one ``Cargo.toml``."""

    package: CargoPackage | None = None
    workspace: CargoWorkspace | None = None


def _str_or_none(value: Any) -> str | None:  # noqa: ANN401 - tomlkit items
    return str(value) if isinstance(value, str) else None


def _parse_package(raw: Any) -> CargoPackage | None:  # noqa: ANN401
    if not isinstance(raw, dict):
        return None
    return CargoPackage(
        name=_str_or_none(raw.get('name')),
        version=_str_or_none(raw.get('version')),
    )


def _parse_workspace(raw: Any) -> CargoWorkspace | None:  # noqa: ANN401
    if not isinstance(raw, dict):
        return None

    members: tuple[str, ...] | None = None
    raw_members = raw.get('members')
    if isinstance(raw_members, list):
        members = tuple(str(m) for m in raw_members if isinstance(m, str))

    package: CargoWorkspacePackage | None = None
    raw_package = raw.get('package')
    if isinstance(raw_package, dict):
        package = CargoWorkspacePackage(version=_str_or_none(raw_package.get('version')))

    return CargoWorkspace(members=members, package=package)


def parse_cargo_manifest(content: str, *, path: str = 'Cargo.toml') -> CargoManifest:
    """Parse ``Cargo.toml`` text.

    Args:
        content: Raw manifest text.
        path: Where the text came from, used in error messages.

    Returns:
        A :class:`CargoManifest`.

    Raises:
        ManifestParseError: If ``content`` is not valid TOML.
    """
    try:
        doc = tomlkit.parse(content)
    except tomlkit.exceptions.TOMLKitError as exc:
        raise ManifestParseError(
            code=E.MANIFEST_PARSE_ERROR,
            message=f'Cannot parse {path}: {exc}',
            hint=f'Check that {path} contains valid TOML.',
        ) from exc

    return CargoManifest(
        package=_parse_package(doc.get('package')),
        workspace=_parse_workspace(doc.get('workspace')),
    )


__all__ = [
    'CargoManifest',
    'CargoPackage',
    'CargoWorkspace',
    'CargoWorkspacePackage',
    'parse_cargo_manifest',
]
