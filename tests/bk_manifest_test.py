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

"""Tests for bumpkit.manifest."""

from __future__ import annotations

import pytest
from bumpkit.errors import E, ManifestParseError
from bumpkit.manifest import (
    CargoManifest,
    CargoPackage,
    CargoWorkspace,
    CargoWorkspacePackage,
    parse_cargo_manifest,
)

_WORKSPACE_ROOT = """\
[package]
name = "my-app"
version = "0.1.0"
edition = "2021"

[workspace]
members = ["crates/core", "crates/cli"]
resolver = "2"

[workspace.package]
version = "0.1.0"
license = "Apache-2.0"

[dependencies]
serde = "1"
"""


class TestParseCargoManifest:
    """parse_cargo_manifest() extracts only the planner's fields."""

    def test_workspace_root(self) -> None:
        """All workspace fields are extracted."""
        manifest = parse_cargo_manifest(_WORKSPACE_ROOT)
        assert manifest == CargoManifest(
            package=CargoPackage(name='my-app', version='0.1.0'),
            workspace=CargoWorkspace(
                members=('crates/core', 'crates/cli'),
                package=CargoWorkspacePackage(version='0.1.0'),
            ),
        )

    def test_member_crate(self) -> None:
        """A member crate has a package but no workspace."""
        manifest = parse_cargo_manifest('[package]\nname = "my-core"\nversion.workspace = true\n')
        assert manifest.package is not None
        assert manifest.package.name == 'my-core'
        assert manifest.package.version is None
        assert manifest.workspace is None

    def test_empty_document(self) -> None:
        """An empty file parses to an empty manifest."""
        assert parse_cargo_manifest('') == CargoManifest()

    def test_members_order_preserved(self) -> None:
        """Members keep their declared order."""
        manifest = parse_cargo_manifest('[workspace]\nmembers = ["z", "a", "m"]\n')
        assert manifest.workspace is not None
        assert manifest.workspace.members == ('z', 'a', 'm')

    def test_empty_members_is_not_absent(self) -> None:
        """An empty members array is kept as an empty tuple."""
        manifest = parse_cargo_manifest('[workspace]\nmembers = []\n')
        assert manifest.workspace is not None
        assert manifest.workspace.members == ()

    def test_missing_members_is_none(self) -> None:
        """A workspace without members has members=None."""
        manifest = parse_cargo_manifest('[workspace]\nresolver = "2"\n')
        assert manifest.workspace == CargoWorkspace(members=None, package=None)

    def test_workspace_package_without_workspace_header(self) -> None:
        """[workspace.package] alone still creates the workspace table."""
        manifest = parse_cargo_manifest('[workspace.package]\nversion = "2.0.0"\n')
        assert manifest.workspace is not None
        assert manifest.workspace.package == CargoWorkspacePackage(version='2.0.0')

    def test_inline_workspace_package(self) -> None:
        """An inline table under [workspace] is read too."""
        manifest = parse_cargo_manifest('[workspace]\nmembers = ["a"]\npackage = { version = "3.0.0" }\n')
        assert manifest.workspace is not None
        assert manifest.workspace.package == CargoWorkspacePackage(version='3.0.0')

    def test_wrong_types_are_absent(self) -> None:
        """Mistyped fields are treated as missing."""
        manifest = parse_cargo_manifest('[package]\nname = 3\n\n[workspace]\nmembers = "core"\n')
        assert manifest.package == CargoPackage(name=None, version=None)
        assert manifest.workspace is not None
        assert manifest.workspace.members is None

    def test_non_string_members_dropped(self) -> None:
        """Non-string member entries are ignored."""
        manifest = parse_cargo_manifest('[workspace]\nmembers = ["a", 1, "b"]\n')
        assert manifest.workspace is not None
        assert manifest.workspace.members == ('a', 'b')

    def test_package_not_a_table(self) -> None:
        """A scalar where a table is expected is ignored."""
        manifest = parse_cargo_manifest('package = "oops"\n')
        assert manifest.package is None

    def test_parsed_values_are_plain_str(self) -> None:
        """Extracted strings are builtin str, not tomlkit items."""
        manifest = parse_cargo_manifest(_WORKSPACE_ROOT)
        assert manifest.package is not None
        assert type(manifest.package.name) is str
        assert manifest.workspace is not None
        assert manifest.workspace.members is not None
        assert all(type(m) is str for m in manifest.workspace.members)


class TestParseErrors:
    """Invalid TOML raises ManifestParseError."""

    def test_invalid_toml(self) -> None:
        """Broken syntax is a parse error."""
        with pytest.raises(ManifestParseError) as exc_info:
            parse_cargo_manifest('[package\nname = "x"\n', path='core/Cargo.toml')
        assert exc_info.value.code == E.MANIFEST_PARSE_ERROR
        assert 'core/Cargo.toml' in str(exc_info.value)

    def test_duplicate_key(self) -> None:
        """Duplicate keys are a parse error."""
        with pytest.raises(ManifestParseError):
            parse_cargo_manifest('[package]\nname = "a"\nname = "b"\n')
