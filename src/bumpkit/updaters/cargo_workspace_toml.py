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

"""Root ``Cargo.toml`` workspace version updater.

Rewrites ``[workspace.package].version`` and nothing else. Uses tomlkit
so comments, ordering and formatting of the rest of the file survive.
"""

from __future__ import annotations

from dataclasses import dataclass

import tomlkit
import tomlkit.exceptions

from bumpkit.errors import E, ManifestParseError, UpdaterError
from bumpkit.logging import get_logger

log = get_logger(__name__)


@dataclass(frozen=True)
class CargoWorkspaceToml:
    """Set the workspace version in a root ``Cargo.toml``.

    Attributes:
        version: The new ``[workspace.package].version``.
    """

    version: str

    def update_content(self, content: str | None) -> str:
        """Return ``content`` with the workspace version replaced.

        Raises:
            UpdaterError: If the file does not exist or has no
                ``[workspace.package].version``.
            ManifestParseError: If ``content`` is not valid TOML.
        """
        if content is None:
            raise UpdaterError(
                code=E.UPDATE_TARGET_MISSING,
                message='Cannot update workspace version: Cargo.toml does not exist',
                hint='The workspace manifest is never created by bumpkit.',
            )

        try:
            doc = tomlkit.parse(content)
        except tomlkit.exceptions.TOMLKitError as exc:
            raise ManifestParseError(
                code=E.MANIFEST_PARSE_ERROR,
                message=f'Cannot parse Cargo.toml: {exc}',
                hint='Check that Cargo.toml contains valid TOML.',
            ) from exc

        workspace = doc.get('workspace')
        package = workspace.get('package') if isinstance(workspace, dict) else None
        if not isinstance(package, dict) or 'version' not in package:
            raise UpdaterError(
                code=E.UPDATE_FIELD_MISSING,
                message='No [workspace.package].version in Cargo.toml',
                hint='Add version = "x.y.z" under [workspace.package].',
            )

        old_version = str(package['version'])
        package['version'] = self.version
        log.info('workspace_version_updated', old=old_version, new=self.version)
        return tomlkit.dumps(doc)

    def describe(self) -> str:
        """Return a one-line summary for plan output."""
        return f'workspace.package.version = {self.version}'


__all__ = [
    'CargoWorkspaceToml',
]
