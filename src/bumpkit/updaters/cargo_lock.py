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

"""``Cargo.lock`` updater.

Cargo records every resolved crate as a ``[[package]]`` entry::

    [[package]]
    name = "my-core"
    version = "0.1.0"
    dependencies = [
     "serde",
    ]

Entries whose ``name`` is in the version map get their ``version``
replaced; registry crates and every other field are left untouched.
"""

from __future__ import annotations

from collections.abc import Mapping
from dataclasses import dataclass, field

import tomlkit
import tomlkit.exceptions

from bumpkit.errors import E, ManifestParseError, UpdaterError
from bumpkit.logging import get_logger

log = get_logger(__name__)


@dataclass(frozen=True)
class CargoLock:
    """Pin workspace crates in ``Cargo.lock`` to their release versions.

    Attributes:
        versions: Package name → new version.
    """

    versions: Mapping[str, str] = field(default_factory=dict)

    def __post_init__(self) -> None:
        """Take a private copy so later edits to the caller's map don't leak in."""
        object.__setattr__(self, 'versions', dict(self.versions))

    def update_content(self, content: str | None) -> str:
        """Return ``content`` with matching entries re-versioned.

        Raises:
            UpdaterError: If the lockfile does not exist.
            ManifestParseError: If ``content`` is not valid TOML.
        """
        if content is None:
            raise UpdaterError(
                code=E.UPDATE_TARGET_MISSING,
                message='Cannot update Cargo.lock: file does not exist',
                hint="Run 'cargo generate-lockfile' and commit Cargo.lock.",
            )

        try:
            doc = tomlkit.parse(content)
        except tomlkit.exceptions.TOMLKitError as exc:
            raise ManifestParseError(
                code=E.MANIFEST_PARSE_ERROR,
                message=f'Cannot parse Cargo.lock: {exc}',
                hint="Regenerate it with 'cargo generate-lockfile'.",
            ) from exc

        packages = doc.get('package')
        if not isinstance(packages, list):
            log.debug('lockfile_no_packages')
            return content

        updated: list[str] = []
        for entry in packages:
            if not isinstance(entry, dict):
                continue
            name = entry.get('name')
            if not isinstance(name, str) or name not in self.versions:
                continue
            new_version = self.versions[name]
            if entry.get('version') != new_version:
                entry['version'] = new_version
                updated.append(str(name))

        log.info('lockfile_updated', count=len(updated), crates=updated)
        return tomlkit.dumps(doc)

    def describe(self) -> str:
        """Return a one-line summary for plan output."""
        return f'pin {len(self.versions)} crate(s): ' + ', '.join(f'{n}={v}' for n, v in self.versions.items())


__all__ = [
    'CargoLock',
]
