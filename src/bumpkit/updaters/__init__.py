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

"""File updaters referenced by planned updates.

An updater is a small frozen value describing one file rewrite. The
planner only constructs updaters; applying them is the caller's job
(see :func:`bumpkit.update.apply_update`).

Implementations:

- :class:`~bumpkit.updaters.changelog.Changelog` (``CHANGELOG.md``)
- :class:`~bumpkit.updaters.cargo_workspace_toml.CargoWorkspaceToml` (root ``Cargo.toml``)
- :class:`~bumpkit.updaters.cargo_lock.CargoLock` (``Cargo.lock``)
"""

from __future__ import annotations

from typing import Protocol, runtime_checkable

from bumpkit.updaters.cargo_lock import CargoLock as CargoLock
from bumpkit.updaters.cargo_workspace_toml import CargoWorkspaceToml as CargoWorkspaceToml
from bumpkit.updaters.changelog import Changelog as Changelog

__all__ = [
    'CargoLock',
    'CargoWorkspaceToml',
    'Changelog',
    'Updater',
]


@runtime_checkable
class Updater(Protocol):
    """Protocol for a single file rewrite."""

    def update_content(self, content: str | None) -> str:
        """Return the new file text.

        Args:
            content: Current file text, or ``None`` if the file does not
                exist yet.

        Raises:
            UpdaterError: If the update cannot be applied to ``content``.
        """
        ...

    def describe(self) -> str:
        """Return a one-line summary for plan output."""
        ...
