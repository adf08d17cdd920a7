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

"""Release strategy protocol for bumpkit.

A :class:`Strategy` turns a chosen release version into an ordered list
of file updates. Each workspace flavor implements it on its own and
shares plain helper functions from :mod:`bumpkit.strategies._common`.

Implementations:

- :class:`~bumpkit.strategies.rust_workspace.RustWorkspace` (Cargo workspace, one shared version)
"""

from __future__ import annotations

from typing import Protocol, runtime_checkable

from bumpkit.plan import ReleasePlan
from bumpkit.strategies.rust_workspace import RustWorkspace as RustWorkspace
from bumpkit.update import Update

__all__ = [
    'RustWorkspace',
    'Strategy',
]


@runtime_checkable
class Strategy(Protocol):
    """Produce an ordered update plan for a new version."""

    async def plan(
        self,
        new_version: str,
        changelog_entry: str = '',
        *,
        skip_changelog: bool | None = None,
    ) -> ReleasePlan:
        """Return the full plan, including the version map and warnings."""
        ...

    async def build_updates(
        self,
        new_version: str,
        changelog_entry: str = '',
        *,
        skip_changelog: bool | None = None,
    ) -> list[Update]:
        """Return the updates in application order."""
        ...
