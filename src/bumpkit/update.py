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

"""Planned file updates.

An :class:`Update` pairs a repository path with the updater that should
rewrite it. Plans are lists of updates in application order.
"""

from __future__ import annotations

from dataclasses import dataclass

from bumpkit.errors import E, UpdaterError
from bumpkit.updaters import Updater


@dataclass(frozen=True)
class Update:
    """One file mutation in a release plan.

    Attributes:
        path: Repository-relative path of the file.
        create_if_missing: Whether the file may be created. When
            ``False``, applying the update to a missing file fails.
        updater: The rewrite to perform.
    """

    path: str
    create_if_missing: bool
    updater: Updater

    def describe(self) -> str:
        """Return a one-line summary for plan output."""
        return f'{self.path}: {self.updater.describe()}'


def apply_update(update: Update, content: str | None) -> str:
    """Compute the new text of ``update.path``.

    Args:
        update: The planned update.
        content: Current file text, or ``None`` if the file is missing.

    Returns:
        The rewritten file text.

    Raises:
        UpdaterError: If the file is missing and may not be created, or
            the updater rejects the content.
    """
    if content is None and not update.create_if_missing:
        raise UpdaterError(
            code=E.UPDATE_TARGET_MISSING,
            message=f'{update.path} does not exist and is not created by this update',
            hint=f'Commit {update.path} before releasing.',
        )
    return update.updater.update_content(content)


__all__ = [
    'Update',
    'apply_update',
]
