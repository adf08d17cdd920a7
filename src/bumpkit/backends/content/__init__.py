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

"""Content provider protocol for bumpkit.

A :class:`ContentProvider` answers "what is the text of this path at the
reference being released?". It is the only way the planner sees files.

The protocol distinguishes two failure modes:

- ``None``: the path does not exist. The planner may treat this as
  recoverable (a member declared but not present on this ref).
- :class:`~bumpkit.errors.ContentAccessError`: the path could not be
  read. The content source is unreliable and planning must stop.

Implementations:

- :class:`~bumpkit.backends.content.local.LocalContentProvider` (files on disk)
- :class:`~bumpkit.backends.content.git.GitContentProvider` (blobs at a git ref)
"""

from __future__ import annotations

from typing import Protocol, runtime_checkable

from bumpkit.backends.content._types import FileContents as FileContents
from bumpkit.backends.content.git import GitContentProvider as GitContentProvider
from bumpkit.backends.content.local import LocalContentProvider as LocalContentProvider

__all__ = [
    'ContentProvider',
    'FileContents',
    'GitContentProvider',
    'LocalContentProvider',
]


@runtime_checkable
class ContentProvider(Protocol):
    """Read-only access to file contents at a fixed reference."""

    async def get_content(self, path: str) -> FileContents | None:
        """Return the contents of ``path``, or ``None`` if it does not exist.

        Args:
            path: Repository-relative POSIX path (e.g. ``"core/Cargo.toml"``).

        Raises:
            ContentAccessError: If the path exists or may exist but
                cannot be read.
        """
        ...
