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

"""Content provider that reads blobs at a git ref.

All lookups go through the ``git`` CLI via
:func:`~bumpkit.backends._run.run_command`. Blocking subprocess calls
are dispatched to ``asyncio.to_thread()`` so member manifests can be
fetched concurrently.

Lookup sequence for ``get_content('core/Cargo.toml')``::

    git rev-parse --verify --quiet <ref>^{commit}    → commit (once)
    git ls-tree -z <commit> -- core/Cargo.toml
         │              │                      │
         │ fails        │ no entry             │ "<mode> <type> <id>\t<path>"
         ▼              ▼                      ▼
    ContentAccessError  None      type != "blob" → None
                                               │
                                               ▼
                                  git cat-file blob <id>  → FileContents

``ls-tree`` resolves paths against the provider's ``repo_root``, which
may be a sub-directory of the repository, the same way
:class:`~bumpkit.backends.content.local.LocalContentProvider` does. An
unreadable tree makes ``ls-tree`` fail, so a damaged repository is never
mistaken for a missing file.
"""

from __future__ import annotations

import asyncio
import posixpath
from pathlib import Path

from bumpkit.backends._run import CommandResult, TimeoutExpired, run_command
from bumpkit.backends.content._types import FileContents
from bumpkit.errors import E, ContentAccessError
from bumpkit.logging import get_logger

log = get_logger('bumpkit.backends.content.git')


class GitContentProvider:
    """:class:`~bumpkit.backends.content.ContentProvider` reading a git ref.

    The ref is resolved to a commit on first use and every later lookup
    reads from that commit, so a branch moving mid-plan cannot mix
    contents from two commits.

    Args:
        repo_root: Directory inside a git work tree. Paths are resolved
            against it, so it may be a sub-directory of the repository.
        ref: Any committish (branch, tag, SHA). Defaults to ``HEAD``.
    """

    def __init__(self, repo_root: Path, ref: str = 'HEAD') -> None:
        """Initialize with the repository root and the ref to read."""
        self._root = repo_root
        self._ref = ref
        self._commit: str | None = None

    @property
    def ref(self) -> str:
        """The ref this provider reads from."""
        return self._ref

    def _git(self, *args: str) -> CommandResult:
        """Run a git command synchronously (called via to_thread)."""
        try:
            return run_command(['git', *args], cwd=self._root)
        except (OSError, UnicodeDecodeError, TimeoutExpired) as exc:
            raise ContentAccessError(
                code=E.CONTENT_ACCESS_ERROR,
                message=f'Failed to run git: {exc}',
                hint='Check that git is installed and on PATH.',
            ) from exc

    async def _resolve_commit(self) -> str:
        if self._commit is None:
            result = await asyncio.to_thread(self._git, 'rev-parse', '--verify', '--quiet', f'{self._ref}^{{commit}}')
            if not result.ok or not result.stdout.strip():
                raise ContentAccessError(
                    code=E.CONTENT_ACCESS_ERROR,
                    message=f"Cannot resolve git ref '{self._ref}' in {self._root}",
                    hint='Check that the ref exists locally (git fetch) and the path is a git repository.',
                )
            self._commit = result.stdout.strip()
            log.debug('ref_resolved', ref=self._ref, commit=self._commit)
        return self._commit

    async def get_content(self, path: str) -> FileContents | None:
        """Return the blob at ``path`` in the resolved commit."""
        commit = await self._resolve_commit()
        rel = posixpath.normpath(path).lstrip('/')
        if rel == '..' or rel.startswith('../'):
            raise ContentAccessError(
                code=E.CONTENT_ACCESS_ERROR,
                message=f'{path} resolves outside of the repository',
                hint='Workspace member paths must stay inside the workspace.',
            )

        listing = await asyncio.to_thread(self._git, 'ls-tree', '-z', commit, '--', rel)
        if not listing.ok:
            raise self._read_error(rel, listing)
        entry = listing.stdout.split('\0', 1)[0]
        if not entry:
            log.debug('content_not_found', path=rel, ref=self._ref)
            return None

        # "<mode> SP <type> SP <object>\t<path>"
        _mode, kind, object_id = entry.split('\t', 1)[0].split()
        if kind != 'blob':
            log.debug('content_not_a_blob', path=rel, kind=kind)
            return None

        blob = await asyncio.to_thread(self._git, 'cat-file', 'blob', object_id)
        if not blob.ok:
            raise self._read_error(rel, blob)
        return FileContents(path=path, content=blob.stdout, sha=object_id)

    def _read_error(self, path: str, result: CommandResult) -> ContentAccessError:
        return ContentAccessError(
            code=E.CONTENT_ACCESS_ERROR,
            message=f'Failed to read {path} at {self._ref}: {result.stderr.strip() or result.command_str}',
            hint="Run 'git fsck' to check the repository.",
        )


__all__ = [
    'GitContentProvider',
]
