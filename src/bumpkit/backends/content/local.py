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

"""Content provider backed by a directory on disk."""

from __future__ import annotations

from pathlib import Path

import aiofiles

from bumpkit.backends.content._types import FileContents
from bumpkit.errors import E, ContentAccessError
from bumpkit.logging import get_logger

log = get_logger('bumpkit.backends.content.local')


class LocalContentProvider:
    """:class:`~bumpkit.backends.content.ContentProvider` reading a working tree.

    Args:
        root: Directory that repository-relative paths are resolved against.
    """

    def __init__(self, root: Path) -> None:
        """Initialize with the directory to read from."""
        self._root = root.resolve()

    async def get_content(self, path: str) -> FileContents | None:
        """Read ``path`` under the root directory asynchronously via aiofiles."""
        target = (self._root / path).resolve()
        if target != self._root and self._root not in target.parents:
            raise ContentAccessError(
                code=E.CONTENT_ACCESS_ERROR,
                message=f'{path} resolves outside of {self._root}',
                hint='Workspace member paths must stay inside the workspace.',
            )

        try:
            async with aiofiles.open(target, encoding='utf-8') as f:
                text = await f.read()
        except (FileNotFoundError, IsADirectoryError, NotADirectoryError):
            log.debug('content_not_found', path=path)
            return None
        except (OSError, UnicodeDecodeError) as exc:
            raise ContentAccessError(
                code=E.CONTENT_ACCESS_ERROR,
                message=f'Failed to read {target}: {exc}',
                hint=f'Check that {target} is readable UTF-8 text.',
            ) from exc

        return FileContents(path=path, content=text)


__all__ = [
    'LocalContentProvider',
]
