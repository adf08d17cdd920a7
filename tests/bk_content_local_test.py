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

"""Tests for bumpkit.backends.content.local."""

from __future__ import annotations

from pathlib import Path

import pytest
from bumpkit.backends.content import ContentProvider, FileContents, LocalContentProvider
from bumpkit.errors import E, ContentAccessError


class TestLocalContentProvider:
    """LocalContentProvider reads files under a root directory."""

    @pytest.mark.asyncio
    async def test_reads_file(self, tmp_path: Path) -> None:
        """An existing file is returned with its text."""
        (tmp_path / 'core').mkdir()
        (tmp_path / 'core' / 'Cargo.toml').write_text('[package]\nname = "core"\n', encoding='utf-8')

        result = await LocalContentProvider(tmp_path).get_content('core/Cargo.toml')
        assert result == FileContents(path='core/Cargo.toml', content='[package]\nname = "core"\n')

    @pytest.mark.asyncio
    async def test_missing_file(self, tmp_path: Path) -> None:
        """A missing file is None, not an error."""
        assert await LocalContentProvider(tmp_path).get_content('nope/Cargo.toml') is None

    @pytest.mark.asyncio
    async def test_directory(self, tmp_path: Path) -> None:
        """A directory at the path counts as missing."""
        (tmp_path / 'Cargo.toml').mkdir()
        assert await LocalContentProvider(tmp_path).get_content('Cargo.toml') is None

    @pytest.mark.asyncio
    async def test_file_in_path(self, tmp_path: Path) -> None:
        """A regular file used as a directory counts as missing."""
        (tmp_path / 'core').write_text('not a dir', encoding='utf-8')
        assert await LocalContentProvider(tmp_path).get_content('core/Cargo.toml') is None

    @pytest.mark.asyncio
    async def test_escape_rejected(self, tmp_path: Path) -> None:
        """Paths that leave the root are an access error."""
        root = tmp_path / 'repo'
        root.mkdir()
        (tmp_path / 'secret.toml').write_text('x = 1\n', encoding='utf-8')
        with pytest.raises(ContentAccessError) as exc_info:
            await LocalContentProvider(root).get_content('../secret.toml')
        assert exc_info.value.code == E.CONTENT_ACCESS_ERROR

    @pytest.mark.asyncio
    async def test_invalid_utf8(self, tmp_path: Path) -> None:
        """Undecodable bytes are an access error, not a missing file."""
        (tmp_path / 'Cargo.toml').write_bytes(b'\xff\xfe\x00bad')
        with pytest.raises(ContentAccessError):
            await LocalContentProvider(tmp_path).get_content('Cargo.toml')

    @pytest.mark.asyncio
    async def test_relative_root(self, tmp_path: Path, monkeypatch: pytest.MonkeyPatch) -> None:
        """A relative root is resolved against the current directory."""
        (tmp_path / 'Cargo.toml').write_text('x = 1\n', encoding='utf-8')
        monkeypatch.chdir(tmp_path)
        result = await LocalContentProvider(Path('.')).get_content('Cargo.toml')
        assert result is not None
        assert result.content == 'x = 1\n'

    def test_satisfies_protocol(self, tmp_path: Path) -> None:
        """LocalContentProvider implements ContentProvider."""
        assert isinstance(LocalContentProvider(tmp_path), ContentProvider)
