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

"""Changelog updater.

Inserts a release entry above the newest existing release in a markdown
changelog::

    # Changelog                   # Changelog

    ## 1.1.0           ──→        ## 1.2.0
    ...                           ...

                                  ## 1.1.0
                                  ...
"""

from __future__ import annotations

import re
from dataclasses import dataclass

from bumpkit.logging import get_logger

log = get_logger(__name__)

DEFAULT_HEADER = '# Changelog'

# Matches a release heading such as "## 1.2.3", "## [1.2.3]" or "### v1.2.3".
_VERSION_HEADER_RE = re.compile(r'^###? \[?v?[0-9]', re.MULTILINE)


@dataclass(frozen=True)
class Changelog:
    """Merge ``changelog_entry`` into a changelog for ``version``.

    Attributes:
        version: Version being released.
        changelog_entry: Pre-rendered markdown for this release. When
            empty, a bare ``## <version>`` heading is used.
    """

    version: str
    changelog_entry: str = ''

    def _entry(self) -> str:
        return self.changelog_entry.strip() or f'## {self.version}'

    def update_content(self, content: str | None) -> str:
        """Return ``content`` with the new entry merged in."""
        entry = self._entry()
        if content is None or not content.strip():
            log.info('changelog_created', version=self.version)
            return f'{DEFAULT_HEADER}\n\n{entry}\n'

        m = _VERSION_HEADER_RE.search(content)
        if m is None:
            return f'{content.rstrip()}\n\n{entry}\n'

        before = content[: m.start()].rstrip()
        after = content[m.start() :]
        if before:
            return f'{before}\n\n{entry}\n\n{after}'
        return f'{entry}\n\n{after}'

    def describe(self) -> str:
        """Return a one-line summary for plan output."""
        return f'changelog entry for {self.version}'


__all__ = [
    'DEFAULT_HEADER',
    'Changelog',
]
