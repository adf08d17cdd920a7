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

"""Release plan: the ordered updates plus what was learned building them.

A :class:`ReleasePlan` is the result of one planner run. Output as a
text table (TTY) or JSON (CI).

Usage::

    plan = await RustWorkspace(provider).plan('1.2.3', entry)
    print(plan.format_table())
    print(plan.format_json())
"""

from __future__ import annotations

import json
from dataclasses import dataclass, field

from bumpkit.errors import MemberResolutionWarning
from bumpkit.update import Update


@dataclass(frozen=True)
class ReleasePlan:
    """Complete update plan for one workspace release.

    Attributes:
        new_version: Version every package is released at.
        updates: Updates in application order.
        version_map: Package name → new version, root first.
        warnings: Members that were skipped, in declared order.
    """

    new_version: str
    updates: list[Update] = field(default_factory=list)
    version_map: dict[str, str] = field(default_factory=dict)
    warnings: list[MemberResolutionWarning] = field(default_factory=list)

    def format_table(self) -> str:
        """Format the plan as a human-readable table."""
        if not self.updates:
            return 'No updates in the release plan.'

        headers = ['#', 'Path', 'Create', 'Update']
        rows = [
            [str(i + 1), u.path, 'yes' if u.create_if_missing else 'no', u.updater.describe()]
            for i, u in enumerate(self.updates)
        ]
        widths = [len(h) for h in headers]
        for row in rows:
            for i, cell in enumerate(row):
                widths[i] = max(widths[i], len(cell))

        fmt = '  '.join(f'{{:<{w}}}' for w in widths)
        lines = [fmt.format(*headers), fmt.format(*('─' * w for w in widths))]
        lines.extend(fmt.format(*row) for row in rows)

        lines.append('')
        lines.append(f'Packages released at {self.new_version}:')
        lines.extend(f'  {name}' for name in self.version_map)

        if self.warnings:
            lines.append('')
            lines.append(f'Skipped members ({len(self.warnings)}):')
            lines.extend(f'  {w.member}: {w.info.message} [{w.code.value}]' for w in self.warnings)

        return '\n'.join(lines)

    def format_json(self) -> str:
        """Format the plan as machine-readable JSON."""
        data = {
            'new_version': self.new_version,
            'updates': [
                {
                    'path': u.path,
                    'create_if_missing': u.create_if_missing,
                    'updater': type(u.updater).__name__,
                    'description': u.updater.describe(),
                }
                for u in self.updates
            ],
            'version_map': self.version_map,
            'warnings': [
                {'member': w.member, 'code': w.code.value, 'message': w.info.message}
                for w in self.warnings
            ],
        }
        return json.dumps(data, indent=2)


__all__ = [
    'ReleasePlan',
]
