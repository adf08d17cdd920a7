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

"""Release update planner for Cargo workspaces.

bumpkit computes the ordered set of file updates needed to release every
crate of a Cargo workspace at one shared version: the root
``Cargo.toml`` workspace version, the ``Cargo.lock`` entries of every
member crate, and an optional ``CHANGELOG.md`` entry.

Usage::

    from bumpkit.backends.content import LocalContentProvider
    from bumpkit.strategies import RustWorkspace

    strategy = RustWorkspace(LocalContentProvider(Path('.')))
    updates = await strategy.build_updates('1.2.3', '### Features\n- ...')
"""

from importlib.metadata import PackageNotFoundError, version

try:
    __version__ = version('bumpkit')
except PackageNotFoundError:
    __version__ = '0.0.0'

__all__ = [
    '__version__',
]
