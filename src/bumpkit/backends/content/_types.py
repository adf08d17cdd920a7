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

"""Shared types for the content subpackage."""

from __future__ import annotations

from dataclasses import dataclass

__all__ = [
    'FileContents',
]


@dataclass(frozen=True)
class FileContents:
    """Raw text of one file at the planned reference.

    Attributes:
        path: Repository-relative path that was requested.
        content: Decoded UTF-8 text.
        sha: Content identifier when the source has one (git blob id),
            otherwise empty.
    """

    path: str
    content: str
    sha: str = ''
