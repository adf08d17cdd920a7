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

"""Structured error system for bumpkit.

Every error has a unique ``BK-NAMED-KEY`` code, a human-readable message,
and an optional hint with a suggested fix.

Code categories::

    BK-CONFIG-*       bumpkit.toml errors
    BK-WORKSPACE-*    Root manifest shape errors (fatal)
    BK-MEMBER-*       Member resolution problems (warnings, never fatal)
    BK-CONTENT-*      Content provider read failures
    BK-MANIFEST-*     Manifest parse failures
    BK-VERSION-*      Requested version errors
    BK-UPDATE-*       Updater failures

Fatal problems are raised as one of the :class:`BumpKitError`
subclasses. Recoverable problems are :class:`BumpKitWarning`
subclasses; they are logged, emitted with :func:`warnings.warn`, and
collected on the resulting plan.

Usage::

    from bumpkit.errors import ConfigurationError, E

    raise ConfigurationError(
        code=E.WORKSPACE_NOT_FOUND,
        message='RustWorkspace strategy requires a workspace in root Cargo.toml',
        hint='Add a [workspace] table to Cargo.toml.',
    )
"""

from __future__ import annotations

import sys
from dataclasses import dataclass
from enum import Enum
from typing import TextIO

from rich.console import Console
from rich.markup import escape as rich_escape


class ErrorCode(str, Enum):
    """Enumeration of all bumpkit diagnostic codes."""

    # Configuration
    CONFIG_INVALID_KEY = 'BK-CONFIG-INVALID-KEY'
    CONFIG_INVALID_VALUE = 'BK-CONFIG-INVALID-VALUE'

    # Root manifest shape
    WORKSPACE_NOT_FOUND = 'BK-WORKSPACE-NOT-FOUND'
    WORKSPACE_NO_VERSION = 'BK-WORKSPACE-NO-VERSION'
    WORKSPACE_NO_ROOT_PACKAGE = 'BK-WORKSPACE-NO-ROOT-PACKAGE'
    WORKSPACE_NO_MEMBERS = 'BK-WORKSPACE-NO-MEMBERS'

    # Member resolution
    MEMBER_MANIFEST_MISSING = 'BK-MEMBER-MANIFEST-MISSING'
    MEMBER_NO_PACKAGE_NAME = 'BK-MEMBER-NO-PACKAGE-NAME'

    # Content and parsing
    CONTENT_ACCESS_ERROR = 'BK-CONTENT-ACCESS-ERROR'
    MANIFEST_PARSE_ERROR = 'BK-MANIFEST-PARSE-ERROR'

    # Versioning
    VERSION_INVALID = 'BK-VERSION-INVALID'

    # Updaters
    UPDATE_TARGET_MISSING = 'BK-UPDATE-TARGET-MISSING'
    UPDATE_FIELD_MISSING = 'BK-UPDATE-FIELD-MISSING'


# Convenience alias for shorter imports.
E = ErrorCode


@dataclass(frozen=True)
class ErrorInfo:
    """Metadata for a single error code.

    Attributes:
        code: The ``BK-NAMED-KEY`` error code.
        message: Human-readable description of what went wrong.
        hint: Optional suggestion for how to fix the error.
    """

    code: ErrorCode
    message: str
    hint: str = ''


class BumpKitError(Exception):
    """Base exception for all bumpkit errors.

    Args:
        code: The error code from :class:`ErrorCode`.
        message: Human-readable description of what went wrong.
        hint: Optional suggestion for how to fix the error.
    """

    def __init__(self, code: ErrorCode, message: str, hint: str = '') -> None:
        """Initialize with an error code, message, and optional hint."""
        self.info = ErrorInfo(code=code, message=message, hint=hint)
        super().__init__(f'[{code.value}] {message}')

    @property
    def code(self) -> ErrorCode:
        """The error code."""
        return self.info.code

    @property
    def hint(self) -> str:
        """Suggestion for fixing this error, or empty string."""
        return self.info.hint


class ConfigurationError(BumpKitError):
    """The root manifest, the requested version, or bumpkit.toml is unusable."""


class ContentAccessError(BumpKitError):
    """A content provider could not read a path that may exist."""


class ManifestParseError(BumpKitError):
    """Manifest text is not valid TOML."""


class UpdaterError(BumpKitError):
    """An updater cannot be applied to the given content."""


class BumpKitWarning(UserWarning):
    """Base warning for all bumpkit warnings.

    Same structure as :class:`BumpKitError` but emitted via
    :func:`warnings.warn` instead of being raised.
    """

    def __init__(self, code: ErrorCode, message: str, hint: str = '') -> None:
        """Initialize with an error code, message, and optional hint."""
        self.info = ErrorInfo(code=code, message=message, hint=hint)
        super().__init__(f'[{code.value}] {message}')

    @property
    def code(self) -> ErrorCode:
        """The error code."""
        return self.info.code

    @property
    def hint(self) -> str:
        """Suggestion for addressing this warning, or empty string."""
        return self.info.hint


class MemberResolutionWarning(BumpKitWarning):
    """A declared workspace member was skipped.

    Attributes:
        member: The member path as declared in the root manifest.
    """

    def __init__(self, code: ErrorCode, message: str, hint: str = '', *, member: str = '') -> None:
        """Initialize with the skipped member path."""
        super().__init__(code, message, hint)
        self.member = member


ERRORS: dict[ErrorCode, ErrorInfo] = {
    E.CONFIG_INVALID_KEY: ErrorInfo(
        code=E.CONFIG_INVALID_KEY,
        message='bumpkit.toml contains a key bumpkit does not recognize.',
        hint='Valid keys: path, changelog_path, skip_changelog, manifest_file, lockfile, ref.',
    ),
    E.CONFIG_INVALID_VALUE: ErrorInfo(
        code=E.CONFIG_INVALID_VALUE,
        message='bumpkit.toml (or a file named on the command line) is unreadable or holds a value of the wrong type.',
        hint='Check that bumpkit.toml is valid TOML and each value has the documented type.',
    ),
    E.WORKSPACE_NOT_FOUND: ErrorInfo(
        code=E.WORKSPACE_NOT_FOUND,
        message='The root Cargo.toml is missing or has no [workspace] table.',
        hint='Point bumpkit at the directory holding the workspace Cargo.toml.',
    ),
    E.WORKSPACE_NO_VERSION: ErrorInfo(
        code=E.WORKSPACE_NO_VERSION,
        message='The root Cargo.toml has no [workspace.package].version.',
        hint='Add version = "x.y.z" under [workspace.package] and use version.workspace = true in members.',
    ),
    E.WORKSPACE_NO_ROOT_PACKAGE: ErrorInfo(
        code=E.WORKSPACE_NO_ROOT_PACKAGE,
        message='The root Cargo.toml has no [package].name.',
        hint='The root package name identifies the release; add a [package] table with a name.',
    ),
    E.WORKSPACE_NO_MEMBERS: ErrorInfo(
        code=E.WORKSPACE_NO_MEMBERS,
        message='The root Cargo.toml declares no workspace members.',
        hint='List member crate directories in [workspace].members.',
    ),
    E.MEMBER_MANIFEST_MISSING: ErrorInfo(
        code=E.MEMBER_MANIFEST_MISSING,
        message='A declared workspace member has no Cargo.toml at the planned ref.',
        hint='The member is skipped. Remove it from [workspace].members if it no longer exists.',
    ),
    E.MEMBER_NO_PACKAGE_NAME: ErrorInfo(
        code=E.MEMBER_NO_PACKAGE_NAME,
        message='A workspace member Cargo.toml has no [package].name.',
        hint='The member is skipped and its Cargo.lock entry is left unchanged.',
    ),
    E.CONTENT_ACCESS_ERROR: ErrorInfo(
        code=E.CONTENT_ACCESS_ERROR,
        message='A file could not be read from the content source.',
        hint='Check permissions, the git ref, and that the repository is not corrupted.',
    ),
    E.MANIFEST_PARSE_ERROR: ErrorInfo(
        code=E.MANIFEST_PARSE_ERROR,
        message='A Cargo.toml is not valid TOML.',
        hint="Run 'cargo metadata' to locate the syntax error.",
    ),
    E.VERSION_INVALID: ErrorInfo(
        code=E.VERSION_INVALID,
        message='The version to release is empty.',
        hint='Pass the version every workspace package is released at, e.g. 1.2.3.',
    ),
    E.UPDATE_TARGET_MISSING: ErrorInfo(
        code=E.UPDATE_TARGET_MISSING,
        message='An update targets a file that does not exist and may not be created.',
        hint='Only the changelog is created on demand; Cargo.toml and Cargo.lock must exist.',
    ),
    E.UPDATE_FIELD_MISSING: ErrorInfo(
        code=E.UPDATE_FIELD_MISSING,
        message='The file to update lacks the field the updater rewrites.',
        hint='The root Cargo.toml needs [workspace.package].version.',
    ),
}


def explain(code: str) -> str | None:
    """Return a detailed explanation for an error code.

    Args:
        code: The error code string, e.g. ``"BK-WORKSPACE-NOT-FOUND"``.

    Returns:
        A formatted explanation string, or ``None`` if the code is unknown.
    """
    try:
        error_code = ErrorCode(code)
    except ValueError:
        return None

    info = ERRORS.get(error_code)
    if info is None:
        return f'{code}: No detailed explanation available.'

    lines = [f'{code}: {info.message}']
    if info.hint:
        lines.append(f'  Hint: {info.hint}')
    return '\n'.join(lines)


def _render(kind: str, color: str, info: ErrorInfo, out: TextIO) -> None:
    if out.isatty():
        console = Console(file=out, highlight=False)
        msg = rich_escape(info.message)
        console.print(
            f'[bold {color}]{kind}[/bold {color}][bold {color}]\\[{info.code.value}][/bold {color}][bold]: {msg}[/bold]',
        )
        if info.hint:
            console.print('  [dim]|[/dim]')
            console.print(f'  [dim]=[/dim] [cyan]hint[/cyan]: {rich_escape(info.hint)}')
        console.print()
    else:
        print(f'{kind}[{info.code.value}]: {info.message}', file=out)  # noqa: T201 - CLI output
        if info.hint:
            print('  |', file=out)  # noqa: T201 - CLI output
            print(f'  = hint: {info.hint}', file=out)  # noqa: T201 - CLI output
        print(file=out)  # noqa: T201 - CLI output


def render_error(exc: BumpKitError, *, file: TextIO | None = None) -> None:
    """Render an error in Rust-compiler style.

    Output format::

        error[BK-WORKSPACE-NOT-FOUND]: RustWorkspace strategy requires a workspace ...
          |
          = hint: Add a [workspace] table to Cargo.toml.

    Args:
        exc: The error to render.
        file: Output stream (defaults to ``sys.stderr``).
    """
    _render('error', 'red', exc.info, file or sys.stderr)


def render_warning(exc: BumpKitWarning, *, file: TextIO | None = None) -> None:
    """Render a warning in Rust-compiler style.

    Args:
        exc: The warning to render.
        file: Output stream (defaults to ``sys.stderr``).
    """
    _render('warning', 'yellow', exc.info, file or sys.stderr)


__all__ = [
    'E',
    'ERRORS',
    'BumpKitError',
    'BumpKitWarning',
    'ConfigurationError',
    'ContentAccessError',
    'ErrorCode',
    'ErrorInfo',
    'ManifestParseError',
    'MemberResolutionWarning',
    'UpdaterError',
    'explain',
    'render_error',
    'render_warning',
]
