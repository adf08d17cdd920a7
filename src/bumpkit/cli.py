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

"""CLI entry point for bumpkit.

Subcommands::

    bumpkit plan      Show the file updates for releasing a version
    bumpkit explain   Explain an error code

Usage::

    # Plan from the working tree:
    bumpkit plan 1.2.3 --changelog-file notes.md

    # Plan from a git ref, as JSON:
    bumpkit plan 1.2.3 --ref origin/main --skip-changelog --format json

    # Explain an error:
    bumpkit explain BK-WORKSPACE-NO-MEMBERS
"""

from __future__ import annotations

import argparse
import asyncio
import sys
from pathlib import Path

from rich_argparse import RichHelpFormatter

from bumpkit import __version__
from bumpkit.backends.content import ContentProvider, GitContentProvider, LocalContentProvider
from bumpkit.config import load_config
from bumpkit.errors import E, BumpKitError, ConfigurationError, explain, render_error, render_warning
from bumpkit.logging import WORKTREE_SOURCE, configure_logging, get_logger, plan_context
from bumpkit.strategies import RustWorkspace

logger = get_logger(__name__)


def _read_changelog_entry(args: argparse.Namespace) -> str:
    if args.changelog_file is None:
        return args.changelog_entry or ''
    try:
        return Path(args.changelog_file).read_text(encoding='utf-8')
    except OSError as exc:
        raise ConfigurationError(
            code=E.CONFIG_INVALID_VALUE,
            message=f'Cannot read changelog entry from {args.changelog_file}: {exc}',
        ) from exc


async def _cmd_plan(args: argparse.Namespace) -> int:
    """Handle the ``plan`` subcommand."""
    root = Path(args.root).resolve()
    config = load_config(root)

    ref = args.ref or config.ref
    provider: ContentProvider
    if ref:
        provider = GitContentProvider(root, ref=ref)
    else:
        provider = LocalContentProvider(root)

    strategy = RustWorkspace(
        provider,
        path=args.path if args.path is not None else config.path,
        changelog_path=config.changelog_path,
        skip_changelog=config.skip_changelog,
        manifest_file=config.manifest_file,
        lockfile=config.lockfile,
    )
    entry = _read_changelog_entry(args)
    with plan_context(strategy='rust-workspace', version=args.new_version, source=ref or WORKTREE_SOURCE):
        plan = await strategy.plan(
            args.new_version,
            entry,
            skip_changelog=True if args.skip_changelog else None,
        )

    for warning in plan.warnings:
        render_warning(warning)

    if args.format == 'json':
        print(plan.format_json())  # noqa: T201 - CLI output
    else:
        print(plan.format_table())  # noqa: T201 - CLI output
    return 0


def _cmd_explain(args: argparse.Namespace) -> int:
    """Handle the ``explain`` subcommand."""
    result = explain(args.code)
    if result is None:
        print(f'Unknown error code: {args.code}')  # noqa: T201 - CLI output
        return 1
    print(result)  # noqa: T201 - CLI output
    return 0


def build_parser() -> argparse.ArgumentParser:
    """Build the CLI argument parser."""
    RichHelpFormatter.styles['argparse.groups'] = 'bold yellow'
    parser = argparse.ArgumentParser(
        prog='bumpkit',
        description='Plan the file updates that release a Cargo workspace at one version.',
        formatter_class=RichHelpFormatter,
    )
    parser.add_argument(
        '--version',
        action='version',
        version=f'%(prog)s {__version__}',
    )
    parser.add_argument('-v', '--verbose', action='store_true', help='Enable debug logging.')
    parser.add_argument('-q', '--quiet', action='store_true', help='Only log warnings and errors.')
    parser.add_argument('--json-log', action='store_true', help='Emit logs as JSON lines.')

    subparsers = parser.add_subparsers(dest='command')

    plan_parser = subparsers.add_parser(
        'plan',
        help='Show the file updates for releasing a version.',
        formatter_class=RichHelpFormatter,
    )
    plan_parser.add_argument('new_version', metavar='NEW_VERSION', help='Version to release, e.g. 1.2.3.')
    entry_group = plan_parser.add_mutually_exclusive_group()
    entry_group.add_argument('--changelog-entry', default='', help='Changelog markdown for this release.')
    entry_group.add_argument('--changelog-file', default=None, help='Read the changelog entry from a file.')
    plan_parser.add_argument('--skip-changelog', action='store_true', help='Do not plan a changelog update.')
    plan_parser.add_argument('--root', default='.', help='Repository root (default: current directory).')
    plan_parser.add_argument(
        '--ref',
        default=None,
        help='Read files from this git ref instead of the working tree.',
    )
    plan_parser.add_argument(
        '--path',
        default=None,
        help='Workspace directory inside the repository (default: from bumpkit.toml, else ".").',
    )
    plan_parser.add_argument(
        '--format',
        choices=['table', 'json'],
        default='table',
        help='Output format (default: table).',
    )

    explain_parser = subparsers.add_parser('explain', help='Explain an error code.')
    explain_parser.add_argument('code', help='Error code, e.g. BK-WORKSPACE-NOT-FOUND.')

    return parser


def main(argv: list[str] | None = None) -> int:
    """CLI entry point.

    Returns:
        Exit code (0 for success, non-zero for failure).
    """
    parser = build_parser()
    args = parser.parse_args(argv)
    configure_logging(verbose=args.verbose, quiet=args.quiet, json_log=args.json_log)

    try:
        if args.command == 'plan':
            return asyncio.run(_cmd_plan(args))
        if args.command == 'explain':
            return _cmd_explain(args)

        parser.print_help()  # noqa: T201 - CLI output
        print(  # noqa: T201 - CLI output
            f'\n{parser.prog}: error: please provide a command',
            file=sys.stderr,
        )
        return 2

    except BumpKitError as exc:
        render_error(exc)
        return 1
    except KeyboardInterrupt:
        logger.info('interrupted')
        return 130


def _main() -> None:
    """Console script wrapper around :func:`main`."""
    sys.exit(main())


__all__ = [
    'build_parser',
    'main',
]
