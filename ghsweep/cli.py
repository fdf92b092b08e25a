#!/usr/bin/env python3
"""
Command line entry point for publishing replacements to a GitHub repository.

Usage:
    ghsweep --repo owner/repo --branch rename-foo --find foo --replace bar
    ghsweep --repo owner/repo --branch docs --find foo --replace bar --file README.md
    ghsweep --repo owner/repo --branch docs --find foo --replace bar --file local.md:docs/remote.md

Without --file, every file of the repository containing the find text (per
GitHub code search) is changed.

Environment variables:
    GITHUB_AUTH_TOKEN: GitHub access token (required)
    GH_COMMIT_MESSAGE: Default commit message
    GH_SEARCH_LANGUAGE: Default language filter for code search
"""

import argparse
import asyncio
import logging
import sys
from typing import List, Optional

from common.config.config import GITHUB_AUTH_TOKEN
from common.exception.exceptions import GhSweepError, RefUpdateError
from ghsweep.services.github.changes.change import Change
from ghsweep.services.github.changes.replacement import replace_all
from ghsweep.services.github.github_service import GitHubService
from ghsweep.services.github.models.options import PublishOptions

logger = logging.getLogger(__name__)


def build_parser() -> argparse.ArgumentParser:
    parser = argparse.ArgumentParser(
        prog="ghsweep",
        description="Replace text in a GitHub repository and commit the result to a branch",
    )
    parser.add_argument("--repo", required=True, help="Target repository as owner/repo")
    parser.add_argument("--branch", required=True, help="Branch to commit to (created if absent)")
    parser.add_argument("--find", required=True, help="Literal text to replace")
    parser.add_argument("--replace", required=True, help="Replacement text")
    parser.add_argument(
        "--file",
        action="append",
        default=[],
        metavar="LOCAL[:REMOTE]",
        help="Local file to publish; may be repeated. Omit to use code search.",
    )
    parser.add_argument("--message", default=None, help="Commit message")
    parser.add_argument("--language", default=None, help="Language filter for code search")
    parser.add_argument("--base-branch", default=None, help="Branch new branches start from")
    parser.add_argument("--timeout", type=float, default=None, help="Deadline in seconds")
    parser.add_argument("--verbose", "-v", action="store_true", help="Enable debug logging")
    return parser


def build_changes(find: str, replace: str, files: List[str]) -> List[Change]:
    replacement = replace_all(find, replace)
    if not files:
        return [Change.from_search(replacement)]
    return [Change(target=target, replacement=replacement) for target in files]


def build_options(args: argparse.Namespace) -> PublishOptions:
    overrides = {
        "message": args.message,
        "language_filter": args.language,
        "base_branch": args.base_branch,
    }
    return PublishOptions(**{key: value for key, value in overrides.items() if value is not None})


def main(argv: Optional[List[str]] = None) -> int:
    args = build_parser().parse_args(argv)

    logging.basicConfig(
        level=logging.DEBUG if args.verbose else logging.INFO,
        format="%(asctime)s %(levelname)s %(name)s: %(message)s",
    )

    try:
        service = GitHubService(GITHUB_AUTH_TOKEN, args.repo, options=build_options(args))
        changes = build_changes(args.find, args.replace, args.file)
        result = asyncio.run(service.publish(args.branch, changes, timeout=args.timeout))
    except RefUpdateError as e:
        logger.error(f"Publish failed, orphaned commit {e.orphaned_commit_sha}: {e}")
        return 1
    except (GhSweepError, ValueError) as e:
        logger.error(f"Publish failed: {e}")
        return 1
    except asyncio.TimeoutError:
        logger.error(f"Publish did not finish within {args.timeout} seconds")
        return 1

    action = "Created" if result.created else "Updated"
    print(f"{action} branch {args.branch} at {result.commit.sha}")
    for applied in result.changes:
        print(f"  {applied.path}: {applied.match_count} replacement(s)")
    return 0


if __name__ == "__main__":
    sys.exit(main())
