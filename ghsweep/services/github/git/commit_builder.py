"""
Tree and commit construction for publishing changes to a branch.

Publishing is a linear sequence of remote calls:
resolved branch -> tree built -> commit created -> ref updated.
Nothing is rolled back. If the ref update fails, the new tree and commit stay
on the server unreferenced until GitHub garbage-collects them.
"""

import asyncio
import logging
from datetime import datetime, timezone
from typing import Callable, Dict, List, Optional, Sequence, Tuple

from common.config.config import GH_COMMIT_MESSAGE, GH_FALLBACK_AUTHOR_EMAIL
from common.exception.exceptions import (
    CommitCreateError,
    ContentDecodeError,
    GhSweepError,
    NoChangesError,
    ParentLookupError,
    RefUpdateError,
    TreeBuildError,
)
from ghsweep.services.github.api.git_data import GitDataOperations
from ghsweep.services.github.api.repositories import RepositoryOperations
from ghsweep.services.github.changes.change import Change
from ghsweep.services.github.changes.locator import FileLocator
from ghsweep.services.github.models.types import (
    AppliedChange,
    Commit,
    CommitAuthor,
    FileMatch,
    Reference,
    Tree,
    TreeEntry,
)

logger = logging.getLogger(__name__)


def _utc_now() -> datetime:
    return datetime.now(timezone.utc)


class CommitBuilder:
    """Builds trees and commits from changes and advances branches to them."""

    def __init__(
        self,
        git_data: GitDataOperations,
        repositories: RepositoryOperations,
        locator: FileLocator,
        owner: str,
        repository_name: str,
        message: str = GH_COMMIT_MESSAGE,
        fallback_email: str = GH_FALLBACK_AUTHOR_EMAIL,
        clock: Callable[[], datetime] = _utc_now,
    ):
        self.git_data = git_data
        self.repositories = repositories
        self.locator = locator
        self.owner = owner
        self.repository_name = repository_name
        self.message = message
        self.fallback_email = fallback_email
        self.clock = clock

    async def make_changes(self, branch: Reference, changes: Sequence[Change]) -> Tree:
        """Resolve and apply changes, then create a tree on top of the branch tip.

        Raises:
            ResolutionError: If any change target cannot be resolved
            NoChangesError: If no change resolved to any file
            ParentLookupError: If the branch tip commit cannot be read
            TreeBuildError: If the tree-create call fails
        """
        entries, _ = await self.resolve_entries(changes)
        return await self.create_tree(branch, entries)

    async def resolve_entries(
        self, changes: Sequence[Change]
    ) -> Tuple[List[TreeEntry], List[AppliedChange]]:
        """Turn changes into tree entries.

        Changes are resolved concurrently, but entries keep the order of the
        input changes and, within a change, the order files were found in.
        When two changes produce the same path the later change wins.

        Returns:
            Tuple of (tree entries, per-file match counts)
        """
        resolved = await self._resolve_all(changes)

        by_path: Dict[str, Tuple[TreeEntry, AppliedChange]] = {}
        for change, matches in zip(changes, resolved):
            if not matches:
                logger.info(f"No files found for change target {change.target!r}")
            for match in matches:
                self._add_entry(by_path, change, match)

        entries = [entry for entry, _ in by_path.values()]
        applied = [report for _, report in by_path.values()]
        return entries, applied

    async def _resolve_all(self, changes: Sequence[Change]) -> List[List[FileMatch]]:
        """Resolve every change concurrently, stopping all of them on the first failure."""
        tasks = [asyncio.ensure_future(self.locator.resolve(change)) for change in changes]
        try:
            return list(await asyncio.gather(*tasks))
        except Exception:
            # No sibling may issue another remote call once one has failed
            for task in tasks:
                task.cancel()
            await asyncio.gather(*tasks, return_exceptions=True)
            raise

    def _add_entry(
        self,
        by_path: Dict[str, Tuple[TreeEntry, AppliedChange]],
        change: Change,
        match: FileMatch,
    ) -> None:
        try:
            content, count = change.apply_with_count(match.content)
        except UnicodeDecodeError as e:
            error_msg = f"{match.path} is not valid UTF-8 text: {e}"
            logger.error(error_msg)
            raise ContentDecodeError(error_msg) from e

        if change.is_search_driven and count == 0:
            # Search hits are tokenized; the literal text may not be present
            logger.debug(f"Skipping {match.path}: no literal match for {change.target!r}")
            return

        if match.path in by_path:
            logger.warning(f"{match.path} is changed by more than one change, keeping the last one")
        by_path[match.path] = (
            TreeEntry(path=match.path, content=content),
            AppliedChange(path=match.path, match_count=count),
        )
        logger.info(f"Prepared {match.path} with {count} replacement(s)")

    async def create_tree(self, branch: Reference, entries: List[TreeEntry]) -> Tree:
        if not entries:
            error_msg = f"No files to change on {branch.branch_name}"
            logger.error(error_msg)
            raise NoChangesError(error_msg)

        base_commit = await self._get_commit(branch)

        try:
            tree = await self.git_data.create_tree(
                self.owner, self.repository_name, base_commit.tree_sha, entries
            )
        except GhSweepError as e:
            error_msg = f"Error creating tree on {base_commit.tree_sha}: {e}"
            logger.error(error_msg)
            raise TreeBuildError(error_msg) from e

        logger.info(f"Created tree {tree.sha} with {len(entries)} entries")
        return tree

    async def push(self, branch: Reference, tree: Tree, message: Optional[str] = None) -> Commit:
        """Commit a tree on top of the branch tip and advance the branch to it.

        On success ``branch.sha`` is updated to the new commit.

        Raises:
            ParentLookupError: If the branch tip commit cannot be read
            CommitCreateError: If the author lookup or commit-create call fails
            RefUpdateError: If the branch cannot be fast-forwarded; the new
                commit is left unreferenced
        """
        parent = await self._get_commit(branch)
        author = await self._get_author()

        try:
            commit = await self.git_data.create_commit(
                self.owner,
                self.repository_name,
                message or self.message,
                tree.sha,
                [parent.sha],
                author,
            )
        except GhSweepError as e:
            error_msg = f"Error creating commit for tree {tree.sha}: {e}"
            logger.error(error_msg)
            raise CommitCreateError(error_msg) from e

        logger.info(f"Created commit {commit.sha} with parent {parent.sha}")

        try:
            await self.git_data.update_ref(
                self.owner,
                self.repository_name,
                Reference(name=branch.name, sha=commit.sha),
                force=False,
            )
        except GhSweepError as e:
            error_msg = (
                f"Error updating {branch.name} to {commit.sha}: {e}. "
                f"Commit {commit.sha} is left unreferenced"
            )
            logger.error(error_msg)
            raise RefUpdateError(error_msg, orphaned_commit_sha=commit.sha) from e

        branch.sha = commit.sha
        logger.info(f"Branch {branch.branch_name} now points to {commit.sha}")
        return commit

    async def _get_commit(self, branch: Reference) -> Commit:
        try:
            return await self.git_data.get_commit(self.owner, self.repository_name, branch.sha)
        except GhSweepError as e:
            error_msg = f"Error reading commit {branch.sha} at {branch.name}: {e}"
            logger.error(error_msg)
            raise ParentLookupError(error_msg) from e

    async def _get_author(self) -> CommitAuthor:
        try:
            user = await self.repositories.get_current_user()
        except GhSweepError as e:
            error_msg = f"Error reading the authenticated user: {e}"
            logger.error(error_msg)
            raise CommitCreateError(error_msg) from e

        return CommitAuthor(
            name=user.login,
            email=user.email or self.fallback_email,
            date=self.clock().strftime("%Y-%m-%dT%H:%M:%SZ"),
        )
