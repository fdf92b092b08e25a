"""
Main GitHub Service - facade for publishing changes to a repository.

This service provides a single entry point for:
- Branch resolution (get or create)
- Locating files by path or code search and applying replacements
- Building a tree and commit and advancing the branch to it
"""

import asyncio
import logging
from typing import Optional, Sequence, Tuple

from ghsweep.services.github.api.client import GitHubAPIClient
from ghsweep.services.github.api.git_data import GitDataOperations
from ghsweep.services.github.api.repositories import RepositoryOperations
from ghsweep.services.github.api.search import SearchOperations
from ghsweep.services.github.changes.change import Change
from ghsweep.services.github.changes.locator import FileLocator
from ghsweep.services.github.git.branch_resolver import BranchResolver
from ghsweep.services.github.git.commit_builder import CommitBuilder
from ghsweep.services.github.models.options import PublishOptions
from ghsweep.services.github.models.types import (
    Commit,
    PublishResult,
    Reference,
    Tree,
)
from ghsweep.services.github.repository.url_parser import parse_repository_name

logger = logging.getLogger(__name__)


class GitHubService:
    """
    Unified service for publishing replacement commits to one repository.

    A publish is not resumable: if any step fails, run it again from
    get_or_create_branch onward.
    """

    def __init__(
        self,
        token: Optional[str],
        repository: str,
        options: Optional[PublishOptions] = None,
        api_client: Optional[GitHubAPIClient] = None,
    ):
        """Initialize GitHub service.

        Args:
            token: GitHub access token
            repository: Target repository as ``owner/repo``
            options: Publish options (defaults to config)
            api_client: Pre-built API client; ``token`` is ignored when given

        Raises:
            AuthError: If no token is given and no client is supplied
            ValueError: If the repository coordinates are invalid
        """
        coordinates = parse_repository_name(repository)
        self.owner = coordinates.owner
        self.repository_name = coordinates.repo_name
        self.options = options or PublishOptions()

        self.api_client = api_client or GitHubAPIClient(token=token)

        self.git_data = GitDataOperations(client=self.api_client)
        self.repositories = RepositoryOperations(client=self.api_client)
        self.search = SearchOperations(client=self.api_client)

        self.locator = FileLocator(
            self.git_data,
            self.search,
            self.owner,
            self.repository_name,
            language=self.options.language_filter,
        )
        self.branches = BranchResolver(
            self.git_data,
            self.repositories,
            self.owner,
            self.repository_name,
            base_branch=self.options.base_branch,
        )
        self.commits = CommitBuilder(
            self.git_data,
            self.repositories,
            self.locator,
            self.owner,
            self.repository_name,
            message=self.options.message,
            fallback_email=self.options.author_email_fallback,
        )

        logger.info(f"GitHub service initialized for {coordinates.full_name}")

    async def get_or_create_branch(self, name: str) -> Tuple[Reference, bool]:
        return await self.branches.get_or_create_branch(name)

    async def make_changes(self, branch: Reference, changes: Sequence[Change]) -> Tree:
        return await self.commits.make_changes(branch, changes)

    async def push(self, branch: Reference, tree: Tree) -> Commit:
        return await self.commits.push(branch, tree)

    async def publish(
        self,
        branch_name: str,
        changes: Sequence[Change],
        timeout: Optional[float] = None,
    ) -> PublishResult:
        """Publish changes as one new commit on a branch.

        Args:
            branch_name: Branch to commit to, created from the base branch if absent
            changes: Changes to apply
            timeout: Optional deadline in seconds for the whole pipeline. Objects
                created before the deadline are not rolled back.

        Returns:
            PublishResult describing the new commit

        Raises:
            GhSweepError: On the first failing step
            asyncio.TimeoutError: If the deadline passes
        """
        if timeout is None:
            return await self._publish(branch_name, changes)
        return await asyncio.wait_for(self._publish(branch_name, changes), timeout=timeout)

    async def _publish(self, branch_name: str, changes: Sequence[Change]) -> PublishResult:
        branch, created = await self.branches.get_or_create_branch(branch_name)
        entries, applied = await self.commits.resolve_entries(changes)
        tree = await self.commits.create_tree(branch, entries)
        commit = await self.commits.push(branch, tree)

        logger.info(
            f"Published {len(applied)} file(s) to {self.owner}/{self.repository_name}"
            f"@{branch_name} as {commit.sha}"
        )
        return PublishResult(
            reference=branch,
            created=created,
            commit=commit,
            tree=tree,
            changes=applied,
        )
