"""
Branch resolution against the GitHub git data API.
"""

import logging
from typing import Optional, Tuple

from common.config.config import BRANCH_REF_PREFIX
from common.exception.exceptions import (
    GhSweepError,
    NotFoundError,
    RefCreateError,
    RefLookupError,
)
from ghsweep.services.github.api.git_data import GitDataOperations
from ghsweep.services.github.api.repositories import RepositoryOperations
from ghsweep.services.github.models.types import Reference

logger = logging.getLogger(__name__)


class BranchResolver:
    """Returns the reference for a branch, creating it when absent."""

    def __init__(
        self,
        git_data: GitDataOperations,
        repositories: RepositoryOperations,
        owner: str,
        repository_name: str,
        base_branch: Optional[str] = None,
    ):
        """Initialize branch resolver.

        Args:
            git_data: Git data operations
            repositories: Repository operations, used to find the default branch
            owner: Repository owner
            repository_name: Repository name
            base_branch: Branch new branches start from (defaults to the
                repository's default branch)
        """
        self.git_data = git_data
        self.repositories = repositories
        self.owner = owner
        self.repository_name = repository_name
        self.base_branch = base_branch

    async def get_or_create_branch(self, name: str) -> Tuple[Reference, bool]:
        """Get a branch reference, creating it from the base branch tip if absent.

        Args:
            name: Branch name, without the ``refs/heads/`` prefix

        Returns:
            Tuple of (reference, created)

        Raises:
            RefLookupError: If the branch or the base branch cannot be read
            RefCreateError: If the new reference cannot be created
        """
        ref_name = f"{BRANCH_REF_PREFIX}{name}"

        try:
            ref = await self.git_data.get_ref(self.owner, self.repository_name, ref_name)
            logger.info(f"Branch {name} exists at {ref.sha}")
            return ref, False
        except NotFoundError:
            logger.info(f"Branch {name} not found, creating it")
        except GhSweepError as e:
            error_msg = f"Error reading branch {name}: {e}"
            logger.error(error_msg)
            raise RefLookupError(error_msg) from e

        base_ref = await self._get_base_ref()

        try:
            ref = await self.git_data.create_ref(
                self.owner, self.repository_name, ref_name, base_ref.sha
            )
        except GhSweepError as e:
            error_msg = f"Error creating branch {name} at {base_ref.sha}: {e}"
            logger.error(error_msg)
            raise RefCreateError(error_msg) from e

        logger.info(f"Branch {name} created from {base_ref.branch_name} at {ref.sha}")
        return ref, True

    async def _get_base_ref(self) -> Reference:
        try:
            base_branch = self.base_branch
            if not base_branch:
                repository = await self.repositories.get_repository(
                    self.owner, self.repository_name
                )
                base_branch = repository.default_branch
            return await self.git_data.get_ref(
                self.owner, self.repository_name, f"{BRANCH_REF_PREFIX}{base_branch}"
            )
        except GhSweepError as e:
            error_msg = f"Error reading base branch of {self.owner}/{self.repository_name}: {e}"
            logger.error(error_msg)
            raise RefLookupError(error_msg) from e
