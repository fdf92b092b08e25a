"""
GitHub repository and user operations.
"""

import logging

from ghsweep.services.github.api.client import GitHubAPIClient
from ghsweep.services.github.models.types import GitHubUser, RepositoryInfo

logger = logging.getLogger(__name__)


class RepositoryOperations:
    """Handles GitHub repository and account lookups."""

    def __init__(self, client: GitHubAPIClient):
        """Initialize repository operations.

        Args:
            client: GitHub API client
        """
        self.client = client

    async def get_repository(self, owner: str, repository_name: str) -> RepositoryInfo:
        """Get repository information.

        Args:
            owner: Repository owner
            repository_name: Repository name

        Returns:
            RepositoryInfo with repository details
        """
        response = await self.client.get(f"repos/{owner}/{repository_name}")

        return RepositoryInfo(
            name=response["name"],
            owner=response["owner"]["login"],
            full_name=response["full_name"],
            url=response["html_url"],
            default_branch=response["default_branch"],
            private=response["private"],
            description=response.get("description"),
        )

    async def get_current_user(self) -> GitHubUser:
        """Get the account the token authenticates as."""
        response = await self.client.get("user")
        return GitHubUser(
            login=response["login"],
            email=response.get("email"),
            name=response.get("name"),
        )
