"""
GitHub git data operations: references, trees, commits and blobs.
"""

import logging
from typing import List

from ghsweep.services.github.api.client import GitHubAPIClient
from ghsweep.services.github.models.types import (
    Commit,
    CommitAuthor,
    Reference,
    Tree,
    TreeEntry,
)

logger = logging.getLogger(__name__)


def _strip_refs_prefix(ref_name: str) -> str:
    # The single-ref endpoints take "heads/<branch>", not "refs/heads/<branch>"
    return ref_name[len("refs/"):] if ref_name.startswith("refs/") else ref_name


class GitDataOperations:
    """Handles the low-level git database endpoints of the GitHub API."""

    def __init__(self, client: GitHubAPIClient):
        self.client = client

    async def get_ref(self, owner: str, repository_name: str, ref_name: str) -> Reference:
        """Get a reference.

        Args:
            owner: Repository owner
            repository_name: Repository name
            ref_name: Full reference name, e.g. ``refs/heads/main``

        Returns:
            Reference

        Raises:
            NotFoundError: If the reference does not exist
        """
        response = await self.client.get(
            f"repos/{owner}/{repository_name}/git/ref/{_strip_refs_prefix(ref_name)}"
        )
        return Reference.from_api(response)

    async def create_ref(self, owner: str, repository_name: str, ref_name: str, sha: str) -> Reference:
        response = await self.client.post(
            f"repos/{owner}/{repository_name}/git/refs",
            data={"ref": ref_name, "sha": sha},
        )
        logger.info(f"Created reference {ref_name} at {sha} in {owner}/{repository_name}")
        return Reference.from_api(response)

    async def update_ref(
        self,
        owner: str,
        repository_name: str,
        ref: Reference,
        force: bool = False,
    ) -> Reference:
        """Point an existing reference at ``ref.sha``.

        With ``force=False`` GitHub rejects updates that are not fast-forwards.
        """
        response = await self.client.patch(
            f"repos/{owner}/{repository_name}/git/refs/{_strip_refs_prefix(ref.name)}",
            data={"sha": ref.sha, "force": force},
        )
        return Reference.from_api(response)

    async def create_tree(
        self,
        owner: str,
        repository_name: str,
        base_tree_sha: str,
        entries: List[TreeEntry],
    ) -> Tree:
        """Create a tree inheriting every path not in ``entries`` from the base tree."""
        response = await self.client.post(
            f"repos/{owner}/{repository_name}/git/trees",
            data={
                "base_tree": base_tree_sha,
                "tree": [entry.to_payload() for entry in entries],
            },
        )
        return Tree(sha=response["sha"], entries=list(entries))

    async def get_commit(self, owner: str, repository_name: str, sha: str) -> Commit:
        response = await self.client.get(f"repos/{owner}/{repository_name}/git/commits/{sha}")
        return Commit.from_api(response)

    async def create_commit(
        self,
        owner: str,
        repository_name: str,
        message: str,
        tree_sha: str,
        parent_shas: List[str],
        author: CommitAuthor,
    ) -> Commit:
        response = await self.client.post(
            f"repos/{owner}/{repository_name}/git/commits",
            data={
                "message": message,
                "tree": tree_sha,
                "parents": parent_shas,
                "author": author.to_payload(),
            },
        )
        return Commit.from_api(response)

    async def get_blob_raw(self, owner: str, repository_name: str, sha: str) -> bytes:
        """Get the raw bytes of a blob by its object id."""
        return await self.client.get_raw(f"repos/{owner}/{repository_name}/git/blobs/{sha}")
