"""
GitHub API Module

Handles all GitHub REST API interactions including:
- Git data (references, trees, commits, blobs)
- Code search
- Repository and user lookups
"""

from ghsweep.services.github.api.client import GitHubAPIClient
from ghsweep.services.github.api.git_data import GitDataOperations
from ghsweep.services.github.api.repositories import RepositoryOperations
from ghsweep.services.github.api.search import SearchOperations, build_code_query

__all__ = [
    "GitHubAPIClient",
    "GitDataOperations",
    "RepositoryOperations",
    "SearchOperations",
    "build_code_query",
]
