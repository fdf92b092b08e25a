"""
GitHub Models Module

Shared dataclasses for GitHub git-data and search operations.
"""

from ghsweep.services.github.models.options import PublishOptions
from ghsweep.services.github.models.types import (
    AppliedChange,
    Commit,
    CommitAuthor,
    FileMatch,
    GitHubUser,
    PublishResult,
    Reference,
    RepositoryInfo,
    SearchResult,
    Tree,
    TreeEntry,
)

__all__ = [
    "AppliedChange",
    "Commit",
    "CommitAuthor",
    "FileMatch",
    "GitHubUser",
    "PublishOptions",
    "PublishResult",
    "Reference",
    "RepositoryInfo",
    "SearchResult",
    "Tree",
    "TreeEntry",
]
