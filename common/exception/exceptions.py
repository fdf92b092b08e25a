"""
Exception hierarchy for ghsweep.

Every error raised by the publish pipeline derives from GhSweepError so callers
can halt on the first failure with a single except clause.
"""

from typing import Optional


class GhSweepError(Exception):
    """Base class for all ghsweep errors."""

    pass


class NotFoundError(GhSweepError):
    """Raised when a remote object or a local file does not exist."""

    pass


class AuthError(GhSweepError):
    """Raised when the credential is missing or rejected."""

    pass


class RemoteCallError(GhSweepError):
    """Raised when a GitHub API call fails at the transport or HTTP level."""

    def __init__(self, message: str, status_code: Optional[int] = None):
        super().__init__(message)
        self.status_code = status_code


class ResolutionError(GhSweepError):
    """Raised when a change target cannot be resolved into files."""

    pass


class SearchError(ResolutionError):
    """Raised when the code search call fails."""

    pass


class FetchError(ResolutionError):
    """Raised when a blob referenced by a search result cannot be fetched."""

    pass


class LocalFileError(ResolutionError):
    """Raised when a local file exists but cannot be read."""

    pass


class ContentDecodeError(ResolutionError):
    """Raised when a resolved file is not valid UTF-8 text."""

    pass


class RefError(GhSweepError):
    """Base class for branch reference failures."""

    pass


class RefLookupError(RefError):
    """Raised when the base branch (or an existing branch) cannot be read."""

    pass


class RefCreateError(RefError):
    """Raised when a new branch reference cannot be created."""

    pass


class RefUpdateError(RefError):
    """Raised when the branch could not be advanced to a new commit.

    The commit was already created, so it is left unreferenced on the server.
    """

    def __init__(self, message: str, orphaned_commit_sha: Optional[str] = None):
        super().__init__(message)
        self.orphaned_commit_sha = orphaned_commit_sha


class BuildError(GhSweepError):
    """Base class for tree and commit construction failures."""

    pass


class TreeBuildError(BuildError):
    """Raised when the tree-create call fails."""

    pass


class ParentLookupError(BuildError):
    """Raised when the commit at the branch tip cannot be read."""

    pass


class CommitCreateError(BuildError):
    """Raised when the commit-create call fails."""

    pass


class NoChangesError(BuildError):
    """Raised when no change in a batch resolved to any file."""

    pass
