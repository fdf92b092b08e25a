"""
Git Module

Branch resolution and commit publication through the GitHub git data API.
"""

from ghsweep.services.github.git.branch_resolver import BranchResolver
from ghsweep.services.github.git.commit_builder import CommitBuilder

__all__ = [
    "BranchResolver",
    "CommitBuilder",
]
