"""
Application services package.
"""

from ghsweep.services.github.github_service import GitHubService

__all__ = ["GitHubService"]
