"""
GitHub Service Package

Publishes literal replacements to a GitHub repository as a single commit
through the REST API, without a local clone.

Main Components:
- GitHubService: Main facade and publish pipeline
- API Client: GitHub REST API interactions
- Changes: Replacement strategies and file resolution
- Git: Branch resolution and commit construction
"""

from ghsweep.services.github.github_service import GitHubService

__all__ = ["GitHubService"]
