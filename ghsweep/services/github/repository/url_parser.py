"""
Repository coordinate parsing.

Accepts the ``owner/repo`` pair as well as the GitHub URL forms people tend to
paste instead of it.
"""

import re
from dataclasses import dataclass
from typing import Tuple


@dataclass
class RepositoryCoordinates:
    """Owner and name of a GitHub repository."""

    owner: str
    repo_name: str
    original_url: str
    is_ssh: bool = False

    @property
    def full_name(self) -> str:
        return f"{self.owner}/{self.repo_name}"


_PATTERNS = (
    (re.compile(r"^https?://github\.com/([^/]+)/([^/]+)$"), False),
    (re.compile(r"^git@github\.com:([^/]+)/([^/]+)$"), True),
    (re.compile(r"^([^/:@\s]+)/([^/\s]+)$"), False),
)


def parse_repository_name(value: str) -> RepositoryCoordinates:
    """
    Parse repository coordinates.

    Supports multiple formats:
    - Short: owner/repo
    - HTTPS: https://github.com/owner/repo (optionally ending in .git)
    - SSH: git@github.com:owner/repo.git

    Args:
        value: Repository coordinates or URL

    Returns:
        RepositoryCoordinates with parsed information

    Raises:
        ValueError: If the format is invalid
    """
    if not value:
        raise ValueError("Repository name cannot be empty")

    cleaned = value.strip().rstrip("/")
    if cleaned.endswith(".git"):
        cleaned = cleaned[: -len(".git")]

    for pattern, is_ssh in _PATTERNS:
        match = pattern.match(cleaned)
        if match:
            owner, repo = match.groups()
            return RepositoryCoordinates(
                owner=owner, repo_name=repo, original_url=value, is_ssh=is_ssh
            )

    raise ValueError(
        f"Invalid repository format: {value}. "
        f"Supported formats: owner/repo, https://github.com/owner/repo, git@github.com:owner/repo"
    )


def extract_owner_and_repo(value: str) -> Tuple[str, str]:
    coordinates = parse_repository_name(value)
    return coordinates.owner, coordinates.repo_name
