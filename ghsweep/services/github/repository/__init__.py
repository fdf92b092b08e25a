"""
Repository coordinate handling.
"""

from ghsweep.services.github.repository.url_parser import (
    RepositoryCoordinates,
    extract_owner_and_repo,
    parse_repository_name,
)

__all__ = [
    "RepositoryCoordinates",
    "extract_owner_and_repo",
    "parse_repository_name",
]
