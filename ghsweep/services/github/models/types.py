"""
Shared types and models for GitHub operations.
"""

from dataclasses import dataclass, field
from typing import Any, Dict, List, Optional

from common.config.config import BLOB_FILE_MODE, BLOB_TYPE, BRANCH_REF_PREFIX


@dataclass
class Reference:
    """A named pointer into the commit graph, e.g. ``refs/heads/main``."""

    name: str
    sha: str

    @property
    def branch_name(self) -> str:
        if self.name.startswith(BRANCH_REF_PREFIX):
            return self.name[len(BRANCH_REF_PREFIX):]
        return self.name

    @classmethod
    def from_api(cls, data: Dict[str, Any]) -> "Reference":
        return cls(name=data["ref"], sha=data["object"]["sha"])


@dataclass
class RepositoryInfo:
    name: str
    owner: str
    full_name: str
    url: str
    default_branch: str
    private: bool
    description: Optional[str] = None


@dataclass
class SearchResult:
    """A located but not yet fetched code search hit."""

    path: str
    blob_sha: str
    repository: str

    @classmethod
    def from_api(cls, item: Dict[str, Any]) -> "SearchResult":
        return cls(
            path=item["path"],
            blob_sha=item["sha"],
            repository=(item.get("repository") or {}).get("full_name", ""),
        )


@dataclass
class FileMatch:
    """A resolved file ready for transformation."""

    path: str
    content: bytes
    blob_sha: Optional[str] = None


@dataclass
class TreeEntry:
    path: str
    content: str
    mode: str = BLOB_FILE_MODE
    type: str = BLOB_TYPE

    def to_payload(self) -> Dict[str, str]:
        return {
            "path": self.path,
            "mode": self.mode,
            "type": self.type,
            "content": self.content,
        }


@dataclass
class Tree:
    sha: str
    entries: List[TreeEntry] = field(default_factory=list)


@dataclass
class CommitAuthor:
    name: str
    email: str
    date: str  # ISO 8601 format

    def to_payload(self) -> Dict[str, str]:
        return {"name": self.name, "email": self.email, "date": self.date}


@dataclass
class Commit:
    sha: str
    message: str
    tree_sha: str
    parent_shas: List[str] = field(default_factory=list)
    author: Optional[CommitAuthor] = None

    @classmethod
    def from_api(cls, data: Dict[str, Any]) -> "Commit":
        author_data = data.get("author")
        author = None
        if author_data:
            author = CommitAuthor(
                name=author_data.get("name", ""),
                email=author_data.get("email", ""),
                date=author_data.get("date", ""),
            )
        return cls(
            sha=data["sha"],
            message=data.get("message", ""),
            tree_sha=data["tree"]["sha"],
            parent_shas=[parent["sha"] for parent in data.get("parents", [])],
            author=author,
        )


@dataclass
class GitHubUser:
    login: str
    email: Optional[str] = None
    name: Optional[str] = None


@dataclass
class AppliedChange:
    """How many replacements were made in one published file."""

    path: str
    match_count: int


@dataclass
class PublishResult:
    reference: Reference
    created: bool
    commit: Commit
    tree: Tree
    changes: List[AppliedChange] = field(default_factory=list)
