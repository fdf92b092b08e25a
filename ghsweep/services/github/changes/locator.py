"""
Resolves change targets into concrete files.

Direct-path changes read one local file. Search-driven changes run a code search
scoped to the target repository and fetch every matching blob.
"""

import logging
from pathlib import Path
from typing import List, Optional, Tuple

from common.exception.exceptions import (
    FetchError,
    GhSweepError,
    LocalFileError,
    NotFoundError,
    SearchError,
)
from ghsweep.services.github.api.git_data import GitDataOperations
from ghsweep.services.github.api.search import SearchOperations
from ghsweep.services.github.changes.change import Change
from ghsweep.services.github.models.types import FileMatch, SearchResult

logger = logging.getLogger(__name__)


def split_file_target(target: str) -> Tuple[str, str]:
    """Split a ``local[:remote]`` target into (local path, path in the repository).

    Raises:
        ValueError: If the target is empty
    """
    if not target:
        raise ValueError("empty file target")
    local_path, sep, remote_path = target.partition(":")
    if not local_path:
        raise ValueError(f"file target {target!r} has no local path")
    return local_path, (remote_path if sep and remote_path else local_path)


class FileLocator:
    """Finds the files a change applies to."""

    def __init__(
        self,
        git_data: GitDataOperations,
        search: SearchOperations,
        owner: str,
        repository_name: str,
        language: Optional[str] = None,
    ):
        self.git_data = git_data
        self.search = search
        self.owner = owner
        self.repository_name = repository_name
        self.language = language

    @property
    def full_name(self) -> str:
        return f"{self.owner}/{self.repository_name}"

    async def resolve(self, change: Change) -> List[FileMatch]:
        """Resolve a change into zero or more files.

        Raises:
            NotFoundError: If a direct-path local file does not exist
            LocalFileError: If a local file cannot be read
            SearchError: If the code search fails
            FetchError: If any matching blob cannot be fetched
        """
        if change.is_search_driven:
            return await self.resolve_search(change.target)
        return [self.read_local(change.target)]

    def read_local(self, target: str) -> FileMatch:
        local_path, remote_path = split_file_target(target)
        try:
            content = Path(local_path).read_bytes()
        except FileNotFoundError as e:
            error_msg = f"Local file not found: {local_path}"
            logger.error(error_msg)
            raise NotFoundError(error_msg) from e
        except OSError as e:
            error_msg = f"Failed to read local file {local_path}: {e}"
            logger.error(error_msg)
            raise LocalFileError(error_msg) from e

        logger.debug(f"Read {len(content)} bytes from {local_path} for {remote_path}")
        return FileMatch(path=remote_path, content=content)

    async def resolve_search(self, text: str) -> List[FileMatch]:
        try:
            results = await self.search.search_code(
                self.owner, self.repository_name, text, self.language
            )
        except GhSweepError as e:
            error_msg = f"Code search for {text!r} in {self.full_name} failed: {e}"
            logger.error(error_msg)
            raise SearchError(error_msg) from e

        matches: List[FileMatch] = []
        for result in self._filter_results(results):
            matches.append(await self._fetch(result))

        logger.info(f"Resolved {len(matches)} file(s) for {text!r} in {self.full_name}")
        return matches

    def _filter_results(self, results: List[SearchResult]) -> List[SearchResult]:
        """Keep hits from the target repository only, one per path."""
        seen = set()
        kept = []
        for result in results:
            if result.repository != self.full_name:
                logger.debug(
                    f"Ignoring search hit {result.path} from {result.repository or 'unknown repository'}"
                )
                continue
            if result.path in seen:
                continue
            seen.add(result.path)
            kept.append(result)
        return kept

    async def _fetch(self, result: SearchResult) -> FileMatch:
        try:
            content = await self.git_data.get_blob_raw(
                self.owner, self.repository_name, result.blob_sha
            )
        except GhSweepError as e:
            error_msg = f"Failed to fetch blob {result.blob_sha} for {result.path}: {e}"
            logger.error(error_msg)
            raise FetchError(error_msg) from e
        return FileMatch(path=result.path, content=content, blob_sha=result.blob_sha)
