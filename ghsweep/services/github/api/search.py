"""
GitHub code search operations.
"""

import logging
from typing import List, Optional

from common.config.config import GH_SEARCH_MAX_PAGES, GH_SEARCH_PER_PAGE
from ghsweep.services.github.api.client import GitHubAPIClient
from ghsweep.services.github.models.types import SearchResult

logger = logging.getLogger(__name__)


def build_code_query(
    text: str,
    owner: str,
    repository_name: str,
    language: Optional[str] = None,
) -> str:
    """Build a code search query scoped to file contents of one repository.

    Qualifiers are separated by spaces, which are sent as ``+`` once the query
    is URL-encoded: ``<text>+in:file+language:<lang>+repo:<owner>/<repo>``.

    Args:
        text: Text fragment to search for
        owner: Repository owner
        repository_name: Repository name
        language: Optional language qualifier

    Returns:
        Query string for the ``q`` parameter
    """
    parts = [text, "in:file"]
    if language:
        parts.append(f"language:{language}")
    parts.append(f"repo:{owner}/{repository_name}")
    return " ".join(parts)


class SearchOperations:
    """Handles GitHub code search."""

    def __init__(
        self,
        client: GitHubAPIClient,
        per_page: int = GH_SEARCH_PER_PAGE,
        max_pages: int = GH_SEARCH_MAX_PAGES,
    ):
        self.client = client
        self.per_page = per_page
        self.max_pages = max_pages

    async def search_code(
        self,
        owner: str,
        repository_name: str,
        text: str,
        language: Optional[str] = None,
    ) -> List[SearchResult]:
        """Search file contents of a repository.

        Pages are requested until a short page is returned or ``max_pages`` is
        reached.

        Returns:
            Raw search hits, not yet filtered by repository
        """
        query = build_code_query(text, owner, repository_name, language)
        logger.info(f"Searching code with query: {query}")

        results: List[SearchResult] = []
        for page in range(1, self.max_pages + 1):
            response = await self.client.get(
                "search/code",
                params={"q": query, "per_page": self.per_page, "page": page},
            )
            items = response.get("items", [])
            results.extend(SearchResult.from_api(item) for item in items)

            if len(items) < self.per_page:
                break
            if len(results) >= response.get("total_count", 0):
                break

        logger.info(f"Code search returned {len(results)} result(s)")
        return results
