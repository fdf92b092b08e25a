"""
Replacement strategies for transforming file content.

A replacement is pure: the same input always yields the same output, and an
input with no matches comes back unchanged with a count of zero.
"""

from abc import ABC, abstractmethod
from typing import Tuple


class Replacement(ABC):
    """Abstract base class for content transformation strategies."""

    @abstractmethod
    def get_search_text(self) -> str:
        """
        Text that identifies files this replacement applies to.

        Used for display and as the query when files are located by code search.
        """
        pass

    @abstractmethod
    def replace(self, text: str) -> Tuple[str, int]:
        """
        Transform text.

        Args:
            text: Full file content

        Returns:
            Tuple of (transformed text, number of matches)
        """
        pass


class LiteralReplace(Replacement):
    """Replaces every literal occurrence of ``find`` with ``replace``."""

    def __init__(self, find: str, replace: str):
        if not find:
            raise ValueError("find text cannot be empty")
        self.find = find
        self.replace_with = replace

    def get_search_text(self) -> str:
        return self.find

    def replace(self, text: str) -> Tuple[str, int]:
        count = text.count(self.find)
        if count == 0:
            return text, 0
        return text.replace(self.find, self.replace_with), count

    def __repr__(self) -> str:
        return f"LiteralReplace(find={self.find!r}, replace={self.replace_with!r})"


def replace_all(find: str, replace: str) -> Replacement:
    return LiteralReplace(find, replace)
