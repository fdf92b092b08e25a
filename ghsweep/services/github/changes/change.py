"""
A change binds a target to the replacement applied to it.
"""

from dataclasses import dataclass
from typing import Optional, Tuple

from ghsweep.services.github.changes.replacement import Replacement


@dataclass(frozen=True)
class Change:
    """A content transformation bound to a target.

    ``target`` is a local file path, a ``local:remote`` pair when the file is
    published under another name, or a text fragment when ``search`` is set and
    the files are located by code search.
    """

    target: str
    replacement: Replacement
    search: bool = False

    @classmethod
    def from_file(
        cls,
        local_path: str,
        replacement: Replacement,
        remote_path: Optional[str] = None,
    ) -> "Change":
        target = f"{local_path}:{remote_path}" if remote_path else local_path
        return cls(target=target, replacement=replacement)

    @classmethod
    def from_search(cls, replacement: Replacement, text: Optional[str] = None) -> "Change":
        """Create a change applied to every file containing ``text``.

        ``text`` defaults to the replacement's own search text.
        """
        return cls(
            target=text or replacement.get_search_text(),
            replacement=replacement,
            search=True,
        )

    @property
    def is_search_driven(self) -> bool:
        return self.search

    def apply(self, raw: bytes) -> str:
        """Decode ``raw`` as UTF-8 and return the transformed text.

        Raises:
            UnicodeDecodeError: If ``raw`` is not valid UTF-8
        """
        content, _ = self.apply_with_count(raw)
        return content

    def apply_with_count(self, raw: bytes) -> Tuple[str, int]:
        return self.replacement.replace(raw.decode("utf-8"))
