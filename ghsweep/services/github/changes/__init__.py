"""
Change definitions, replacement strategies and file resolution.
"""

from ghsweep.services.github.changes.change import Change
from ghsweep.services.github.changes.locator import FileLocator, split_file_target
from ghsweep.services.github.changes.replacement import LiteralReplace, Replacement, replace_all

__all__ = [
    "Change",
    "FileLocator",
    "LiteralReplace",
    "Replacement",
    "replace_all",
    "split_file_target",
]
