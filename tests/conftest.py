"""Pytest configuration for tests.

Sets up Python path and fixtures for all tests.
"""

import sys
from pathlib import Path

import pytest

# Add project root to Python path so imports work correctly
project_root = Path(__file__).parent.parent
if str(project_root) not in sys.path:
    sys.path.insert(0, str(project_root))

from tests.fixtures.fake_github import FakeGitHubAPIClient  # noqa: E402


@pytest.fixture
def fake_github():
    """In-memory GitHub with a ``main`` branch holding two files."""
    return FakeGitHubAPIClient(
        owner="acme",
        repository_name="widgets",
        files={
            "README.md": "foo foo baz\n",
            "src/app.py": "print('hello')\n",
        },
    )
