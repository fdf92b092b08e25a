"""
Configuration module.

Values are read from the environment (and a local .env file) once at import time.
Credentials are only read here for the process entry point; library code receives
them explicitly.
"""

import os

from dotenv import load_dotenv

# Load environment variables from .env file
load_dotenv()


# GitHub API
GITHUB_API_URL = os.getenv("GITHUB_API_URL", "https://api.github.com")
GITHUB_API_VERSION = os.getenv("GITHUB_API_VERSION", "2022-11-28")
GITHUB_AUTH_TOKEN = os.getenv("GITHUB_AUTH_TOKEN")
GH_REQUEST_TIMEOUT = float(os.getenv("GH_REQUEST_TIMEOUT", "150"))

# Commit defaults
GH_COMMIT_MESSAGE = os.getenv("GH_COMMIT_MESSAGE", "Apply automated replacements")
GH_FALLBACK_AUTHOR_EMAIL = os.getenv("GH_FALLBACK_AUTHOR_EMAIL", "test@test.com")
# Empty means "use the repository's default branch"
GH_BASE_BRANCH = os.getenv("GH_BASE_BRANCH") or None

# Code search
GH_SEARCH_LANGUAGE = os.getenv("GH_SEARCH_LANGUAGE") or None
GH_SEARCH_PER_PAGE = int(os.getenv("GH_SEARCH_PER_PAGE", "100"))
GH_SEARCH_MAX_PAGES = int(os.getenv("GH_SEARCH_MAX_PAGES", "10"))

# Tree entries
BLOB_FILE_MODE = "100644"
BLOB_TYPE = "blob"
BRANCH_REF_PREFIX = "refs/heads/"
