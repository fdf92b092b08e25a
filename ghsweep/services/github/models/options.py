"""Caller-supplied options for publishing changes."""

from typing import Optional

from pydantic import BaseModel, field_validator

from common.config.config import (
    GH_BASE_BRANCH,
    GH_COMMIT_MESSAGE,
    GH_FALLBACK_AUTHOR_EMAIL,
    GH_SEARCH_LANGUAGE,
)


class PublishOptions(BaseModel):
    """Options for one publish cycle."""

    message: str = GH_COMMIT_MESSAGE
    language_filter: Optional[str] = GH_SEARCH_LANGUAGE
    base_branch: Optional[str] = GH_BASE_BRANCH
    author_email_fallback: str = GH_FALLBACK_AUTHOR_EMAIL

    @field_validator("message")
    @classmethod
    def _message_not_blank(cls, value: str) -> str:
        if not value.strip():
            raise ValueError("commit message cannot be empty")
        return value

    @field_validator("language_filter", "base_branch")
    @classmethod
    def _blank_to_none(cls, value: Optional[str]) -> Optional[str]:
        if value is not None and not value.strip():
            return None
        return value
