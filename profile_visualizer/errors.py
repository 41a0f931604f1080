"""
Errors raised while fetching data from GitHub.

Messages are meant to be shown to the user as-is.
"""

from typing import Optional


class FetchError(RuntimeError):
    """Any failure while fetching a user's data."""

    default_message = "An error occurred while fetching data from GitHub"

    def __init__(self, username: str, status: Optional[int] = None, message: Optional[str] = None) -> None:
        super().__init__(message or self.default_message)
        self.username = username
        self.status = status

    @property
    def message(self) -> str:
        return str(self)


class UserNotFoundError(FetchError):
    default_message = "User not found"


class RateLimitError(FetchError):
    default_message = "API rate limit exceeded, try again later"
