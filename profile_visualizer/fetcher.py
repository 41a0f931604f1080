"""
GitHub data fetching module.

This module handles all GitHub API interactions for fetching a user's profile,
repositories and recent public events using PyGithub. Requests are
unauthenticated and limited to a single page of results.
"""

import logging
from concurrent.futures import ThreadPoolExecutor
from typing import Any, Dict, List
from urllib.parse import quote

from .config import DEFAULT_API_URL, DEFAULT_TIMEOUT
from .errors import FetchError, RateLimitError, UserNotFoundError
from .models import EventRecord, Profile, ProfileData, RepositoryRecord

# External libs
try:
    from github import Github, GithubException, RateLimitExceededException, UnknownObjectException
except Exception as e:
    raise RuntimeError("PyGithub is required. Install with: pip install PyGithub") from e

# Set up logging
logger = logging.getLogger("profile-visualizer.fetcher")

PER_PAGE = 100


class GitHubFetcher:
    """
    Fetch a user's profile, repositories and events from GitHub using PyGithub.

    Failures are translated into the typed errors of ``errors``. No request is
    retried.

    Args:
        base_url: REST API base URL.
        timeout: Per-request timeout in seconds.
        per_page: Page size for the repository and event listings.
    """

    def __init__(self, base_url: str = DEFAULT_API_URL, timeout: int = DEFAULT_TIMEOUT, per_page: int = PER_PAGE) -> None:
        self.per_page = per_page
        try:
            self._g = Github(base_url=base_url, timeout=timeout, per_page=per_page, retry=None)
            logger.debug("GitHub client initialized (base_url=%s, timeout=%s)", base_url, timeout)
        except Exception as e:
            logger.error("Failed to initialize GitHub client: %s", e)
            raise RuntimeError(f"GitHub client initialization failed: {e}") from e

    def fetch_profile(self, username: str) -> Profile:
        """
        Fetch the public profile of ``username``.

        Raises:
            UserNotFoundError, RateLimitError, FetchError
        """
        try:
            user = self._g.get_user(username)
            profile = Profile.from_dict(user.raw_data)
        except Exception as e:
            raise self._translate(username, "profile", e) from e

        logger.info("Fetched profile for %s", profile.login)
        return profile

    def fetch_repositories(self, username: str) -> List[RepositoryRecord]:
        """Fetch one page of the user's repositories, most recently pushed first."""
        try:
            data = self._get_page(f"/users/{quote(username)}/repos", {"per_page": self.per_page, "sort": "pushed"})
            repos = [RepositoryRecord.from_dict(raw) for raw in data]
        except Exception as e:
            raise self._translate(username, "repositories", e) from e

        logger.info("Fetched %d repositories for %s", len(repos), username)
        return repos

    def fetch_events(self, username: str) -> List[EventRecord]:
        """Fetch one page of the user's recent public events."""
        try:
            data = self._get_page(f"/users/{quote(username)}/events", {"per_page": self.per_page})
            events = [EventRecord.from_dict(raw) for raw in data]
        except Exception as e:
            raise self._translate(username, "events", e) from e

        logger.info("Fetched %d events for %s", len(events), username)
        return events

    def fetch_all(self, username: str) -> ProfileData:
        """
        Fetch profile, repositories and events concurrently.

        The three requests run in parallel and the result is assembled only
        once all of them have completed. If any one fails, its error is raised
        and nothing is returned.
        """
        logger.info("Fetching profile, repositories and events for %s", username)
        with ThreadPoolExecutor(max_workers=3) as pool:
            profile_future = pool.submit(self.fetch_profile, username)
            repos_future = pool.submit(self.fetch_repositories, username)
            events_future = pool.submit(self.fetch_events, username)

            profile = profile_future.result()
            repos = repos_future.result()
            events = events_future.result()

        return ProfileData(profile=profile, repositories=tuple(repos), events=tuple(events))

    def _get_page(self, path: str, parameters: Dict[str, Any]) -> List[Dict[str, Any]]:
        headers, data = self._g.requester.requestJsonAndCheck("GET", path, parameters=parameters)
        if not isinstance(data, list):
            raise ValueError(f"Expected a JSON list from {path}, got {type(data).__name__}")
        return data

    @staticmethod
    def _translate(username: str, what: str, error: Exception) -> FetchError:
        """Map a PyGithub (or transport) exception to a typed fetch error."""
        status = error.status if isinstance(error, GithubException) else None
        if isinstance(error, UnknownObjectException) or status == 404:
            result: FetchError = UserNotFoundError(username, status=404)
        elif isinstance(error, RateLimitExceededException) or status == 403:
            result = RateLimitError(username, status=403)
        else:
            result = FetchError(username, status=status)

        logger.error("Failed to fetch %s for %s: %s (%s)", what, username, result, error)
        return result
