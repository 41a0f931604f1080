"""
Data models for the profile visualizer.

This module contains the records parsed from GitHub REST API payloads and the
summaries derived from them. Every class is a frozen dataclass holding tuples,
so derived values cannot be mutated after construction and compare by value.
"""

import datetime
from dataclasses import dataclass, field
from enum import Enum
from typing import Any, Dict, Optional, Tuple


PUSH_EVENT = "PushEvent"


def parse_timestamp(value: str) -> datetime.datetime:
    """
    Parse an ISO-8601 timestamp as returned by the GitHub API.

    A trailing ``Z`` is read as UTC. A timestamp without an offset stays naive
    and is later interpreted as local time.
    """
    if value.endswith("Z"):
        value = value[:-1] + "+00:00"
    return datetime.datetime.fromisoformat(value)


class Persona(str, Enum):
    """When (time of day) a developer is most active."""
    NIGHT_OWL = "Night Owl"
    EARLY_BIRD = "Early Bird"
    AFTERNOON_ARCHITECT = "Afternoon Architect"
    EVENING_ENGINEER = "Evening Engineer"
    BALANCED_CODER = "Balanced Coder"

    def __str__(self) -> str:
        return self.value


class DeveloperClass(str, Enum):
    """Overall contribution profile, listed in rule precedence order."""
    OPEN_SOURCE_LEGEND = "Open Source Legend"
    VETERAN_ARCHITECT = "Veteran Architect"
    RISING_STAR = "Rising Star"
    PROLIFIC_CREATOR = "Prolific Creator"
    ACTIVE_CONTRIBUTOR = "Active Contributor"
    PROMISING_INITIATE = "Promising Initiate"
    DEDICATED_DEVELOPER = "Dedicated Developer"

    def __str__(self) -> str:
        return self.value


@dataclass(frozen=True)
class Profile:
    """Public profile of a GitHub user."""
    login: str
    created_at: datetime.datetime
    public_repos: int = 0
    name: Optional[str] = None
    bio: Optional[str] = None
    avatar_url: Optional[str] = None
    html_url: Optional[str] = None
    followers: int = 0
    following: int = 0
    location: Optional[str] = None
    company: Optional[str] = None
    blog: Optional[str] = None

    @property
    def display_name(self) -> str:
        return self.name or self.login

    @classmethod
    def from_dict(cls, raw: Dict[str, Any]) -> "Profile":
        """Build a profile from a ``/users/{login}`` JSON object."""
        return cls(
            login=raw["login"],
            created_at=parse_timestamp(raw["created_at"]),
            public_repos=raw.get("public_repos") or 0,
            name=raw.get("name"),
            bio=raw.get("bio"),
            avatar_url=raw.get("avatar_url"),
            html_url=raw.get("html_url"),
            followers=raw.get("followers") or 0,
            following=raw.get("following") or 0,
            location=raw.get("location"),
            company=raw.get("company"),
            blog=raw.get("blog") or None,
        )


@dataclass(frozen=True)
class RepositoryRecord:
    """A repository as listed by ``/users/{login}/repos``."""
    id: int
    name: str
    language: Optional[str] = None
    stargazers_count: Optional[int] = None
    forks_count: Optional[int] = None
    description: Optional[str] = None
    html_url: Optional[str] = None
    fork: bool = False
    archived: bool = False

    @property
    def stars(self) -> int:
        return self.stargazers_count or 0

    @property
    def forks(self) -> int:
        return self.forks_count or 0

    @classmethod
    def from_dict(cls, raw: Dict[str, Any]) -> "RepositoryRecord":
        return cls(
            id=raw["id"],
            name=raw["name"],
            language=raw.get("language"),
            stargazers_count=raw.get("stargazers_count"),
            forks_count=raw.get("forks_count"),
            description=raw.get("description"),
            html_url=raw.get("html_url"),
            fork=bool(raw.get("fork", False)),
            archived=bool(raw.get("archived", False)),
        )


@dataclass(frozen=True)
class EventRecord:
    """
    A public event from ``/users/{login}/events``.

    ``commits`` is None when the event payload carries no commit list.
    """
    type: str
    created_at: datetime.datetime
    commits: Optional[Tuple[Dict[str, Any], ...]] = None

    @property
    def is_push(self) -> bool:
        return self.type == PUSH_EVENT

    @classmethod
    def from_dict(cls, raw: Dict[str, Any]) -> "EventRecord":
        payload = raw.get("payload") or {}
        commits = payload.get("commits")
        return cls(
            type=raw["type"],
            created_at=parse_timestamp(raw["created_at"]),
            commits=tuple(commits) if commits is not None else None,
        )


@dataclass(frozen=True)
class LanguageSummary:
    """Repository count and cumulative stars for one language."""
    name: str
    count: int
    stars: int

    @property
    def weight(self) -> float:
        """Ranking score: one point per repository plus half a point per star."""
        return self.count + 0.5 * self.stars


@dataclass(frozen=True)
class HourlyBucket:
    """Commits pushed during one local hour of the day."""
    hour: int
    commits: int

    @property
    def label(self) -> str:
        return f"{self.hour}:00"


@dataclass(frozen=True)
class RhythmSummary:
    chart_data: Tuple[HourlyBucket, ...]
    persona: Persona
    total_commits: int


@dataclass(frozen=True)
class ImpactSummary:
    total_stars: int
    total_forks: int
    most_starred: Tuple[RepositoryRecord, ...] = field(default_factory=tuple)


@dataclass(frozen=True)
class ProfileData:
    """Raw material for one dashboard: the results of the three API calls."""
    profile: Profile
    repositories: Tuple[RepositoryRecord, ...]
    events: Tuple[EventRecord, ...]
