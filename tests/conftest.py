"""Shared fixtures."""

import datetime

import pytest

from profile_visualizer.dashboard import Dashboard, build_dashboard
from profile_visualizer.models import EventRecord, Profile, ProfileData, RepositoryRecord

UTC = datetime.timezone.utc


@pytest.fixture
def profile_data() -> ProfileData:
    profile = Profile(
        login="octocat",
        name="The Octocat",
        created_at=datetime.datetime(2011, 1, 25, 18, 44, 36, tzinfo=UTC),
        public_repos=8,
        followers=9000,
        bio="GitHub mascot",
        html_url="https://github.com/octocat",
        location="San Francisco",
        blog="github.blog",
    )
    repos = (
        RepositoryRecord(id=1, name="Hello-World", language="Python", stargazers_count=1500,
                         forks_count=300, html_url="https://github.com/octocat/Hello-World",
                         description="My first repository"),
        RepositoryRecord(id=2, name="Spoon-Knife", language="HTML", stargazers_count=120, forks_count=90),
        RepositoryRecord(id=3, name="linguist", language="Ruby", stargazers_count=None, forks_count=None),
        RepositoryRecord(id=4, name="dotfiles", language=None, stargazers_count=2, forks_count=0),
    )
    events = (
        EventRecord(type="PushEvent", created_at=datetime.datetime(2024, 5, 1, 22, 5, tzinfo=UTC),
                    commits=({"sha": "a"}, {"sha": "b"})),
        EventRecord(type="PushEvent", created_at=datetime.datetime(2024, 5, 2, 23, 45, tzinfo=UTC)),
        EventRecord(type="IssuesEvent", created_at=datetime.datetime(2024, 5, 2, 9, 0, tzinfo=UTC)),
    )
    return ProfileData(profile=profile, repositories=repos, events=events)


@pytest.fixture
def dashboard(profile_data: ProfileData) -> Dashboard:
    return build_dashboard(profile_data, tz=UTC, now=datetime.datetime(2025, 1, 1, tzinfo=UTC))


@pytest.fixture
def empty_dashboard() -> Dashboard:
    profile = Profile(login="ghost", created_at=datetime.datetime(2024, 12, 1, tzinfo=UTC))
    data = ProfileData(profile=profile, repositories=(), events=())
    return build_dashboard(data, tz=UTC, now=datetime.datetime(2025, 1, 1, tzinfo=UTC))
