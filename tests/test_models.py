"""Tests for the data models."""

import dataclasses
import datetime

import pytest

from profile_visualizer.models import (
    EventRecord,
    HourlyBucket,
    LanguageSummary,
    Profile,
    RepositoryRecord,
    parse_timestamp,
)


class TestParseTimestamp:
    """Tests for parse_timestamp."""

    def test_zulu_suffix_is_utc(self) -> None:
        """Test that a trailing Z is read as UTC."""
        ts = parse_timestamp("2015-01-01T12:30:00Z")

        assert ts == datetime.datetime(2015, 1, 1, 12, 30, tzinfo=datetime.timezone.utc)

    def test_explicit_offset(self) -> None:
        """Test a timestamp with a numeric offset."""
        ts = parse_timestamp("2015-01-01T12:30:00+02:00")

        assert ts.utcoffset() == datetime.timedelta(hours=2)

    def test_naive(self) -> None:
        """Test that a timestamp without offset stays naive."""
        assert parse_timestamp("2015-01-01T12:30:00").tzinfo is None


class TestProfile:
    """Tests for Profile."""

    def test_from_dict(self) -> None:
        """Test parsing a users API payload."""
        raw = {
            "login": "octocat",
            "name": "The Octocat",
            "created_at": "2011-01-25T18:44:36Z",
            "public_repos": 8,
            "followers": 9000,
            "blog": "",
            "bio": None,
        }

        p = Profile.from_dict(raw)

        assert p.login == "octocat"
        assert p.public_repos == 8
        assert p.followers == 9000
        assert p.created_at.year == 2011
        assert p.blog is None
        assert p.display_name == "The Octocat"

    def test_display_name_falls_back_to_login(self) -> None:
        """Test the display name of a user without a name."""
        p = Profile.from_dict({"login": "ghost", "created_at": "2020-01-01T00:00:00Z"})

        assert p.display_name == "ghost"
        assert p.public_repos == 0


class TestRepositoryRecord:
    """Tests for RepositoryRecord."""

    def test_from_dict(self) -> None:
        """Test parsing a repos API payload."""
        raw = {
            "id": 1296269,
            "name": "Hello-World",
            "language": "Python",
            "stargazers_count": 80,
            "forks_count": 9,
            "description": "This your first repo!",
            "html_url": "https://github.com/octocat/Hello-World",
            "fork": False,
        }

        repo = RepositoryRecord.from_dict(raw)

        assert repo.id == 1296269
        assert repo.stars == 80
        assert repo.forks == 9
        assert repo.archived is False

    def test_missing_counts(self) -> None:
        """Test that absent counts read as zero."""
        repo = RepositoryRecord.from_dict({"id": 1, "name": "empty"})

        assert repo.stargazers_count is None
        assert repo.stars == 0
        assert repo.forks == 0
        assert repo.language is None

    def test_frozen(self) -> None:
        """Test that records cannot be modified."""
        repo = RepositoryRecord(id=1, name="x")

        with pytest.raises(dataclasses.FrozenInstanceError):
            repo.name = "y"  # type: ignore[misc]


class TestEventRecord:
    """Tests for EventRecord."""

    def test_push_event(self) -> None:
        """Test parsing a push event with commits."""
        raw = {
            "type": "PushEvent",
            "created_at": "2024-03-01T10:00:00Z",
            "repo": {"name": "octocat/Hello-World"},
            "payload": {"commits": [{"sha": "a"}, {"sha": "b"}]},
        }

        event = EventRecord.from_dict(raw)

        assert event.is_push
        assert len(event.commits) == 2
        assert [f.name for f in dataclasses.fields(event)] == ["type", "created_at", "commits"]

    def test_missing_payload(self) -> None:
        """Test that an event without payload has no commit list."""
        event = EventRecord.from_dict({"type": "PushEvent", "created_at": "2024-03-01T10:00:00Z"})

        assert event.commits is None

    def test_other_event(self) -> None:
        """Test that non-push events are recognized."""
        event = EventRecord.from_dict({"type": "WatchEvent", "created_at": "2024-03-01T10:00:00Z", "payload": {}})

        assert not event.is_push


class TestDerivedModels:
    """Tests for derived properties."""

    def test_language_weight(self) -> None:
        """Test the weight of a language summary."""
        assert LanguageSummary(name="Go", count=3, stars=5).weight == 5.5

    def test_bucket_label(self) -> None:
        """Test the label of an hourly bucket."""
        assert HourlyBucket(hour=7, commits=0).label == "7:00"
