"""Tests for the activity rhythm module."""

import datetime
from typing import Optional, Tuple

import pytest

from profile_visualizer.models import EventRecord, Persona
from profile_visualizer.rhythm import commit_contribution, compute_rhythm, derive_persona, local_hour

UTC = datetime.timezone.utc


def push(hour: int, commits: Optional[Tuple[dict, ...]] = None, event_type: str = "PushEvent") -> EventRecord:
    return EventRecord(
        type=event_type,
        created_at=datetime.datetime(2024, 5, 17, hour, 30, tzinfo=UTC),
        commits=commits,
    )


def commits(n: int) -> Tuple[dict, ...]:
    return tuple({"sha": f"{i:040x}"} for i in range(n))


class TestComputeRhythm:
    """Tests for compute_rhythm."""

    def test_empty_input(self) -> None:
        """Test that no events gives 24 zero buckets and the default persona."""
        result = compute_rhythm([], tz=UTC)

        assert result.total_commits == 0
        assert len(result.chart_data) == 24
        assert all(bucket.commits == 0 for bucket in result.chart_data)
        assert result.persona == Persona.EVENING_ENGINEER

    def test_night_owl(self) -> None:
        """Test two early-morning pushes with three commits in total."""
        events = [push(2, commits(2)), push(3, commits(1))]

        result = compute_rhythm(events, tz=UTC)

        assert result.total_commits == 3
        assert len(result.chart_data) == 24
        assert result.chart_data[2].commits == 2
        assert result.chart_data[3].commits == 1
        assert result.persona == Persona.NIGHT_OWL
        assert result.persona == "Night Owl"

    def test_labels_in_ascending_order(self) -> None:
        """Test the hour labels of the chart data."""
        result = compute_rhythm([], tz=UTC)

        assert [b.hour for b in result.chart_data] == list(range(24))
        assert result.chart_data[0].label == "0:00"
        assert result.chart_data[23].label == "23:00"

    def test_non_push_events_ignored(self) -> None:
        """Test that other event types are silently skipped."""
        events = [
            push(9, commits(4), event_type="WatchEvent"),
            push(9, None, event_type="CreateEvent"),
            push(14, commits(1)),
        ]

        result = compute_rhythm(events, tz=UTC)

        assert result.total_commits == 1
        assert result.chart_data[9].commits == 0
        assert result.persona == Persona.AFTERNOON_ARCHITECT

    def test_absent_commit_list_counts_as_one(self) -> None:
        """Test the single-commit floor for events without commits."""
        result = compute_rhythm([push(7, None), push(8, ())], tz=UTC)

        assert result.total_commits == 2
        assert result.chart_data[7].commits == 1
        assert result.chart_data[8].commits == 1
        assert result.persona == Persona.EARLY_BIRD

    def test_explicit_zone_shifts_hours(self) -> None:
        """Test that the given zone decides the bucket."""
        tokyo = datetime.timezone(datetime.timedelta(hours=9))
        event = push(20, commits(5))

        result = compute_rhythm([event], tz=tokyo)

        assert result.chart_data[5].commits == 5
        assert result.chart_data[20].commits == 0
        assert result.persona == Persona.NIGHT_OWL

    def test_default_zone_is_process_local(self) -> None:
        """Test that without a zone the process's local hour is used."""
        event = push(12, commits(1))
        expected_hour = event.created_at.astimezone().hour

        result = compute_rhythm([event])

        assert result.chart_data[expected_hour].commits == 1

    def test_idempotent(self) -> None:
        """Test that repeated calls give equal output."""
        events = [push(1, commits(3)), push(22, None), push(13, commits(2))]

        assert compute_rhythm(events, tz=UTC) == compute_rhythm(events, tz=UTC)


class TestDerivePersona:
    """Tests for derive_persona."""

    @staticmethod
    def day(night: int = 0, morning: int = 0, afternoon: int = 0, evening: int = 0) -> list:
        hours = [0] * 24
        hours[1], hours[7], hours[13], hours[19] = night, morning, afternoon, evening
        return hours

    @pytest.mark.parametrize(
        "counts, expected",
        [
            ({"night": 5}, Persona.NIGHT_OWL),
            ({"morning": 5}, Persona.EARLY_BIRD),
            ({"afternoon": 5}, Persona.AFTERNOON_ARCHITECT),
            ({"evening": 5}, Persona.EVENING_ENGINEER),
        ],
    )
    def test_single_window(self, counts: dict, expected: Persona) -> None:
        """Test each window winning on its own."""
        assert derive_persona(self.day(**counts)) == expected

    def test_tie_goes_to_later_window(self) -> None:
        """Test that a shared maximum resolves to the last window checked."""
        assert derive_persona(self.day(night=4, morning=4)) == Persona.EARLY_BIRD
        assert derive_persona(self.day(night=4, afternoon=4, morning=1)) == Persona.AFTERNOON_ARCHITECT
        assert derive_persona(self.day(night=3, morning=3, afternoon=3, evening=3)) == Persona.EVENING_ENGINEER

    def test_all_zero(self) -> None:
        """Test the documented default for an empty day."""
        assert derive_persona([0] * 24) == Persona.EVENING_ENGINEER

    def test_window_boundaries(self) -> None:
        """Test that hours 5, 6, 17 and 18 fall in the right windows."""
        hours = [0] * 24
        hours[5] = 1
        assert derive_persona(hours) == Persona.NIGHT_OWL
        hours[6] = 2
        assert derive_persona(hours) == Persona.EARLY_BIRD
        hours[17] = 3
        assert derive_persona(hours) == Persona.AFTERNOON_ARCHITECT
        hours[18] = 4
        assert derive_persona(hours) == Persona.EVENING_ENGINEER


class TestHelpers:
    """Tests for the per-event helpers."""

    def test_commit_contribution(self) -> None:
        """Test commit counting for explicit, empty and absent lists."""
        assert commit_contribution(push(0, commits(4))) == 4
        assert commit_contribution(push(0, ())) == 1
        assert commit_contribution(push(0, None)) == 1

    def test_local_hour_with_zone(self) -> None:
        """Test reading the hour in a fixed offset."""
        ts = datetime.datetime(2024, 1, 1, 23, 0, tzinfo=UTC)
        assert local_hour(ts, datetime.timezone(datetime.timedelta(hours=2))) == 1
