"""
Activity rhythm analysis module.

Buckets the commits of a user's recent push events into the 24 hours of the
day and labels the period in which most of them landed.
"""

import datetime
import logging
from typing import Iterable, List, Optional, Sequence, Tuple

from .models import EventRecord, HourlyBucket, Persona, RhythmSummary

logger = logging.getLogger("profile-visualizer.rhythm")

HOURS_PER_DAY = 24

# Evaluation order matters: on equal sums the later window wins.
PERSONA_WINDOWS: Tuple[Tuple[range, Persona], ...] = (
    (range(0, 6), Persona.NIGHT_OWL),
    (range(6, 12), Persona.EARLY_BIRD),
    (range(12, 18), Persona.AFTERNOON_ARCHITECT),
    (range(18, 24), Persona.EVENING_ENGINEER),
)


def local_hour(timestamp: datetime.datetime, tz: Optional[datetime.tzinfo] = None) -> int:
    """
    Hour of day of ``timestamp`` in ``tz``.

    With no zone the evaluating process's local time zone is used, so the
    result depends on the environment unless the caller passes one.
    """
    return timestamp.astimezone(tz).hour


def commit_contribution(event: EventRecord) -> int:
    """Commits an event counts for. An absent or empty commit list counts as one."""
    if event.commits:
        return len(event.commits)
    return 1


def derive_persona(hourly_counts: Sequence[int]) -> Persona:
    """
    Label the window of the day holding the most commits.

    Windows are checked night, morning, afternoon, evening and every window
    equal to the maximum overwrites the previous label, so ties go to the last
    one. An all-zero day therefore yields ``Persona.EVENING_ENGINEER``.
    """
    sums = [sum(hourly_counts[h] for h in hours) for hours, _ in PERSONA_WINDOWS]
    peak = max(sums)

    persona = Persona.BALANCED_CODER
    for total, (_, label) in zip(sums, PERSONA_WINDOWS):
        if total == peak:
            persona = label
    return persona


def compute_rhythm(events: Iterable[EventRecord], tz: Optional[datetime.tzinfo] = None) -> RhythmSummary:
    """
    Build the hour-of-day commit histogram and persona for a set of events.

    Args:
        events: Events of any type; only push events are counted
        tz: Zone used to read the hour of each event (default: process local)

    Returns:
        RhythmSummary with exactly 24 buckets in ascending hour order
    """
    hours: List[int] = [0] * HOURS_PER_DAY
    total_commits = 0

    for event in events:
        if not event.is_push:
            continue
        hour = local_hour(event.created_at, tz)
        contribution = commit_contribution(event)
        hours[hour] += contribution
        total_commits += contribution

    persona = derive_persona(hours)
    logger.debug("Counted %d commits, persona %s", total_commits, persona)

    return RhythmSummary(
        chart_data=tuple(HourlyBucket(hour=h, commits=c) for h, c in enumerate(hours)),
        persona=persona,
        total_commits=total_commits,
    )
