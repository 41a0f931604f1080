"""
Dashboard assembly.

Runs the aggregation pipeline over fetched data and bundles the results into
the view-model consumed by the report, charts and aura.
"""

import datetime
import logging
from dataclasses import dataclass
from typing import Optional, Tuple

from .aggregator import summarize_impact, summarize_languages
from .classifier import classify_developer
from .models import DeveloperClass, ImpactSummary, LanguageSummary, Profile, ProfileData, RhythmSummary
from .rhythm import compute_rhythm

logger = logging.getLogger("profile-visualizer.dashboard")


@dataclass(frozen=True)
class Dashboard:
    profile: Profile
    languages: Tuple[LanguageSummary, ...]
    rhythm: RhythmSummary
    impact: ImpactSummary
    developer_class: DeveloperClass

    @property
    def top_language(self) -> Optional[LanguageSummary]:
        return self.languages[0] if self.languages else None


def build_dashboard(
    data: ProfileData,
    tz: Optional[datetime.tzinfo] = None,
    now: Optional[datetime.datetime] = None,
) -> Dashboard:
    """
    Derive every summary for one user.

    Args:
        data: Profile, repositories and events as fetched
        tz: Zone used for the hour-of-day rhythm (default: process local)
        now: Reference time for the account age (default: current time)
    """
    languages = summarize_languages(data.repositories)
    rhythm = compute_rhythm(data.events, tz=tz)
    impact = summarize_impact(data.repositories)
    developer_class = classify_developer(data.profile, impact.total_stars, rhythm.total_commits, now=now)

    logger.info(
        "%s: %d languages, %d stars, %d commits, %s, %s",
        data.profile.login, len(languages), impact.total_stars,
        rhythm.total_commits, rhythm.persona, developer_class,
    )
    return Dashboard(
        profile=data.profile,
        languages=tuple(languages),
        rhythm=rhythm,
        impact=impact,
        developer_class=developer_class,
    )
