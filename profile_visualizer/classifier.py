"""
Developer classification module.

Assigns one qualitative label to a developer from their stars, recent
commits, repository count and account age. Rules are tried in order and the
first one that matches decides the label.
"""

import datetime
from typing import Callable, NamedTuple, Optional, Tuple

from .models import DeveloperClass, Profile

DAYS_PER_YEAR = 365.25
SECONDS_PER_YEAR = DAYS_PER_YEAR * 24 * 60 * 60


class ClassifierInput(NamedTuple):
    total_stars: int
    total_commits: int
    public_repos: int
    account_age_years: float


Rule = Tuple[Callable[[ClassifierInput], bool], DeveloperClass]

RULES: Tuple[Rule, ...] = (
    (lambda f: f.total_stars > 1000, DeveloperClass.OPEN_SOURCE_LEGEND),
    (lambda f: f.total_stars > 100 and f.account_age_years > 3, DeveloperClass.VETERAN_ARCHITECT),
    (lambda f: f.total_stars > 50, DeveloperClass.RISING_STAR),
    (lambda f: f.public_repos > 50, DeveloperClass.PROLIFIC_CREATOR),
    (lambda f: f.total_commits > 50, DeveloperClass.ACTIVE_CONTRIBUTOR),
    (lambda f: f.account_age_years < 1, DeveloperClass.PROMISING_INITIATE),
)


def account_age_years(created_at: datetime.datetime, now: Optional[datetime.datetime] = None) -> float:
    """
    Years elapsed since ``created_at``, using a 365.25-day year.

    A creation time in the future gives a negative age.
    """
    if now is None:
        now = datetime.datetime.now(datetime.timezone.utc) if created_at.tzinfo else datetime.datetime.now()
    return (now - created_at).total_seconds() / SECONDS_PER_YEAR


def classify_developer(
    profile: Profile,
    total_stars: int,
    total_commits: int,
    now: Optional[datetime.datetime] = None,
) -> DeveloperClass:
    """
    Return the developer class of the first matching rule.

    Args:
        profile: Profile providing ``created_at`` and ``public_repos``
        total_stars: Stars summed over the user's repositories
        total_commits: Commits counted in the user's recent push events
        now: Reference time for the account age (default: current time)
    """
    facts = ClassifierInput(
        total_stars=total_stars,
        total_commits=total_commits,
        public_repos=profile.public_repos,
        account_age_years=account_age_years(profile.created_at, now),
    )
    for matches, label in RULES:
        if matches(facts):
            return label
    return DeveloperClass.DEDICATED_DEVELOPER
