"""
Repository aggregation module.

Turns a user's repository list into a ranked language distribution and an
impact summary (stars, forks and the most-starred repositories).
"""

import logging
from typing import Dict, Iterable, List

from .models import ImpactSummary, LanguageSummary, RepositoryRecord

logger = logging.getLogger("profile-visualizer.aggregator")

MOST_STARRED_LIMIT = 5


def summarize_languages(repositories: Iterable[RepositoryRecord]) -> List[LanguageSummary]:
    """
    Group repositories by primary language and rank the groups.

    Repositories without a language are left out entirely. Language names are
    matched exactly (case-sensitive). The result is sorted by descending
    weight; groups with equal weight keep the order in which their language
    was first seen.

    Args:
        repositories: Repository records in API order

    Returns:
        List of LanguageSummary objects, heaviest first
    """
    # dict keeps first-seen order, which the stable sort below relies on
    groups: Dict[str, List[int]] = {}
    for repo in repositories:
        if not repo.language:
            continue
        acc = groups.setdefault(repo.language, [0, 0])
        acc[0] += 1
        acc[1] += repo.stars

    summaries = [LanguageSummary(name=name, count=count, stars=stars)
                 for name, (count, stars) in groups.items()]
    summaries.sort(key=lambda s: s.weight, reverse=True)

    logger.debug("Summarized %d languages", len(summaries))
    return summaries


def summarize_impact(repositories: Iterable[RepositoryRecord]) -> ImpactSummary:
    """
    Total the stars and forks of all repositories and pick the most starred.

    The full list is sorted (stable, descending stars) before slicing so that
    repositories with equal star counts keep their input order.
    """
    repos = list(repositories)
    total_stars = sum(repo.stars for repo in repos)
    total_forks = sum(repo.forks for repo in repos)
    most_starred = sorted(repos, key=lambda r: r.stars, reverse=True)[:MOST_STARRED_LIMIT]

    return ImpactSummary(
        total_stars=total_stars,
        total_forks=total_forks,
        most_starred=tuple(most_starred),
    )
