"""
Profile Visualizer - turns a GitHub user's public activity into summaries, charts and an aura.
"""

from .models import (
    DeveloperClass,
    EventRecord,
    HourlyBucket,
    ImpactSummary,
    LanguageSummary,
    Persona,
    Profile,
    ProfileData,
    RepositoryRecord,
    RhythmSummary,
)
from .aggregator import summarize_impact, summarize_languages
from .rhythm import compute_rhythm
from .classifier import classify_developer
from .errors import FetchError, RateLimitError, UserNotFoundError
from .dashboard import Dashboard, build_dashboard

__all__ = [
    'DeveloperClass',
    'EventRecord',
    'HourlyBucket',
    'ImpactSummary',
    'LanguageSummary',
    'Persona',
    'Profile',
    'ProfileData',
    'RepositoryRecord',
    'RhythmSummary',
    'summarize_impact',
    'summarize_languages',
    'compute_rhythm',
    'classify_developer',
    'FetchError',
    'RateLimitError',
    'UserNotFoundError',
    'Dashboard',
    'build_dashboard',
]
