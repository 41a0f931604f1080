"""
Report Generation Module

This module contains the ReportGenerator class responsible for composing a
Markdown report of a developer's profile from a dashboard.
"""

import datetime
from typing import List, Optional

from .dashboard import Dashboard
from .models import RhythmSummary

HISTOGRAM_WIDTH = 30


class ReportGenerator:
    """
    Compose a Markdown report from a dashboard.

    The report has sections for the profile, quick stats, languages, the
    activity rhythm and the highest-impact repositories.
    """

    def __init__(self, include_repositories: bool = True) -> None:
        """
        Initialize the report generator.

        Args:
            include_repositories: Whether to list the most-starred repositories
        """
        self.include_repositories = include_repositories

    def generate_markdown(self, dashboard: Dashboard, aura_file: Optional[str] = None) -> str:
        """
        Build a markdown-formatted report string.

        Args:
            dashboard: Summaries for one developer
            aura_file: Name of the aura SVG to embed, if one was written

        Returns:
            Complete report markdown content as a string
        """
        profile = dashboard.profile
        lines: List[str] = []

        # Title & class
        lines.append(f"# {profile.display_name}\n")
        if profile.html_url:
            lines.append(f"[@{profile.login}]({profile.html_url}) · **{dashboard.developer_class}**\n")
        else:
            lines.append(f"@{profile.login} · **{dashboard.developer_class}**\n")
        lines.append((profile.bio or "This user hasn't added a bio yet.") + "\n")
        details = self._build_details(dashboard)
        if details:
            lines.append(details + "\n")

        # Quick stats
        lines.append("## Quick Stats\n")
        lines.append("| Public Repos | Total Stars | Total Forks | Followers | Recent Commits |")
        lines.append("|---:|---:|---:|---:|---:|")
        lines.append(
            f"| {profile.public_repos} | {dashboard.impact.total_stars} | {dashboard.impact.total_forks}"
            f" | {profile.followers} | {dashboard.rhythm.total_commits} |"
        )
        lines.append("")

        # Languages
        lines.append("## Language Galaxy\n")
        if dashboard.languages:
            lines.append(f"Top language: **{dashboard.languages[0].name}**\n")
            lines.append("| Language | Repos | Stars | Weight |")
            lines.append("|---|---:|---:|---:|")
            for lang in dashboard.languages:
                lines.append(f"| {lang.name} | {lang.count} | {lang.stars} | {lang.weight:g} |")
            lines.append("")
        else:
            lines.append("No language data found.\n")

        # Rhythm
        lines.append("## Activity Rhythm\n")
        lines.append(f"Persona: **{dashboard.rhythm.persona}**\n")
        lines.append(self._format_rhythm(dashboard.rhythm) + "\n")

        # Impact
        if self.include_repositories:
            lines.append("## Highest Impact Repositories\n")
            lines.append(self._format_repositories(dashboard) + "\n")

        if aura_file:
            lines.append("## Developer Aura\n")
            lines.append(f"![Developer aura]({aura_file})\n")

        lines.append("---\n")
        lines.append(f"_Generated by profile-visualizer on {datetime.datetime.now(datetime.timezone.utc).strftime('%Y-%m-%d %H:%M UTC')}_")

        return "\n".join(lines)

    def _build_details(self, dashboard: Dashboard) -> str:
        profile = dashboard.profile
        parts = []
        if profile.location:
            parts.append(f"📍 {profile.location}")
        if profile.company:
            parts.append(f"🏢 {profile.company}")
        if profile.blog:
            url = profile.blog if profile.blog.startswith("http") else f"https://{profile.blog}"
            parts.append(f"🔗 [{profile.blog}]({url})")
        parts.append(f"📅 Joined {profile.created_at.year}")
        return " · ".join(parts)

    def _format_rhythm(self, rhythm: RhythmSummary) -> str:
        """
        Render the 24 hourly buckets as a fixed-width text histogram.

        Bars are scaled to the busiest hour.
        """
        peak = max((bucket.commits for bucket in rhythm.chart_data), default=0)
        lines = ["```"]
        for bucket in rhythm.chart_data:
            width = round(bucket.commits / peak * HISTOGRAM_WIDTH) if peak else 0
            lines.append(f"{bucket.label:>5} | {'█' * width} {bucket.commits}".rstrip())
        lines.append("```")
        return "\n".join(lines)

    def _format_repositories(self, dashboard: Dashboard) -> str:
        if not dashboard.impact.most_starred:
            return "No repositories found."

        lines = []
        for repo in dashboard.impact.most_starred:
            name = f"[{repo.name}]({repo.html_url})" if repo.html_url else repo.name
            line = f"- **{name}** ⭐ {repo.stars} · 🍴 {repo.forks}"
            if repo.language:
                line += f" · {repo.language}"
            lines.append(line)
            lines.append(f"  {repo.description or 'No description provided.'}")
        return "\n".join(lines)
