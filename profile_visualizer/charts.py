"""
Chart rendering module.

Draws the language distribution, the activity rhythm and a shareable summary
card as PNG images with matplotlib. Rendering is headless (Agg backend).
"""

import logging
from pathlib import Path
from typing import Sequence, Union

import matplotlib

matplotlib.use("Agg")

import matplotlib.pyplot as plt  # noqa: E402
from matplotlib.patches import Circle, FancyBboxPatch  # noqa: E402

from .dashboard import Dashboard  # noqa: E402
from .models import LanguageSummary, RhythmSummary  # noqa: E402

logger = logging.getLogger("profile-visualizer.charts")

COLORS = ["#8b5cf6", "#06b6d4", "#f43f5e", "#10b981", "#f59e0b", "#3b82f6", "#ec4899", "#84cc16"]
BACKGROUND = "#05050a"
PANEL = "#0f0f1a"
TEXT = "#ffffff"
TEXT_SECONDARY = "#cbd5e1"

MAX_CHART_LANGUAGES = 8
MAX_CARD_LANGUAGES = 5
CARD_SIZE = (12, 6.3)  # 1200x630 at 100 dpi
CARD_DPI = 100

PathLike = Union[str, Path]


def _prepare(path: PathLike) -> Path:
    path = Path(path)
    path.parent.mkdir(parents=True, exist_ok=True)
    return path


def _style(ax) -> None:
    ax.set_facecolor(BACKGROUND)
    for spine in ax.spines.values():
        spine.set_visible(False)
    ax.tick_params(colors=TEXT_SECONDARY)


def render_language_chart(languages: Sequence[LanguageSummary], path: PathLike) -> Path:
    """
    Draw a donut of the top languages, sized by weight.

    Args:
        languages: Ranked language summaries
        path: Output PNG file

    Returns:
        Path of the written image
    """
    path = _prepare(path)
    top = list(languages[:MAX_CHART_LANGUAGES])

    fig, ax = plt.subplots(figsize=(6, 6), facecolor=BACKGROUND)
    _style(ax)
    ax.set_title("Language Galaxy", color=TEXT)
    if top:
        ax.pie(
            [lang.weight for lang in top],
            colors=[COLORS[i % len(COLORS)] for i in range(len(top))],
            startangle=90,
            counterclock=False,
            wedgeprops={"width": 0.3, "edgecolor": BACKGROUND, "linewidth": 2},
        )
        ax.legend(
            [f"{lang.name} ({lang.count} repos)" for lang in top],
            loc="lower center", bbox_to_anchor=(0.5, -0.15), ncol=2,
            frameon=False, labelcolor=TEXT_SECONDARY,
        )
        ax.axis("equal")
    else:
        ax.text(0.5, 0.5, "No language data found", ha="center", va="center", color=TEXT_SECONDARY)
        ax.axis("off")

    plt.tight_layout()
    fig.savefig(path, facecolor=BACKGROUND)
    plt.close(fig)
    logger.info("Wrote language chart to %s", path)
    return path


def render_rhythm_chart(rhythm: RhythmSummary, path: PathLike) -> Path:
    """Draw the commits-per-hour area chart, titled with the persona."""
    path = _prepare(path)
    hours = [bucket.hour for bucket in rhythm.chart_data]
    commits = [bucket.commits for bucket in rhythm.chart_data]

    fig, ax = plt.subplots(figsize=(10, 4), facecolor=BACKGROUND)
    _style(ax)
    ax.fill_between(hours, commits, color=COLORS[1], alpha=0.35)
    ax.plot(hours, commits, color=COLORS[1], linewidth=3)
    ax.set_xticks(hours[::3])
    ax.set_xticklabels([bucket.label for bucket in rhythm.chart_data][::3])
    ax.set_xlim(0, len(hours) - 1)
    ax.set_ylim(bottom=0)
    ax.grid(axis="y", linestyle="--", alpha=0.2)
    ax.set_title(f"Activity Rhythm: {rhythm.persona}", color=TEXT)

    plt.tight_layout()
    fig.savefig(path, facecolor=BACKGROUND)
    plt.close(fig)
    logger.info("Wrote rhythm chart to %s", path)
    return path


def render_share_card(dashboard: Dashboard, path: PathLike) -> Path:
    """
    Draw a 1200x630 summary card for sharing on social media.

    The card shows the developer's name, class, stars, recent commits, top
    languages and persona.
    """
    path = _prepare(path)
    profile = dashboard.profile

    fig = plt.figure(figsize=CARD_SIZE, dpi=CARD_DPI, facecolor=BACKGROUND)
    ax = fig.add_axes([0, 0, 1, 1])
    ax.set_xlim(0, 1200)
    ax.set_ylim(630, 0)
    ax.axis("off")

    ax.text(80, 80, "GitHub Visualizer", color=COLORS[0], fontsize=24, fontweight="bold", va="center")
    ax.text(80, 200, profile.display_name, color=TEXT, fontsize=34, fontweight="bold", va="center")
    ax.text(80, 255, f"@{profile.login}", color=COLORS[1], fontsize=18, va="center")
    ax.add_patch(FancyBboxPatch((80, 290), 360, 50, boxstyle="round,pad=0,rounding_size=25",
                                facecolor=COLORS[0], edgecolor="none"))
    ax.text(260, 315, str(dashboard.developer_class), color=TEXT, fontsize=16,
            fontweight="bold", ha="center", va="center")

    stats = (
        (dashboard.impact.total_stars, "TOTAL STARS", "#fbbf24"),
        (dashboard.rhythm.total_commits, "RECENT COMMITS", COLORS[3]),
    )
    for i, (value, label, color) in enumerate(stats):
        x = 80 + i * 300
        ax.add_patch(FancyBboxPatch((x, 400), 260, 140, boxstyle="round,pad=0,rounding_size=16",
                                    facecolor=PANEL, edgecolor="#1f1f2e"))
        ax.text(x + 30, 455, str(value), color=color, fontsize=30, fontweight="bold", va="center")
        ax.text(x + 30, 510, label, color=TEXT_SECONDARY, fontsize=12, va="center")

    ax.add_patch(FancyBboxPatch((720, 140), 400, 420, boxstyle="round,pad=0,rounding_size=24",
                                facecolor=PANEL, edgecolor="#1f1f2e"))
    ax.text(760, 185, "Top Languages", color=TEXT, fontsize=20, fontweight="bold", va="center")
    top = dashboard.languages[:MAX_CARD_LANGUAGES]
    if top:
        for i, lang in enumerate(top):
            y = 250 + i * 50
            ax.add_patch(Circle((768, y), 8, color=COLORS[i % len(COLORS)]))
            ax.text(790, y, lang.name, color=TEXT, fontsize=16, fontweight="bold", va="center")
            ax.text(1080, y, f"{lang.count} repos", color=TEXT_SECONDARY, fontsize=14, ha="right", va="center")
    else:
        ax.text(760, 250, "No language data found.", color=TEXT_SECONDARY, fontsize=14,
                style="italic", va="center")
    ax.text(920, 520, str(dashboard.rhythm.persona), color=COLORS[1], fontsize=16,
            fontweight="bold", ha="center", va="center")

    fig.savefig(path, dpi=CARD_DPI, facecolor=BACKGROUND)
    plt.close(fig)
    logger.info("Wrote share card to %s", path)
    return path
