#!/usr/bin/env python3
"""
Main driver script for the profile visualizer.

This script provides the command-line interface and coordinates all modules
to turn a GitHub user's public activity into a report, charts, a share card
and an aura.

Usage (example):
    python -m profile_visualizer.main --user octocat --output-dir output --timezone Europe/Berlin
"""

import argparse
import logging
import sys
from pathlib import Path
from typing import List, Optional

from .aura import AuraGenerator
from .charts import render_language_chart, render_rhythm_chart, render_share_card
from .config import Settings
from .dashboard import build_dashboard
from .errors import FetchError
from .fetcher import GitHubFetcher
from .report import ReportGenerator

logger = logging.getLogger("profile-visualizer")


def build_parser() -> argparse.ArgumentParser:
    parser = argparse.ArgumentParser(description="Visualize a GitHub user's public profile and activity.")
    parser.add_argument("--user", "-u", required=True, help="GitHub username")
    parser.add_argument("--output-dir", "-o", default=None, help="Directory for the generated files")
    parser.add_argument("--timezone", "-z", default=None,
                        help="IANA time zone for the activity rhythm (default: this machine's zone)")
    parser.add_argument("--seed", type=int, default=None, help="Random seed for the aura (default: derived from the username)")
    parser.add_argument("--no-charts", action="store_true", help="Skip the PNG charts and share card")
    parser.add_argument("--log-level", default=None, help="Logging level (DEBUG, INFO, WARNING, ...)")
    return parser


def main(argv: Optional[List[str]] = None) -> None:
    """
    Main entry point for the profile visualizer.

    Parses command line arguments, fetches the user's data, runs the
    aggregation pipeline and writes every artifact to the output directory.
    """
    args = build_parser().parse_args(argv)

    try:
        settings = Settings.from_env()
        if args.output_dir:
            settings.output_dir = args.output_dir
        if args.timezone:
            settings.timezone = args.timezone
        if args.log_level:
            settings.log_level = args.log_level.upper()

        logging.basicConfig(level=getattr(logging, settings.log_level, logging.INFO))

        tz = settings.zone()
        out_dir = Path(settings.output_dir)

        logger.info("Starting visualization for %s", args.user)
        fetcher = GitHubFetcher(base_url=settings.api_url, timeout=settings.timeout)
        data = fetcher.fetch_all(args.user)

        logger.info("Aggregating %d repositories and %d events...", len(data.repositories), len(data.events))
        dashboard = build_dashboard(data, tz=tz)

        aura_path = AuraGenerator(dashboard, seed=args.seed).save(out_dir)

        if not args.no_charts:
            login = dashboard.profile.login
            render_language_chart(dashboard.languages, out_dir / f"{login}_languages.png")
            render_rhythm_chart(dashboard.rhythm, out_dir / f"{login}_rhythm.png")
            render_share_card(dashboard, out_dir / f"{login}_card.png")

        report_path = out_dir / f"{dashboard.profile.login}_report.md"
        logger.info("Writing report to %s", report_path)
        md = ReportGenerator().generate_markdown(dashboard, aura_file=aura_path.name)
        with open(report_path, "w", encoding="utf-8") as f:
            f.write(md)

        logger.info("Visualization completed successfully")
        print(f"✓ Profile visualized: {report_path}")
        print(f"  Developer class: {dashboard.developer_class}")
        print(f"  Persona: {dashboard.rhythm.persona}")
        print(f"  Languages: {', '.join(lang.name for lang in dashboard.languages) or 'none'}")
        print(f"  Stars: {dashboard.impact.total_stars}  Forks: {dashboard.impact.total_forks}"
              f"  Recent commits: {dashboard.rhythm.total_commits}")

    except KeyboardInterrupt:
        logger.info("Visualization interrupted by user")
        print("\nOperation cancelled by user")
        sys.exit(1)
    except FetchError as e:
        print(f"Error: {e}")
        sys.exit(1)
    except Exception as e:
        logger.error("Visualization failed: %s", e)
        print(f"Error: visualization failed - {e}")
        sys.exit(1)


if __name__ == "__main__":
    main()
