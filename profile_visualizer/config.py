"""
Runtime configuration.

Settings come from environment variables, optionally loaded from a ``.env``
file in the working directory. Command line flags override them.
"""

import datetime
import os
from dataclasses import dataclass
from typing import Optional
from zoneinfo import ZoneInfo, ZoneInfoNotFoundError

from dotenv import find_dotenv, load_dotenv

DEFAULT_API_URL = "https://api.github.com"
DEFAULT_TIMEOUT = 15
DEFAULT_OUTPUT_DIR = "output"
DEFAULT_LOG_LEVEL = "INFO"


@dataclass
class Settings:
    api_url: str = DEFAULT_API_URL
    timeout: int = DEFAULT_TIMEOUT
    timezone: Optional[str] = None
    output_dir: str = DEFAULT_OUTPUT_DIR
    log_level: str = DEFAULT_LOG_LEVEL

    @classmethod
    def from_env(cls, dotenv: bool = True) -> "Settings":
        """
        Read settings from the environment.

        Args:
            dotenv: Load a ``.env`` file first (existing variables win)
        """
        if dotenv:
            load_dotenv(find_dotenv(usecwd=True))
        return cls(
            api_url=os.getenv("GITHUB_API_URL", DEFAULT_API_URL).rstrip("/"),
            timeout=int(os.getenv("PROFILE_VISUALIZER_TIMEOUT", DEFAULT_TIMEOUT)),
            timezone=os.getenv("PROFILE_VISUALIZER_TIMEZONE") or None,
            output_dir=os.getenv("PROFILE_VISUALIZER_OUTPUT_DIR", DEFAULT_OUTPUT_DIR),
            log_level=os.getenv("PROFILE_VISUALIZER_LOG_LEVEL", DEFAULT_LOG_LEVEL).upper(),
        )

    def zone(self) -> Optional[datetime.tzinfo]:
        """Time zone for hour bucketing; None means the process's local zone."""
        if not self.timezone:
            return None
        try:
            return ZoneInfo(self.timezone)
        except (ZoneInfoNotFoundError, ValueError, OSError) as e:
            raise ValueError(f"Unknown time zone: {self.timezone}") from e
