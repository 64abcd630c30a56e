"""Configuration management for the upgrade helper scraper."""

import os
import sys
from dataclasses import dataclass
from typing import List

from dotenv import load_dotenv

load_dotenv()


UPGRADE_HELPER_URL = "https://react-native-community.github.io/upgrade-helper/"

_TRUE_VALUES = ('1', 'true', 'yes', 'on')


def _env_flag(name: str, default: bool) -> bool:
    value = os.getenv(name)
    if value is None or value.strip() == '':
        return default
    return value.strip().lower() in _TRUE_VALUES


def _env_int(name: str, default: int) -> int:
    value = os.getenv(name)
    if value is None or value.strip() == '':
        return default
    try:
        return int(value)
    except ValueError:
        print(f"⚠ Ignoring {name}={value!r}: not an integer", file=sys.stderr)
        return default


@dataclass
class UpgradeHelperConfig:
    """Configuration for one scraper instance."""

    # Target page
    url: str = UPGRADE_HELPER_URL

    # Browser settings
    headless: bool = True
    navigation_timeout: int = 30000  # ms
    wait_until: str = "networkidle"

    # Page-state waits
    form_timeout: int = 10000  # ms, form inputs must appear
    settle_delay: int = 2000   # ms, grace period after filling the form
    diff_timeout: int = 15000  # ms, diff container must appear

    # Extraction
    content_limit: int = 2000  # chars kept per file in full-page mode

    # Progress output on stderr
    verbose: bool = True

    @classmethod
    def from_env(cls, **overrides) -> 'UpgradeHelperConfig':
        """Build a config from environment variables, then apply overrides."""
        values = {
            'url': os.getenv("UPGRADE_HELPER_URL") or UPGRADE_HELPER_URL,
            'headless': _env_flag("UPGRADE_HELPER_HEADLESS", True),
            'navigation_timeout': _env_int("UPGRADE_HELPER_NAVIGATION_TIMEOUT", 30000),
            'verbose': _env_flag("UPGRADE_HELPER_VERBOSE", True),
        }
        values.update({key: value for key, value in overrides.items() if value is not None})
        return cls(**values)

    def problems(self) -> List[str]:
        """List configuration values that cannot work."""
        problems = []
        for name in ('navigation_timeout', 'form_timeout', 'diff_timeout', 'content_limit'):
            if getattr(self, name) <= 0:
                problems.append(f"{name} must be positive")
        if self.settle_delay < 0:
            problems.append("settle_delay must not be negative")
        if not self.url.startswith(('http://', 'https://')):
            problems.append(f"url is not http(s): {self.url}")
        return problems

    def validate(self) -> bool:
        """Validate configuration."""
        problems = self.problems()
        for problem in problems:
            print(f"⚠ Warning: {problem}", file=sys.stderr)
        return not problems

    def log(self, message: str):
        """Write a progress line to stderr; stdout belongs to the protocol."""
        if self.verbose:
            print(message, file=sys.stderr)
