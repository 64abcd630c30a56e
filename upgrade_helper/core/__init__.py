# upgrade_helper/core/__init__.py
"""Core configuration."""

from .config import UpgradeHelperConfig, UPGRADE_HELPER_URL

__all__ = [
    'UpgradeHelperConfig',
    'UPGRADE_HELPER_URL'
]
