# upgrade_helper/extractors/__init__.py
"""Diff extractors."""

from .diff_extractor import ItemSnapshot, build_upgrade_result, find_file_diff
from .page_reader import PageReader

__all__ = ['ItemSnapshot', 'build_upgrade_result', 'find_file_diff', 'PageReader']
