"""Browser automation for the upgrade helper page.

Components:
    - browser_engine: one Playwright browser per request
    - form_filler: label heuristics for the version form
    - page_waiter: bounded waits between steps
"""

from .browser_engine import BrowserSession
from .form_filler import FormFiller, FIELD_RULES, classify_label
from .page_waiter import PageWaiter

__all__ = [
    'BrowserSession',
    'FormFiller',
    'FIELD_RULES',
    'classify_label',
    'PageWaiter'
]
