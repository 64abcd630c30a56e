"""
Pytest configuration and shared fixtures.

The fakes below stand in for a Playwright page so the scraper can run end
to end without a browser.
"""

from typing import Dict, List, Optional

import pytest

from upgrade_helper.core.config import UpgradeHelperConfig
from upgrade_helper.dynamic.form_filler import READ_LABELS_SCRIPT
from upgrade_helper.errors import NavigationError, PageTimeoutError
from upgrade_helper.extractors.selectors import SUBMIT_BUTTON


class FakeElement:
    """Element handle with canned text, snapshot and click tracking."""

    def __init__(self, text: str = "", snapshot: Optional[Dict] = None):
        self.text = text
        self.snapshot = snapshot or {}
        self.clicks = 0

    async def text_content(self):
        return self.text

    async def evaluate(self, script, arg=None):
        return self.snapshot

    async def click(self):
        self.clicks += 1


class FakePage:
    """Answers selector queries from dictionaries keyed by selector."""

    def __init__(self, labels=None, elements=None, submit=None, matches=None):
        self.labels: List[str] = labels if labels is not None else []
        self.elements: Dict[str, List[FakeElement]] = elements or {}
        self.matches: Dict[str, List[Dict]] = matches or {}
        self.submit = submit
        self.written = []
        self.queries = []

    async def evaluate(self, script, arg=None):
        if script == READ_LABELS_SCRIPT:
            return list(self.labels)
        self.written.append(arg)
        return len(arg or [])

    async def query_selector(self, selector):
        self.queries.append(selector)
        if selector == SUBMIT_BUTTON:
            return self.submit
        matches = self.elements.get(selector, [])
        return matches[0] if matches else None

    async def query_selector_all(self, selector):
        self.queries.append(selector)
        return list(self.elements.get(selector, []))

    async def eval_on_selector_all(self, selector, script):
        """Match entries as the page script reports them; `matches` may nest."""
        self.queries.append(selector)
        if selector in self.matches:
            return list(self.matches[selector])
        return [{'text': element.text, 'enclosesMatch': False}
                for element in self.elements.get(selector, [])]


class SessionTracker:
    """Counts sessions handed out by `factory`, and their teardown."""

    def __init__(self, page: FakePage = None, timeout_on: Optional[str] = None,
                 fail_navigation: bool = False):
        self.page = page or FakePage()
        self.timeout_on = timeout_on
        self.fail_navigation = fail_navigation
        self.opened = 0
        self.closed = 0
        self.visited = []
        self.waited = []
        self.paused = []

    def factory(self, config):
        return FakeSession(self, config)


class FakeSession:
    """Async context manager mirroring BrowserSession's surface."""

    def __init__(self, tracker: SessionTracker, config):
        self.tracker = tracker
        self.config = config
        self.page = tracker.page

    async def __aenter__(self):
        self.tracker.opened += 1
        return self

    async def __aexit__(self, exc_type, exc, tb):
        self.tracker.closed += 1
        return False

    async def goto(self, url, wait_until=None):
        if self.tracker.fail_navigation:
            raise NavigationError(f"Failed to load {url}: net::ERR_NAME_NOT_RESOLVED")
        self.tracker.visited.append(url)

    async def wait_for_selector(self, selector, timeout):
        self.tracker.waited.append((selector, timeout))
        if self.tracker.timeout_on == selector:
            raise PageTimeoutError(selector, timeout)

    async def pause(self, milliseconds):
        self.tracker.paused.append(milliseconds)


def item_snapshot(name=None, class_name="file-diff", text="", data_file=None,
                  badge=None, content=None, html=""):
    """Snapshot dict as returned by the in-page item script."""
    return {
        'className': class_name,
        'text': text,
        'html': html,
        'dataFile': data_file,
        'nameTexts': [name, None, None, None, None],
        'changeTypeTexts': [badge, None, None],
        'contents': [{'text': content, 'html': ''} if content is not None else None, None, None, None],
    }


@pytest.fixture
def config():
    """Quiet configuration with the default timeouts."""
    return UpgradeHelperConfig(verbose=False)


@pytest.fixture
def upgrade_page():
    """A rendered upgrade diff with three files, a summary and warnings."""
    items = [
        FakeElement(snapshot=item_snapshot(
            name="package.json", text="version 0.74.0", content="version 0.74.0")),
        FakeElement(snapshot=item_snapshot(
            name="android/build.gradle", class_name="file-diff added", text="buildToolsVersion",
            content="x" * 5000)),
        FakeElement(snapshot=item_snapshot(
            name="ios/Podfile.lock", class_name="file-diff deleted", text="PODS", content="PODS")),
    ]
    return FakePage(
        labels=["What's your current React Native version?", "To which version would you like to upgrade?",
                "What's your app name?", "What's your app package?"],
        elements={
            '[data-testid="file-diff"]': items,
            '.summary': [FakeElement(text="  Upgrading from 0.70.14 to 0.74.0  ")],
            '.warning': [FakeElement(text="Flipper was removed"), FakeElement(text="Flipper was removed")],
            '.alert': [FakeElement(text="Minimum iOS version is 13.4")],
        },
        submit=FakeElement(text="Show me how to upgrade"),
    )
