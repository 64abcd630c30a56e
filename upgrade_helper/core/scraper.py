"""Drive the upgrade helper page for one request.

Workflow (one browser per call):
    1. Navigate to the upgrade helper
    2. Wait for the form, fill it, let it re-render
    3. Click submit if there is a button, wait for the diff
    4. Extract and close the browser, whatever happened

Usage:
    scraper = UpgradeScraper(UpgradeHelperConfig.from_env())
    result = await scraper.get_upgrade_info(UpgradeRequest("0.70.14", "0.74.0"))
"""

from typing import Callable

from .config import UpgradeHelperConfig
from ..dynamic.browser_engine import BrowserSession
from ..dynamic.form_filler import FormFiller
from ..dynamic.page_waiter import PageWaiter
from ..extractors.diff_extractor import build_upgrade_result, find_file_diff
from ..extractors.page_reader import PageReader
from ..models import FileDiffRequest, FileDiffResult, UpgradeRequest, UpgradeResult


class UpgradeScraper:
    """Scrape upgrade diffs from the React Native upgrade helper."""

    def __init__(self, config: UpgradeHelperConfig = None,
                 session_factory: Callable[[UpgradeHelperConfig], BrowserSession] = BrowserSession):
        self.config = config or UpgradeHelperConfig()
        self.session_factory = session_factory

    async def _prepare(self, session, request: UpgradeRequest):
        """Navigate, fill the form and wait until a diff is on the page."""
        waiter = PageWaiter(session)

        await session.goto(self.config.url)
        await waiter.wait_for_form()
        await FormFiller(session.page, self.config.log).fill(request)
        await waiter.settle()
        await waiter.submit()
        await waiter.wait_for_diff()

    async def get_upgrade_info(self, request: UpgradeRequest) -> UpgradeResult:
        """Every file change, the summary and breaking changes for a version pair."""
        self.config.log(f"\n[UPGRADE] {request.from_version} → {request.to_version}")

        async with self.session_factory(self.config) as session:
            await self._prepare(session, request)

            reader = PageReader(session.page, self.config.log)
            items = await reader.snapshot_items()
            summary_texts = await reader.summary_texts()
            breaking_texts = await reader.breaking_change_texts()

        result = build_upgrade_result(
            request,
            url=self.config.url,
            items=items,
            summary_texts=summary_texts,
            breaking_texts=breaking_texts,
            content_limit=self.config.content_limit,
        )
        self.config.log(
            f"  ✓ {result.total_files} file(s): {result.modified_files} modified, "
            f"{result.added_files} added, {result.deleted_files} deleted"
        )
        return result

    async def get_file_diff(self, request: FileDiffRequest) -> FileDiffResult:
        """Untruncated diff of one file, or a not-found result."""
        self.config.log(
            f"\n[FILE DIFF] {request.file_name} ({request.from_version} → {request.to_version})"
        )

        async with self.session_factory(self.config) as session:
            await self._prepare(session, request)
            items = await PageReader(session.page, self.config.log).snapshot_items()

        result = find_file_diff(items, request)
        if result.found:
            self.config.log(f"  ✓ Found {result.file_name} ({result.change_type})")
        else:
            self.config.log(f"  ⚠ {request.file_name} not on the page")
        return result
