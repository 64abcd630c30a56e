"""Read the rendered upgrade diff into snapshots.

Only this module talks to the Playwright page during extraction; the
snapshots it produces are interpreted by `diff_extractor`.
"""

from typing import Any, List, Optional

from .diff_extractor import ItemSnapshot, innermost_texts
from .selectors import (
    BREAKING_CHANGES,
    FILE_ITEMS,
    ITEM_CHANGE_TYPE,
    ITEM_DIFF_CONTENT,
    ITEM_FILE_NAME,
    SUMMARY,
    SelectorCascade,
)


# Runs against one item element. `selectors` carries the in-item cascades
# so the ordering stays defined in Python.
ITEM_SNAPSHOT_SCRIPT = """
(item, selectors) => {
    const firstText = (sel) => {
        const el = item.querySelector(sel);
        return el ? (el.textContent || '') : null;
    };
    const firstContent = (sel) => {
        const el = item.querySelector(sel);
        return el ? { text: el.textContent || '', html: el.innerHTML || '' } : null;
    };
    return {
        className: item.getAttribute('class') || '',
        text: item.textContent || '',
        html: item.innerHTML || '',
        dataFile: item.getAttribute('data-file'),
        nameTexts: selectors.name.map(firstText),
        changeTypeTexts: selectors.changeType.map(firstText),
        contents: selectors.content.map(firstContent),
    };
}
"""


# Runs against every element a page-level selector matched.
MATCHES_SCRIPT = """
(elements) => elements.map((el) => ({
    text: el.textContent || '',
    enclosesMatch: elements.some((other) => other !== el && el.contains(other)),
}))
"""


class PageReader:
    """Query a Playwright page for file items, summary and breaking changes."""

    def __init__(self, page: Any, log=None):
        self.page = page
        self._log = log or (lambda message: None)

    async def find_file_items(self, cascade: SelectorCascade = FILE_ITEMS) -> List[Any]:
        """Element handles for the first selector that matches anything."""
        for selector in cascade:
            handles = await self.page.query_selector_all(selector)
            if handles:
                self._log(f"  ✓ {len(handles)} file item(s) via {selector}")
                return handles

        if cascade.fallback:
            handles = await self.page.query_selector_all(cascade.fallback)
            self._log(f"  ⚠ No {cascade.name} selector matched, fallback found {len(handles)}")
            return handles
        return []

    async def snapshot_items(self) -> List[ItemSnapshot]:
        """Snapshot every file item in document order."""
        selectors = {
            'name': list(ITEM_FILE_NAME.selectors),
            'changeType': list(ITEM_CHANGE_TYPE.selectors),
            'content': list(ITEM_DIFF_CONTENT.selectors),
        }
        snapshots = []
        for handle in await self.find_file_items():
            data = await handle.evaluate(ITEM_SNAPSHOT_SCRIPT, selectors)
            snapshots.append(ItemSnapshot.from_dict(data))
        return snapshots

    async def matched_texts(self, selector: str) -> List[Optional[str]]:
        """Texts of the innermost elements matched by a selector.

        `:has-text()` also matches every ancestor of the real match, up to
        `html`; an element enclosing another match of the same selector is
        dropped.
        """
        matches = await self.page.eval_on_selector_all(selector, MATCHES_SCRIPT)
        return innermost_texts(matches)

    async def summary_texts(self) -> List[Optional[str]]:
        """Text of the first innermost match for each summary selector (None if absent)."""
        texts = []
        for selector in SUMMARY:
            matches = await self.matched_texts(selector)
            texts.append(matches[0] if matches else None)
        return texts

    async def breaking_change_texts(self) -> List[List[Optional[str]]]:
        """Texts of the innermost matches of each breaking-change selector."""
        return [await self.matched_texts(selector) for selector in BREAKING_CHANGES]
