"""Selector cascades for the upgrade helper page.

The page structure is not ours and is not documented, so every lookup is an
ordered list of guesses tried first to last. New guesses are appended to
the tuples below; nothing else needs to change.

Selectors evaluated through Playwright (`page.query_selector_all`,
`page.eval_on_selector_all`) may use Playwright pseudo-classes such as
`:has-text()`. Those also match every ancestor of the element holding the
text, so only the innermost matches of the summary and breaking-change
selectors are read. Selectors evaluated inside a single item (`ITEM_*`)
run through `Element.querySelector` and must be plain CSS.
"""

from dataclasses import dataclass
from typing import Optional, Tuple


@dataclass(frozen=True)
class SelectorCascade:
    """Ordered selector guesses with an optional last-resort selector."""
    name: str
    selectors: Tuple[str, ...]
    fallback: Optional[str] = None

    def __iter__(self):
        return iter(self.selectors)


# Containers, one per changed file.
FILE_ITEMS = SelectorCascade(
    name="file items",
    selectors=(
        '[data-testid="file-diff"]',
        '.file-diff',
        '.diff-container',
        '.file-change',
        '[class*="file"]',
        '[class*="diff"]',
    ),
    fallback='[class*="file"], [data-file], :has(> [class*="diff"])',
)

# Inside an item: where the file name is printed.
ITEM_FILE_NAME = SelectorCascade(
    name="file name",
    selectors=(
        '[data-testid="file-name"]',
        '.file-name',
        '.filename',
        'strong',
        'h3, h4, h5',
    ),
)

# Inside an item: a badge naming the kind of change.
ITEM_CHANGE_TYPE = SelectorCascade(
    name="change type",
    selectors=(
        '[data-testid="change-type"]',
        '.change-type',
        '.badge',
    ),
)

# Inside an item: the diff body. The item itself is the final fallback.
ITEM_DIFF_CONTENT = SelectorCascade(
    name="diff content",
    selectors=(
        '.diff-content',
        '.file-diff-content',
        'pre',
        'code',
    ),
)

SUMMARY = SelectorCascade(
    name="summary",
    selectors=(
        '[data-testid="upgrade-summary"]',
        '.upgrade-summary',
        '.summary',
        'p:has-text("upgrade")',
        'div:has-text("changes")',
    ),
)

# Every selector contributes; results are merged, not first-match.
BREAKING_CHANGES = SelectorCascade(
    name="breaking changes",
    selectors=(
        '[data-testid="breaking-change"]',
        '.breaking-change',
        '*:has-text("breaking")',
        '.warning',
        '.alert',
    ),
)

# Page-state markers.
FORM_INPUT = 'input'
SUBMIT_BUTTON = (
    'button[type="submit"], '
    'button:has-text("Show me how to upgrade"), '
    'button:has-text("Generate"), '
    'button:has-text("Update")'
)
DIFF_READY = '[data-testid="file-diff"], .diff-container, .file-diff'
