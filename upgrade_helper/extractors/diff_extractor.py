"""Turn snapshots of the rendered diff into file change records.

The page reader captures each candidate item as an `ItemSnapshot` (one
entry per selector guess, `None` where the guess matched nothing). All of
the guessing below is plain Python so it can be exercised without a
browser.

Resolution rules per item:
    file name    first matched name element's text, else `data-file`,
                 else "File detected" / "Unknown file" by class name
    change type  first matched badge text, else "modified"; then "added"
                 when class or text signals it, otherwise "deleted"
    content      first matched content element (or the item itself),
                 text content, or inner HTML when the text is empty
"""

from dataclasses import dataclass, field
from typing import Iterable, List, Optional, Sequence

from ..models import (
    CHANGE_ADDED,
    CHANGE_DELETED,
    CHANGE_MODIFIED,
    FileChange,
    FileDiffRequest,
    FileDiffResult,
    UpgradeRequest,
    UpgradeResult,
)


FILE_DETECTED = "File detected"
UNKNOWN_FILE = "Unknown file"
NO_SUMMARY = "No summary available"
DEFAULT_CONTENT_LIMIT = 2000


@dataclass
class ContentSnapshot:
    """Text and markup of the element holding a diff body."""
    text: Optional[str] = None
    html: Optional[str] = None


@dataclass
class ItemSnapshot:
    """What the page reader saw for one file item."""
    class_name: str = ""
    text: str = ""
    html: str = ""
    data_file: Optional[str] = None
    # One slot per selector of the matching cascade, None when unmatched.
    name_texts: List[Optional[str]] = field(default_factory=list)
    change_type_texts: List[Optional[str]] = field(default_factory=list)
    contents: List[Optional[ContentSnapshot]] = field(default_factory=list)

    @classmethod
    def from_dict(cls, data: dict) -> 'ItemSnapshot':
        """Build from the plain object returned by the in-page script."""
        contents = [
            ContentSnapshot(text=entry.get('text'), html=entry.get('html')) if entry else None
            for entry in data.get('contents') or []
        ]
        return cls(
            class_name=data.get('className') or '',
            text=data.get('text') or '',
            html=data.get('html') or '',
            data_file=data.get('dataFile'),
            name_texts=list(data.get('nameTexts') or []),
            change_type_texts=list(data.get('changeTypeTexts') or []),
            contents=contents,
        )


def _first_matched(slots: Sequence):
    """First slot whose selector matched an element (first-match-wins)."""
    for slot in slots:
        if slot is not None:
            return slot
    return None


def resolve_file_name(item: ItemSnapshot, use_sentinels: bool = True) -> str:
    """Resolve the file name of an item.

    With `use_sentinels` an unnamed item becomes "File detected" when its
    class name mentions a file and "Unknown file" otherwise; without it
    an unnamed item resolves to "".
    """
    text = _first_matched(item.name_texts)
    name = (text or '').strip()
    if name:
        return name
    if item.data_file:
        return item.data_file
    if not use_sentinels:
        return ''
    return FILE_DETECTED if 'file' in item.class_name else UNKNOWN_FILE


def resolve_change_type(item: ItemSnapshot) -> str:
    """Resolve the change type, letting class/text signals override the badge.

    The "added" check runs first, so an item carrying both signals is
    reported as added.
    """
    badge = _first_matched(item.change_type_texts)
    change_type = (badge or '').strip() or CHANGE_MODIFIED

    if 'added' in item.class_name or '+' in item.text:
        change_type = CHANGE_ADDED
    elif 'deleted' in item.class_name or '-' in item.text:
        change_type = CHANGE_DELETED

    return change_type


def resolve_content(item: ItemSnapshot) -> str:
    """Diff text of an item, falling back to markup when the text is empty."""
    source = _first_matched(item.contents)
    if source is None:
        return item.text or item.html or ''
    return source.text or source.html or ''


def build_file_change(item: ItemSnapshot, content_limit: int = DEFAULT_CONTENT_LIMIT) -> Optional[FileChange]:
    """File change record for an item, or None when the item has no name."""
    file_name = resolve_file_name(item)
    if not file_name or file_name == UNKNOWN_FILE:
        return None

    content = resolve_content(item)
    return FileChange(
        file_name=file_name,
        change_type=resolve_change_type(item),
        has_changes=len(content) > 0,
        content=content[:content_limit],
    )


def extract_file_changes(items: Iterable[ItemSnapshot],
                         content_limit: int = DEFAULT_CONTENT_LIMIT) -> List[FileChange]:
    """Records for every named item, in document order."""
    changes = []
    for item in items:
        change = build_file_change(item, content_limit)
        if change is not None:
            changes.append(change)
    return changes


def pick_summary(candidates: Iterable[Optional[str]]) -> str:
    """First non-empty summary text across the summary cascade."""
    for text in candidates:
        if text and text.strip():
            return text.strip()
    return NO_SUMMARY


def innermost_texts(matches: Iterable[dict]) -> List[Optional[str]]:
    """Texts of the matches that do not enclose another match, in document order."""
    return [match.get('text') for match in matches if not match.get('enclosesMatch')]


def collect_breaking_changes(groups: Iterable[Iterable[Optional[str]]]) -> List[str]:
    """Union of breaking-change texts, exact duplicates dropped, first seen first."""
    changes: List[str] = []
    seen = set()
    for texts in groups:
        for text in texts:
            text = (text or '').strip()
            if text and text not in seen:
                seen.add(text)
                changes.append(text)
    return changes


def names_match(current: str, target: str) -> bool:
    """Whether an item named `current` answers a lookup for `target`."""
    if not current:
        return False
    return current == target or current.endswith(target) or target.endswith(current)


def find_file_diff(items: Iterable[ItemSnapshot], request: FileDiffRequest) -> FileDiffResult:
    """First item matching the requested file; diff content is not truncated."""
    for item in items:
        current = resolve_file_name(item, use_sentinels=False)
        if not names_match(current, request.file_name):
            continue
        return FileDiffResult(
            from_version=request.from_version,
            to_version=request.to_version,
            file_name=current,
            found=True,
            change_type=resolve_change_type(item),
            diff=resolve_content(item),
        )
    return FileDiffResult.not_found(request)


def build_upgrade_result(request: UpgradeRequest,
                         url: str,
                         items: Iterable[ItemSnapshot],
                         summary_texts: Iterable[Optional[str]],
                         breaking_texts: Iterable[Iterable[Optional[str]]],
                         content_limit: int = DEFAULT_CONTENT_LIMIT) -> UpgradeResult:
    """Assemble the full-page result from page snapshots."""
    return UpgradeResult(
        from_version=request.from_version,
        to_version=request.to_version,
        package_name=request.package_name,
        project_name=request.project_name,
        url=url,
        summary=pick_summary(summary_texts),
        breaking_changes=collect_breaking_changes(breaking_texts),
        file_changes=extract_file_changes(items, content_limit),
    )
