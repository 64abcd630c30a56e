"""Fill the upgrade helper form by guessing which input is which.

Inputs carry no stable ids, so each one is classified from nearby text:
its previous sibling's text, or its parent's text. The decision table is
evaluated top to bottom and the first row whose keyword appears in the
label (case-sensitive) decides the field:

    row  label contains         field
    1    "current" | "from"     from_version
    2    "upgrade" | "to"       to_version
    3    "app name"             project_name
    4    "package"              package_name

Later rows only apply when earlier ones miss. Labels matching nothing are
left untouched; when several inputs match the same row each of them gets
the value.
"""

from typing import Any, Dict, List, Optional, Tuple

from ..models import UpgradeRequest


FIELD_RULES: Tuple[Tuple[Tuple[str, ...], str], ...] = (
    (('current', 'from'), 'from_version'),
    (('upgrade', 'to'), 'to_version'),
    (('app name',), 'project_name'),
    (('package',), 'package_name'),
)


READ_LABELS_SCRIPT = """
() => Array.from(document.querySelectorAll('input')).map((input) => {
    const sibling = input.previousElementSibling;
    return (sibling && sibling.textContent)
        || (input.parentElement && input.parentElement.textContent)
        || '';
})
"""

# Sets values by position and fires the events React listens for.
WRITE_VALUES_SCRIPT = """
(assignments) => {
    const inputs = document.querySelectorAll('input');
    assignments.forEach(([index, value]) => {
        const input = inputs[index];
        if (!input) return;
        input.value = value;
        input.dispatchEvent(new Event('input', { bubbles: true }));
        input.dispatchEvent(new Event('change', { bubbles: true }));
    });
    return assignments.length;
}
"""


def classify_label(label: str) -> Optional[str]:
    """Field name for an input label, or None when no rule matches."""
    for keywords, field_name in FIELD_RULES:
        if any(keyword in label for keyword in keywords):
            return field_name
    return None


def plan_assignments(labels: List[str], request: UpgradeRequest) -> List[Tuple[int, str]]:
    """(input index, value) pairs for every input whose label classifies."""
    values: Dict[str, str] = {
        'from_version': request.from_version,
        'to_version': request.to_version,
        'project_name': request.project_name,
        'package_name': request.package_name,
    }
    assignments = []
    for index, label in enumerate(labels):
        field_name = classify_label(label or '')
        if field_name is not None:
            assignments.append((index, values[field_name]))
    return assignments


class FormFiller:
    """Write an upgrade request into the form of a Playwright page."""

    def __init__(self, page: Any, log=None):
        self.page = page
        self._log = log or (lambda message: None)

    async def fill(self, request: UpgradeRequest) -> int:
        """Fill every recognised input; returns how many were written."""
        labels = await self.page.evaluate(READ_LABELS_SCRIPT)
        assignments = plan_assignments(labels, request)

        if not assignments:
            self._log(f"  ⚠ None of {len(labels)} input(s) matched a form label")
            return 0

        await self.page.evaluate(WRITE_VALUES_SCRIPT, [list(pair) for pair in assignments])
        self._log(f"  ✓ Filled {len(assignments)} of {len(labels)} input(s)")
        return len(assignments)
