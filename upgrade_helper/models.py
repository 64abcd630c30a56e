"""Request and result types exchanged with callers.

Python attributes are snake_case; `to_dict()` produces the camelCase JSON
payload returned by the tools.
"""

from dataclasses import dataclass, field
from typing import Dict, List, Optional


DEFAULT_PACKAGE_NAME = "com.example.app"
DEFAULT_PROJECT_NAME = "ExampleApp"

CHANGE_ADDED = "added"
CHANGE_MODIFIED = "modified"
CHANGE_DELETED = "deleted"


@dataclass(frozen=True)
class UpgradeRequest:
    """Versions and project identity typed into the upgrade helper form."""
    from_version: str
    to_version: str
    package_name: str = DEFAULT_PACKAGE_NAME
    project_name: str = DEFAULT_PROJECT_NAME


@dataclass(frozen=True)
class FileDiffRequest(UpgradeRequest):
    """Upgrade request narrowed to a single file."""
    file_name: str = ""


@dataclass
class FileChange:
    """One file block scraped from the rendered diff."""
    file_name: str
    change_type: str
    has_changes: bool
    content: str

    def to_dict(self) -> Dict:
        return {
            'fileName': self.file_name,
            'changeType': self.change_type,
            'hasChanges': self.has_changes,
            'content': self.content,
        }


@dataclass
class UpgradeResult:
    """Everything `get_upgrade_info` reports for a version pair."""
    from_version: str
    to_version: str
    package_name: str
    project_name: str
    url: str
    summary: str
    breaking_changes: List[str] = field(default_factory=list)
    file_changes: List[FileChange] = field(default_factory=list)

    @property
    def total_files(self) -> int:
        return len(self.file_changes)

    @property
    def modified_files(self) -> int:
        return self._count(CHANGE_MODIFIED)

    @property
    def added_files(self) -> int:
        return self._count(CHANGE_ADDED)

    @property
    def deleted_files(self) -> int:
        return self._count(CHANGE_DELETED)

    def _count(self, change_type: str) -> int:
        return sum(1 for change in self.file_changes if change.change_type == change_type)

    def to_dict(self) -> Dict:
        """Convert to the JSON payload, counts included."""
        return {
            'fromVersion': self.from_version,
            'toVersion': self.to_version,
            'packageName': self.package_name,
            'projectName': self.project_name,
            'url': self.url,
            'summary': self.summary,
            'breakingChanges': list(self.breaking_changes),
            'fileChanges': [change.to_dict() for change in self.file_changes],
            'totalFiles': self.total_files,
            'modifiedFiles': self.modified_files,
            'addedFiles': self.added_files,
            'deletedFiles': self.deleted_files,
        }


@dataclass
class FileDiffResult:
    """Outcome of a single-file lookup; `found=False` is not an error."""
    from_version: str
    to_version: str
    file_name: str
    found: bool
    change_type: Optional[str] = None
    diff: Optional[str] = None
    message: Optional[str] = None

    @classmethod
    def not_found(cls, request: FileDiffRequest) -> 'FileDiffResult':
        return cls(
            from_version=request.from_version,
            to_version=request.to_version,
            file_name=request.file_name,
            found=False,
            message=(
                f'File "{request.file_name}" not found in the upgrade diff. '
                'Available files can be retrieved using get_upgrade_info.'
            ),
        )

    def to_dict(self) -> Dict:
        if not self.found:
            return {
                'fromVersion': self.from_version,
                'toVersion': self.to_version,
                'fileName': self.file_name,
                'found': False,
                'message': self.message,
            }
        return {
            'fromVersion': self.from_version,
            'toVersion': self.to_version,
            'fileName': self.file_name,
            'changeType': self.change_type,
            'diff': self.diff,
            'found': True,
        }
