"""Validate tool calls, run them, and wrap the outcome in a text envelope."""

from dataclasses import dataclass
from typing import Any, Dict, List, Optional

from ..core.scraper import UpgradeScraper
from ..errors import InvalidRequestError
from ..models import DEFAULT_PACKAGE_NAME, DEFAULT_PROJECT_NAME, FileDiffRequest, UpgradeRequest
from ..storage.json_storage import JSONStorage


GET_UPGRADE_INFO = 'get_upgrade_info'
GET_FILE_DIFF = 'get_file_diff'

_VERSION_PROPERTIES = {
    'fromVersion': {
        'type': 'string',
        'description': 'Source React Native version (e.g., "0.70.14")',
    },
    'toVersion': {
        'type': 'string',
        'description': 'Target React Native version (e.g., "0.74.0")',
    },
}

_PROJECT_PROPERTIES = {
    'packageName': {
        'type': 'string',
        'default': DEFAULT_PACKAGE_NAME,
        'description': 'Package name for the project',
    },
    'projectName': {
        'type': 'string',
        'default': DEFAULT_PROJECT_NAME,
        'description': 'Project name',
    },
}

TOOLS: List[Dict[str, Any]] = [
    {
        'name': GET_UPGRADE_INFO,
        'title': 'Get React Native Upgrade Information',
        'description': 'Extract React Native upgrade information between two versions',
        'inputSchema': {
            'type': 'object',
            'properties': {**_VERSION_PROPERTIES, **_PROJECT_PROPERTIES},
            'required': ['fromVersion', 'toVersion'],
        },
    },
    {
        'name': GET_FILE_DIFF,
        'title': 'Get Specific File Diff',
        'description': 'Get specific file differences for React Native upgrade',
        'inputSchema': {
            'type': 'object',
            'properties': {
                **_VERSION_PROPERTIES,
                'fileName': {
                    'type': 'string',
                    'description': 'Specific file to get diff for (e.g., "package.json", "android/build.gradle")',
                },
                **_PROJECT_PROPERTIES,
            },
            'required': ['fromVersion', 'toVersion', 'fileName'],
        },
    },
]


@dataclass
class ToolResponse:
    """Text envelope returned to the caller."""
    text: str
    is_error: bool = False
    payload: Optional[Dict] = None

    @classmethod
    def success(cls, payload: Dict) -> 'ToolResponse':
        return cls(text=JSONStorage.dumps(payload), payload=payload)

    @classmethod
    def failure(cls, error: BaseException) -> 'ToolResponse':
        return cls(text=f"Error: {error}", is_error=True)


def _required(arguments: Dict, key: str) -> str:
    value = arguments.get(key)
    if not isinstance(value, str) or not value.strip():
        raise InvalidRequestError(f"{key} is required and must be a non-empty string")
    return value


def _optional(arguments: Dict, key: str, default: str) -> str:
    value = arguments.get(key)
    if value is None:
        return default
    if not isinstance(value, str):
        raise InvalidRequestError(f"{key} must be a string")
    return value


def parse_upgrade_request(arguments: Optional[Dict]) -> UpgradeRequest:
    """Arguments of `get_upgrade_info` as a request, defaults applied."""
    arguments = arguments or {}
    return UpgradeRequest(
        from_version=_required(arguments, 'fromVersion'),
        to_version=_required(arguments, 'toVersion'),
        package_name=_optional(arguments, 'packageName', DEFAULT_PACKAGE_NAME),
        project_name=_optional(arguments, 'projectName', DEFAULT_PROJECT_NAME),
    )


def parse_file_diff_request(arguments: Optional[Dict]) -> FileDiffRequest:
    """Arguments of `get_file_diff` as a request, defaults applied."""
    arguments = arguments or {}
    return FileDiffRequest(
        from_version=_required(arguments, 'fromVersion'),
        to_version=_required(arguments, 'toVersion'),
        file_name=_required(arguments, 'fileName'),
        package_name=_optional(arguments, 'packageName', DEFAULT_PACKAGE_NAME),
        project_name=_optional(arguments, 'projectName', DEFAULT_PROJECT_NAME),
    )


class ToolDispatcher:
    """Route named tool calls to the scraper.

    Requests are validated before the scraper (and therefore the browser)
    is touched. Every exception ends up as an error envelope.
    """

    def __init__(self, scraper: UpgradeScraper):
        self.scraper = scraper

    async def call(self, name: str, arguments: Optional[Dict]) -> ToolResponse:
        try:
            if name == GET_UPGRADE_INFO:
                result = await self.scraper.get_upgrade_info(parse_upgrade_request(arguments))
            elif name == GET_FILE_DIFF:
                result = await self.scraper.get_file_diff(parse_file_diff_request(arguments))
            else:
                raise InvalidRequestError(f"Unknown tool: {name}")
        except Exception as e:
            self.scraper.config.log(f"  ✗ {name} failed: {e}")
            return ToolResponse.failure(e)

        return ToolResponse.success(result.to_dict())
