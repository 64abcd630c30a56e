"""Exceptions raised while driving the upgrade helper page."""


class UpgradeHelperError(Exception):
    """Base class for every failure reported back to a caller."""


class InvalidRequestError(UpgradeHelperError):
    """Tool arguments are missing, empty or of the wrong type."""


class BrowserLaunchError(UpgradeHelperError):
    """Playwright could not start a browser."""


class NavigationError(UpgradeHelperError):
    """The upgrade helper page failed to load."""


class PageTimeoutError(UpgradeHelperError):
    """A bounded wait for a selector expired."""

    def __init__(self, selector: str, timeout: int):
        self.selector = selector
        self.timeout = timeout
        super().__init__(f"Timeout {timeout}ms exceeded waiting for selector '{selector}'")
