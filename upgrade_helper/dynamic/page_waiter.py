"""Bounded waits standing in for a real "page ready" signal."""

from ..extractors.selectors import DIFF_READY, FORM_INPUT, SUBMIT_BUTTON


class PageWaiter:
    """Waits between the steps of a request, each bounded by configuration."""

    def __init__(self, session):
        self.session = session
        self.config = session.config

    async def wait_for_form(self):
        """At least one input must exist before the form is filled."""
        await self.session.wait_for_selector(FORM_INPUT, timeout=self.config.form_timeout)

    async def settle(self):
        """Fixed grace period for the reactive re-render after filling."""
        await self.session.pause(self.config.settle_delay)

    async def submit(self) -> bool:
        """Click a submit-like button if the page has one."""
        button = await self.session.page.query_selector(SUBMIT_BUTTON)
        if not button:
            self.config.log("  ⚠ No submit button, relying on live update")
            return False
        await button.click()
        self.config.log("  ✓ Submitted form")
        return True

    async def wait_for_diff(self):
        """A diff container must render before extraction starts."""
        await self.session.wait_for_selector(DIFF_READY, timeout=self.config.diff_timeout)
