"""Scrape React Native upgrade diffs from the upgrade helper site.

Components:
    - core: configuration and the per-request scraper
    - dynamic: Playwright session, form filling and page waits
    - extractors: selector cascades and diff extraction
    - server: tool dispatch and the MCP stdio server
"""

__version__ = "1.0.0"
