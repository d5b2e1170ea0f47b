"""
Browser Launch Module

Launches the bundled Chromium used for upstream requests and detail pages.
"""

import logging
from playwright.async_api import Browser, Playwright

from jobfeed.config.settings import settings

logger = logging.getLogger(__name__)


async def create_browser(playwright: Playwright) -> Browser:
    """
    Launch a Chromium browser instance.

    Args:
        playwright: Playwright instance

    Returns:
        Browser instance
    """
    browser = await playwright.chromium.launch(headless=settings.HEADLESS)

    logger.info(f"Browser launched (Chromium, Headless: {settings.HEADLESS})")
    return browser
