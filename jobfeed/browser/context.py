"""
Browser Context Factory

One shared context serves both the listing request (through `context.request`)
and detail pages, so cookies set by the first response carry over.
"""

import logging
from typing import Optional
from playwright.async_api import Browser, BrowserContext

logger = logging.getLogger(__name__)

ACCEPT_HEADER = "application/json,text/html;q=0.9,application/xhtml+xml;q=0.8,*/*;q=0.5"


async def create_context(
    browser: Browser,
    user_agent: Optional[str] = None,
) -> BrowserContext:
    """
    Create a browser context with a content-negotiating Accept header.

    Args:
        browser: Browser instance
        user_agent: Optional custom user agent (None = browser default)

    Returns:
        BrowserContext instance
    """
    context_config = {
        "locale": "en-US",
        "extra_http_headers": {
            "Accept": ACCEPT_HEADER,
            "Accept-Language": "en-US,en;q=0.9",
        },
    }

    if user_agent:
        context_config["user_agent"] = user_agent

    context = await browser.new_context(**context_config)

    logger.info("Browser context created")
    return context
