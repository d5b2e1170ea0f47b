import logging
from contextlib import asynccontextmanager
from typing import AsyncIterator, Optional
from playwright.async_api import (
    async_playwright,
    Browser,
    BrowserContext,
    Page,
    Playwright,
)
from jobfeed.browser.user_agent import UserAgentProvider
from jobfeed.browser.launch import create_browser
from jobfeed.browser.context import create_context

logger = logging.getLogger(__name__)


class BrowserManager:
    """
    Manages the lifecycle of the Playwright browser and context.
    """

    _playwright: Optional[Playwright] = None
    _browser: Optional[Browser] = None
    _context: Optional[BrowserContext] = None

    @classmethod
    async def initialize(cls):
        """
        Initializes the browser and context if not already running.
        """
        UserAgentProvider.initialize()

        if cls._playwright is None:
            cls._playwright = await async_playwright().start()
            logger.info("Playwright started.")

        if cls._browser is None:
            cls._browser = await create_browser(cls._playwright)

        if cls._context is None:
            user_agent = UserAgentProvider.get_random()
            logger.info(f"Using User Agent: {user_agent}")

            cls._context = await create_context(cls._browser, user_agent)

    @classmethod
    async def get_context(cls) -> BrowserContext:
        """
        Returns the shared browser context. Initializes if necessary.
        """
        if cls._context is None:
            await cls.initialize()
        return cls._context

    @classmethod
    async def new_page(cls) -> Page:
        context = await cls.get_context()
        return await context.new_page()

    @classmethod
    def is_running(cls) -> bool:
        return cls._context is not None

    @classmethod
    @asynccontextmanager
    async def session(
        cls, context: Optional[BrowserContext] = None
    ) -> AsyncIterator[BrowserContext]:
        """
        Yield a context for one search.

        An injected context is yielded untouched and left open for its owner.
        Otherwise the shared context is used, and the browser is shut down on
        exit only if this session was the one that started it.
        """
        if context is not None:
            yield context
            return

        started_here = not cls.is_running()
        try:
            yield await cls.get_context()
        finally:
            if started_here:
                await cls.close()

    @classmethod
    async def close(cls):
        """
        Closes the browser and stops Playwright.
        """
        if cls._context:
            await cls._context.close()
            cls._context = None
            logger.info("Browser context closed.")

        if cls._browser:
            await cls._browser.close()
            cls._browser = None
            logger.info("Browser closed.")

        if cls._playwright:
            await cls._playwright.stop()
            cls._playwright = None
            logger.info("Playwright stopped.")
