"""
Optional detail-page enrichment to recover longer descriptions.

Postings are visited one at a time: every request goes to the same upstream
host, which throttles concurrent fan-out.
"""

import asyncio
import logging
from typing import Sequence

from playwright.async_api import BrowserContext

from jobfeed.config.settings import settings
from jobfeed.core.models import CanonicalPosting
from jobfeed.browser.utils import random_delay
from jobfeed.pipeline.extraction.detail import extract_description

logger = logging.getLogger(__name__)


async def fetch_detail_markup(context: BrowserContext, url: str, timeout_ms: int) -> str:
    page = await context.new_page()
    try:
        await page.goto(url, wait_until="domcontentloaded", timeout=timeout_ms)
        return await page.content()
    finally:
        await page.close()


async def enrich_descriptions(
    context: BrowserContext,
    postings: Sequence[CanonicalPosting],
    timeout_seconds: float = settings.ENRICH_TIMEOUT_SECONDS,
    min_delay: float = settings.ENRICH_MIN_DELAY,
    max_delay: float = settings.ENRICH_MAX_DELAY,
) -> int:
    """
    Replace each posting's description with the detail page's, when longer.
    A failure on one posting leaves it unchanged and does not stop the batch.
    Returns the number of postings enriched.
    """
    enriched = 0
    visited = 0
    timeout_ms = int(timeout_seconds * 1000)

    for posting in postings:
        if not posting.url:
            continue

        if visited:
            await random_delay(min_delay, max_delay)
        visited += 1

        try:
            markup = await asyncio.wait_for(
                fetch_detail_markup(context, posting.url, timeout_ms),
                timeout=timeout_seconds,
            )
            description = extract_description(markup)
        except Exception as e:
            logger.warning(f"Failed to enrich {posting.url}: {e}")
            continue

        if len(description) > len(posting.description):
            posting.description = description
            enriched += 1

    logger.info(f"Enriched {enriched}/{visited} postings from detail pages")
    return enriched
