"""
Fetch collaborator: one upstream request per search, normalized into an
UpstreamResponse. Transport retries live here, never in the pipeline.
"""

import json
import logging
from typing import Any

from playwright.async_api import BrowserContext

from jobfeed.config.settings import settings
from jobfeed.core.errors import UpstreamUnavailableError
from jobfeed.core.models import SearchOptions, UpstreamResponse
from jobfeed.core.rate_limit import TRANSPORT_ERRORS, with_retry
from jobfeed.adapters.linkedin.pagination import build_search_url

logger = logging.getLogger(__name__)


def decode_body(raw: bytes, content_type: str) -> Any:
    """
    Decode a response body. JSON content types are parsed; everything else
    (and JSON that fails to parse) is returned as text.
    """
    text = raw.decode("utf-8", errors="replace")
    if "json" in content_type.lower():
        try:
            return json.loads(text)
        except json.JSONDecodeError as e:
            logger.warning(f"Body declared as JSON but failed to parse: {e}")
    return text


@with_retry()
async def request_listing_page(context: BrowserContext, url: str) -> UpstreamResponse:
    response = await context.request.get(url, timeout=settings.NAVIGATION_TIMEOUT)
    content_type = response.headers.get("content-type", "")
    body = decode_body(await response.body(), content_type)

    logger.info(
        f"Upstream responded {response.status} ({content_type or 'no content type'})"
    )
    return UpstreamResponse(
        succeeded=response.ok,
        status_code=response.status,
        body=body,
    )


async def fetch_listing_page(
    context: BrowserContext, options: SearchOptions
) -> UpstreamResponse:
    """
    Fetch one page of listings for the given options.
    Raises UpstreamUnavailableError when no response could be obtained.
    """
    url = build_search_url(options)
    logger.info(f"Fetching listings: {url}")
    try:
        return await request_listing_page(context, url)
    except TRANSPORT_ERRORS as e:
        raise UpstreamUnavailableError(f"Upstream request failed: {e}", url=url) from e
