import logging
from typing import Optional

from playwright.async_api import BrowserContext

from jobfeed.browser.manager import BrowserManager
from jobfeed.config.vocabulary import DEFAULT_VOCABULARY, Vocabulary
from jobfeed.core.models import SearchOptions, SearchResult
from jobfeed.adapters.linkedin.fetch import fetch_listing_page
from jobfeed.adapters.linkedin.enrichment import enrich_descriptions
from jobfeed.pipeline.aggregate import process_response
from jobfeed.pipeline.assembler import assemble_result, take_page

logger = logging.getLogger(__name__)


class Runner:
    """
    Orchestrates one search: fetch, pipeline, optional enrichment, assembly.

    When no context is injected the shared BrowserManager session is used.
    """

    def __init__(
        self,
        context: Optional[BrowserContext] = None,
        vocabulary: Vocabulary = DEFAULT_VOCABULARY,
    ):
        self.context = context
        self.vocabulary = vocabulary

    async def search(self, options: SearchOptions) -> SearchResult:
        """
        Run a search. Raises UpstreamUnavailableError when the listing page
        cannot be fetched; every other failure degrades to fewer results.
        """
        async with BrowserManager.session(self.context) as context:
            logger.info(
                f"Starting search (Query: {options.keyword}, Location: {options.location}, "
                f"Remote: {options.require_remote}, Contract: {options.require_contract})"
            )

            response = await fetch_listing_page(context, options)
            matched, total_fetched = process_response(response, options, self.vocabulary)

            if options.enrich_details:
                await enrich_descriptions(context, take_page(matched, options.page_size))

            result = assemble_result(total_fetched, matched, options.page_size)
            logger.info(
                f"Search complete: fetched {result.total_fetched}, "
                f"matched {result.total_matched}, returned {result.returned}"
            )
            return result


runner = Runner()
