"""
The listing-aggregation pipeline: resolve -> normalize -> filter -> dedupe -> assemble.
"""

import logging
from typing import List, Optional, Tuple

from jobfeed.config.settings import settings
from jobfeed.config.vocabulary import DEFAULT_VOCABULARY, Vocabulary
from jobfeed.core.models import CanonicalPosting, SearchOptions, SearchResult, UpstreamResponse
from jobfeed.pipeline.resolver import resolve_raw_records
from jobfeed.pipeline.normalizer import normalize_records
from jobfeed.pipeline.relevance import RelevanceFilter
from jobfeed.pipeline.dedupe import deduplicate
from jobfeed.pipeline.assembler import assemble_result

logger = logging.getLogger(__name__)


def build_filter(
    options: SearchOptions,
    vocabulary: Vocabulary = DEFAULT_VOCABULARY,
    mode: Optional[str] = None,
) -> RelevanceFilter:
    return RelevanceFilter(
        vocabulary.with_required(options.extra_required_terms),
        mode=mode or settings.RELEVANCE_MODE,
    )


def process_response(
    response: UpstreamResponse,
    options: SearchOptions,
    vocabulary: Vocabulary = DEFAULT_VOCABULARY,
    mode: Optional[str] = None,
) -> Tuple[List[CanonicalPosting], int]:
    """
    Run stages 1-5 and return (matched postings, raw record count).
    Internal failures are logged and produce an empty match list.
    """
    relevance = build_filter(options, vocabulary, mode)
    raw_records = resolve_raw_records(response)
    total_fetched = len(raw_records)

    try:
        postings = normalize_records(raw_records)
        filtered = relevance.apply(
            postings,
            page_size=options.page_size,
            require_remote=options.require_remote,
            require_contract=options.require_contract,
        )
        matched = deduplicate(filtered)
    except Exception as e:
        logger.exception(f"Pipeline failed after resolving {total_fetched} records: {e}")
        return [], total_fetched

    logger.info(f"Pipeline matched {len(matched)} of {total_fetched} fetched records")
    return matched, total_fetched


def aggregate(
    response: UpstreamResponse,
    options: SearchOptions,
    vocabulary: Vocabulary = DEFAULT_VOCABULARY,
    mode: Optional[str] = None,
) -> SearchResult:
    """Run the whole pipeline over one upstream response, without enrichment."""
    matched, total_fetched = process_response(response, options, vocabulary, mode)
    return assemble_result(total_fetched, matched, options.page_size)
