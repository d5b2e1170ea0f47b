"""
Search URL construction for the LinkedIn guest job search.
"""

import urllib.parse

from jobfeed.adapters.linkedin.config import (
    SEARCH_URL,
    REMOTE_WORKPLACE_CODE,
    CONTRACT_JOB_TYPE_CODE,
    SECONDS_PER_DAY,
)
from jobfeed.core.models import SearchOptions


def build_search_url(options: SearchOptions) -> str:
    """
    Build the guest search URL for a single page of results.
    Remote/contract flags are passed upstream as hints only; the relevance
    filter still applies its own soft constraints afterwards.
    """
    params = {
        "keywords": options.keyword,
        "location": options.location,
        "f_TPR": f"r{options.recency_days * SECONDS_PER_DAY}",
        "start": options.page_offset,
    }
    if options.require_remote:
        params["f_WT"] = REMOTE_WORKPLACE_CODE
    if options.require_contract:
        params["f_JT"] = CONTRACT_JOB_TYPE_CODE
    return f"{SEARCH_URL}?{urllib.parse.urlencode(params)}"
