"""
Collapse postings that describe the same listing.
Also the single place where relative upstream URLs become absolute.
"""

import logging
import re
from typing import Iterable, List, Tuple

from jobfeed.core.models import CanonicalPosting
from jobfeed.adapters.linkedin.config import BASE_URL
from jobfeed.adapters.linkedin.selectors import JOB_ID_PATH_PATTERN, JOB_ID_QUERY_PATTERN

logger = logging.getLogger(__name__)

_JOB_ID_PATTERNS = [re.compile(JOB_ID_PATH_PATTERN), re.compile(JOB_ID_QUERY_PATTERN)]


def absolutize_url(url: str, base_url: str = BASE_URL) -> str:
    if url.startswith("//"):
        return f"https:{url}"
    if url.startswith("/"):
        return f"{base_url.rstrip('/')}{url}"
    return url


def extract_job_id(url: str) -> str:
    for pattern in _JOB_ID_PATTERNS:
        match = pattern.search(url)
        if match:
            return match.group(1)
    return ""


def dedup_key(posting: CanonicalPosting) -> Tuple[str, str]:
    """
    (kind, value) fingerprint: the numeric job id when the URL carries one,
    else the URL, else position|company.
    """
    if posting.url:
        job_id = extract_job_id(posting.url)
        if job_id:
            return "id", job_id
        return "url", posting.url
    return "name", f"{posting.position.casefold()}|{posting.company.casefold()}"


def deduplicate(
    postings: Iterable[CanonicalPosting], base_url: str = BASE_URL
) -> List[CanonicalPosting]:
    """
    Keep the first posting for each key, preserving the incoming order.
    """
    seen = set()
    unique: List[CanonicalPosting] = []
    dropped = 0
    for posting in postings:
        posting.url = absolutize_url(posting.url, base_url)
        key = dedup_key(posting)
        if key in seen:
            dropped += 1
            continue
        seen.add(key)
        posting.id = key[1]
        unique.append(posting)

    if dropped:
        logger.info(f"Dropped {dropped} duplicate postings")
    return unique
