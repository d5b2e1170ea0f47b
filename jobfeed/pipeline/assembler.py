"""
Final page selection and result packaging.
"""

from typing import List, Sequence

from jobfeed.config.settings import settings
from jobfeed.core.models import CanonicalPosting, SearchResult

ELLIPSIS = "..."


def take_page(postings: Sequence[CanonicalPosting], page_size: int) -> List[CanonicalPosting]:
    """Prefix truncation, no reordering."""
    return list(postings[: max(0, page_size)])


def truncate_description(text: str, max_chars: int) -> str:
    if max_chars <= 0 or len(text) <= max_chars:
        return text
    return text[: max(0, max_chars - len(ELLIPSIS))].rstrip() + ELLIPSIS


def assemble_result(
    total_fetched: int,
    matched: Sequence[CanonicalPosting],
    page_size: int,
    description_max_chars: int = settings.DESCRIPTION_MAX_CHARS,
) -> SearchResult:
    page = take_page(matched, page_size)
    for posting in page:
        posting.description = truncate_description(posting.description, description_max_chars)

    return SearchResult(
        total_fetched=total_fetched,
        total_matched=len(matched),
        returned=len(page),
        postings=page,
    )
