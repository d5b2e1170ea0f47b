"""
Map raw records of any upstream shape onto CanonicalPosting.

Each canonical field is filled from the first non-empty alias, so upstream
schemas can rename fields between versions without the rest of the pipeline
knowing which shape produced the record.
"""

import logging
import re
from typing import Any, Iterable, List, Mapping, Optional, Sequence

from jobfeed.core.models import CanonicalPosting, RawRecord, SALARY_NOT_SPECIFIED
from jobfeed.pipeline.extraction.html import clean_text

logger = logging.getLogger(__name__)

POSITION_KEYS = ("position", "title", "jobTitle", "name")
COMPANY_KEYS = ("company", "companyName", "subtitle", "hiringOrganization")
LOCATION_KEYS = ("location", "region", "jobLocation", "formattedLocation")
URL_KEYS = ("jobUrl", "applyUrl", "url", "link")
POSTED_DATE_KEYS = ("postedDate", "date", "datePosted", "listedAt", "postedAt")
POSTED_AGO_KEYS = ("agoTime", "postedAgo")
SALARY_KEYS = ("salary", "salaryRange", "compensation")
LOGO_KEYS = ("companyLogoUrl", "companyLogo", "logo")
COMPANY_URL_KEYS = ("companyUrl", "companyLink")
DESCRIPTION_KEYS = ("description", "snippet", "summary")

UNITED_STATES = "United States"
US_TOKEN_PATTERN = re.compile(r"(?<![\w.])(?:U\.S\.A\.|U\.S\.A|U\.S\.|U\.S|USA|US)(?![\w])")


def _as_text(value: Any) -> str:
    if value is None or isinstance(value, bool):
        return ""
    if isinstance(value, str):
        return clean_text(value)
    if isinstance(value, (int, float)):
        return str(value)
    if isinstance(value, Mapping):
        if value.get("name"):
            return _as_text(value["name"])
        address = value.get("address")
        if isinstance(address, Mapping):
            parts = [
                _as_text(address.get(key))
                for key in ("addressLocality", "addressRegion", "addressCountry")
            ]
            return ", ".join(part for part in parts if part)
        return ""
    if isinstance(value, (list, tuple)):
        for item in value:
            text = _as_text(item)
            if text:
                return text
    return ""


def first_value(record: Mapping[str, Any], keys: Sequence[str]) -> str:
    """Return the first non-empty alias value as text."""
    for key in keys:
        text = _as_text(record.get(key))
        if text:
            return text
    return ""


def normalize_location(location: str) -> str:
    """
    Collapse whitespace, expand US abbreviations, and drop repeated
    comma-separated parts ("Remote, US, United States" -> "Remote, United States").
    """
    parts: List[str] = []
    seen = set()
    for part in location.split(","):
        part = US_TOKEN_PATTERN.sub(UNITED_STATES, clean_text(part))
        key = part.casefold()
        if not part or key in seen:
            continue
        seen.add(key)
        parts.append(part)
    return ", ".join(parts)


def normalize_record(record: RawRecord) -> Optional[CanonicalPosting]:
    """
    Build a CanonicalPosting from one raw record.
    Returns None for records with neither a position nor a company.
    """
    if not isinstance(record, Mapping):
        return None

    position = first_value(record, POSITION_KEYS)
    company = first_value(record, COMPANY_KEYS)
    if not position and not company:
        return None

    return CanonicalPosting(
        position=position,
        company=company,
        location=normalize_location(first_value(record, LOCATION_KEYS)),
        posted_date=first_value(record, POSTED_DATE_KEYS),
        posted_ago=first_value(record, POSTED_AGO_KEYS),
        salary=first_value(record, SALARY_KEYS) or SALARY_NOT_SPECIFIED,
        url=first_value(record, URL_KEYS),
        company_logo_url=first_value(record, LOGO_KEYS),
        company_url=first_value(record, COMPANY_URL_KEYS),
        description=first_value(record, DESCRIPTION_KEYS),
    )


def normalize_records(records: Iterable[RawRecord]) -> List[CanonicalPosting]:
    postings = []
    for record in records:
        posting = normalize_record(record)
        if posting is not None:
            postings.append(posting)

    logger.info(f"Normalized {len(postings)} postings")
    return postings
