"""
Selector-cascade extraction of job cards from search-result markup.

The upstream page structure is unversioned and drifts, so card discovery is an
ordered list of pattern descriptors. The first pattern that finds at least one
card is used for the whole page; later patterns are not tried.
"""

import logging
from dataclasses import dataclass
from typing import List, Optional, Sequence, Tuple

from bs4 import BeautifulSoup, Tag

from jobfeed.core.models import RawRecord
from jobfeed.adapters.linkedin.selectors import (
    CARD_CONTAINER_SELECTORS,
    JOB_DETAIL_ANCHOR_SELECTOR,
    CARD_BLOCK_TAGS,
    TITLE_SELECTORS,
    COMPANY_SELECTORS,
    LOCATION_SELECTORS,
    LINK_SELECTORS,
    POSTED_TIME_SELECTOR,
    SALARY_SELECTOR,
    LOGO_SELECTOR,
    COMPANY_LINK_SELECTOR,
)

logger = logging.getLogger(__name__)


def clean_text(text: Optional[str]) -> str:
    """Collapse all whitespace runs to single spaces."""
    return " ".join((text or "").split())


def _select_one(card: Tag, selector: str) -> Optional[Tag]:
    try:
        return card.select_one(selector)
    except Exception as e:
        logger.debug(f"Selector '{selector}' failed: {e}")
        return None


def first_text(card: Tag, selectors: Sequence[str]) -> str:
    """Try selectors in order, return the first non-empty element text."""
    for selector in selectors:
        element = _select_one(card, selector)
        if element is not None:
            text = clean_text(element.get_text(" "))
            if text:
                return text
    return ""


def first_href(card: Tag, selectors: Sequence[str]) -> str:
    """
    Return the first non-empty href. Relative paths are returned as-is;
    absolutization happens at dedup time.
    """
    if card.name == "a":
        href = (card.get("href") or "").strip()
        if href:
            return href

    for selector in selectors:
        element = _select_one(card, selector)
        if element is not None:
            href = (element.get("href") or "").strip()
            if href:
                return href
    return ""


def _first_anchor_text(card: Tag) -> str:
    anchor = card if card.name == "a" else card.find("a")
    if anchor is None:
        return ""
    return clean_text(anchor.get_text(" "))


def _logo_url(card: Tag) -> str:
    img = _select_one(card, LOGO_SELECTOR)
    if img is None:
        return ""
    for attr in ("data-delayed-url", "data-ghost-url", "src"):
        value = (img.get(attr) or "").strip()
        if value and not value.startswith("data:"):
            return value
    return ""


def extract_card(card: Tag) -> Optional[RawRecord]:
    """
    Pull the record fields out of a single card.
    Returns None when the card has no title, company, or link.
    """
    title = first_text(card, TITLE_SELECTORS) or _first_anchor_text(card)
    company = first_text(card, COMPANY_SELECTORS)
    location = first_text(card, LOCATION_SELECTORS)
    url = first_href(card, LINK_SELECTORS)

    if not (title or company or url):
        return None

    posted_date = ""
    ago_time = ""
    time_elem = _select_one(card, POSTED_TIME_SELECTOR)
    if time_elem is not None:
        posted_date = (time_elem.get("datetime") or "").strip()
        ago_time = clean_text(time_elem.get_text(" "))

    company_link = _select_one(card, COMPANY_LINK_SELECTOR)

    return {
        "position": title,
        "company": company,
        "location": location,
        "url": url,
        "description": "",
        "postedDate": posted_date,
        "agoTime": ago_time,
        "salary": first_text(card, [SALARY_SELECTOR]),
        "companyLogo": _logo_url(card),
        "companyUrl": (company_link.get("href") or "").strip() if company_link else "",
    }


@dataclass(frozen=True)
class CardPattern:
    """
    A card-container pattern: a CSS selector whose matches are the cards.
    """

    name: str
    selector: str

    def find_cards(self, document: BeautifulSoup) -> List[Tag]:
        return document.select(self.selector)

    def extract(self, document: BeautifulSoup) -> Optional[List[RawRecord]]:
        """
        Returns None when the pattern matches nothing, otherwise the records
        recovered from its cards (possibly empty if every card was blank).
        """
        cards = self.find_cards(document)
        if not cards:
            return None

        records = []
        for card in cards:
            try:
                record = extract_card(card)
            except Exception as e:
                logger.debug(f"Failed to extract job card: {e}")
                continue
            if record:
                records.append(record)

        logger.info(
            f"Found {len(cards)} job cards using pattern '{self.name}', "
            f"{len(records)} usable"
        )
        return records


@dataclass(frozen=True)
class AnchorFallbackPattern(CardPattern):
    """
    Last resort: find job-detail anchors and treat each one's nearest
    list-item or block-level ancestor as the card boundary.
    """

    block_tags: Tuple[str, ...] = tuple(CARD_BLOCK_TAGS)

    def find_cards(self, document: BeautifulSoup) -> List[Tag]:
        cards: List[Tag] = []
        seen = set()
        for anchor in document.select(self.selector):
            # Closest li or block ancestor
            card = anchor.find_parent(["li", *self.block_tags]) or anchor
            if id(card) in seen:
                continue
            seen.add(id(card))
            cards.append(card)
        return cards


CARD_PATTERNS: Tuple[CardPattern, ...] = tuple(
    CardPattern(name=selector, selector=selector)
    for selector in CARD_CONTAINER_SELECTORS
) + (AnchorFallbackPattern(name="job-detail anchors", selector=JOB_DETAIL_ANCHOR_SELECTOR),)


def extract_records_from_html(
    markup: str, patterns: Sequence[CardPattern] = CARD_PATTERNS
) -> List[RawRecord]:
    """
    Recover raw records from a search-results document.
    Never raises; a document with no recognizable cards yields [].
    """
    try:
        document = BeautifulSoup(markup, "html.parser")
    except Exception as e:
        logger.warning(f"Failed to parse markup: {e}")
        return []

    for pattern in patterns:
        try:
            records = pattern.extract(document)
        except Exception as e:
            logger.warning(f"Card pattern '{pattern.name}' failed: {e}")
            continue
        if records is not None:
            return records

    logger.warning("No job cards found with any pattern")
    return []
