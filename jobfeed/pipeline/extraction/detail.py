"""
Description extraction from a job detail page.
Prefers JSON-LD JobPosting data, falls back to stable CSS selectors.
"""

import json
import logging
from html import unescape
from typing import Any, Dict, Optional

from bs4 import BeautifulSoup

from jobfeed.pipeline.extraction.html import clean_text, first_text
from jobfeed.adapters.linkedin.selectors import DESCRIPTION_SELECTORS, JSON_LD_SELECTOR

logger = logging.getLogger(__name__)


def extract_json_ld(document: BeautifulSoup) -> Optional[Dict[str, Any]]:
    """
    Extract JSON-LD structured data from script tag.
    JSON-LD is stable W3C standard used for SEO.
    """
    for script in document.select(JSON_LD_SELECTOR):
        try:
            data = json.loads(script.string or script.get_text() or "")
        except json.JSONDecodeError:
            continue
        # Check if it's a JobPosting schema
        if isinstance(data, dict) and data.get("@type") == "JobPosting":
            return data
    return None


def extract_description(markup: str) -> str:
    """Extract description text from JSON-LD or the description container."""
    try:
        document = BeautifulSoup(markup, "html.parser")
    except Exception as e:
        logger.warning(f"Failed to parse detail page: {e}")
        return ""

    json_ld = extract_json_ld(document)
    if json_ld and json_ld.get("description"):
        # JSON-LD descriptions are entity-encoded HTML fragments
        fragment = BeautifulSoup(unescape(str(json_ld["description"])), "html.parser")
        text = clean_text(fragment.get_text(" "))
        if text:
            return text

    return first_text(document, DESCRIPTION_SELECTORS)
