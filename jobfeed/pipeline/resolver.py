"""
Resolve an upstream body of unknown shape into a flat list of raw records.

Shapes seen in the wild: a JSON array, a JSON object with the array under
`elements`/`jobs`/`data`, raw HTML, and a JSON object wrapping HTML.
"""

import json
import logging
from typing import Any, List, Mapping

from jobfeed.core.models import RawRecord, UpstreamResponse
from jobfeed.pipeline.extraction.html import extract_records_from_html

logger = logging.getLogger(__name__)

# Envelope keys holding the record list, in priority order
RECORD_LIST_KEYS = ("elements", "jobs", "data")

# Envelope keys that may carry an HTML fragment
MARKUP_KEYS = ("html", "body", "content", "markup")


def _is_markup(text: str) -> bool:
    return text.lstrip().startswith("<")


def _resolve_mapping(body: Mapping[str, Any]) -> List[RawRecord]:
    for key in RECORD_LIST_KEYS:
        value = body.get(key)
        if isinstance(value, (list, tuple)):
            return list(value)

    for key in MARKUP_KEYS:
        value = body.get(key)
        if isinstance(value, str) and _is_markup(value):
            return extract_records_from_html(value)

    text = json.dumps(body, default=str)
    if _is_markup(text):
        return extract_records_from_html(text)

    logger.info(f"Unrecognized envelope with keys {sorted(body.keys())[:10]}")
    return []


def _resolve_text(text: str) -> List[RawRecord]:
    stripped = text.strip()
    # Text bodies are sometimes JSON served with an HTML content type
    if stripped[:1] in ("[", "{"):
        try:
            parsed = json.loads(stripped)
        except json.JSONDecodeError:
            parsed = None
        if isinstance(parsed, (list, tuple)):
            return list(parsed)
        if isinstance(parsed, Mapping):
            return _resolve_mapping(parsed)

    return extract_records_from_html(text)


def resolve_raw_records(response: UpstreamResponse) -> List[RawRecord]:
    """
    Return the raw records carried by an upstream response.
    The status code is not consulted: upstream sometimes returns usable data
    alongside a non-2xx status. Never raises.
    """
    body = response.body
    if not response.succeeded:
        logger.warning(
            f"Upstream returned status {response.status_code}; processing body anyway"
        )

    try:
        if isinstance(body, (bytes, bytearray)):
            body = bytes(body).decode("utf-8", errors="replace")

        if isinstance(body, (list, tuple)):
            records = list(body)
        elif isinstance(body, Mapping):
            records = _resolve_mapping(body)
        elif isinstance(body, str):
            records = _resolve_text(body)
        else:
            logger.info(f"No usable body (type: {type(body).__name__})")
            records = []
    except Exception as e:
        logger.warning(f"Failed to resolve upstream body: {e}")
        return []

    logger.info(f"Resolved {len(records)} raw records")
    return records
