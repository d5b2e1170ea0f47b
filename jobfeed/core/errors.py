"""Exceptions surfaced to callers of the search runner."""

from typing import Optional


class UpstreamUnavailableError(Exception):
    """
    Raised when the upstream listing page could not be fetched at all.

    Attributes:
        message: Error description
        url: The upstream URL that was requested
    """

    def __init__(self, message: str, url: Optional[str] = None):
        self.message = message
        self.url = url

        parts = [message]
        if url:
            parts.append(f"URL: {url}")

        super().__init__("\n".join(parts))
