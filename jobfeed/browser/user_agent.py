import logging
from typing import Optional

from fake_useragent import UserAgent

from jobfeed.config.settings import settings

logger = logging.getLogger(__name__)

# Default fallback user agent string
FALLBACK_UA = (
    "Mozilla/5.0 (Windows NT 10.0; Win64; x64) "
    "AppleWebKit/537.36 (KHTML, like Gecko) "
    "Chrome/124.0.0.0 Safari/537.36"
)


class UserAgentProvider:
    """
    Picks the desktop user agent the search context presents to the upstream.
    A configured USER_AGENT always wins over the random pick.
    """

    _ua: Optional[UserAgent] = None

    @classmethod
    def initialize(cls):
        if cls._ua is None:
            try:
                cls._ua = UserAgent(
                    browsers=["chrome", "edge"],
                    os=["windows", "macos"],
                    fallback=FALLBACK_UA,
                )
            except Exception as e:
                logger.warning(
                    f"Failed to initialize fake_useragent, using fallback: {e}"
                )

    @classmethod
    def get_random(cls) -> str:
        """
        Return the configured user agent, else a random one, else the fallback.
        """
        if settings.USER_AGENT:
            return settings.USER_AGENT
        if cls._ua:
            return cls._ua.random
        return FALLBACK_UA
