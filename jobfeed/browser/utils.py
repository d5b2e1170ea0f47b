"""
Browser Utility Functions
"""

import asyncio
import random


async def random_delay(min_seconds: float = 0.5, max_seconds: float = 2.0) -> None:
    """
    Sleep for a random duration between requests to the same host.

    Example:
        await random_delay(1.0, 3.0)  # Wait 1-3 seconds
    """
    delay = max(0.0, random.uniform(min_seconds, max_seconds))
    if delay:
        await asyncio.sleep(delay)
