import asyncio
import json
import logging

from jobfeed.browser.manager import BrowserManager
from jobfeed.core.models import SearchOptions
from jobfeed.core.runner import Runner

# Configure logging
logging.basicConfig(level=logging.INFO)


async def main():
    print("Initializing BrowserManager...")
    await BrowserManager.initialize()

    page = await BrowserManager.new_page()
    ua = await page.evaluate("navigator.userAgent")
    print(f"Verified User Agent: {ua}")
    await page.close()

    context = await BrowserManager.get_context()
    options = SearchOptions(keyword="help desk technician", location="United States", pageSize=5)
    result = await Runner(context=context).search(options)
    print(json.dumps(result.to_dict(), indent=2))

    await BrowserManager.close()
    print("Browser closed.")


if __name__ == "__main__":
    asyncio.run(main())
