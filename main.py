import argparse
import asyncio
import json
import logging
import sys

from jobfeed.core.errors import UpstreamUnavailableError
from jobfeed.core.models import SearchOptions
from jobfeed.core.runner import runner

# Configure logging
logging.basicConfig(
    level=logging.INFO,
    format="%(asctime)s [%(levelname)s] %(name)s: %(message)s",
    handlers=[logging.StreamHandler(sys.stdout)],
)

logger = logging.getLogger(__name__)


def parse_options(argv=None) -> SearchOptions:
    parser = argparse.ArgumentParser(description="Search service-desk / MSP job postings.")
    parser.add_argument("--keyword")
    parser.add_argument("--location")
    parser.add_argument("--days", type=int, dest="recency_days")
    parser.add_argument("--page-size", type=int, dest="page_size")
    parser.add_argument("--offset", type=int, dest="page_offset")
    parser.add_argument("--remote", action="store_true", dest="require_remote")
    parser.add_argument("--contract", action="store_true", dest="require_contract")
    parser.add_argument(
        "--term", action="append", dest="extra_required_terms",
        help="Extra required term (repeatable)",
    )
    parser.add_argument("--enrich", action="store_true", dest="enrich_details")

    args = vars(parser.parse_args(argv))
    # Unset flags fall back to SearchOptions defaults
    return SearchOptions(**{key: value for key, value in args.items() if value is not None})


async def main(argv=None) -> int:
    """
    Main entry point.
    """
    options = parse_options(argv)
    try:
        result = await runner.search(options)
    except UpstreamUnavailableError as e:
        logger.error(f"No data: {e}")
        return 1

    print(json.dumps(result.to_dict(), indent=2))
    return 0


if __name__ == "__main__":
    try:
        sys.exit(asyncio.run(main()))
    except KeyboardInterrupt:
        pass
