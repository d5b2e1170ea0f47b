"""
LinkedIn-specific constants and configuration.
"""

from jobfeed.config.settings import settings

# Base URLs
BASE_URL = settings.UPSTREAM_BASE_URL.rstrip("/")
SEARCH_URL = f"{BASE_URL}/jobs-guest/jobs/api/seeMoreJobPostings/search"

# Upstream filter codes
REMOTE_WORKPLACE_CODE = "2"  # f_WT
CONTRACT_JOB_TYPE_CODE = "C"  # f_JT

SECONDS_PER_DAY = 86400
