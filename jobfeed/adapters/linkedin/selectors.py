"""
All CSS selectors and URL patterns used against LinkedIn markup.
Centralized here so that selector changes only need to happen in one place.
"""

# --- Search results (guest API fragment and public SERP) ---

# Job card container selectors - tried in order, first one with a match is used
# for the whole page. Most specific/current layouts first, loosest last.
CARD_CONTAINER_SELECTORS = [
    "ul.jobs-search__results-list > li",  # Public SERP list
    "div.base-card.job-search-card",  # Guest API card
    "div.base-search-card",
    "div.job-card-container[data-job-id]",  # Logged-in two-pane layout
    "li.jobs-search-results__list-item",
    "li[data-occludable-job-id]",
    "li.result-card",  # Legacy layout
]

# Anchor fallback when no container selector matches
JOB_DETAIL_PATH_SEGMENT = "/jobs/view/"
JOB_DETAIL_ANCHOR_SELECTOR = f'a[href*="{JOB_DETAIL_PATH_SEGMENT}"]'
CARD_BLOCK_TAGS = ["div", "article", "section"]

# Field selectors within a card (tried in order)
TITLE_SELECTORS = [
    "h3.base-search-card__title",
    ".job-search-card__title",
    ".job-card-list__title",
    "a.job-card-container__link strong",
    "h3",
    '[class*="__title"]',
]

COMPANY_SELECTORS = [
    "h4.base-search-card__subtitle",
    "a.hidden-nested-link",
    ".job-card-container__company-name",
    ".job-card-container__primary-description",
    ".result-card__subtitle",
    "h4",
]

LOCATION_SELECTORS = [
    "span.job-search-card__location",
    ".job-card-container__metadata-item",
    ".job-result-card__location",
    '[class*="location"]',
]

LINK_SELECTORS = [
    "a.base-card__full-link",
    "a.base-card--link",
    "a.job-card-container__link",
    JOB_DETAIL_ANCHOR_SELECTOR,
    # Any other link except company-page links
    'a[href]:not(.hidden-nested-link):not([href*="/company/"])',
]

# Supplementary card fields
POSTED_TIME_SELECTOR = "time"
SALARY_SELECTOR = "span.job-search-card__salary-info"
LOGO_SELECTOR = "img.artdeco-entity-image, img"
COMPANY_LINK_SELECTOR = "h4.base-search-card__subtitle a, a.hidden-nested-link"

# --- Job detail page ---

DESCRIPTION_SELECTORS = [
    "div.show-more-less-html__markup",
    "div.description__text",
    "section.description",
    "#job-details",
    "div.jobs-description__content",
]

# JSON-LD script selector
JSON_LD_SELECTOR = 'script[type="application/ld+json"]'

# --- Job id patterns (dedup fingerprint) ---

# /jobs/view/123 and /jobs/view/help-desk-technician-at-acme-123
JOB_ID_PATH_PATTERN = r"/jobs/view/(?:[^/?#]*?-)?(\d+)(?:[/?#]|$)"
# ?currentJobId=123 / ?jobId=123
JOB_ID_QUERY_PATTERN = r"[?&](?:currentJobId|jobId)=(\d+)"
