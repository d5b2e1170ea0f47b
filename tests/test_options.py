from jobfeed.config.settings import settings
from jobfeed.core.models import SearchOptions
from jobfeed.adapters.linkedin.pagination import build_search_url


def test_defaults():
    options = SearchOptions()

    assert options.keyword == settings.DEFAULT_KEYWORD
    assert options.location == settings.DEFAULT_LOCATION
    assert options.recency_days == 7
    assert options.page_size == settings.DEFAULT_PAGE_SIZE
    assert options.page_offset == 0
    assert options.require_remote is False
    assert options.require_contract is False
    assert options.extra_required_terms == frozenset()
    assert options.enrich_details is False


def test_wire_names_and_clamping():
    options = SearchOptions(
        keyword="  ",
        pageSize=500,
        pageOffset=-3,
        recencyDays=0,
        requireRemote=True,
        extraRequiredTerms="noc, , field tech",
    )

    assert options.keyword == settings.DEFAULT_KEYWORD
    assert options.page_size == settings.MAX_PAGE_SIZE
    assert options.page_offset == 0
    assert options.recency_days == 1
    assert options.require_remote is True
    assert options.extra_required_terms == frozenset({"noc", "field tech"})

    assert SearchOptions(page_size=0).page_size == settings.MIN_PAGE_SIZE


def test_search_url():
    url = build_search_url(
        SearchOptions(keyword="help desk", location="United States", recencyDays=2, pageOffset=25)
    )

    assert url.startswith("https://www.linkedin.com/jobs-guest/jobs/api/seeMoreJobPostings/search?")
    assert "keywords=help+desk" in url
    assert "location=United+States" in url
    assert "f_TPR=r172800" in url
    assert "start=25" in url
    assert "f_WT" not in url
    assert "f_JT" not in url


def test_search_url_upstream_hints():
    url = build_search_url(SearchOptions(requireRemote=True, requireContract=True))

    assert "f_WT=2" in url
    assert "f_JT=C" in url
