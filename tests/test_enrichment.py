"""Sequential detail-page enrichment against fake browser pages"""

import json

import pytest

from fakes import FakeContext
from jobfeed.core.models import CanonicalPosting
from jobfeed.adapters.linkedin.enrichment import enrich_descriptions
from jobfeed.pipeline.extraction.detail import extract_description

DETAIL_HTML = """
<html><body>
<section class="description">
  <div class="show-more-less-html__markup">
    <p>Provide <strong>tier 1</strong> help desk support</p>
    <ul><li>Reset passwords</li><li>Image laptops</li></ul>
  </div>
</section>
</body></html>
"""

JSON_LD_HTML = """
<html><head>
<script type="application/ld+json">{"@type": "BreadcrumbList"}</script>
<script type="application/ld+json">%s</script>
</head><body><div class="description__text">Fallback text</div></body></html>
""" % json.dumps(
    {
        "@type": "JobPosting",
        "title": "Service Desk Analyst",
        "description": "&lt;p&gt;Own the service desk queue&lt;/p&gt;",
    }
)


def test_extract_description_from_markup():
    text = extract_description(DETAIL_HTML)
    assert text == "Provide tier 1 help desk support Reset passwords Image laptops"


def test_extract_description_prefers_json_ld():
    assert extract_description(JSON_LD_HTML) == "Own the service desk queue"


def test_extract_description_missing():
    assert extract_description("<html><body><p>Sign in</p></body></html>") == ""


@pytest.mark.asyncio
async def test_enrichment_is_sequential_and_isolated():
    postings = [
        CanonicalPosting(position="A", url="https://x.example/a"),
        CanonicalPosting(position="B", url="https://x.example/b", description="kept"),
        CanonicalPosting(position="C", url=""),
        CanonicalPosting(position="D", url="https://x.example/d", description="x" * 500),
    ]
    context = FakeContext(
        pages={
            "https://x.example/a": DETAIL_HTML,
            "https://x.example/b": RuntimeError("net::ERR_CONNECTION_RESET"),
            "https://x.example/d": DETAIL_HTML,
        }
    )

    enriched = await enrich_descriptions(context, postings, timeout_seconds=2, min_delay=0, max_delay=0)

    assert enriched == 1
    assert postings[0].description.startswith("Provide tier 1 help desk support")
    # Failure leaves the original description alone
    assert postings[1].description == "kept"
    # Longer existing descriptions are not replaced
    assert postings[3].description == "x" * 500
    # Postings without a URL are skipped, the rest are visited in order
    assert context.visited == ["https://x.example/a", "https://x.example/b", "https://x.example/d"]
    assert all(page.closed for page in context.opened)


@pytest.mark.asyncio
async def test_enrichment_timeout_is_per_item():
    postings = [
        CanonicalPosting(position="Slow", url="https://x.example/slow"),
        CanonicalPosting(position="Fast", url="https://x.example/fast"),
    ]
    context = FakeContext(
        pages={"https://x.example/slow": DETAIL_HTML, "https://x.example/fast": DETAIL_HTML},
        slow_urls={"https://x.example/slow"},
    )

    enriched = await enrich_descriptions(context, postings, timeout_seconds=0.05, min_delay=0, max_delay=0)

    assert enriched == 1
    assert postings[0].description == ""
    assert postings[1].description != ""
