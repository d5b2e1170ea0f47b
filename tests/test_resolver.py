import json

from jobfeed.core.models import UpstreamResponse
from jobfeed.pipeline.resolver import resolve_raw_records

CARD_HTML = """
<li><div class="base-card job-search-card">
  <a class="base-card__full-link" href="/jobs/view/42"></a>
  <h3 class="base-search-card__title">Help Desk Technician</h3>
  <h4 class="base-search-card__subtitle">Acme</h4>
</div></li>
"""


def ok(body, status=200):
    return UpstreamResponse(succeeded=True, status_code=status, body=body)


def test_list_body_used_directly():
    body = [{"title": "A"}, {"title": "B"}]
    assert resolve_raw_records(ok(body)) == body


def test_envelope_keys_in_priority_order():
    body = {"data": [{"title": "from data"}], "jobs": [{"title": "from jobs"}]}
    assert resolve_raw_records(ok(body)) == [{"title": "from jobs"}]

    body = {"elements": [{"title": "from elements"}], "jobs": [{"title": "from jobs"}]}
    assert resolve_raw_records(ok(body)) == [{"title": "from elements"}]


def test_envelope_key_must_hold_a_list():
    assert resolve_raw_records(ok({"jobs": "none", "count": 0})) == []


def test_envelope_wrapping_html():
    records = resolve_raw_records(ok({"success": True, "html": CARD_HTML}))

    assert len(records) == 1
    assert records[0]["position"] == "Help Desk Technician"


def test_string_body_goes_to_html_engine():
    records = resolve_raw_records(ok(CARD_HTML))
    assert records[0]["url"] == "/jobs/view/42"


def test_bytes_body_decoded():
    records = resolve_raw_records(ok(CARD_HTML.encode("utf-8")))
    assert len(records) == 1


def test_json_text_body_is_parsed():
    text = json.dumps({"jobs": [{"position": "Service Desk Analyst"}]})
    assert resolve_raw_records(ok(text)) == [{"position": "Service Desk Analyst"}]


def test_non_success_status_with_body_is_processed():
    response = UpstreamResponse(succeeded=False, status_code=429, body=[{"title": "X"}])
    assert resolve_raw_records(response) == [{"title": "X"}]


def test_unrecognized_shapes_are_empty():
    assert resolve_raw_records(ok(None)) == []
    assert resolve_raw_records(ok(12345)) == []
    assert resolve_raw_records(ok({"unexpected": {"nested": True}})) == []
    assert resolve_raw_records(ok("<html><body>blocked</body></html>")) == []
