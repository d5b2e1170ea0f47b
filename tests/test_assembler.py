from jobfeed.core.models import CanonicalPosting
from jobfeed.pipeline.assembler import assemble_result, take_page, truncate_description


def test_take_page_is_prefix():
    postings = [CanonicalPosting(position=str(i)) for i in range(5)]

    assert [p.position for p in take_page(postings, 3)] == ["0", "1", "2"]
    assert take_page(postings, 0) == []
    assert len(take_page(postings, 50)) == 5


def test_truncate_description():
    assert truncate_description("short", 10) == "short"
    assert truncate_description("a" * 20, 10) == "aaaaaaa..."
    assert len(truncate_description("word " * 100, 50)) <= 50


def test_assemble_counts_and_truncation():
    matched = [CanonicalPosting(position=str(i), description="x" * 40) for i in range(4)]
    result = assemble_result(total_fetched=9, matched=matched, page_size=2, description_max_chars=10)

    assert result.total_fetched == 9
    assert result.total_matched == 4
    assert result.returned == 2
    assert [p.position for p in result.postings] == ["0", "1"]
    assert all(len(p.description) == 10 for p in result.postings)


def test_empty_result_is_valid():
    result = assemble_result(total_fetched=0, matched=[], page_size=10)

    assert result.to_dict() == {"totalFetched": 0, "totalMatched": 0, "returned": 0, "postings": []}
