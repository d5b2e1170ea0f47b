from dataclasses import dataclass, field
from typing import Any, Dict, FrozenSet, List, Optional

from pydantic import BaseModel, ConfigDict, Field, field_validator

from jobfeed.config.settings import settings

SALARY_NOT_SPECIFIED = "Not specified"

# Raw records arrive with no guaranteed keys
RawRecord = Dict[str, Any]


@dataclass
class CanonicalPosting:
    """
    Canonical posting model produced by the normalizer.
    """

    position: str = ""
    company: str = ""
    location: str = ""
    posted_date: str = ""
    posted_ago: str = ""
    salary: str = SALARY_NOT_SPECIFIED
    url: str = ""
    company_logo_url: str = ""
    company_url: str = ""
    description: str = ""
    is_remote: bool = False
    is_contract: bool = False
    id: str = ""

    def to_dict(self) -> Dict[str, Any]:
        return {
            "id": self.id,
            "position": self.position,
            "company": self.company,
            "location": self.location,
            "postedDate": self.posted_date,
            "postedAgo": self.posted_ago,
            "salary": self.salary,
            "url": self.url,
            "companyLogoUrl": self.company_logo_url,
            "companyUrl": self.company_url,
            "description": self.description,
            "isRemote": self.is_remote,
            "isContract": self.is_contract,
        }


@dataclass
class UpstreamResponse:
    """
    A completed upstream exchange. `body` is whatever the transport produced:
    decoded JSON, text, raw bytes, or None.
    """

    succeeded: bool
    status_code: int
    body: Any = None


@dataclass
class SearchResult:
    total_fetched: int = 0
    total_matched: int = 0
    returned: int = 0
    postings: List[CanonicalPosting] = field(default_factory=list)

    def to_dict(self) -> Dict[str, Any]:
        return {
            "totalFetched": self.total_fetched,
            "totalMatched": self.total_matched,
            "returned": self.returned,
            "postings": [posting.to_dict() for posting in self.postings],
        }


class SearchOptions(BaseModel):
    """
    Resolved search options. Accepts both the camelCase wire names and the
    Python attribute names; out-of-range values are clamped, not rejected.
    """

    model_config = ConfigDict(populate_by_name=True, frozen=True)

    keyword: str = settings.DEFAULT_KEYWORD
    location: str = settings.DEFAULT_LOCATION
    recency_days: int = Field(settings.DEFAULT_RECENCY_DAYS, alias="recencyDays")
    page_size: int = Field(settings.DEFAULT_PAGE_SIZE, alias="pageSize")
    page_offset: int = Field(0, alias="pageOffset")
    require_remote: bool = Field(False, alias="requireRemote")
    require_contract: bool = Field(False, alias="requireContract")
    extra_required_terms: FrozenSet[str] = Field(
        default_factory=frozenset, alias="extraRequiredTerms"
    )
    enrich_details: bool = Field(False, alias="enrichDetails")

    @field_validator("keyword", mode="before")
    @classmethod
    def _default_keyword(cls, value: Optional[str]) -> str:
        value = (value or "").strip()
        return value or settings.DEFAULT_KEYWORD

    @field_validator("location", mode="before")
    @classmethod
    def _default_location(cls, value: Optional[str]) -> str:
        value = (value or "").strip()
        return value or settings.DEFAULT_LOCATION

    @field_validator("recency_days")
    @classmethod
    def _clamp_recency(cls, value: int) -> int:
        return max(1, value)

    @field_validator("page_size")
    @classmethod
    def _clamp_page_size(cls, value: int) -> int:
        return min(max(value, settings.MIN_PAGE_SIZE), settings.MAX_PAGE_SIZE)

    @field_validator("page_offset")
    @classmethod
    def _clamp_page_offset(cls, value: int) -> int:
        return max(0, value)

    @field_validator("extra_required_terms", mode="before")
    @classmethod
    def _split_terms(cls, value: Any) -> FrozenSet[str]:
        if value is None:
            return frozenset()
        if isinstance(value, str):
            value = value.split(",")
        return frozenset(term.strip() for term in value if term and term.strip())
