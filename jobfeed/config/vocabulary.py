"""
Keyword vocabularies used by the relevance filter.
Kept as immutable data so callers (and tests) can swap in their own set.
"""

from dataclasses import dataclass, replace
from typing import Iterable, Tuple


@dataclass(frozen=True)
class Vocabulary:
    """
    Term lists for relevance matching. Terms are plain phrases, matched
    case-insensitively on word boundaries.
    """

    required: Tuple[str, ...] = ()
    broader: Tuple[str, ...] = ()
    remote: Tuple[str, ...] = ()
    contract: Tuple[str, ...] = ()

    def with_required(self, terms: Iterable[str]) -> "Vocabulary":
        """Return a copy with extra role-identity terms appended to `required`."""
        extra = []
        for term in terms:
            term = (term or "").strip().lower()
            if term and term not in self.required and term not in extra:
                extra.append(term)
        if not extra:
            return self
        return replace(self, required=self.required + tuple(extra))


# Role-identity terms: a hit here means the posting is squarely in scope
REQUIRED_TERMS = (
    "service desk",
    "servicedesk",
    "help desk",
    "helpdesk",
    "msp",
    "managed service provider",
    "managed services",
    "it support",
    "technical support",
    "support technician",
)

# Supporting terms: adjacent roles and seniority markers
BROADER_TERMS = (
    "desktop support",
    "technician",
    "level 1",
    "level 2",
    "tier 1",
    "tier 2",
    "l1",
    "l2",
    "field technician",
    "noc",
    "end user support",
    "support engineer",
    "support specialist",
    "it technician",
    "system administrator",
)

REMOTE_TERMS = (
    "remote",
    "work from home",
    "wfh",
    "hybrid",
    "telecommute",
    "anywhere",
)

CONTRACT_TERMS = (
    "contract",
    "contractor",
    "temp",
    "temporary",
    "freelance",
    "c2c",
    "1099",
    "fixed term",
)

DEFAULT_VOCABULARY = Vocabulary(
    required=REQUIRED_TERMS,
    broader=BROADER_TERMS,
    remote=REMOTE_TERMS,
    contract=CONTRACT_TERMS,
)
