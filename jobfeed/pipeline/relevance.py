"""
Relevance filtering and scoring of normalized postings.

Tiers, in order:
  1. strict weighted scoring (or a single boolean pass in "simple" mode)
  2. a fuzzy pass over required + broader terms when tier 1 finds nothing
  3. soft remote / contract constraints that never empty a non-empty list
"""

import logging
import re
from typing import Iterable, List, Pattern, Sequence

from jobfeed.config.vocabulary import DEFAULT_VOCABULARY, Vocabulary
from jobfeed.core.models import CanonicalPosting

logger = logging.getLogger(__name__)

REQUIRED_WEIGHT = 10
BROADER_WEIGHT = 5
REMOTE_WEIGHT = 2
REMOTE_LOCATION_BONUS = 3

SCORED_MODE = "scored"
SIMPLE_MODE = "simple"

_NON_WORD = re.compile(r"[\W_]+")


def fold(text: str) -> str:
    """Case-fold and replace punctuation runs with single spaces."""
    return _NON_WORD.sub(" ", (text or "").casefold()).strip()


def compile_terms(terms: Iterable[str]) -> Pattern:
    """
    Compile terms into one word-bounded alternation over folded text.
    An empty term list compiles to a pattern that never matches.
    """
    folded = sorted({fold(term) for term in terms if fold(term)}, key=len, reverse=True)
    if not folded:
        return re.compile(r"(?!x)x")
    alternation = "|".join(re.escape(term) for term in folded)
    return re.compile(rf"(?<!\w)(?:{alternation})(?!\w)")


def matching_text(posting: CanonicalPosting) -> str:
    return fold(
        " ".join(
            [
                posting.position,
                posting.company,
                posting.location,
                posting.description,
                posting.url,
            ]
        )
    )


class RelevanceFilter:
    """
    Filters and ranks postings against an injected Vocabulary.
    """

    def __init__(self, vocabulary: Vocabulary = DEFAULT_VOCABULARY, mode: str = SCORED_MODE):
        if mode not in (SCORED_MODE, SIMPLE_MODE):
            raise ValueError(f"Unknown relevance mode '{mode}'")
        self.vocabulary = vocabulary
        self.mode = mode
        self._required = compile_terms(vocabulary.required)
        self._broader = compile_terms(vocabulary.broader)
        self._remote = compile_terms(vocabulary.remote)
        self._contract = compile_terms(vocabulary.contract)

    # --- Matching ---

    def score(self, posting: CanonicalPosting) -> int:
        text = matching_text(posting)
        score = 0
        if self._required.search(text):
            score += REQUIRED_WEIGHT
        if self._broader.search(text):
            score += BROADER_WEIGHT
        if self._remote.search(text):
            score += REMOTE_WEIGHT
        if "remote" in posting.location.lower():
            score += REMOTE_LOCATION_BONUS
        return score

    def is_remote(self, posting: CanonicalPosting) -> bool:
        return bool(
            self._remote.search(matching_text(posting))
            or self._remote.search(fold(posting.location))
        )

    def is_contract(self, posting: CanonicalPosting) -> bool:
        return bool(self._contract.search(matching_text(posting)))

    # --- Tiers ---

    def strict_pass(self, postings: Sequence[CanonicalPosting]) -> List[CanonicalPosting]:
        if self.mode == SIMPLE_MODE:
            return [p for p in postings if self._required.search(matching_text(p))]

        scored = [(self.score(p), p) for p in postings]
        # sorted() is stable, so ties keep upstream order
        ranked = sorted((pair for pair in scored if pair[0] > 0), key=lambda pair: -pair[0])
        return [posting for _, posting in ranked]

    def fuzzy_pass(
        self, postings: Sequence[CanonicalPosting], limit: int
    ) -> List[CanonicalPosting]:
        matches = []
        for posting in postings:
            text = matching_text(posting)
            if self._required.search(text) or self._broader.search(text):
                matches.append(posting)
                if len(matches) >= limit:
                    break
        return matches

    def _soft_constraint(self, postings, predicate, label: str) -> List[CanonicalPosting]:
        narrowed = [p for p in postings if predicate(p)]
        if postings and not narrowed:
            logger.info(f"No {label} matches among {len(postings)} postings; constraint not applied")
            return list(postings)
        return narrowed

    def apply(
        self,
        postings: Sequence[CanonicalPosting],
        page_size: int,
        require_remote: bool = False,
        require_contract: bool = False,
    ) -> List[CanonicalPosting]:
        """
        Run every tier and annotate isRemote/isContract on the survivors.
        """
        results = self.strict_pass(postings)
        logger.info(f"Strict pass kept {len(results)}/{len(postings)} postings")

        if not results:
            results = self.fuzzy_pass(postings, page_size)
            logger.info(f"Fuzzy pass kept {len(results)}/{len(postings)} postings")

        if require_remote:
            results = self._soft_constraint(results, self.is_remote, "remote")
        if require_contract:
            results = self._soft_constraint(results, self.is_contract, "contract")

        for posting in results:
            posting.is_remote = self.is_remote(posting)
            posting.is_contract = self.is_contract(posting)

        return results
