"""Best-match and all-matches selection over a pluggable scorer."""

from __future__ import annotations

from dataclasses import dataclass
from typing import Any, Callable, Sequence

from loguru import logger

from fuzzpick.exceptions import NeedleDisappearedError, NeedleNotFoundError
from fuzzpick.utils.scoring import RapidfuzzScorer, Scorer


@dataclass
class ScoredCandidate:
    item: Any
    score: int
    matched_value: str
    index: int


def _identity(item: Any) -> str:
    return item


class Matcher:
    """Thin facade that turns per-candidate scores into search results.

    Args:
        scorer: Object implementing ``score(candidate, query)``. Defaults to
            ``RapidfuzzScorer()``.
    """

    def __init__(self, scorer: Scorer | None = None) -> None:
        self.scorer = scorer if scorer is not None else RapidfuzzScorer()

    @classmethod
    def default(cls) -> Matcher:
        """Create a matcher around the default rapidfuzz scorer."""
        return cls(RapidfuzzScorer())

    def score_all(
        self,
        haystack: Sequence[Any],
        needle: str,
        *,
        key: Callable[[Any], str] | None = None,
    ) -> list[ScoredCandidate]:
        """Score every candidate once, in haystack order.

        Args:
            haystack: Candidates to score.
            needle: The search string.
            key: Function to extract the comparable string from each item.
                Items are used as-is when omitted.

        Returns:
            One ScoredCandidate per item; non-matches carry a score of 0.
        """
        key = key or _identity
        scored: list[ScoredCandidate] = []
        for index, item in enumerate(haystack):
            value = key(item)
            score = self.scorer.score(value, needle) or 0
            scored.append(ScoredCandidate(item=item, score=score, matched_value=value, index=index))
        logger.debug("Scored {} candidates for {!r}", len(scored), needle)
        return scored

    def fuzzy_best(
        self,
        haystack: Sequence[Any],
        needle: str,
        *,
        key: Callable[[Any], str] | None = None,
    ) -> Any:
        """Return the best-scoring candidate.

        Ties go to the candidate that comes first in the haystack.

        Raises:
            NeedleNotFoundError: Every candidate scored zero, or the haystack is empty.
        """
        scored = self.score_all(haystack, needle, key=key)
        if sum(s.score for s in scored) == 0:
            raise NeedleNotFoundError(needle)

        best: ScoredCandidate | None = None
        for candidate in scored:
            if best is None or candidate.score > best.score:
                best = candidate
        if best is None:
            raise NeedleDisappearedError()

        logger.debug("Best match for {!r}: {!r} ({})", needle, best.matched_value, best.score)
        return best.item

    def fuzzy_all(
        self,
        haystack: Sequence[Any],
        needle: str,
        *,
        key: Callable[[Any], str] | None = None,
    ) -> list[Any]:
        """Return all matching candidates, sorted by score ascending.

        The best match is the last element. Equal scores keep haystack order.

        Raises:
            NeedleNotFoundError: Every candidate scored zero, or the haystack is empty.
        """
        matches = self.matches(haystack, needle, key=key)
        return [m.item for m in matches]

    def matches(
        self,
        haystack: Sequence[Any],
        needle: str,
        *,
        key: Callable[[Any], str] | None = None,
    ) -> list[ScoredCandidate]:
        """Like fuzzy_all, but keeps the scores."""
        scored = self.score_all(haystack, needle, key=key)
        if sum(s.score for s in scored) == 0:
            raise NeedleNotFoundError(needle)

        matches = [s for s in scored if s.score != 0]
        matches.sort(key=lambda m: m.score)
        logger.debug("{} of {} candidates matched {!r}", len(matches), len(scored), needle)
        return matches
