"""Candidate scoring backed by rapidfuzz."""

from __future__ import annotations

from typing import Callable, Protocol, runtime_checkable

from loguru import logger
from rapidfuzz import fuzz, utils
from rapidfuzz.distance import LCSseq

from fuzzpick.exceptions import ValidationError

CASE_SMART = "smart"
CASE_IGNORE = "ignore"
CASE_RESPECT = "respect"

CASE_MODES = (CASE_SMART, CASE_IGNORE, CASE_RESPECT)


@runtime_checkable
class Scorer(Protocol):
    """Anything that can score a candidate against a query.

    Returns a non-negative int (higher is better), or None for no match.
    """

    def score(self, candidate: str, query: str) -> int | None: ...


def validate_case(case: str) -> str:
    """Normalize a case mode name, raising ValidationError if it is unknown."""
    mode = case.strip().lower()
    if mode not in CASE_MODES:
        raise ValidationError(
            f"Unknown case mode: {case!r}",
            hint=f"Use one of: {', '.join(CASE_MODES)}.",
        )
    return mode


class RapidfuzzScorer:
    """Subsequence-gated scorer.

    A candidate matches only if every character of the query occurs in it in
    order. Matches are scored with ``fuzz.partial_ratio`` (1-100).

    Args:
        case: ``"smart"`` ignores case unless the query has an upper-case
            character, ``"ignore"`` always folds case, ``"respect"`` never does.
    """

    def __init__(self, case: str = CASE_SMART) -> None:
        self.case = validate_case(case)

    def __repr__(self) -> str:
        return f"RapidfuzzScorer(case={self.case!r})"

    def _processor(self, query: str) -> Callable[[str], str] | None:
        mode = self.case
        if mode == CASE_SMART:
            mode = CASE_RESPECT if any(ch.isupper() for ch in query) else CASE_IGNORE
        return utils.default_process if mode == CASE_IGNORE else None

    def score(self, candidate: str, query: str) -> int | None:
        processor = self._processor(query)
        if processor:
            query, candidate_text = processor(query), processor(candidate)
        else:
            candidate_text = candidate
        if not query:
            return None

        # Every query character must appear in the candidate, in order
        if LCSseq.similarity(query, candidate_text) < len(query):
            return None

        value = round(fuzz.partial_ratio(query, candidate_text))
        logger.debug("Scored {!r} against {!r}: {}", candidate, query, value)
        return value or None
