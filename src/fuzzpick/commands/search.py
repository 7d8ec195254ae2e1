"""Search commands: best match and all matches."""

from __future__ import annotations

import sys
from typing import Annotated

from cyclopts import Parameter
from loguru import logger

from fuzzpick.config import load_config
from fuzzpick.exceptions import ValidationError
from fuzzpick.formatters import output_scores, output_values
from fuzzpick.matcher import Matcher
from fuzzpick.utils.scoring import RapidfuzzScorer


def read_candidates(candidates: tuple[str, ...] | list[str]) -> list[str]:
    """Return the candidates given on the command line, or read them from stdin.

    Blank stdin lines are skipped.
    """
    if candidates:
        return list(candidates)
    if sys.stdin.isatty():
        raise ValidationError(
            "No candidates given.",
            hint="Pass candidates as arguments or pipe them in, one per line.",
        )
    lines = [line.rstrip("\r\n") for line in sys.stdin]
    haystack = [line for line in lines if line.strip()]
    logger.debug("Read {} candidates from stdin", len(haystack))
    return haystack


def _matcher(case: str | None) -> Matcher:
    config = load_config(case=case)
    logger.debug("Using case mode {!r}", config.case)
    return Matcher(RapidfuzzScorer(case=config.case))


def best(
    needle: str,
    *candidates: str,
    case: Annotated[str | None, Parameter(alias="-c")] = None,
    json: bool = False,
) -> None:
    """Print the candidate that best matches NEEDLE.

    Parameters
    ----------
    needle
        The search string.
    candidates
        Strings to search. Read from stdin, one per line, when omitted.
    case
        Case mode: smart (default), ignore, respect.
    """
    haystack = read_candidates(candidates)
    result = _matcher(case).fuzzy_best(haystack, needle)
    output_values([result], as_json=json)


def all_(
    needle: str,
    *candidates: str,
    case: Annotated[str | None, Parameter(alias="-c")] = None,
    scores: Annotated[bool, Parameter(alias="-s")] = False,
    json: bool = False,
) -> None:
    """Print every candidate matching NEEDLE, best match last.

    Parameters
    ----------
    needle
        The search string.
    candidates
        Strings to search. Read from stdin, one per line, when omitted.
    case
        Case mode: smart (default), ignore, respect.
    scores
        Show match scores alongside candidates.
    """
    haystack = read_candidates(candidates)
    matches = _matcher(case).matches(haystack, needle)

    if scores:
        data = [{"candidate": m.matched_value, "score": m.score} for m in matches]
        output_scores(data, title=f"Matches for {needle!r}", as_json=json)
        return

    output_values([m.item for m in matches], as_json=json)
