"""Best-match and all-matches fuzzy search over a list of strings."""

from __future__ import annotations

__version__ = "0.1.0"

from fuzzpick.exceptions import (  # noqa: E402
    FuzzpickError,
    NeedleDisappearedError,
    NeedleNotFoundError,
    ValidationError,
)
from fuzzpick.matcher import Matcher, ScoredCandidate  # noqa: E402
from fuzzpick.utils.scoring import RapidfuzzScorer, Scorer  # noqa: E402

__all__ = [
    "FuzzpickError",
    "Matcher",
    "NeedleDisappearedError",
    "NeedleNotFoundError",
    "RapidfuzzScorer",
    "ScoredCandidate",
    "Scorer",
    "ValidationError",
    "__version__",
]
