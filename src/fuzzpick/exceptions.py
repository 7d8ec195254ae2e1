"""Custom exception hierarchy for fuzzpick."""

from __future__ import annotations


class FuzzpickError(Exception):
    """Base exception for all fuzzpick errors."""

    def __init__(
        self,
        message: str,
        *,
        exit_code: int = 1,
        hint: str | None = None,
    ) -> None:
        self.message = message
        self.exit_code = exit_code
        self.hint = hint
        super().__init__(message)


class NeedleNotFoundError(FuzzpickError):
    """Raised when no candidate in the haystack matches the needle."""

    def __init__(self, needle: str | None = None) -> None:
        self.needle = needle
        super().__init__(
            "Unable to find needle in haystack",
            exit_code=3,
            hint="Try a shorter query or a different --case mode.",
        )


class NeedleDisappearedError(FuzzpickError):
    """Raised when the best-scoring candidate cannot be resolved.

    Signals a broken internal invariant: the scores summed to a non-zero
    value yet no maximum was found. Callers are not expected to handle it.
    """

    def __init__(self) -> None:
        super().__init__("Needle disappeared from haystack", exit_code=70)


class ValidationError(FuzzpickError):
    """Raised for invalid user input or configuration values."""

    def __init__(self, message: str, *, hint: str | None = None) -> None:
        super().__init__(message, exit_code=5, hint=hint)
