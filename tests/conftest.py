"""Shared test fixtures."""

from __future__ import annotations

import pytest

DISCWORLD = ["Mort", "Sourcery", "Wyrd Sisters", "Pyramids", "Guards! Guards!"]


class StubScorer:
    """Deterministic scorer returning fixed scores per candidate."""

    def __init__(self, scores: dict[str, int | None]) -> None:
        self.scores = scores
        self.calls: list[tuple[str, str]] = []

    def score(self, candidate: str, query: str) -> int | None:
        self.calls.append((candidate, query))
        return self.scores.get(candidate)


@pytest.fixture
def haystack() -> list[str]:
    return list(DISCWORLD)


@pytest.fixture
def stub_scorer():
    """Factory for StubScorer instances."""
    return StubScorer


@pytest.fixture
def clean_env(tmp_path, monkeypatch):
    """Point config at a missing file and clear FUZZPICK_* env vars."""
    monkeypatch.setattr("fuzzpick.config.CONFIG_FILE", tmp_path / "nonexistent")
    monkeypatch.delenv("FUZZPICK_CASE", raising=False)
    monkeypatch.delenv("FUZZPICK_VERBOSE", raising=False)
    return tmp_path
