"""Best-match selection over a roster."""

from __future__ import annotations

from dataclasses import dataclass
from typing import Iterable, Optional, Tuple

from .comparison import SimilarityPolicy, WeightedNamePolicy, WholeNamePolicy
from .structures import NOT_FOUND, CandidateRow, Found, MatchResult, Query


@dataclass
class MatchConfig:
    """Configuration parameters for :class:NameMatcher."""

    acceptance_floor: float = 0.5
    given_weight: float = 0.6
    surname_weight: float = 0.4

    def __post_init__(self) -> None:
        if not 0.0 <= self.acceptance_floor <= 1.0:
            raise ValueError("acceptance_floor must be between 0 and 1")
        if self.given_weight < 0 or self.surname_weight < 0:
            raise ValueError("weights must be non-negative")


def policy_for(query: Query, config: MatchConfig | None = None) -> SimilarityPolicy:
    """Pick the weighted policy for structured queries, whole-name otherwise."""

    config = config or MatchConfig()
    if query.structured:
        return WeightedNamePolicy(config.given_weight, config.surname_weight)
    return WholeNamePolicy()


def select_best(
    scored: Iterable[Tuple[CandidateRow, Optional[float]]],
    floor: float,
) -> Optional[CandidateRow]:
    """Return the first row with the highest score at or above `floor`."""

    best_row: Optional[CandidateRow] = None
    best_score = 0.0
    for row, score in scored:
        if score is None:
            continue
        # Strictly greater, so the earlier row keeps a tie.
        if score > best_score and score >= floor:
            best_row, best_score = row, score
    return best_row


def find_best_match(
    query: Query,
    candidates: Iterable[CandidateRow],
    policy: SimilarityPolicy | None = None,
    config: MatchConfig | None = None,
) -> MatchResult:
    """Resolve `query` against `candidates` in their given order."""

    config = config or MatchConfig()
    policy = policy or policy_for(query, config)
    scored = (
        (row, policy.score(query, row) if row.has_assignment else None)
        for row in candidates
    )
    best = select_best(scored, config.acceptance_floor)
    if best is None:
        return NOT_FOUND
    return Found(best.assignment_id)


class NameMatcher:
    """Look up the assignment of a guest on a roster."""

    def __init__(self, config: MatchConfig | None = None) -> None:
        self.config = config or MatchConfig()

    def match(self, query: Query, candidates: Iterable[CandidateRow]) -> MatchResult:
        return find_best_match(query, candidates, config=self.config)


__all__ = [
    "MatchConfig",
    "NameMatcher",
    "find_best_match",
    "policy_for",
    "select_best",
]
