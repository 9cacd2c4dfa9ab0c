"""Name similarity scoring policies."""

from __future__ import annotations

from abc import ABC, abstractmethod
from dataclasses import dataclass
from typing import AbstractSet, Optional

from .normalization import normalize, tokenize
from .structures import CandidateRow, Query


def jaccard(first: AbstractSet[str], second: AbstractSet[str]) -> float:
    """Return |first & second| / |first | second|, or 0.0 when both are empty."""

    union = first | second
    if not union:
        return 0.0
    return len(first & second) / len(union)


class SimilarityPolicy(ABC):
    """Scores a candidate row against a query.

    `score` returns None for rows that must not be considered at all.
    """

    @abstractmethod
    def score(self, query: Query, row: CandidateRow) -> Optional[float]:
        raise NotImplementedError


class WholeNamePolicy(SimilarityPolicy):
    """Token overlap of the whole name, behind a first-name/first-surname pre-filter."""

    def score(self, query: Query, row: CandidateRow) -> Optional[float]:
        row_name = normalize(row.name)
        if not row_name:
            return None

        first_given = normalize(query.given_names[0]) if query.given_names else ""
        first_surname = normalize(query.surnames[0]) if query.surnames else ""
        if first_given not in row_name or first_surname not in row_name:
            return None

        return jaccard(tokenize(query.raw), tokenize(row_name))


@dataclass
class WeightedNamePolicy(SimilarityPolicy):
    """Separate given-name and surname overlap, combined with fixed weights."""

    given_weight: float = 0.6
    surname_weight: float = 0.4

    def score(self, query: Query, row: CandidateRow) -> Optional[float]:
        row_given = tokenize(row.given_names)
        row_surnames = tokenize(row.surnames)
        if not row_given or not row_surnames:
            return None

        name_similarity = jaccard(tokenize(query.given_text), row_given)
        surname_similarity = jaccard(tokenize(query.surname_text), row_surnames)
        return self.given_weight * name_similarity + self.surname_weight * surname_similarity
