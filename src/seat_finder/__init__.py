"""Seat Finder library initialization."""

from .comparison import SimilarityPolicy, WeightedNamePolicy, WholeNamePolicy, jaccard
from .matcher import MatchConfig, NameMatcher, find_best_match, policy_for, select_best
from .normalization import normalize, tokenize
from .query import InvalidQueryError, parse_query
from .roster import RosterConfig, load_roster, rows_from_records
from .runner import lookup_file
from .structures import NOT_FOUND, CandidateRow, Found, MatchResult, NotFound, Query

__all__ = [
    "CandidateRow",
    "Found",
    "InvalidQueryError",
    "MatchConfig",
    "MatchResult",
    "NOT_FOUND",
    "NameMatcher",
    "NotFound",
    "Query",
    "RosterConfig",
    "SimilarityPolicy",
    "WeightedNamePolicy",
    "WholeNamePolicy",
    "find_best_match",
    "jaccard",
    "load_roster",
    "lookup_file",
    "normalize",
    "parse_query",
    "policy_for",
    "rows_from_records",
    "select_best",
    "tokenize",
]
