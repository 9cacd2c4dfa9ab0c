"""Basic data structures."""

from __future__ import annotations

from dataclasses import dataclass
from typing import Any, Optional, Sequence, Tuple, Union


@dataclass(frozen=True)
class Query:
    """A guest name as typed, split into given names and surnames."""

    raw: str
    given_names: Tuple[str, ...]
    surnames: Tuple[str, ...] = ()
    structured: bool = False

    @classmethod
    def from_text(cls, text: str) -> "Query":
        """Split a single free-text name by position: first word, then surnames."""

        parts = text.split()
        return cls(raw=text, given_names=tuple(parts[:1]), surnames=tuple(parts[1:]))

    @classmethod
    def from_parts(cls, given: str, surnames: str = "") -> "Query":
        return cls(
            raw=f"{given} {surnames}".strip(),
            given_names=tuple(given.split()),
            surnames=tuple(surnames.split()),
            structured=True,
        )

    @property
    def given_text(self) -> str:
        return " ".join(self.given_names)

    @property
    def surname_text(self) -> str:
        return " ".join(self.surnames)


@dataclass(frozen=True)
class CandidateRow:
    """One roster entry; `assignment_id` is passed through untouched."""

    assignment_id: Any
    full_name: Optional[str] = None
    given_names: Optional[str] = None
    surnames: Optional[str] = None

    @property
    def has_assignment(self) -> bool:
        if self.assignment_id is None:
            return False
        return not (isinstance(self.assignment_id, str) and not self.assignment_id.strip())

    @property
    def name(self) -> Optional[str]:
        if isinstance(self.full_name, str) and self.full_name.strip():
            return self.full_name
        pieces = [p for p in (self.given_names, self.surnames) if isinstance(p, str) and p.strip()]
        if not pieces:
            return None
        return " ".join(pieces)

    @classmethod
    def from_sequence(cls, row: Sequence[Any]) -> "CandidateRow":
        """Build a row from `[id, name]` or `[id, given, surnames]` lists."""

        if len(row) >= 3:
            return cls(assignment_id=row[0], given_names=row[1], surnames=row[2])
        if len(row) == 2:
            return cls(assignment_id=row[0], full_name=row[1])
        return cls(assignment_id=row[0] if row else None)


@dataclass(frozen=True)
class Found:
    assignment_id: Any

    @property
    def found(self) -> bool:
        return True


@dataclass(frozen=True)
class NotFound:
    @property
    def found(self) -> bool:
        return False


NOT_FOUND = NotFound()

MatchResult = Union[Found, NotFound]
