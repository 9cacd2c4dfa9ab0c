"""Parsing and validation of guest name queries."""

from __future__ import annotations

import re
import unicodedata
from typing import Optional

from .structures import Query


# Letters of any script (accented included) separated by whitespace.
_ALLOWED_PATTERN = re.compile(r"[^\W\d_]+(?:\s+[^\W\d_]+)*")


class InvalidQueryError(ValueError):
    """Raised when a name query cannot be looked up."""


def _check_allowed(value: str) -> None:
    # Decomposed input carries combining marks, which are not word characters.
    composed = unicodedata.normalize("NFC", value)
    if not _ALLOWED_PATTERN.fullmatch(composed.strip()):
        raise InvalidQueryError("The name may only contain letters and spaces.")


def parse_query(
    text: Optional[str] = None,
    given: Optional[str] = None,
    surnames: Optional[str] = None,
) -> Query:
    """Validate user input and return the matching :class:Query.

    A single `text` is split by position into a given name and surnames and
    must hold at least two words. `given`/`surnames` build a structured query
    instead; the surnames may be left empty.
    """

    if given is not None or surnames is not None:
        if text:
            raise InvalidQueryError("Give either a full name or separate given names and surnames, not both.")
        given = (given or "").strip()
        surnames = (surnames or "").strip()
        if not given:
            raise InvalidQueryError("At least one given name is required.")
        _check_allowed(given)
        if surnames:
            _check_allowed(surnames)
        return Query.from_parts(given, surnames)

    text = (text or "").strip()
    if not text:
        raise InvalidQueryError("A name is required.")
    if len(text.split()) < 2:
        raise InvalidQueryError("Enter at least one given name and one surname.")
    _check_allowed(text)
    return Query.from_text(text)
