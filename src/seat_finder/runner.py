"""Convenience helpers for running a seat lookup end-to-end."""

from __future__ import annotations

from pathlib import Path
from typing import Optional

from .matcher import MatchConfig, NameMatcher
from .query import InvalidQueryError, parse_query
from .roster import RosterConfig, load_roster
from .structures import MatchResult


def lookup_file(
    roster_path: str | Path,
    text: Optional[str] = None,
    given: Optional[str] = None,
    surnames: Optional[str] = None,
    config: Optional[MatchConfig] = None,
    roster_config: Optional[RosterConfig] = None,
    verbose: bool = False,
) -> MatchResult | None:
    """Look up a guest in the roster at `roster_path`.

    Returns None after printing an error when the query or the roster is
    unusable; otherwise the match result.
    """

    roster_path = Path(roster_path)

    try:
        query = parse_query(text, given=given, surnames=surnames)
    except InvalidQueryError as exc:
        print(f"ERROR: {exc}")
        return None

    try:
        rows = load_roster(roster_path, roster_config)
    except FileNotFoundError:
        print(f"ERROR: Roster file not found at '{roster_path}'.")
        return None
    except ValueError:
        print(f"ERROR: Unsupported file format for '{roster_path}'. Please provide a CSV or Excel file.")
        return None
    except KeyError as exc:
        print(f"ERROR: {exc.args[0]}. Please check the column options.")
        return None

    if not rows:
        print(f"ERROR: No rows found in '{roster_path}'.")
        return None

    if verbose:
        mode = "given names / surnames" if query.structured else "full name"
        print(f"Looking up '{query.raw}' ({mode}) among {len(rows)} roster rows...")

    result = NameMatcher(config).match(query, rows)

    if verbose:
        print("   Match found." if result.found else "   No row cleared the acceptance floor.")
    return result
