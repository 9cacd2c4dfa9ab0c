"""Command line entry point for seat lookups."""

from __future__ import annotations

import argparse
import os
import sys
from pathlib import Path

from .matcher import MatchConfig
from .roster import RosterConfig
from .runner import lookup_file


def parse_args(argv: list[str]) -> argparse.Namespace:
    parser = argparse.ArgumentParser(description="Find a guest's table by approximate name match.")
    parser.add_argument("roster", type=Path, help="Path to the roster CSV or Excel file")
    parser.add_argument("name", nargs="?", help="Full name: given name followed by surname(s)")
    parser.add_argument("--given", help="Given name(s), for a structured lookup")
    parser.add_argument("--surnames", help="Surname(s), for a structured lookup")
    parser.add_argument(
        "--id-column",
        default=os.getenv("SEAT_FINDER_ID_COLUMN", "table"),
        help="Column holding the table assignment (default: table)",
    )
    parser.add_argument(
        "--name-column",
        default=os.getenv("SEAT_FINDER_NAME_COLUMN", "name"),
        help="Column holding the full name (default: name)",
    )
    parser.add_argument("--given-column", default="given_names", help="Column holding given names")
    parser.add_argument("--surname-column", default="surnames", help="Column holding surnames")
    parser.add_argument(
        "--floor",
        type=float,
        default=0.5,
        help="Minimum similarity a row must reach to be returned",
    )
    parser.add_argument("--quiet", action="store_true", help="Only print the result")
    return parser.parse_args(argv)


def main(argv: list[str] | None = None) -> int:
    args = parse_args(argv if argv is not None else sys.argv[1:])

    try:
        config = MatchConfig(acceptance_floor=args.floor)
    except ValueError as exc:
        print(f"ERROR: {exc}")
        return 2

    roster_config = RosterConfig(
        id_column=args.id_column,
        name_column=args.name_column,
        given_column=args.given_column,
        surname_column=args.surname_column,
    )

    result = lookup_file(
        args.roster,
        args.name,
        given=args.given,
        surnames=args.surnames,
        config=config,
        roster_config=roster_config,
        verbose=not args.quiet,
    )
    if result is None:
        return 2
    if not result.found:
        print("Name not found in the list.")
        return 1
    print(f"Table: {result.assignment_id}")
    return 0


if __name__ == "__main__":  # pragma: no cover
    raise SystemExit(main())
