"""Loading roster exports into candidate rows."""

from __future__ import annotations

from dataclasses import dataclass
from pathlib import Path
from typing import Any, Iterable, List, Mapping, Optional

import pandas as pd

from .structures import CandidateRow


@dataclass
class RosterConfig:
    """Column names of a roster export."""

    id_column: str = "table"
    name_column: str = "name"
    given_column: str = "given_names"
    surname_column: str = "surnames"


def _cell(record: Mapping[str, Any], column: str) -> Optional[Any]:
    value = record.get(column)
    if value is None or (isinstance(value, float) and pd.isna(value)):
        return None
    if isinstance(value, str) and not value.strip():
        return None
    return value


def _assignment_cell(record: Mapping[str, Any], column: str) -> Optional[Any]:
    value = record.get(column)
    if isinstance(value, float) and pd.isna(value):
        return None
    return value


def rows_from_records(
    records: Iterable[Mapping[str, Any]],
    config: RosterConfig | None = None,
) -> List[CandidateRow]:
    """Turn already-fetched records into rows, keeping their order."""

    config = config or RosterConfig()
    return [
        CandidateRow(
            assignment_id=_assignment_cell(record, config.id_column),
            full_name=_cell(record, config.name_column),
            given_names=_cell(record, config.given_column),
            surnames=_cell(record, config.surname_column),
        )
        for record in records
    ]


def load_roster(path: str | Path, config: RosterConfig | None = None) -> List[CandidateRow]:
    """Read a CSV or Excel roster and return its rows in file order."""

    config = config or RosterConfig()
    dataframe = _load_dataframe(Path(path))

    if config.id_column not in dataframe.columns:
        raise KeyError(f"Column '{config.id_column}' not found in roster")
    name_columns = [config.name_column, config.given_column, config.surname_column]
    if not any(column in dataframe.columns for column in name_columns):
        raise KeyError(f"None of the name columns {name_columns} found in roster")

    return rows_from_records(dataframe.to_dict(orient="records"), config)


def _load_dataframe(path: Path) -> pd.DataFrame:
    suffix = path.suffix.lower()
    if suffix == ".csv":
        return pd.read_csv(path, dtype=str, keep_default_na=False)
    if suffix == ".xlsx":
        return pd.read_excel(path, dtype=str, keep_default_na=False)
    raise ValueError("unsupported format")
