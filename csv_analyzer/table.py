from dataclasses import dataclass
from types import MappingProxyType
from typing import Any, Dict, Iterable, List, Mapping, Optional, Sequence, Tuple

import pandas as pd

Record = Mapping[str, Optional[str]]


def _freeze_record(row: Mapping[str, Any]) -> Record:
    return MappingProxyType(dict(row))


@dataclass(frozen=True)
class Table:
    """
    Parsed CSV content: ordered column names plus one record per row.

    Records map column name to the raw cell string; None marks a cell the
    row did not have. Records are read-only views.
    """

    columns: Tuple[str, ...]
    records: Tuple[Record, ...]

    def __post_init__(self):
        seen = set()
        duplicates = []
        for name in self.columns:
            if name in seen:
                duplicates.append(name)
            seen.add(name)
        if duplicates:
            raise ValueError(f"Duplicate column names: {duplicates}")

    @classmethod
    def from_records(cls, columns: Sequence[str], records: Iterable[Mapping[str, Any]]) -> "Table":
        return cls(
            columns=tuple(columns),
            records=tuple(_freeze_record(row) for row in records),
        )

    @classmethod
    def from_dataframe(cls, df: pd.DataFrame) -> "Table":
        """
        Build a Table from a DataFrame of raw strings.

        NaN cells (fields missing from short rows) become None.
        """
        columns = [str(col) for col in df.columns]
        records = []
        for row in df.itertuples(index=False, name=None):
            records.append(
                {col: (None if pd.isna(value) else value) for col, value in zip(columns, row)}
            )
        return cls.from_records(columns, records)

    @property
    def row_count(self) -> int:
        return len(self.records)

    def column_values(self, name: str) -> List[Optional[str]]:
        """Raw values of one column in row order."""
        return [record.get(name) for record in self.records]

    def to_dataframe(self, limit: Optional[int] = None) -> pd.DataFrame:
        records = self.records if limit is None else self.records[:limit]
        rows: List[Dict[str, Optional[str]]] = [dict(record) for record in records]
        return pd.DataFrame(rows, columns=list(self.columns))
