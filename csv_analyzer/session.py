import logging
from dataclasses import dataclass
from typing import Tuple

from csv_analyzer.loader import load_csv
from csv_analyzer.models import ColumnStats, ColumnType
from csv_analyzer.stats import analyze_table
from csv_analyzer.table import Table

logger = logging.getLogger(__name__)


@dataclass(frozen=True)
class AnalysisSession:
    """
    Holds the result of one upload: file name, parsed table and column stats.

    A new upload produces a new session that replaces the old one as a
    whole; sessions are never updated in place.
    """

    file_name: str
    table: Table
    column_stats: Tuple[ColumnStats, ...]

    @property
    def columns(self) -> Tuple[str, ...]:
        return self.table.columns

    @property
    def row_count(self) -> int:
        return self.table.row_count


def build_session(file_name: str, table: Table) -> AnalysisSession:
    """Compute column statistics for an already parsed table."""
    column_stats = tuple(analyze_table(table))
    numeric = sum(1 for stats in column_stats if stats.type == ColumnType.NUMERIC)
    logger.info(
        f"[build_session] '{file_name}' - {len(column_stats)} columns "
        f"({numeric} numeric), {table.row_count} rows"
    )
    return AnalysisSession(file_name=file_name, table=table, column_stats=column_stats)


def start_session(file_name: str, content: bytes) -> AnalysisSession:
    """
    Parse an uploaded file and analyze it.

    Raises:
        CsvParseError: If the file cannot be parsed; no session is built
    """
    table = load_csv(content, file_name=file_name)
    return build_session(file_name, table)
