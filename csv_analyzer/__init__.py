"""Per-column statistics for uploaded CSV files."""

from csv_analyzer.loader import CsvParseError, load_csv
from csv_analyzer.models import ColumnStats, ColumnType, NumericColumnStats, TextColumnStats
from csv_analyzer.numeric import NumericPrefix, parse_numeric, parse_numeric_prefix
from csv_analyzer.session import AnalysisSession, build_session, start_session
from csv_analyzer.stats import analyze_column, analyze_table, value_frequencies
from csv_analyzer.table import Record, Table

__version__ = "0.1.0"

__all__ = [
    "AnalysisSession",
    "ColumnStats",
    "ColumnType",
    "CsvParseError",
    "NumericColumnStats",
    "NumericPrefix",
    "Record",
    "Table",
    "TextColumnStats",
    "analyze_column",
    "analyze_table",
    "build_session",
    "load_csv",
    "parse_numeric",
    "parse_numeric_prefix",
    "start_session",
    "value_frequencies",
]
