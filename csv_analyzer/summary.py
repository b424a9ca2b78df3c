import pandas as pd
from typing import Any, Dict, List, Optional, Tuple

from csv_analyzer.config import MAX_PREVIEW_ROWS, TOP_VALUES_LIMIT
from csv_analyzer.models import ColumnStats, NumericColumnStats
from csv_analyzer.session import AnalysisSession
from csv_analyzer.stats import value_frequencies
from csv_analyzer.table import Table


def format_statistic(value: Optional[float]) -> str:
    """Two decimals, as shown on the statistics cards."""
    if value is None:
        return ""
    return f"{value:.2f}"


def stat_rows(stats: ColumnStats) -> List[Tuple[str, str]]:
    """
    Label/value pairs for one statistics card.

    Numeric aggregates are listed only for numeric columns.
    """
    rows = [
        ("Type", stats.type),
        ("Count", str(stats.count)),
        ("Unique", str(stats.unique)),
        ("Nulls", str(stats.nulls)),
    ]
    if isinstance(stats, NumericColumnStats):
        rows.extend([
            ("Mean", format_statistic(stats.mean)),
            ("Median", format_statistic(stats.median)),
            ("Min", format_statistic(stats.min)),
            ("Max", format_statistic(stats.max)),
        ])
    return rows


def preview_frame(table: Table, n: int = MAX_PREVIEW_ROWS) -> pd.DataFrame:
    """
    Returns the first N rows in column order.
    """
    # Absent cells render as blanks rather than "None"
    return table.to_dataframe(limit=n).fillna("")


def frequency_frame(table: Table, column: str, limit: int = TOP_VALUES_LIMIT) -> pd.DataFrame:
    """Value frequencies of one column as a name/count frame, first-seen order."""
    return pd.DataFrame(value_frequencies(table, column, limit), columns=["name", "count"])


def summarize_session(session: AnalysisSession) -> Dict[str, Any]:
    """
    Everything the page shows, as plain data.

    Returns:
        dict: file name, shape, columns, per-column stats and preview records.
    """
    return {
        "file_name": session.file_name,
        "shape": {"rows": session.row_count, "columns": len(session.columns)},
        "columns": list(session.columns),
        "statistics": [stats.model_dump() for stats in session.column_stats],
        "preview": preview_frame(session.table).to_dict(orient="records"),
    }
