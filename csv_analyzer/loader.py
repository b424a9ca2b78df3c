"""CSV ingestion.

Turns the bytes of an uploaded file into a Table. Cells are kept as the raw
strings found in the file; deciding what is numeric is left to the
statistics engine.
"""

import io
import logging

import pandas as pd

from csv_analyzer.table import Table

logger = logging.getLogger(__name__)


class CsvParseError(ValueError):
    """Raised when an uploaded file cannot be read as CSV at all."""


def load_csv(content: bytes, file_name: str = "") -> Table:
    """
    Parse CSV bytes into a Table.

    The first row is the header, fields are comma-delimited with standard
    quoting, and empty lines are skipped. No value is interpreted: "NA",
    "null" and "" all stay strings. Fields missing from short rows become
    None.

    Args:
        content: Raw file bytes (UTF-8, optional byte-order mark); bytes
            that are not valid UTF-8 become U+FFFD instead of failing the file
        file_name: Used in log and error messages only

    Returns:
        Parsed Table (may have zero rows when the file is header-only)

    Raises:
        CsvParseError: If the file is empty or cannot be parsed as CSV
    """
    label = file_name or "<upload>"
    logger.info(f"[load_csv] Reading '{label}' - {len(content)} bytes")

    if not content.strip():
        error_msg = f"File '{label}' is empty"
        logger.error(f"[load_csv] {error_msg}")
        raise CsvParseError(error_msg)

    try:
        df = pd.read_csv(
            io.BytesIO(content),
            sep=",",
            dtype=str,
            keep_default_na=False,
            skip_blank_lines=True,
            index_col=False,
            encoding="utf-8-sig",
            encoding_errors="replace",
        )
    except pd.errors.EmptyDataError as e:
        error_msg = f"File '{label}' has no header or data"
        logger.error(f"[load_csv] {error_msg}: {e}")
        raise CsvParseError(error_msg) from e
    except pd.errors.ParserError as e:
        error_msg = f"Failed to parse '{label}' as CSV: {str(e)}"
        logger.error(f"[load_csv] {error_msg}")
        raise CsvParseError(error_msg) from e

    if len(df.columns) == 0:
        error_msg = f"File '{label}' has 0 columns"
        logger.error(f"[load_csv] {error_msg}")
        raise CsvParseError(error_msg)

    try:
        table = Table.from_dataframe(df)
    except ValueError as e:
        error_msg = f"File '{label}' has an invalid header: {str(e)}"
        logger.error(f"[load_csv] {error_msg}")
        raise CsvParseError(error_msg) from e

    logger.info(f"[load_csv] Loaded '{label}' - rows: {table.row_count}, columns: {len(table.columns)}")
    return table
