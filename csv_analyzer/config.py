"""Configuration settings for the CSV Analyzer."""

import logging
import os
from typing import Optional

APP_TITLE = "CSV Analyzer"
APP_SUBTITLE = "Upload and analyze your CSV data"

# A column is numeric when strictly more than this share of its
# non-null values parse as numbers
NUMERIC_THRESHOLD = 0.8

# Value frequencies shown per chart (first-seen order, not most frequent)
TOP_VALUES_LIMIT = 10
NULL_LABEL = "null"

# Only the first few columns get a distribution chart
CHART_COLUMN_LIMIT = 4

# Maximum rows for preview
MAX_PREVIEW_ROWS = 10

STAT_CARDS_PER_ROW = 3

LOG_LEVEL = os.getenv("CSV_ANALYZER_LOG_LEVEL", "INFO")

LOG_FORMAT = "%(asctime)s %(levelname)s %(name)s: %(message)s"


def configure_logging(level: Optional[str] = None) -> None:
    """
    Install the root logging configuration.

    Streamlit reruns the app script on every interaction, so this relies on
    basicConfig being a no-op once the root logger has handlers.

    Args:
        level: Level name (e.g. "DEBUG"); defaults to CSV_ANALYZER_LOG_LEVEL
    """
    level_name = (level or LOG_LEVEL).upper()
    logging.basicConfig(
        level=getattr(logging, level_name, logging.INFO),
        format=LOG_FORMAT,
    )
