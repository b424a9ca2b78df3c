import html
from typing import Sequence

import matplotlib.pyplot as plt
import streamlit as st

from csv_analyzer.charts import create_frequency_chart
from csv_analyzer.config import (
    APP_SUBTITLE,
    APP_TITLE,
    CHART_COLUMN_LIMIT,
    MAX_PREVIEW_ROWS,
    STAT_CARDS_PER_ROW,
)
from csv_analyzer.dataset import render_upload_panel
from csv_analyzer.models import ColumnStats
from csv_analyzer.session import AnalysisSession
from csv_analyzer.state import get_analysis
from csv_analyzer.summary import frequency_frame, preview_frame, stat_rows


def _inject_custom_style() -> None:
    st.markdown(
        """
        <style>
        .rounded-box {
            border-radius: 8px;
            border: 1px solid #dee2e6;
            padding: 12px;
            background-color: #ffffff;
        }
        .stat-card {
            border-radius: 8px;
            box-shadow: 0 1px 3px rgba(0, 0, 0, 0.1);
            padding: 1.25rem;
            margin-bottom: 1rem;
            background-color: #ffffff;
        }
        .stat-card-title {
            font-size: 1.1rem;
            font-weight: 500;
            margin-bottom: 0.75rem;
        }
        .stat-row {
            display: flex;
            justify-content: space-between;
            font-size: 0.9rem;
            color: #495057;
            margin-bottom: 0.4rem;
        }
        .stat-value {
            font-weight: 500;
        }
        </style>
        """,
        unsafe_allow_html=True,
    )


def _stat_card_html(stats: ColumnStats) -> str:
    rows = "".join(
        f'<div class="stat-row"><span>{label}:</span>'
        f'<span class="stat-value">{html.escape(value)}</span></div>'
        for label, value in stat_rows(stats)
    )
    return (
        f'<div class="stat-card">'
        f'<div class="stat-card-title">{html.escape(stats.name)}</div>'
        f"{rows}</div>"
    )


def _render_stat_cards(column_stats: Sequence[ColumnStats]) -> None:
    st.subheader("Column Statistics")
    for start in range(0, len(column_stats), STAT_CARDS_PER_ROW):
        row = column_stats[start:start + STAT_CARDS_PER_ROW]
        for col, stats in zip(st.columns(STAT_CARDS_PER_ROW), row):
            with col:
                st.markdown(_stat_card_html(stats), unsafe_allow_html=True)


def _render_distributions(session: AnalysisSession) -> None:
    st.subheader("Data Distribution (Top 10)")
    charted = session.columns[:CHART_COLUMN_LIMIT]
    for start in range(0, len(charted), 2):
        for col, name in zip(st.columns(2), charted[start:start + 2]):
            with col:
                fig = create_frequency_chart(frequency_frame(session.table, name), name)
                st.pyplot(fig)
                plt.close(fig)


def _render_preview(session: AnalysisSession) -> None:
    st.subheader("Data Preview")
    st.dataframe(preview_frame(session.table), hide_index=True)
    if session.row_count > MAX_PREVIEW_ROWS:
        st.caption(f"Showing {MAX_PREVIEW_ROWS} of {session.row_count} rows")


def render_main_area() -> None:
    _inject_custom_style()

    st.title(APP_TITLE)
    st.caption(APP_SUBTITLE)

    render_upload_panel()

    session = get_analysis()
    if session is None or not session.column_stats:
        return

    _render_stat_cards(session.column_stats)
    _render_distributions(session)
    _render_preview(session)
