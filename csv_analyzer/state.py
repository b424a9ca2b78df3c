from typing import Optional

import streamlit as st

from csv_analyzer.session import AnalysisSession


def init_session_state() -> None:
    if "analysis" not in st.session_state:
        st.session_state.analysis = None

    if "upload_key" not in st.session_state:
        st.session_state.upload_key = None


def get_analysis() -> Optional[AnalysisSession]:
    return st.session_state.get("analysis")


def replace_analysis(session: AnalysisSession, upload_key: str) -> None:
    """Swap in the session of a new upload; nothing of the previous one is kept."""
    st.session_state.analysis = session
    st.session_state.upload_key = upload_key
