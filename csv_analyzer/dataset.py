import logging

import streamlit as st

from csv_analyzer.loader import CsvParseError
from csv_analyzer.session import start_session
from csv_analyzer.state import get_analysis, replace_analysis

logger = logging.getLogger(__name__)


def _upload_key(file) -> str:
    # file_id is unique per upload; name and size can repeat across files
    return file.file_id


def render_upload_panel() -> None:
    st.markdown('<div class="rounded-box">', unsafe_allow_html=True)

    file = st.file_uploader("Upload CSV file", type=["csv"])
    if file is not None:
        key = _upload_key(file)
        # Streamlit reruns the script on every interaction; parse each upload once
        if key != st.session_state.upload_key:
            try:
                session = start_session(file.name, file.getvalue())
            except CsvParseError as exc:
                logger.warning(f"[render_upload_panel] Upload '{file.name}' rejected: {exc}")
                st.error("Error parsing CSV file")
            else:
                replace_analysis(session, key)

    session = get_analysis()
    if session is not None:
        st.markdown(
            f"Loaded: **{session.file_name}** ({session.row_count} rows)"
        )
    else:
        st.info("No dataset loaded yet.")

    st.markdown("</div>", unsafe_allow_html=True)
