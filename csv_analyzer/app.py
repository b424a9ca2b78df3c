import streamlit as st

from csv_analyzer.config import APP_TITLE, configure_logging
from csv_analyzer.layout import render_main_area
from csv_analyzer.state import init_session_state


def main() -> None:
    st.set_page_config(page_title=APP_TITLE, layout="wide")
    configure_logging()
    init_session_state()
    render_main_area()


if __name__ == "__main__":
    main()
