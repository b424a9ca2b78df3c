from pathlib import Path

import pytest
import streamlit as st
from streamlit.testing.v1 import AppTest

from csv_analyzer.session import start_session

APP_PATH = str(Path(__file__).resolve().parent.parent / "csv_analyzer" / "app.py")


def test_app_without_upload():
    at = AppTest.from_file(APP_PATH)
    at.run(timeout=30)

    assert not at.exception
    assert at.title[0].value == "CSV Analyzer"
    assert at.info[0].value == "No dataset loaded yet."
    assert len(at.dataframe) == 0


def test_app_renders_session(sample_csv):
    at = AppTest.from_file(APP_PATH)
    at.session_state["analysis"] = start_session("people.csv", sample_csv)
    at.run(timeout=30)

    assert not at.exception
    headers = [header.value for header in at.subheader]
    assert headers == ["Column Statistics", "Data Distribution (Top 10)", "Data Preview"]
    assert len(at.dataframe) == 1
    assert any("people.csv" in md.value for md in at.markdown)


class FakeUpload:
    def __init__(self, name, content, file_id):
        self.name = name
        self.size = len(content)
        self.file_id = file_id
        self._content = content

    def getvalue(self):
        return self._content


@pytest.fixture
def uploads(monkeypatch):
    """Each run of the app sees the last file put in this list."""
    selected = []
    monkeypatch.setattr(
        st, "file_uploader", lambda *args, **kwargs: selected[-1] if selected else None
    )
    return selected


def test_failed_upload_keeps_previous_session(sample_csv, uploads):
    previous = start_session("people.csv", sample_csv)
    at = AppTest.from_file(APP_PATH)
    at.session_state["analysis"] = previous
    uploads.append(FakeUpload("broken.csv", b'a,b\n"1,2\n', "upload-1"))
    at.run(timeout=30)

    assert not at.exception
    assert [error.value for error in at.error] == ["Error parsing CSV file"]
    assert at.session_state["analysis"] == previous
    assert any("people.csv" in md.value for md in at.markdown)


def test_new_upload_replaces_session(sample_csv, uploads):
    at = AppTest.from_file(APP_PATH)
    at.session_state["analysis"] = start_session("people.csv", sample_csv)
    uploads.append(FakeUpload("cities.csv", b"city\nParis\nRome\n", "upload-1"))
    at.run(timeout=30)

    assert not at.exception
    assert len(at.error) == 0
    session = at.session_state["analysis"]
    assert session.file_name == "cities.csv"
    assert session.columns == ("city",)
    assert session.row_count == 2


def test_same_name_and_size_upload_is_parsed_again(uploads):
    at = AppTest.from_file(APP_PATH)
    uploads.append(FakeUpload("a.csv", b"x\n1\n", "upload-1"))
    at.run(timeout=30)
    assert at.session_state["analysis"].table.column_values("x") == ["1"]

    uploads.append(FakeUpload("a.csv", b"x\n2\n", "upload-2"))
    at.run(timeout=30)

    assert not at.exception
    assert at.session_state["analysis"].table.column_values("x") == ["2"]
    assert at.session_state["analysis"].column_stats[0].mean == 2.0
