import pytest

from csv_analyzer.loader import load_csv
from csv_analyzer.table import Table


SAMPLE_CSV = (
    "id,name,age,weight,department\n"
    "1,Alice,34,61kg,Sales\n"
    "2,Bob,,80kg,Sales\n"
    "3,Carol,29,n/a,\n"
    "4,Dan,41,75kg,Engineering\n"
    "5,Eve,38,58kg,Engineering\n"
).encode("utf-8")


@pytest.fixture
def sample_csv() -> bytes:
    return SAMPLE_CSV


@pytest.fixture
def sample_table() -> Table:
    return load_csv(SAMPLE_CSV, file_name="people.csv")


@pytest.fixture
def make_table():
    def _make(columns, rows):
        return Table.from_records(columns, [dict(zip(columns, row)) for row in rows])
    return _make
