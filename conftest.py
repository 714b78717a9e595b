import os
import pytest

from library_app.library import Library
from library_app.ui_helpers import OUTPUT_MODE_ENV


@pytest.fixture(autouse=True)
def plain_output(monkeypatch):
    # Tests assert on the plain line format
    monkeypatch.setenv(OUTPUT_MODE_ENV, "plain")


@pytest.fixture
def db_file(tmp_path, request):
    # Unique data file per test
    return str(tmp_path / f"test_{request.node.name}.csv")


@pytest.fixture
def lib(db_file):
    lib = Library(db_file=db_file)
    yield lib
    if os.path.exists(db_file):
        os.remove(db_file)
