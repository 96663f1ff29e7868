import pytest

from config import settings
from library import Library
from ui_helpers import OUTPUT_MODE_ENV

@pytest.fixture
def db_file(tmp_path, request, monkeypatch):
    # Unique database file per test; the CLI and gateway default to it
    path = str(tmp_path / f"test_{request.node.name}.db")
    monkeypatch.setattr(settings, "database_file", path)
    # Pin the output mode so a CLI --output flag can't leak into later tests
    monkeypatch.setenv(OUTPUT_MODE_ENV, "plain")
    return path

@pytest.fixture
def lib():
    lib = Library()
    yield lib
    lib.close()
