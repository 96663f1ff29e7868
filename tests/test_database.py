import json
import logging

import pytest

import database
from book import Book
from database import DbOutcome


@pytest.fixture
def schema(db_file):
    assert database.create_tables(db_file) == DbOutcome.ENSURED
    return db_file

def _by_id(rows):
    return {row["id"]: row for row in rows}

def test_create_tables_is_idempotent(db_file, capsys):
    assert database.create_tables(db_file) == DbOutcome.ENSURED
    assert database.create_tables(db_file) == DbOutcome.ENSURED
    assert capsys.readouterr().out.count("Table 'books' ensured in DB.") == 2

def test_create_tables_quiet(db_file, capsys):
    database.create_tables(db_file, verbose=False)
    assert capsys.readouterr().out == ""

def test_save_and_fetch(schema, capsys):
    assert database.save_book(Book(201, "Java Programming", "James Gosling"), schema) == DbOutcome.SAVED
    assert database.save_book(Book(202, "Database Systems", "C. J. Date"), schema) == DbOutcome.SAVED

    rows = database.fetch_books(schema)
    out = capsys.readouterr().out
    assert "Book saved to DB." in out
    assert "Books in DB:" in out
    assert "ID: 201, Title: Java Programming, Author: James Gosling, Issued: False" in out
    assert _by_id(rows) == {
        201: {"id": 201, "title": "Java Programming", "author": "James Gosling", "issued": False},
        202: {"id": 202, "title": "Database Systems", "author": "C. J. Date", "issued": False},
    }

def test_fetch_empty(schema, capsys):
    assert database.fetch_books(schema) == []
    assert "No books in DB." in capsys.readouterr().out

def test_duplicate_insert_keeps_existing_row(schema, capsys):
    database.save_book(Book(1, "Original", "Author"), schema)
    outcome = database.save_book(Book(1, "Impostor", "Someone Else", issued=True), schema)

    assert outcome == DbOutcome.DUPLICATE
    assert "Book already exists in DB (id=1)." in capsys.readouterr().out
    assert database.fetch_book(1, schema) == {"id": 1, "title": "Original", "author": "Author", "issued": False}

def test_update_status(schema):
    database.save_book(Book(1, "A", "X"), schema)
    database.save_book(Book(2, "B", "Y"), schema)

    assert database.update_book_status(1, True, schema) == DbOutcome.UPDATED
    rows = _by_id(database.fetch_books(schema))
    assert rows[1]["issued"] is True
    assert rows[2]["issued"] is False

    assert database.update_book_status(1, False, schema) == DbOutcome.UPDATED
    assert database.fetch_book(1, schema)["issued"] is False

def test_update_missing_reports_not_found(schema, capsys):
    database.save_book(Book(1, "A", "X"), schema)
    before = database.fetch_books(schema)

    assert database.update_book_status(99, True, schema) == DbOutcome.NOT_FOUND
    assert "Book not found in DB." in capsys.readouterr().out
    assert database.fetch_books(schema) == before

def test_delete(schema, capsys):
    database.save_book(Book(1, "A", "X"), schema)
    database.save_book(Book(2, "B", "Y"), schema)

    assert database.delete_book(2, schema) == DbOutcome.DELETED
    assert "Book deleted from DB." in capsys.readouterr().out
    rows = database.fetch_books(schema)
    assert [row["id"] for row in rows] == [1]

def test_delete_missing_reports_not_found(schema, capsys):
    database.save_book(Book(1, "A", "X"), schema)

    assert database.delete_book(42, schema) == DbOutcome.NOT_FOUND
    assert "Book not found in DB." in capsys.readouterr().out
    assert len(database.fetch_books(schema)) == 1

def test_fetch_book_missing(schema):
    assert database.fetch_book(5, schema) is None

def test_default_db_file_comes_from_settings(db_file):
    # No explicit path: the gateway falls back to settings.database_file
    database.create_tables()
    database.save_book(Book(3, "C", "Z"))
    assert database.fetch_book(3, db_file)["title"] == "C"

def test_missing_table_is_reported_not_raised(db_file, capsys, caplog):
    with caplog.at_level(logging.ERROR, logger="database"):
        assert database.save_book(Book(1, "A", "X"), db_file) == DbOutcome.ERROR
        assert database.fetch_books(db_file) is None
        assert database.update_book_status(1, True, db_file) == DbOutcome.ERROR
        assert database.delete_book(1, db_file) == DbOutcome.ERROR

    out = capsys.readouterr().out
    assert "DB Error (save_book):" in out
    assert "DB Error (fetch_books):" in out
    assert "DB Error (update_book_status):" in out
    assert "DB Error (delete_book):" in out
    assert "DB Error (delete_book):" in caplog.text

def test_unreachable_database_is_reported(tmp_path, capsys):
    # A directory can't be opened as a database file
    bad = str(tmp_path)
    assert database.create_tables(bad) == DbOutcome.ERROR
    assert database.fetch_book(1, bad) is None
    out = capsys.readouterr().out
    assert "DB Error (create_tables):" in out
    assert "DB Error (fetch_book):" in out

def test_connection_closed_after_error(schema, monkeypatch):
    closed = []
    real_connect = database.sqlite3.connect

    class TrackingConnection:
        def __init__(self, conn):
            self._conn = conn

        def __getattr__(self, name):
            return getattr(self._conn, name)

        def __setattr__(self, name, value):
            if name == "_conn":
                object.__setattr__(self, name, value)
            else:
                setattr(self._conn, name, value)

        def close(self):
            closed.append(True)
            self._conn.close()

    monkeypatch.setattr(database.sqlite3, "connect", lambda path: TrackingConnection(real_connect(path)))

    database.save_book(Book(1, "A", "X"), schema)
    database.save_book(Book(1, "A", "X"), schema)  # duplicate, error path
    assert closed == [True, True]

def test_fetch_books_json_mode(schema, monkeypatch, capsys):
    monkeypatch.setenv("LIB_CLI_OUTPUT", "json")
    database.save_book(Book(1, "A", "X"), schema)
    capsys.readouterr()

    database.fetch_books(schema)
    assert json.loads(capsys.readouterr().out) == [{"id": 1, "title": "A", "author": "X", "issued": False}]

def test_null_columns_are_listed_not_raised(schema, capsys):
    with database.db_connection(schema) as conn:
        conn.execute("INSERT INTO books (id, title, author, issued) VALUES (1, NULL, 'A', 0)")
        conn.commit()

    rows = database.fetch_books(schema)
    assert rows == [{"id": 1, "title": None, "author": "A", "issued": False}]
    assert "ID: 1, Title: None, Author: A, Issued: False" in capsys.readouterr().out
    assert database.fetch_book(1, schema)["title"] is None
