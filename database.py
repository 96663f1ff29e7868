import logging
import sqlite3
from contextlib import contextmanager
from enum import Enum
from typing import Any, Dict, Iterator, List, Optional

from book import Book
from config import settings
from ui_helpers import print_books_result

logger = logging.getLogger(__name__)


class DbOutcome(str, Enum):
    """What a single database operation reported."""

    ENSURED = "ensured"
    SAVED = "saved"
    DUPLICATE = "duplicate"
    UPDATED = "updated"
    DELETED = "deleted"
    NOT_FOUND = "not_found"
    ERROR = "error"


def _resolve_db_file(db_file: Optional[str]) -> str:
    # Read settings at call time so tests and the CLI can point elsewhere.
    return db_file or settings.database_file

@contextmanager
def db_connection(db_file: Optional[str] = None) -> Iterator[sqlite3.Connection]:
    """Open a connection for one operation and always close it afterwards."""
    conn = sqlite3.connect(_resolve_db_file(db_file))
    conn.row_factory = sqlite3.Row
    try:
        yield conn
    finally:
        conn.close()

def _report_error(operation: str, exc: Exception) -> DbOutcome:
    print(f"DB Error ({operation}): {exc}")
    logger.error(f"DB Error ({operation}): {exc}")
    return DbOutcome.ERROR

def _row_to_dict(row: sqlite3.Row) -> Dict[str, Any]:
    # Columns are nullable; only issued needs converting from 0/1
    data = dict(row)
    data["issued"] = bool(data["issued"])
    return data

def create_tables(db_file: Optional[str] = None, verbose: bool = True) -> DbOutcome:
    """Creates the books table in the database if it doesn't exist."""
    try:
        with db_connection(db_file) as conn:
            conn.execute("""
                CREATE TABLE IF NOT EXISTS books (
                    id INTEGER PRIMARY KEY,
                    title VARCHAR(200),
                    author VARCHAR(200),
                    issued BOOLEAN
                )
            """)
            conn.commit()
    except sqlite3.Error as e:
        return _report_error("create_tables", e)
    if verbose:
        print("Table 'books' ensured in DB.")
    return DbOutcome.ENSURED

def save_book(book: Book, db_file: Optional[str] = None) -> DbOutcome:
    """Insert one book row. A row with the same id is left untouched."""
    try:
        with db_connection(db_file) as conn:
            conn.execute(
                "INSERT INTO books (id, title, author, issued) VALUES (?, ?, ?, ?)",
                (book.book_id, book.title, book.author, book.issued)
            )
            conn.commit()
    except sqlite3.IntegrityError:
        print(f"Book already exists in DB (id={book.book_id}).")
        return DbOutcome.DUPLICATE
    except sqlite3.Error as e:
        return _report_error("save_book", e)
    logger.debug(f"Inserted book {book.book_id}")
    print("Book saved to DB.")
    return DbOutcome.SAVED

def fetch_books(db_file: Optional[str] = None) -> Optional[List[Dict[str, Any]]]:
    """Read and print every stored row, in whatever order SQLite returns them.

    Returns the rows as dicts, or None if the query failed.
    """
    try:
        with db_connection(db_file) as conn:
            rows = [_row_to_dict(row) for row in conn.execute("SELECT id, title, author, issued FROM books")]
    except sqlite3.Error as e:
        _report_error("fetch_books", e)
        return None
    print_books_result(rows)
    return rows

def fetch_book(book_id: int, db_file: Optional[str] = None) -> Optional[Dict[str, Any]]:
    try:
        with db_connection(db_file) as conn:
            row = conn.execute(
                "SELECT id, title, author, issued FROM books WHERE id = ?", (book_id,)
            ).fetchone()
    except sqlite3.Error as e:
        _report_error("fetch_book", e)
        return None
    return _row_to_dict(row) if row else None

def update_book_status(book_id: int, issued: bool, db_file: Optional[str] = None) -> DbOutcome:
    try:
        with db_connection(db_file) as conn:
            cursor = conn.execute("UPDATE books SET issued = ? WHERE id = ?", (issued, book_id))
            conn.commit()
            rows = cursor.rowcount
    except sqlite3.Error as e:
        return _report_error("update_book_status", e)
    if rows > 0:
        print("Book status updated in DB.")
        return DbOutcome.UPDATED
    print("Book not found in DB.")
    return DbOutcome.NOT_FOUND

def delete_book(book_id: int, db_file: Optional[str] = None) -> DbOutcome:
    try:
        with db_connection(db_file) as conn:
            cursor = conn.execute("DELETE FROM books WHERE id = ?", (book_id,))
            conn.commit()
            rows = cursor.rowcount
    except sqlite3.Error as e:
        return _report_error("delete_book", e)
    if rows > 0:
        print("Book deleted from DB.")
        return DbOutcome.DELETED
    print("Book not found in DB.")
    return DbOutcome.NOT_FOUND
