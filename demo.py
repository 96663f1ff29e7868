"""Scripted walk-through of the catalog and the books table.

The steps run in a fixed order and never stop early: every database
failure is reported by the gateway and the script moves on.
"""
from typing import Optional

import database
from library import Library, BookNotFound
from member import Member
from ui_helpers import print_record

MISSING_BOOK_ID = 203


def run_demo(library: Optional[Library] = None, db_file: Optional[str] = None) -> Library:
    """Run the demo against `library` (a fresh one by default) and return it."""
    if library is None:
        library = Library()

    database.create_tables(db_file)

    members = [Member(1, "John"), Member(2, "Sophia")]
    for member in members:
        print_record(member)

    java = library.create_book(201, "Java Programming", "James Gosling")
    databases = library.create_book(202, "Database Systems", "C. J. Date")
    library.add_book(java)
    library.add_book(databases)

    print_record(java)
    print_record(databases)

    database.save_book(java, db_file)
    database.save_book(databases, db_file)
    database.fetch_books(db_file)

    java.issue()
    database.update_book_status(java.book_id, java.issued, db_file)
    database.fetch_books(db_file)

    # Storage only: the catalog keeps its copy of 202.
    database.delete_book(databases.book_id, db_file)
    database.fetch_books(db_file)

    result = library.search(MISSING_BOOK_ID)
    if isinstance(result, BookNotFound):
        print(f"Book lookup failed: {result}")
    else:
        print_record(result)

    print(f"Total Books in Library (in-memory): {library.total_created()}")
    return library
