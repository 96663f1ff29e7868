import logging
from dataclasses import dataclass
from typing import Dict, List, Optional, Union

from book import Book

logger = logging.getLogger(__name__)


@dataclass(frozen=True)
class BookNotFound:
    """Returned by Library.search when no book carries the requested id."""

    book_id: int

    def __str__(self) -> str:
        return f"Book with ID {self.book_id} not found."


class Library:
    """Manages the in-memory collection of books, keyed by book id."""

    def __init__(self) -> None:
        self.books: Dict[int, Book] = {}
        # Counts every book built through create_book; never decremented.
        self._total_created = 0

    # ------------------------- Core operations ------------------------- #
    def create_book(self, book_id: int, title: str, author: str) -> Book:
        """Build a new Book and count it. The book is not added to the catalog."""
        book = Book(book_id, title, author)
        self._total_created += 1
        logger.debug(f"Created book {book.book_id} (total created: {self._total_created})")
        return book

    def add_book(self, book: Book) -> None:
        """Add a book to the catalog. An existing entry with the same id is replaced."""
        if book.book_id in self.books:
            logger.debug(f"Replacing catalog entry for book {book.book_id}")
        self.books[book.book_id] = book
        print("Book added successfully!")

    def search(self, book_id: int) -> Union[Book, BookNotFound]:
        book = self.books.get(book_id)
        if book is None:
            return BookNotFound(book_id)
        return book

    def total_created(self) -> int:
        """Number of books built through create_book. Books constructed directly are not counted."""
        return self._total_created

    def remove_book(self, book_id: int) -> Optional[Book]:
        """Drop a book from the catalog and hand it back, or None if it was never there."""
        return self.books.pop(book_id, None)

    def list_books(self) -> List[Book]:
        return list(self.books.values())

    def close(self) -> None:
        """Release every book held by the catalog. The creation counter is kept."""
        self.books.clear()

    def __len__(self) -> int:
        return len(self.books)

    def __contains__(self, book_id: object) -> bool:
        return book_id in self.books
