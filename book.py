from __future__ import annotations

from abc import ABC, abstractmethod


class LibraryItem(ABC):
    """Common base for anything the library lends out."""

    def __init__(self, title: str, author: str) -> None:
        self.title = title.strip()
        self.author = author.strip()

    @abstractmethod
    def info_line(self) -> str:
        """One-line human readable description of the item."""


class Book(LibraryItem):
    """Represents a single book entry in the catalog."""

    def __init__(self, book_id: int, title: str, author: str, issued: bool = False) -> None:
        super().__init__(title, author)
        self._book_id = int(book_id)
        self.issued = bool(issued)

    @property
    def book_id(self) -> int:
        return self._book_id

    def issue(self) -> None:
        self.issued = True

    def return_book(self) -> None:
        self.issued = False

    def info_line(self) -> str:
        return f"[BOOK] ID: {self.book_id}, Title: {self.title}, Author: {self.author}, Issued: {self.issued}"

    def __repr__(self) -> str:
        return f"Book(book_id={self.book_id!r}, title={self.title!r}, author={self.author!r}, issued={self.issued!r})"

    def to_dict(self) -> dict:
        return {"id": self.book_id, "title": self.title, "author": self.author, "issued": self.issued}

    @staticmethod
    def from_dict(data: dict) -> "Book":
        # SQLite hands booleans back as 0/1
        return Book(book_id=data["id"], title=data["title"], author=data["author"], issued=bool(data.get("issued")))
