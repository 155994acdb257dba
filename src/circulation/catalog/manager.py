"""Catalog manager for book records."""

import logging
from dataclasses import replace
from typing import Optional

from .models import Book
from .schemas import BookCreate

logger = logging.getLogger(__name__)


class DuplicateBookError(ValueError):
    """Raised when adding a book whose identifier is already catalogued."""

    pass


class Catalog:
    """Owns the set of books and their availability."""

    def __init__(self) -> None:
        self._books: dict[str, Book] = {}

    def add_book(self, title: str, author: str, identifier: str) -> Book:
        """Add a new, available book.

        Args:
            title: Book title
            author: Author name
            identifier: Unique catalog key (e.g. ISBN)

        Returns:
            The stored book

        Raises:
            DuplicateBookError: If the identifier is already in the catalog
            ValidationError: If any field is empty
        """
        data = BookCreate(title=title, author=author, identifier=identifier)

        if data.identifier in self._books:
            raise DuplicateBookError(f"Book already exists: {data.identifier}")

        book = Book(title=data.title, author=data.author, identifier=data.identifier)
        self._books[book.identifier] = book
        logger.info("Book added | identifier=%s title=%s", book.identifier, book.title)
        return book

    def get_book(self, identifier: str) -> Optional[Book]:
        """Get a book by identifier, available or not."""
        return self._books.get(identifier)

    def find_available(self, identifier: str) -> Optional[Book]:
        """Get a book by identifier only if it can be checked out."""
        book = self._books.get(identifier)
        if book is None or not book.available:
            return None
        return book

    def all_books(self) -> tuple[Book, ...]:
        """Snapshot of every book, in the order they were added."""
        return tuple(self._books.values())

    def available_books(self) -> tuple[Book, ...]:
        """Snapshot of the books currently on the shelf."""
        return tuple(b for b in self._books.values() if b.available)

    def mark_unavailable(self, identifier: str) -> Book:
        """Flag a book as lent out.

        Raises:
            KeyError: If the identifier is unknown
        """
        return self._set_available(identifier, False)

    def mark_available(self, identifier: str) -> Book:
        """Flag a book as back on the shelf.

        Raises:
            KeyError: If the identifier is unknown
        """
        return self._set_available(identifier, True)

    def _set_available(self, identifier: str, available: bool) -> Book:
        book = replace(self._books[identifier], available=available)
        self._books[identifier] = book
        return book

    def __len__(self) -> int:
        return len(self._books)

    def __contains__(self, identifier: object) -> bool:
        return identifier in self._books
