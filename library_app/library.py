import logging
from typing import Any, Dict, List, Optional

from library_app import database
from library_app.book import Book
from library_app.config import settings
from library_app.validators import TextValidator

logger = logging.getLogger(__name__)


class Library:
    """Manages the catalog and its CSV persistence.

    Nothing is cached between calls: every operation reloads the backing
    file, so two Library instances on the same file always agree.
    Mutating operations let database.UnreadableFileError propagate instead
    of writing back a catalog they could not fully read.
    """

    def __init__(self, db_file: Optional[str] = None) -> None:
        self.db_file = db_file or settings.data_file

    def _load(self) -> List[Book]:
        return database.load_books(self.db_file)

    # ------------------------- Core operations ------------------------- #
    def add_book(self, title: str, author: str) -> Book:
        """Create a book with the next free id and append it to the file."""
        title = TextValidator.validate_title(title)
        author = TextValidator.validate_author(author)

        book = Book(self.next_id(), title, author)
        if database.append_book(book, self.db_file):
            logger.debug("Added book %d to %s", book.id, self.db_file)
        return book

    def list_books(self) -> List[Book]:
        """All books in file order; empty if the file cannot be read."""
        try:
            return self._load()
        except database.UnreadableFileError:
            return []

    def find_book(self, book_id: int) -> Optional[Book]:
        for book in self.list_books():
            if book.id == book_id:
                return book
        return None

    def next_id(self) -> int:
        # Never below 1, even when the file only holds zero or negative ids
        return max([0] + [b.id for b in self._load()]) + 1

    def set_status(self, book_id: int, checked_out: bool) -> bool:
        """Set the checked-out flag of the first book with this id.

        Returns False, leaving the file untouched, when no book matches.
        """
        books = self._load()
        for book in books:
            if book.id == book_id:
                if checked_out:
                    book.check_out()
                else:
                    book.check_in()
                database.overwrite_books(books, self.db_file)
                return True
        return False

    def check_out(self, book_id: int) -> bool:
        return self.set_status(book_id, True)

    def check_in(self, book_id: int) -> bool:
        return self.set_status(book_id, False)

    def delete_book(self, book_id: int) -> bool:
        """Remove every book with this id. Returns False if none matched."""
        books = self._load()
        remaining = [b for b in books if b.id != book_id]
        if len(remaining) == len(books):
            return False
        database.overwrite_books(remaining, self.db_file)
        return True

    # ------------------------- Maintenance ------------------------- #
    def seed(self) -> int:
        return database.seed_library(self.db_file)

    def get_statistics(self, books: Optional[List[Book]] = None) -> Dict[str, Any]:
        if books is None:
            books = self.list_books()
        checked_out = sum(1 for b in books if b.checked_out)
        return {
            "total_books": len(books),
            "checked_out": checked_out,
            "available": len(books) - checked_out,
        }
