import csv
import logging
import os
from typing import Iterable, List, Optional, Sequence, Tuple

from library_app.book import Book
from library_app.config import settings

logger = logging.getLogger(__name__)

FIELD_SEPARATOR = ", "
STATUS_CHECKED_OUT = "Yes"
STATUS_AVAILABLE = "No"

# Starter catalog written when the backing file is missing or empty
SEED_BOOKS: List[Tuple[str, str]] = [
    ("Harry Potter and the Sorcerer’s Stone", "JK Rowling"),
    ("Harry Potter and the Chamber of Secrets", "JK Rowling"),
    ("Harry Potter and the Goblet of Fire", "JK Rowling"),
    ("Don Quixote", "Miguel de Cervantes"),
    ("The Hobbit", "J.R.R. Tolkien"),
    ("Wuthering Heights", "Emily Bronte"),
    ("The Lord of The Rings", "J.R.R. Tolkien"),
    ("Good Omens", "Neil Gaiman"),
    ("Coraline", "Neil Gaiman"),
    ("The Giver", "Lois Lowry"),
    ("Number the Stars", "Lois Lowry"),
    ("The Great Gatsby", "F. Scott Fitzgerald"),
    ("To Kill A Mockingbird", "Harper Lee"),
    ("The Hunger Games", "Suzanne Collins"),
    ("Catching Fire", "Suzanne Collins"),
    ("Game of Thrones", "George R. R. Martin"),
    ("The Wild Robot", "Peter Brown"),
    ("The Lightning Thief", "Rick Riordan"),
    ("The Last Olympian", "Rick Riordan"),
]


class InvalidRecordError(ValueError):
    """Raised when a line of the backing file is not a valid record."""


class UnreadableFileError(OSError):
    """Raised when the backing file exists but cannot be read."""


def _resolve(filename: Optional[str]) -> str:
    return filename or settings.data_file


# ------------------------- Record codec ------------------------- #
def _quote_field(value: str) -> str:
    # Only fields that would otherwise split are quoted, so plain records
    # keep the "1, Title, Author, No" shape.
    if "," in value or '"' in value:
        return '"' + value.replace('"', '""') + '"'
    return value


def serialize_book(book: Book) -> str:
    """Render a book as one line of the backing file (without newline)."""
    return FIELD_SEPARATOR.join([
        str(book.id),
        _quote_field(book.title),
        _quote_field(book.author),
        STATUS_CHECKED_OUT if book.checked_out else STATUS_AVAILABLE,
    ])


def deserialize_book(line: str) -> Book:
    """Parse one line of the backing file.

    Raises InvalidRecordError when the line does not hold exactly four
    fields, the id is not an integer or the status token is not Yes/No.
    """
    try:
        parts = next(csv.reader([line], skipinitialspace=True), [])
    except csv.Error as e:
        raise InvalidRecordError(f"Unparseable record: {e}") from e

    parts = [p.strip() for p in parts]
    if len(parts) != 4:
        raise InvalidRecordError(f"Expected 4 fields, got {len(parts)}.")

    try:
        book_id = int(parts[0])
    except ValueError as e:
        raise InvalidRecordError(f"Invalid book id: {parts[0]!r}") from e

    # A write cut off inside the last field leaves a partial token
    if parts[3] not in (STATUS_CHECKED_OUT, STATUS_AVAILABLE):
        raise InvalidRecordError(f"Invalid status: {parts[3]!r}")

    return Book(book_id, parts[1], parts[2], checked_out=(parts[3] == STATUS_CHECKED_OUT))


def _decode_line(raw: bytes) -> str:
    try:
        return raw.decode("utf-8")
    except UnicodeDecodeError as e:
        raise InvalidRecordError(f"Not valid UTF-8: {e.reason}") from e


# ------------------------- File operations ------------------------- #
def load_books(filename: Optional[str] = None) -> List[Book]:
    """Read every valid record from the backing file, in file order.

    Lines are decoded one at a time; a line that is not UTF-8 or not a
    valid record is logged and skipped. A missing file loads as empty.
    Raises UnreadableFileError when the file exists but cannot be read, so
    callers never rewrite the file from a partial load.
    """
    path = _resolve(filename)
    books: List[Book] = []
    if not os.path.exists(path):
        return books

    try:
        with open(path, "rb") as f:
            for raw in f:
                raw = raw.rstrip(b"\r\n")
                if not raw.strip():
                    continue
                try:
                    books.append(deserialize_book(_decode_line(raw)))
                except InvalidRecordError as e:
                    logger.warning("Skipping invalid line: %s (%s)",
                                   raw.decode("utf-8", errors="replace"), e)
    except OSError as e:
        logger.error("Could not read %s: %s", path, e)
        raise UnreadableFileError(f"Could not read {path}: {e}") from e
    return books


def _write_lines(path: str, books: Iterable[Book], mode: str) -> bool:
    try:
        with open(path, mode, encoding="utf-8") as f:
            for book in books:
                f.write(serialize_book(book) + "\n")
    except OSError as e:
        logger.error("Could not open %s for writing: %s", path, e)
        return False
    return True


def append_book(book: Book, filename: Optional[str] = None) -> bool:
    """Append a single record to the end of the backing file."""
    return _write_lines(_resolve(filename), [book], "a")


def overwrite_books(books: Sequence[Book], filename: Optional[str] = None) -> bool:
    """Replace the whole backing file with the given records.

    Not atomic: the file is truncated before the records are written.
    """
    return _write_lines(_resolve(filename), books, "w")


def file_is_empty(filename: Optional[str] = None) -> bool:
    path = _resolve(filename)
    if not os.path.exists(path):
        return True
    return os.path.getsize(path) == 0


def seed_library(filename: Optional[str] = None,
                 initial: Sequence[Tuple[str, str]] = SEED_BOOKS) -> int:
    """Write the starter catalog if the backing file is missing or empty.

    Returns the number of records written; 0 when the file already has data
    or could not be written.
    """
    path = _resolve(filename)
    if not file_is_empty(path):
        return 0

    books = [Book(i, title, author) for i, (title, author) in enumerate(initial, 1)]
    if not overwrite_books(books, path):
        return 0
    logger.info("Seeded %s with %d books", path, len(books))
    return len(books)
