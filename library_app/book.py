from __future__ import annotations


class Book:
    """A single catalog entry."""

    def __init__(self, book_id: int, title: str, author: str, checked_out: bool = False) -> None:
        self.id = int(book_id)
        self.title = title.strip()
        self.author = author.strip()
        self.checked_out = bool(checked_out)

    def __repr__(self) -> str:
        return (f"Book(book_id={self.id!r}, title={self.title!r}, "
                f"author={self.author!r}, checked_out={self.checked_out!r})")

    def __eq__(self, other: object) -> bool:
        if not isinstance(other, Book):
            return NotImplemented
        return self.to_dict() == other.to_dict()

    # Mutable (check_out/check_in), so compared by value but not hashable
    __hash__ = None

    @property
    def status(self) -> str:
        return "Checked Out" if self.checked_out else "Available"

    def check_out(self) -> None:
        self.checked_out = True

    def check_in(self) -> None:
        self.checked_out = False

    def to_dict(self) -> dict:
        return {
            "id": self.id,
            "title": self.title,
            "author": self.author,
            "checked_out": self.checked_out,
        }
