from __future__ import annotations

from enum import Enum

from errors import AlreadyIssuedError, InvalidArgumentError, NotIssuedError


class Category(Enum):
    NOVEL = "Novel"
    SCIENCE = "Science"
    HISTORY = "History"

    @property
    def fine_rate(self) -> float:
        return FINE_RATES[self]

    @classmethod
    def parse(cls, value: "Category | str") -> "Category":
        """Accept a member or its name/value, case-insensitively."""
        if isinstance(value, cls):
            return value
        if isinstance(value, str):
            wanted = value.strip().lower()
            for member in cls:
                if wanted in (member.name.lower(), member.value.lower()):
                    return member
        raise InvalidArgumentError(f"Unknown category: {value!r}")


# Currency units per overdue unit
FINE_RATES = {
    Category.NOVEL: 2.0,
    Category.SCIENCE: 3.5,
    Category.HISTORY: 1.5,
}


class Book:
    """A single catalog entry with its lending flag."""

    def __init__(self, book_id: int, title: str, author: str, category: Category | str) -> None:
        if isinstance(book_id, bool) or not isinstance(book_id, int):
            raise InvalidArgumentError(f"Book ID must be an integer: {book_id!r}")
        if not isinstance(title, str) or not isinstance(author, str):
            raise InvalidArgumentError("Title and author must be text")
        self._id = book_id
        self.title = title.strip()
        self.author = author.strip()
        self._category = Category.parse(category)
        self.issued = False

    @property
    def id(self) -> int:
        return self._id

    @property
    def category(self) -> Category:
        return self._category

    @property
    def fine_rate(self) -> float:
        return self._category.fine_rate

    @property
    def status(self) -> str:
        return "Issued" if self.issued else "Available"

    def issue(self) -> None:
        if self.issued:
            raise AlreadyIssuedError("Book already issued!")
        self.issued = True

    def return_book(self) -> None:
        if not self.issued:
            raise NotIssuedError("Book was not issued!")
        self.issued = False

    def display(self) -> str:
        return f"{self.id:<6}{self.title:<25}{self.author:<20}{self.status:<10}"

    def to_dict(self) -> dict:
        return {
            "id": self.id,
            "title": self.title,
            "author": self.author,
            "category": self.category.value,
            "fine_rate": self.fine_rate,
            "status": self.status,
            "issued": self.issued,
        }
