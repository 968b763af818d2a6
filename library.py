import logging
from typing import Any, Dict, Iterable, List, Optional, Tuple

from book import Book, Category
from errors import DuplicateIdError, InvalidArgumentError, LibraryError

logger = logging.getLogger(__name__)

# (id, title, author, category) loaded at startup
DEFAULT_BOOKS: Tuple[Tuple[int, str, str, Category], ...] = (
    (101, "Pride_and_Prejudice", "Jane Austen", Category.NOVEL),
    (201, "Physics_Fundamentals", "H.C. Verma", Category.SCIENCE),
    (301, "World_History", "K. Roberts", Category.HISTORY),
)

LIST_HEADER = f"{'ID':<6}{'Title':<25}{'Author':<20}{'Status':<10}"
LIST_RULE = "-" * 53


class Library:
    """Manages the in-memory collection of books, kept in insertion order."""

    def __init__(self, books: Optional[Iterable[Book]] = None) -> None:
        self.books: List[Book] = []
        for book in books or ():
            self.add_book(book)

    # ------------------------- Core operations ------------------------- #
    def add_book(self, book: Optional[Book]) -> None:
        """Append a pre-constructed Book. Prevent duplicates by id."""
        if book is None:
            raise InvalidArgumentError("Null book")
        if self.find_book(book.id) is not None:
            raise DuplicateIdError(f"Book ID {book.id} already exists!")
        self.books.append(book)
        logger.info("Added book %s (%s)", book.id, book.title)

    def remove_book(self, book_id: int) -> bool:
        for index, book in enumerate(self.books):
            if book.id == book_id:
                del self.books[index]
                logger.info("Removed book %s", book_id)
                return True
        logger.debug("Remove skipped, book %s not found", book_id)
        return False

    def find_book(self, book_id: int) -> Optional[Book]:
        for book in self.books:
            if book.id == book_id:
                return book
        return None

    def find_book_by_title(self, title: str) -> Optional[Book]:
        """Exact, case-sensitive title match; the first one wins."""
        for book in self.books:
            if book.title == title:
                return book
        return None

    def list_books(self) -> List[Book]:
        return list(self.books)

    def list_all(self) -> List[str]:
        """Display lines for every book, framed by a header and a total line."""
        lines = ["=" * 19 + " Library Books " + "=" * 19, LIST_HEADER, LIST_RULE]
        lines.extend(book.display() for book in self.books)
        lines.append(LIST_RULE)
        lines.append(f"Total Books: {len(self)}")
        return lines

    # ------------------------- Lending ------------------------- #
    def issue_book(self, book_id: int) -> Optional[Book]:
        """Mark a book as issued. Returns None when the id is unknown."""
        book = self.find_book(book_id)
        if book is None:
            return None
        book.issue()
        logger.info("Issued book %s", book_id)
        return book

    def return_book(self, book_id: int) -> Optional[Book]:
        book = self.find_book(book_id)
        if book is None:
            return None
        book.return_book()
        logger.info("Returned book %s", book_id)
        return book

    def get_statistics(self) -> Dict[str, Any]:
        issued = sum(1 for book in self.books if book.issued)
        return {
            "total_books": len(self.books),
            "issued_books": issued,
            "available_books": len(self.books) - issued,
        }

    def __len__(self) -> int:
        return len(self.books)


def seed_library(library: Library, entries: Iterable[Tuple[int, str, str, Any]] = DEFAULT_BOOKS) -> List[str]:
    """Load the starting catalog.

    Failures are logged and collected instead of raised, so a bad entry never
    stops startup. Returns the error messages, empty when everything loaded.
    """
    errors: List[str] = []
    for book_id, title, author, category in entries:
        try:
            library.add_book(Book(book_id, title, author, category))
        except LibraryError as e:
            logger.info("Initialization error for book %s: %s", book_id, e)
            errors.append(str(e))
    return errors
