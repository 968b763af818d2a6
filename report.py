"""Append-only text report of saved (issued) books."""

import logging
from pathlib import Path
from typing import Optional, Union

from book import Book
from config import settings
from errors import ReportError

logger = logging.getLogger(__name__)

REPORT_MARKER = "Issued Book Saved"


def format_report_line(book: Book) -> str:
    """One fixed-width report row: id, title and the saved marker.

    Fields are padded but never truncated, so very long titles push the
    marker to the right.
    """
    return f"{book.id:<6}{book.title:<25}{REPORT_MARKER:<20}"


class ReportWriter:
    def __init__(self, filename: Optional[Union[str, Path]] = None) -> None:
        self.filename = Path(filename or settings.report_file)

    def append(self, book: Book, filename: Optional[Union[str, Path]] = None) -> Path:
        """Append the book's report line, creating the file if needed."""
        path = Path(filename) if filename else self.filename
        try:
            with open(path, "a", encoding="utf-8") as fout:
                fout.write(format_report_line(book) + "\n")
        except OSError as exc:
            raise ReportError(f"Cannot open file: {path}") from exc
        logger.info("Saved report line for book %s to %s", book.id, path)
        return path
