from typing import Optional

from book import Category
from errors import InvalidArgumentError

# Menu numbering for the "Type" prompt when adding a book
CATEGORY_CHOICES = {
    "1": Category.NOVEL,
    "2": Category.SCIENCE,
    "3": Category.HISTORY,
}


class InputValidator:
    """Parsing helpers for the values typed at the menu prompts."""

    @staticmethod
    def parse_int(raw: Optional[str]) -> Optional[int]:
        if raw is None:
            return None
        s = raw.strip()
        try:
            return int(s)
        except ValueError:
            return None

    @staticmethod
    def parse_book_id(raw: Optional[str]) -> int:
        value = InputValidator.parse_int(raw)
        if value is None:
            raise ValueError(f"Invalid book ID: {raw!r}")
        return value

    @staticmethod
    def parse_amount(raw: Optional[str]) -> float:
        try:
            return float((raw or "").strip())
        except ValueError:
            raise ValueError(f"Invalid amount: {raw!r}") from None

    @staticmethod
    def parse_category(raw: Optional[str]) -> Optional[Category]:
        """Map the menu number (or a category name) to a Category, else None."""
        if raw is None:
            return None
        s = raw.strip()
        if s in CATEGORY_CHOICES:
            return CATEGORY_CHOICES[s]
        try:
            return Category.parse(s)
        except InvalidArgumentError:
            return None

