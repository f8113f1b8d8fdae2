"""Books held by the library and their lending state."""

from __future__ import annotations

from dataclasses import dataclass, field

EARLIEST_YEAR = 1450
CURRENT_YEAR = 2025


class LendingError(Exception):
    """Raised when a lending operation is not possible in the current state."""


@dataclass
class Book:
    """A book with a unique ISBN that can be lent to one reader at a time."""

    title: str
    author: str
    year: int
    isbn: str
    is_available: bool = field(default=True, init=False)
    borrowed_by: str = field(default="", init=False)

    def __post_init__(self) -> None:
        if not EARLIEST_YEAR <= self.year <= CURRENT_YEAR:
            raise ValueError("Год должен быть корректным")
        if not self.isbn:
            raise ValueError("ISBN должен быть не пустым")

    def borrow(self, user_id: str) -> None:
        """Mark the book as lent to ``user_id``."""
        if not self.is_available:
            raise LendingError("Книга уже взята")
        if not user_id:
            raise ValueError("Пустое ID пользователя")
        self.is_available = False
        self.borrowed_by = user_id

    def give_back(self) -> None:
        """Mark the book as returned."""
        if self.is_available:
            raise LendingError("Книгу не забирали")
        self.is_available = True
        self.borrowed_by = ""

    def info(self) -> str:
        """Return a human-readable description of the book."""
        lines = [
            f"Название: {self.title}",
            f"Автор: {self.author}",
            f"Год: {self.year}",
            f"ISBN: {self.isbn}",
        ]
        if self.is_available:
            lines.append("Книга доступна")
        else:
            lines.append("Книга не доступна")
            lines.append(f"Книга взята: {self.borrowed_by}")
        return "\n".join(lines) + "\n"