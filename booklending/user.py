"""Library readers and the books they hold."""

from __future__ import annotations

from dataclasses import dataclass, field

from booklending.book import LendingError

DEFAULT_MAX_BOOKS = 3


@dataclass
class User:
    """A registered reader with a limit on books held at once."""

    name: str
    user_id: str
    max_books_allowed: int = DEFAULT_MAX_BOOKS
    borrowed_books: list[str] = field(default_factory=list, init=False)

    def __post_init__(self) -> None:
        if not self.name:
            raise ValueError("Имя пользователя не может быть пустым")
        if not self.user_id:
            raise ValueError("ID пользователя не может быть пустым")

    def can_borrow_more(self) -> bool:
        """Return whether the reader is below their book limit."""
        return len(self.borrowed_books) < self.max_books_allowed

    def add_book(self, isbn: str) -> None:
        """Record that the reader now holds the book ``isbn``."""
        if not self.can_borrow_more():
            raise LendingError("У пользователя максимальное количество взятых книг")
        if not isbn:
            raise ValueError("ISBN не может быть пустым")
        self.borrowed_books.append(isbn)

    def remove_book(self, isbn: str) -> None:
        """Remove the first occurrence of ``isbn`` from the reader's books."""
        if not self.borrowed_books:
            raise LendingError("У пользователя нет книг")
        try:
            self.borrowed_books.remove(isbn)
        except ValueError:
            raise LendingError("ISBN не найден в списке выданных книг") from None

    def profile(self) -> str:
        """Return a human-readable description of the reader."""
        lines = [f"Имя: {self.name}", f"ID: {self.user_id}"]
        if self.borrowed_books:
            lines.extend(
                f"Книга№{number}{isbn}"
                for number, isbn in enumerate(self.borrowed_books, start=1)
            )
        else:
            lines.append("На данный момент пользователь не брал книг.")
        lines.append(
            f"Максимальное количество книг для выдачи: {self.max_books_allowed}"
        )
        return "\n".join(lines) + "\n"