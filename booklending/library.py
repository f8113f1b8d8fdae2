"""The library catalogue: books, readers, lending and persistence."""

from __future__ import annotations

import logging
import os
import re
from collections.abc import Iterator
from pathlib import Path

from booklending.book import Book, LendingError
from booklending.user import User

logger = logging.getLogger(__name__)

SEPARATOR = "-----------------------\n"
BOOKS_HEADER = "---BOOKS---"
USERS_HEADER = "---USERS---"

_INT_PREFIX = re.compile(r"\s*([+-]?\d+)")


def _parse_int(text: str) -> int:
    match = _INT_PREFIX.match(text)
    if match is None:
        raise ValueError(f"not a number: {text!r}")
    return int(match.group(1))


def _field(lines: Iterator[str], prefix: str) -> str:
    line = next(lines, "")
    if len(line) < len(prefix):
        raise ValueError(f"malformed record line: {line!r}")
    return line[len(prefix):]


class Library:
    """A collection of books and readers backed by a text data file."""

    def __init__(self, data_file: str | os.PathLike[str]) -> None:
        self.books: list[Book] = []
        self.users: list[User] = []
        self.data_file = Path(data_file)

    def add_book(self, book: Book) -> None:
        """Add a book; its ISBN must not already be in the catalogue."""
        if any(existing.isbn == book.isbn for existing in self.books):
            raise ValueError("ISBN должен быть уникальным")
        self.books.append(book)

    def add_user(self, user: User) -> None:
        """Register a reader; their ID must be unique."""
        if any(existing.user_id == user.user_id for existing in self.users):
            raise ValueError("ID пользователя должен быть уникальным")
        self.users.append(user)

    def borrow_book(self, user_name: str, isbn: str) -> None:
        """Lend the book ``isbn`` to the reader named ``user_name``."""
        if not isbn:
            raise ValueError("ISBN должен быть не пустым")
        if not user_name:
            raise ValueError("Имя пользователя не может быть пустым")

        book = self.find_book(isbn)
        user = self.find_user(user_name)
        if book is None:
            raise LendingError("Книга не найдена")
        if user is None:
            raise LendingError("Пользователь не найден")

        if not user.can_borrow_more():
            raise LendingError("У пользователя максимальное количество книг")
        if not book.is_available:
            raise LendingError("Книга уже взята")
        user.add_book(isbn)
        book.borrow(user_name)

    def return_book(self, isbn: str) -> None:
        """Take the book ``isbn`` back from whoever holds it."""
        if not isbn:
            raise ValueError("ISBN должен быть не пустым")

        book = self.find_book(isbn)
        if book is None:
            raise LendingError("Книга не найдена")

        borrower = book.borrowed_by
        if not borrower:
            raise LendingError("Книга не была взята")

        user = self.find_user(borrower)
        if user is None:
            raise LendingError("Пользователь не найден")

        user.remove_book(isbn)
        book.give_back()

    def find_book(self, isbn: str) -> Book | None:
        """Return the book with ``isbn``, or None if there is none."""
        if not isbn:
            raise ValueError("ISBN должен быть не пустым")
        return next((book for book in self.books if book.isbn == isbn), None)

    def find_user(self, name: str) -> User | None:
        """Return the first reader called ``name``, or None if there is none."""
        if not name:
            raise ValueError("Имя пользователя не может быть пустым")
        return next((user for user in self.users if user.name == name), None)

    def books_report(self) -> str:
        """Return the descriptions of all books, each followed by a separator."""
        return "".join(book.info() + SEPARATOR for book in self.books)

    def users_report(self) -> str:
        """Return the profiles of all readers, each followed by a separator."""
        return "".join(user.profile() + SEPARATOR for user in self.users)

    def _serialise(self) -> str:
        lines = [BOOKS_HEADER]
        for book in self.books:
            lines += [
                "BOOK",
                f"Title: {book.title}",
                f"Author: {book.author}",
                f"Year: {book.year}",
                f"ISBN: {book.isbn}",
                f"Available: {'yes' if book.is_available else 'no'}",
                f"BorrowedBy: {book.borrowed_by}",
            ]
        lines.append(USERS_HEADER)
        for user in self.users:
            lines += [
                "USER",
                f"Name: {user.name}",
                f"UserID: {user.user_id}",
                f"MaxBooks: {user.max_books_allowed}",
                f"BorrowedBooks: {'|'.join(user.borrowed_books)}",
            ]
        return "\n".join(lines) + "\n"

    def save(self) -> None:
        """Write all books and readers to the data file."""
        text = self._serialise()
        try:
            with open(self.data_file, "w", encoding="utf-8") as handle:
                handle.write(text)
        except OSError as exc:
            raise LendingError("Не удалось открыть файл для записи") from exc

    def load(self) -> None:
        """Replace books and readers with those in the data file, if it can be read.

        Records that fail validation are skipped and logged.
        """
        try:
            with open(self.data_file, encoding="utf-8") as handle:
                text = handle.read()
        except OSError:
            return

        self.books.clear()
        self.users.clear()
        lines = iter(text.split("\n"))

        for line in lines:
            if line == BOOKS_HEADER:
                break

        for line in lines:
            if line == USERS_HEADER:
                break
            if line != "BOOK":
                continue
            title = _field(lines, "Title: ")
            author = _field(lines, "Author: ")
            year = _parse_int(_field(lines, "Year: "))
            isbn = _field(lines, "ISBN: ")
            available = _field(lines, "Available: ")
            borrowed_by = _field(lines, "BorrowedBy: ")
            try:
                book = Book(title, author, year, isbn)
                if available == "no" and borrowed_by:
                    book.borrow(borrowed_by)
            except (ValueError, LendingError) as exc:
                logger.warning("Ошибка при загрузке книги: %s", exc)
                continue
            self.books.append(book)

        for line in lines:
            if line != "USER":
                continue
            name = _field(lines, "Name: ")
            user_id = _field(lines, "UserID: ")
            max_books = _parse_int(_field(lines, "MaxBooks: "))
            borrowed = _field(lines, "BorrowedBooks: ")
            try:
                user = User(name, user_id, max_books)
                for isbn in filter(None, borrowed.split("|")):
                    user.add_book(isbn)
            except (ValueError, LendingError) as exc:
                logger.warning("Ошибка при загрузке пользователя: %s", exc)
                continue
            self.users.append(user)