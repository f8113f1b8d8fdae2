"""Interactive text menu for running the library from a terminal."""

from __future__ import annotations

import argparse
import logging
import re
import sys
from collections.abc import Callable
from typing import TextIO

from booklending.book import Book, LendingError
from booklending.library import Library
from booklending.user import User

DEFAULT_DATA_FILE = "data/library_data.txt"
EXIT_CHOICE = 10

_INTEGER_RE = re.compile(r"[+-]?\d+")
_INT_MIN = -(2**31)
_INT_MAX = 2**31 - 1

MENU = (
    "\n=== БИБЛИОТЕКА ===\n"
    "1. Просмотреть все книги\n"
    "2. Просмотреть всех пользователей\n"
    "3. Добавить новую книгу\n"
    "4. Зарегистрировать пользователя\n"
    "5. Выдать книгу пользователю\n"
    "6. Принять книгу от пользователя\n"
    "7. Поиск книги по ISBN\n"
    "8. Просмотреть профиль пользователя\n"
    "9. Сохранить данные в файл\n"
    "10. Выход\n"
    "Ваш выбор: _"
)


class _Reader:
    """Reads whitespace-separated integers and whole lines from one text stream.

    A failed integer read puts the reader into a failed state in which further
    reads yield nothing until ``clear`` is called, as a terminal stream does.
    """

    def __init__(self, stream: TextIO) -> None:
        self._stream = stream
        self._pending: str | None = None
        self._failed = False

    def _next_line(self) -> str:
        line = self._stream.readline()
        if not line:
            raise EOFError
        return line

    def read_int(self) -> int | None:
        """Return the next integer, or None if the next word is not one."""
        if self._failed:
            return None
        while True:
            if self._pending is None:
                self._pending = self._next_line()
            stripped = self._pending.lstrip()
            if stripped:
                self._pending = stripped
                break
            self._pending = None
        match = _INTEGER_RE.match(self._pending)
        if match is None or not _INT_MIN <= int(match.group()) <= _INT_MAX:
            self._failed = True
            return None
        self._pending = self._pending[match.end():]
        return int(match.group())

    def clear(self) -> None:
        self._failed = False

    def ignore_line(self) -> None:
        """Discard the rest of the current line."""
        if self._failed:
            return
        if self._pending is None:
            self._next_line()
        self._pending = None

    def read_line(self) -> str:
        """Return the rest of the current line, or the next line."""
        if self._failed:
            return ""
        if self._pending is not None:
            line, self._pending = self._pending, None
        else:
            line = self._next_line()
        return line.rstrip("\r\n")


def _read_choice(reader: _Reader, out: TextIO) -> int:
    while True:
        choice = reader.read_int()
        if choice is None:
            reader.clear()
            reader.ignore_line()
            out.write("Ошибка: введите число от 1 до 10: ")
            continue
        if not 1 <= choice <= EXIT_CHOICE:
            out.write("Ошибка: выберите пункт от 1 до 10: ")
            continue
        reader.ignore_line()
        return choice


def _report_error(exc: Exception, err: TextIO) -> None:
    if isinstance(exc, ValueError):
        print(f"Ошибка ввода: {exc}", file=err)
    else:
        print(f"Ошибка: {exc}", file=err)


def _prompt(reader: _Reader, out: TextIO, text: str) -> str:
    out.write(text)
    return reader.read_line()


def _prompt_int(reader: _Reader, out: TextIO, text: str) -> int:
    out.write(text)
    value = reader.read_int()
    reader.ignore_line()
    return 0 if value is None else value


def _show_books(library: Library, reader: _Reader, out: TextIO, err: TextIO) -> None:
    print("\n-----Список всех книг-----", file=out)
    out.write(library.books_report())


def _show_users(library: Library, reader: _Reader, out: TextIO, err: TextIO) -> None:
    print("\n-----Список всех пользователей-----", file=out)
    out.write(library.users_report())


def _add_book(library: Library, reader: _Reader, out: TextIO, err: TextIO) -> None:
    print("\n-----Добавление новой книги-----", file=out)
    try:
        title = _prompt(reader, out, "Название: ")
        author = _prompt(reader, out, "Автор: ")
        year = _prompt_int(reader, out, "Год: ")
        isbn = _prompt(reader, out, "ISBN: ")
        library.add_book(Book(title, author, year, isbn))
        print("Книга добавлена", file=out)
    except (ValueError, LendingError) as exc:
        _report_error(exc, err)


def _add_user(library: Library, reader: _Reader, out: TextIO, err: TextIO) -> None:
    print("\n-----Регистрация пользователя-----", file=out)
    try:
        name = _prompt(reader, out, "Имя пользователя: ")
        user_id = _prompt(reader, out, "ID пользователя: ")
        max_books = _prompt_int(
            reader, out, "Максимальное количество книг для выдачи: "
        )
        library.add_user(User(name, user_id, max_books))
        print("Пользователь зарегистрирован", file=out)
    except (ValueError, LendingError) as exc:
        _report_error(exc, err)


def _borrow_book(library: Library, reader: _Reader, out: TextIO, err: TextIO) -> None:
    print("\n-----Выдача книги пользователю-----", file=out)
    try:
        user_name = _prompt(reader, out, "Имя пользователя: ")
        isbn = _prompt(reader, out, "ISBN книги: ")
        library.borrow_book(user_name, isbn)
        print("Книга выдана", file=out)
    except (ValueError, LendingError) as exc:
        _report_error(exc, err)


def _return_book(library: Library, reader: _Reader, out: TextIO, err: TextIO) -> None:
    print("\n-----Принятие книги от пользователя-----", file=out)
    try:
        isbn = _prompt(reader, out, "ISBN книги: ")
        library.return_book(isbn)
        print("Книга принята", file=out)
    except (ValueError, LendingError) as exc:
        _report_error(exc, err)


def _find_book(library: Library, reader: _Reader, out: TextIO, err: TextIO) -> None:
    print("\n-----Поиск книги по ISBN-----", file=out)
    try:
        isbn = _prompt(reader, out, "ISBN: ")
        book = library.find_book(isbn)
        if book is None:
            print("Книга не найдена", file=out)
        else:
            out.write(book.info())
    except (ValueError, LendingError) as exc:
        _report_error(exc, err)


def _show_profile(library: Library, reader: _Reader, out: TextIO, err: TextIO) -> None:
    print("\n-----Поиск профиля пользователя-----", file=out)
    try:
        name = _prompt(reader, out, "ID пользователя: ")
        user = library.find_user(name)
        if user is None:
            print("Пользователь не найден", file=out)
        else:
            out.write(user.profile())
    except (ValueError, LendingError) as exc:
        _report_error(exc, err)


def _save(library: Library, reader: _Reader, out: TextIO, err: TextIO) -> None:
    try:
        library.save()
        print("Данные сохранены", file=out)
    except (ValueError, LendingError) as exc:
        print(f"Ошибка сохранения: {exc}", file=err)


_ACTIONS: dict[int, Callable[[Library, _Reader, TextIO, TextIO], None]] = {
    1: _show_books,
    2: _show_users,
    3: _add_book,
    4: _add_user,
    5: _borrow_book,
    6: _return_book,
    7: _find_book,
    8: _show_profile,
    9: _save,
}


def run(
    library: Library,
    input_stream: TextIO,
    output_stream: TextIO,
    error_stream: TextIO,
) -> None:
    """Run the menu loop until the exit item is chosen or input runs out."""
    reader = _Reader(input_stream)
    try:
        while True:
            output_stream.write(MENU)
            choice = _read_choice(reader, output_stream)
            if choice == EXIT_CHOICE:
                print("Выход из программы...", file=output_stream)
                return
            _ACTIONS[choice](library, reader, output_stream, error_stream)
    except EOFError:
        return


def main(argv: list[str] | None = None) -> int:
    """Load the library data file and run the interactive menu."""
    parser = argparse.ArgumentParser(description="Library lending menu.")
    parser.add_argument(
        "data_file",
        nargs="?",
        default=DEFAULT_DATA_FILE,
        help="path of the library data file",
    )
    args = parser.parse_args(argv)
    logging.basicConfig(level=logging.WARNING, format="%(message)s")

    try:
        library = Library(args.data_file)
        library.load()
        run(library, sys.stdin, sys.stdout, sys.stderr)
    except (ValueError, LendingError) as exc:
        _report_error(exc, sys.stderr)
    return 0