import io

import pytest

from booklending.book import Book
from booklending.cli import main, run
from booklending.library import Library
from booklending.user import User


@pytest.fixture
def library(tmp_path):
    return Library(tmp_path / "library.txt")


def _run(library, text):
    out, err = io.StringIO(), io.StringIO()
    run(library, io.StringIO(text), out, err)
    return out.getvalue(), err.getvalue()


def test_exit_choice_prints_goodbye(library):
    out, err = _run(library, "10\n")
    assert "=== БИБЛИОТЕКА ===" in out
    assert out.endswith("Выход из программы...\n")
    assert err == ""


def test_add_book_through_menu(library):
    out, err = _run(library, "3\nDune\nHerbert\n1965\nISBN-1\n10\n")
    assert "Книга добавлена" in out
    assert err == ""
    assert len(library.books) == 1
    book = library.books[0]
    assert (book.title, book.author, book.year, book.isbn) == (
        "Dune",
        "Herbert",
        1965,
        "ISBN-1",
    )


def test_add_user_borrow_and_return(library):
    script = (
        "4\nAnna\nu1\n2\n"
        "3\nDune\nHerbert\n1965\nISBN-1\n"
        "5\nAnna\nISBN-1\n"
        "10\n"
    )
    out, err = _run(library, script)
    assert "Пользователь зарегистрирован" in out
    assert "Книга выдана" in out
    assert err == ""
    assert library.users[0].max_books_allowed == 2
    assert library.users[0].borrowed_books == ["ISBN-1"]
    assert library.books[0].borrowed_by == "Anna"

    out, err = _run(library, "6\nISBN-1\n10\n")
    assert "Книга принята" in out
    assert library.users[0].borrowed_books == []
    assert library.books[0].is_available


def test_non_numeric_choice_is_rejected(library):
    out, _ = _run(library, "abc\n10\n")
    assert "Ошибка: введите число от 1 до 10: " in out
    assert out.endswith("Выход из программы...\n")


def test_out_of_range_choice_is_rejected(library):
    out, _ = _run(library, "11\n0\n10\n")
    assert out.count("Ошибка: выберите пункт от 1 до 10: ") == 2
    assert out.endswith("Выход из программы...\n")


def test_invalid_year_reports_input_error(library):
    _, err = _run(library, "3\nOld\nAnon\n1000\nISBN-2\n10\n")
    assert "Ошибка ввода: Год должен быть корректным" in err
    assert library.books == []


def test_non_numeric_year_recovers(library):
    out, err = _run(library, "3\nT\nA\nabc\n10\n")
    assert "Ошибка ввода: Год должен быть корректным" in err
    assert "Ошибка: введите число от 1 до 10: " in out
    assert out.endswith("Выход из программы...\n")
    assert library.books == []


def test_duplicate_isbn_is_reported(library):
    library.add_book(Book("Dune", "Herbert", 1965, "ISBN-1"))
    _, err = _run(library, "3\nOther\nSomeone\n2000\nISBN-1\n10\n")
    assert "Ошибка ввода: ISBN должен быть уникальным" in err
    assert len(library.books) == 1


def test_borrow_unknown_book_reports_error(library):
    library.add_user(User("Anna", "u1"))
    _, err = _run(library, "5\nAnna\nNOPE\n10\n")
    assert "Ошибка: Книга не найдена" in err


def test_return_with_empty_isbn_is_input_error(library):
    _, err = _run(library, "6\n\n10\n")
    assert "Ошибка ввода: ISBN должен быть не пустым" in err


def test_find_book_shows_info_or_not_found(library):
    book = Book("Dune", "Herbert", 1965, "ISBN-1")
    library.add_book(book)
    out, _ = _run(library, "7\nISBN-1\n7\nMISSING\n10\n")
    assert book.info() in out
    assert "Книга не найдена" in out


def test_show_profile_by_name(library):
    user = User("Anna", "u1")
    library.add_user(user)
    out, _ = _run(library, "8\nAnna\n8\nBoris\n10\n")
    assert user.profile() in out
    assert "Пользователь не найден" in out


def test_listing_books_and_users(library):
    library.add_book(Book("Dune", "Herbert", 1965, "ISBN-1"))
    library.add_user(User("Anna", "u1"))
    out, _ = _run(library, "1\n2\n10\n")
    assert library.books_report() in out
    assert library.users_report() in out


def test_save_then_reload(library):
    library.add_book(Book("Dune", "Herbert", 1965, "ISBN-1"))
    library.add_user(User("Anna", "u1"))
    library.borrow_book("Anna", "ISBN-1")
    out, err = _run(library, "9\n10\n")
    assert "Данные сохранены" in out
    assert err == ""

    reloaded = Library(library.data_file)
    reloaded.load()
    assert reloaded.books == library.books
    assert reloaded.users == library.users


def test_end_of_input_stops_loop(library):
    out, _ = _run(library, "1\n")
    assert out.count("=== БИБЛИОТЕКА ===") == 2
    assert "Выход из программы..." not in out


def test_main_runs_with_data_file(tmp_path, monkeypatch, capsys):
    data_file = tmp_path / "store.txt"
    monkeypatch.setattr("sys.stdin", io.StringIO("4\nAnna\nu1\n3\n9\n10\n"))
    assert main([str(data_file)]) == 0
    captured = capsys.readouterr()
    assert "Данные сохранены" in captured.out

    loaded = Library(data_file)
    loaded.load()
    assert [user.name for user in loaded.users] == ["Anna"]
    assert loaded.users[0].user_id == "u1"