# booklending

A small console program for running a lending library. It keeps a catalogue
of books and a list of registered readers, records who has borrowed which
book, and saves everything to a plain-text data file. On start it loads that
file, if it can be read.

## Installing

```
pip install .
```

## Using the console program

```
booklending
booklending path/to/library_data.txt
```

The optional argument is the data file to load and save. Without it the
program uses `data/library_data.txt`, relative to the current directory.

The program opens a numbered menu, in Russian, with these items:

1. list all books
2. list all readers
3. add a new book
4. register a reader
5. lend a book to a reader
6. take a book back
7. find a book by ISBN
8. show a reader's profile
9. save data to the file
10. quit

The menu ends when you choose item 10 or when input runs out. Changes are
written only when you choose item 9; the directory that holds the data file
must already exist, or saving reports an error.

Records in the data file that break the rules below are skipped while
loading, and a warning naming the problem is printed.

## Rules the program enforces

- A book's year must be between 1450 and 2025, and its ISBN must not be empty.
- ISBNs are unique within the library, and so are reader IDs.
- A reader needs a non-empty name and a non-empty ID. A reader may borrow at
  most three books unless a different limit is set.
- Books are lent to readers by the reader's name.
- A book that is already out cannot be lent again. A book that is not out
  cannot be returned.

When one of these rules is broken, the program reports an error and goes on
running.

## Using it from Python

```python
from booklending.book import Book
from booklending.user import User
from booklending.library import Library

library = Library("library_data.txt")
library.load()

library.add_book(Book("Мастер и Маргарита", "М. Булгаков", 1967, "978-5-00-000000-1"))
library.add_user(User("Анна", "u1"))

library.borrow_book("Анна", "978-5-00-000000-1")
print(library.books_report())

library.return_book("978-5-00-000000-1")
library.save()
```

`Book.info()`, `User.profile()`, `Library.books_report()` and
`Library.users_report()` return text rather than printing it.
`Library.find_book` and `Library.find_user` return `None` when nothing
matches. Invalid arguments raise `ValueError`, and broken lending rules, as
well as a data file that cannot be written, raise
`booklending.book.LendingError`.

The menu loop can also be run on any text streams with
`booklending.cli.run(library, input_stream, output_stream, error_stream)`.