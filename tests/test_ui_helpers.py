import json

from library_app.book import Book
from library_app.ui_helpers import (
    OUTPUT_MODE_ENV,
    format_book_line,
    print_list_result,
    print_stats_result,
)


def test_format_book_line():
    book = Book(2, "Catching Fire", "Suzanne Collins", checked_out=True)
    assert format_book_line(book) == (
        "Book ID: 2 | Title: Catching Fire | Author: Suzanne Collins | Status: Checked Out"
    )


def test_plain_list(capsys):
    print_list_result([Book(1, "A", "X"), Book(2, "B", "Y", checked_out=True)])
    out = capsys.readouterr().out.splitlines()
    assert out[-3:] == [
        "Books in the library:",
        "Book ID: 1 | Title: A | Author: X | Status: Available",
        "Book ID: 2 | Title: B | Author: Y | Status: Checked Out",
    ]


def test_json_list_of_empty_catalog(monkeypatch, capsys):
    monkeypatch.setenv(OUTPUT_MODE_ENV, "json")
    print_list_result([])
    assert json.loads(capsys.readouterr().out) == []


def test_stats_footer(capsys):
    print_stats_result({"total_books": 3, "checked_out": 1})
    assert capsys.readouterr().out == "Total: 3 books (1 checked out)\n"

    print_stats_result({"total_books": 0})
    assert capsys.readouterr().out == ""


def test_unknown_output_mode_falls_back_to_plain(monkeypatch, capsys):
    monkeypatch.setenv(OUTPUT_MODE_ENV, "xml")
    print_list_result([Book(1, "A", "X")])
    assert "Book ID: 1 | Title: A | Author: X | Status: Available" in capsys.readouterr().out
