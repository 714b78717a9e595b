import os
import json
from typing import Any, Dict, List

from rich.console import Console
from rich.markup import escape
from rich.table import Table

from library_app.book import Book

# Environment variable to control CLI output mode
# Allowed values: 'plain' (default), 'json', 'rich'
OUTPUT_MODE_ENV = "LIB_CLI_OUTPUT"

_console = Console()


def get_output_mode() -> str:
    return os.environ.get(OUTPUT_MODE_ENV, "plain").lower()


def format_book_line(book: Book) -> str:
    return (f"Book ID: {book.id} | Title: {book.title} | "
            f"Author: {book.author} | Status: {book.status}")


def print_list_result(books: List[Book]) -> None:
    """Print the catalog according to the current output mode.
    - plain: header plus one 'Book ID: .. | Title: ..' line per book
    - json: JSON array of book dicts
    - rich: Rich table
    """
    mode = get_output_mode()

    if mode == "json":
        print(json.dumps([b.to_dict() for b in books], ensure_ascii=False))
        return

    if not books:
        print("\nNo books in the library yet.")
        return

    if mode == "rich":
        table = Table(title="📚 Books in the library", show_lines=False, header_style="bold cyan")
        table.add_column("ID", style="magenta", justify="right", no_wrap=True)
        table.add_column("Title", style="white")
        table.add_column("Author", style="white")
        table.add_column("Status")
        for b in books:
            status = "[yellow]Checked Out[/]" if b.checked_out else "[green]Available[/]"
            table.add_row(str(b.id), escape(b.title), escape(b.author), status)
        _console.print(table)
    else:
        print("\nBooks in the library:")
        for b in books:
            print(format_book_line(b))


def print_stats_result(stats: Dict[str, Any]) -> None:
    """Print the catalog count footer; silent in json mode and for an empty catalog."""
    mode = get_output_mode()
    total = stats.get("total_books", 0)
    if mode == "json" or not total:
        return

    checked_out = stats.get("checked_out", 0)
    if mode == "rich":
        _console.print(f"[dim]📊 Total: {total} books ({checked_out} checked out)[/]")
    else:
        print(f"Total: {total} books ({checked_out} checked out)")
