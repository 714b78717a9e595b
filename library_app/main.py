import logging
from typing import Optional

import typer
from rich import box
from rich.console import Console
from rich.markup import escape
from rich.panel import Panel
from rich.prompt import Prompt
from rich.table import Table

from library_app.config import settings
from library_app.database import UnreadableFileError
from library_app.library import Library
from library_app.ui_helpers import print_list_result, print_stats_result
from library_app.validators import IdValidator

logger = logging.getLogger(__name__)

console = Console()

MENU_ITEMS = [
    ("1", "Add Book", "➕"),
    ("2", "List Books", "📚"),
    ("3", "Check Out Book", "📤"),
    ("4", "Check In Book", "📥"),
    ("5", "Delete Book", "🗑️"),
    ("6", "Exit", "🚪"),
]

app = typer.Typer(help="Library catalog CLI", add_completion=False)


def configure_logging() -> None:
    logging.basicConfig(
        level=settings.effective_log_level,
        format="%(levelname)s %(name)s: %(message)s",
    )


def render_menu() -> None:
    table = Table.grid(padding=(0, 2))
    table.add_column(justify="right", style="bold cyan", width=4)
    table.add_column(justify="left", style="white")
    for key, label, icon in MENU_ITEMS:
        table.add_row(f"[reverse]{key}[/]", f"{icon} {label}")

    console.print()
    console.print(Panel(
        table,
        title="What would you like to do?",
        border_style="cyan",
        box=box.HEAVY,
        padding=(0, 2),
    ))


def ask_book_id(action: str) -> Optional[int]:
    raw = Prompt.ask(f"\nEnter the ID of the book to {action}", console=console)
    return IdValidator.parse_id(raw)


# ------------------------- Menu actions ------------------------- #
def add(lib: Library) -> None:
    """Prompt for title and author and add the book."""
    title = Prompt.ask("\nEnter title", console=console)
    author = Prompt.ask("Enter author", console=console)
    try:
        book = lib.add_book(title, author)
    except ValueError as e:
        console.print(f"[bold red]Error:[/] {escape(str(e))}")
        return
    console.print(
        f'[green]Added "{escape(book.title)}" by {escape(book.author)} with ID {book.id}.[/]'
    )


def list_all_books(lib: Library) -> None:
    books = lib.list_books()
    print_list_result(books)
    print_stats_result(lib.get_statistics(books))


def update_status(lib: Library, checked_out: bool) -> None:
    """List the catalog, then check a book out or in by id."""
    list_all_books(lib)
    book_id = ask_book_id("check out" if checked_out else "check in")
    if book_id is None:
        console.print("[red]Invalid ID.[/]")
        return

    if lib.set_status(book_id, checked_out):
        status = "Checked Out" if checked_out else "Available"
        console.print(f"[green]Updated book with ID {book_id} to {status}.[/]")
    else:
        console.print(f"[bold red]Error:[/] Book with ID {book_id} not found.")


def remove(lib: Library) -> None:
    list_all_books(lib)
    book_id = ask_book_id("delete")
    if book_id is None:
        console.print("[red]Invalid ID.[/]")
        return

    if lib.delete_book(book_id):
        console.print(f"[green]Deleted book with ID {book_id} from the library.[/]")
    else:
        console.print(f"[bold red]Error:[/] Book with ID {book_id} not found, cannot delete.")


def run_menu(lib: Library) -> None:
    """Numbered menu loop; returns on the Exit choice or end of input."""
    while True:
        render_menu()
        try:
            raw = Prompt.ask("\nChoice", console=console)
            choice = IdValidator.parse_id(raw)

            if choice is None:
                console.print("[yellow]Invalid input. Please enter a number between 1 and 6.[/]")
            elif not 1 <= choice <= len(MENU_ITEMS):
                console.print("[yellow]Invalid choice. Please enter a number between 1 and 6.[/]")
            elif choice == 1:
                add(lib)
            elif choice == 2:
                list_all_books(lib)
            elif choice == 3:
                update_status(lib, checked_out=True)
            elif choice == 4:
                update_status(lib, checked_out=False)
            elif choice == 5:
                remove(lib)
            else:
                console.print("\nExiting program. Goodbye!")
                break
        except UnreadableFileError as e:
            console.print(f"[bold red]Error:[/] {escape(str(e))}")
        except EOFError:
            console.print("\nExiting program. Goodbye!")
            break


@app.command()
def menu() -> None:
    """Run the interactive library menu."""
    configure_logging()
    lib = Library()
    logger.debug("%s %s using data file %s", settings.app_name, settings.app_version, lib.db_file)

    if settings.seed_on_startup:
        seeded = lib.seed()
        if seeded:
            console.print(f"\nSeeded initial library with {seeded} books.")

    console.print(f"Welcome to the {escape(settings.app_name)}!")
    run_menu(lib)


if __name__ == "__main__":
    app()
