import logging
import re
from typing import Callable, Dict, Optional

from rich.console import Console
from rich.table import Table
from rich.panel import Panel
from rich.prompt import Prompt
from rich.markup import escape
from rich import box
import typer

from book import Book
from config import settings
from errors import LibraryError
from fine import combine
from library import Library, seed_library
from logging_config import setup_logging
from report import ReportWriter
from ui_helpers import set_output_mode, print_list_result, print_book_result, print_fine_result
from validators import InputValidator

APP_NAME = settings.app_name

logger = logging.getLogger(__name__)

console = Console()
err_console = Console(stderr=True)


def _ask(prompt: str) -> str:
    return Prompt.ask(prompt, console=console).strip()


def _ask_book_id(prompt: str) -> int:
    return InputValidator.parse_book_id(_ask(prompt))


# --- Menu eylemleri ---
def list_all_books(lib: Library) -> None:
    """Tüm kitapları ve toplam sayıyı gösterir."""
    print_list_result(lib)

def add(lib: Library) -> None:
    book_id = _ask_book_id("Enter Book ID")
    title = _ask("Enter Title")
    author = _ask("Enter Author")
    category = InputValidator.parse_category(_ask("Type (1.Novel 2.Science 3.History)"))
    if category is None:
        console.print("[yellow]Invalid Type![/]")
        return
    lib.add_book(Book(book_id, title, author, category))
    console.print(f"[green]Book added:[/] {escape(title)}")

def remove(lib: Library) -> None:
    book_id = _ask_book_id("Enter Book ID to remove")
    if lib.remove_book(book_id):
        console.print("Book removed.")
    else:
        console.print("Book not found.")

def find_by_id(lib: Library) -> None:
    book_id = _ask_book_id("Enter Book ID to search")
    print_book_result(lib.find_book(book_id))

def find_by_title(lib: Library) -> None:
    title = _ask("Enter Title to search")
    print_book_result(lib.find_book_by_title(title))

def issue(lib: Library) -> None:
    book_id = _ask_book_id("Enter Book ID to issue")
    if lib.issue_book(book_id) is None:
        console.print("Book not found.")
    else:
        console.print("[green]Book issued successfully![/]")

def return_book(lib: Library) -> None:
    book_id = _ask_book_id("Enter Book ID to return")
    if lib.return_book(book_id) is None:
        console.print("Book not found.")
    else:
        console.print("[green]Book returned successfully![/]")

def save_report(lib: Library, reporter: ReportWriter) -> None:
    book_id = _ask_book_id("Enter Book ID to save report")
    book = lib.find_book(book_id)
    if book is None:
        console.print("Book not found.")
        return
    reporter.append(book)
    console.print("Book details saved to file.")

def fine_calculation() -> None:
    """İki ceza tutarını toplar (tek satırda iki değer)."""
    raw = _ask("Enter fine1 and fine2 amounts")
    parts = [p for p in re.split(r"[\s,]+", raw) if p]
    if len(parts) != 2:
        raise ValueError("Enter exactly two amounts.")
    f1, f2 = (InputValidator.parse_amount(p) for p in parts)
    print_fine_result(combine(f1, f2))


def render_menu() -> None:
    menu_items = [
        ("1", "Display All Books"),
        ("2", "Add Book"),
        ("3", "Remove Book"),
        ("4", "Search Book by ID"),
        ("5", "Search Book by Title"),
        ("6", "Issue Book"),
        ("7", "Return Book"),
        ("8", "Save Issued Book Report"),
        ("9", "Fine Calculation"),
        ("0", "Exit"),
    ]

    table = Table.grid(padding=(0, 2))
    table.add_column(justify="right", style="bold cyan", width=4)
    table.add_column(justify="left", style="white")
    for key, label in menu_items:
        table.add_row(f"[reverse]{key}[/]", label)

    console.print(Panel(table, title=APP_NAME, border_style="cyan", box=box.HEAVY, padding=(0, 2)))


def run_menu(lib: Library, reporter: Optional[ReportWriter] = None) -> None:
    """Kütüphane için menü döngüsü; 0 veya giriş sonu ile biter."""
    reporter = reporter or ReportWriter()
    actions: Dict[int, Callable[[], None]] = {
        1: lambda: list_all_books(lib),
        2: lambda: add(lib),
        3: lambda: remove(lib),
        4: lambda: find_by_id(lib),
        5: lambda: find_by_title(lib),
        6: lambda: issue(lib),
        7: lambda: return_book(lib),
        8: lambda: save_report(lib, reporter),
        9: fine_calculation,
    }

    while True:
        render_menu()
        choice = None
        try:
            choice = InputValidator.parse_int(Prompt.ask("Enter your choice", console=console))
            if choice == 0:
                console.print("Exiting system...")
                break
            action = actions.get(choice)
            if action is None:
                console.print("[yellow]Invalid choice![/]")
                continue
            action()
        except (EOFError, KeyboardInterrupt):
            logger.debug("Input closed or interrupted, leaving menu")
            console.print()
            console.print("Exiting system...")
            break
        except (LibraryError, ValueError) as e:
            logger.info("Menu choice %s failed: %s", choice, e)
            err_console.print(f"[bold red]Error:[/] {escape(str(e))}")
        except Exception as e:
            logger.exception("Unexpected error in menu choice %s", choice)
            err_console.print(f"[bold red]Unexpected error:[/] {escape(str(e))}")
        print()  # işlemler arasında boşluk bırakır


# --- Typer CLI Uygulaması ---
app = typer.Typer(help="Library inventory tracker", add_completion=False)

@app.command()
def cli_menu(
    output: Optional[str] = typer.Option(
        None,
        "--output",
        "-o",
        help="Çıktı formatı: plain | json | rich (varsayılan: plain)",
    ),
    report_file: Optional[str] = typer.Option(None, "--report-file", help="Rapor dosyası (varsayılan: ayarlardan)"),
    no_seed: bool = typer.Option(False, "--no-seed", help="Başlangıç kitaplarını yükleme"),
):
    """Etkileşimli kütüphane menüsünü başlat."""
    if output:
        set_output_mode(output)
    setup_logging(settings.log_level)

    lib = Library()
    if settings.seed_catalog and not no_seed:
        for message in seed_library(lib):
            err_console.print(f"Initialization error: {escape(message)}")

    run_menu(lib, ReportWriter(report_file))

if __name__ == "__main__":
    app()
