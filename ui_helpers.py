import os
import json
from typing import Optional
from rich.console import Console
from rich.markup import escape
from rich.table import Table
from rich.panel import Panel

from book import Book
from fine import Fine
from library import Library

# Environment variable to control CLI output mode
# İzin verilen değerler: 'plain' (default), 'json', 'rich'
OUTPUT_MODE_ENV = "LIB_CLI_OUTPUT"

_console = Console()

def set_output_mode(mode: str) -> None:
    mode = (mode or "").lower().strip()
    if mode in {"plain", "json", "rich"}:
        os.environ[OUTPUT_MODE_ENV] = mode
    # Geçersiz değerleri yoksay; mevcut varsayılanı koru

def get_output_mode() -> str:
    return os.environ.get(OUTPUT_MODE_ENV, "plain").lower()

def print_list_result(library: Library) -> None:
    """Kataloğu mevcut çıktı moduna göre yazdır.
    - plain: sabit genişlikli satırlar ve 'Total Books: N'
    - json: {"books": [...], "total_books": N, "issued_books": .., "available_books": ..}
    - rich: Rich tablosu
    """
    mode = get_output_mode()
    books = library.list_books()

    if mode == "json":
        payload = {"books": [b.to_dict() for b in books], **library.get_statistics()}
        print(json.dumps(payload, ensure_ascii=False))
    elif mode == "rich":
        table = Table(title="📚 Library Books", show_lines=True, header_style="bold cyan")
        table.add_column("ID", style="magenta", no_wrap=True)
        table.add_column("Title", style="white")
        table.add_column("Author", style="white")
        table.add_column("Category", style="white")
        table.add_column("Fine Rate", justify="right")
        table.add_column("Status")
        for b in books:
            status = "[red]Issued[/]" if b.issued else "[green]Available[/]"
            table.add_row(str(b.id), escape(b.title), escape(b.author), b.category.value, f"{b.fine_rate:.2f}", status)
        _console.print(table)
        stats = library.get_statistics()
        _console.print(
            f"[dim]Total Books: {stats['total_books']} "
            f"(issued {stats['issued_books']}, available {stats['available_books']})[/]"
        )
    else:
        print()
        for line in library.list_all():
            print(line)

def print_book_result(book: Optional[Book]) -> None:
    """Tek bir kitabı yazdır; bulunamadıysa 'Not found.'"""
    mode = get_output_mode()

    if book is None:
        if mode == "json":
            print(json.dumps(None))
        else:
            print("Not found.")
        return

    if mode == "json":
        print(json.dumps(book.to_dict(), ensure_ascii=False))
    elif mode == "rich":
        content = (
            f"[bold]ID:[/] {book.id}\n"
            f"[bold]Title:[/] {escape(book.title)}\n"
            f"[bold]Author:[/] {escape(book.author)}\n"
            f"[bold]Category:[/] {book.category.value} (fine rate {book.fine_rate:.2f})\n"
            f"[bold]Status:[/] {book.status}"
        )
        _console.print(Panel.fit(content, title="🔍 Book Found", border_style="green"))
    else:
        print(book.display())

def print_fine_result(fine: Fine) -> None:
    mode = get_output_mode()

    if mode == "json":
        print(json.dumps(fine.to_dict()))
    elif mode == "rich":
        _console.print(Panel.fit(f"[bold]{fine}[/]", title="💰 Total Fine Amount", border_style="blue"))
    else:
        print(fine.display())
