import os
import json
from typing import List, Any, Dict
from rich.console import Console
from rich.table import Table
from rich.panel import Panel
from rich.markup import escape

from config import settings

# Environment variable to control CLI output mode
# Allowed values: 'plain' (default), 'json', 'rich'
OUTPUT_MODE_ENV = "LIB_CLI_OUTPUT"

_console = Console()

def set_output_mode(mode: str) -> None:
    mode = (mode or "").lower().strip()
    if mode in {"plain", "json", "rich"}:
        os.environ[OUTPUT_MODE_ENV] = mode
    else:
        # Ignore invalid values; keep the current default
        pass

def get_output_mode() -> str:
    return os.environ.get(OUTPUT_MODE_ENV, settings.output_mode).lower()

def _row_line(row: Dict[str, Any]) -> str:
    return f"ID: {row['id']}, Title: {row['title']}, Author: {row['author']}, Issued: {row['issued']}"

def print_books_result(rows: List[Dict[str, Any]]) -> None:
    """Print stored book rows according to the current output mode.
    - plain: a 'Books in DB:' header followed by one 'ID: .., Title: ..' line per row
    - json: JSON array of {id, title, author, issued}
    - rich: Rich table
    """
    mode = get_output_mode()

    if mode == "json":
        print(json.dumps(rows, ensure_ascii=False))
    elif mode == "rich":
        table = Table(title="📚 Books in DB", show_lines=True, header_style="bold cyan")
        table.add_column("ID", style="magenta", no_wrap=True)
        table.add_column("Title", style="white")
        table.add_column("Author", style="white")
        table.add_column("Issued", style="white")
        for row in rows:
            table.add_row(str(row["id"]), escape(str(row["title"])), escape(str(row["author"])), "yes" if row["issued"] else "no")
        _console.print(table)
    else:
        print("\nBooks in DB:")
        if not rows:
            print("No books in DB.")
        for row in rows:
            print(_row_line(row))

def print_book_row(row: Dict[str, Any]) -> None:
    """Print a single stored row (used by `find`)."""
    mode = get_output_mode()

    if mode == "json":
        print(json.dumps(row, ensure_ascii=False))
    elif mode == "rich":
        content = (
            f"[bold]Title:[/] {escape(str(row['title']))}\n[bold]Author:[/] {escape(str(row['author']))}\n"
            f"[bold]Issued:[/] {'yes' if row['issued'] else 'no'}"
        )
        _console.print(Panel.fit(content, title=f"📖 Book {row['id']}", border_style="blue"))
    else:
        print("Book Found")
        print(_row_line(row))

def print_record(item: Any) -> None:
    """Print a Book or Member in the current output mode."""
    mode = get_output_mode()

    if mode == "json":
        print(json.dumps(item.to_dict(), ensure_ascii=False))
    elif mode == "rich":
        _console.print(item.info_line(), markup=False)
    else:
        print(item.info_line())
