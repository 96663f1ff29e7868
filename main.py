import logging
from typing import Optional

import typer

import database
from book import Book
from config import settings
from demo import run_demo
from ui_helpers import set_output_mode, print_book_row

logging.basicConfig(level=logging.DEBUG if settings.debug else getattr(logging, settings.log_level.upper(), logging.INFO))
logger = logging.getLogger(__name__)

APP_NAME = "Library Catalog CLI"

# --- Typer CLI App ---
app = typer.Typer(help=APP_NAME)

@app.callback(invoke_without_command=True)
def _global_options(
    ctx: typer.Context,
    output: Optional[str] = typer.Option(
        None,
        "--output",
        "-o",
        help="Output format: plain | json | rich (default: plain)",
    ),
    db_file: Optional[str] = typer.Option(
        None,
        "--db-file",
        help="SQLite database file (default: LIBRARY_DB_FILE or library.db)",
    ),
):
    """Global CLI options. Without a sub-command the demo script runs."""
    if output:
        set_output_mode(output)
    if db_file:
        settings.database_file = db_file
    logger.debug(f"Using database file {settings.database_file}")
    if ctx.invoked_subcommand is None:
        run_demo()

@app.command("demo")
def cli_demo():
    """Run the scripted catalog and database walk-through."""
    run_demo()

@app.command("init-db")
def cli_init_db():
    """Create the books table if it doesn't exist."""
    database.create_tables()

@app.command("list")
def cli_list():
    """List every book stored in the database."""
    database.create_tables(verbose=False)
    database.fetch_books()

@app.command("add")
def cli_add(book_id: int, title: str, author: str):
    """Store a new book row."""
    database.create_tables(verbose=False)
    database.save_book(Book(book_id, title, author))

@app.command("issue")
def cli_issue(book_id: int):
    """Mark a stored book as issued."""
    database.update_book_status(book_id, True)

@app.command("return")
def cli_return(book_id: int):
    """Mark a stored book as returned."""
    database.update_book_status(book_id, False)

@app.command("remove")
def cli_remove(book_id: int):
    """Delete a stored book by id."""
    database.delete_book(book_id)

@app.command("find")
def cli_find(book_id: int):
    """Show a single stored book."""
    database.create_tables(verbose=False)
    row = database.fetch_book(book_id)
    if row:
        print_book_row(row)
    else:
        print(f"Book with ID {book_id} not found in DB.")


if __name__ == "__main__":
    app()
