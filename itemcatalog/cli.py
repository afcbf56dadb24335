"""Item catalog CLI.

Commands:
- init: Create the items table (sql store)
- seed: Load the default catalog into an empty sql store
- list: Show items in the sql store
- serve: Run the HTTP API
"""

from __future__ import annotations

import asyncio

import typer
from rich.console import Console
from rich.table import Table

from itemcatalog.config import get_config
from itemcatalog.db.connection import close_db, get_session_factory, init_db
from itemcatalog.models import DEFAULT_ITEMS
from itemcatalog.service import CatalogService
from itemcatalog.store.sql import SqlItemStore

app = typer.Typer(
    name="itemcatalog",
    help="Item catalog - search, add and delete items with undo",
    no_args_is_help=True,
)

console = Console()


def _require_database() -> str:
    config = get_config()
    if config.db is None:
        console.print("[red]✗[/red] DATABASE_URL is not set")
        raise typer.Exit(code=1)
    return config.db.url


@app.command()
def init(
    drop: bool = typer.Option(False, "--drop", help="Drop existing tables"),
):
    """Initialize database schema."""
    url = _require_database()
    console.print(f"[bold]Initializing database:[/bold] {url}")

    async def _init():
        try:
            if drop:
                console.print("[yellow]Dropping existing tables...[/yellow]")
            await init_db(drop=drop)
        finally:
            await close_db()

    asyncio.run(_init())
    console.print("[bold green]✓[/bold green] Database initialized")


@app.command()
def seed():
    """Load the default catalog into an empty database."""
    _require_database()

    async def _seed() -> int:
        try:
            await init_db()
            service = CatalogService(SqlItemStore(get_session_factory()))
            return await service.seed(DEFAULT_ITEMS)
        finally:
            await close_db()

    count = asyncio.run(_seed())
    if count:
        console.print(f"[bold green]✓[/bold green] {count} items seeded")
    else:
        console.print("[yellow]⚠[/yellow] Store already has items, nothing seeded")


@app.command(name="list")
def list_cmd(
    query: str | None = typer.Option(None, "--query", "-q", help="Filter by name"),
):
    """Show items in the database."""
    _require_database()

    async def _list():
        try:
            store = SqlItemStore(get_session_factory())
            if query:
                return await store.search(query)
            return await store.list_all()
        finally:
            await close_db()

    rows = asyncio.run(_list())

    table = Table(title="Items")
    table.add_column("ID", justify="right")
    table.add_column("Name")
    table.add_column("Price", justify="right")
    for item in rows:
        table.add_row(str(item.id), item.name, f"{item.price:,}")
    console.print(table)


@app.command()
def serve(
    host: str = typer.Option("0.0.0.0", help="Host to bind"),
    port: int = typer.Option(8080, help="Port to bind"),
    reload: bool = typer.Option(False, help="Enable autoreload (dev only)"),
):
    """Run the HTTP API.

    History lives in process memory, so the server always runs one worker.
    """
    import uvicorn

    typer.echo(f"Starting item catalog on http://{host}:{port}")
    uvicorn.run("itemcatalog.web.app:app", host=host, port=port, reload=reload, workers=1)


if __name__ == "__main__":
    app()
