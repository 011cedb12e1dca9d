"""Database management CLI commands."""

import typer
from rich.console import Console
from sqlalchemy.exc import SQLAlchemyError

from user_lookup.core.services import DbSessionService
from user_lookup.runtime.init_db import init_db

console = Console()

db_app = typer.Typer(help="Manage the user database")


@db_app.command("init")
def init() -> None:
    """Create all database tables."""
    database_service = DbSessionService()
    try:
        init_db(database_service)
    except SQLAlchemyError as e:
        console.print(f"[red]❌ Failed to initialize database: {e}[/red]")
        raise typer.Exit(code=1) from e
    finally:
        database_service.dispose()

    console.print(f"[green]✅ Database initialized at {database_service.engine.url}[/green]")
